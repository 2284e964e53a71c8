"""
Play session wiring input gestures, the game manager and the render loop.
"""

import logging

from tileboard.controls import click_to_direction, key_to_direction, swipe_to_direction
from tileboard.render.actuator import UNKNOWN_MOVE_MESSAGE, Actuator

from .config import GameConfig
from .manager import GameManager

logger = logging.getLogger(__name__)


class TileBoard:
    """
    Interactive session around a ``GameManager``.

    Moves only raise a dirty flag; ``tick`` is meant to be called once per display refresh and
    re-renders the board at most once, however many inputs arrived in between.

    Parameters
    ----------
    actuator : Actuator
        Render sink of the session.
    size : int, optional
        Number of cells along each side of the grid (default is 4).
    config : GameConfig, optional
        Game rules.
    """

    def __init__(self, actuator: Actuator, size: int = 4, config: GameConfig | None = None):
        self.actuator = actuator
        self.manager = GameManager(size, actuator, config=config)
        self.moved = False

    def move(self, direction: int) -> bool:
        """
        Move the tiles; the board is rendered on the next ``tick``.

        A call that ends the game without moving anything (no move left) still needs a render.
        """
        terminated = self.manager.terminated
        moved = self.manager.move(direction)
        self.moved = self.moved or moved or self.manager.terminated != terminated
        return moved

    def tick(self) -> bool:
        """
        Render the board if something changed since the last tick.

        Returns
        -------
        bool
            True if the board was rendered.
        """
        if not self.moved:
            return False
        self.moved = False
        self.manager.actuate()
        return True

    def restart(self) -> None:
        self.moved = False
        self.manager.restart()

    def handle_key(self, key: str | None, modifiers: bool = False) -> bool:
        direction = key_to_direction(key, modifiers=modifiers)
        if direction is None:
            return False
        return self.move(direction)

    def handle_click(self, x: float, y: float, width: float, height: float) -> bool:
        direction = click_to_direction(x, y, width, height)
        if direction is None:
            return False
        return self.move(direction)

    def handle_swipe(self, start: tuple[float, float], end: tuple[float, float]) -> bool:
        direction = swipe_to_direction(start, end)
        if direction is None:
            logger.debug("Didn't get the move from swipe %s -> %s.", start, end)
            self.actuator.show_text(UNKNOWN_MOVE_MESSAGE)
            return False
        return self.move(direction)
