# -*- coding: utf-8 -*-
"""
Play the tile merge puzzle in a window (or in the terminal with --console).
"""
from typing import Any

from tileboard.game import GameConfig, TileBoard
from tileboard.render import ConsoleActuator


def key_handler(board: TileBoard, window: Any, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    board: TileBoard
        The play session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        board.restart()
        return None

    board.handle_key(event.key)
    board.tick()
    return None


def click_handler(board: TileBoard, window: Any, event: Any):
    """
    Handle a click on the window: the edges of the window move the tiles.

    Parameters
    ----------
    board: TileBoard
        The play session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    width, height = window.fig.canvas.get_width_height()

    # ##: Matplotlib counts pixels from the bottom of the window.
    board.handle_click(event.x, height - event.y, width, height)
    board.tick()


def play_console(config: GameConfig):
    board = TileBoard(ConsoleActuator(), size=config.size, config=config)
    print("Moves: w/a/s/d, r to restart, q to quit.")
    while True:
        key = input("> ").strip().lower()
        if key == "q":
            return
        if key == "r":
            board.restart()
            continue
        if not board.handle_key(key):
            print("Nothing moved.")
        board.tick()


def play_window(config: GameConfig):
    from tileboard.render.windows import WindowActuator, WindowBoard

    window = WindowBoard(title="2048 Game", size=config.size)
    board = TileBoard(WindowActuator(window), size=config.size, config=config)
    window.register_key_handler(lambda event: key_handler(board, window, event))
    window.register_click_handler(lambda event: click_handler(board, window, event))

    # Blocking event loop
    window.show(block=True)


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--target", type=int, default=2048)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--console", action="store_true")
    args = parser.parse_args()

    game_config = GameConfig(size=args.size, winning_value=args.target, seed=args.seed)
    if args.console:
        play_console(game_config)
    else:
        play_window(game_config)
