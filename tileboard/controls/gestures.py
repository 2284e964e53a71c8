"""
Gesture classification for pointer clicks and trackpad swipes.

Both gestures are reduced to a zone of a 3x3 layout (vertical zone, horizontal zone); only the
four edge-centre zones map to a direction, the corners and the centre are ignored.
"""

from tileboard.core import Direction

# ##: Default threshold for a trackpad swipe, in axis units.
MIN_STEP = 0.3

POSITION_TO_MOVE: dict[str, dict[str, int]] = {
    'top': {'middle': Direction.UP},
    'middle': {'right': Direction.RIGHT, 'left': Direction.LEFT},
    'bottom': {'middle': Direction.DOWN},
}


def zone_to_direction(vertical: str, horizontal: str) -> int | None:
    """Direction code of a zone, None for corners and centre."""
    return POSITION_TO_MOVE.get(vertical, {}).get(horizontal)


def classify_zone(x: float, y: float, width: float, height: float) -> tuple[str, str]:
    """
    Locate a point on a surface split in thirds.

    Parameters
    ----------
    x, y : float
        Point coordinates, ``y`` growing downward.
    width, height : float
        Size of the surface.

    Returns
    -------
    tuple[str, str]
        Vertical zone (top, middle, bottom) and horizontal zone (left, middle, right).
    """
    if width <= 0 or height <= 0:
        raise ValueError(f'surface must have a positive size, got {width}x{height}')

    if x < width / 3:
        horizontal = 'left'
    elif x > width - width / 3:
        horizontal = 'right'
    else:
        horizontal = 'middle'

    if y < height / 3:
        vertical = 'top'
    elif y > height - height / 3:
        vertical = 'bottom'
    else:
        vertical = 'middle'

    return vertical, horizontal


def click_to_direction(x: float, y: float, width: float, height: float) -> int | None:
    """Direction code for a click at ``(x, y)`` on a ``width`` x ``height`` surface."""
    return zone_to_direction(*classify_zone(x, y, width, height))


def classify_swipe(dx: float, dy: float, min_step: float = MIN_STEP) -> tuple[str, str]:
    """
    Classify a swipe from its axis deltas.

    A delta smaller than ``min_step`` (in absolute value) counts as no movement on that axis.

    Returns
    -------
    tuple[str, str]
        Vertical zone (top, middle, bottom) and horizontal zone (left, middle, right).
    """
    if dx < -min_step:
        horizontal = 'left'
    elif dx > min_step:
        horizontal = 'right'
    else:
        horizontal = 'middle'

    if dy < -min_step:
        vertical = 'top'
    elif dy > min_step:
        vertical = 'bottom'
    else:
        vertical = 'middle'

    return vertical, horizontal


def swipe_to_direction(
    start: tuple[float, float], end: tuple[float, float], min_step: float = MIN_STEP
) -> int | None:
    """
    Direction code of a swipe between two axis readings.

    Parameters
    ----------
    start : tuple[float, float]
        Axis reading when the touch started.
    end : tuple[float, float]
        Axis reading when the touch ended.
    min_step : float, optional
        Minimal delta on an axis to count as a move.

    Returns
    -------
    int | None
        Direction code, or None if the swipe is diagonal or too short.
    """
    return zone_to_direction(*classify_swipe(end[0] - start[0], end[1] - start[1], min_step))
