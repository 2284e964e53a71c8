"""
Keyboard mapping to direction codes.
"""

from tileboard.core import Direction

# ##: Key names as reported by matplotlib key events.
KEY_DIRECTIONS: dict[str, int] = {
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'w': Direction.UP,
    'd': Direction.RIGHT,
    's': Direction.DOWN,
    'a': Direction.LEFT,
}

MODIFIERS = ('alt', 'ctrl', 'cmd', 'super', 'shift')


def split_modifiers(key: str) -> tuple[str, bool]:
    """
    Split a combined key name such as ``'ctrl+up'``.

    Returns
    -------
    tuple[str, bool]
        The base key and whether a modifier was part of the name.
    """
    if key == '+':
        return key, False
    *prefixes, base = key.split('+')
    return base, any(prefix in MODIFIERS for prefix in prefixes)


def key_to_direction(key: str | None, modifiers: bool = False) -> int | None:
    """
    Translate a key into a direction code.

    Parameters
    ----------
    key : str | None
        Key name (``'up'``, ``'w'``, ``'ctrl+left'``...). Matched exactly: matplotlib reports
        shift+w as ``'W'``, which does not move tiles.
    modifiers : bool, optional
        Whether a modifier key is held; such presses are ignored.

    Returns
    -------
    int | None
        Direction code, or None if the key does not move tiles.
    """
    if not key:
        return None

    base, modified = split_modifiers(key)
    if modifiers or modified:
        return None
    return KEY_DIRECTIONS.get(base)
