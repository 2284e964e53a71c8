"""
Render sinks fed by the game manager.

The Matplotlib window lives in `tileboard.render.windows` and is imported on demand.
"""

from .actuator import (
    LOSE_MESSAGE,
    UNKNOWN_MOVE_MESSAGE,
    WIN_MESSAGE,
    Actuator,
    Frame,
    GameMetadata,
    NullActuator,
    RecordingActuator,
    message_for,
)
from .console import ConsoleActuator, format_board

__all__ = [
    'Actuator',
    'ConsoleActuator',
    'Frame',
    'GameMetadata',
    'NullActuator',
    'RecordingActuator',
    'LOSE_MESSAGE',
    'UNKNOWN_MOVE_MESSAGE',
    'WIN_MESSAGE',
    'format_board',
    'message_for',
]
