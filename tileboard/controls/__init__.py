"""
Input adapters translating discrete gestures into direction codes.
"""

from .gestures import (
    MIN_STEP,
    POSITION_TO_MOVE,
    classify_swipe,
    classify_zone,
    click_to_direction,
    swipe_to_direction,
    zone_to_direction,
)
from .keyboard import KEY_DIRECTIONS, key_to_direction

__all__ = [
    'KEY_DIRECTIONS',
    'key_to_direction',
    'MIN_STEP',
    'POSITION_TO_MOVE',
    'classify_swipe',
    'classify_zone',
    'click_to_direction',
    'swipe_to_direction',
    'zone_to_direction',
]
