"""Keyboard to direction mapping."""

from dataclasses import replace
from typing import Dict, Optional, Union

import pygame

from .grid import DOWN, LEFT, RIGHT, UP, Direction, is_reverse
from .state import GameState

# Letter key codes are the same with or without Shift / Caps Lock
KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

# Key names as reported by pygame.key.name() and by browsers
KEY_NAME_DIRECTIONS: Dict[str, Direction] = {
    'up': UP,
    'arrowup': UP,
    'w': UP,
    'down': DOWN,
    'arrowdown': DOWN,
    's': DOWN,
    'left': LEFT,
    'arrowleft': LEFT,
    'a': LEFT,
    'right': RIGHT,
    'arrowright': RIGHT,
    'd': RIGHT,
}

Key = Union[int, str]


def direction_for_key(key: Key) -> Optional[Direction]:
    """Map a pygame key code or key name to a direction, or None if unbound."""
    if isinstance(key, str):
        return KEY_NAME_DIRECTIONS.get(key.lower())
    return KEY_DIRECTIONS.get(key)


def queue_direction(state: GameState, key: Key) -> GameState:
    """Queue a turn for the next tick.

    Only the pending slot changes. Unknown keys and exact reversals of the
    active direction leave the state as it is; a later key overwrites an
    earlier one that has not been applied yet.
    """
    direction = direction_for_key(key)
    if direction is None:
        return state
    if is_reverse(direction, state.direction):
        return state
    return replace(state, pending=direction)
