import pygame
import pytest

from gridsnake.controls import direction_for_key, queue_direction
from gridsnake.grid import DIRECTIONS, DOWN, LEFT, RIGHT, UP
from gridsnake.state import GameState


def make_state(direction=RIGHT, pending=None):
    return GameState(snake=((20, 15), (19, 15), (18, 15)), direction=direction,
                     food=(0, 0), score=3, pending=pending)


@pytest.mark.parametrize("key,expected", [
    (pygame.K_UP, UP), (pygame.K_w, UP),
    (pygame.K_DOWN, DOWN), (pygame.K_s, DOWN),
    (pygame.K_LEFT, LEFT), (pygame.K_a, LEFT),
    (pygame.K_RIGHT, RIGHT), (pygame.K_d, RIGHT),
])
def test_key_codes(key, expected):
    assert direction_for_key(key) == expected


@pytest.mark.parametrize("name,expected", [
    ("ArrowUp", UP), ("W", UP), ("w", UP), ("up", UP),
    ("ArrowLeft", LEFT), ("A", LEFT), ("s", DOWN), ("D", RIGHT),
])
def test_key_names_case_insensitive(name, expected):
    assert direction_for_key(name) == expected


def test_unknown_keys_ignored():
    state = make_state()
    assert direction_for_key(pygame.K_q) is None
    assert direction_for_key("Enter") is None
    assert queue_direction(state, pygame.K_SPACE) is state


@pytest.mark.parametrize("current", DIRECTIONS)
def test_reversal_never_queued(current):
    reverse = (-current[0], -current[1])
    key = {UP: "up", DOWN: "down", LEFT: "left", RIGHT: "right"}[reverse]
    state = make_state(direction=current, pending=None)
    assert queue_direction(state, key).pending is None


def test_reversal_checked_against_active_direction():
    # Pending UP does not make DOWN a reversal; active is RIGHT
    state = make_state(direction=RIGHT, pending=UP)
    assert queue_direction(state, pygame.K_DOWN).pending == DOWN
    # LEFT reverses the active direction even though UP is pending
    assert queue_direction(state, pygame.K_LEFT).pending == UP


def test_latest_key_wins():
    state = make_state()
    state = queue_direction(state, pygame.K_UP)
    state = queue_direction(state, pygame.K_DOWN)
    assert state.pending == DOWN
    assert state.direction == RIGHT
    assert state.snake == ((20, 15), (19, 15), (18, 15))
