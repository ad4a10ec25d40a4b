from dataclasses import replace

import pygame
import pytest

from gridsnake.config import DEFAULT_PLAYER_NAME
from gridsnake.grid import DOWN, LEFT, RIGHT, UP
from gridsnake.session import Phase, Session, TickTimer, clean_name
from gridsnake.state import GameState


@pytest.fixture
def session(fake_timer, fake_sound, rng):
    return Session(40, 30, timer=fake_timer, sound=fake_sound, rng=rng)


def test_clean_name():
    assert clean_name("  Ada  ") == "Ada"
    assert clean_name("   ") == DEFAULT_PLAYER_NAME
    assert clean_name(None) == DEFAULT_PLAYER_NAME


def test_session_starts_idle(session):
    assert session.phase is Phase.IDLE
    assert not session.running
    assert session.tick() is None


def test_start(session, fake_timer):
    assert session.start("  Grace ") == "Grace"
    assert session.phase is Phase.RUNNING
    assert session.score == 3
    assert session.state.snake == ((20, 15), (19, 15), (18, 15))
    assert session.scoreline == "Grace: 3"
    assert fake_timer.active


def test_keys_only_queue(session):
    session.start("")
    assert session.handle_key(pygame.K_UP)
    assert session.state.pending == UP
    assert session.state.head == (20, 15)
    assert not session.handle_key(pygame.K_LEFT)
    assert not session.handle_key(pygame.K_F1)


def test_keys_ignored_when_not_running(session):
    assert not session.handle_key(pygame.K_UP)
    assert session.state is None


def test_tick_moves_and_eats(session, fake_sound):
    session.start("Ada")
    session.state = GameState(snake=session.state.snake, direction=RIGHT,
                              food=(21, 15), score=3)
    result = session.tick()
    assert result.ate_food
    assert session.score == 4
    assert fake_sound.plays == 1

    session.state = replace(session.state, food=(0, 0))
    result = session.tick()
    assert not result.ate_food
    assert len(session.state) == 4
    assert fake_sound.plays == 1


def test_collision_ends_session(session, fake_timer):
    session.start("Ada")
    snake = ((5, 5), (5, 6), (4, 6), (4, 5), (3, 5))
    session.state = GameState(snake=snake, direction=UP, pending=LEFT,
                              food=(30, 20), score=7)
    result = session.tick()

    assert result.collided
    assert session.phase is Phase.ENDED
    assert not session.running
    assert not fake_timer.active
    assert session.state.snake == snake
    assert session.final_score == 7
    assert session.message == "Game over, Ada! Your score: 7"
    assert session.tick() is None


def test_restart_builds_fresh_state(session, fake_timer):
    session.start("Ada")
    session.tick()
    session.end()
    session.end()
    assert fake_timer.stops == 1

    session.start("")
    assert session.player_name == DEFAULT_PLAYER_NAME
    assert session.running
    assert session.score == 3
    assert session.state.direction == RIGHT
    assert session.state.pending is None
    assert session.message is None


def test_tick_timer_stop_is_idempotent(pygame_init):
    timer = TickTimer(100)
    timer.stop()
    timer.start()
    assert timer.active
    timer.stop()
    timer.stop()
    assert not timer.active


def test_tick_timer_rejects_bad_interval():
    with pytest.raises(ValueError):
        TickTimer(0)


def test_pending_turn_survives_until_tick(session):
    session.start("Ada")
    session.handle_key("s")
    result = session.tick()
    assert result.state.direction == DOWN
    assert session.state.head == (20, 16)
