"""
Session lifecycle: start, tick, game over.

The Session owns the current GameState. Key presses only queue a turn;
``tick`` is the one place the state advances.
"""

import enum
import logging
import random
from typing import Optional

import pygame

from .config import DEFAULT_PLAYER_NAME, GRID_HEIGHT, GRID_WIDTH, MAX_NAME_LENGTH, TICK_INTERVAL_MS
from .controls import Key, queue_direction
from .state import GameState, StepResult, new_game, step

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class TickTimer:
    """Posts TICK_EVENT every ``interval_ms`` while started"""

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, event_type: int = TICK_EVENT):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.event_type = event_type
        self.active = False

    def start(self):
        pygame.time.set_timer(self.event_type, self.interval_ms)
        self.active = True

    def stop(self):
        """Safe to call when already stopped"""
        if not self.active:
            return
        pygame.time.set_timer(self.event_type, 0)
        self.active = False


def clean_name(raw: Optional[str]) -> str:
    name = (raw or "").strip()[:MAX_NAME_LENGTH]
    return name or DEFAULT_PLAYER_NAME


class Session:
    """One player's games, from start screen to game over and back"""

    def __init__(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT,
                 timer: Optional[TickTimer] = None, sound=None,
                 rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.timer = timer or TickTimer()
        self.sound = sound
        self.rng = rng or random.Random()

        self.phase = Phase.IDLE
        self.player_name = DEFAULT_PLAYER_NAME
        self.state: Optional[GameState] = None
        self.final_score: Optional[int] = None
        self.message: Optional[str] = None

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def score(self) -> int:
        return self.state.score if self.state is not None else 0

    @property
    def scoreline(self) -> str:
        return f"{self.player_name}: {self.score}"

    def start(self, name: Optional[str] = None) -> str:
        """Begin a fresh game and start the tick timer"""
        self.timer.stop()
        self.player_name = clean_name(name)
        self.state = new_game(self.width, self.height, self.rng)
        self.final_score = None
        self.message = None
        self.phase = Phase.RUNNING
        self.timer.start()
        logger.info("Game started for %s", self.player_name)
        return self.player_name

    def handle_key(self, key: Key) -> bool:
        """Queue a turn; returns True if the key was accepted"""
        if not self.running:
            return False
        before = self.state
        self.state = queue_direction(self.state, key)
        return self.state is not before

    def tick(self) -> Optional[StepResult]:
        if not self.running:
            return None

        result = step(self.state, self.rng)
        self.state = result.state

        if result.collided:
            self.end()
        elif result.ate_food:
            logger.debug("Food eaten at %s, score %d", self.state.head, self.state.score)
            if self.sound is not None:
                self.sound.play()
        return result

    def end(self):
        """Stop the game and prepare the game-over message"""
        self.phase = Phase.ENDED
        self.timer.stop()
        self.final_score = self.score
        self.message = f"Game over, {self.player_name}! Your score: {self.final_score}"
        logger.info("Game over for %s with score %d", self.player_name, self.final_score)
