"""
Game state and the per-tick simulation.

The whole game is one immutable GameState value. ``new_game`` builds it,
``step`` advances it by one tick and returns a new value, and nothing else
replaces the snake, the food or the score.
"""

import random
from dataclasses import dataclass, replace
from typing import Collection, Optional, Tuple

from .config import GRID_HEIGHT, GRID_WIDTH, START_LENGTH
from .grid import RIGHT, Cell, Direction, all_cells, move, wrap


@dataclass(frozen=True)
class GameState:
    """Snapshot of one game"""
    snake: Tuple[Cell, ...]
    direction: Direction
    food: Optional[Cell]
    score: int
    pending: Optional[Direction] = None
    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def __len__(self) -> int:
        return len(self.snake)


@dataclass(frozen=True)
class StepResult:
    """Outcome of a single tick"""
    state: GameState
    ate_food: bool = False
    collided: bool = False


def place_food(occupied: Collection[Cell], width: int, height: int,
               rng: random.Random, max_attempts: Optional[int] = None) -> Optional[Cell]:
    """Pick a random free cell, or None if the board is full.

    Cells are sampled uniformly until one is not in ``occupied``. After
    ``max_attempts`` misses the remaining free cells are listed and one of
    them is chosen instead, so a nearly full board still terminates.
    """
    occupied = set(occupied)
    if max_attempts is None:
        max_attempts = max(64, 4 * width * height)

    for _ in range(max_attempts):
        pos = (rng.randrange(width), rng.randrange(height))
        if pos not in occupied:
            return pos

    free = [cell for cell in all_cells(width, height) if cell not in occupied]
    if not free:
        return None
    return rng.choice(free)


def new_game(width: int = GRID_WIDTH, height: int = GRID_HEIGHT,
             rng: Optional[random.Random] = None) -> GameState:
    """Three segments centred on the board, heading right, with food placed."""
    if width < START_LENGTH or height < START_LENGTH:
        raise ValueError(f"Board {width}x{height} is too small for a snake of length {START_LENGTH}")
    rng = rng or random.Random()

    cx = width // 2
    cy = height // 2
    snake = tuple((wrap(cx, -i, width), cy) for i in range(START_LENGTH))
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=None,
        food=place_food(snake, width, height, rng),
        score=len(snake),
        width=width,
        height=height,
    )


def step(state: GameState, rng: random.Random) -> StepResult:
    """Advance the game by one tick."""
    # Latch the queued turn
    direction = state.direction
    if state.pending is not None:
        direction = state.pending
        state = replace(state, direction=direction, pending=None)

    new_head = move(state.head, direction, state.width, state.height)

    # The tail still counts as occupied even though it would move away
    if new_head in state.snake:
        return StepResult(state=state, collided=True)

    snake = (new_head,) + state.snake

    if state.food is not None and new_head == state.food:
        food = place_food(snake, state.width, state.height, rng)
        return StepResult(
            state=replace(state, snake=snake, food=food, score=state.score + 1),
            ate_food=True,
        )

    return StepResult(state=replace(state, snake=snake[:-1]))
