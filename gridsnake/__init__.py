"""Single-player snake on a wraparound grid."""

from .grid import DOWN, LEFT, RIGHT, UP, move, wrap
from .state import GameState, StepResult, new_game, place_food, step

__version__ = "0.1.0"

__all__ = [
    "DOWN", "LEFT", "RIGHT", "UP",
    "GameState", "StepResult",
    "move", "new_game", "place_food", "step", "wrap",
]
