"""Wraparound grid arithmetic."""

from typing import Iterator, Tuple

Cell = Tuple[int, int]
Direction = Tuple[int, int]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


def wrap(coord: int, delta: int, bound: int) -> int:
    """Move ``coord`` by ``delta`` on an axis of length ``bound``, wrapping at the edges."""
    return (coord + delta + bound) % bound


def move(cell: Cell, direction: Direction, width: int, height: int) -> Cell:
    """Return the neighbour of ``cell`` in ``direction`` on a wraparound board."""
    return (
        wrap(cell[0], direction[0], width),
        wrap(cell[1], direction[1], height),
    )


def is_reverse(direction: Direction, other: Direction) -> bool:
    return direction[0] == -other[0] and direction[1] == -other[1]


def all_cells(width: int, height: int) -> Iterator[Cell]:
    for y in range(height):
        for x in range(width):
            yield (x, y)
