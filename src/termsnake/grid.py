# grid.py
"""Toroidal grid arithmetic."""
from enum import Enum
from typing import Tuple

from .config import BOARD_SIZE

Position = Tuple[int, int]   # (row, col)


class Direction(Enum):
    # (drow, dcol)
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> "Direction":
        dr, dc = self.value
        return Direction((-dr, -dc))


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.value[0] == -b.value[0] and a.value[1] == -b.value[1]


def next_position(pos: Position, direction: Direction) -> Position:
    """
    Step one cell from pos in direction, wrapping around the board edges.
    Row and column wrap independently.
    """
    row, col = pos
    dr, dc = direction.value
    return ((row + dr) % BOARD_SIZE, (col + dc) % BOARD_SIZE)
