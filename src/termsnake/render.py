# render.py
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

import numpy as np  # type: ignore

from .config import BOARD_SIZE, NO_POSITION, PAUSE_KEY
from .game import GameState

# ----- Glyphs -----
@dataclass(frozen=True)
class Glyphs:
    food: str
    snake: str
    poison: str
    empty: str

EMOJI_GLYPHS = Glyphs(food="🍎", snake="🐍", poison="💀", empty="⬜")
ASCII_GLYPHS = Glyphs(food="*", snake="o", poison="x", empty=".")

CLEAR = "\x1b[2J\x1b[H"
HOME = "\x1b[H"


def render_board(state: GameState, glyphs: Glyphs = EMOJI_GLYPHS) -> str:
    """
    Board plus status lines. Caller holds state.lock.

    Cells are painted lowest priority first so later layers win:
    empty < poison < snake < food.
    """
    board = np.full((BOARD_SIZE, BOARD_SIZE), glyphs.empty, dtype=object)
    if state.poison != NO_POSITION:
        board[state.poison] = glyphs.poison
    for pos in state.snake:
        board[pos] = glyphs.snake
    if state.food != NO_POSITION:
        board[state.food] = glyphs.food

    rows = ["".join(row) for row in board]
    if state.paused:
        rows.append(f"Game paused. Press {PAUSE_KEY} to continue")
    else:
        rows.append(f"length of snake: {len(state.snake)}")
    rows.append(f"Score: {state.score} points")
    return "\n".join(rows) + "\n"


class Screen:
    """ANSI terminal sink."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def clear(self) -> None:
        self.stream.write(CLEAR)
        self.stream.flush()

    def home(self) -> None:
        self.stream.write(HOME)

    def show(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()
