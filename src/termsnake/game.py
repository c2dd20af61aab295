# game.py
from __future__ import annotations

import logging
import random
import threading
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Optional

from .config import (
    BOARD_SIZE, NO_POSITION,
    BASE_DELAY_MS, MIN_DELAY_MS, DELAY_REDUCTION_MS, SEGMENTS_PER_SPEEDUP,
    POISON_CHANCE, SCORE_PER_SEGMENT,
)
from .grid import Direction, Position, is_opposite, next_position

logger = logging.getLogger(__name__)

HIT_YOURSELF = "You hit yourself!"
ATE_POISON = "You ate poisonous food!"


class Status(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


# ---------- Helpers ----------
def _free_cells(*occupied):
    taken = set()
    for cells in occupied:
        taken.update(cells)
    return [
        (r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if (r, c) not in taken
    ]

def spawn_food(snake, rng: random.Random) -> Position:
    """Random cell not on the snake, or NO_POSITION if the board is full."""
    cells = _free_cells(snake)
    if not cells:
        return NO_POSITION
    return rng.choice(cells)

def spawn_poison(snake, food: Position, rng: random.Random) -> Position:
    """Random cell that is neither on the snake nor the food."""
    cells = _free_cells(snake, (food,))
    if not cells:
        return NO_POSITION
    return rng.choice(cells)

def calculate_delay(length: int) -> int:
    """Tick delay in ms: 50ms faster every 10 segments, never below MIN_DELAY_MS."""
    reduction = (length // SEGMENTS_PER_SPEEDUP) * DELAY_REDUCTION_MS
    return max(MIN_DELAY_MS, BASE_DELAY_MS - reduction)


# ---------- State ----------
@dataclass
class GameState:
    snake: Deque[Position]        # tail at index 0, head at index -1
    direction: Direction          # current direction, updated by input
    heading: Direction            # direction used by the last tick
    food: Position
    poison: Position = NO_POSITION
    turn: Optional[Direction] = None   # latest accepted turn that is safe against heading
    score: int = 0
    paused: bool = False
    over_reason: Optional[str] = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
    quit_requested: threading.Event = field(default_factory=threading.Event, repr=False, compare=False)

    @property
    def head(self) -> Position:
        return self.snake[-1]

def new_game_state(rng: random.Random) -> GameState:
    snake = deque([(0, 0)])
    return GameState(
        snake=snake,
        direction=Direction.RIGHT,
        heading=Direction.RIGHT,
        food=spawn_food(snake, rng),
    )


# ---------- Intents (caller must not hold state.lock) ----------
def change_direction(state: GameState, direction: Direction) -> bool:
    """
    Make direction the current one unless it is the exact opposite of the
    current direction. Returns True if it was applied.
    """
    if not isinstance(direction, Direction):
        raise TypeError(f"expected Direction, got {direction!r}")
    with state.lock:
        if is_opposite(direction, state.direction):
            return False
        state.direction = direction
        if not is_opposite(direction, state.heading):
            state.turn = direction
        return True

def toggle_pause(state: GameState) -> bool:
    with state.lock:
        state.paused = not state.paused
        return state.paused

def pause_game(state: GameState) -> None:
    with state.lock:
        state.paused = True

def resume_game(state: GameState) -> None:
    with state.lock:
        state.paused = False

def request_quit(state: GameState) -> None:
    state.quit_requested.set()

def is_game_over(state: GameState) -> bool:
    return state.over_reason is not None

def status(state: GameState) -> Status:
    if state.over_reason is not None:
        return Status.OVER
    return Status.PAUSED if state.paused else Status.RUNNING


# ---------- Tick ----------
def step_game(state: GameState, rng: random.Random) -> Optional[str]:
    """
    Advance the game by one tick. Caller holds state.lock.

    Returns the game-over reason if this tick ended the game, else None.
    Paused and finished games are left untouched.
    """
    if state.over_reason is not None:
        return state.over_reason
    if state.paused:
        return None

    # Several intents may land between two ticks; never reverse into the neck
    if is_opposite(state.direction, state.heading):
        state.direction = state.turn or state.heading
    state.heading = state.direction
    state.turn = None

    new_head = next_position(state.head, state.heading)

    if new_head in state.snake:
        state.over_reason = HIT_YOURSELF
    elif new_head == state.food:
        # Grow first so the new food can't land under the new head
        state.snake.append(new_head)
        state.food = spawn_food(state.snake, rng)
        if rng.randrange(POISON_CHANCE) == 0:
            state.poison = spawn_poison(state.snake, state.food, rng)
        else:
            state.poison = NO_POSITION
        logger.debug("Ate food at %s, length %d", new_head, len(state.snake))
    elif new_head == state.poison:
        state.over_reason = ATE_POISON
    else:
        state.snake.append(new_head)
        state.snake.popleft()

    state.score = len(state.snake) * SCORE_PER_SEGMENT
    if state.over_reason is not None:
        logger.info("Game over: %s (score %d)", state.over_reason, state.score)
    return state.over_reason
