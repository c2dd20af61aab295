from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Board -----
BOARD_SIZE = 10
NO_POSITION: Tuple[int, int] = (-1, -1)   # "no poison food on the board"

# ----- Scores -----
MAX_TOP_SCORES = 10
SCORE_PER_SEGMENT = 10
SCORES_FILE = "scores.txt"

# ----- Tempo (milliseconds) -----
BASE_DELAY_MS = 500
MIN_DELAY_MS = 100
DELAY_REDUCTION_MS = 50
SEGMENTS_PER_SPEEDUP = 10
PAUSE_DELAY_MS = 200

# 1 in POISON_CHANCE meals leaves poison food behind
POISON_CHANCE = 3

# ----- Keys -----
PAUSE_KEY = "x"
QUIT_KEY = "q"

# ----- Runtime options (board size and speed are fixed above) -----
@dataclass
class Config:
    seed: Optional[int] = None
    scores_path: str = SCORES_FILE
    ascii: bool = False
    log_level: str = "WARNING"
