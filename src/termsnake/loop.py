# loop.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .config import PAUSE_DELAY_MS
from .game import GameState, calculate_delay, step_game
from .ledger import ScoreLedger
from .render import EMOJI_GLYPHS, Glyphs, Screen, render_board

logger = logging.getLogger(__name__)

OVER = "over"
QUIT = "quit"


@dataclass
class Outcome:
    kind: str                 # OVER or QUIT
    score: int
    reason: Optional[str] = None
    frame: str = ""           # board drawn on the final tick


@dataclass
class GameLoop:
    """
    Drives ticks against a GameState shared with the input thread.

    The state lock is held while the tick mutates the state and the frame
    is built; writing the frame and sleeping happen outside it.
    """
    state: GameState
    rng: random.Random
    screen: Screen
    glyphs: Glyphs = EMOJI_GLYPHS

    def _outcome(self, frame: str = "") -> Optional[Outcome]:
        if self.state.quit_requested.is_set():
            return Outcome(QUIT, self.state.score, frame=frame)
        if self.state.over_reason is not None:
            return Outcome(OVER, self.state.score, self.state.over_reason, frame)
        return None

    def tick(self) -> Optional[Outcome]:
        """Run one tick, render it and sleep. Returns an Outcome once the game ends."""
        if self.state.quit_requested.is_set():
            return self._outcome()

        with self.state.lock:
            paused = self.state.paused
            reason = step_game(self.state, self.rng)
            frame = render_board(self.state, self.glyphs)
            delay_ms = PAUSE_DELAY_MS if paused else calculate_delay(len(self.state.snake))

        if reason is not None:
            return self._outcome(frame)

        self.screen.home()
        self.screen.show(frame)
        # A quit wakes us up early
        self.state.quit_requested.wait(delay_ms / 1000.0)
        return self._outcome()

    def run(self, ledger: ScoreLedger | None = None) -> Outcome:
        self.screen.clear()
        if ledger is not None:
            self.screen.show(ledger.format_top())
        while True:
            outcome = self.tick()
            if outcome is not None:
                logger.debug("Loop finished: %s", outcome)
                return outcome
