# controls.py
"""Keyboard -> game intents."""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

try:
    import termios
    import tty
except ImportError:  # pragma: no cover
    termios = None
    tty = None

from .config import PAUSE_KEY, QUIT_KEY
from .game import GameState, change_direction, request_quit, toggle_pause
from .grid import Direction

logger = logging.getLogger(__name__)

KEYMAP = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}


class IntentKind(Enum):
    MOVE = "move"
    PAUSE = "pause"
    QUIT = "quit"


@dataclass(frozen=True)
class Intent:
    kind: IntentKind
    direction: Optional[Direction] = None


def parse_key(ch: str) -> Optional[Intent]:
    """Map a raw key to an intent; unknown keys give None."""
    if ch in KEYMAP:
        return Intent(IntentKind.MOVE, KEYMAP[ch])
    if ch == PAUSE_KEY:
        return Intent(IntentKind.PAUSE)
    if ch == QUIT_KEY:
        return Intent(IntentKind.QUIT)
    return None


class InputRouter:
    """Forwards each key to the shared GameState as soon as it is read."""

    def __init__(self, state: GameState):
        self.state = state

    def route(self, ch: str) -> bool:
        """Apply one key. Returns False once a quit was requested."""
        intent = parse_key(ch)
        if intent is None:
            return True
        if intent.kind is IntentKind.MOVE:
            change_direction(self.state, intent.direction)
        elif intent.kind is IntentKind.PAUSE:
            toggle_pause(self.state)
        else:
            request_quit(self.state)
            return False
        return True

    def run(self, stream: TextIO | None = None) -> None:
        """Read keys until quit or EOF."""
        stream = stream if stream is not None else sys.stdin
        while True:
            ch = stream.read(1)
            if ch == "":
                logger.debug("Input closed, no more keys")
                return
            if not self.route(ch):
                return


class TerminalMode:
    """Unbuffered, no-echo stdin for the duration of the block (POSIX ttys only)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdin
        self.fd = None
        self.old = None

    @property
    def supported(self) -> bool:
        if termios is None or tty is None:
            return False
        try:
            return self.stream.isatty()
        except (AttributeError, ValueError):
            return False

    def __enter__(self):
        if self.supported:
            self.fd = self.stream.fileno()
            self.old = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        else:
            logger.debug("Raw terminal mode unavailable, using buffered input")
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.old is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old)
            self.old = None
