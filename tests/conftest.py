import random
from collections import deque

import pytest

from termsnake.game import GameState
from termsnake.grid import Direction


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_state():
    """Build a GameState with an explicit layout (tail first, head last)."""
    def _make(snake, direction=Direction.RIGHT, food=(9, 9), heading=None, **kwargs):
        return GameState(
            snake=deque(snake),
            direction=direction,
            heading=heading or direction,
            food=food,
            **kwargs,
        )
    return _make
