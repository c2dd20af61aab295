"""Tests for board rendering."""

import io

from termsnake.config import BOARD_SIZE
from termsnake.render import ASCII_GLYPHS, EMOJI_GLYPHS, Screen, render_board


def _cells(text):
    return text.splitlines()[:BOARD_SIZE]


class TestRenderBoard:

    def test_layout_and_status(self, make_state):
        state = make_state([(0, 0), (0, 1)], food=(2, 3), poison=(4, 4), score=20)
        lines = render_board(state, ASCII_GLYPHS).splitlines()
        assert len(lines) == BOARD_SIZE + 2
        assert lines[0] == "oo" + "." * (BOARD_SIZE - 2)
        assert lines[2][3] == "*"
        assert lines[4][4] == "x"
        assert lines[BOARD_SIZE] == "length of snake: 2"
        assert lines[BOARD_SIZE + 1] == "Score: 20 points"

    def test_food_beats_snake_beats_poison(self, make_state):
        state = make_state([(0, 0), (0, 1)], food=(0, 1), poison=(0, 0))
        row = _cells(render_board(state, ASCII_GLYPHS))[0]
        assert row[:2] == "o*"

    def test_paused_status(self, make_state):
        state = make_state([(0, 0)], paused=True, score=10)
        lines = render_board(state, ASCII_GLYPHS).splitlines()
        assert lines[BOARD_SIZE] == "Game paused. Press x to continue"
        assert lines[BOARD_SIZE + 1] == "Score: 10 points"

    def test_emoji_glyphs(self, make_state):
        state = make_state([(0, 0)], food=(0, 1))
        row = _cells(render_board(state, EMOJI_GLYPHS))[0]
        assert row.startswith("🐍🍎⬜")


class TestScreen:

    def test_writes_ansi_sequences(self):
        out = io.StringIO()
        screen = Screen(out)
        screen.clear()
        screen.home()
        screen.show("hi")
        assert out.getvalue() == "\x1b[2J\x1b[H" + "\x1b[H" + "hi"
