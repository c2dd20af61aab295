"""Tests for the entry point."""

import io
import threading
from unittest.mock import patch

from termsnake.config import Config
from termsnake.loop import OVER, QUIT, Outcome
from termsnake.ledger import ScoreLedger
from termsnake.main import finish, parse_args, play
from termsnake.render import Screen


class TestParseArgs:

    def test_defaults(self):
        cfg = parse_args([])
        assert cfg == Config()

    def test_options(self):
        cfg = parse_args(["--scores", "s.txt", "--seed", "3", "--ascii", "--log-level", "DEBUG"])
        assert cfg == Config(seed=3, scores_path="s.txt", ascii=True, log_level="DEBUG")


class TestFinish:

    def test_game_over_records_and_persists(self, tmp_path):
        path = tmp_path / "scores.txt"
        out = io.StringIO()
        ledger = ScoreLedger([50])
        status = finish(Outcome(OVER, 30, "You hit yourself!", "board\n"), ledger, Screen(out), path)
        assert status == 0
        assert path.read_text() == "50\n30\n"
        text = out.getvalue()
        assert "board" in text
        assert "Game Over! You hit yourself!" in text
        assert "Final Score: 30 points" in text
        assert "2. 30" in text

    def test_quit_persists_without_recording(self, tmp_path):
        path = tmp_path / "scores.txt"
        out = io.StringIO()
        status = finish(Outcome(QUIT, 40), ScoreLedger([50]), Screen(out), path)
        assert status == 0
        assert path.read_text() == "50\n"
        assert "Game Over" not in out.getvalue()

    def test_unwritable_score_file_still_exits_cleanly(self, tmp_path):
        path = tmp_path / "no_such_dir" / "scores.txt"
        status = finish(Outcome(OVER, 10, "You ate poisonous food!"), ScoreLedger(), Screen(io.StringIO()), path)
        assert status == 0


class TestPlay:

    def test_quit_key_ends_session(self, tmp_path):
        path = tmp_path / "scores.txt"
        path.write_text("20\n")
        out = io.StringIO()
        cfg = Config(seed=1, scores_path=str(path), ascii=True)
        assert play(cfg, stdin=io.StringIO("q"), stdout=out) == 0
        assert path.read_text() == "20\n"
        assert "=== Top Scores ===" in out.getvalue()

    def test_ctrl_c_quits_and_saves_scores(self, tmp_path):
        path = tmp_path / "scores.txt"
        path.write_text("20\n")
        real_join = threading.Thread.join
        interrupted = []

        def join(thread, timeout=None):
            if thread.name == "game" and not interrupted:
                interrupted.append(thread)
                raise KeyboardInterrupt
            return real_join(thread, timeout)

        cfg = Config(seed=1, scores_path=str(path), ascii=True)
        with patch.object(threading.Thread, "join", join):
            status = play(cfg, stdin=io.StringIO(""), stdout=io.StringIO())
        assert status == 0
        assert interrupted
        assert path.read_text() == "20\n"
