# main.py
from __future__ import annotations

import argparse
import logging
import random
import sys
import threading
from typing import List, Optional

from .config import Config, SCORES_FILE
from .controls import InputRouter, TerminalMode
from .game import new_game_state, request_quit
from .ledger import ScoreLedger
from .loop import OVER, GameLoop, Outcome
from .render import ASCII_GLYPHS, EMOJI_GLYPHS, Screen

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Snake in the terminal. w/a/s/d to steer, x to pause, q to quit.",
    )
    parser.add_argument(
        "--scores",
        type=str,
        default=SCORES_FILE,
        help="high score file (read at start, rewritten at exit)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed food placement")
    parser.add_argument("--ascii", action="store_true", help="plain ASCII glyphs instead of emoji")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    return Config(seed=args.seed, scores_path=args.scores, ascii=args.ascii, log_level=args.log_level)


def finish(outcome: Outcome, ledger: ScoreLedger, screen: Screen, scores_path: str) -> int:
    """Flush the ledger and show the final screen. Returns the exit status."""
    if outcome.kind == OVER:
        screen.clear()
        screen.show(outcome.frame)
        screen.show(f"Game Over! {outcome.reason}\nFinal Score: {outcome.score} points\n")
        ledger.record(outcome.score)
        ledger.persist(scores_path)
        screen.show(ledger.format_top())
    else:
        ledger.persist(scores_path)
    return 0


def play(cfg: Config, stdin=None, stdout=None) -> int:
    ledger = ScoreLedger.load(cfg.scores_path)
    rng = random.Random(cfg.seed)
    state = new_game_state(rng)
    screen = Screen(stdout)
    loop = GameLoop(state, rng, screen, ASCII_GLYPHS if cfg.ascii else EMOJI_GLYPHS)
    router = InputRouter(state)
    stdin = stdin if stdin is not None else sys.stdin

    result: List[Outcome] = []

    def game_play():
        result.append(loop.run(ledger))

    with TerminalMode(stdin):
        # The reader blocks on stdin with no way to interrupt it; as a daemon
        # it dies with the process.
        reader = threading.Thread(target=router.run, args=(stdin,), name="input", daemon=True)
        game = threading.Thread(target=game_play, name="game")
        reader.start()
        game.start()
        try:
            game.join()
        except KeyboardInterrupt:
            logger.info("Interrupted, quitting")
            request_quit(state)
            game.join()

    return finish(result[0], ledger, screen, cfg.scores_path)


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.info("Starting with %s", cfg)
    return play(cfg)


if __name__ == "__main__":
    sys.exit(main())
