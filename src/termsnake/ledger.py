# ledger.py
from __future__ import annotations

import bisect
import logging
import os
from typing import Iterator, List

from .config import MAX_TOP_SCORES

logger = logging.getLogger(__name__)


class ScoreLedger:
    """
    Historical final scores, kept as a sorted multiset (duplicates allowed).

    Stored ascending in a list: bisect finds the slot in O(log n), the insert
    itself shifts the tail (O(n), at most a few hundred entries in practice).
    Every public view is descending.
    """

    def __init__(self, scores=None):
        self._scores: List[int] = []
        for s in scores or ():
            self.record(s)

    # ---------- Persistence ----------
    @classmethod
    def load(cls, path: str | os.PathLike) -> "ScoreLedger":
        """
        Read whitespace/line separated integers from path.
        Negative or unparsable tokens are skipped; a missing or unreadable
        file gives an empty ledger.
        """
        ledger = cls()
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError:
            logger.debug("No score file at %s, starting empty", path)
            return ledger
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Could not read score file %s: %s", path, e)
            return ledger

        for token in text.split():
            try:
                value = int(token)
            except ValueError:
                logger.debug("Skipping malformed score entry %r", token)
                continue
            if value < 0:
                logger.debug("Skipping negative score entry %r", token)
                continue
            ledger.record(value)
        return ledger

    def persist(self, path: str | os.PathLike) -> bool:
        """
        Overwrite path with the top MAX_TOP_SCORES entries, one per line.
        Returns False (after logging a warning) if the file can't be written.
        """
        lines = "".join(f"{s}\n" for s in self.top(MAX_TOP_SCORES))
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(lines)
        except OSError as e:
            logger.warning("Could not save scores to file %s: %s", path, e)
            return False
        return True

    # ---------- Queries / updates ----------
    def record(self, score: int) -> None:
        if score < 0:
            raise ValueError(f"score must be non-negative, got {score}")
        bisect.insort(self._scores, int(score))

    def top(self, n: int = MAX_TOP_SCORES) -> List[int]:
        """Highest n scores, descending."""
        if n <= 0:
            return []
        return self._scores[::-1][:n]

    def format_top(self, n: int = MAX_TOP_SCORES) -> str:
        rows = ["", "=== Top Scores ==="]
        rows += [f"{i}. {s}" for i, s in enumerate(self.top(n), start=1)]
        rows.append("==================")
        return "\n".join(rows) + "\n"

    def __len__(self) -> int:
        return len(self._scores)

    def __iter__(self) -> Iterator[int]:
        return reversed(self._scores)

    def __repr__(self) -> str:
        return f"ScoreLedger({self.top(len(self._scores))!r})"
