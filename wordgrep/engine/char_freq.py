"""
Letter frequency table over a-z.

A CharFrequency holds 26 non-negative counts. It is populated once, either by
scanning a corpus (every ASCII letter counts, case-folded; everything else is
ignored) or by loading a serialized `letter:count` listing, and then used
read-only for scoring.
"""

from __future__ import annotations

import logging
import re
import string
from typing import Dict, Iterable, List, Tuple

import numpy as np

log = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase

# One serialized entry per line, e.g. "e:5821"
FREQ_LINE_RE = re.compile(r"([a-z]):(\d+)", re.ASCII)

# Largest count the table can hold; bigger serialized counts are skipped.
MAX_COUNT = int(np.iinfo(np.int64).max)

_ORD_A = ord("a")


def _index_of(c: str) -> int:
    """Map an ASCII letter (either case) to 0..25; -1 for anything else."""
    if len(c) == 1 and c.isascii() and c.isalpha():
        return ord(c.lower()) - _ORD_A
    return -1


class CharFrequency:
    def __init__(self):
        self._counts = np.zeros(len(ALPHABET), dtype=np.int64)

    def add_char(self, c: str) -> None:
        """Count one character; non-letters are ignored."""
        i = _index_of(c)
        if i < 0:
            return
        self._counts[i] += 1

    def add_text(self, text: str) -> None:
        """
        Count every ASCII letter in `text` (corpus-build path).

        Same result as calling add_char on each character, done with one
        bincount instead of a Python loop.
        """
        # Drop non-ASCII first so case folding can't turn e.g. KELVIN SIGN into 'k'.
        data = text.encode("ascii", "ignore").lower()
        if not data:
            return
        raw = np.frombuffer(data, dtype=np.uint8)
        letters = raw[(raw >= _ORD_A) & (raw < _ORD_A + len(ALPHABET))] - _ORD_A
        self._counts += np.bincount(letters, minlength=len(ALPHABET))

    def frequency(self, c: str) -> int:
        """Count for letter `c` (case-insensitive). Raises ValueError for non-letters."""
        i = _index_of(c)
        if i < 0:
            raise ValueError(f"not an ASCII letter: {c!r}")
        return int(self._counts[i])

    def to_ranked_list(self) -> List[Tuple[str, int]]:
        """
        All 26 (letter, count) pairs, highest count first.

        Equal counts are listed alphabetically, so the order (and the
        frequency file written from it) is fully deterministic.
        """
        pairs = [(ALPHABET[i], int(n)) for i, n in enumerate(self._counts)]
        return sorted(pairs, key=lambda p: (-p[1], p[0]))

    def load_serialized(self, lines: Iterable[str]) -> int:
        """
        Overwrite counts from `letter:count` lines.

        Lines that don't match exactly, or whose count exceeds MAX_COUNT, are
        skipped; letters never mentioned keep their current count. Returns
        the number of lines applied.
        """
        applied = 0
        skipped = 0
        for line in lines:
            m = FREQ_LINE_RE.fullmatch(line.rstrip("\r\n"))
            if m is None:
                skipped += 1
                continue
            count = int(m.group(2))
            if count > MAX_COUNT:
                log.debug("skipping out-of-range count for %r: %s", m.group(1), m.group(2))
                skipped += 1
                continue
            self._counts[_index_of(m.group(1))] = count
            applied += 1

        if skipped:
            log.debug("skipped %d malformed frequency line(s)", skipped)
        return applied

    def as_dict(self) -> Dict[str, int]:
        """letter -> count, alphabetical."""
        return {ALPHABET[i]: int(n) for i, n in enumerate(self._counts)}

    def total(self) -> int:
        return int(self._counts.sum())

    @classmethod
    def from_text(cls, text: str) -> "CharFrequency":
        cf = cls()
        cf.add_text(text)
        return cf

    def __eq__(self, other) -> bool:
        if not isinstance(other, CharFrequency):
            return NotImplemented
        return bool(np.array_equal(self._counts, other._counts))

    __hash__ = None

    def __repr__(self) -> str:
        nonzero = ", ".join(f"{c}:{n}" for c, n in self.to_ranked_list() if n)
        return f"CharFrequency({nonzero})"
