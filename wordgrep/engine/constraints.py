"""
Positional constraints parsed from raw puzzle feedback.

A feedback pattern is a 5-character string where each character is either a
letter (a constraint at that index) or the wildcard '*' (no constraint):

  "d***e"  -> 'd' at 0, 'e' at 4
  "*r***"  -> 'r' is in the word, but not at 1   (when given as a
                                                  "different position")

Patterns of the wrong length are not an error: they contribute nothing, which
simply makes the resulting filter laxer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

# Word length is fixed for this game.
WORD_LENGTH = 5

# Pattern placeholder meaning "no constraint at this index".
WILDCARD = "*"


@dataclass(frozen=True)
class PositionedLetter:
    """Letter `letter` occurs at zero-based index `position`."""
    letter: str
    position: int

    def matches(self, word: str) -> bool:
        """True if `word` has this letter exactly at this position."""
        return 0 <= self.position < len(word) and word[self.position] == self.letter


@dataclass(frozen=True)
class MisplacedLetter(PositionedLetter):
    """
    Letter `letter` is in the word, but NOT at `position`.

    This is the "yellow" feedback: it carries two rules at once.
      - position exclusion: word[position] != letter
      - mandatory presence: letter appears somewhere in the word
    """

    def present(self, word: str) -> bool:
        return self.letter in word


def _split_pattern(pattern: str) -> List[tuple]:
    # (index, char) pairs for every non-wildcard character of a well-sized pattern
    if len(pattern) != WORD_LENGTH:
        return []
    return [(pos, c) for pos, c in enumerate(pattern) if c != WILDCARD]


def parse_required_positions(pattern: Optional[str]) -> List[PositionedLetter]:
    """
    Parse a positional pattern like "d***e" into PositionedLetter entries.

    Returns [] for None or for a pattern whose length is not WORD_LENGTH.
    """
    if pattern is None:
        return []
    return [PositionedLetter(c, pos) for pos, c in _split_pattern(pattern)]


def parse_excluded_letters(chars: Optional[str]) -> List[str]:
    """Explode a string of letters to exclude into single characters."""
    if chars is None:
        return []
    return list(chars)


def parse_forbidden_positions(patterns: Optional[Iterable[str]]) -> List[MisplacedLetter]:
    """
    Parse several "present but wrong position" patterns.

    Each pattern is handled like parse_required_positions; patterns of the
    wrong length are skipped. Results are concatenated in input order.
    """
    out: List[MisplacedLetter] = []
    if patterns is None:
        return out

    for pattern in patterns:
        out.extend(MisplacedLetter(c, pos) for pos, c in _split_pattern(pattern))
    return out
