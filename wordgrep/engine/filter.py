"""
Candidate filtering against parsed feedback constraints.

Rules, evaluated in order (first failure rejects):
  1) exact length (5)
  2) no excluded letter anywhere
  3) positions: every required letter in place, no misplaced letter at
     its known-wrong position
  4) presence: every misplaced letter appears somewhere in the word

The filter is case-sensitive. Callers lowercase words before asking.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from .constraints import WORD_LENGTH, MisplacedLetter, PositionedLetter


class Filter:
    """Immutable rule set; `accept(word)` is pure."""

    def __init__(
            self,
            excluded_letters: Optional[Iterable[str]] = None,
            required_positions: Optional[Iterable[PositionedLetter]] = None,
            forbidden_positions: Optional[Iterable[PositionedLetter]] = None,
    ):
        self._word_length = WORD_LENGTH
        self._excluded_letters = frozenset(excluded_letters or ())
        self._required_positions = tuple(required_positions or ())
        # A forbidden entry always means "in the word, not here", whatever type it came in as.
        self._forbidden_positions = tuple(
            pl if isinstance(pl, MisplacedLetter) else MisplacedLetter(pl.letter, pl.position)
            for pl in (forbidden_positions or ())
        )

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def excluded_letters(self) -> frozenset:
        return self._excluded_letters

    @property
    def required_positions(self) -> tuple:
        return self._required_positions

    @property
    def forbidden_positions(self) -> tuple:
        return self._forbidden_positions

    def accept(self, word: str) -> bool:
        """Return True if `word` satisfies every rule."""
        if len(word) != self._word_length:
            return False

        for c in self._excluded_letters:
            if c in word:
                return False

        if not self.accept_positions(word):
            return False

        if not self.accept_letter_presence(word):
            return False

        return True

    def accept_positions(self, word: str) -> bool:
        """Required letters in place; misplaced letters not at their known-wrong index."""
        pos_char: Dict[int, str] = dict(enumerate(word))

        for pl in self._required_positions:
            if pos_char.get(pl.position) != pl.letter:
                return False

        for ml in self._forbidden_positions:
            if pos_char.get(ml.position) == ml.letter:
                return False

        return True

    def accept_letter_presence(self, word: str) -> bool:
        """Every misplaced letter must still be somewhere in the word."""
        return all(ml.present(word) for ml in self._forbidden_positions)

    def __repr__(self) -> str:
        return (
            f"Filter(excluded_letters={sorted(self._excluded_letters)!r}, "
            f"required_positions={list(self._required_positions)!r}, "
            f"forbidden_positions={list(self._forbidden_positions)!r})"
        )
