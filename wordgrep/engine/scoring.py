"""
Word scoring by distinct-letter frequency.

A word's score is the sum of corpus frequencies of its DISTINCT letters, so
'slate' beats 'sleet' when counts are similar: repeated letters add nothing.

WordScore ordering (total):
  - score ascending
  - on equal scores, word in REVERSE lexicographic order
    (of two tied words, the alphabetically smaller one is the larger score)

A max-structure over WordScore therefore yields the highest score first and,
among ties, words in alphabetical order.
"""

from __future__ import annotations

from functools import total_ordering

from .char_freq import CharFrequency


def score_word(word: str, freqs: CharFrequency) -> int:
    """
    Sum letter frequencies, counting each letter at most once per word.
    Case-insensitive; non-letters contribute nothing.

    Example (a:3, b:1, c:1):
      score_word("aaaaaaabc", freqs) -> 5
    """
    seen = {ch for ch in word.lower() if ch.isascii() and ch.isalpha()}
    return sum(freqs.frequency(ch) for ch in seen)


@total_ordering
class WordScore:
    """A word with its score, computed once against a shared frequency table."""

    __slots__ = ("word", "score", "freqs")

    def __init__(self, word: str, freqs: CharFrequency):
        self.word = word
        self.freqs = freqs  # shared, not owned
        self.score = score_word(word, freqs)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WordScore):
            return NotImplemented
        return self.score == other.score and self.word == other.word

    def __lt__(self, other) -> bool:
        if not isinstance(other, WordScore):
            return NotImplemented
        if self.score != other.score:
            return self.score < other.score
        return self.word > other.word

    def __hash__(self) -> int:
        return hash((self.word, self.score))

    def __repr__(self) -> str:
        return f"WordScore(word={self.word!r}, score={self.score})"
