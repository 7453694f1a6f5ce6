from .constraints import (
    WORD_LENGTH,
    PositionedLetter,
    MisplacedLetter,
    parse_required_positions,
    parse_excluded_letters,
    parse_forbidden_positions,
)
from .filter import Filter
from .char_freq import CharFrequency
from .scoring import WordScore, score_word
from .ranking import RankedSelector

__all__ = [
    "WORD_LENGTH",
    "PositionedLetter",
    "MisplacedLetter",
    "parse_required_positions",
    "parse_excluded_letters",
    "parse_forbidden_positions",
    "Filter",
    "CharFrequency",
    "WordScore",
    "score_word",
    "RankedSelector",
]
