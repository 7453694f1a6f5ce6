"""
Pipeline primitives.

- build_filter:   raw CLI-style strings -> Filter.
- grep_words:     stream the lines a Filter accepts.
- rank_words:     score every accepted line, keep the top K.
- analyse_corpus: build a CharFrequency from a corpus.

These functions are intentionally UI-agnostic so they can be reused by
the CLI, a notebook, or tests without changes.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from wordgrep.engine import (
    CharFrequency,
    Filter,
    RankedSelector,
    WordScore,
    WORD_LENGTH,
    parse_excluded_letters,
    parse_forbidden_positions,
    parse_required_positions,
)

log = logging.getLogger(__name__)


def build_filter(
        target: Optional[str] = None,
        ignore_chars: Optional[str] = None,
        different_positions: Optional[Iterable[str]] = None,
) -> Filter:
    """
    Build a Filter from raw feedback strings.

    Args:
      target              : positional pattern, e.g. "d***e"
      ignore_chars        : letters known to be absent, e.g. "abc"
      different_positions : "present but wrong position" patterns, e.g. ["*r***"]

    Patterns of the wrong length contribute nothing (the filter gets laxer).
    """
    different_positions = list(different_positions or [])
    for pattern in [target, *different_positions]:
        if pattern is not None and len(pattern) != WORD_LENGTH:
            log.debug("ignoring pattern %r: not %d characters", pattern, WORD_LENGTH)

    word_filter = Filter(
        excluded_letters=parse_excluded_letters(ignore_chars),
        required_positions=parse_required_positions(target),
        forbidden_positions=parse_forbidden_positions(different_positions),
    )
    log.debug("%r", word_filter)
    return word_filter


def grep_words(lines: Iterable[str], word_filter: Filter) -> Iterator[str]:
    """
    Yield every line the filter accepts, as it was read (minus the line ending).

    Lines are lowercased only for the check.
    """
    for line in lines:
        line = line.rstrip("\r\n")
        if word_filter.accept(line.lower()):
            yield line


def rank_words(
        lines: Iterable[str],
        word_filter: Filter,
        freqs: CharFrequency,
        k: int,
) -> List[WordScore]:
    """
    Score every accepted line against `freqs` and return the best `k`,
    highest score first (ties alphabetical).

    All candidates are scored before anything is returned.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative; got {k}")

    selector = RankedSelector()
    for word in grep_words(lines, word_filter):
        selector.push(WordScore(word, freqs))

    log.debug("scored %d candidate(s); keeping top %d", len(selector), k)
    return list(selector.drain(k))


def analyse_corpus(lines: Iterable[str]) -> CharFrequency:
    """
    Count letters over the whole corpus (every character of every line).
    Non-letters, including line endings, are ignored.
    """
    freqs = CharFrequency()
    n = 0
    for line in lines:
        freqs.add_text(line)
        n += 1
    log.debug("analysed %d line(s), %d letter(s)", n, freqs.total())
    return freqs
