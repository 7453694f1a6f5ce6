"""
Frequency file codec.

Format: one `letter:count` entry per line, e.g.

    e:5821
    s:4936
    ...

On write, all 26 letters are emitted (zero counts included) in ranked order:
highest count first, ties alphabetical. On read, lines that aren't exactly
`[a-z]:<digits>` are skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from wordgrep.engine.char_freq import CharFrequency
from .io import iter_lines, write_lines

log = logging.getLogger(__name__)


def format_frequency_lines(freqs: CharFrequency) -> List[str]:
    return [f"{c}:{count}" for c, count in freqs.to_ranked_list()]


def write_frequency_file(freqs: CharFrequency, p: Path | str) -> str:
    """Write (overwrite) the frequency file; returns the path written."""
    out = write_lines(format_frequency_lines(freqs), p)
    log.debug("wrote frequency table (%d letters counted) to %s", freqs.total(), out)
    return out


def read_frequency_file(p: Path | str, into: Optional[CharFrequency] = None) -> CharFrequency:
    """
    Load a frequency file.

    If `into` is given, its counts are overwritten in place for every letter
    the file mentions (others keep their value) and it is returned; otherwise
    a fresh, all-zero table is filled.

    Raises FileNotFoundError if the path doesn't exist.
    """
    freqs = into if into is not None else CharFrequency()
    applied = freqs.load_serialized(iter_lines(p))
    log.debug("loaded %d frequency entries from %s", applied, p)
    return freqs
