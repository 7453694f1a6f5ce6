from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Iterator, List

log = logging.getLogger(__name__)

# What to do with a line that isn't valid UTF-8
UNDECODABLE_POLICIES = ("skip", "raise", "replace")


def _existing(p: Path | str) -> Path:
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p


def iter_lines(p: Path | str, undecodable: str = "skip") -> Iterator[str]:
    """
    Stream a UTF-8 text file line by line, stripping trailing CR/LF.

    Lines that aren't valid UTF-8 are handled per `undecodable`:
      - "skip"    : dropped (counted in a DEBUG log line)
      - "raise"   : UnicodeDecodeError on the first such line
      - "replace" : bad bytes become U+FFFD

    Raises FileNotFoundError at call time (not on first iteration) if the
    path doesn't exist.
    """
    if undecodable not in UNDECODABLE_POLICIES:
        raise ValueError(f"undecodable must be one of {UNDECODABLE_POLICIES}; got {undecodable!r}")
    return _iter_open(_existing(p), undecodable)


def _iter_open(p: Path, undecodable: str) -> Iterator[str]:
    errors = "replace" if undecodable == "replace" else "strict"
    skipped = 0
    with p.open("rb") as f:
        for raw in f:
            try:
                ln = raw.decode("utf-8", errors=errors)
            except UnicodeDecodeError:
                if undecodable == "raise":
                    raise
                skipped += 1
                continue
            yield ln.rstrip("\r\n")

    if skipped:
        log.debug("skipped %d undecodable line(s) in %s", skipped, p)


def read_lines(p: Path | str, undecodable: str = "skip") -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    return list(iter_lines(p, undecodable))


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Overwrites any existing file. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
