"""
Frequency file validator for wordgrep.

What this module does:
- Check a frequency file against the `letter:count` format.
- Count applied vs skipped lines; find letters listed more than once or not
  at all; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Loading never fails on a malformed file (bad lines are just skipped), so this
is the place to find out whether a hand-edited file says what you think.

Typical use:
    from wordgrep.datasets import validate_freq_file, pretty_summary
    rep = validate_freq_file("char.freq")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from wordgrep.engine.char_freq import ALPHABET, FREQ_LINE_RE, MAX_COUNT
from .io import read_lines


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FreqFileReport:
    """Diagnostics for one frequency file."""
    path: str                  # file path (as given)
    exists: bool               # did the file exist on disk?
    sha256: str                # SHA-256 of raw file bytes (empty string if missing)
    entries: int               # lines matching `letter:count`
    skipped_lines: int         # non-blank lines that did not match
    total: int                 # sum of counts (last entry wins per letter)
    duplicate_letters: List[str] = field(default_factory=list)
    missing_letters: List[str] = field(default_factory=list)
    out_of_range_letters: List[str] = field(default_factory=list)  # count exceeds MAX_COUNT
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_freq_file(path: str) -> Dict:
    """
    Validate a frequency file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see FreqFileReport) with
        `passed` = file exists, no skipped lines, and each of the 26 letters
        listed exactly once. `issues` lists any problems found.
    """
    p = Path(path)
    if not p.exists():
        rep = FreqFileReport(str(path), False, "", 0, 0, 0,
                             issues=[f"frequency file not found: {path}"])
        return asdict(rep)

    seen: Counter = Counter()
    counts: Dict[str, int] = {}
    skipped = 0
    out_of_range: List[str] = []

    # undecodable bytes become U+FFFD, so such lines count as malformed
    for line in read_lines(p, undecodable="replace"):
        m = FREQ_LINE_RE.fullmatch(line)
        if m is None:
            # blank lines are harmless padding, not worth reporting
            if line.strip():
                skipped += 1
            continue
        count = int(m.group(2))
        if count > MAX_COUNT:
            skipped += 1
            out_of_range.append(m.group(1))
            continue
        seen[m.group(1)] += 1
        counts[m.group(1)] = count

    issues: List[str] = []
    duplicates = sorted(c for c, n in seen.items() if n > 1)
    missing = [c for c in ALPHABET if c not in seen]
    too_large = sorted(set(out_of_range))

    if skipped:
        issues.append(f"{skipped} malformed line(s) skipped")
    if too_large:
        issues.append(f"counts too large for: {''.join(too_large)}")
    if duplicates:
        issues.append(f"letters listed more than once: {''.join(duplicates)}")
    if missing:
        issues.append(f"letters missing: {''.join(missing)}")

    rep = FreqFileReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        entries=sum(seen.values()),
        skipped_lines=skipped,
        total=sum(counts.values()),
        duplicate_letters=duplicates,
        missing_letters=missing,
        out_of_range_letters=too_large,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/logs.

    Example:
        char.freq | entries=26 skipped=0 total=24793 (sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"]:
        return f"{report['path']} | missing | {status}"
    sha = (report.get("sha256") or "")[:12]
    line = (
        f"{report['path']} | entries={report['entries']} skipped={report['skipped_lines']} "
        f"total={report['total']} (sha={sha}) | {status}"
    )
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
