"""
Runtime settings: where the word source and the frequency file live.

Resolved once at startup from the environment and passed explicitly to
whatever needs them:

  DICT_PATH       word source, default /usr/share/dict/words
  CHAR_FREQ_PATH  frequency file, default ./char.freq (or /tmp/char.freq if
                  the working directory can't be determined)

Empty variables count as unset.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

DICT_PATH_ENV = "DICT_PATH"
CHAR_FREQ_PATH_ENV = "CHAR_FREQ_PATH"

DEFAULT_DICT_PATH = Path("/usr/share/dict/words")
CHAR_FREQ_FILENAME = "char.freq"
FALLBACK_DIR = Path("/tmp")


def _cwd_or_fallback() -> Path:
    try:
        return Path.cwd()
    except OSError:
        return FALLBACK_DIR


@dataclass(frozen=True)
class Settings:
    dict_path: Path
    char_freq_path: Path

    @classmethod
    def from_env(
            cls,
            environ: Optional[Mapping[str, str]] = None,
            cwd: Optional[Path] = None,
    ) -> "Settings":
        env = os.environ if environ is None else environ

        dict_path = env.get(DICT_PATH_ENV) or DEFAULT_DICT_PATH

        freq_path = env.get(CHAR_FREQ_PATH_ENV)
        if not freq_path:
            base = cwd if cwd is not None else _cwd_or_fallback()
            freq_path = Path(base) / CHAR_FREQ_FILENAME

        return cls(dict_path=Path(dict_path), char_freq_path=Path(freq_path))

    def with_overrides(
            self,
            *,
            dict_path: Optional[str] = None,
            char_freq_path: Optional[str] = None,
    ) -> "Settings":
        """Return a copy with any non-None paths replaced (CLI flags win over env)."""
        changes = {}
        if dict_path is not None:
            changes["dict_path"] = Path(dict_path)
        if char_freq_path is not None:
            changes["char_freq_path"] = Path(char_freq_path)
        return replace(self, **changes)
