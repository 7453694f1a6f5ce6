"""
CLI entry point for wordgrep.

Subcommands:
  grep     filter the word source by puzzle feedback; optionally print only
           the top K words by letter-frequency score
  analyse  count letters in the word source and write the frequency file
  show     check the frequency file and print its table

Paths come from DICT_PATH / CHAR_FREQ_PATH (see wordgrep.settings) unless
--dict / --freq are given.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from wordgrep import __version__
from wordgrep.datasets import (
    iter_lines,
    pretty_summary,
    read_frequency_file,
    validate_freq_file,
    write_frequency_file,
)
from wordgrep.pipeline import analyse_corpus, build_filter, grep_words, rank_words
from wordgrep.settings import Settings

log = logging.getLogger(__name__)


def _non_negative_int(s: str) -> int:
    try:
        k = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}")
    if k < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0; got {k}")
    return k


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wordgrep",
        description="wordgrep: filter and rank words from Wordle-style feedback",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    ap.add_argument("--dict", dest="dict_path",
                    help="word source, one word per line (default: $DICT_PATH or "
                         "/usr/share/dict/words)")
    ap.add_argument("--freq", dest="char_freq_path",
                    help="frequency file (default: $CHAR_FREQ_PATH or ./char.freq)")
    sub = ap.add_subparsers(dest="command", required=True)

    p_grep = sub.add_parser("grep", help="print words matching the feedback")
    p_grep.add_argument("target", nargs="?",
                        help="known letters in place, '*' for unknown (e.g. 'd***e')")
    p_grep.add_argument("-i", "--ignore-chars",
                        help="letters not in the word (e.g. 'abc')")
    p_grep.add_argument("-d", "--different-positions", nargs="+", action="extend",
                        metavar="PATTERN",
                        help="letters in the word but not at this index (e.g. '*r***'); "
                             "repeatable")
    p_grep.add_argument("-s", "--score-sort", type=_non_negative_int, metavar="K",
                        help="print only the K best words by letter-frequency score")
    p_grep.add_argument("--show-scores", action="store_true",
                        help="with --score-sort, print 'word<TAB>score'")

    p_analyse = sub.add_parser("analyse", help="count letters in the word source")
    p_analyse.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="progress bar on stderr (auto = bar if stderr is a terminal)",
    )

    sub.add_parser("show", help="check the frequency file and print its table")
    return ap


def _cmd_grep(args: argparse.Namespace, settings: Settings) -> None:
    word_filter = build_filter(args.target, args.ignore_chars, args.different_positions)
    lines = iter_lines(settings.dict_path)

    if args.score_sort is None:
        n = 0
        for word in grep_words(lines, word_filter):
            print(word)
            n += 1
        log.debug("%d word(s) matched", n)
        return

    freqs = read_frequency_file(settings.char_freq_path)
    for ws in rank_words(lines, word_filter, freqs, args.score_sort):
        print(f"{ws.word}\t{ws.score}" if args.show_scores else ws.word)


def _cmd_analyse(args: argparse.Namespace, settings: Settings) -> None:
    lines = iter_lines(settings.dict_path, undecodable="raise")

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"
    if mode == "bar":
        lines = tqdm(lines, desc="Analysing", unit="line", ncols=80, file=sys.stderr)

    freqs = analyse_corpus(lines)
    out = write_frequency_file(freqs, settings.char_freq_path)
    log.info("wrote %s", out)
    log.info(pretty_summary(validate_freq_file(out)))


def _cmd_show(args: argparse.Namespace, settings: Settings) -> None:
    rep = validate_freq_file(str(settings.char_freq_path))
    print(pretty_summary(rep))
    if not rep["exists"]:
        raise FileNotFoundError(settings.char_freq_path)

    freqs = read_frequency_file(settings.char_freq_path)
    for c, count in freqs.to_ranked_list():
        print(f"{c}:{count}")


COMMANDS = {
    "grep": _cmd_grep,
    "analyse": _cmd_analyse,
    "show": _cmd_show,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, resolve settings, run the subcommand.

    Returns the process exit status: 0 on success, 1 if the word source or
    frequency file can't be opened, or if `analyse` meets a line that isn't
    UTF-8.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    settings = Settings.from_env().with_overrides(
        dict_path=args.dict_path,
        char_freq_path=args.char_freq_path,
    )
    log.debug("settings: %s", settings)

    try:
        COMMANDS[args.command](args, settings)
    except (OSError, UnicodeDecodeError) as e:
        log.error("%s: %s", type(e).__name__, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
