from pathlib import Path

import pytest
from wordgrep.engine import CharFrequency
from wordgrep.pipeline import analyse_corpus, build_filter, grep_words, rank_words
from wordgrep.settings import Settings

WORDS = ["Drive\n", "doree\n", "dense\n", "dirty\n", "audio\n", "write\n", "o'neil\n", "dozer\n"]


def test_build_filter_parses_raw_strings():
    f = build_filter("d***e", "abc", ["*r***"])
    assert f.accept("doree") is True
    assert f.accept("drive") is False
    assert f.accept("dense") is False

def test_build_filter_ignores_malformed_patterns():
    # both patterns have the wrong length, so only the exclusions remain
    f = build_filter("d**e", "abc", ["*r**"])
    assert f.required_positions == ()
    assert f.forbidden_positions == ()
    assert f.accept("write") is True

def test_build_filter_accepts_generators():
    f = build_filter(None, None, (p for p in ["*r***"]))
    assert len(f.forbidden_positions) == 1

def test_grep_words_lowercases_for_check_only():
    f = build_filter("d***e", "abc")
    assert list(grep_words(WORDS, f)) == ["Drive", "doree", "dense"]

def test_grep_words_no_constraints_keeps_five_letter_lines():
    assert list(grep_words(WORDS, build_filter())) == [
        "Drive", "doree", "dense", "dirty", "audio", "write", "dozer",
    ]

def test_rank_words_top_k():
    freqs = CharFrequency()
    freqs.load_serialized(["e:10", "r:5", "o:3", "d:1", "z:1", "n:1", "s:1"])
    f = build_filter("d****")

    got = [(ws.word, ws.score) for ws in rank_words(WORDS, f, freqs, 3)]
    # dozer: d+o+z+e+r = 20; doree: d+o+r+e = 19; drive: d+r+e = 16 (i, v unscored)
    assert got == [("dozer", 20), ("doree", 19), ("Drive", 16)]

def test_rank_words_ties_are_alphabetical():
    freqs = CharFrequency()
    f = build_filter()
    got = [ws.word for ws in rank_words(["write", "audio", "crane"], f, freqs, 5)]
    assert got == ["audio", "crane", "write"]

def test_rank_words_zero_and_negative_k():
    freqs = CharFrequency()
    assert rank_words(WORDS, build_filter(), freqs, 0) == []
    with pytest.raises(ValueError):
        rank_words(WORDS, build_filter(), freqs, -1)

def test_analyse_corpus_counts_letters_only():
    cf = analyse_corpus(["aab\n", "C-c\n", "42"])
    assert [(c, n) for c, n in cf.to_ranked_list() if n] == [("a", 2), ("c", 2), ("b", 1)]

# --- settings ---

def test_settings_defaults(tmp_path: Path):
    s = Settings.from_env(environ={}, cwd=tmp_path)
    assert s.dict_path == Path("/usr/share/dict/words")
    assert s.char_freq_path == tmp_path / "char.freq"

def test_settings_from_env_and_overrides(tmp_path: Path):
    env = {"DICT_PATH": str(tmp_path / "w"), "CHAR_FREQ_PATH": str(tmp_path / "f")}
    s = Settings.from_env(environ=env)
    assert s.dict_path == tmp_path / "w"
    assert s.char_freq_path == tmp_path / "f"

    s2 = s.with_overrides(dict_path="other")
    assert s2.dict_path == Path("other")
    assert s2.char_freq_path == s.char_freq_path

def test_settings_empty_env_counts_as_unset(tmp_path: Path):
    s = Settings.from_env(environ={"DICT_PATH": "", "CHAR_FREQ_PATH": ""}, cwd=tmp_path)
    assert s.dict_path == Path("/usr/share/dict/words")
    assert s.char_freq_path == tmp_path / "char.freq"
