from pathlib import Path

import pytest
from wordgrep.cli import main

WORDS = ["crane", "Drive", "doree", "dense", "dirty", "audio", "write", "dozer", "o'neil"]


@pytest.fixture
def env(tmp_path: Path, monkeypatch):
    words = tmp_path / "words"
    words.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    freq = tmp_path / "char.freq"
    monkeypatch.setenv("DICT_PATH", str(words))
    monkeypatch.setenv("CHAR_FREQ_PATH", str(freq))
    return words, freq


def _out(capsys):
    return capsys.readouterr().out.splitlines()


def test_grep_streams_matches(env, capsys):
    assert main(["grep", "d***e", "-i", "abc"]) == 0
    assert _out(capsys) == ["Drive", "doree", "dense"]

def test_grep_different_positions_repeatable(env, capsys):
    assert main(["grep", "d***e", "-i", "abc", "-d", "*r***", "-d", "*****"]) == 0
    assert _out(capsys) == ["doree"]

def test_grep_without_constraints(env, capsys):
    assert main(["grep"]) == 0
    assert _out(capsys) == [w for w in WORDS if len(w) == 5]

def test_analyse_then_score_sort(env, capsys):
    _, freq = env
    assert main(["analyse", "--progress", "off"]) == 0
    lines = freq.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 26
    assert lines[0] == "e:9"
    capsys.readouterr()

    assert main(["grep", "d****", "-s", "2", "--show-scores"]) == 0
    # Drive: d6 r6 i5 v1 e9 = 27; dozer: d6 o4 z1 e9 r6 = 26
    assert _out(capsys) == ["Drive\t27", "dozer\t26"]

    assert main(["grep", "-s", "0"]) == 0
    assert _out(capsys) == []

def test_analyse_overwrites_existing_file(env):
    _, freq = env
    freq.write_text("z:999\n" * 50, encoding="utf-8")
    assert main(["analyse", "--progress", "off"]) == 0
    assert len(freq.read_text(encoding="utf-8").splitlines()) == 26

def test_show_prints_summary_and_table(env, capsys):
    _, freq = env
    freq.write_text("q:3\nbogus\n", encoding="utf-8")
    assert main(["show"]) == 0
    out = _out(capsys)
    assert "FAIL" in out[0]
    assert out[1] == "q:3"
    assert len(out) == 27

def test_cli_flags_override_env(env, tmp_path: Path, capsys):
    other = tmp_path / "other"
    other.write_text("zesty\nzonal\n", encoding="utf-8")
    assert main(["--dict", str(other), "grep", "z****"]) == 0
    assert _out(capsys) == ["zesty", "zonal"]

def test_missing_word_source_exits_1(env, tmp_path: Path):
    assert main(["--dict", str(tmp_path / "nope"), "grep"]) == 1
    assert main(["--dict", str(tmp_path / "nope"), "analyse"]) == 1

def test_missing_freq_file_exits_1(env):
    assert main(["grep", "-s", "3"]) == 1
    assert main(["show"]) == 1

def test_negative_score_sort_is_usage_error(env):
    with pytest.raises(SystemExit) as exc:
        main(["grep", "-s", "-1"])
    assert exc.value.code == 2

def test_score_sort_with_oversized_count_skips_it(env, capsys):
    _, freq = env
    freq.write_text("a:99999999999999999999\nr:5\n", encoding="utf-8")
    assert main(["grep", "-s", "1"]) == 0
    # r scores 5 for six words; ties compare the line as read, so "Drive" < "crane"
    assert _out(capsys) == ["Drive"]

def test_grep_skips_undecodable_lines(env, capsys):
    words, _ = env
    words.write_bytes(b"crane\n\xffdrop\nslate\n")
    assert main(["grep"]) == 0
    assert _out(capsys) == ["crane", "slate"]

def test_analyse_fails_on_undecodable_input(env):
    words, freq = env
    words.write_bytes(b"crane\n\xffdrop\nslate\n")
    assert main(["analyse", "--progress", "off"]) == 1
    assert not freq.exists()
