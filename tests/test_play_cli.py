from pathlib import Path

import pytest
from apps.cli import play


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def _files(tmp_path: Path):
    words = tmp_path / "start.txt"
    words.write_text("listen\n", encoding="utf-8")
    d = tmp_path / "dict.txt"
    d.write_text("silent\ntiles\ntennis\n", encoding="utf-8")
    return ["--words", str(words), "--dictionary", "wordlist", "--dict-file", str(d)]


def test_play_session(tmp_path: Path, monkeypatch, capsys):
    _feed(monkeypatch, ["Silent", "tennis", ":restart", "tiles", ":quit", "never read"])
    play.main(_files(tmp_path))
    out = capsys.readouterr().out

    assert "=== LISTEN ===" in out
    assert "(6) silent" in out
    assert "[Not possible] You can't spell that word with the letters from listen." in out
    assert "(5) tiles" in out
    assert out.rstrip().endswith("Found 1 word(s) from listen.")


def test_play_stops_on_eof(tmp_path: Path, monkeypatch, capsys):
    _feed(monkeypatch, ["it"])
    play.main(_files(tmp_path))
    out = capsys.readouterr().out
    assert "[Too short] Words must contain at least 3 letters." in out
    assert "Found 0 word(s)" in out


def test_play_missing_word_list_exits(tmp_path: Path):
    with pytest.raises(SystemExit, match="cannot load word list"):
        play.main(["--words", str(tmp_path / "missing.txt"), "--dictionary", "static"])


def test_play_commands_ignore_case(tmp_path: Path, monkeypatch, capsys):
    _feed(monkeypatch, ["silent", " :Restart", "silent", ":QUIT", "tiles"])
    play.main(_files(tmp_path))
    out = capsys.readouterr().out

    assert out.count("=== LISTEN ===") == 2
    assert "Not recognized" not in out
    assert out.rstrip().endswith("Found 1 word(s) from listen.")
