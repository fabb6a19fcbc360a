"""Tests for the interactive console front end."""

import gzip

import pytest

import autocomplete_cli
from autocomplete_cli import describe, main, run_session
from dlb_trie import DLBTrie
from prefix_cursor import PrefixCursor


def feed(monkeypatch, lines):
    """Make input() return *lines* one by one, then raise EOFError."""
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def dictionary(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("car\ncard\ncat\ndog\n", encoding="utf-8")
    return path


class TestDescribe:
    """Tests for the one-line suggestion summary."""

    def test_with_predictions(self):
        c = PrefixCursor(DLBTrie(["car", "card", "cat"]))
        c.advance("c")
        assert describe(c) == "c --> car (3 predictions total)"

    def test_without_predictions(self):
        c = PrefixCursor(DLBTrie(["car"]))
        c.advance("x")
        assert describe(c) == "No predictions found for x"


class TestSession:
    """Tests for the keystroke loop."""

    def test_typing_and_retreat(self, monkeypatch, capsys):
        cursor = PrefixCursor(DLBTrie(["car", "card", "cat"]))
        feed(monkeypatch, ["c", "a", "r", "<", "t", ".", "n"])
        run_session(cursor)
        out = capsys.readouterr().out
        assert "c --> car (3 predictions total)" in out
        assert "car --> car (2 predictions total)" in out
        assert "ca --> car (3 predictions total)" in out
        assert "cat --> cat (1 predictions total)" in out
        assert "Do you want to add" not in out

    def test_blank_line_reprompts(self, monkeypatch, capsys):
        cursor = PrefixCursor(DLBTrie(["a"]))
        feed(monkeypatch, ["", "."])
        run_session(cursor)
        assert capsys.readouterr().out.count(autocomplete_cli.PROMPT) == 2

    def test_retreat_on_empty_prefix(self, monkeypatch, capsys):
        cursor = PrefixCursor(DLBTrie(["a"]))
        feed(monkeypatch, ["<", "."])
        run_session(cursor)
        assert "Nothing to delete." in capsys.readouterr().out

    def test_add_unknown_word(self, monkeypatch, capsys):
        trie = DLBTrie(["car"])
        cursor = PrefixCursor(trie)
        feed(monkeypatch, ["c", "o", "w", ".", "y", "y", "c", "o", ".", "n", "n"])
        run_session(cursor)
        out = capsys.readouterr().out
        assert "No predictions found for cow" in out
        assert "Do you want to add cow? (y/n)" in out
        assert "co --> cow (1 predictions total)" in out
        assert list(trie) == ["car", "cow"]
        assert cursor.prefix == ""

    def test_decline_add(self, monkeypatch):
        trie = DLBTrie(["car"])
        feed(monkeypatch, ["z", ".", "n", "n"])
        run_session(PrefixCursor(trie))
        assert "z" not in trie

    def test_eof_ends_session(self, monkeypatch):
        cursor = PrefixCursor(DLBTrie(["car"]))
        feed(monkeypatch, ["c"])
        run_session(cursor)
        assert cursor.prefix == "c"


class TestMain:
    """Tests for the command line entry point."""

    def test_main(self, monkeypatch, capsys, dictionary):
        feed(monkeypatch, ["d", ".", "n"])
        assert main([str(dictionary)]) == 0
        out = capsys.readouterr().out
        assert "(4 words)" in out
        assert "d --> dog (1 predictions total)" in out

    def test_main_gzip(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "dict.txt.gz"
        with gzip.open(path, "wt", encoding="utf-8") as f:
            f.write("alpha\nbeta\n")
        feed(monkeypatch, [])
        assert main([str(path), "--compression", "gzip"]) == 0
        assert "(2 words)" in capsys.readouterr().out

    def test_main_dictionary_from_env(self, monkeypatch, capsys, dictionary):
        monkeypatch.setenv("DLB_AUTOCOMPLETE_DICT", str(dictionary))
        feed(monkeypatch, [])
        assert main([]) == 0
        assert "(4 words)" in capsys.readouterr().out

    def test_main_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "Error opening dictionary file" in capsys.readouterr().err

    def test_main_requires_dictionary(self, monkeypatch):
        monkeypatch.delenv("DLB_AUTOCOMPLETE_DICT", raising=False)
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2
