import logging

import pytest

from prefixtrie import WordList, parse_line, read_entries
from prefixtrie import wordlist

from helpers import assert_same_strings


@pytest.fixture
def no_search_paths(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(wordlist, "WORD_LIST_SEARCH_PATHS", [])


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_parse_line():
    assert parse_line("cat\n") == ("cat", None)
    assert parse_line("  cat  ") == ("cat", None)
    assert parse_line("cat\tfeline\n") == ("cat", "feline")
    assert parse_line("cat\t\n") == ("cat", None)
    assert parse_line("Ünïcode\t1") == ("Ünïcode", "1")
    assert parse_line("") is None
    assert parse_line("   \n") is None
    assert parse_line("# comment") is None


def test_read_entries(tmp_path):
    path = write(tmp_path / "w.txt", "# pets\ncat\t1\n\ncar\ndog\t3\n")
    assert list(read_entries(path)) == [("cat", "1"), ("car", None), ("dog", "3")]


def test_load_explicit_path(tmp_path, no_search_paths, caplog):
    path = write(tmp_path / "w.txt", "cat\t1\ncar\t2\ndog\t3\ncat\t4\n")
    with caplog.at_level(logging.INFO, logger="prefixtrie"):
        words = WordList(path)

    assert words.source == path
    assert len(words) == 3
    assert "cat" in words
    assert "ca" not in words
    assert words.lookup("cat") == ("4", True)
    assert words.lookup("ca") == (None, False)
    assert "Loaded 3 words" in caplog.text


def test_missing_path_falls_back(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    fallback = write(tmp_path / "fallback.txt", "apple\n")
    monkeypatch.setattr(wordlist, "WORD_LIST_SEARCH_PATHS", ["nope.txt", fallback])
    with caplog.at_level(logging.INFO, logger="prefixtrie"):
        words = WordList(str(tmp_path / "missing.txt"))

    assert words.source == fallback
    assert "apple" in words
    assert "not found" in caplog.text


def test_empty_file_is_skipped(tmp_path, monkeypatch):
    empty = write(tmp_path / "empty.txt", "# nothing\n\n")
    full = write(tmp_path / "full.txt", "zebra\n")
    monkeypatch.setattr(wordlist, "WORD_LIST_SEARCH_PATHS", [empty, full])
    words = WordList()
    assert words.source == full
    assert len(words) == 1


def test_nothing_found(no_search_paths, caplog):
    with caplog.at_level(logging.WARNING, logger="prefixtrie"):
        words = WordList()
    assert words.source is None
    assert len(words) == 0
    assert words.complete("") == []
    assert "No word list found" in caplog.text


def test_search_disabled(tmp_path, monkeypatch):
    monkeypatch.setattr(wordlist, "WORD_LIST_SEARCH_PATHS", [write(tmp_path / "w.txt", "x\n")])
    words = WordList(search=False)
    assert len(words) == 0


def test_add_and_complete(no_search_paths):
    words = WordList()
    for w in ["tea", "ten", "to", "teapot", "inn"]:
        words.add(w)
    words.add("tea", "drink")

    assert len(words) == 5
    assert words.complete("te") == ["tea", "teapot", "ten"]
    assert words.complete("te", limit=2) == ["tea", "teapot"]
    assert words.complete("q") == []
    assert_same_strings(words.complete(""), ["tea", "ten", "to", "teapot", "inn"])
    assert words.lookup("tea") == ("drink", True)


def test_directories_are_skipped(tmp_path, monkeypatch, caplog):
    folder = tmp_path / "folder"
    folder.mkdir()
    full = write(tmp_path / "full.txt", "kiwi\n")
    monkeypatch.setattr(wordlist, "WORD_LIST_SEARCH_PATHS", [str(folder), full])
    with caplog.at_level(logging.WARNING, logger="prefixtrie"):
        words = WordList(str(folder))

    assert words.source == full
    assert "kiwi" in words
    assert "not found" in caplog.text
