"""Tests for word list loading."""

import logging

import pytest

from autocomplete import constants
from autocomplete.dictionary import WordList, read_words
from autocomplete.trie import PrefixIndex


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# sample\ncat\n  catalogue \n\nCat\ncat\n", encoding="utf-8")
    return str(path)


def test_read_words_skips_blanks_and_comments(word_file):
    assert list(read_words(word_file)) == ["cat", "catalogue", "Cat", "cat"]


def test_loads_explicit_path(word_file, caplog):
    with caplog.at_level(logging.INFO, logger="autocomplete"):
        wl = WordList(word_file, search_paths=[])
    assert wl.source == word_file
    assert len(wl) == 3
    assert wl.suggest("cat") == ["cat", "catalogue"]
    assert wl.suggest("C") == ["Cat"]
    assert "catalogue" in wl
    assert "Loaded 3 words" in caplog.text


def test_suggest_limit(word_file):
    wl = WordList(word_file, search_paths=[])
    assert wl.suggest("cat", limit=1) == ["cat"]


def test_missing_path_falls_back_to_search_paths(tmp_path, word_file):
    missing = str(tmp_path / "nope.txt")
    wl = WordList(missing, search_paths=[str(tmp_path / "also-missing.txt"), word_file])
    assert wl.source == word_file


def test_empty_file_is_skipped(tmp_path, word_file):
    empty = tmp_path / "empty.txt"
    empty.write_text("\n# nothing\n", encoding="utf-8")
    wl = WordList(search_paths=[str(empty), word_file])
    assert wl.source == word_file


def test_builtin_fallback(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="autocomplete"):
        wl = WordList(search_paths=[str(tmp_path / "missing.txt")])
    assert wl.source is None
    assert len(wl) == len(constants.BUILTIN_WORDS)
    assert wl.suggest("communi") == ["communication"]
    assert "built-in" in caplog.text


def test_default_search_paths_used(monkeypatch, word_file):
    monkeypatch.setattr(constants, "DEFAULT_SEARCH_PATHS", [word_file])
    wl = WordList()
    assert wl.source == word_file


def test_undecodable_default_path_is_skipped(tmp_path, word_file):
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"caf\xe9\n")
    wl = WordList(search_paths=[str(bad), word_file])
    assert wl.source == word_file


def test_undecodable_explicit_path_raises(tmp_path):
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"caf\xe9\n")
    with pytest.raises(UnicodeDecodeError):
        WordList(str(bad), search_paths=[])


def test_fills_supplied_index(word_file):
    index = PrefixIndex(["dog"])
    wl = WordList(word_file, index=index, search_paths=[])
    assert wl.index is index
    assert index.find_matches("") == ["Cat", "cat", "catalogue", "dog"]


def test_file_failing_late_adds_no_words(tmp_path, word_file):
    # Bad byte well past the first read chunk, after thousands of good words.
    bad = tmp_path / "late-bad.txt"
    bad.write_bytes(b"".join(b"poison%05d\n" % i for i in range(5000)) + b"caf\xe9\n")
    wl = WordList(search_paths=[str(bad), word_file])
    assert wl.source == word_file
    assert wl.suggest("poison") == []
    assert len(wl) == 3


def test_explicit_file_failing_late_leaves_index_alone(tmp_path):
    bad = tmp_path / "late-bad.txt"
    bad.write_bytes(b"".join(b"poison%05d\n" % i for i in range(5000)) + b"caf\xe9\n")
    index = PrefixIndex(["dog"])
    with pytest.raises(UnicodeDecodeError):
        WordList(str(bad), index=index, search_paths=[])
    assert index.find_matches("") == ["dog"]


def test_missing_explicit_path_warns(tmp_path, word_file, caplog):
    missing = str(tmp_path / "nope.txt")
    with caplog.at_level(logging.DEBUG, logger="autocomplete"):
        WordList(missing, search_paths=[word_file])
    record = next(r for r in caplog.records if missing in r.getMessage())
    assert record.levelno == logging.WARNING
