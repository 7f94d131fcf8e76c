"""Shared pytest fixtures for prefixtrie tests."""

import pytest

from prefixtrie.trie import Trie


@pytest.fixture
def trie():
    """Empty trie."""
    return Trie()


@pytest.fixture
def animals():
    """Trie holding cat, car and dog with integer payloads."""
    t = Trie()
    t.add("cat", 1)
    t.add("car", 2)
    t.add("dog", 3)
    return t


@pytest.fixture
def words_file(tmp_path):
    """Word list on disk with payloads, blanks, duplicates and an overlong line."""
    path = tmp_path / "words.txt"
    path.write_text(
        "Tea\thot drink\n"
        "ten\n"
        "\n"
        "to\t\n"
        "tea\tduplicate\n"
        + "x" * 80 + "\n"
        "inn\tlodging\n",
        encoding="utf-8",
    )
    return path
