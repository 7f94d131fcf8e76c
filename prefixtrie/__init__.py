"""prefixtrie — prefix tree with terminal markers and payloads."""

from prefixtrie.constants import DEFAULT_WORDLIST_PATHS, LOGGER_NAME
from prefixtrie.trie import InvalidKeyError, Trie, TrieNode
from prefixtrie.wordlist import WordList
from prefixtrie.cli import run_shell

__all__ = [
    "DEFAULT_WORDLIST_PATHS",
    "LOGGER_NAME",
    "InvalidKeyError",
    "Trie",
    "TrieNode",
    "WordList",
    "run_shell",
]
