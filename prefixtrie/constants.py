"""Defaults shared by the loader, the shell and the entry script."""

from __future__ import annotations

import os

LOGGER_NAME = "prefixtrie"

# Word lists tried in order when no explicit path is given.
DEFAULT_WORDLIST_PATHS: tuple[str, ...] = (
    "words.txt",
    "wordlist.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
)

MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 64

# word<TAB>payload
PAYLOAD_SEPARATOR = "\t"
