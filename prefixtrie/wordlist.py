"""Word list loaded from a text file into a trie."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from prefixtrie.constants import (
    DEFAULT_WORDLIST_PATHS,
    LOGGER_NAME,
    MAX_WORD_LENGTH,
    MIN_WORD_LENGTH,
    PAYLOAD_SEPARATOR,
)
from prefixtrie.trie import Trie

log = logging.getLogger(LOGGER_NAME)

_BUILTIN_WORDS = (
    "a", "an", "and", "ant", "any", "are", "art", "as", "at", "ate",
    "be", "bee", "been", "beet", "bet", "by", "can", "car", "card", "care",
    "cart", "cat", "do", "dog", "dot", "in", "inn", "is", "it", "its",
    "tea", "tead", "ted", "ten", "the", "then", "to", "toe", "ton", "too",
)


class WordList:
    """Words (with optional string payloads) held in a :class:`Trie`.

    Lines are ``word`` or ``word<TAB>payload``.  The first existing file
    among ``path`` and the default search paths is loaded; when none exists
    a small built-in list is used instead.
    """

    def __init__(
        self,
        path: str | None = None,
        *,
        words: Iterable[str] | None = None,
        normalize: bool = True,
        min_length: int = MIN_WORD_LENGTH,
        max_length: int = MAX_WORD_LENGTH,
    ):
        self.trie = Trie()
        self.normalize = normalize
        self.min_length = min_length
        self.max_length = max_length
        self.source: str | None = None
        self.duplicates = 0
        if words is not None:
            self._load_lines(words)
        else:
            self._load(path)

    @classmethod
    def from_words(cls, words: Iterable[str], **kwargs) -> WordList:
        """Build from in-memory lines; the filesystem is not searched."""
        return cls(words=words, **kwargs)

    def _load(self, path: str | None) -> None:
        search_paths: list[str] = []
        if path:
            search_paths.append(path)
        search_paths.extend(DEFAULT_WORDLIST_PATHS)

        for candidate in search_paths:
            if os.path.exists(candidate):
                with open(candidate, "r", encoding="utf-8") as f:
                    self._load_lines(f)
                if len(self.trie):
                    self.source = candidate
                    log.info("Loaded %s words from %s", f"{len(self.trie):,}", candidate)
                    return
                log.warning("Word list %s has no usable words, skipping", candidate)

        log.warning("No word list found -- using built-in minimal word list.")
        self._load_lines(_BUILTIN_WORDS)

    def _load_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            word, sep, payload = line.rstrip("\r\n").partition(PAYLOAD_SEPARATOR)
            word = word.strip()
            if self.normalize:
                word = word.lower()
            if not self.min_length <= len(word) <= self.max_length:
                continue
            value = (payload.strip() or None) if sep else None
            if not self.trie.add(word, value):
                self.duplicates += 1
        if self.duplicates:
            log.debug("Skipped %d duplicate words", self.duplicates)

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        """Sorted stored words starting with ``prefix``."""
        if self.normalize:
            prefix = prefix.lower()
        found = sorted(self.trie.keys(prefix))
        return found if limit is None else found[:limit]

    def payload(self, word: str) -> str | None:
        return self.trie.get(word.lower() if self.normalize else word)

    def __contains__(self, word: str) -> bool:
        return (word.lower() if self.normalize else word) in self.trie

    def __len__(self) -> int:
        return len(self.trie)
