"""Prefix trie keyed by token sequences, with optional per-key payloads."""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Iterator

from prefixtrie.constants import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


class InvalidKeyError(TypeError):
    """Raised when a key is not an iterable of hashable tokens."""


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("token", "payload", "children", "is_terminal")

    def __init__(self, token: Hashable | None = None):
        self.token = token
        self.payload: Any = None
        self.children: dict[Hashable, TrieNode] = {}
        self.is_terminal: bool = False

    def __repr__(self) -> str:
        mark = "*" if self.is_terminal else ""
        return f"TrieNode({self.token!r}{mark}, children={len(self.children)})"


def _tokens(key: Iterable[Hashable]) -> tuple[Hashable, ...]:
    """Materialise ``key`` so bad input fails before the tree is touched."""
    try:
        tokens = tuple(key)
    except TypeError:
        raise InvalidKeyError(f"key must be iterable, got {type(key).__name__}") from None
    for tok in tokens:
        try:
            hash(tok)
        except TypeError:
            raise InvalidKeyError(f"unhashable token {tok!r} in key") from None
    return tokens


def _join(path: list[Hashable]) -> str | tuple[Hashable, ...]:
    if all(isinstance(tok, str) for tok in path):
        return "".join(path)
    return tuple(path)


class Trie:
    """Prefix trie with terminal markers and a running key count.

    Prefix nodes created while inserting a longer key are not keys
    themselves; only nodes flagged terminal are.
    """

    def __init__(self):
        self.root = TrieNode()
        self._count = 0

    # mutation

    def add(self, key: Iterable[Hashable], payload: Any = None) -> bool:
        """Store ``key``.  False if it was already stored; the payload is kept."""
        node = self._walk_create(key)
        if node.is_terminal:
            return False
        node.is_terminal = True
        node.payload = payload
        self._count += 1
        return True

    def update(self, key: Iterable[Hashable], payload: Any = None) -> bool:
        """Replace the payload of a stored key.  False if ``key`` is not stored.

        Missing path nodes are still created, as in :meth:`add`.
        """
        node = self._walk_create(key)
        if not node.is_terminal:
            return False
        node.payload = payload
        return True

    def remove(self, key: Iterable[Hashable]) -> bool:
        """Unmark ``key``.  Its nodes stay in place."""
        node = self._walk(key)
        if node is None or not node.is_terminal:
            return False
        node.is_terminal = False
        node.payload = None
        self._count -= 1
        return True

    def clear(self) -> None:
        log.debug("Clearing trie with %d keys", self._count)
        self.root = TrieNode()
        self._count = 0

    # lookup

    def contains(self, key: Iterable[Hashable]) -> bool:
        node = self._walk(key)
        return node is not None and node.is_terminal

    def get(self, key: Iterable[Hashable]) -> Any:
        """Payload of ``key``, or None when the key is not stored.

        A key stored without a payload also reads as None.
        """
        node = self._walk(key)
        if node is None or not node.is_terminal:
            return None
        return node.payload

    def find(self, prefix: Iterable[Hashable]) -> TrieNode | None:
        """Node at the end of ``prefix`` (terminal or not), or None."""
        return self._walk(prefix)

    @property
    def size(self) -> int:
        return self._count

    @property
    def is_empty(self) -> bool:
        return self._count == 0

    # enumeration

    def to_array(self) -> list[str | tuple[Hashable, ...]]:
        """Every stored key, each once, in no particular order.

        Keys whose tokens are all strings come back joined into one string,
        so ["ab", "c"] and ["a", "bc"] both read as "abc".  Other keys come
        back as tuples.
        """
        return list(self._collect(self.root, []))

    def keys(self, prefix: Iterable[Hashable] = ()) -> Iterator[str | tuple[Hashable, ...]]:
        """Stored keys starting with ``prefix``."""
        path = list(_tokens(prefix))
        node = self._walk(path)
        if node is None:
            return iter(())
        return self._collect(node, path)

    def _collect(self, node: TrieNode, path: list[Hashable]) -> Iterator[str | tuple[Hashable, ...]]:
        # Explicit stack; keys can be longer than the recursion limit.
        stack = [(node, path)]
        while stack:
            node, path = stack.pop()
            if node.is_terminal:
                yield _join(path)
            for tok, child in node.children.items():
                stack.append((child, path + [tok]))

    # traversal

    def _walk(self, key: Iterable[Hashable]) -> TrieNode | None:
        node = self.root
        for tok in _tokens(key):
            node = node.children.get(tok)
            if node is None:
                return None
        return node

    def _walk_create(self, key: Iterable[Hashable]) -> TrieNode:
        node = self.root
        for tok in _tokens(key):
            if tok not in node.children:
                node.children[tok] = TrieNode(tok)
            node = node.children[tok]
        return node

    # container protocol

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        try:
            return self.contains(key)
        except InvalidKeyError:
            return False

    def __iter__(self) -> Iterator[str | tuple[Hashable, ...]]:
        return self._collect(self.root, [])

    def __repr__(self) -> str:
        return f"Trie(size={self._count})"
