#!/usr/bin/env python3
"""
prefixtrie shell -- explore a prefix trie from the terminal.

Usage:
    python prefixtrie_shell.py                  # empty trie
    python prefixtrie_shell.py --words FILE     # preload a word list
    python prefixtrie_shell.py -v               # debug logging
"""

from __future__ import annotations

import argparse
import logging

from prefixtrie.cli import run_shell
from prefixtrie.constants import LOGGER_NAME
from prefixtrie.trie import Trie
from prefixtrie.wordlist import WordList

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger(LOGGER_NAME)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="prefixtrie -- interactive prefix tree shell",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to a word list (word or word<TAB>payload per line)")
    parser.add_argument("--no-normalize", action="store_true",
                        help="Keep word case as written in the word list")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.words:
        trie = WordList(args.words, normalize=not args.no_normalize).trie
    else:
        trie = Trie()
    log.debug("Starting shell with %d keys", len(trie))

    run_shell(trie)


if __name__ == "__main__":
    main()
