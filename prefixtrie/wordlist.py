"""Word list loading with trie-backed prefix search."""

from __future__ import annotations

import logging
import os
from typing import Iterator

from prefixtrie.constants import COMMENT_PREFIX, VALUE_SEPARATOR, WORD_LIST_SEARCH_PATHS
from prefixtrie.trie import Trie

log = logging.getLogger("prefixtrie")


def parse_line(line: str) -> tuple[str, str | None] | None:
    """Parse one word-list line into ``(word, value)``.

    Blank lines and ``#`` comments give ``None``.  A line of the form
    ``word<TAB>value`` carries a value; a bare word does not.
    """
    line = line.strip()
    if not line or line.startswith(COMMENT_PREFIX):
        return None
    word, sep, value = line.partition(VALUE_SEPARATOR)
    word = word.strip()
    if not word:
        return None
    if not sep:
        return word, None
    return word, value.strip()


def read_entries(path: str) -> Iterator[tuple[str, str | None]]:
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            entry = parse_line(line)
            if entry is not None:
                yield entry


class WordList:
    """Word list held in a trie, for lookups and completions."""

    def __init__(self, path: str | None = None, search: bool = True):
        self.trie: Trie[str] = Trie()
        self.source: str | None = None
        self._count = 0
        self._load(path, search)

    def _load(self, path: str | None, search: bool) -> None:
        search_paths: list[str] = []
        if path:
            if os.path.isfile(path):
                search_paths.append(path)
            else:
                log.warning("Word list %s not found", path)
        if search:
            search_paths.extend(WORD_LIST_SEARCH_PATHS)

        for candidate in search_paths:
            if not os.path.isfile(candidate):
                continue
            for word, value in read_entries(candidate):
                self.add(word, value)
            if self._count:
                self.source = candidate
                log.info("Loaded %s words from %s", f"{self._count:,}", candidate)
                return
            log.debug("Word list %s is empty, skipping", candidate)

        log.warning("No word list found -- starting with an empty trie.")

    def add(self, word: str, value: str | None = None) -> None:
        if word not in self.trie:
            self._count += 1
        self.trie.insert(word, value)

    def lookup(self, word: str) -> tuple[str | None, bool]:
        return self.trie.find(word)

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        """Return the stored words starting with ``prefix``, sorted."""
        words = sorted(self.trie.find_suffixes(prefix))
        if limit is not None:
            words = words[:limit]
        log.debug("%d completions for %r", len(words), prefix)
        return words

    def __contains__(self, word: str) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return self._count
