"""Prefix trie package."""

from prefixtrie.constants import ROOT_CHAR
from prefixtrie.trie import Trie
from prefixtrie.wordlist import WordList, parse_line, read_entries

__all__ = [
    "ROOT_CHAR",
    "Trie",
    "WordList",
    "parse_line",
    "read_entries",
]
