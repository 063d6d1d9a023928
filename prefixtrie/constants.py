"""Constants for the prefixtrie package."""

from __future__ import annotations

import os

# Character carried by the root node. Iterating a str never yields "", so it
# cannot collide with a real character.
ROOT_CHAR = ""

# ── Word lists ──────────────────────────────────────────────────────────

VALUE_SEPARATOR = "\t"
COMMENT_PREFIX = "#"

WORD_LIST_SEARCH_PATHS: list[str] = [
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

DEFAULT_COMPLETION_LIMIT = 20
