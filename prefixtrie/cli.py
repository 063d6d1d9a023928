"""CLI / terminal mode for prefixtrie."""

from __future__ import annotations

import argparse
import logging
import time

from prefixtrie.constants import DEFAULT_COMPLETION_LIMIT
from prefixtrie.wordlist import WordList

log = logging.getLogger("prefixtrie")


def print_help() -> None:
    print("Commands:")
    print("  ? PREFIX              -- list words starting with PREFIX (e.g. ? ca)")
    print("  = WORD                -- look up a single word")
    print("  + WORD [VALUE]        -- add a word, optionally with a value")
    print("  stats                 -- word and node counts")
    print("  help                  -- show this list")
    print("  done                  -- quit")


def print_completions(words: WordList, prefix: str, limit: int | None) -> int:
    t0 = time.time()
    found = words.complete(prefix, limit=limit)
    elapsed = time.time() - t0

    if not found:
        print(f"  No words start with '{prefix}'.")
        return 0
    for w in found:
        value = words.trie.get(w)
        print(f"  {w}" if value is None else f"  {w:<20} {value}")
    log.debug("Completed %r in %.4fs", prefix, elapsed)
    return len(found)


def print_lookup(words: WordList, word: str) -> bool:
    value, found = words.lookup(word)
    if not found:
        hint = " (prefix of other words)" if words.trie.is_prefix(word) else ""
        print(f"  '{word}' not found{hint}.")
        return False
    print(f"  '{word}' found" + ("." if value is None else f": {value}"))
    return True


def run_cli(words: WordList, limit: int | None = DEFAULT_COMPLETION_LIMIT) -> None:
    """Interactive lookup loop in the terminal."""
    print("\n" + "=" * 60)
    print("  PREFIX TRIE -- Interactive Lookup")
    print("=" * 60)
    print()
    print_help()
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        cmd = inp.lower()
        if cmd in ("done", "quit", "exit"):
            break
        if cmd == "help":
            print_help()
            continue
        if cmd == "stats":
            print(f"  {len(words):,} words, {words.trie.count_nodes():,} nodes")
            continue

        op, _, arg = inp.partition(" ")
        arg = arg.strip()
        if op == "?":
            print_completions(words, arg, limit)
        elif op == "=" and arg:
            print_lookup(words, arg)
        elif op == "+" and arg:
            parts = arg.split(maxsplit=1)
            value = parts[1] if len(parts) > 1 else None
            words.add(parts[0], value)
            print(f"  Added '{parts[0]}'")
        else:
            print("  Format: ? PREFIX  or  = WORD  or  + WORD [VALUE]")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Prefix trie -- word lookup and completion over a word list",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file (one word per line, optional TAB value)")
    parser.add_argument("--prefix", type=str, default=None,
                        help="Print completions for PREFIX and exit")
    parser.add_argument("--lookup", type=str, default=None,
                        help="Look up a single word and exit")
    parser.add_argument("--limit", type=int, default=DEFAULT_COMPLETION_LIMIT,
                        help="Maximum number of completions to print (0 for all)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    words = WordList(args.dict)
    limit = args.limit or None

    if args.lookup is not None:
        return 0 if print_lookup(words, args.lookup) else 1
    if args.prefix is not None:
        print_completions(words, args.prefix, limit)
        return 0

    run_cli(words, limit)
    return 0
