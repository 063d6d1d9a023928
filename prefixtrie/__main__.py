import sys

from prefixtrie.cli import main

if __name__ == "__main__":
    sys.exit(main())
