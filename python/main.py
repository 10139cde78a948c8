#!/usr/bin/env python3
"""15-puzzle solver launcher.

Usage::

    python main.py < board.txt       # solve a board read from stdin
    python main.py --random          # solve a random solvable board
    python main.py -f rich --replay  # Rich terminal, board after each move

See ``python main.py --help`` for search limits and heuristics.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fifteen.__main__ import app  # noqa: E402

if __name__ == "__main__":
    app()
