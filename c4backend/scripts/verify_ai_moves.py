#!/usr/bin/env python3
"""
AI Move Verification Script

Plays the search engine against a handful of tactical positions and checks
that it picks the expected column at every configured depth range.

Exit Codes:
  0: All positions passed
  1: One or more positions failed
"""

import argparse
import logging
import os
import sys
from typing import List, Tuple

# Add project root to path so we can import from c4backend.app
sys.path.append(os.path.join(os.path.dirname(__file__), '../../'))

from c4backend.app.engine.board import BoardState
from c4backend.app.engine.search import SearchEngine
from c4backend.app.models.enums import Player

H, A = int(Player.HUMAN), int(Player.AI)


def _empty() -> List[List[int]]:
    return [[0] * 7 for _ in range(6)]


def _block_bottom_row() -> List[List[int]]:
    # Human X X X . on the bottom row; AI must take column 3
    m = _empty()
    m[5][0] = m[5][1] = m[5][2] = H
    m[5][5] = m[5][6] = A
    return m


def _win_vertical() -> List[List[int]]:
    # AI has three stacked in column 6
    m = _empty()
    m[5][6] = m[4][6] = m[3][6] = A
    m[5][0] = m[5][1] = m[4][0] = H
    return m


def _win_diagonal() -> List[List[int]]:
    # AI completes the / diagonal ending at (2, 3)
    m = _empty()
    m[5][0] = A
    m[5][1] = H; m[4][1] = A
    m[5][2] = H; m[4][2] = H; m[3][2] = A
    m[5][3] = H; m[4][3] = A; m[3][3] = H
    m[5][6] = A
    return m


# (name, matrix, expected column)
POSITIONS: List[Tuple[str, List[List[int]], int]] = [
    ("block bottom row", _block_bottom_row(), 3),
    ("win vertical", _win_vertical(), 6),
    ("win diagonal", _win_diagonal(), 3),
]


def verify(engine: SearchEngine) -> bool:
    print("-" * 80)
    print(f"{'POSITION':<24} | {'STATUS':<8} | {'DETAILS'}")
    print("-" * 80)

    results = {}
    for name, matrix, expected in POSITIONS:
        board = BoardState.from_rows(matrix, current_player=Player.AI)
        result = engine.search(board, Player.AI)
        success = result.best_column == expected
        results[name] = success

        status_icon = "PASS" if success else "FAIL"
        print(
            f"{name:<24} | {status_icon:<8} | column={result.best_column} expected={expected} "
            f"depth={result.depth_reached} nodes={result.nodes_searched} {result.time_ms}ms"
        )

    print("-" * 80)
    passed_count = sum(results.values())
    print(f"Summary: {passed_count}/{len(results)} Passed")
    return passed_count == len(results)


def main():
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--min-depth", type=int, default=3)
    parser.add_argument("--max-depth", type=int, default=7)
    parser.add_argument("--verbose", action="store_true", help="Log per-depth search stats")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    engine = SearchEngine(min_depth=args.min_depth, max_depth=args.max_depth)
    sys.exit(0 if verify(engine) else 1)


if __name__ == "__main__":
    main()
