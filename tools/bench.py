#!/usr/bin/env python3
"""
Benchmark: nodes and time per move, plain minimax versus alpha-beta.

Both searches must choose the same move; alpha-beta only skips work. The
table shows how many nodes each one visits at the same depth and flags
any position where the chosen moves differ, which would be a bug.

Usage: python3 tools/bench.py [--depth N]
"""
import argparse
import os
import sys
import time

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO not in sys.path:
    sys.path.insert(0, REPO)

from minichess.board import Board, Side, setup_initial_board
from minichess.search import SearchState, best_move

# Fixed positions, Black to move. Same positions for every comparison.
POSITIONS = [
    ("Start",         setup_initial_board().board_fen()),
    ("After a2a3",    "rnbqkbnr/pppppppp/8/8/8/P7/1PPPPPPP/RNBQKBNR"),
    ("Open centre",   "rnbqkbnr/ppp2ppp/8/3pp3/3PP3/8/PPP2PPP/RNBQKBNR"),
    ("Hanging queen", "rnbqkbnr/pppp1ppp/8/4p3/3Q4/8/PPPPPPPP/RNB1KBNR"),
    ("Rook ending",   "4k3/8/8/8/8/8/r7/4K2R"),
    ("King hunt",     "4k3/8/8/8/8/8/3q4/4K3"),
]


def run_position(label: str, fen: str, depth: int, prune: bool) -> dict:
    """Search one position and return move, score, nodes and time."""
    board = Board.from_board_fen(fen)
    state = SearchState()
    start = time.monotonic()
    move = best_move(board, Side.BLACK, depth, prune=prune, state=state)
    time_ms = max(1, int((time.monotonic() - start) * 1000))
    return {
        "label": label,
        "move": move.uci(),
        "score": state.best_score,
        "nodes": state.node_count,
        "time_ms": time_ms,
    }


def main() -> None:
    """Run all benchmark positions and print a summary table."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--depth", type=int, default=3)
    args = parser.parse_args()

    print(f"MiniChess search benchmark - depth {args.depth}")
    print()
    print(
        f"{'Position':<14} {'Move':<6} {'Score':>5} "
        f"{'Minimax':>10} {'AlphaBeta':>10} {'Ratio':>6} {'Time(ms)':>9}"
    )
    print("-" * 66)

    mismatches = 0
    for label, fen in POSITIONS:
        plain = run_position(label, fen, args.depth, prune=False)
        pruned = run_position(label, fen, args.depth, prune=True)
        ratio = plain["nodes"] / max(1, pruned["nodes"])
        flag = "" if plain["move"] == pruned["move"] else "  MISMATCH " + plain["move"]
        mismatches += bool(flag)
        print(
            f"{label:<14} {pruned['move']:<6} {pruned['score']:>5} "
            f"{plain['nodes']:>10,} {pruned['nodes']:>10,} {ratio:>6.1f} "
            f"{pruned['time_ms']:>9,}{flag}"
        )

    print()
    if mismatches:
        print(f"{mismatches} position(s) where alpha-beta chose a different move.")
        sys.exit(1)


if __name__ == "__main__":
    main()
