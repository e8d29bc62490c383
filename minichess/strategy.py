"""
Computer move-selection policies.

Two independent policies sit behind one interface, select_move(board,
side). They are alternatives and never mixed:

    minimax         Fixed-depth search (search.best_move). The default.
    random-capture  Pick uniformly among captures if there are any,
                    otherwise among all legal moves. No lookahead.
"""

from __future__ import annotations

import logging
import random

from minichess.board import Board, Side
from minichess.constants import (
    DEFAULT_DEPTH,
    DEFAULT_STRATEGY,
    MINIMAX_STRATEGY,
    RANDOM_CAPTURE_STRATEGY,
)
from minichess.moves import Move, NoMoveAvailable, is_capture, legal_moves
from minichess.search import SearchState, best_move

_log = logging.getLogger(__name__)


class Strategy:
    """Base class: pick a legal move for ``side`` without applying it."""

    name: str = ""

    def select_move(self, board: Board, side: Side) -> Move:
        """
        Raises:
            NoMoveAvailable: ``side`` has no legal move.
        """
        raise NotImplementedError


class MinimaxStrategy(Strategy):
    name = MINIMAX_STRATEGY

    def __init__(self, depth: int = DEFAULT_DEPTH, prune: bool = True) -> None:
        self.depth = depth
        self.prune = prune
        self.last_search: SearchState | None = None

    def select_move(self, board: Board, side: Side) -> Move:
        self.last_search = SearchState()
        return best_move(board, side, self.depth, prune=self.prune, state=self.last_search)

    def __repr__(self) -> str:
        return f"MinimaxStrategy(depth={self.depth}, prune={self.prune})"


class RandomCaptureStrategy(Strategy):
    """Prefer any capture, chosen at random; otherwise any move at random."""

    name = RANDOM_CAPTURE_STRATEGY

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def select_move(self, board: Board, side: Side) -> Move:
        moves = legal_moves(board, side)
        if not moves:
            raise NoMoveAvailable(side)
        captures = [m for m in moves if is_capture(board, m)]
        pool = captures or moves
        move = self.rng.choice(pool)
        _log.debug("random-capture side=%s captures=%d moves=%d move=%s",
                   side, len(captures), len(moves), move)
        return move

    def __repr__(self) -> str:
        return "RandomCaptureStrategy()"


def make_strategy(
    name: str = DEFAULT_STRATEGY,
    depth: int = DEFAULT_DEPTH,
    seed: int | None = None,
    prune: bool = True,
) -> Strategy:
    """
    Build a strategy by name.

    ``depth`` and ``prune`` only apply to minimax, ``seed`` only to
    random-capture.

    Raises:
        ValueError: unknown strategy name.
    """
    if name == MINIMAX_STRATEGY:
        return MinimaxStrategy(depth=depth, prune=prune)
    if name == RANDOM_CAPTURE_STRATEGY:
        return RandomCaptureStrategy(random.Random(seed))
    raise ValueError(
        f"unknown strategy {name!r}, expected {MINIMAX_STRATEGY!r} or {RANDOM_CAPTURE_STRATEGY!r}"
    )


STRATEGY_NAMES: tuple[str, ...] = (MINIMAX_STRATEGY, RANDOM_CAPTURE_STRATEGY)
