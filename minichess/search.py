"""
Fixed-depth minimax search over the move engine, with optional alpha-beta.

The evaluation is always from Black's perspective (see evaluate.py), so
this is classic two-sided minimax rather than negamax: nodes where Black
is to move take the maximum child score, nodes where White is to move
take the minimum. A node at depth 0, or one where the side to move has no
legal move, is a leaf and gets the static evaluation. There is no special
score for being unable to move.

Every move explored is applied to the caller's board and undone before
the next sibling is tried. The board handed to best_move() is therefore
identical on return to what it was on entry; applying the chosen move is
the caller's job.

Depth counts plies including the root move. best_move(depth=2) plays each
Black candidate, then tries every White reply and scores the resulting
positions. Depths 0 and 1 both score the positions right after each
candidate, i.e. they pick the best immediate material outcome.

Alpha-beta is a pure speed-up. The root search below passes its current
best score as the child's window bound and only replaces the best move on
a strict improvement, so with or without pruning the first move reaching
the best score is chosen.
"""

import logging
from dataclasses import dataclass

from minichess.board import Board, Side
from minichess.constants import DEFAULT_DEPTH, SCORE_BOUND
from minichess.evaluate import evaluate
from minichess.moves import Move, NoMoveAvailable, apply_move, legal_moves, undo_move

_log = logging.getLogger(__name__)


@dataclass
class SearchState:
    """
    Counters and results of one root search.

    The caller may pass its own instance to best_move() to read the node
    count and the score of the chosen move afterwards; the UCI adapter
    reports both in its ``info`` line and the benchmark compares node
    counts with and without pruning.

    Attributes:
        node_count: Positions visited, including leaves and the root's
                    children.
        best_move:  Move chosen at the root, or None before a search.
        best_score: Score of best_move from Black's perspective.
    """

    node_count: int = 0
    best_move: Move | None = None
    best_score: int = 0


def _maximizing(side: Side) -> bool:
    return side is Side.BLACK


def minimax(board: Board, depth: int, to_move: Side, state: SearchState) -> int:
    """
    Plain minimax value of ``board`` with ``to_move`` to play.

    Args:
        board:   Position to search. Modified in place during the search and
                 restored before returning.
        depth:   Remaining plies. At 0 the position is scored statically.
        to_move: Side whose moves are expanded at this node.
        state:   Node counter.

    Returns:
        Score from Black's perspective.
    """
    state.node_count += 1
    if depth <= 0:
        return evaluate(board)

    moves = legal_moves(board, to_move)
    if not moves:
        return evaluate(board)

    maximizing = _maximizing(to_move)
    best = -SCORE_BOUND if maximizing else SCORE_BOUND
    for move in moves:
        undo = apply_move(board, move)
        score = minimax(board, depth - 1, to_move.opponent, state)
        undo_move(board, undo)
        best = max(best, score) if maximizing else min(best, score)
    return best


def alphabeta(
    board: Board,
    depth: int,
    alpha: int,
    beta: int,
    to_move: Side,
    state: SearchState,
) -> int:
    """
    Fail-hard alpha-beta version of minimax().

    The result equals the minimax value whenever that value lies strictly
    inside (alpha, beta). Otherwise it is only a bound: at most alpha when
    the true value is at most alpha, at least beta when the true value is
    at least beta.

    Args:
        board:   Position to search, restored before returning.
        depth:   Remaining plies.
        alpha:   Score Black is already guaranteed elsewhere.
        beta:    Score White is already guaranteed elsewhere.
        to_move: Side whose moves are expanded at this node.
        state:   Node counter.

    Returns:
        Score from Black's perspective, clamped as described above.
    """
    state.node_count += 1
    if depth <= 0:
        return evaluate(board)

    moves = legal_moves(board, to_move)
    if not moves:
        return evaluate(board)

    if _maximizing(to_move):
        for move in moves:
            undo = apply_move(board, move)
            score = alphabeta(board, depth - 1, alpha, beta, to_move.opponent, state)
            undo_move(board, undo)
            if score >= beta:
                return beta
            if score > alpha:
                alpha = score
        return alpha

    for move in moves:
        undo = apply_move(board, move)
        score = alphabeta(board, depth - 1, alpha, beta, to_move.opponent, state)
        undo_move(board, undo)
        if score <= alpha:
            return alpha
        if score < beta:
            beta = score
    return beta


def best_move(
    board: Board,
    side: Side = Side.BLACK,
    depth: int = DEFAULT_DEPTH,
    prune: bool = True,
    state: SearchState | None = None,
) -> Move:
    """
    Choose a move for ``side`` by searching ``depth`` plies.

    Black keeps the first candidate with a strictly higher score than any
    earlier one; White keeps the first with a strictly lower score. Ties
    therefore go to the earliest move in legal_moves() order.

    Args:
        board: Current position. Restored to its original state on return.
        side:  Side to choose a move for. The computer plays Black.
        depth: Plies to search, counting the root move.
        prune: Use alpha-beta. The chosen move is the same either way.
        state: Optional SearchState to collect node count and best score.

    Returns:
        The chosen move. It has not been applied.

    Raises:
        NoMoveAvailable: ``side`` has no legal move.
    """
    if state is None:
        state = SearchState()

    moves = legal_moves(board, side)
    if not moves:
        raise NoMoveAvailable(side)

    maximizing = _maximizing(side)
    child_depth = max(depth - 1, 0)
    best_score = -SCORE_BOUND if maximizing else SCORE_BOUND
    chosen = moves[0]

    for move in moves:
        undo = apply_move(board, move)
        if not prune:
            score = minimax(board, child_depth, side.opponent, state)
        elif maximizing:
            score = alphabeta(board, child_depth, best_score, SCORE_BOUND, side.opponent, state)
        else:
            score = alphabeta(board, child_depth, -SCORE_BOUND, best_score, side.opponent, state)
        undo_move(board, undo)

        if (score > best_score) if maximizing else (score < best_score):
            best_score = score
            chosen = move

    state.best_move = chosen
    state.best_score = best_score
    _log.debug(
        "search side=%s depth=%d prune=%s nodes=%d move=%s score=%d",
        side, depth, prune, state.node_count, chosen, best_score,
    )
    return chosen
