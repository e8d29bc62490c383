"""
Per-piece movement geometry.

legal_geometry() answers one question: can a piece of this side and kind
travel from src to dst on this board, judging only the shape of the move
and the squares it passes over? It does not know whose turn it is, does
not look at the colour of whatever sits on dst (except through the pawn's
occupancy rule), and never considers king safety. The ownership and
friendly-fire checks live in moves.py.

Simplified rules compared to real chess:
    - Pawns move one square forward only: no double step, no en passant,
      no promotion.
    - A pawn's diagonal step only requires dst to be occupied. The colour
      of the occupant is not checked here.
    - Kings move one square in any direction with no check detection.
"""

from __future__ import annotations

from typing import Callable

from minichess.board import Board, Kind, Side, Square

GeometryRule = Callable[[Side, Square, Square, Board], bool]


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _path_clear(src: Square, dst: Square, board: Board) -> bool:
    """
    True when every square strictly between src and dst is empty.

    src and dst must share a row, a column, or a diagonal. Neither endpoint
    is inspected. The walk stops only when both coordinates reach dst
    together, which is what keeps the last diagonal square from being
    skipped.
    """
    dr = _sign(dst.row - src.row)
    dc = _sign(dst.col - src.col)
    row, col = src.row + dr, src.col + dc
    while (row, col) != (dst.row, dst.col):
        if not board.is_empty(Square(row, col)):
            return False
        row += dr
        col += dc
    return True


# ---------------------------------------------------------------------------
# Rules per kind
# ---------------------------------------------------------------------------


def _pawn(side: Side, src: Square, dst: Square, board: Board) -> bool:
    if dst.row != src.row + side.forward:
        return False
    if dst.col == src.col:
        return board.is_empty(dst)
    if abs(dst.col - src.col) == 1:
        return not board.is_empty(dst)
    return False


def _rook(side: Side, src: Square, dst: Square, board: Board) -> bool:
    if src.row != dst.row and src.col != dst.col:
        return False
    return _path_clear(src, dst, board)


def _knight(side: Side, src: Square, dst: Square, board: Board) -> bool:
    dr, dc = abs(dst.row - src.row), abs(dst.col - src.col)
    return (dr, dc) in ((1, 2), (2, 1))


def _bishop(side: Side, src: Square, dst: Square, board: Board) -> bool:
    if abs(dst.row - src.row) != abs(dst.col - src.col):
        return False
    return _path_clear(src, dst, board)


def _queen(side: Side, src: Square, dst: Square, board: Board) -> bool:
    return _rook(side, src, dst, board) or _bishop(side, src, dst, board)


def _king(side: Side, src: Square, dst: Square, board: Board) -> bool:
    return abs(dst.row - src.row) <= 1 and abs(dst.col - src.col) <= 1


_RULES: dict[Kind, GeometryRule] = {
    Kind.PAWN:   _pawn,
    Kind.ROOK:   _rook,
    Kind.KNIGHT: _knight,
    Kind.BISHOP: _bishop,
    Kind.QUEEN:  _queen,
    Kind.KING:   _king,
}


def legal_geometry(side: Side, kind: Kind, src: Square, dst: Square, board: Board) -> bool:
    """
    Return True if a ``kind`` piece of ``side`` may move from src to dst.

    Pure function of its arguments; the board is only read. Standing still
    (src == dst) is never a move.

    Args:
        side:  Owner of the moving piece. Only pawn direction depends on it.
        kind:  Kind of the moving piece.
        src:   Square the piece starts on.
        dst:   Square the piece would land on.
        board: Position used for path-blocking and pawn occupancy checks.

    Returns:
        Whether the move has a legal shape for this piece.
    """
    if src == dst:
        return False
    return _RULES[kind](side, src, dst, board)
