"""
Move engine: the legality gate, move enumeration, and apply/undo.

A move is legal for a side when
    1. the source square holds a piece of that side,
    2. the destination does not hold a piece of that side, and
    3. the piece's geometry (pieces.legal_geometry) allows it.

try_move() is the entry point for a human move: it checks the gate and
applies the move only on success. The search never uses it; it enumerates
with legal_moves() and then pairs apply_move() with undo_move(), so that
every explored position is restored exactly before the next sibling.
"""

from __future__ import annotations

from dataclasses import dataclass

import chess

from minichess.board import Board, Piece, Side, Square, from_chess_square, to_chess_square
from minichess.constants import BOARD_SIZE
from minichess.pieces import legal_geometry


class NoMoveAvailable(Exception):
    """The side to move has no legal move. Terminal: the side forfeits."""

    def __init__(self, side: Side) -> None:
        super().__init__(f"no legal move available for {side}")
        self.side = side


@dataclass(frozen=True)
class Move:
    src: Square
    dst: Square

    def uci(self) -> str:
        """Coordinate notation, e.g. ``"a2a3"``."""
        return f"{self.src.name}{self.dst.name}"

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """
        Parse coordinate notation such as ``"a2a3"``.

        Raises:
            ValueError: malformed text, the null move, or a promotion suffix.
        """
        parsed = chess.Move.from_uci(text.strip().lower())
        if not parsed:
            raise ValueError(f"null move is not a move: {text!r}")
        if parsed.promotion is not None:
            raise ValueError(f"promotion is not supported: {text!r}")
        return cls(from_chess_square(parsed.from_square), from_chess_square(parsed.to_square))

    def to_chess(self) -> chess.Move:
        return chess.Move(to_chess_square(self.src), to_chess_square(self.dst))

    def __str__(self) -> str:
        return self.uci()


@dataclass(frozen=True)
class Undo:
    """Everything needed to take a move back: the mover and what it landed on."""

    move: Move
    moved: Piece
    captured: Piece | None


# ---------------------------------------------------------------------------
# Legality
# ---------------------------------------------------------------------------


def is_legal(board: Board, side: Side, move: Move) -> bool:
    """Ownership, friendly-fire and geometry checks. Never mutates ``board``."""
    piece = board.piece_at(move.src)
    if piece is None or piece.side is not side:
        return False
    target = board.piece_at(move.dst)
    if target is not None and target.side is side:
        return False
    return legal_geometry(side, piece.kind, move.src, move.dst, board)


def try_move(board: Board, side: Side, src: Square, dst: Square) -> bool:
    """
    Apply the move src -> dst for ``side`` if it is legal.

    Returns:
        True if the move was applied. False if it was rejected, in which
        case the board is unchanged and the caller should ask again.
    """
    move = Move(src, dst)
    if not is_legal(board, side, move):
        return False
    apply_move(board, move)
    return True


def legal_moves(board: Board, side: Side) -> list[Move]:
    """
    Every legal move for ``side``.

    Sources are scanned row-major and, for each source, destinations are
    scanned row-major. The order is stable for an unchanged board, which
    is what makes the search's tie-breaking deterministic.
    """
    destinations = [Square(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
    moves: list[Move] = []
    for src, _ in board.pieces(side):
        for dst in destinations:
            move = Move(src, dst)
            if is_legal(board, side, move):
                moves.append(move)
    return moves


def is_capture(board: Board, move: Move) -> bool:
    return not board.is_empty(move.dst)


# ---------------------------------------------------------------------------
# Apply / undo
# ---------------------------------------------------------------------------


def apply_move(board: Board, move: Move) -> Undo:
    """
    Move the piece on ``move.src`` to ``move.dst`` without any legality check.

    Whatever stood on the destination is dropped from the board and returned
    in the Undo record.
    """
    moved = board.piece_at(move.src)
    assert moved is not None, f"no piece on {move.src}"
    captured = board.piece_at(move.dst)
    board.set_piece_at(move.dst, moved)
    board.set_piece_at(move.src, None)
    return Undo(move, moved, captured)


def undo_move(board: Board, undo: Undo) -> None:
    """Restore both squares touched by ``undo.move`` to their prior occupants."""
    board.set_piece_at(undo.move.src, undo.moved)
    board.set_piece_at(undo.move.dst, undo.captured)
