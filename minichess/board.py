"""
Board model: sides, piece kinds, pieces, squares, and the 8x8 grid.

The board is pure data. It knows which piece sits on which square and
nothing about how pieces move; the rules live in pieces.py and moves.py.

Coordinates are (row, col) pairs. Row 0 is Black's back rank (rank 8) and
row 7 is White's (rank 1); col 0 is the A file. Conversion to and from
square names ("a2", "H8") goes through python-chess so that the naming
convention is exactly the one every chess tool uses.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, NamedTuple

import chess

from minichess.constants import BOARD_SIZE


class Side(enum.Enum):
    """The two players. Values are the python-chess colour booleans."""

    WHITE = chess.WHITE
    BLACK = chess.BLACK

    @property
    def opponent(self) -> Side:
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @property
    def forward(self) -> int:
        """Row delta of a pawn step: White moves up the board (towards row 0)."""
        return -1 if self is Side.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class Kind(enum.IntEnum):
    """Piece kinds. Values are the python-chess piece type constants."""

    PAWN = chess.PAWN
    KNIGHT = chess.KNIGHT
    BISHOP = chess.BISHOP
    ROOK = chess.ROOK
    QUEEN = chess.QUEEN
    KING = chess.KING


@dataclass(frozen=True)
class Piece:
    """A piece never changes side or kind; moves relocate the reference."""

    side: Side
    kind: Kind

    @property
    def symbol(self) -> str:
        """Single letter, uppercase for White (``P``, ``n``, ``K``...)."""
        return chess.Piece(int(self.kind), self.side.value).symbol()

    @classmethod
    def from_symbol(cls, symbol: str) -> Piece:
        p = chess.Piece.from_symbol(symbol)
        return cls(Side(p.color), Kind(p.piece_type))

    def __str__(self) -> str:
        return self.symbol


class Square(NamedTuple):
    row: int
    col: int

    @property
    def name(self) -> str:
        return square_name(self)

    def __str__(self) -> str:
        return square_name(self)


def on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_from_name(name: str) -> Square:
    """
    Parse a square name such as ``"A2"`` or ``"h8"``.

    Files A-H map to columns 0-7 and ranks 1-8 map to rows 7-0.

    Raises:
        ValueError: ``name`` is not a square name.
    """
    return from_chess_square(chess.parse_square(name.strip().lower()))


def square_name(square: Square) -> str:
    return chess.square_name(to_chess_square(square))


def to_chess_square(square: Square) -> int:
    return chess.square(square.col, BOARD_SIZE - 1 - square.row)


def from_chess_square(sq: int) -> Square:
    return Square(BOARD_SIZE - 1 - chess.square_rank(sq), chess.square_file(sq))


class Board:
    """
    An 8x8 grid of optional pieces.

    At most one piece occupies a square. Nothing enforces one king per side:
    capturing a king simply empties its square, which is how games end.
    Equality compares every square, so ``board == snapshot`` is the check
    that a search left the position untouched.
    """

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -----------------------------------------------------------------------
    # Square access
    # -----------------------------------------------------------------------

    def piece_at(self, square: Square) -> Piece | None:
        row, col = square
        assert on_board(row, col), f"square off the board: {square!r}"
        return self._grid[row][col]

    def set_piece_at(self, square: Square, piece: Piece | None) -> None:
        row, col = square
        assert on_board(row, col), f"square off the board: {square!r}"
        self._grid[row][col] = piece

    def remove_piece_at(self, square: Square) -> Piece | None:
        piece = self.piece_at(square)
        self.set_piece_at(square, None)
        return piece

    def is_empty(self, square: Square) -> bool:
        return self.piece_at(square) is None

    def pieces(self, side: Side | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for occupied squares in row-major order."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self._grid[row][col]
                if piece is not None and (side is None or piece.side is side):
                    yield Square(row, col), piece

    def has_king(self, side: Side) -> bool:
        return any(piece.kind is Kind.KING for _, piece in self.pieces(side))

    # -----------------------------------------------------------------------
    # Copying, comparison, text form
    # -----------------------------------------------------------------------

    def copy(self) -> Board:
        board = Board()
        board._grid = [row[:] for row in self._grid]
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f"Board({self.board_fen()!r})"

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_board_fen(cls, fen: str) -> Board:
        """
        Build a board from the piece-placement field of a FEN string.

        Only placement matters here; side to move, castling rights and the
        rest of a full FEN are meaningless to this engine. Pawns on the back
        ranks and missing kings are accepted.

        Raises:
            ValueError: ``fen`` is not a valid placement field.
        """
        fields = fen.split()
        parsed = chess.BaseBoard(fields[0] if fields else "")
        board = cls()
        for sq, p in parsed.piece_map().items():
            board.set_piece_at(from_chess_square(sq), Piece(Side(p.color), Kind(p.piece_type)))
        return board

    def board_fen(self) -> str:
        """Piece-placement field of a FEN string for this position."""
        out = chess.BaseBoard(None)
        out.set_piece_map({
            to_chess_square(square): chess.Piece(int(piece.kind), piece.side.value)
            for square, piece in self.pieces()
        })
        return out.board_fen()


# Back rank from file A to file H.
_BACK_RANK: tuple[Kind, ...] = (
    Kind.ROOK, Kind.KNIGHT, Kind.BISHOP, Kind.QUEEN,
    Kind.KING, Kind.BISHOP, Kind.KNIGHT, Kind.ROOK,
)


def setup_initial_board() -> Board:
    """Return a new board in the standard starting position."""
    board = Board()
    for col, kind in enumerate(_BACK_RANK):
        board.set_piece_at(Square(0, col), Piece(Side.BLACK, kind))
        board.set_piece_at(Square(1, col), Piece(Side.BLACK, Kind.PAWN))
        board.set_piece_at(Square(6, col), Piece(Side.WHITE, Kind.PAWN))
        board.set_piece_at(Square(7, col), Piece(Side.WHITE, kind))
    return board
