"""
Engine constants: piece values, search defaults, and board geometry.

Every tunable number used by the engine and its front ends lives here so
that no other module has to introduce magic numbers. The console and the
web endpoint override the search defaults per game or per request; the
core never reads configuration from anywhere else.

Piece values are whole pawns, not centipawns. The evaluation only counts
material, so there is nothing finer-grained to express.
"""

import chess

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------
# Row 0 is Black's back rank, row 7 is White's. Column 0 is file A.

BOARD_SIZE: int = 8

# ---------------------------------------------------------------------------
# Piece values (pawns)
# ---------------------------------------------------------------------------
# The king is worth far more than everything else combined, so losing it
# always dominates the score. That is what makes the search steer towards
# king captures, which is how a game ends here.

PAWN_VALUE: int = 1
KNIGHT_VALUE: int = 3
BISHOP_VALUE: int = 3
ROOK_VALUE: int = 5
QUEEN_VALUE: int = 9
KING_VALUE: int = 100

# Keyed by python-chess piece type constants, which Kind mirrors.
PIECE_VALUES: dict[int, int] = {
    chess.PAWN:   PAWN_VALUE,
    chess.KNIGHT: KNIGHT_VALUE,
    chess.BISHOP: BISHOP_VALUE,
    chess.ROOK:   ROOK_VALUE,
    chess.QUEEN:  QUEEN_VALUE,
    chess.KING:   KING_VALUE,
}

# ---------------------------------------------------------------------------
# Search parameters
# ---------------------------------------------------------------------------
# DEFAULT_DEPTH counts plies including the root move: 2 means one computer
# move followed by every human reply.
DEFAULT_DEPTH: int = 2

# Upper bound for depth requested over HTTP. There is no pruning by time,
# so depth is the only thing protecting the worker pool.
MAX_WEB_DEPTH: int = 4

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------
MINIMAX_STRATEGY: str = "minimax"
RANDOM_CAPTURE_STRATEGY: str = "random-capture"
DEFAULT_STRATEGY: str = MINIMAX_STRATEGY

# ---------------------------------------------------------------------------
# Special scores
# ---------------------------------------------------------------------------
# SCORE_BOUND is the search's infinity. It only has to exceed any material
# balance (two full armies are worth well under 300), and staying an int
# keeps every comparison in the search exact.
SCORE_BOUND: int = 1_000_000
