"""
Static material evaluation.

The score is always from Black's point of view, because the computer
always plays Black: positive means Black is ahead, negative means White
is. This is deliberately not the negamax "side to move" convention. The
search maximizes on Black's plies and minimizes on White's instead of
negating scores.

Only material counts. There are no piece-square tables, mobility or king
safety terms. The king carries a large value so that a position without
a king scores as lost for that side.
"""

from minichess.board import Board, Side
from minichess.constants import PIECE_VALUES


def evaluate(board: Board) -> int:
    """
    Material balance in pawns, Black minus White.

    Args:
        board: The position to score. Not modified.

    Returns:
        Sum of piece values, counted positive for Black pieces and negative
        for White pieces. The initial position scores 0.

    Example:
        >>> from minichess.board import setup_initial_board
        >>> evaluate(setup_initial_board())
        0
    """
    score = 0
    for _, piece in board.pieces():
        value = PIECE_VALUES[piece.kind]
        score += value if piece.side is Side.BLACK else -value
    return score
