"""
Minimal chess engine package.

Simplified chess between a human (White) and a computer (Black) that picks
moves with fixed-depth minimax over a material-only evaluation. There is
no check, castling, en passant or promotion; a game ends when a king is
captured.

Modules:
    constants - Piece values, search defaults, strategy names
    board     - Sides, piece kinds, squares, the 8x8 board, initial setup
    pieces    - Per-kind movement geometry
    moves     - Legality gate, enumeration, apply/undo
    evaluate  - Material evaluation from Black's perspective
    search    - Minimax and alpha-beta, best_move()
    strategy  - Minimax and random-capture move selection policies
    game      - GameState and king-capture termination
"""

from minichess.board import Board, Kind, Piece, Side, Square, setup_initial_board, square_from_name
from minichess.evaluate import evaluate
from minichess.game import GameState
from minichess.moves import Move, NoMoveAvailable, apply_move, legal_moves, try_move, undo_move
from minichess.search import SearchState, best_move
from minichess.strategy import MinimaxStrategy, RandomCaptureStrategy, Strategy, make_strategy

__all__ = [
    "Board",
    "GameState",
    "Kind",
    "MinimaxStrategy",
    "Move",
    "NoMoveAvailable",
    "Piece",
    "RandomCaptureStrategy",
    "SearchState",
    "Side",
    "Square",
    "Strategy",
    "apply_move",
    "best_move",
    "evaluate",
    "legal_moves",
    "make_strategy",
    "setup_initial_board",
    "square_from_name",
    "try_move",
    "undo_move",
]
