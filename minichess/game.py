"""
Game state: the board plus the side to move, and king-capture termination.

There is no check or checkmate in this engine. A game is over as soon as
one side's king is no longer on the board; the side that still has its
king wins. The front ends (console, UCI, web) each own a GameState and
drive it; the core functions they call take the board and side
explicitly and keep nothing between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from minichess.board import Board, Side, Square, setup_initial_board
from minichess.moves import Move, apply_move, try_move
from minichess.strategy import Strategy

_log = logging.getLogger(__name__)


@dataclass
class GameState:
    board: Board = field(default_factory=setup_initial_board)
    turn: Side = Side.WHITE

    @classmethod
    def new(cls) -> GameState:
        return cls()

    def play(self, src: Square, dst: Square) -> bool:
        """
        Play src -> dst for the side to move and pass the turn.

        Returns False and changes nothing when the move is illegal.
        """
        if not try_move(self.board, self.turn, src, dst):
            return False
        _log.debug("%s played %s%s", self.turn, src, dst)
        self.turn = self.turn.opponent
        return True

    def push(self, move: Move) -> bool:
        return self.play(move.src, move.dst)

    def computer_move(self, strategy: Strategy) -> Move:
        """
        Let ``strategy`` choose a move for the side to move, play it, and
        pass the turn.

        Raises:
            NoMoveAvailable: the side to move cannot move.
        """
        move = strategy.select_move(self.board, self.turn)
        apply_move(self.board, move)
        _log.debug("%s (computer) played %s", self.turn, move)
        self.turn = self.turn.opponent
        return move

    def winner(self) -> Side | None:
        """The side whose king is still standing once the other king is gone."""
        white_king = self.board.has_king(Side.WHITE)
        black_king = self.board.has_king(Side.BLACK)
        if white_king and not black_king:
            return Side.WHITE
        if black_king and not white_king:
            return Side.BLACK
        return None

    def is_over(self) -> bool:
        return self.winner() is not None
