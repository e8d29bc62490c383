"""
Console front end: the human plays White against the computer as Black.

Each turn the board is printed with file letters along the top and rank
numbers down the left, the way a physical board looks from White's side.
The human types a move as two square names, ``A2 A3`` (``a2a3`` works
too). Illegal or unreadable input is reported and the human is asked
again. The computer moves with the configured strategy.

The loop stops when a king is captured, when the computer has no legal
move (it forfeits), or when the human types ``quit`` or closes stdin.

Usage:
    python -m interface.console [--depth N] [--strategy minimax|random-capture]
                                [--seed S] [--no-prune] [-v]
"""

import argparse
import logging
import sys
from typing import TextIO

from minichess.board import Board, Side, Square, square_from_name
from minichess.constants import BOARD_SIZE, DEFAULT_DEPTH, DEFAULT_STRATEGY
from minichess.game import GameState
from minichess.moves import Move, NoMoveAvailable
from minichess.strategy import STRATEGY_NAMES, Strategy, make_strategy

_log = logging.getLogger(__name__)

_FILES = "ABCDEFGH"
_QUIT_WORDS = ("quit", "exit", "q")


def render_board(board: Board) -> str:
    """
    Text drawing of ``board``. Pieces show as side letter plus kind letter
    (``WP``, ``BK``); empty squares show as ``--``.
    """
    lines = ["   " + "  ".join(_FILES)]
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            piece = board.piece_at(Square(row, col))
            if piece is None:
                cells.append("--")
            else:
                cells.append(("W" if piece.side is Side.WHITE else "B") + piece.symbol.upper())
        lines.append(f"{BOARD_SIZE - row} " + " ".join(cells))
    return "\n".join(lines)


def parse_move_text(text: str) -> Move:
    """
    Read a move typed by the human: ``"A2 A3"``, ``"a2-a3"`` or ``"a2a3"``.

    Raises:
        ValueError: the text does not name two squares.
    """
    tokens = text.replace("-", " ").split()
    if len(tokens) == 2:
        return Move(square_from_name(tokens[0]), square_from_name(tokens[1]))
    if len(tokens) == 1 and len(tokens[0]) == 4:
        return Move.from_uci(tokens[0])
    raise ValueError(f"expected two squares like 'A2 A3', got {text.strip()!r}")


class ConsoleGame:
    """
    Turn controller for one human-versus-computer game.

    Attributes:
        state:    Board and side to move. White (the human) starts.
        strategy: Move selection policy for the computer.
        human:    The side the human plays.
    """

    def __init__(
        self,
        strategy: Strategy,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        state: GameState | None = None,
    ) -> None:
        self.state = state or GameState.new()
        self.strategy = strategy
        self.human = Side.WHITE
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _send(self, text: str = "") -> None:
        print(text, file=self._out, flush=True)

    def _prompt(self, text: str) -> str | None:
        self._out.write(text)
        self._out.flush()
        line = self._in.readline()
        return line if line else None

    def human_turn(self) -> bool:
        """
        Ask for moves until one is legal.

        Returns:
            False if the human quit or input ended, True once a move is played.
        """
        while True:
            line = self._prompt("Your move (A2 A3): ")
            if line is None or line.strip().lower() in _QUIT_WORDS:
                return False
            try:
                move = parse_move_text(line)
            except ValueError as exc:
                self._send(f"Could not read move: {exc}")
                continue
            if self.state.push(move):
                return True
            self._send(f"Illegal move: {move}")

    def computer_turn(self) -> Move:
        """
        Raises:
            NoMoveAvailable: the computer cannot move.
        """
        self._send("AI thinking...")
        move = self.state.computer_move(self.strategy)
        self._send(f"AI moved {move}.")
        return move

    def run(self) -> Side | None:
        """
        Play until the game ends.

        Returns:
            The winning side, or None if the human quit.
        """
        while True:
            self._send()
            self._send(render_board(self.state.board))

            winner = self.state.winner()
            if winner is not None:
                self._send(f"{winner.name.capitalize()} wins: the {winner.opponent} king was captured.")
                _log.info("game over, winner=%s", winner)
                return winner

            if self.state.turn is self.human:
                if not self.human_turn():
                    self._send("Game abandoned.")
                    return None
                continue

            try:
                self.computer_turn()
            except NoMoveAvailable as exc:
                self._send(f"The computer has no legal move and forfeits ({exc}).")
                _log.info("game over, computer forfeits")
                return self.human


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play simplified chess against the computer.")
    parser.add_argument("--depth", type=int, default=DEFAULT_DEPTH,
                        help=f"search depth in plies for minimax (default {DEFAULT_DEPTH})")
    parser.add_argument("--strategy", choices=STRATEGY_NAMES, default=DEFAULT_STRATEGY,
                        help=f"computer move policy (default {DEFAULT_STRATEGY})")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for the random-capture strategy")
    parser.add_argument("--no-prune", action="store_true",
                        help="search with plain minimax instead of alpha-beta")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    if args.depth < 0:
        build_parser().error("--depth must be >= 0")
    strategy = make_strategy(args.strategy, depth=args.depth, seed=args.seed, prune=not args.no_prune)
    _log.debug("starting console game with %r", strategy)
    ConsoleGame(strategy).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
