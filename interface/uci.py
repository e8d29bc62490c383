"""
UCI (Universal Chess Interface) protocol handler.

UCI is the text protocol chess GUIs and match runners use to talk to an
engine over stdin/stdout. This adapter lets those tools drive the engine,
with the caveat that the engine plays its own simplified rules: no check,
castling, en passant or promotion, and kings can be captured. A GUI
enforcing real chess may reject some of its moves.

Supported commands:
    GUI → Engine: uci, isready, ucinewgame, setoption, position, go, stop, quit
    Engine → GUI: id name, id author, option, uciok, readyok, info, bestmove

Positions come from ``startpos`` or the placement and side-to-move fields
of a ``fen``, followed by an optional ``moves`` list replayed with this
engine's legality rules. ``go depth N`` searches N plies; time controls
are accepted and ignored because the search is bounded by depth only.

The search runs to completion on the command loop. It has no stop points,
so ``stop`` has nothing to interrupt.

Critical rule: NEVER print to stdout except for valid UCI responses.
Debug output must go to stderr.
"""

import sys
import os
import time

# ---------------------------------------------------------------------------
# Path setup: make 'minichess' importable when this script is run directly
# as `python interface/uci.py` from the repo root.
# ---------------------------------------------------------------------------
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from minichess.board import Board, Side
from minichess.constants import DEFAULT_DEPTH, DEFAULT_STRATEGY, MINIMAX_STRATEGY
from minichess.game import GameState
from minichess.moves import Move, NoMoveAvailable
from minichess.search import SearchState, best_move
from minichess.strategy import STRATEGY_NAMES, Strategy, make_strategy

_MAX_DEPTH = 8
_MAX_SEED = 2**31 - 1


def _send(line: str) -> None:
    """Write one protocol line to stdout and flush it right away."""
    print(line, flush=True)


def _log(message: str) -> None:
    """Diagnostics go to stderr; stdout is reserved for protocol lines."""
    print(message, file=sys.stderr, flush=True)


class UciHandler:
    """
    Stateful handler for the UCI protocol.

    Attributes:
        state:    Current position and side to move, updated by "position".
        depth:    Default search depth for "go" without a depth argument.
        strategy: Name of the move selection policy ("Strategy" option).
        seed:     Seed for the random-capture policy, None for fresh entropy.
        policy:   The move selection policy built from strategy and seed.
                  It lives across "go" commands so a seeded random stream
                  keeps advancing; "setoption" and "ucinewgame" rebuild it.
    """

    def __init__(self) -> None:
        self.state: GameState = GameState.new()
        self.depth: int = DEFAULT_DEPTH
        self.strategy: str = DEFAULT_STRATEGY
        self.seed: int | None = None
        self.policy: Strategy = self._build_policy()

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_uci(self) -> None:
        """Identify the engine and list its options, then "uciok"."""
        _send("id name MiniChess")
        _send("id author MiniChess Project")
        _send(f"option name Depth type spin default {DEFAULT_DEPTH} min 0 max {_MAX_DEPTH}")
        choices = " ".join(f"var {name}" for name in STRATEGY_NAMES)
        _send(f"option name Strategy type combo default {DEFAULT_STRATEGY} {choices}")
        _send(f"option name Seed type spin default -1 min -1 max {_MAX_SEED}")
        _send("uciok")

    def handle_isready(self) -> None:
        _send("readyok")

    def handle_ucinewgame(self) -> None:
        self.state = GameState.new()
        self.policy = self._build_policy()

    def handle_setoption(self, tokens: list[str]) -> None:
        """
        Apply ``setoption name <Name> value <Value>``.

        Known options: Depth (0..8), Strategy (minimax | random-capture),
        Seed (integer, negative for an unseeded stream). Anything else is
        logged and ignored.
        """
        if "name" not in tokens or "value" not in tokens:
            _log(f"uci: malformed setoption: {' '.join(tokens)}")
            return
        name_idx, value_idx = tokens.index("name"), tokens.index("value")
        name = " ".join(tokens[name_idx + 1:value_idx]).lower()
        value = " ".join(tokens[value_idx + 1:])

        try:
            if name == "depth":
                self.depth = max(0, min(int(value), _MAX_DEPTH))
            elif name == "strategy":
                if value not in STRATEGY_NAMES:
                    raise ValueError(f"unknown strategy {value!r}")
                self.strategy = value
                self.policy = self._build_policy()
            elif name == "seed":
                seed = int(value)
                self.seed = seed if seed >= 0 else None
                self.policy = self._build_policy()
            else:
                _log(f"uci: ignoring unknown option: {name!r}")
        except ValueError as e:
            _log(f"uci: bad value for option {name!r}: {e}")

    def handle_position(self, tokens: list[str]) -> None:
        """
        Parse and apply a "position" command.

        Command formats:
            position startpos
            position startpos moves a2a3 b7b6 ...
            position fen <FEN>
            position fen <FEN> moves a2a3 ...

        Only the first two FEN fields (placement, side to move) are used.
        Replay stops at the first move that is malformed or illegal under
        this engine's rules.

        Args:
            tokens: The command tokens with "position" already stripped.
        """
        if not tokens:
            return

        if "moves" in tokens:
            moves_idx = tokens.index("moves")
            head, move_tokens = tokens[:moves_idx], tokens[moves_idx + 1:]
        else:
            head, move_tokens = tokens, []

        if not head:
            _log(f"uci: unknown position type: {' '.join(tokens)}")
            return

        try:
            if head[0] == "startpos":
                state = GameState.new()
            elif head[0] == "fen" and len(head) > 1:
                turn = Side.BLACK if len(head) > 2 and head[2] == "b" else Side.WHITE
                state = GameState(Board.from_board_fen(head[1]), turn)
            else:
                _log(f"uci: unknown position type: {head[0]}")
                return
        except ValueError as e:
            _log(f"uci: error in position command: {e}")
            return

        for text in move_tokens:
            try:
                move = Move.from_uci(text)
            except ValueError as e:
                _log(f"uci: unreadable move in position command: {text} ({e})")
                break
            if not state.push(move):
                _log(f"uci: illegal move in position command: {text}")
                break

        self.state = state

    def handle_go(self, tokens: list[str]) -> None:
        """
        Search the current position and answer "info" + "bestmove".

        ``go depth N`` overrides the configured depth for this search.
        Minimax reports its score in centipawns from the side-to-move's
        perspective; random-capture reports no score.
        """
        depth = self._parse_go_depth(tokens)
        side = self.state.turn
        board = self.state.board

        start = time.monotonic()
        try:
            if self.strategy == MINIMAX_STRATEGY:
                search = SearchState()
                move = best_move(board, side, depth, state=search)
                elapsed_ms = max(1, int((time.monotonic() - start) * 1000))
                score = search.best_score if side is Side.BLACK else -search.best_score
                _send(
                    f"info depth {depth} score cp {score * 100} "
                    f"nodes {search.node_count} time {elapsed_ms}"
                )
            else:
                move = self.policy.select_move(board, side)
        except NoMoveAvailable:
            _send("bestmove (none)")
            return

        _send(f"bestmove {move.uci()}")

    def handle_quit(self) -> None:
        sys.exit(0)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _build_policy(self) -> Strategy:
        return make_strategy(self.strategy, depth=self.depth, seed=self.seed)

    def _parse_go_depth(self, tokens: list[str]) -> int:
        """Depth from ``go depth N``, clamped to 0..8; configured depth otherwise."""
        if "depth" in tokens:
            idx = tokens.index("depth")
            try:
                return max(0, min(int(tokens[idx + 1]), _MAX_DEPTH))
            except (ValueError, IndexError):
                _log(f"uci: bad depth in go command: {' '.join(tokens)}")
        return self.depth


def run_uci_loop() -> None:
    """
    Main UCI protocol loop.

    Reads lines from stdin and dispatches each command to a UciHandler
    until "quit" or end of input. An error in one command is logged to
    stderr and the loop carries on.
    """
    handler = UciHandler()

    for raw_line in sys.stdin:
        line = raw_line.strip()
        if not line:
            continue

        tokens = line.split()
        command = tokens[0]
        args = tokens[1:]

        try:
            if command == "uci":
                handler.handle_uci()
            elif command == "isready":
                handler.handle_isready()
            elif command == "ucinewgame":
                handler.handle_ucinewgame()
            elif command == "setoption":
                handler.handle_setoption(args)
            elif command == "position":
                handler.handle_position(args)
            elif command == "go":
                handler.handle_go(args)
            elif command == "stop":
                pass
            elif command == "quit":
                handler.handle_quit()
            else:
                # The protocol requires unknown commands to be ignored.
                _log(f"uci: ignoring unknown command: {command!r}")

        except Exception as e:
            _log(f"uci: unhandled error for command {command!r}: {e}")


if __name__ == "__main__":
    run_uci_loop()
