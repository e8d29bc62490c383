"""
Tests for the console turn controller, renderer and input parsing.
"""
import io

import pytest

from interface.console import ConsoleGame, main, parse_move_text, render_board
from minichess.board import Board, Side, square_from_name as sq
from minichess.game import GameState
from minichess.moves import Move
from minichess.strategy import MinimaxStrategy


def play(lines: str, state: GameState | None = None, depth: int = 1) -> tuple[Side | None, str, ConsoleGame]:
    out = io.StringIO()
    game = ConsoleGame(MinimaxStrategy(depth=depth), stdin=io.StringIO(lines), stdout=out, state=state)
    winner = game.run()
    return winner, out.getvalue(), game


class TestRenderBoard:
    def test_initial_board(self, initial_board):
        lines = render_board(initial_board).splitlines()
        assert lines[0] == "   A  B  C  D  E  F  G  H"
        assert lines[1] == "8 BR BN BB BQ BK BB BN BR"
        assert lines[2] == "7 BP BP BP BP BP BP BP BP"
        assert lines[4] == "5 -- -- -- -- -- -- -- --"
        assert lines[8] == "1 WR WN WB WQ WK WB WN WR"
        assert len(lines) == 9


class TestParseMoveText:
    @pytest.mark.parametrize("text", ["A2 A3", "a2 a3", "a2a3", "A2-A3", "  a2   a3\n"])
    def test_accepted_forms(self, text):
        assert parse_move_text(text) == Move(sq("a2"), sq("a3"))

    @pytest.mark.parametrize("text", ["", "A2", "A2 A3 A4", "Z9 A1", "e2e4e5"])
    def test_rejected_forms(self, text):
        with pytest.raises(ValueError):
            parse_move_text(text)


class TestConsoleGame:
    def test_human_then_computer_then_eof(self):
        winner, out, game = play("A2 A3\n")
        assert winner is None
        assert "AI thinking..." in out
        assert "AI moved" in out
        assert "Game abandoned." in out
        assert game.state.turn is Side.WHITE
        assert game.state.board.is_empty(sq("a2"))

    def test_reprompts_on_bad_input(self):
        winner, out, game = play("A2 A4\nhello\nA2 A3\nquit\n")
        assert "Illegal move: a2a4" in out
        assert "Could not read move" in out
        assert out.count("Your move (A2 A3): ") == 4
        assert game.state.board.is_empty(sq("a2"))

    def test_computer_captures_the_king(self):
        state = GameState(Board.from_board_fen("4k3/8/8/8/8/8/3q4/4K3"), Side.BLACK)
        winner, out, _ = play("", state=state)
        assert winner is Side.BLACK
        assert "AI moved d2e1." in out
        assert "Black wins: the white king was captured." in out

    def test_human_captures_the_king(self):
        state = GameState(Board.from_board_fen("4k3/4Q3/8/8/8/8/8/4K3"), Side.WHITE)
        winner, out, _ = play("E7 E8\n", state=state)
        assert winner is Side.WHITE
        assert "White wins" in out

    def test_computer_forfeits_without_moves(self):
        state = GameState(Board.from_board_fen("K7/8/8/8/8/8/6pp/6pk"), Side.BLACK)
        winner, out, _ = play("", state=state)
        assert winner is Side.WHITE
        assert "forfeits" in out


class TestMain:
    def test_runs_with_flags(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("quit\n"))
        assert main(["--depth", "1", "--strategy", "random-capture", "--seed", "1"]) == 0
        assert "Game abandoned." in capsys.readouterr().out

    def test_negative_depth_is_rejected(self):
        with pytest.raises(SystemExit):
            main(["--depth", "-1"])

    def test_unknown_strategy_is_rejected(self):
        with pytest.raises(SystemExit):
            main(["--strategy", "greedy"])
