"""
Unit tests for minimax / alpha-beta search and best_move().
"""
import pytest

from minichess.board import Board, Side, square_from_name as sq
from minichess.constants import SCORE_BOUND
from minichess.evaluate import evaluate
from minichess.moves import Move, NoMoveAvailable, legal_moves
from minichess.search import SearchState, alphabeta, best_move, minimax

# Black rook a8 can take an undefended white queen on a1.
FREE_QUEEN = "r3k3/8/8/8/8/8/8/Q3K3"
# Black rook a4 can take pawn a2, but the rook on a1 takes back.
DEFENDED_PAWN = "4k3/8/8/8/r7/8/P7/R3K3"
# Black queen next to the white king.
KING_IN_REACH = "4k3/8/8/8/8/8/3q4/4K3"
# Two equal captures for the rook on d5: knights on a5 and h5.
TWO_KNIGHTS = "k7/8/8/N2r3N/8/8/8/7K"

POSITIONS = [
    "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",
    FREE_QUEEN,
    DEFENDED_PAWN,
    KING_IN_REACH,
    TWO_KNIGHTS,
    "rnbqkbnr/pppp1ppp/8/4p3/3Q4/8/PPPPPPPP/RNB1KBNR",
    "4k3/8/8/8/8/8/r7/4K2R",
]


class TestBestMove:
    def test_depth_zero_takes_free_material(self):
        board = Board.from_board_fen(FREE_QUEEN)
        state = SearchState()
        move = best_move(board, Side.BLACK, depth=0, state=state)
        assert move == Move(sq("a8"), sq("a1"))
        assert state.best_score == 105 - 100

    def test_greedy_grabs_a_defended_pawn(self):
        board = Board.from_board_fen(DEFENDED_PAWN)
        assert best_move(board, Side.BLACK, depth=1) == Move(sq("a4"), sq("a2"))

    def test_depth_two_sees_the_recapture(self):
        board = Board.from_board_fen(DEFENDED_PAWN)
        state = SearchState()
        move = best_move(board, Side.BLACK, depth=2, state=state)
        assert move != Move(sq("a4"), sq("a2"))
        assert state.best_score == 105 - 106

    def test_captures_the_king(self):
        board = Board.from_board_fen(KING_IN_REACH)
        assert best_move(board, Side.BLACK, depth=2) == Move(sq("d2"), sq("e1"))

    def test_ties_go_to_the_first_move(self):
        board = Board.from_board_fen(TWO_KNIGHTS)
        assert best_move(board, Side.BLACK, depth=1) == Move(sq("d5"), sq("a5"))

    def test_white_minimizes(self):
        board = Board.from_board_fen("r3k3/8/8/8/8/8/8/R3K3")
        assert best_move(board, Side.WHITE, depth=1) == Move(sq("a1"), sq("a8"))

    def test_default_search_is_deterministic(self, initial_board):
        assert best_move(initial_board) == best_move(initial_board)

    def test_board_is_unchanged(self, initial_board):
        before = initial_board.copy()
        best_move(initial_board, Side.BLACK, depth=3)
        assert initial_board == before

    def test_returns_a_legal_move(self, initial_board):
        move = best_move(initial_board, Side.BLACK)
        assert move in legal_moves(initial_board, Side.BLACK)

    def test_no_move_available(self):
        board = Board.from_board_fen("K7/8/8/8/8/8/6pp/6pk")
        with pytest.raises(NoMoveAvailable) as info:
            best_move(board, Side.BLACK)
        assert info.value.side is Side.BLACK

    def test_no_pieces_at_all(self, empty_board):
        with pytest.raises(NoMoveAvailable):
            best_move(empty_board, Side.WHITE)


class TestPruning:
    @pytest.mark.parametrize("fen", POSITIONS)
    @pytest.mark.parametrize("depth", [1, 2])
    def test_same_move_as_plain_minimax(self, fen, depth):
        board = Board.from_board_fen(fen)
        for side in Side:
            if not legal_moves(board, side):
                continue
            plain, pruned = SearchState(), SearchState()
            assert best_move(board, side, depth, prune=False, state=plain) == \
                best_move(board, side, depth, prune=True, state=pruned)
            assert plain.best_score == pruned.best_score

    @pytest.mark.parametrize("fen", POSITIONS[1:])
    def test_same_move_at_depth_three(self, fen):
        board = Board.from_board_fen(fen)
        plain, pruned = SearchState(), SearchState()
        assert best_move(board, Side.BLACK, 3, prune=False, state=plain) == \
            best_move(board, Side.BLACK, 3, prune=True, state=pruned)
        assert pruned.node_count <= plain.node_count

    def test_pruning_visits_fewer_nodes(self, initial_board):
        plain, pruned = SearchState(), SearchState()
        best_move(initial_board, Side.BLACK, 3, prune=False, state=plain)
        best_move(initial_board, Side.BLACK, 3, prune=True, state=pruned)
        assert pruned.node_count < plain.node_count


class TestMinimax:
    def test_depth_zero_is_static_evaluation(self, initial_board):
        assert minimax(initial_board, 0, Side.BLACK, SearchState()) == 0

    def test_side_without_moves_is_a_leaf(self):
        board = Board.from_board_fen("K7/8/8/8/8/8/6pp/6pk")
        state = SearchState()
        assert minimax(board, 3, Side.BLACK, state) == evaluate(board)
        assert state.node_count == 1

    def test_alphabeta_exact_inside_window(self):
        board = Board.from_board_fen(DEFENDED_PAWN)
        exact = minimax(board, 2, Side.BLACK, SearchState())
        assert alphabeta(board, 2, -SCORE_BOUND, SCORE_BOUND, Side.BLACK, SearchState()) == exact

    def test_alphabeta_fails_low(self):
        board = Board.from_board_fen(DEFENDED_PAWN)
        exact = minimax(board, 2, Side.BLACK, SearchState())
        assert alphabeta(board, 2, exact + 1, SCORE_BOUND, Side.BLACK, SearchState()) <= exact + 1

    def test_node_count(self, initial_board):
        state = SearchState()
        minimax(initial_board, 1, Side.WHITE, state)
        assert state.node_count == 1 + 12
