import pytest

from minichess.board import Board, setup_initial_board


@pytest.fixture
def initial_board() -> Board:
    return setup_initial_board()


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()
