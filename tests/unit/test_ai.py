import pytest

from contagion.engine.ai import AIScoringWeights, candidate_moves, choose_move, score_move
from contagion.models.enums import Owner
from contagion.models.state import Move
from tests.utils.boards import make_board


def test_prefers_clone_over_leap_at_equal_reach():
    # clone to (1,1) takes one token (2.1), leap to (2,1) takes two (2.0)
    board = make_board(p2=[(0, 0)], p1=[(2, 2), (3, 2)])
    assert choose_move(board, Owner.PLAYER2) == Move(src=(0, 0), dst=(1, 1))


def test_leaps_when_it_captures_clearly_more():
    board = make_board(p2=[(0, 0)], p1=[(2, 2), (3, 2), (3, 1)])
    assert score_move(board, Owner.PLAYER2, Move(src=(0, 0), dst=(2, 1))) == 3
    assert choose_move(board, Owner.PLAYER2) == Move(src=(0, 0), dst=(2, 1))


def test_first_enumerated_move_wins_ties():
    board = make_board(p2=[(0, 0)], p1=[(5, 5)])
    # every clone scores 1.1; (1,0) comes first (dy=0 row before dy=1)
    assert choose_move(board, Owner.PLAYER2) == Move(src=(0, 0), dst=(1, 0))


def test_clone_bonus_is_added_to_the_capture_count():
    board = make_board(p1=[(0, 0)], p2=[(2, 1)])
    assert score_move(board, Owner.PLAYER1, Move(src=(0, 0), dst=(1, 1))) == pytest.approx(2.1)
    assert score_move(board, Owner.PLAYER1, Move(src=(0, 0), dst=(2, 0))) == pytest.approx(1.0)
    w = AIScoringWeights(clone_bonus=0.0)
    assert score_move(board, Owner.PLAYER1, Move(src=(0, 0), dst=(1, 1)), w) == 1.0


def test_boost_cells_attract_the_ai():
    board = make_board(p2=[(1, 3)], p1=[(4, 3), (4, 4)], boost=(2, 3))
    # landing on the boost reaches both tokens two columns away
    assert choose_move(board, Owner.PLAYER2) == Move(src=(1, 3), dst=(2, 3))


def test_enumeration_is_row_major_over_owned_cells():
    board = make_board(p1=[(3, 0), (0, 1)], obstacles=[(2, 0), (4, 0)])
    srcs = [m.src for m in candidate_moves(board, Owner.PLAYER1)]
    assert srcs[0] == (3, 0)
    assert srcs[-1] == (0, 1)
    first = next(iter(candidate_moves(board, Owner.PLAYER1)))
    assert first == Move(src=(3, 0), dst=(1, 0))


def test_returns_none_without_candidates():
    assert choose_move(make_board(p2=[(5, 5)]), Owner.PLAYER1) is None
    full = [(x, y) for y in range(6) for x in range(6)]
    board = make_board(p1=full[:18], p2=full[18:])
    assert choose_move(board, Owner.PLAYER1) is None


def test_never_mutates_the_board():
    board = make_board(p2=[(0, 0)], p1=[(2, 2), (3, 2), (3, 1)], boost=(2, 1))
    before = board.model_dump()
    choose_move(board, Owner.PLAYER2)
    assert board.model_dump() == before
