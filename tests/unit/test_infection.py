from contagion.engine.systems.infection import capture_targets, resolve
from contagion.events import CaptureEvent
from contagion.models.enums import Owner
from contagion.models.state import Move
from tests.utils.boards import make_state


def test_adjacent_opponent_is_captured_and_reported(engine, recorder):
    st = make_state(p1=[(0, 0)], p2=[(2, 2), (5, 5)])
    res = engine.apply_move(st, Move(src=(0, 0), dst=(1, 1)))
    assert [c.pos for c in res.captured] == [(2, 2)]
    assert st.board.cell((2, 2)).owner == Owner.PLAYER1
    assert st.board.cell((5, 5)).owner == Owner.PLAYER2
    (cap,) = recorder.of(CaptureEvent)
    assert cap.mover == Owner.PLAYER1
    assert [c.pos for c in cap.captured_cells] == [(2, 2)]
    assert cap.captured_cells[0].owner == Owner.PLAYER1


def test_boost_doubles_the_capture_range(engine):
    st = make_state(p1=[(2, 3)], p2=[(5, 3), (0, 0)], boost=(3, 3))
    res = engine.apply_move(st, Move(src=(2, 3), dst=(3, 3)))
    assert [c.pos for c in res.captured] == [(5, 3)]
    assert st.board.cell((5, 3)).owner == Owner.PLAYER1
    assert st.board.cell((0, 0)).owner == Owner.PLAYER2


def test_plain_cell_only_reaches_distance_one(engine):
    st = make_state(p1=[(2, 3)], p2=[(5, 3), (0, 0)])
    res = engine.apply_move(st, Move(src=(2, 3), dst=(3, 3)))
    assert res.captured == []
    assert st.board.cell((5, 3)).owner == Owner.PLAYER2


def test_captures_come_back_in_scan_order(engine):
    victims = [(4, 4), (1, 4), (3, 3), (0, 1), (4, 0)]
    st = make_state(p1=[(1, 2)], p2=[*victims, (5, 5)], boost=(2, 2))
    res = engine.apply_move(st, Move(src=(1, 2), dst=(2, 2)))
    assert [c.pos for c in res.captured] == [(4, 0), (0, 1), (3, 3), (1, 4), (4, 4)]
    assert st.board.cell((5, 5)).owner == Owner.PLAYER2


def test_obstacles_and_own_tokens_are_not_captured():
    st = make_state(p1=[(1, 1), (0, 1)], p2=[(2, 1)], obstacles=[(1, 0)])
    landed = st.board.cell((1, 1))
    got = resolve(st.board, landed, Owner.PLAYER1)
    assert [c.pos for c in got] == [(2, 1)]
    assert st.board.cell((1, 0)).owner == Owner.OBSTACLE
    assert st.board.cell((0, 1)).owner == Owner.PLAYER1


def test_capture_targets_is_read_only_and_clipped_at_edges():
    st = make_state(p1=[(0, 0)], p2=[(1, 0), (0, 2), (2, 2)], boost=(0, 0))
    before = st.model_dump()
    got = capture_targets(st.board, st.board.cell((0, 0)), Owner.PLAYER1)
    assert [c.pos for c in got] == [(1, 0), (0, 2), (2, 2)]
    assert st.model_dump() == before
