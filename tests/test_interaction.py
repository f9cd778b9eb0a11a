import pytest

from gridsearch.gridgraph import State
from gridsearch.interaction import Context, DragTool
from gridsearch.search import Algorithm
from gridsearch.session import Session


@pytest.fixture
def session():
    return Session(8, 5)


@pytest.fixture
def tool(session):
    return DragTool(session)


def test_drag_over_free_cells_draws(session, tool):
    for x in range(3, 6):
        assert tool.drag(x, 0) is True
    assert tool.context is Context.DRAW
    assert all(session.grid.node(x, 0).state == State.OBSTACLE for x in range(3, 6))


def test_drag_over_obstacles_erases(session, tool):
    tool.drag(3, 0)
    tool.drag(4, 0)
    tool.release()
    assert tool.context is Context.NONE
    tool.drag(3, 0)
    assert tool.context is Context.ERASE
    tool.drag(4, 0)
    assert session.grid.node(3, 0).state == State.FREE
    assert session.grid.node(4, 0).state == State.FREE


def test_drawing_skips_start_and_goal(session, tool):
    start = session.grid.start
    tool.drag(start.x, start.y - 1)
    assert tool.drag(start.x, start.y) is False
    assert start.state == State.START


def test_same_cell_twice_changes_once(session, tool):
    assert tool.drag(3, 1) is True
    assert tool.drag(3, 1) is False
    assert session.grid.node(3, 1).state == State.OBSTACLE


def test_move_start(session, tool):
    old = session.grid.start
    tool.drag(old.x, old.y)
    assert tool.context is Context.MOVE
    assert tool.drag(old.x + 1, old.y) is True
    assert tool.drag(old.x + 1, old.y + 1) is True
    assert session.grid.start is session.grid.node(old.x + 1, old.y + 1)
    assert old.state == State.FREE
    assert session.grid.node(old.x + 1, old.y).state == State.FREE


def test_move_goal(session, tool):
    old = session.grid.goal
    tool.drag(old.x, old.y)
    tool.drag(old.x, old.y - 1)
    assert session.grid.goal is session.grid.node(old.x, old.y - 1)
    assert old.state == State.FREE


def test_move_onto_obstacle_is_refused(session, tool):
    start = session.grid.start
    tool.drag(start.x + 1, start.y)
    tool.release()
    tool.drag(start.x, start.y)
    assert tool.drag(start.x + 1, start.y) is False
    assert session.grid.start is start


def test_drag_outside_grid(tool):
    assert tool.drag(-1, 0) is False
    assert tool.drag(0, 99) is False
    assert tool.context is Context.NONE


def test_locked_session_ignores_drags(session, tool):
    session.run(Algorithm.BFS)
    assert tool.drag(3, 0) is False
    assert session.grid.node(3, 0).state == State.FREE
    session.clean()
    assert tool.drag(3, 0) is True