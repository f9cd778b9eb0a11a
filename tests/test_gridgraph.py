import math

import pytest

from gridsearch.gridgraph import GridGraph, Node, State


def test_nodes_know_their_coordinates():
    grid = GridGraph(4, 3)
    for y in range(3):
        for x, node in enumerate(grid[y]):
            assert (node.x, node.y) == (x, y)
            assert grid.node(x, y) is node


def test_iteration_covers_every_node_once():
    grid = GridGraph(5, 4)
    nodes = list(grid)
    assert len(nodes) == 5 * 4
    assert len({id(n) for n in nodes}) == len(nodes)
    assert nodes[0] is grid.node(0, 0)
    assert nodes[-1] is grid.node(4, 3)


def test_new_nodes_are_free_and_unvisited():
    node = GridGraph(2, 2).node(1, 1)
    assert node.state == State.FREE
    assert node.dist == math.inf
    assert node.heuristic == math.inf
    assert node.white and not node.gray and not node.black
    assert node.prev is None


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_node_out_of_range_raises(x, y):
    with pytest.raises(IndexError):
        GridGraph(3, 2).node(x, y)


def test_row_out_of_range_raises():
    grid = GridGraph(3, 2)
    assert [n.x for n in grid[1]] == [0, 1, 2]
    assert [n.y for n in grid[1]] == [1, 1, 1]
    with pytest.raises(IndexError):
        grid[2]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        GridGraph(-1, 3)


def test_set_start_frees_previous_start():
    grid = GridGraph(4, 4)
    grid.set_start(0, 0)
    grid.set_start(2, 3)
    assert grid.node(0, 0).state == State.FREE
    assert grid.node(2, 3).state == State.START
    assert grid.start is grid.node(2, 3)


def test_set_goal_frees_previous_goal():
    grid = GridGraph(4, 4)
    grid.set_goal(1, 1)
    grid.set_goal(3, 2)
    assert grid.node(1, 1).state == State.FREE
    assert grid.node(3, 2).state == State.GOAL
    assert grid.goal is grid.node(3, 2)


def test_four_neighbour_order_is_top_bottom_left_right():
    grid = GridGraph(3, 3)
    grid.set_neighbours(4)
    center = grid.node(1, 1)
    assert center.neighbours == [
        grid.node(1, 0),
        grid.node(1, 2),
        grid.node(0, 1),
        grid.node(2, 1),
    ]


def test_eight_neighbours_in_open_grid():
    grid = GridGraph(3, 3)
    grid.set_neighbours(8)
    center = grid.node(1, 1)
    assert len(center.neighbours) == 8
    assert center.neighbours[4:] == [
        grid.node(2, 0),
        grid.node(0, 0),
        grid.node(2, 2),
        grid.node(0, 2),
    ]


def test_corner_has_fewer_neighbours_than_center():
    grid = GridGraph(3, 3)
    grid.set_neighbours(4)
    corner = grid.node(0, 0)
    assert set(map(id, corner.neighbours)) == {id(grid.node(1, 0)), id(grid.node(0, 1))}


def test_obstacles_are_not_neighbours():
    grid = GridGraph(3, 3)
    grid.node(1, 0).state = State.OBSTACLE
    grid.set_neighbours(4)
    assert grid.node(1, 0) not in grid.node(1, 1).neighbours
    assert grid.node(1, 2) in grid.node(1, 1).neighbours


def test_diagonal_blocked_when_both_sides_are_obstacles():
    grid = GridGraph(3, 3)
    grid.node(1, 0).state = State.OBSTACLE
    grid.node(2, 1).state = State.OBSTACLE
    grid.set_neighbours(8)
    neighbours = grid.node(1, 1).neighbours
    assert grid.node(2, 0) not in neighbours
    assert grid.node(0, 0) in neighbours
    assert grid.node(2, 2) in neighbours


def test_other_configs_mean_four_neighbours():
    grid = GridGraph(3, 3)
    grid.set_neighbours(4)
    four = list(grid.node(1, 1).neighbours)
    grid.set_neighbours(6)
    assert grid.node(1, 1).neighbours == four


def test_reset_clears_search_state():
    grid = GridGraph(3, 3)
    grid.set_neighbours(4)
    node = grid.node(1, 1)
    node.dist = 2.0
    node.heuristic = 1.0
    node.white = False
    node.gray = True
    node.black = True
    node.prev = grid.node(0, 0)
    grid.reset()
    assert node.dist == math.inf
    assert node.heuristic == math.inf
    assert node.white and not node.gray and not node.black
    assert node.prev is None
    assert node.neighbours == []


def test_row_is_a_copy():
    grid = GridGraph(3, 2)
    row = grid[0]
    row.append(Node(9, 9))
    assert len(grid[0]) == 3