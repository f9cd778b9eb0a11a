import math

import pytest

from gridsearch.geometry import (
    Point,
    check_corners,
    chebyshev,
    distance,
    distance_point_to_line,
    euclidian,
    f_value,
    g_value,
    h_value,
    intersects_node,
    line_line_intersect,
    manhattan,
    octal,
    precision,
)
from gridsearch.gridgraph import GridGraph, Node, State


def test_distance_worked_example():
    assert distance(Node(0, 0), Node(3, 4)) == pytest.approx(5.0)


@pytest.mark.parametrize("a, b", [((0, 0), (3, 4)), ((2, 7), (5, 1)), ((4, 4), (4, 4))])
def test_euclidian_matches_distance(a, b):
    src, dst = Node(*a), Node(*b)
    assert euclidian(src, dst) == pytest.approx(distance(src, dst))


@pytest.mark.parametrize("a, b", [((0, 0), (3, 4)), ((6, 1), (2, 2)), ((1, 1), (1, 5))])
def test_heuristics_are_symmetric(a, b):
    src, dst = Node(*a), Node(*b)
    for h in (manhattan, octal, euclidian, chebyshev):
        assert h(src, dst) == pytest.approx(h(dst, src))


@pytest.mark.parametrize("a, b", [((0, 0), (3, 4)), ((6, 1), (2, 2)), ((0, 0), (5, 5))])
def test_heuristic_ordering(a, b):
    src, dst = Node(*a), Node(*b)
    assert chebyshev(src, dst) <= euclidian(src, dst) + 1e-9
    assert euclidian(src, dst) <= octal(src, dst) + 1e-9
    assert octal(src, dst) <= manhattan(src, dst) + 1e-9


def test_axis_aligned_heuristics_agree():
    src, dst = Node(1, 2), Node(1, 9)
    assert octal(src, dst) == pytest.approx(manhattan(src, dst))
    assert chebyshev(src, dst) == pytest.approx(manhattan(src, dst))
    assert euclidian(src, dst) == pytest.approx(manhattan(src, dst))


def test_single_diagonal_step_octal_equals_euclidian():
    src, dst = Node(0, 0), Node(1, 1)
    assert octal(src, dst) == pytest.approx(math.sqrt(2))
    assert chebyshev(src, dst) == pytest.approx(manhattan(Node(0, 0), Node(1, 0)))


def test_sort_keys():
    a = Node(0, 0, dist=1.0, heuristic=5.0)
    b = Node(1, 0, dist=2.0, heuristic=1.0)
    assert sorted([b, a], key=g_value)[0] is a
    assert sorted([a, b], key=h_value)[0] is b
    assert sorted([a, b], key=f_value)[0] is b


def test_point_on_line_has_zero_distance():
    assert distance_point_to_line(0, 0, 4, 4, 2, 2) == pytest.approx(0.0)


def test_point_to_line_distance_is_endpoint_order_independent():
    forward = distance_point_to_line(0, 0, 5, 2, 1, 3)
    backward = distance_point_to_line(5, 2, 0, 0, 1, 3)
    assert forward == pytest.approx(backward)
    assert forward > 0


def test_point_to_horizontal_line():
    assert distance_point_to_line(0, 0, 5, 0, 2, 1) == pytest.approx(1.0)


def test_precision_rounds_and_truncates():
    assert precision(3.14159, 2) == "3.14"


def test_precision_zero_places_keeps_dot():
    assert precision(1.0, 0) == "1."


def test_precision_length_follows_places():
    text = precision(2.71828, 3)
    assert len(text.split(".")[1]) == 3
    assert float(text) == pytest.approx(2.718)


def test_parallel_lines_do_not_intersect():
    p = line_line_intersect(0, 0, 1, 0, 0, 1, 1, 1)
    assert p == Point()
    assert not p.found


def test_intersection_lies_on_both_lines():
    p = line_line_intersect(0, 0, 4, 3, 0, 5, 5, 0)
    assert p.found
    assert distance_point_to_line(0, 0, 4, 3, p.x, p.y) == pytest.approx(0.0, abs=1e-9)
    assert distance_point_to_line(0, 5, 5, 0, p.x, p.y) == pytest.approx(0.0, abs=1e-9)


def test_check_corners_detects_obstacle_at_corner():
    grid = GridGraph(5, 5)
    grid.node(1, 3).state = State.OBSTACLE
    p = Point(2, 3, True)
    assert check_corners(p, 2, 3, 2, 3, grid)


def test_check_corners_ignores_free_corner():
    grid = GridGraph(5, 5)
    p = Point(2, 3, True)
    assert not check_corners(p, 2, 3, 2, 3, grid)


def test_check_corners_outside_grid_raises():
    grid = GridGraph(5, 5)
    with pytest.raises(IndexError):
        check_corners(Point(0, 3, True), 0, 1, 2, 3, grid)


def test_line_through_cell_intersects():
    grid = GridGraph(5, 5)
    grid.node(2, 2).state = State.OBSTACLE
    assert intersects_node(0.5, 2.5, 4.5, 2.5, 2, 2, grid)


def test_diagonal_line_through_cell_intersects():
    grid = GridGraph(5, 5)
    assert intersects_node(0.5, 0.5, 4.5, 4.5, 2, 2, grid)


def test_line_missing_cell_does_not_intersect():
    grid = GridGraph(5, 5)
    grid.node(2, 2).state = State.OBSTACLE
    assert not intersects_node(0.5, 0.5, 4.5, 0.5, 2, 2, grid)