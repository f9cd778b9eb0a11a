"""Distance measures, heuristics and line-of-sight geometry on the grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

from gridsearch.gridgraph import GridGraph, Node, State


@dataclass
class Point:
    """An intersection point; ``found`` is false when lines are parallel."""

    x: float = 0.0
    y: float = 0.0
    found: bool = False


def _deltas(src: Node, dst: Node) -> tuple[int, int]:
    return abs(dst.x - src.x), abs(dst.y - src.y)


def distance(src: Node, dst: Node) -> float:
    """Straight-line distance between two nodes."""
    dx, dy = _deltas(src, dst)
    return math.sqrt(dx * dx + dy * dy)


def manhattan(src: Node, dst: Node) -> float:
    dx, dy = _deltas(src, dst)
    return float(dx + dy)


def octal(src: Node, dst: Node) -> float:
    """Octile distance: diagonal steps cost the square root of two."""
    dx, dy = _deltas(src, dst)
    return (dx + dy) + (math.sqrt(2) - 2) * min(dx, dy)


def euclidian(src: Node, dst: Node) -> float:
    dx, dy = _deltas(src, dst)
    return math.sqrt(dx * dx + dy * dy)


def chebyshev(src: Node, dst: Node) -> float:
    dx, dy = _deltas(src, dst)
    return float((dx + dy) - min(dx, dy))


def g_value(node: Node) -> float:
    """Sort key: cost from the start."""
    return node.dist


def h_value(node: Node) -> float:
    """Sort key: heuristic estimate to the goal."""
    return node.heuristic


def f_value(node: Node) -> float:
    """Sort key: cost so far plus heuristic estimate."""
    return node.dist + node.heuristic


def distance_point_to_line(x1, y1, x2, y2, x0, y0) -> float:
    """Distance of ``(x0, y0)`` from the line through ``(x1, y1)`` and ``(x2, y2)``."""
    numerator = abs((x2 - x1) * (y1 - y0) - (x1 - x0) * (y2 - y1))
    denominator = math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)
    if denominator == 0:
        return math.nan if numerator == 0 else math.inf
    return numerator / denominator


def precision(num: float, places: int) -> str:
    """Round half up to ``places`` decimals and cut the text there."""
    scale = int(10**places)
    value = int(num * scale + 0.5) / scale
    text = f"{value:.6f}"
    dot = text.find(".")
    if dot != -1:
        return text[: dot + 1 + places]
    return text


def line_line_intersect(x1, y1, x2, y2, x3, y3, x4, y4) -> Point:
    """Intersection of the line through points 1 and 2 with that through 3 and 4."""
    denominator = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if denominator == 0:
        return Point()
    cross_a = x1 * y2 - y1 * x2
    cross_b = x3 * y4 - y3 * x4
    x_num = cross_a * (x3 - x4) - (x1 - x2) * cross_b
    y_num = cross_a * (y3 - y4) - (y1 - y2) * cross_b
    return Point(x_num / denominator, y_num / denominator, True)


def check_corners(p: Point, left, right, top, bottom, grid: GridGraph) -> bool:
    """True when ``p`` lies on a cell corner whose adjacent cell is an obstacle.

    Raises IndexError when that adjacent cell lies outside the grid.
    """
    corners = (
        (left, bottom, int(left) - 1, int(bottom)),
        (right, bottom, int(right), int(bottom)),
        (left, top, int(left) - 1, int(top)),
        (right, top, int(right), int(top)),
    )
    for cx, cy, nx, ny in corners:
        if p.x == cx and p.y == cy:
            if grid.node(nx, ny).state == State.OBSTACLE:
                return True
    return False


def intersects_node(x1, y1, x2, y2, x3, y3, grid: GridGraph) -> bool:
    """Whether the line through two points crosses the unit cell at ``(x3, y3)``."""
    top = y3
    bottom = y3 + 1
    left = x3
    right = x3 + 1

    def inside_x(p: Point) -> bool:
        return left < p.x < right

    def inside_y(p: Point) -> bool:
        return top < p.y < bottom

    def inside_both(p: Point) -> bool:
        return inside_x(p) and inside_y(p)

    edges = (
        ((left, top, right, top), inside_x),
        ((left, bottom, right, bottom), inside_x),
        ((left, top, left, bottom), inside_y),
        ((right, top, right, bottom), inside_y),
        ((left, bottom, right, top), inside_both),
        ((right, bottom, left, top), inside_both),
    )
    for (ex1, ey1, ex2, ey2), inside in edges:
        p = line_line_intersect(x1, y1, x2, y2, ex1, ey1, ex2, ey2)
        if check_corners(p, left, right, top, bottom, grid):
            return True
        if p.found and inside(p):
            return True
    return False