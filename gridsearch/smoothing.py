"""Path smoothing by straight jumps between path nodes that can see each other."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from itertools import pairwise

from gridsearch.geometry import distance, distance_point_to_line, intersects_node
from gridsearch.gridgraph import GridGraph, Node, State

Segment = tuple[Node, Node]


@dataclass
class SmoothingResult:
    """The smoothed path and the straight segments drawn for it."""

    path: list[Node] = field(default_factory=list)
    lines: list[Segment] = field(default_factory=list)

    @property
    def length(self) -> float:
        return path_length(self.path)


def path_length(path: Sequence[Node]) -> float:
    """Sum of straight-line distances between consecutive nodes."""
    return sum((distance(a, b) for a, b in pairwise(path)), 0.0)


def _obstacles_between(a: Node, b: Node, grid: GridGraph) -> Iterator[Node]:
    """Yield the obstacles inside the bounding box of ``a`` and ``b``."""
    left, right = sorted((a.x, b.x))
    bottom, top = sorted((a.y, b.y))
    for y in range(bottom, top + 1):
        for x in range(left, right + 1):
            node = grid.node(x, y)
            if node.state == State.OBSTACLE:
                yield node


def _clear_band(a: Node, b: Node, grid: GridGraph) -> bool:
    """Band test: no obstacle lies close to both offset lines from ``a`` to ``b``."""
    for n in _obstacles_between(a, b, grid):
        upper = distance_point_to_line(a.x, a.y + 0.5, b.x, b.y + 0.5, n.x, n.y)
        lower = distance_point_to_line(a.x, a.y - 0.5, b.x, b.y - 0.5, n.x, n.y)
        if lower < 0.9 and upper < 0.9:
            return False
    return True


def _line_of_sight(a: Node, b: Node, grid: GridGraph) -> bool:
    """Exact test: the centre-to-centre line crosses no obstacle cell."""
    return not any(
        intersects_node(a.x + 0.5, a.y + 0.5, b.x + 0.5, b.y + 0.5, n.x, n.y, grid)
        for n in _obstacles_between(a, b, grid)
    )


def smooth_path(path: Sequence[Node], grid: GridGraph) -> SmoothingResult:
    """Extend each jump forward along the path until the band test fails."""
    if len(path) < 2:
        return SmoothingResult(list(path), [])
    last = len(path) - 1
    start, end = 0, 2
    result = SmoothingResult([path[0]])
    while start < last - 1 and end <= last:
        if _clear_band(path[start], path[end], grid):
            end += 1
            continue
        result.lines.append((path[start], path[end - 1]))
        if start != 0:
            result.path.append(path[start])
        start = end - 1
        end = start + 2
    result.lines.append((path[start], path[end - 1]))
    result.path.append(path[end - 1])
    return result


def smooth_path_los(path: Sequence[Node], grid: GridGraph) -> SmoothingResult:
    """Jump from each anchor to the farthest path node in line of sight."""
    if len(path) < 2:
        return SmoothingResult(list(path), [])
    last = len(path) - 1
    start, end = 0, last
    result = SmoothingResult([path[0]])
    while start < last - 1:
        if _line_of_sight(path[start], path[end], grid):
            result.lines.append((path[start], path[end]))
            if start != 0:
                result.path.append(path[start])
            start, end = end, last
            continue
        end -= 1
        if end <= start:
            raise ValueError(
                f"no line of sight from ({path[start].x}, {path[start].y}) "
                "to the next node of the path"
            )
    if start != end:
        result.lines.append((path[start], path[end]))
    result.path.append(path[end])
    return result