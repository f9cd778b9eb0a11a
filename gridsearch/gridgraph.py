"""Grid graph of nodes used by the search algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum


class State(IntEnum):
    """What occupies a grid cell."""

    OBSTACLE = 0
    FREE = 1
    START = 2
    GOAL = 3


@dataclass(eq=False)
class Node:
    """One cell of the grid together with its search bookkeeping."""

    x: int
    y: int
    dist: float = math.inf
    heuristic: float = math.inf
    state: State = State.FREE
    neighbours: list[Node] = field(default_factory=list, repr=False)
    prev: Node | None = field(default=None, repr=False)
    white: bool = True
    gray: bool = False
    black: bool = False


class GridGraph:
    """A rectangular grid of nodes addressed as ``grid[y][x]``."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self._rows = [[Node(x, y) for x in range(width)] for y in range(height)]
        self.start: Node | None = None
        self.goal: Node | None = None

    def __getitem__(self, y: int) -> list[Node]:
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside grid of height {self.height}")
        return list(self._rows[y])

    def __iter__(self) -> Iterator[Node]:
        """Yield every node, row by row."""
        for row in self._rows:
            yield from row

    def node(self, x: int, y: int) -> Node:
        """Return the node at column ``x`` and row ``y``."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self._rows[y][x]

    def set_start(self, x: int, y: int) -> None:
        """Move the start marker to ``(x, y)``; the old start becomes free."""
        node = self.node(x, y)
        if self.start is not None:
            self.start.state = State.FREE
        node.state = State.START
        self.start = node

    def set_goal(self, x: int, y: int) -> None:
        """Move the goal marker to ``(x, y)``; the old goal becomes free."""
        node = self.node(x, y)
        if self.goal is not None:
            self.goal.state = State.FREE
        node.state = State.GOAL
        self.goal = node

    def reset(self) -> None:
        """Clear all search bookkeeping and neighbour lists."""
        for node in self:
            node.dist = math.inf
            node.heuristic = math.inf
            node.white = True
            node.gray = False
            node.black = False
            node.prev = None
            node.neighbours.clear()

    def set_neighbours(self, config: int) -> None:
        """Link every node to its passable neighbours.

        With ``config == 8`` diagonal neighbours are added too, but only
        where at least one of the two adjoining straight moves is open.
        """
        diagonal = config == 8
        for node in self:
            node.neighbours = self._open_neighbours(node.x, node.y, diagonal)

    def _passable(self, x: int, y: int) -> Node | None:
        if 0 <= y < self.height and 0 <= x < self.width:
            node = self._rows[y][x]
            if node.state != State.OBSTACLE:
                return node
        return None

    def _open_neighbours(self, x: int, y: int, diagonal: bool) -> list[Node]:
        top = self._passable(x, y - 1)
        bottom = self._passable(x, y + 1)
        left = self._passable(x - 1, y)
        right = self._passable(x + 1, y)
        result = [n for n in (top, bottom, left, right) if n is not None]
        if diagonal:
            corners = (
                (top or right, x + 1, y - 1),
                (top or left, x - 1, y - 1),
                (bottom or right, x + 1, y + 1),
                (bottom or left, x - 1, y + 1),
            )
            for reachable, cx, cy in corners:
                if reachable:
                    corner = self._passable(cx, cy)
                    if corner is not None:
                        result.append(corner)
        return result