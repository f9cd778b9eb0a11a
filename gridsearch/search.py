"""Graph search algorithms over a GridGraph."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Iterator
from enum import Enum, IntEnum

from gridsearch.geometry import (
    chebyshev,
    distance,
    euclidian,
    f_value,
    g_value,
    h_value,
    manhattan,
    octal,
)
from gridsearch.gridgraph import Node, State


class Algorithm(IntEnum):
    DFS = 0
    BFS = 1
    DIJKSTRA = 2
    A_STAR = 3
    GBFS = 4


class Heuristic(IntEnum):
    MANHATTAN = 0
    OCTAL = 1
    EUCLIDIAN = 2
    CHEBYSHEV = 3
    NONE = 4


class Color(Enum):
    """Cell colours reported while searching and used for drawing."""

    WHITE = "white"
    BLACK = "black"
    GREEN = "green"
    RED = "red"
    BLUE = "blue"
    DARK_GRAY = "darkGray"
    MAGENTA = "magenta"
    CYAN = "cyan"


ChangeCallback = Callable[[int, int, Color], None]
HeuristicFunction = Callable[[Node, Node], float]

_HEURISTICS: dict[Heuristic, HeuristicFunction] = {
    Heuristic.MANHATTAN: manhattan,
    Heuristic.OCTAL: octal,
    Heuristic.EUCLIDIAN: euclidian,
    Heuristic.CHEBYSHEV: chebyshev,
}


def heuristic_function(heuristic: Heuristic) -> HeuristicFunction:
    """Return the distance estimate for ``heuristic``."""
    try:
        return _HEURISTICS[Heuristic(heuristic)]
    except (KeyError, ValueError):
        raise ValueError(f"no heuristic function for {heuristic!r}") from None


class SearchAlgorithm(ABC):
    """A search from a start node to a goal node.

    ``on_change(x, y, color)`` is called whenever a cell changes status.
    After ``start`` the found path, goal first, is in ``path``; it is
    empty when the goal cannot be reached.
    """

    def __init__(self, on_change: ChangeCallback | None = None) -> None:
        self.path: list[Node] = []
        self._on_change = on_change

    @abstractmethod
    def start(self, start: Node, goal: Node) -> list[Node]:
        """Run the search and return the path from goal back to start."""

    def _emit(self, node: Node, color: Color) -> None:
        if self._on_change is not None:
            self._on_change(node.x, node.y, color)

    def _trace_back(self, node: Node | None) -> list[Node]:
        while node is not None:
            self.path.append(node)
            node = node.prev
        return self.path


class SearchDFS(SearchAlgorithm):
    """Depth-first search visiting neighbours in random order."""

    def __init__(
        self,
        on_change: ChangeCallback | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(on_change)
        self._rng = rng if rng is not None else random.Random()

    def start(self, start: Node, goal: Node) -> list[Node]:
        self.path = []
        if self._enter(start, goal):
            return self.path
        stack: list[tuple[Node, Iterator[Node]]] = [(start, iter(start.neighbours))]
        while stack:
            owner, pending = stack[-1]
            for m in pending:
                if m.white:
                    m.prev = owner
                    m.white = False
                    m.gray = True
                    if m.state not in (State.START, State.GOAL):
                        self._emit(m, Color.BLUE)
                    if self._enter(m, goal):
                        return self.path
                    stack.append((m, iter(m.neighbours)))
                    break
            else:
                stack.pop()
        return self.path

    def _enter(self, node: Node, goal: Node) -> bool:
        if node is goal:
            self._trace_back(node)
            return True
        if node.state == State.FREE:
            self._emit(node, Color.DARK_GRAY)
        node.black = True
        node.white = False
        node.gray = False
        self._rng.shuffle(node.neighbours)
        return False


class SearchBFS(SearchAlgorithm):
    """Breadth-first search."""

    def start(self, start: Node, goal: Node) -> list[Node]:
        self.path = []
        start.black = True
        start.white = False
        queue = deque([start])
        while queue:
            v = queue.popleft()
            if v is goal:
                return self._trace_back(v)
            v.black = True
            v.gray = False
            if v is not start:
                self._emit(v, Color.DARK_GRAY)
            for w in v.neighbours:
                if w.white:
                    w.white = False
                    w.gray = True
                    w.prev = v
                    queue.append(w)
                    if w is not goal:
                        self._emit(w, Color.BLUE)
        return self.path


class _PrioritySearch(SearchAlgorithm):
    """Best-first search that re-sorts its open list on every step."""

    def _search(self, start: Node, goal: Node) -> list[Node]:
        self.path = []
        start.white = False
        self._prepare(start, goal)
        queue = [start]
        while queue:
            queue.sort(key=self._priority)
            v = queue.pop(0)
            if v is goal:
                return self._trace_back(v)
            v.black = True
            v.gray = False
            if v is not start:
                self._emit(v, Color.DARK_GRAY)
            for m in v.neighbours:
                self._relax(v, m, goal)
                if m.white:
                    m.white = False
                    m.gray = True
                    self._discover(v, m, goal)
                    queue.append(m)
                    if m is not goal:
                        self._emit(m, Color.BLUE)
        return self.path

    @staticmethod
    def _priority(node: Node) -> float:
        return g_value(node)

    def _prepare(self, start: Node, goal: Node) -> None:
        start.dist = 0.0

    def _relax(self, v: Node, m: Node, goal: Node) -> None:
        dist = distance(v, m) + v.dist
        if dist < m.dist:
            m.dist = dist
            m.prev = v

    def _discover(self, v: Node, m: Node, goal: Node) -> None:
        return None


class SearchDijkstra(_PrioritySearch):
    """Dijkstra's shortest-path search."""

    def start(self, start: Node, goal: Node) -> list[Node]:
        return self._search(start, goal)


class SearchAStar(_PrioritySearch):
    """A* search ordered by cost so far plus heuristic."""

    def __init__(self, heuristic: Heuristic, on_change: ChangeCallback | None = None) -> None:
        super().__init__(on_change)
        self._heuristic = heuristic_function(heuristic)

    def start(self, start: Node, goal: Node) -> list[Node]:
        return self._search(start, goal)

    @staticmethod
    def _priority(node: Node) -> float:
        return f_value(node)

    def _prepare(self, start: Node, goal: Node) -> None:
        start.dist = 0.0
        start.heuristic = self._heuristic(start, goal)

    def _relax(self, v: Node, m: Node, goal: Node) -> None:
        dist = distance(v, m) + v.dist
        if dist < m.dist:
            m.dist = dist
            if m.heuristic == math.inf:
                m.heuristic = self._heuristic(m, goal)
            m.prev = v


class SearchGBFS(_PrioritySearch):
    """Greedy best-first search ordered by heuristic alone."""

    def __init__(self, heuristic: Heuristic, on_change: ChangeCallback | None = None) -> None:
        super().__init__(on_change)
        self._heuristic = heuristic_function(heuristic)

    def start(self, start: Node, goal: Node) -> list[Node]:
        return self._search(start, goal)

    @staticmethod
    def _priority(node: Node) -> float:
        return h_value(node)

    def _prepare(self, start: Node, goal: Node) -> None:
        start.heuristic = self._heuristic(start, goal)

    def _relax(self, v: Node, m: Node, goal: Node) -> None:
        return None

    def _discover(self, v: Node, m: Node, goal: Node) -> None:
        m.prev = v
        m.heuristic = self._heuristic(m, goal)


def create_search(
    algorithm: Algorithm,
    heuristic: Heuristic = Heuristic.NONE,
    on_change: ChangeCallback | None = None,
) -> SearchAlgorithm:
    """Build the search for ``algorithm``; informed searches need a heuristic."""
    algorithm = Algorithm(algorithm)
    if algorithm is Algorithm.DFS:
        return SearchDFS(on_change)
    if algorithm is Algorithm.BFS:
        return SearchBFS(on_change)
    if algorithm is Algorithm.DIJKSTRA:
        return SearchDijkstra(on_change)
    if Heuristic(heuristic) is Heuristic.NONE:
        raise ValueError(f"{algorithm.name} needs a heuristic")
    if algorithm is Algorithm.A_STAR:
        return SearchAStar(heuristic, on_change)
    return SearchGBFS(heuristic, on_change)