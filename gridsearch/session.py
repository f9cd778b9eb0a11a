"""Grid editing, search runs and path smoothing without any display."""

from __future__ import annotations

from gridsearch.geometry import precision
from gridsearch.gridgraph import GridGraph, Node, State
from gridsearch.search import (
    Algorithm,
    ChangeCallback,
    Color,
    Heuristic,
    create_search,
)
from gridsearch.smoothing import (
    Segment,
    SmoothingResult,
    path_length,
    smooth_path,
    smooth_path_los,
)

_STALL_TIMES = {(32, 16): 10, (64, 32): 5, (128, 64): 1}
_DEFAULT_STALL = 1


class Session:
    """A grid with start, goal and obstacles, plus the last search result.

    ``path`` runs from start to goal; ``smoothed`` and ``lines`` hold the
    last smoothing. While ``locked`` the grid is not meant to be edited.
    """

    def __init__(self, width: int = 32, height: int = 16, neighbours: int = 4) -> None:
        self.neighbours = 4
        self.set_neighbours(neighbours)
        self.path: list[Node] = []
        self.smoothed: list[Node] = []
        self.lines: list[Segment] = []
        self.locked = False
        self.grid = self._new_grid(width, height)

    @staticmethod
    def _new_grid(width: int, height: int) -> GridGraph:
        grid = GridGraph(width, height)
        grid.set_start(1, height // 2)
        grid.set_goal(width - 2, height // 2)
        return grid

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def stall_time(self) -> int:
        """Milliseconds to pause between animation steps for this grid size."""
        return _STALL_TIMES.get((self.width, self.height), _DEFAULT_STALL)

    def resize(self, width: int, height: int) -> bool:
        """Replace the grid by an empty one; a no-op for the current size."""
        if (width, height) == (self.width, self.height):
            return False
        self.clear()
        self.grid = self._new_grid(width, height)
        return True

    def set_neighbours(self, count: int) -> None:
        if count not in (4, 8):
            raise ValueError(f"neighbour count must be 4 or 8, not {count}")
        self.neighbours = count

    def paint(self, x: int, y: int, color: Color) -> bool:
        """Apply an edit to cell ``(x, y)``; return whether the grid changed.

        Black turns a free cell into an obstacle, white turns an obstacle
        back into a free cell, green moves the start and red the goal.
        """
        node = self.grid.node(x, y)
        color = Color(color)
        if color is Color.BLACK:
            if node.state == State.FREE:
                node.state = State.OBSTACLE
                return True
            return False
        if color is Color.WHITE:
            if node.state == State.OBSTACLE:
                node.state = State.FREE
                return True
            return False
        if color is Color.GREEN:
            self.grid.set_start(x, y)
            return True
        if color is Color.RED:
            self.grid.set_goal(x, y)
            return True
        return False

    def run(
        self,
        algorithm: Algorithm,
        heuristic: Heuristic = Heuristic.NONE,
        on_change: ChangeCallback | None = None,
    ) -> list[Node]:
        """Search from start to goal and return the path, start first."""
        search = create_search(algorithm, heuristic, on_change)
        self.locked = True
        self.grid.reset()
        self.grid.set_neighbours(self.neighbours)
        self.path = []
        self.smoothed = []
        found = search.start(self.grid.start, self.grid.goal)
        if on_change is not None:
            for node in found:
                if node.state not in (State.START, State.GOAL):
                    on_change(node.x, node.y, Color.MAGENTA)
        self.path = list(reversed(found))
        return self.path

    def smooth(self, version: int) -> SmoothingResult | None:
        """Smooth the last path with method 1 (band) or 2 (line of sight)."""
        if version not in (1, 2):
            raise ValueError(f"unknown smoothing version {version}")
        if self.lines:
            self.lines = []
            self.smoothed = []
        if not self.path:
            return None
        smoother = smooth_path if version == 1 else smooth_path_los
        result = smoother(self.path, self.grid)
        self.smoothed = result.path
        self.lines = result.lines
        return result

    def clean(self) -> None:
        """Forget the search result but keep obstacles."""
        self.lines = []
        self.path = []
        self.smoothed = []
        self.locked = False

    def clear(self) -> None:
        """Forget the search result and remove every obstacle."""
        for node in self.grid:
            if node.state not in (State.START, State.GOAL):
                node.state = State.FREE
        self.clean()

    def expanded_count(self) -> int:
        """Number of nodes the last search discovered or expanded."""
        return sum(1 for node in self.grid if node.gray or node.black)

    def info_label(self) -> str:
        return (
            f"Grid Size: {self.width}x{self.height}"
            f" Neighbours: {self.neighbours}"
        )

    def info_text(self) -> str:
        """Summary of the last search and smoothing."""
        node_info = f"Nodes Expanded: {self.expanded_count()}\n"
        length = path_length(self.path)
        if length == 0:
            path_info = "No Path Found \n"
        else:
            path_info = f"Path Lenght: {precision(length, 2)}\n"
        smoothed_length = path_length(self.smoothed)
        if smoothed_length == 0:
            smooth_info = ""
        else:
            smooth_info = f"Path Lenght After Smoothing: {precision(smoothed_length, 2)}"
        return node_info + path_info + smooth_info