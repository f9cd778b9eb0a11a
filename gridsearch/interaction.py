"""Mouse-drag editing of a session's grid."""

from __future__ import annotations

from enum import Enum

from gridsearch.gridgraph import Node, State
from gridsearch.search import Color
from gridsearch.session import Session


class Context(Enum):
    """What the current drag does."""

    NONE = 0
    DRAW = 1
    ERASE = 2
    MOVE = 3


_CONTEXT_FOR_STATE = {
    State.FREE: Context.DRAW,
    State.OBSTACLE: Context.ERASE,
    State.START: Context.MOVE,
    State.GOAL: Context.MOVE,
}

_MARKER_FOR_STATE = {State.START: Color.GREEN, State.GOAL: Color.RED}


class DragTool:
    """Turns a drag over cells into edits.

    The cell under the first drag event decides the action: a free cell
    starts drawing obstacles, an obstacle starts erasing, and the start or
    goal cell starts moving that marker.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.context = Context.NONE
        self._previous: Node | None = None
        self._moving: Node | None = None

    def _cell(self, x: int, y: int) -> Node | None:
        try:
            return self.session.grid.node(x, y)
        except IndexError:
            return None

    def drag(self, x: int, y: int) -> bool:
        """Handle the pointer over cell ``(x, y)``; return whether the grid changed."""
        if self.session.locked:
            return False
        item = self._cell(x, y)
        if self.context is Context.NONE and item is not None:
            self.context = _CONTEXT_FOR_STATE[item.state]

        if self.context in (Context.DRAW, Context.ERASE):
            if item is None or item is self._previous:
                return False
            self._previous = item
            color = Color.BLACK if self.context is Context.DRAW else Color.WHITE
            return self.session.paint(item.x, item.y, color)

        if self.context is Context.MOVE:
            if self._moving is None:
                self._moving = item
            if item is None or self._moving is None or item.state != State.FREE:
                return False
            marker = _MARKER_FOR_STATE.get(self._moving.state)
            if marker is None:
                return False
            self.session.paint(item.x, item.y, marker)
            self._moving = item
            return True
        return False

    def release(self) -> None:
        """End the drag."""
        self._previous = None
        self._moving = None
        self.context = Context.NONE