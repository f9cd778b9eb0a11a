"""Window that shows the grid, runs searches and animates them."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Callable, Iterable

from gridsearch.gridgraph import Node, State
from gridsearch.interaction import DragTool
from gridsearch.search import Algorithm, Color, Heuristic
from gridsearch.session import Session

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 512
TICK_MS = 100

_GRID_SIZES = ((32, 16), (64, 32), (128, 64))

_FILL_FOR_STATE = {
    State.OBSTACLE: Color.BLACK,
    State.FREE: Color.WHITE,
    State.START: Color.GREEN,
    State.GOAL: Color.RED,
}

_TK_COLORS = {
    Color.WHITE: "white",
    Color.BLACK: "black",
    Color.GREEN: "green",
    Color.RED: "red",
    Color.BLUE: "blue",
    Color.DARK_GRAY: "DarkGray",
    Color.MAGENTA: "magenta",
    Color.CYAN: "cyan",
}

_ALGORITHM_NAMES = {
    Algorithm.DFS: "DFS",
    Algorithm.BFS: "BFS",
    Algorithm.DIJKSTRA: "Dijkstra",
    Algorithm.A_STAR: "A*",
    Algorithm.GBFS: "GBFS",
}

_HEURISTIC_NAMES = {
    Heuristic.MANHATTAN: "Manhattan",
    Heuristic.OCTAL: "Octal",
    Heuristic.EUCLIDIAN: "Euclidian",
    Heuristic.CHEBYSHEV: "Chebyshev",
}


def cell_rect(x: int, y: int, cell_width: int, cell_height: int) -> tuple[int, int, int, int]:
    """Canvas rectangle ``(x0, y0, x1, y1)`` of cell ``(x, y)``.

    One pixel is left for the outline, so neighbouring cells do not overlap.
    """
    left = x * cell_width
    top = y * cell_height
    return left, top, left + cell_width - 1, top + cell_height - 1


def cell_at(px: float, py: float, cell_width: int, cell_height: int) -> tuple[int, int]:
    """Cell coordinates under canvas pixel ``(px, py)``."""
    if cell_width <= 0 or cell_height <= 0:
        raise ValueError(f"cell size must be positive: {cell_width}x{cell_height}")
    return int(px // cell_width), int(py // cell_height)


def fill_color(node: Node) -> Color:
    """Colour a cell shows when no search result is drawn on it."""
    return _FILL_FOR_STATE[State(node.state)]


def format_elapsed(milliseconds: int) -> str:
    """Format a duration as minutes, seconds and milliseconds: ``mm:ss:z``."""
    if milliseconds < 0:
        raise ValueError(f"elapsed time must not be negative: {milliseconds}")
    minutes = (milliseconds // 60_000) % 60
    seconds = (milliseconds // 1000) % 60
    return f"{minutes:02d}:{seconds:02d}:{milliseconds % 1000}"


class App:
    """Main window: grid canvas, algorithm controls and result summary."""

    def __init__(self, root) -> None:
        import tkinter as tk
        from tkinter import ttk

        self.root = root
        self.session = Session()
        self.drag_tool = DragTool(self.session)
        self._cells: dict[tuple[int, int], int] = {}
        self._fills: dict[tuple[int, int], str] = {}
        self._lines: list[int] = []
        self._playing = False
        self._elapsed = 0
        self._tick_job: str | None = None

        root.title("Grid Search Visualizer")

        menubar = tk.Menu(root)
        size_menu = tk.Menu(menubar, tearoff=False)
        for width, height in _GRID_SIZES:
            size_menu.add_command(
                label=f"{width}x{height}",
                command=lambda w=width, h=height: self._resize(w, h),
            )
        menubar.add_cascade(label="Grid Size", menu=size_menu)
        neighbour_menu = tk.Menu(menubar, tearoff=False)
        for count in (4, 8):
            neighbour_menu.add_command(
                label=f"{count} Neighbours",
                command=lambda c=count: self._set_neighbours(c),
            )
        menubar.add_cascade(label="Neighbours", menu=neighbour_menu)
        root.config(menu=menubar)

        header = tk.Frame(root)
        header.pack(side="top", fill="x", padx=20)
        self._info_label = tk.Label(header, text="", font=("Arial", 20, "bold"))
        self._info_label.pack(side="left")
        self._clock = tk.Label(header, text=format_elapsed(0), font=("Courier", 16))
        self._clock.pack(side="right")

        self._canvas = tk.Canvas(
            root,
            width=WINDOW_WIDTH + 2,
            height=WINDOW_HEIGHT + 2,
            background="white",
            highlightthickness=0,
        )
        self._canvas.pack(side="top", padx=20, pady=5)
        self._canvas.bind("<B1-Motion>", self._on_drag)
        self._canvas.bind("<ButtonRelease-1>", self._on_release)

        controls = tk.Frame(root)
        controls.pack(side="top", fill="x", padx=20, pady=5)

        self._algorithm_box = ttk.Combobox(
            controls, state="readonly", values=list(_ALGORITHM_NAMES.values()), width=10
        )
        self._algorithm_box.current(0)
        self._algorithm_box.bind("<<ComboboxSelected>>", self._on_algorithm_changed)
        self._algorithm_box.pack(side="left")

        self._heuristic = tk.IntVar(value=int(Heuristic.NONE))
        self._heuristic_frame = tk.Frame(controls)
        tk.Label(self._heuristic_frame, text="Heuristic:").pack(side="left")
        for heuristic, name in _HEURISTIC_NAMES.items():
            tk.Radiobutton(
                self._heuristic_frame,
                text=name,
                value=int(heuristic),
                variable=self._heuristic,
            ).pack(side="left")

        self._buttons = tk.Frame(controls)
        self._buttons.pack(side="right")
        tk.Button(self._buttons, text="Run", command=self._run).pack(side="left")
        tk.Button(self._buttons, text="Clean", command=self._clean).pack(side="left")
        tk.Button(self._buttons, text="Clear", command=self._clear).pack(side="left")
        self._smoothing = tk.IntVar(value=1)
        tk.Radiobutton(
            self._buttons, text="Smoothing V1", value=1, variable=self._smoothing
        ).pack(side="left")
        tk.Radiobutton(
            self._buttons, text="Smoothing V2", value=2, variable=self._smoothing
        ).pack(side="left")
        tk.Button(self._buttons, text="Smooth", command=self._smooth).pack(side="left")

        self._text = tk.Text(root, height=4, width=60, state="disabled")
        self._text.pack(side="top", fill="x", padx=20, pady=5)

        self._draw_grid()
        self._update_info_label()

    @property
    def _cell_width(self) -> int:
        return WINDOW_WIDTH // self.session.width

    @property
    def _cell_height(self) -> int:
        return WINDOW_HEIGHT // self.session.height

    def _draw_grid(self) -> None:
        self._canvas.delete("all")
        self._cells.clear()
        self._fills.clear()
        self._lines.clear()
        for node in self.session.grid:
            color = _TK_COLORS[fill_color(node)]
            item = self._canvas.create_rectangle(
                *cell_rect(node.x, node.y, self._cell_width, self._cell_height),
                fill=color,
                outline="black",
            )
            self._cells[(node.x, node.y)] = item
            self._fills[(node.x, node.y)] = color

    def _paint(self, x: int, y: int, color: Color) -> None:
        tk_color = _TK_COLORS[color]
        if self._fills.get((x, y)) != tk_color:
            self._canvas.itemconfigure(self._cells[(x, y)], fill=tk_color)
            self._fills[(x, y)] = tk_color

    def _refresh_cells(self) -> None:
        for node in self.session.grid:
            self._paint(node.x, node.y, fill_color(node))

    def _remove_lines(self) -> None:
        for line in self._lines:
            self._canvas.delete(line)
        self._lines.clear()

    def _set_text(self, text: str) -> None:
        self._text.configure(state="normal")
        self._text.delete("1.0", "end")
        self._text.insert("1.0", text)
        self._text.configure(state="disabled")

    def _update_info_label(self) -> None:
        self._info_label.configure(text=self.session.info_label())

    def _show_info(self) -> None:
        self._set_text(self.session.info_text())

    def _animate(self, actions: Iterable[Callable[[], None]], then: Callable[[], None]) -> None:
        """Run ``actions`` one per stall interval, then call ``then``."""
        pending = deque(actions)
        self._playing = True

        def step() -> None:
            if not pending:
                self._playing = False
                then()
                return
            pending.popleft()()
            self.root.after(self.session.stall_time, step)

        step()

    def _tick(self) -> None:
        self._elapsed += TICK_MS
        self._clock.configure(text=format_elapsed(self._elapsed))
        self._tick_job = self.root.after(TICK_MS, self._tick)

    def _start_timer(self) -> None:
        self._elapsed = 0
        self._clock.configure(text=format_elapsed(0))
        self._tick_job = self.root.after(TICK_MS, self._tick)

    def _stop_timer(self) -> None:
        if self._tick_job is not None:
            self.root.after_cancel(self._tick_job)
            self._tick_job = None

    def _on_drag(self, event) -> None:
        if self._playing:
            return
        x, y = cell_at(event.x, event.y, self._cell_width, self._cell_height)
        if self.drag_tool.drag(x, y):
            self._refresh_cells()

    def _on_release(self, event) -> None:
        self.drag_tool.release()

    def _on_algorithm_changed(self, event=None) -> None:
        algorithm = Algorithm(self._algorithm_box.current())
        if algorithm in (Algorithm.A_STAR, Algorithm.GBFS):
            self._heuristic_frame.pack(side="left", padx=10)
        else:
            self._heuristic_frame.pack_forget()

    def _resize(self, width: int, height: int) -> None:
        if self._playing:
            return
        if self.session.resize(width, height):
            self._draw_grid()
            self._set_text("")
            self._update_info_label()

    def _set_neighbours(self, count: int) -> None:
        self.session.set_neighbours(count)
        self._update_info_label()

    def _run(self) -> None:
        if self._playing:
            return
        algorithm = Algorithm(self._algorithm_box.current())
        heuristic = Heuristic(self._heuristic.get())
        if algorithm in (Algorithm.A_STAR, Algorithm.GBFS) and heuristic is Heuristic.NONE:
            return

        events: list[tuple[int, int, Color]] = []
        self._set_text("")
        self.session.run(algorithm, heuristic, lambda x, y, c: events.append((x, y, c)))

        search_events = [e for e in events if e[2] is not Color.MAGENTA]
        path_events = [e for e in events if e[2] is Color.MAGENTA]

        def paint_action(event: tuple[int, int, Color]) -> Callable[[], None]:
            return lambda: self._paint(*event)

        def search_done() -> None:
            self._stop_timer()
            self._animate(map(paint_action, path_events), self._show_info)

        self._start_timer()
        self._animate(map(paint_action, search_events), search_done)

    def _smooth(self) -> None:
        if self._playing:
            return
        self._remove_lines()
        result = self.session.smooth(self._smoothing.get())
        if result is None:
            return
        cw, ch = self._cell_width, self._cell_height

        def line_action(a: Node, b: Node) -> Callable[[], None]:
            def draw() -> None:
                line = self._canvas.create_line(
                    a.x * cw + cw // 2,
                    a.y * ch + ch // 2,
                    b.x * cw + cw // 2,
                    b.y * ch + ch // 2,
                    fill=_TK_COLORS[Color.CYAN],
                    width=3,
                )
                self._lines.append(line)

            return draw

        self._animate([line_action(a, b) for a, b in result.lines], self._show_info)

    def _clean(self) -> None:
        if self._playing:
            return
        self._remove_lines()
        self.session.clean()
        self._refresh_cells()

    def _clear(self) -> None:
        if self._playing:
            return
        self._remove_lines()
        self.session.clear()
        self._refresh_cells()


def main(argv=None) -> int:
    """Open the visualizer window."""
    parser = argparse.ArgumentParser(
        prog="gridsearch", description="Visualize graph searches on a grid."
    )
    parser.add_argument(
        "--size",
        choices=[f"{w}x{h}" for w, h in _GRID_SIZES],
        default="32x16",
        help="grid size (default: 32x16)",
    )
    parser.add_argument(
        "--neighbours",
        type=int,
        choices=(4, 8),
        default=4,
        help="neighbours per cell (default: 4)",
    )
    args = parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    app = App(root)
    width, height = (int(part) for part in args.size.split("x"))
    app._resize(width, height)
    app._set_neighbours(args.neighbours)
    root.mainloop()
    return 0