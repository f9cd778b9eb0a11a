# gridsearch

A small desktop tool for watching search algorithms explore a square grid.
You draw obstacles with the mouse, move the start and goal cells, pick an
algorithm and watch it expand nodes until it reaches the goal. A found path
can then be smoothed into straight line-of-sight segments.

Algorithms:

- Depth-first search (DFS), visiting neighbours in random order
- Breadth-first search (BFS)
- Dijkstra
- A* (Manhattan, Octal, Euclidian or Chebyshev heuristic)
- Greedy best-first search (GBFS, same heuristics)

Grids come in 32x16, 64x32 and 128x64 cells, with 4 or 8 neighbours per cell.
With 8 neighbours a diagonal step is allowed only where at least one of the
two adjoining straight steps is open.

## Installing

```
pip install .
```

The window uses Tkinter from the standard library; no other dependencies are
needed.

## Running

```
gridsearch
gridsearch --size 64x32 --neighbours 8
```

`--size` is one of `32x16` (default), `64x32` or `128x64`; `--neighbours` is
`4` (default) or `8`. Both can also be changed from the window's menus.

- Drag over white cells to draw obstacles, over black cells to erase them.
- Drag the green (start) or red (goal) cell onto a free cell to move it.
- Choose the algorithm and, for A* and GBFS, a heuristic, then press *Run*.
  Discovered cells turn blue, expanded cells dark gray, and the found path
  magenta; a clock shows the time the animation took.
- *Smooth* draws the smoothed path as cyan lines, using either V1 (a band
  test along the path) or V2 (exact line of sight between cell centres).
- The text panel shows how many nodes were expanded, the path length, and
  after smoothing the length of the smoothed path.
- *Clean* removes the search colouring and keeps obstacles; *Clear* removes
  the obstacles as well.

Grids cannot be saved or loaded; each one lives only as long as the window.

## Using it from Python

The grid, the searches and the smoothing work without a window:

```python
from gridsearch.session import Session
from gridsearch.search import Algorithm, Heuristic

session = Session(32, 16, 8)
session.paint(10, 8, "black")          # place an obstacle
session.run(Algorithm.A_STAR, Heuristic.OCTAL, None)
session.smooth(2)
print(session.info_text())
```

`Session.run` takes an optional callback `on_change(x, y, color)` that is
called for every cell the search colours, in order. `DragTool` in
`gridsearch.interaction` turns a sequence of `drag(x, y)` calls and a
`release()` into edits of a session, the same way the mouse does.

Lower-level pieces live in `gridsearch.gridgraph` (`GridGraph`, `Node`,
`State`), `gridsearch.search` (`create_search`, `SearchBFS`, `SearchAStar`, ...),
`gridsearch.geometry` (distances, heuristics, line intersection) and
`gridsearch.smoothing` (`smooth_path`, `smooth_path_los`, `path_length`).

## Tests

```
pip install .[test]
pytest
```