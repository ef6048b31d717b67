# gridpathviz

gridpathviz draws an editable grid in a window. You place walls, a start cell
and a goal cell on it, then watch the A* search run one step at a time.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install .[test]
pytest
```

## Usage

Start the visualizer with a 10 × 10 grid:

```
gridpathviz
```

The grid size can be changed. Both values must be positive:

```
gridpathviz --height 15 --width 20
```

Each cell is 40 pixels wide.

Controls:

| Key / action | Effect                                                             |
|--------------|--------------------------------------------------------------------|
| `W`          | Wall mode (the default). A click turns an empty cell into a wall, or a wall back into an empty cell. |
| `S`          | Start mode. A click on an empty cell moves the start there.       |
| `G`          | Goal mode. A click on an empty cell moves the goal there.         |
| `Space`      | Runs A* once both a start and a goal are set.                      |
| `R`          | After a run, clears visited and path cells so you can edit again.  |

The left, middle and right mouse buttons all place items. Clicks are ignored
while a search is running or after it has finished, until you press `R`.
Clicks on a wall do nothing in start or goal mode.

The search moves between horizontally and vertically adjacent cells only. It
uses the Manhattan distance as its heuristic. Each expanded cell turns blue.
If the search finds a path, the cells on that path then turn yellow one by
one, with a 0.1 s pause between steps. If no path exists, the program prints
`No path found.` If you press `Space` before both a start and a goal are set,
it prints a reminder instead.

Colours: empty cells are white, walls dark grey, the start green, the goal
red, visited cells blue and path cells yellow. Each cell has a one-pixel dark
border.

## Library use

You can use the pieces without a window:

- `gridpathviz.types` defines `CellType`, `Cell`, `PlacementMode` and `State`.
  Instances of `State` are ordered by their `priority` alone.
- `gridpathviz.grid` provides `new_frame`, `draw_grid`, `draw_cell_with_border`
  and `color_for`, plus the constants `CELL_SIZE` and `COLORS`. These functions
  render a grid into a flat RGBA `bytearray`.
- `gridpathviz.astar` provides `heuristic`, the Manhattan distance, and
  `a_star_step_by_step(field, start, goal, on_step, height, width)`. Positions
  are `(row, column)` tuples. The function updates the field in place. It calls
  `on_step(field)` after each visual change; pass `None` to skip this. It
  returns whether a path was found.
- `gridpathviz.app.Editor(height, width)` holds the state of the interactive
  editor. Its methods are `set_mode`, `click(px, py)`, `request_run`,
  `run_pending(on_step)`, `reset` and `render(frame)`. `gridpathviz.app.main`
  is the command's entry point.

```python
from gridpathviz.app import Editor
from gridpathviz.types import PlacementMode

editor = Editor(5, 5)
editor.set_mode(PlacementMode.START)
editor.click(10, 10)          # cell (0, 0)
editor.set_mode(PlacementMode.GOAL)
editor.click(170, 170)        # cell (4, 4)
editor.request_run()
found = editor.run_pending(None)
```