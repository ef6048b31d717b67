from gridpathviz.app import Editor
from gridpathviz.grid import CELL_SIZE, draw_grid, new_frame
from gridpathviz.types import CellType, PlacementMode


def _centre(row, col):
    return col * CELL_SIZE + CELL_SIZE / 2, row * CELL_SIZE + CELL_SIZE / 2


def _count(editor, cell_type):
    return sum(cell.cell_type is cell_type for row in editor.field for cell in row)


def test_wall_click_toggles():
    editor = Editor(4, 4)
    assert editor.click(*_centre(1, 2))
    assert editor.field[1][2].cell_type is CellType.WALL
    editor.click(*_centre(1, 2))
    assert editor.field[1][2].cell_type is CellType.EMPTY


def test_click_outside_grid_ignored():
    editor = Editor(3, 3)
    assert editor.click(*_centre(5, 0)) is False
    assert _count(editor, CellType.WALL) == 0


def test_negative_coordinates_clamp_to_first_cell():
    editor = Editor(3, 3)
    editor.click(-5.0, -5.0)
    assert editor.field[0][0].cell_type is CellType.WALL


def test_start_moves_with_new_click():
    editor = Editor(4, 4)
    editor.set_mode(PlacementMode.START)
    editor.click(*_centre(0, 0))
    editor.click(*_centre(2, 3))
    assert _count(editor, CellType.START) == 1
    assert editor.field[2][3].cell_type is CellType.START
    assert editor.start_pos == (2, 3)


def test_start_not_placed_on_wall():
    editor = Editor(4, 4)
    editor.click(*_centre(1, 1))
    editor.set_mode(PlacementMode.START)
    assert editor.click(*_centre(1, 1)) is False
    assert editor.field[1][1].cell_type is CellType.WALL
    assert editor.start_pos is None


def test_goal_placement():
    editor = Editor(4, 4)
    editor.set_mode(PlacementMode.GOAL)
    editor.click(*_centre(3, 3))
    assert editor.goal_pos == (3, 3)
    assert editor.field[3][3].cell_type is CellType.GOAL


def test_run_needs_start_and_goal(capsys):
    editor = Editor(4, 4)
    assert editor.request_run() is False
    assert "Please set both start and goal" in capsys.readouterr().out
    assert editor.run_pending(None) is None


def test_full_cycle_run_and_reset(capsys):
    editor = Editor(5, 5)
    editor.set_mode(PlacementMode.START)
    editor.click(*_centre(0, 0))
    editor.set_mode(PlacementMode.GOAL)
    editor.click(*_centre(4, 4))
    assert editor.request_run() is True
    editor.set_mode(PlacementMode.WALL)
    assert editor.click(*_centre(2, 2)) is False
    assert editor.run_pending(None) is True
    assert editor.path_drawn
    assert _count(editor, CellType.PATH) > 0
    assert editor.run_pending(None) is None
    assert editor.reset() is True
    assert "Grid reset." in capsys.readouterr().out
    assert _count(editor, CellType.PATH) == 0
    assert _count(editor, CellType.VISITED) == 0
    assert editor.field[0][0].cell_type is CellType.START
    assert editor.placing


def test_reset_without_search_does_nothing():
    editor = Editor(3, 3)
    assert editor.reset() is False


def test_render_matches_draw_grid():
    editor = Editor(2, 2)
    editor.click(*_centre(0, 1))
    frame = new_frame(2, 2)
    editor.render(frame)
    expected = new_frame(2, 2)
    draw_grid(expected, editor.field, 2, 2)
    assert frame == expected
    assert any(frame)