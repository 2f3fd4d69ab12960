from main import SudokuApp
from models.sudoku_grid import SudokuGrid


def test_run_prints_solution(capsys, puzzle):
    solution, checked = SudokuApp().run(puzzle)

    out = capsys.readouterr().out
    assert "Before solving:" in out
    assert f"Solved after checking {checked} partial solutions:" in out
    assert str(solution) in out


def test_run_reports_unsolvable(capsys):
    solution, checked = SudokuApp().run(SudokuGrid([2, 2] + [None] * 79))

    out = capsys.readouterr().out
    assert solution is None
    assert "Board is determined as not solvable after checking 1 partial solutions" in out
