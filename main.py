import logging

from models.sudoku_grid import SudokuGrid
from models.sudoku_solver import SudokuSolver

CLASSIC_PUZZLE = [
    [0, 0, 5, 3, 0, 0, 0, 0, 0],
    [8, 0, 0, 0, 0, 0, 0, 2, 0],
    [0, 7, 0, 0, 1, 0, 5, 0, 0],
    [4, 0, 0, 0, 0, 5, 3, 0, 0],
    [0, 1, 0, 0, 7, 0, 0, 0, 6],
    [0, 0, 3, 2, 0, 0, 0, 8, 0],
    [0, 6, 0, 5, 0, 0, 0, 0, 9],
    [0, 0, 4, 0, 0, 0, 0, 3, 0],
    [0, 0, 0, 0, 0, 9, 7, 0, 0],
]


class SudokuApp:
    def __init__(self):
        self.sudoku_solver = SudokuSolver()

    def run(self, grid):
        self.print_grid(grid, "Before solving:")

        solution, checked = self.sudoku_solver.solve(grid)

        if solution is not None:
            assert solution.is_solved()
            self.print_grid(solution, f"Solved after checking {checked} partial solutions:")
        else:
            print(f"Board is determined as not solvable after checking {checked} partial solutions")

        return solution, checked

    def print_grid(self, grid, title="Grid:"):
        """Print grid to console"""
        print(f"\n{title}")
        print(grid)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = SudokuApp()
    app.run(SudokuGrid.from_rows(CLASSIC_PUZZLE))


if __name__ == "__main__":
    main()
