import logging

from models.sudoku_grid import GRID_SIZE

logger = logging.getLogger(__name__)


class SudokuSolver:
    def solve(self, grid):
        """Solve Sudoku using backtracking

        Returns (solution, states_checked). solution is None when no
        completion exists; states_checked counts every board examined.
        """
        logger.debug("Starting search:\n%s", grid)

        # Count is threaded through the recursion so solve() stays reentrant
        counter = [0]
        solution = self._solve_helper(grid.copy(), counter)

        if solution is not None:
            logger.info("Solved after checking %d partial solutions", counter[0])
        else:
            logger.info("No solution after checking %d partial solutions", counter[0])

        return solution, counter[0]

    def _solve_helper(self, grid, counter):
        """Recursive helper for solving"""
        counter[0] += 1

        if not grid.satisfies_constraints():
            return None

        if grid.is_full():
            return grid

        index = grid.first_empty_index()
        row, col = divmod(index, GRID_SIZE)

        for num in range(1, GRID_SIZE + 1):
            candidate = grid.copy()
            candidate.set(row, col, num)

            solution = self._solve_helper(candidate, counter)
            if solution is not None:
                return solution

        return None
