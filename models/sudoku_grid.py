import numpy as np

GRID_SIZE = 9
BOX_SIZE = 3
NUM_CELLS = GRID_SIZE * GRID_SIZE
EMPTY = 0

SEPARATOR = "+---+---+---+"


class SudokuGrid:
    """A 9x9 Sudoku grid stored row-major as 81 cells (0 = empty)"""

    def __init__(self, cells=None):
        if cells is None:
            self.cells = np.zeros(NUM_CELLS, dtype=np.int8)
            return

        cells = [EMPTY if cell is None else cell for cell in cells]
        if len(cells) != NUM_CELLS:
            raise ValueError(f"Grid must have {NUM_CELLS} cells, got {len(cells)}")

        for index, cell in enumerate(cells):
            _check_digit(cell, allow_empty=True, where=f"cell {index}")

        self.cells = np.array(cells, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows):
        """Build a grid from 9 rows of 9 values (0 or None for empty)"""
        rows = [list(row) for row in rows]
        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise ValueError("Grid must be 9 rows of 9 cells")

        return cls([cell for row in rows for cell in row])

    def copy(self):
        grid = type(self).__new__(type(self))
        grid.cells = self.cells.copy()
        return grid

    def get(self, row, col):
        """Return the digit at (row, col), or None if the cell is empty"""
        digit = int(self.cells[_cell_index(row, col)])
        return None if digit == EMPTY else digit

    def set(self, row, col, digit):
        """Place a digit 1-9 at (row, col); None clears the cell"""
        index = _cell_index(row, col)
        if digit is None:
            self.cells[index] = EMPTY
            return

        _check_digit(digit, allow_empty=False, where=f"cell ({row}, {col})")
        self.cells[index] = digit

    def to_rows(self):
        return self.cells.reshape(GRID_SIZE, GRID_SIZE).tolist()

    def first_empty_index(self):
        """Lowest row-major index of an empty cell, or None when full"""
        empty = np.flatnonzero(self.cells == EMPTY)
        if empty.size == 0:
            return None
        return int(empty[0])

    def is_full(self):
        return bool(np.all(self.cells != EMPTY))

    def is_solved(self):
        return self.is_full() and self.satisfies_constraints()

    def satisfies_constraints(self):
        return (self.satisfies_row_constraints()
                and self.satisfies_column_constraints()
                and self.satisfies_box_constraints())

    def satisfies_row_constraints(self):
        return not _has_duplicates(self._rows())

    def satisfies_column_constraints(self):
        return not _has_duplicates(self._rows().T)

    def satisfies_box_constraints(self):
        # (box_y, y, box_x, x) -> one row per box, ordered box_y then box_x
        boxes = self._rows().reshape(BOX_SIZE, BOX_SIZE, BOX_SIZE, BOX_SIZE)
        boxes = boxes.transpose(0, 2, 1, 3).reshape(GRID_SIZE, GRID_SIZE)
        return not _has_duplicates(boxes)

    def _rows(self):
        return self.cells.reshape(GRID_SIZE, GRID_SIZE)

    def render(self):
        """Render the grid as text with 3x3 block separators"""
        lines = []
        for y, row in enumerate(self.to_rows()):
            if y % BOX_SIZE == 0:
                lines.append(SEPARATOR)

            line = ""
            for x, digit in enumerate(row):
                if x % BOX_SIZE == 0:
                    line += "|"
                line += str(digit) if digit != EMPTY else " "
            lines.append(line + "|")

        lines.append(SEPARATOR)
        return "\n".join(lines)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"SudokuGrid({self.cells.tolist()!r})"

    def __eq__(self, other):
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    __hash__ = None


def _cell_index(row, col):
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise ValueError(f"Cell ({row}, {col}) is outside the grid")
    return row * GRID_SIZE + col


def _check_digit(value, allow_empty, where):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"Invalid value {value!r} at {where}")

    low = EMPTY if allow_empty else 1
    if not low <= value <= GRID_SIZE:
        raise ValueError(f"Digit {value} at {where} must be in {low}-{GRID_SIZE}")


def _has_duplicates(units):
    """Check each row of a (9, 9) array for a repeated non-empty digit

    Each row of `units` holds the 9 cells of one row, column or box.
    Sorting puts equal digits next to each other, so a repeat shows up as
    two equal non-empty neighbours.
    """
    ordered = np.sort(units, axis=1)
    repeated = (ordered[:, 1:] == ordered[:, :-1]) & (ordered[:, 1:] != EMPTY)
    return bool(repeated.any())
