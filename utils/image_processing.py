import cv2
import numpy as np

from models.sudoku_grid import BOX_SIZE, EMPTY, GRID_SIZE

GIVEN_COLOR = (255, 0, 0)  # Blue (BGR)
FILLED_COLOR = (0, 150, 0)  # Green
LINE_COLOR = (0, 0, 0)


def render_grid_image(grid, original=None, cell_size=50):
    """Draw a grid as a BGR image

    Digits already present in `original` are drawn blue, the rest green.
    Without `original` every digit counts as given.
    """
    if cell_size < 10:
        raise ValueError(f"cell_size must be at least 10, got {cell_size}")

    size = GRID_SIZE * cell_size
    image = np.ones((size, size, 3), dtype=np.uint8) * 255

    # Draw grid lines
    for i in range(GRID_SIZE + 1):
        thickness = 3 if i % BOX_SIZE == 0 else 1
        offset = min(i * cell_size, size - 1)
        cv2.line(image, (offset, 0), (offset, size), LINE_COLOR, thickness)
        cv2.line(image, (0, offset), (size, offset), LINE_COLOR, thickness)

    digits = grid.to_rows()
    givens = original.to_rows() if original is not None else digits
    scale = cell_size / 62.5

    # Draw numbers
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            digit = digits[i][j]
            if digit == EMPTY:
                continue

            x = j * cell_size + cell_size // 2
            y = i * cell_size + cell_size // 2
            color = GIVEN_COLOR if givens[i][j] != EMPTY else FILLED_COLOR

            cv2.putText(image, str(digit), (x - cell_size // 5, y + cell_size // 5),
                        cv2.FONT_HERSHEY_SIMPLEX, scale, color, 2)

    return image


def save_grid_image(path, grid, original=None, cell_size=50):
    """Render a grid and write it to `path`; returns OpenCV's success flag"""
    image = render_grid_image(grid, original, cell_size)
    return bool(cv2.imwrite(str(path), image))
