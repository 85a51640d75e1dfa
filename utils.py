# utils.py
import numpy as np


def grid_to_array(grid):
    """
    Converts a grid of tiles into a (rows, cols, 4) array with the current
    (top, right, bottom, left) labels of each cell.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    edges = np.zeros((rows, cols, 4), dtype=np.int64)
    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            edges[r, c] = tile.edges
    return edges


def format_grid(grid):
    """Text rendering of the board, one 3-line block per tile."""
    if not grid:
        return ""
    cols = len(grid[0])
    separator = "+" + "+".join(["-------"] * cols) + "+"

    lines = [separator]
    for row in grid:
        top_line, middle_line, bottom_line = [], [], []
        for tile in row:
            top, right, bottom, left = tile.edges
            top_line.append(f"  {top:^3}  ")
            middle_line.append(f"{left:<3} {right:>3}")
            bottom_line.append(f"  {bottom:^3}  ")
        for parts in (top_line, middle_line, bottom_line):
            lines.append("|" + "|".join(parts) + "|")
        lines.append(separator)
    return "\n".join(lines)


def get_grid_cell_from_point(point, origin, tile_size, gap, rows, cols):
    """
    Returns the (row, col) under `point`, or None when the point falls outside
    the grid or in the gap between two tiles.
    """
    dx = point[0] - origin[0]
    dy = point[1] - origin[1]
    if dx < 0 or dy < 0:
        return None

    pitch = tile_size + gap
    col, offset_x = divmod(int(dx), pitch)
    row, offset_y = divmod(int(dy), pitch)
    if offset_x >= tile_size or offset_y >= tile_size:
        return None
    if 0 <= row < rows and 0 <= col < cols:
        return row, col
    return None
