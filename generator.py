# generator.py

import numpy as np

from constants import NUM_ORIENTATIONS
from errors import InvalidConfiguration
from tile import Tile


def make_rng(seed=None):
    """Builds the random generator used for a game. The same seed always gives the same puzzle."""
    return np.random.default_rng(seed)


def seed_sequence(seed=None):
    """Yields one game seed after another. A fixed seed gives the same series of games."""
    rng = make_rng(seed)
    while True:
        yield int(rng.integers(0, 2**32))


def validate_dimensions(rows, cols, label_count):
    for name, value in (("rows", rows), ("cols", cols), ("label_count", label_count)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
            raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")


def _random_label(rng, label_count):
    return int(rng.integers(1, label_count + 1))


def generate_puzzle(rows, cols, label_count, rng):
    """
    Gera um tabuleiro resolvido, varrendo as células linha a linha.

    The top edge of each cell copies the bottom edge of the tile above it and
    the left edge copies the right edge of the tile to its left, so every
    interior adjacency matches by construction. Cells on the first row or
    column, and every right/bottom edge, get a fresh label. Tile ids start at
    1 in generation order.
    """
    validate_dimensions(rows, cols, label_count)

    grid = [[None] * cols for _ in range(rows)]
    tile_id = 1
    for r in range(rows):
        for c in range(cols):
            top = _random_label(rng, label_count) if r == 0 else grid[r - 1][c].bottom
            right = _random_label(rng, label_count)
            bottom = _random_label(rng, label_count)
            left = _random_label(rng, label_count) if c == 0 else grid[r][c - 1].right

            grid[r][c] = Tile(tile_id, top, right, bottom, left)
            tile_id += 1
    return grid


def scramble_rotations(grid, rng):
    """Gives every tile an independent uniform rotation. Positions are never shuffled."""
    for row in grid:
        for tile in row:
            tile.reset_rotation()
            for _ in range(int(rng.integers(0, NUM_ORIENTATIONS))):
                tile.rotate_clockwise()
    return grid
