# session.py

import numpy as np

from analysis import is_solved
from constants import GRID_SIZE, LABEL_COUNT
from errors import OutOfBounds
from generator import generate_puzzle, make_rng, scramble_rotations


class GameSession:
    """
    Holds the board of the current game and the only operations that change it.

    The solved state is never stored; every query re-checks the grid. An
    optional `on_change(session)` callback runs after `new_game` and `rotate`
    so a view can refresh without the core knowing about it.
    """

    def __init__(self, on_change=None):
        self.on_change = on_change
        self._grid = []
        self._label_count = 0

    @property
    def grid(self):
        return self._grid

    @property
    def rows(self):
        return len(self._grid)

    @property
    def cols(self):
        return len(self._grid[0]) if self._grid else 0

    @property
    def label_count(self):
        return self._label_count

    def new_game(self, rows=GRID_SIZE, cols=GRID_SIZE, label_count=LABEL_COUNT, seed=None):
        rng = make_rng(seed)
        # generate_puzzle valida os parâmetros antes de tocar no tabuleiro atual
        grid = generate_puzzle(rows, cols, label_count, rng)
        scramble_rotations(grid, rng)

        self._grid = grid
        self._label_count = label_count
        self._notify()
        return self.snapshot()

    def tile_at(self, row, col):
        if not (_is_index(row) and _is_index(col)) or not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfBounds(row, col, self.rows, self.cols)
        return self._grid[row][col]

    def edge(self, tile, side):
        return tile.edge(side)

    def rotate(self, row, col):
        tile = self.tile_at(row, col)
        tile.rotate_clockwise()
        self._notify()
        return tile

    def is_solved(self):
        if not self._grid:
            return False
        return is_solved(self._grid)

    def snapshot(self):
        """Immutable copy of the board: (tile_id, (top, right, bottom, left), rotation) per cell."""
        return tuple(
            tuple((tile.id, tile.edges, tile.rotation) for tile in row)
            for row in self._grid
        )

    def _notify(self):
        if self.on_change is not None:
            self.on_change(self)


def _is_index(value):
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
