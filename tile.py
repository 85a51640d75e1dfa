# tile.py

import numpy as np

from constants import TOP, RIGHT, BOTTOM, LEFT, SIDE_NAMES, NUM_ORIENTATIONS


class Tile:
    """
    A Tetravex tile: four edge labels plus a rotation offset.

    The base edges never change after creation. The current edge on each side
    is derived from the base edges and the number of quarter turns applied.
    """

    def __init__(self, tile_id, top, right, bottom, left):
        self._id = tile_id
        self._base_edges = np.array([top, right, bottom, left], dtype=np.int64)
        self._rotation = 0

    @property
    def id(self):
        return self._id

    @property
    def rotation(self):
        return self._rotation

    @property
    def base_edges(self):
        return tuple(int(v) for v in self._base_edges)

    @property
    def edges(self):
        """Current (top, right, bottom, left) labels."""
        # np.roll "gira" os elementos: o que estava na esquerda passa para cima
        return tuple(int(v) for v in np.roll(self._base_edges, self._rotation))

    def rotate_clockwise(self):
        self._rotation = (self._rotation + 1) % NUM_ORIENTATIONS

    def reset_rotation(self):
        self._rotation = 0

    def edge(self, side):
        """Label currently on `side`, given as an index (0-3) or a name ('top', ...)."""
        if isinstance(side, str):
            try:
                side = SIDE_NAMES.index(side.lower())
            except ValueError:
                raise KeyError(f"Unknown side '{side}', expected one of {SIDE_NAMES}") from None
        elif isinstance(side, bool) or not 0 <= side < NUM_ORIENTATIONS:
            raise IndexError(f"Side index must be in 0..{NUM_ORIENTATIONS - 1}, got {side!r}")
        return self.edges[side]

    @property
    def top(self):
        return self.edge(TOP)

    @property
    def right(self):
        return self.edge(RIGHT)

    @property
    def bottom(self):
        return self.edge(BOTTOM)

    @property
    def left(self):
        return self.edge(LEFT)

    def __repr__(self):
        return f"Tile(id={self._id}, edges={self.edges}, rotation={self._rotation})"
