# analysis.py

from utils import grid_to_array
from constants import TOP, RIGHT, BOTTOM, LEFT

# =============================================================================
# SECTION 1: VERIFICAÇÃO DE VITÓRIA
# =============================================================================

def is_solved(grid):
    """
    True when every pair of grid-adjacent tiles has matching facing edges.

    Scans row by row and stops at the first mismatch.
    """
    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            # Check North match (with tile above)
            if r > 0 and tile.top != grid[r - 1][c].bottom:
                return False
            # Check West match (with tile to the left)
            if c > 0 and tile.left != row[c - 1].right:
                return False
    return True

# =============================================================================
# SECTION 2: ESTATÍSTICAS DO TABULEIRO
# =============================================================================

def find_mismatched_edges(grid):
    """
    Lists every adjacency whose facing edges differ, as ((r1, c1), (r2, c2)).
    Vertical pairs come first, then horizontal pairs, each in row-major order.
    """
    edges = grid_to_array(grid)
    if edges.size == 0:
        return []

    mismatches = []
    vertical = edges[:-1, :, BOTTOM] != edges[1:, :, TOP]
    for r, c in zip(*vertical.nonzero()):
        mismatches.append(((int(r), int(c)), (int(r) + 1, int(c))))

    horizontal = edges[:, :-1, RIGHT] != edges[:, 1:, LEFT]
    for r, c in zip(*horizontal.nonzero()):
        mismatches.append(((int(r), int(c)), (int(r), int(c) + 1)))
    return mismatches


def count_adjacencies(rows, cols):
    return rows * (cols - 1) + (rows - 1) * cols


def count_matching_edges(grid):
    """Number of interior adjacencies whose facing edges are equal."""
    edges = grid_to_array(grid)
    if edges.size == 0:
        return 0
    vertical = int((edges[:-1, :, BOTTOM] == edges[1:, :, TOP]).sum())
    horizontal = int((edges[:, :-1, RIGHT] == edges[:, 1:, LEFT]).sum())
    return vertical + horizontal
