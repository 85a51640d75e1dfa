"""
Unit tests for the win check and board statistics.
"""

import unittest

from analysis import count_adjacencies, count_matching_edges, find_mismatched_edges, is_solved
from tile import Tile


def solved_2x2():
    return [
        [Tile(1, 1, 2, 3, 4), Tile(2, 5, 6, 7, 2)],
        [Tile(3, 3, 8, 9, 1), Tile(4, 7, 1, 2, 8)],
    ]


class TestIsSolved(unittest.TestCase):
    """Test cases for is_solved."""

    def test_solved_grid(self):
        self.assertTrue(is_solved(solved_2x2()))

    def test_single_cell_always_solved(self):
        grid = [[Tile(1, 1, 2, 3, 4)]]
        for _ in range(4):
            self.assertTrue(is_solved(grid))
            grid[0][0].rotate_clockwise()

    def test_rotating_one_tile_breaks_solution(self):
        grid = solved_2x2()
        grid[1][1].rotate_clockwise()
        self.assertFalse(is_solved(grid))

    def test_horizontal_mismatch_only(self):
        grid = [[Tile(1, 1, 2, 1, 1), Tile(2, 1, 1, 1, 3)]]
        self.assertFalse(is_solved(grid))


class TestBoardStatistics(unittest.TestCase):
    """Test cases for find_mismatched_edges and count_matching_edges."""

    def test_no_mismatches_when_solved(self):
        grid = solved_2x2()
        self.assertEqual(find_mismatched_edges(grid), [])
        self.assertEqual(count_matching_edges(grid), count_adjacencies(2, 2))

    def test_mismatches_after_rotation(self):
        grid = solved_2x2()
        grid[1][1].rotate_clockwise()
        self.assertEqual(find_mismatched_edges(grid), [((0, 1), (1, 1)), ((1, 0), (1, 1))])
        self.assertEqual(count_matching_edges(grid), 2)

    def test_count_adjacencies(self):
        self.assertEqual(count_adjacencies(3, 3), 12)
        self.assertEqual(count_adjacencies(1, 1), 0)
        self.assertEqual(count_adjacencies(1, 4), 3)

    def test_single_row(self):
        grid = [[Tile(1, 1, 2, 1, 1), Tile(2, 1, 1, 1, 3), Tile(3, 1, 1, 1, 1)]]
        self.assertEqual(find_mismatched_edges(grid), [((0, 0), (0, 1))])
        self.assertEqual(count_matching_edges(grid), 1)

    def test_empty_grid(self):
        self.assertEqual(find_mismatched_edges([]), [])
        self.assertEqual(count_matching_edges([]), 0)


if __name__ == '__main__':
    unittest.main()
