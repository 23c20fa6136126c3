# tests/test_board.py

import random
import unittest

from backend.board import MinesweeperBoard, OutOfBoundsError, populate


def count_mine_neighbors(board, row, col):
    return sum(1 for nr, nc in board.neighbors(row, col) if board.cells[nr][nc].is_mine)


class TestMinesweeperBoard(unittest.TestCase):

    def test_board_dimensions(self):
        board = MinesweeperBoard(height=4, width=5)
        self.assertEqual(len(board.cells), 4)
        self.assertEqual(len(board.cells[0]), 5)
        self.assertEqual(board.total_cells, 20)

    def test_empty_board_rejected(self):
        with self.assertRaises(ValueError):
            MinesweeperBoard(0, 5)

    def test_coordinate_to_index(self):
        board = MinesweeperBoard(3, 4)
        self.assertEqual(board.coordinate_to_index(0, 0), 0)
        self.assertEqual(board.coordinate_to_index(2, 3), 11)
        self.assertEqual(board.coordinate_to_index(1, 2), 6)
        self.assertEqual(board.index_to_coordinate(6), (1, 2))

    def test_coordinate_to_index_out_of_bounds(self):
        board = MinesweeperBoard(3, 4)
        for row, col in [(-1, 0), (0, -1), (3, 0), (0, 4), (3, 4), (-32, 2)]:
            self.assertIsNone(board.coordinate_to_index(row, col))
        self.assertIsNone(board.coordinate_to_index("x", 0))
        self.assertIsNone(board.coordinate_to_index(None, 0))
        self.assertIsNone(board.coordinate_to_index(-0.5, 0))
        self.assertIsNone(board.coordinate_to_index(2.9, 3))
        self.assertIsNone(board.coordinate_to_index(True, 0))

    def test_neighbors_order_and_clipping(self):
        board = MinesweeperBoard(3, 3)
        self.assertEqual(
            board.neighbors(1, 1),
            [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0), (1, 0)],
        )
        self.assertEqual(board.neighbors(0, 0), [(0, 1), (1, 1), (1, 0)])
        self.assertEqual(board.neighbors(2, 2), [(1, 1), (1, 2), (2, 1)])

    def test_accessors_reject_out_of_bounds(self):
        board = MinesweeperBoard(2, 2)
        with self.assertRaises(OutOfBoundsError):
            board.is_mine(2, 0)
        with self.assertRaises(OutOfBoundsError):
            board.is_revealed(0, -1)
        with self.assertRaises(OutOfBoundsError):
            board.proximity(5, 5)
        with self.assertRaises(OutOfBoundsError):
            board.set_revealed(-1, -1)
        with self.assertRaises(OutOfBoundsError):
            board.set_mine(0, 2)
        with self.assertRaises(IndexError):
            board.set_proximity(2, 2, 1)

    def test_set_revealed_is_monotonic(self):
        board = MinesweeperBoard(2, 2)
        self.assertTrue(board.set_revealed(0, 1))
        self.assertFalse(board.set_revealed(0, 1))
        self.assertTrue(board.is_revealed(0, 1))

    def test_set_mine_updates_proximity(self):
        board = MinesweeperBoard(3, 3)
        board.set_mine(0, 0)
        board.set_mine(0, 0)
        self.assertEqual(board.num_mines, 1)
        self.assertEqual(board.proximity(1, 1), 1)
        self.assertEqual(board.proximity(2, 2), 0)

    def test_set_proximity_range(self):
        board = MinesweeperBoard(2, 2)
        board.set_proximity(0, 0, 3)
        self.assertEqual(board.proximity(0, 0), 3)
        with self.assertRaises(ValueError):
            board.set_proximity(0, 0, 9)

    def test_mine_count(self):
        board = MinesweeperBoard(5, 5)
        placed = board.populate(5, rng=random.Random(1))
        mine_count = sum(1 for row in board.cells for cell in row if cell.is_mine)
        self.assertEqual(mine_count, 5)
        self.assertEqual(board.num_mines, 5)
        self.assertEqual(len(set(placed)), 5)
        self.assertEqual(sorted(placed), board.mine_coordinates())

    def test_populate_rejects_too_many_mines(self):
        board = MinesweeperBoard(3, 3)
        with self.assertRaises(ValueError):
            board.populate(9)
        with self.assertRaises(ValueError):
            board.populate(-1)

    def test_populate_allows_all_but_one(self):
        board = MinesweeperBoard(3, 3)
        board.populate(8, rng=random.Random(7))
        self.assertEqual(board.num_mines, 8)
        self.assertEqual(board.hidden_non_mine_cells(), 1)

    def test_proximity_matches_mine_neighbors(self):
        for seed, (height, width, divisor) in enumerate([(26, 26, 8), (26, 26, 16), (7, 13, 3), (1, 9, 2)]):
            board = MinesweeperBoard(height, width)
            num_mines = (height * width) // divisor
            populate(board, num_mines, rng=random.Random(seed))

            self.assertEqual(len(board.mine_coordinates()), num_mines)
            for r in range(height):
                for c in range(width):
                    expected = count_mine_neighbors(board, r, c)
                    self.assertEqual(board.proximity(r, c), expected, (r, c))
                    if board.proximity(r, c) == 0:
                        self.assertFalse(
                            any(board.is_mine(nr, nc) for nr, nc in board.neighbors(r, c))
                        )

    def test_populate_twice_resets_board(self):
        board = MinesweeperBoard(6, 6)
        board.populate(10, rng=random.Random(3))
        board.set_revealed(0, 0)
        board.populate(4, rng=random.Random(4))
        self.assertEqual(board.num_mines, 4)
        self.assertEqual(len(board.mine_coordinates()), 4)
        self.assertFalse(board.is_revealed(0, 0))
        for r in range(6):
            for c in range(6):
                self.assertEqual(board.proximity(r, c), count_mine_neighbors(board, r, c))

    def test_seeded_populate_is_reproducible(self):
        a = MinesweeperBoard(10, 10)
        b = MinesweeperBoard(10, 10)
        a.populate(12, rng=random.Random(42))
        b.populate(12, rng=random.Random(42))
        self.assertEqual(a.mine_coordinates(), b.mine_coordinates())

    def test_every_cell_can_hold_a_mine(self):
        # One mine on a 2x2 board, many draws: each position must show up
        seen = set()
        rng = random.Random(0)
        for _ in range(200):
            board = MinesweeperBoard(2, 2)
            seen.update(board.populate(1, rng=rng))
        self.assertEqual(seen, {(0, 0), (0, 1), (1, 0), (1, 1)})

    def test_from_mines(self):
        board = MinesweeperBoard.from_mines(4, 4, [(0, 0)])
        self.assertTrue(board.is_mine(0, 0))
        self.assertEqual(board.proximity(0, 1), 1)
        self.assertEqual(board.proximity(1, 0), 1)
        self.assertEqual(board.proximity(1, 1), 1)
        self.assertEqual(board.proximity(3, 3), 0)
        self.assertEqual(board.hidden_non_mine_cells(), 15)

    def test_from_mines_rejects_full_board(self):
        with self.assertRaises(ValueError):
            MinesweeperBoard.from_mines(1, 2, [(0, 0), (0, 1)])
        with self.assertRaises(OutOfBoundsError):
            MinesweeperBoard.from_mines(2, 2, [(2, 2)])


if __name__ == "__main__":
    unittest.main()
