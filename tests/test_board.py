import unittest

from game import Board, Cell, InvalidConfiguration, OutOfBounds


class TestBoard(unittest.TestCase):
    def test_given_even_widths_when_constructed_then_standard_four_piece_opening(self):
        for width in (2, 4, 6, 8, 10, 12):
            board = Board(width)
            c = width // 2
            self.assertEqual(board.at((c - 1, c - 1)), Cell.WHITE)
            self.assertEqual(board.at((c, c)), Cell.WHITE)
            self.assertEqual(board.at((c, c - 1)), Cell.BLACK)
            self.assertEqual(board.at((c - 1, c)), Cell.BLACK)
            self.assertEqual(board.count(Cell.WHITE), 2)
            self.assertEqual(board.count(Cell.BLACK), 2)
            self.assertEqual(board.count(Cell.EMPTY), width * width - 4)

    def test_given_default_when_constructed_then_width_is_eight(self):
        self.assertEqual(Board().width, 8)

    def test_given_bad_width_when_constructed_then_invalid_configuration(self):
        for width in (0, 1, 3, 7, -2):
            with self.assertRaises(InvalidConfiguration):
                Board(width)
        with self.assertRaises(InvalidConfiguration):
            Board(8.0)  # type: ignore[arg-type]

    def test_given_coords_when_checking_bounds_then_only_inside_cells_accepted(self):
        board = Board(4)
        self.assertTrue(board.in_bounds((0, 0)))
        self.assertTrue(board.in_bounds((3, 3)))
        self.assertFalse(board.in_bounds((-1, 0)))
        self.assertFalse(board.in_bounds((0, 4)))
        self.assertFalse(board.in_bounds((4, 4)))

    def test_given_out_of_bounds_when_reading_or_writing_then_raises(self):
        board = Board(4)
        with self.assertRaises(OutOfBounds):
            board.at((4, 0))
        with self.assertRaises(OutOfBounds):
            board.set((0, -1), Cell.BLACK)

    def test_given_copy_when_mutating_then_original_unchanged(self):
        board = Board(4)
        other = board.copy()
        self.assertEqual(board, other)
        other.set((0, 0), Cell.BLACK)
        self.assertEqual(board.at((0, 0)), Cell.EMPTY)
        self.assertNotEqual(board, other)

    def test_given_cells_when_asking_opponent_then_colours_swap(self):
        self.assertIs(Cell.WHITE.opponent(), Cell.BLACK)
        self.assertIs(Cell.BLACK.opponent(), Cell.WHITE)
        with self.assertRaises(ValueError):
            Cell.EMPTY.opponent()

    def test_given_board_when_iterating_coords_then_row_major(self):
        coords = list(Board(2).coords())
        self.assertEqual(coords, [(0, 0), (0, 1), (1, 0), (1, 1)])


if __name__ == '__main__':
    unittest.main()
