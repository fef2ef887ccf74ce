"""
Tests for the board engine: board creation, tile spawning, row merging, transforms and moves.
"""

from unittest import TestCase, main

import numpy as np

from slidemerge.core.gameboard import (
    TILE_SPAWN_PROBS,
    add_random_tile,
    empty_board,
    max_tile,
    merge_row_left,
    move,
    reached,
    reflect,
    rotate_clockwise,
    rotate_counterclockwise,
    slide_and_merge,
)
from slidemerge.core.gamemove import Direction


class StubGenerator:
    """Generator returning fixed draws."""

    def __init__(self, index: int, draw: float):
        self.index = index
        self.draw = draw
        self.bounds = []

    def integers(self, high):
        self.bounds.append(high)
        return self.index

    def random(self):
        return self.draw


class TestEmptyBoard(TestCase):
    """Test board creation."""

    def test_sizes(self):
        """Empty boards are n rows of n zeros."""
        for size in (2, 3, 4, 8):
            board = empty_board(size)
            self.assertEqual(board.shape, (size, size))
            self.assertEqual(board.tolist(), [[0] * size for _ in range(size)])

    def test_read_only(self):
        """Boards cannot be written in place."""
        board = empty_board(4)
        with self.assertRaises(ValueError):
            board[0, 0] = 2


class TestAddRandomTile(TestCase):
    """Test tile spawning."""

    def test_full_board_unchanged(self):
        """A full board comes back equal and read-only, the input keeps its flags."""
        board = np.array([[2, 4], [8, 16]], dtype=np.int64)
        result = add_random_tile(board, np.random.default_rng(0))
        np.testing.assert_array_equal(result, board)
        self.assertFalse(result.flags.writeable)
        self.assertTrue(board.flags.writeable)

        result = add_random_tile([[2, 4], [8, 16]])
        self.assertEqual(result.tolist(), [[2, 4], [8, 16]])
        self.assertFalse(result.flags.writeable)

    def test_single_new_tile(self):
        """Exactly one empty cell receives a 2 or a 4."""
        board = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 4, 0], [0, 0, 0, 0]])
        result = add_random_tile(board, np.random.default_rng(7))

        changed = np.argwhere(result != board)
        self.assertEqual(len(changed), 1)
        self.assertEqual(board[tuple(changed[0])], 0)
        self.assertIn(result[tuple(changed[0])], (2, 4))

    def test_input_not_mutated(self):
        """The input board keeps its values."""
        board = np.zeros((3, 3), dtype=np.int64)
        add_random_tile(board, np.random.default_rng(1))
        self.assertEqual(np.count_nonzero(board), 0)

    def test_stub_generator_cell_and_value(self):
        """The drawn index picks among empty cells in row-major order, the draw picks the value."""
        board = [[2, 0], [0, 0]]

        rng = StubGenerator(index=1, draw=0.5)
        result = add_random_tile(board, rng)
        self.assertEqual(result.tolist(), [[2, 0], [2, 0]])
        self.assertEqual(rng.bounds, [3])

        result = add_random_tile(board, StubGenerator(index=2, draw=0.95))
        self.assertEqual(result.tolist(), [[2, 0], [0, 4]])

    def test_value_threshold(self):
        """A draw of exactly 0.9 spawns a 4."""
        result = add_random_tile([[0, 2], [2, 2]], StubGenerator(index=0, draw=0.9))
        self.assertEqual(result[0, 0], 4)

    def test_seed_reproducibility(self):
        """Same seed spawns the same tile."""
        board = empty_board(4)
        first = add_random_tile(board, np.random.default_rng(42))
        second = add_random_tile(board, np.random.default_rng(42))
        np.testing.assert_array_equal(first, second)

    def test_value_frequencies(self):
        """Roughly nine spawns in ten are 2."""
        rng = np.random.default_rng(123)
        values = [add_random_tile(empty_board(2), rng).max() for _ in range(2000)]
        ratio = values.count(2) / len(values)
        self.assertAlmostEqual(ratio, TILE_SPAWN_PROBS[2], delta=0.03)


class TestMergeRowLeft(TestCase):
    """Test the row merge primitive."""

    def test_examples(self):
        """Documented merges."""
        cases = [
            ([2, 2, 4, 0], [4, 4, 0, 0], 4),
            ([2, 4, 4, 8], [2, 8, 8, 0], 8),
            ([2, 2, 2, 0], [4, 2, 0, 0], 4),
            ([2, 2, 2, 2], [4, 4, 0, 0], 8),
            ([0, 0, 0, 2], [2, 0, 0, 0], 0),
            ([4, 0, 0, 4], [8, 0, 0, 0], 8),
        ]
        for row, expected, expected_score in cases:
            merged, score = merge_row_left(row)
            self.assertEqual(merged.tolist(), expected, row)
            self.assertEqual(score, expected_score, row)

    def test_unchanged_rows(self):
        """Empty and already merged rows come back unchanged with no score."""
        for row in ([0, 0, 0, 0], [2, 4, 8, 16], [4, 2, 0, 0]):
            merged, score = merge_row_left(row)
            self.assertEqual(merged.tolist(), row)
            self.assertEqual(score, 0)

    def test_keeps_length(self):
        """Merged rows are padded back to their length."""
        merged, score = merge_row_left([8, 8, 8, 8, 8, 0, 2, 2])
        self.assertEqual(merged.tolist(), [16, 16, 8, 4, 0, 0, 0, 0])
        self.assertEqual(score, 36)


class TestTransforms(TestCase):
    """Test board rotation and reflection."""

    def setUp(self):
        self.board = np.arange(1, 10).reshape(3, 3)

    def test_rotate_clockwise(self):
        """The cell at (r, c) moves to (c, N - 1 - r)."""
        rotated = rotate_clockwise(self.board)
        self.assertEqual(rotated.tolist(), [[7, 4, 1], [8, 5, 2], [9, 6, 3]])
        for r in range(3):
            for c in range(3):
                self.assertEqual(rotated[c, 2 - r], self.board[r, c])

    def test_four_rotations_identity(self):
        """Four clockwise rotations give back the board, for any size."""
        for size in (2, 3, 4, 5, 8):
            board = np.arange(size * size).reshape(size, size)
            rotated = board
            for _ in range(4):
                rotated = rotate_clockwise(rotated)
            np.testing.assert_array_equal(rotated, board)

    def test_counterclockwise_inverse(self):
        """Counter-clockwise undoes clockwise and equals three clockwise rotations."""
        np.testing.assert_array_equal(rotate_counterclockwise(rotate_clockwise(self.board)), self.board)
        np.testing.assert_array_equal(
            rotate_counterclockwise(self.board), rotate_clockwise(rotate_clockwise(rotate_clockwise(self.board)))
        )

    def test_reflect(self):
        """Rows are reversed."""
        self.assertEqual(reflect(self.board).tolist(), [[3, 2, 1], [6, 5, 4], [9, 8, 7]])

    def test_transforms_copy(self):
        """Transforms do not share memory with their input."""
        for transform in (rotate_clockwise, rotate_counterclockwise, reflect):
            self.assertFalse(np.shares_memory(transform(self.board), self.board))


class TestMove(TestCase):
    """Test the move resolver."""

    def test_left(self):
        """Left move merges each row toward column 0."""
        board = [[2, 2, 0, 0], [4, 0, 4, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
        result = move(board, Direction.LEFT)
        self.assertEqual(result.board.tolist(), [[4, 0, 0, 0], [8, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(result.score, 12)
        self.assertTrue(result.moved)

    def test_right(self):
        """Right move merges from the right edge."""
        board = [[2, 2, 2, 0], [0, 4, 4, 8], [0, 0, 0, 0], [2, 0, 0, 0]]
        result = move(board, Direction.RIGHT)
        self.assertEqual(result.board.tolist(), [[0, 0, 2, 4], [0, 0, 8, 8], [0, 0, 0, 0], [0, 0, 0, 2]])
        self.assertEqual(result.score, 12)

    def test_up(self):
        """Up move pushes tiles toward row 0."""
        board = [[2, 0, 0, 0], [2, 0, 0, 4], [2, 0, 0, 0], [0, 8, 0, 4]]
        result = move(board, Direction.UP)
        self.assertEqual(result.board.tolist(), [[4, 8, 0, 8], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(result.score, 12)

    def test_down(self):
        """Down move pushes tiles toward the last row."""
        board = [[2, 0, 0, 0], [2, 0, 0, 4], [2, 0, 0, 0], [0, 8, 0, 4]]
        result = move(board, Direction.DOWN)
        self.assertEqual(result.board.tolist(), [[0, 0, 0, 0], [0, 0, 0, 0], [2, 0, 0, 0], [4, 8, 0, 8]])
        self.assertEqual(result.score, 12)

    def test_direction_aliases(self):
        """Directions may be given by value, name or key."""
        board = [[0, 2], [0, 2]]
        for direction in (Direction.UP, 1, 'up', 'UP', 'ArrowUp', 'w'):
            self.assertEqual(move(board, direction).board.tolist(), [[0, 4], [0, 0]])

    def test_unknown_direction(self):
        """Unknown directions are rejected."""
        with self.assertRaises(ValueError):
            move(empty_board(4), 'sideways')

    def test_no_op(self):
        """A move that changes nothing reports it and returns an equal board."""
        board = np.array([[2, 4, 0, 0], [8, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = move(board, Direction.LEFT)
        self.assertFalse(result.moved)
        self.assertEqual(result.score, 0)
        np.testing.assert_array_equal(result.board, board)

    def test_input_not_mutated(self):
        """The input board keeps its values, and the result is read-only."""
        board = np.array([[2, 2, 0, 0], [0, 4, 4, 0], [8, 0, 8, 0], [0, 0, 0, 2]])
        original = board.copy()
        for direction in Direction:
            result = move(board, direction)
            np.testing.assert_array_equal(board, original)
            self.assertFalse(result.board.flags.writeable)

    def test_mass_and_count(self):
        """Tile mass is conserved, tile count drops by one per merge, score sums the merged values."""
        to_left = {
            Direction.LEFT: np.asarray,
            Direction.RIGHT: reflect,
            Direction.UP: rotate_counterclockwise,
            Direction.DOWN: rotate_clockwise,
        }
        rng = np.random.default_rng(2024)
        for _ in range(200):
            size = int(rng.integers(2, 7))
            board = rng.choice([0, 0, 2, 4, 8, 16], size=(size, size))
            for direction in Direction:
                result = move(board, direction)
                self.assertEqual(result.board.sum(), board.sum())

                # ##>: Count merges and their values row by row on the board turned to a left move.
                merges, merged_values = 0, 0
                for row in to_left[direction](board):
                    merged_row, row_score = merge_row_left(row)
                    merges += np.count_nonzero(row) - np.count_nonzero(merged_row)
                    merged_values += row_score

                self.assertEqual(np.count_nonzero(board) - np.count_nonzero(result.board), merges)
                self.assertEqual(result.score, merged_values)
                self.assertEqual(result.moved, not np.array_equal(result.board, board))

    def test_primitives_read_only(self):
        """Row and board merges hand back read-only arrays."""
        merged, _ = merge_row_left([2, 2, 0, 0])
        self.assertFalse(merged.flags.writeable)

        board = np.array([[2, 2], [0, 4]])
        result, _ = slide_and_merge(board)
        self.assertFalse(result.flags.writeable)
        self.assertTrue(board.flags.writeable)

    def test_slide_and_merge(self):
        """Whole board left slide sums the row scores."""
        board = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])
        result, score = slide_and_merge(board)
        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        self.assertEqual(score, 28)
        np.testing.assert_array_equal(result, expected)


class TestQueries(TestCase):
    """Test tile queries."""

    def test_max_tile(self):
        self.assertEqual(max_tile([[2, 0], [64, 8]]), 64)

    def test_reached(self):
        """Target counts as reached when a tile equals it."""
        self.assertTrue(reached([[2048, 0], [0, 0]], 2048))
        self.assertTrue(reached([[2048, 4096], [0, 0]], 2048))
        self.assertFalse(reached([[4096, 0], [0, 0]], 2048))
        self.assertFalse(reached([[1024, 1024], [0, 0]], 2048))


if __name__ == '__main__':
    main()
