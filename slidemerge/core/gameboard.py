"""
Board engine for the sliding-tile merge puzzle: board creation, tile spawning, board transforms
and move resolution.

Every function here is pure apart from ``add_random_tile``, which draws from a random generator.
Boards handed back are read-only ``int64`` arrays; inputs are never written to.
"""

from typing import Callable, NamedTuple

from numpy import argwhere, array_equal, asarray, int64, ndarray, rot90, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from slidemerge.core.gamemove import Direction

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator used when no generator is injected.
_GENERATOR = default_rng(PCG64DXSM())


class MoveResult(NamedTuple):
    """Outcome of sliding a board in one direction."""

    board: ndarray
    score: int
    moved: bool


def _freeze(board: ndarray) -> ndarray:
    board.setflags(write=False)
    return board


def empty_board(size: int) -> ndarray:
    """
    Create an empty square board.

    Parameters
    ----------
    size : int
        The dimension of the board. Must be at least 2; callers are expected to check it.

    Returns
    -------
    ndarray
        A read-only ``size x size`` array of zeros.
    """
    return _freeze(zeros((size, size), dtype=int64))


def add_random_tile(board: ndarray, rng: Generator | None = None) -> ndarray:
    """
    Place a 2 or a 4 into one randomly chosen empty cell.

    Parameters
    ----------
    board : ndarray
        The current game board. Not modified.
    rng : Generator, optional
        Random generator to draw from. Defaults to a module-level generator.

    Returns
    -------
    ndarray
        A new read-only board with one extra tile, or a read-only view of the input board when it has
        no empty cell.

    Notes
    -----
    - The empty cell is chosen uniformly among all empty cells.
    - A single uniform draw in [0, 1) picks the value: 2 below 0.9, 4 otherwise.
    - A full board is not necessarily a finished game; see ``has_moves``.
    """
    state = asarray(board, dtype=int64)

    # ##: Find empty cells.
    empty_cells = argwhere(state == 0)
    if len(empty_cells) == 0:
        return _freeze(state.view())

    rng = rng if rng is not None else _GENERATOR
    row, col = empty_cells[rng.integers(len(empty_cells))]
    value = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4

    new_board = state.copy()
    new_board[row, col] = value
    return _freeze(new_board)


def merge_row_left(row: ndarray) -> tuple[ndarray, int]:
    """
    Slide one row to the left and merge adjacent equal tiles.

    Parameters
    ----------
    row : ndarray
        A 1D sequence of tile values, 0 meaning empty.

    Returns
    -------
    merged_row : ndarray
        The row after sliding and merging, padded with zeros to its original length.
    score : int
        Sum of the values created by merges.

    Notes
    -----
    - Zeros are removed first, keeping the order of the remaining tiles.
    - Merging is pairwise and greedy from the left: ``[2, 2, 2]`` gives ``[4, 2]``.
    - A tile takes part in at most one merge per call.

    Examples
    --------
    >>> merge_row_left([2, 2, 4, 0])
    (array([4, 4, 0, 0]), 4)

    >>> merge_row_left([2, 4, 4, 8])
    (array([2, 8, 8, 0]), 8)
    """
    row = asarray(row, dtype=int64)
    non_zero = row[row != 0]
    merged = zeros(len(row), dtype=int64)
    score = 0

    # ##: Walk the compacted tiles, consuming merged pairs.
    i, j = 0, 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged[j] = non_zero[i] * 2
            score += int(merged[j])
            i += 2
        else:
            merged[j] = non_zero[i]
            i += 1
        j += 1

    return _freeze(merged), score


def slide_and_merge(board: ndarray) -> tuple[ndarray, int]:
    """
    Slide every row of the board to the left and merge, summing the row scores.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D array.

    Returns
    -------
    updated_board : ndarray
        A new board after sliding and merging.
    score : int
        The total score obtained from all merges.

    Notes
    -----
    For other directions, transform the board before calling this function.
    """
    state = asarray(board, dtype=int64)
    result = zeros(state.shape, dtype=int64)
    score = 0

    for i, row in enumerate(state):
        result[i], row_score = merge_row_left(row)
        score += row_score

    return _freeze(result), score


def rotate_clockwise(board: ndarray) -> ndarray:
    """
    Rotate the board by 90 degrees clockwise.

    The cell at ``(r, c)`` lands at ``(c, N - 1 - r)``: a transpose followed by reversing each row.
    Four rotations give back the original board.
    """
    return _freeze(rot90(asarray(board, dtype=int64), k=-1).copy())


def rotate_counterclockwise(board: ndarray) -> ndarray:
    """Rotate the board by 90 degrees counter-clockwise, undoing ``rotate_clockwise``."""
    return _freeze(rot90(asarray(board, dtype=int64), k=1).copy())


def reflect(board: ndarray) -> ndarray:
    """Reverse the order of the cells in every row."""
    return _freeze(asarray(board, dtype=int64)[:, ::-1].copy())


def _identity(board: ndarray) -> ndarray:
    return board


# ##>: (before, after) transforms turning each direction into a left move and back.
_TRANSFORMS: dict[Direction, tuple[Callable[[ndarray], ndarray], Callable[[ndarray], ndarray]]] = {
    Direction.LEFT: (_identity, _identity),
    Direction.RIGHT: (reflect, reflect),
    Direction.UP: (rotate_counterclockwise, rotate_clockwise),
    Direction.DOWN: (rotate_clockwise, rotate_counterclockwise),
}


def move(board: ndarray, direction: 'Direction | int | str') -> MoveResult:
    """
    Slide and merge the whole board in one direction.

    Parameters
    ----------
    board : ndarray
        The current game board. Not modified.
    direction : Direction | int | str
        Direction of the move, anything ``Direction.parse`` accepts.

    Returns
    -------
    MoveResult
        The new read-only board, the score earned by merges, and whether any cell changed.

    Notes
    -----
    - Every direction is reduced to a left move: the board is transformed, each row is merged
      with ``merge_row_left`` and the inverse transform restores the orientation.
    - Up moves tiles toward row 0, down toward the last row.
    - No tile is spawned; see ``add_random_tile``.
    """
    state = asarray(board, dtype=int64)
    before, after = _TRANSFORMS[Direction.parse(direction)]

    merged, score = slide_and_merge(before(state))
    updated = after(merged)

    return MoveResult(board=_freeze(updated), score=score, moved=not array_equal(state, updated))


def max_tile(board: ndarray) -> int:
    """Return the largest tile value on the board."""
    return int(asarray(board).max())


def reached(board: ndarray, target: int) -> bool:
    """Check whether any tile equals the target value."""
    return bool((asarray(board) == target).any())
