"""
Directions and move queries for the sliding-tile merge puzzle: which directions would change a board,
and whether any move is left at all.
"""

from enum import IntEnum

from numpy import any as np_any
from numpy import asarray, integer, ndarray


class Direction(IntEnum):
    """The four directions a board can be slid in."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: 'Direction | int | str') -> 'Direction':
        """
        Convert a direction, its value, its name or a keyboard key into a ``Direction``.

        Parameters
        ----------
        value : Direction | int | str
            Either a member, its integer value, its name (any case) or a key such as
            ``"ArrowUp"``, ``"up"`` or ``"w"``.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the value does not name a direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _KEYS:
                return _KEYS[key]
        elif isinstance(value, (int, integer)) and not isinstance(value, bool):
            if 0 <= int(value) < len(cls):
                return cls(int(value))
        raise ValueError(f'Unknown direction: {value!r}')


# ##>: Names, arrow keys and WASD.
_KEYS: dict[str, Direction] = {
    'left': Direction.LEFT,
    'arrowleft': Direction.LEFT,
    'a': Direction.LEFT,
    'up': Direction.UP,
    'arrowup': Direction.UP,
    'w': Direction.UP,
    'right': Direction.RIGHT,
    'arrowright': Direction.RIGHT,
    'd': Direction.RIGHT,
    'down': Direction.DOWN,
    'arrowdown': Direction.DOWN,
    's': Direction.DOWN,
}


def can_move(board: ndarray, direction: 'Direction | int | str') -> bool:
    """
    Check if a move in a specific direction would change the board.

    Parameters
    ----------
    board : ndarray
        The game board to check.
    direction : Direction | int | str
        Direction to check.

    Returns
    -------
    bool
        True if the move is possible, False otherwise.

    Notes
    -----
    A move is possible if a tile has an empty cell on the side it slides to, or if two
    adjacent cells along the move axis hold the same non-zero value.
    """
    return legal_directions_mask(board)[Direction.parse(direction)]


def legal_directions_mask(board: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the direction changes the board.
    """
    state = asarray(board)

    # ##>: Horizontal neighbours serve left and right.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Vertical neighbours serve up and down.
    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: A tile slides when the cell on its moving side is empty.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        Legal directions in enum order. Empty exactly when the game is over.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if mask[direction]]


def illegal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that would leave the board unchanged.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        Illegal directions in enum order.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if not mask[direction]]


def has_moves(board: ndarray) -> bool:
    """
    Check whether any move can still change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    bool
        True if some cell is empty or two adjacent cells share a value, False otherwise.

    Notes
    -----
    Every cell is compared with its right and down neighbour only, which covers each
    adjacent pair exactly once. False is the game over condition.
    """
    state = asarray(board)
    if not state.all():
        return True
    return bool(np_any(state[:, :-1] == state[:, 1:]) or np_any(state[:-1] == state[1:]))


def is_done(board: ndarray) -> bool:
    """Check if the game has ended: the board is full and no adjacent cells match."""
    return not has_moves(board)
