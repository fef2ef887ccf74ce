"""Game session for the sliding-tile merge puzzle."""

import logging
from dataclasses import replace
from typing import NamedTuple

from numpy import ndarray
from numpy.random import default_rng

from slidemerge.config import GameConfig, default_config
from slidemerge.core.gameboard import add_random_tile, empty_board, max_tile, move, reached
from slidemerge.core.gamemove import Direction, has_moves, legal_directions

logger = logging.getLogger(__name__)


class StepResult(NamedTuple):
    """What a player sees after one step."""

    board: ndarray
    reward: int
    moved: bool
    won: bool
    over: bool


class SlideMerge:
    """
    One game of the sliding-tile merge puzzle.

    The session owns the board, the accumulated score and its random generator. It spawns a tile
    after every move that changes the board, and tracks whether the target tile was reached and
    whether any move is left.
    """

    # ##: Current game state.
    _board: ndarray | None = None
    _score: int = 0
    _moves: int = 0
    _won: bool = False
    _over: bool = False

    # ##: All Actions.
    ACTIONS = {direction.name.lower(): direction for direction in Direction}

    def __init__(self, config: GameConfig | None = None, **overrides):
        """
        Initialize the game and start it.

        Parameters
        ----------
        config : GameConfig, optional
            Settings of the game (default is ``default_config()``).
        **overrides
            Fields of ``GameConfig`` replacing those of ``config``.
        """
        config = config if config is not None else default_config()
        if overrides:
            config = replace(config, **overrides)

        self.config = config
        self._rng = default_rng(config.seed)

        self.reset()

    @property
    def board(self) -> ndarray:
        """The current board, read-only."""
        return self._board

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def score(self) -> int:
        """Sum of all merges since the last reset."""
        return self._score

    @property
    def moves(self) -> int:
        """Number of moves that changed the board since the last reset."""
        return self._moves

    @property
    def won(self) -> bool:
        """Whether the target tile was reached. Stays set until the next reset."""
        return self._won

    @property
    def is_finished(self) -> bool:
        """Whether no move can change the board anymore."""
        return self._over

    @property
    def legal_directions(self) -> list[Direction]:
        return legal_directions(self._board)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty board with ``config.start_tiles`` random tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the random generator. The same seed gives the same starting board.

        Returns
        -------
        ndarray
            The new board.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        board = empty_board(self.config.size)
        for _ in range(self.config.start_tiles):
            board = add_random_tile(board, self._rng)

        self._board = board
        self._score = 0
        self._moves = 0
        self._won = False
        self._over = not has_moves(board)

        logger.info('New %dx%d game, target %d', self.config.size, self.config.size, self.config.target)
        return self._board

    def resize(self, size: int) -> ndarray:
        """
        Change the board size and start a new game.

        Parameters
        ----------
        size : int
            The new board dimension.

        Returns
        -------
        ndarray
            The new board.

        Raises
        ------
        ValueError
            If the size is below 2. The current game is left untouched.
        """
        self.config = self.config.resized(size)
        logger.info('Board resized to %dx%d', size, size)
        return self.reset()

    def step(self, direction: 'Direction | int | str') -> StepResult:
        """
        Apply one move to the board.

        Parameters
        ----------
        direction : Direction | int | str
            Direction of the move, anything ``Direction.parse`` accepts.

        Returns
        -------
        StepResult
            The board, the score earned by this move, whether the board changed, and the
            won and over flags.

        Notes
        -----
        - A move that changes nothing, or any move once the game is over, earns nothing and
          spawns no tile.
        - Play may continue after the target is reached.
        """
        direction = Direction.parse(direction)
        if self._over:
            logger.debug('Ignoring %s, the game is over', direction.name)
            return StepResult(self._board, 0, False, self._won, True)

        result = move(self._board, direction)
        logger.debug('Move %s: reward=%d moved=%s', direction.name, result.score, result.moved)
        if not result.moved:
            return StepResult(self._board, 0, False, self._won, self._over)

        # ##: Fill randomly one cell.
        self._board = add_random_tile(result.board, self._rng)
        self._score += result.score
        self._moves += 1

        # ##: Check win and game over.
        if not self._won and reached(self._board, self.config.target):
            self._won = True
            logger.info('Reached %d after %d moves, score %d', self.config.target, self._moves, self._score)
        self._over = not has_moves(self._board)
        if self._over:
            logger.info(
                'Game over after %d moves, score %d, max tile %d', self._moves, self._score, max_tile(self._board)
            )

        return StepResult(self._board, result.score, True, self._won, self._over)

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._board.tolist():
            print(' \t'.join(map(str, row)))
