"""
Configuration of a game session.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GameConfig:
    """
    Settings of one game.

    Attributes
    ----------
    size : int
        Dimension of the square board.
    target : int
        Tile value that wins the game.
    start_tiles : int
        Number of tiles spawned on an empty board when a game starts.
    seed : int | None
        Seed of the session's random generator. None draws fresh entropy.
    """

    size: int = 4
    target: int = 2048
    start_tiles: int = 2
    seed: int | None = None

    def __post_init__(self):
        """Validate the settings."""
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if self.target < 4 or self.target & (self.target - 1):
            raise ValueError(f'target must be a power of two >= 4, got {self.target}')
        if not 0 <= self.start_tiles <= self.size**2:
            raise ValueError(f'start_tiles must be between 0 and {self.size**2}, got {self.start_tiles}')

    def resized(self, size: int) -> 'GameConfig':
        """
        Copy the configuration with another board size.

        Parameters
        ----------
        size : int
            The new board dimension.

        Returns
        -------
        GameConfig
            Validated configuration for the new size.
        """
        return replace(self, size=size, start_tiles=min(self.start_tiles, size**2))


def default_config() -> GameConfig:
    """
    Create the default configuration: a 4x4 board won at 2048.

    Returns
    -------
    GameConfig
        Default settings.
    """
    return GameConfig()
