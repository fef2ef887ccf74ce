"""Rules engine and game session for the sliding-tile merge puzzle."""

__version__ = "0.1.0"
