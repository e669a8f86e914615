"""Solutions to the 2015 Advent of Code puzzles, days 1 to 10."""

__version__ = "0.1.0"