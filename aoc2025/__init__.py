"""Solutions to the 2025 Advent of Code puzzles, days one through eight."""

__version__ = "0.1.0"