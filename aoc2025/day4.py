"""Printing department: find paper rolls that a forklift can reach."""

import argparse
from pathlib import Path

ROLL = "@"
EMPTY = "."
CROWDED = 4

_NEIGHBOURS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]

Grid = list[list[str]]


def parse_grid(text: str) -> Grid:
    """Parse the map into a grid padded with one empty cell on every side."""
    lines = text.rstrip("\n").split("\n")
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise ValueError("grid rows have different lengths")

    border = [EMPTY] * (width + 2)
    return [border[:], *([EMPTY, *line, EMPTY] for line in lines), border[:]]


def count_adjacent(grid: Grid, row: int, col: int) -> int:
    """Count the rolls in the eight cells around (row, col)."""
    return sum(grid[row + dr][col + dc] == ROLL for dr, dc in _NEIGHBOURS)


def removable_rolls(grid: Grid) -> list[tuple[int, int]]:
    """Return the coordinates of rolls with fewer than four neighbouring rolls."""
    return [
        (r, c)
        for r, row in enumerate(grid[1:-1], start=1)
        for c, cell in enumerate(row[1:-1], start=1)
        if cell == ROLL and count_adjacent(grid, r, c) < CROWDED
    ]


def part1(grid: Grid) -> int:
    """Count the rolls that can be reached right away."""
    return len(removable_rolls(grid))


def part2(grid: Grid) -> int:
    """Count the rolls removed by repeatedly taking every reachable one."""
    work = [row[:] for row in grid]
    total = 0
    while coords := removable_rolls(work):
        total += len(coords)
        for r, c in coords:
            work[r][c] = EMPTY
    return total


def _read_input(path: str) -> str:
    try:
        text = Path(path).read_text()
    except OSError:
        text = ""
    if not text:
        raise SystemExit(f"unable to read file: {path}")
    return text


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Solve the paper roll puzzle.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    text = _read_input(args.input)
    try:
        grid = parse_grid(text)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(part1(grid))
    print(part2(grid))
    return 0