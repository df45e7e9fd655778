"""Laboratories: follow tachyon beams through a manifold of splitters."""

import argparse
from pathlib import Path

from aoc2025.seqtools import find_all_indices

START = "S"
SPLITTER = "^"


def parse_manifold(text: str) -> list[str]:
    """Split the manifold diagram into rows; the first row must hold the start."""
    rows = [line.rstrip("\r") for line in text.rstrip("\n").split("\n")]
    if START not in rows[0]:
        raise ValueError(f"missing start position {START!r} in the first row")
    return rows


def _start_column(grid: list[str]) -> int:
    if not grid or START not in grid[0]:
        raise ValueError(f"missing start position {START!r} in the first row")
    return grid[0].index(START)


def part1(grid: list[str]) -> int:
    """Count how many times a beam is split on its way down."""
    width = len(grid[0]) if grid else 0
    beams = {_start_column(grid)}
    splits = 0
    # Splitters only sit on even rows; the last row is never a splitter row.
    for row in grid[2:-1:2]:
        for col in find_all_indices(row, SPLITTER):
            if col not in beams:
                continue
            beams.discard(col)
            if col - 1 >= 0:
                beams.add(col - 1)
            if col + 1 < width:
                beams.add(col + 1)
            splits += 1
    return splits


def part2(grid: list[str]) -> int:
    """Count the distinct timelines a single particle can end up in."""
    start = _start_column(grid)
    width = len(grid[0])
    beams = [0] * width
    beams[start] = 1

    for row in grid[2::2]:
        following = [0] * width
        for col, count in enumerate(beams):
            if not count:
                continue
            if col < len(row) and row[col] == SPLITTER:
                if col - 1 >= 0:
                    following[col - 1] += count
                if col + 1 < width:
                    following[col + 1] += count
            else:
                following[col] += count
        beams = following

    return sum(beams)


def _read_input(path: str) -> str:
    try:
        text = Path(path).read_text()
    except OSError:
        text = ""
    if not text:
        raise SystemExit(f"unable to read file: {path}")
    return text


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Solve the tachyon manifold puzzle.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    text = _read_input(args.input)
    try:
        grid = parse_manifold(text)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(part1(grid))
    print(part2(grid))
    return 0