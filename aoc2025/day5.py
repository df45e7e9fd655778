"""Cafeteria: check ingredient IDs against ranges of fresh IDs."""

import argparse
from bisect import bisect_right
from pathlib import Path
from typing import Optional

Range = tuple[int, int]


def parse_inventory(text: str) -> tuple[list[Range], list[int]]:
    """Parse the fresh ID ranges and the available IDs.

    The two sections are separated by a blank line. Ranges are written
    ``low-high``, one per line, followed by one ID per line.
    """
    top, separator, bottom = text.strip("\n").partition("\n\n")
    if not separator:
        raise ValueError("missing blank line between ranges and IDs")

    ranges = []
    for line in top.splitlines():
        line = line.strip()
        if not line:
            continue
        low, high = line.split("-")
        ranges.append((int(low), int(high)))

    ids = [int(word) for word in bottom.split()]
    return ranges, ids


def merge_ranges(ranges: list[Range]) -> list[Range]:
    """Sort the ranges by start and merge those that overlap."""
    merged: list[Range] = []
    for low, high in sorted(ranges):
        if merged and low <= merged[-1][1]:
            first_low, first_high = merged[-1]
            merged[-1] = (first_low, max(first_high, high))
        else:
            merged.append((low, high))
    return merged


def find_range(ranges: list[Range], target: int) -> Optional[int]:
    """Return the index of the range with the largest start not above target.

    The ranges must be sorted by start. Returns None when every range
    starts above target.
    """
    starts = [low for low, _ in ranges]
    index = bisect_right(starts, target) - 1
    return index if index >= 0 else None


def part1(ranges: list[Range], ids: list[int]) -> int:
    """Count the IDs that fall inside some fresh range."""
    merged = merge_ranges(ranges)

    def is_fresh(ingredient: int) -> bool:
        index = find_range(merged, ingredient)
        return index is not None and ingredient <= merged[index][1]

    return sum(is_fresh(ingredient) for ingredient in ids)


def part2(ranges: list[Range]) -> int:
    """Count the distinct IDs covered by the fresh ranges."""
    return sum(high - low + 1 for low, high in merge_ranges(ranges))


def _read_input(path: str) -> str:
    try:
        text = Path(path).read_text()
    except OSError:
        text = ""
    if not text:
        raise SystemExit(f"unable to read file: {path}")
    return text


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Solve the fresh ingredient puzzle.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    text = _read_input(args.input)
    try:
        ranges, ids = parse_inventory(text)
    except ValueError as exc:
        raise SystemExit(f"invalid input: {exc}") from exc

    print(part1(ranges, ids))
    print(part2(ranges))
    return 0