"""Secret entrance: count how often a 100-position dial points at zero."""

import argparse
from itertools import accumulate, islice
from pathlib import Path

DIAL_SIZE = 100
START = 50


def parse_rotations(text: str) -> list[int]:
    """Parse lines such as ``R12`` or ``L7`` into signed click counts.

    Right turns are positive, left turns negative. Blank lines are ignored.
    """
    rotations = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        direction, amount = line[0], line[1:]
        if direction == "R":
            rotations.append(int(amount))
        elif direction == "L":
            rotations.append(-int(amount))
        else:
            raise ValueError(f"invalid line: {line}")
    return rotations


def rotate(position: int, clicks: int) -> int:
    """Return the dial position after turning it by clicks."""
    return (position + clicks) % DIAL_SIZE


def rotate_counting(position: int, clicks: int) -> tuple[int, int]:
    """Return the new position and how many times the dial passed or hit zero."""
    new_position = rotate(position, clicks)
    if clicks > 0:
        return new_position, (position + clicks) // DIAL_SIZE

    distance = -clicks
    to_zero = position or DIAL_SIZE
    loops = 0
    if distance >= to_zero:
        loops = 1 + (distance - to_zero) // DIAL_SIZE
    return new_position, loops


def part1(rotations: list[int]) -> int:
    """Count the rotations that leave the dial at zero."""
    positions = accumulate(rotations, rotate, initial=START)
    return sum(position == 0 for position in islice(positions, 1, None))


def part2(rotations: list[int]) -> int:
    """Count every click at which the dial points at zero."""
    position = START
    total = 0
    for clicks in rotations:
        position, loops = rotate_counting(position, clicks)
        total += loops
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
    parser = argparse.ArgumentParser(description="Solve the dial puzzle.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    text = _read_input(args.input)
    try:
        rotations = parse_rotations(text)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(part1(rotations))
    print(part2(rotations))
    return 0