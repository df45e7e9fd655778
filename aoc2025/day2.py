"""Gift shop: find product IDs made of repeated digit patterns."""

import argparse
from pathlib import Path

Range = tuple[int, int]


def parse_ranges(text: str) -> list[Range]:
    """Parse comma separated ``low-high`` ranges."""
    ranges = []
    for part in text.strip().split(","):
        low, high = part.strip().split("-")
        ranges.append((int(low), int(high)))
    return ranges


def repeated_twice(num: int) -> bool:
    """Tell whether the digits of num are one pattern written exactly twice."""
    digits = str(num)
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def repeated_multiple(num: int) -> bool:
    """Tell whether the digits of num are one pattern repeated at least twice."""
    digits = str(num)
    length = len(digits)
    return any(
        length % size == 0 and digits == digits[:size] * (length // size)
        for size in range(1, length // 2 + 1)
    )


def _sum_matching(ranges: list[Range], predicate) -> int:
    return sum(num for low, high in ranges for num in range(low, high + 1) if predicate(num))


def part1(ranges: list[Range]) -> int:
    """Sum every ID in the ranges whose digits repeat exactly twice."""
    return _sum_matching(ranges, repeated_twice)


def part2(ranges: list[Range]) -> int:
    """Sum every ID in the ranges whose digits repeat two or more times."""
    return _sum_matching(ranges, repeated_multiple)


def _read_input(path: str) -> str:
    try:
        text = Path(path).read_text()
    except OSError:
        text = ""
    if not text:
        raise SystemExit(f"unable to read file: {path}")
    return text


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Solve the invalid product ID puzzle.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    text = _read_input(args.input)
    try:
        ranges = parse_ranges(text)
    except ValueError as exc:
        raise SystemExit(f"invalid input: {exc}") from exc

    print(part1(ranges))
    print(part2(ranges))
    return 0