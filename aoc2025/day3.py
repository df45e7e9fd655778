"""Lobby: pick the digits of each battery bank that form the largest joltage."""

import argparse
from pathlib import Path

PART2_BATTERIES = 12


def parse_banks(text: str) -> list[list[int]]:
    """Parse each non-blank line into a list of its digits."""
    banks = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if not line.isdigit():
            raise ValueError(f"invalid bank: {line}")
        banks.append([int(ch) for ch in line])
    return banks


def largest_k(digits: list[int], k: int) -> int:
    """Return the largest number formed by k digits taken in order from digits."""
    if k <= 0:
        raise ValueError("k must be positive")
    if len(digits) < k:
        raise ValueError(f"need at least {k} digits, got {len(digits)}")

    picked = []
    start = 0
    for remaining in range(k - 1, -1, -1):
        window = digits[start : len(digits) - remaining]
        best = max(range(len(window)), key=window.__getitem__)
        picked.append(window[best])
        start += best + 1
    return int("".join(map(str, picked)))


def largest_pair(digits: list[int]) -> int:
    """Return the largest two-digit number formed by two digits in order."""
    return largest_k(digits, 2)


def part1(banks: list[list[int]]) -> int:
    """Sum the best two-battery joltage of every bank."""
    return sum(largest_pair(bank) for bank in banks)


def part2(banks: list[list[int]]) -> int:
    """Sum the best twelve-battery joltage of every bank."""
    return sum(largest_k(bank, PART2_BATTERIES) for bank in banks)


def _read_input(path: str) -> str:
    try:
        text = Path(path).read_text()
    except OSError:
        text = ""
    if not text:
        raise SystemExit(f"unable to read file: {path}")
    return text


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Solve the battery joltage puzzle.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    text = _read_input(args.input)
    try:
        banks = parse_banks(text)
        first, second = part1(banks), part2(banks)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(first)
    print(second)
    return 0