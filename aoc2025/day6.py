"""Trash compactor: add up the answers to a sheet of cephalopod math."""

import argparse
import math
from dataclasses import dataclass, field
from pathlib import Path

_OPERATIONS = {
    "+": sum,
    "*": math.prod,
}


@dataclass
class MathProblem:
    """A list of values combined by a single operator."""

    values: list[int] = field(default_factory=list)
    op: str = "+"

    def solve(self) -> int:
        """Combine the values with the operator."""
        try:
            operation = _OPERATIONS[self.op]
        except KeyError:
            raise ValueError(f"unknown operator: {self.op!r}") from None
        return operation(self.values)


def _split_lines(text: str) -> tuple[list[str], str]:
    lines = [line.rstrip("\r") for line in text.rstrip("\n").split("\n")]
    if len(lines) < 2:
        raise ValueError("need at least one row of numbers and a row of operators")
    *number_lines, op_line = lines
    return number_lines, op_line


def parse_rows(text: str) -> list[MathProblem]:
    """Read each problem as a column of whitespace separated numbers."""
    number_lines, op_line = _split_lines(text)
    rows = [line.split() for line in number_lines]
    ops = op_line.split()
    try:
        columns = list(zip(*rows, ops, strict=True))
    except ValueError:
        raise ValueError("rows have different numbers of fields") from None
    return [MathProblem([int(value) for value in column[:-1]], column[-1][0]) for column in columns]


def parse_columns(text: str) -> list[MathProblem]:
    """Read each number top to bottom within its character column.

    A problem spans from its operator's position up to the next operator.
    """
    number_lines, op_line = _split_lines(text)

    starts = []
    for index, char in enumerate(op_line):
        if char == " ":
            continue
        if char not in _OPERATIONS:
            raise ValueError(f"unknown operator: {char!r}")
        starts.append((index, char))

    width = max(len(line) for line in (*number_lines, op_line))
    padded = [line.ljust(width) for line in number_lines]
    ends = [index for index, _ in starts[1:]] + [width]

    problems = []
    for (start, op), end in zip(starts, ends):
        values = []
        for col in range(start, end):
            word = "".join(line[col] for line in padded).replace(" ", "")
            if word:
                values.append(int(word))
        problems.append(MathProblem(values, op))
    return problems


def calculate(problems: list[MathProblem]) -> int:
    """Return the grand total of all answers."""
    return sum(problem.solve() for problem in problems)


def _read_input(path: str) -> str:
    try:
        text = Path(path).read_text()
    except OSError:
        text = ""
    if not text:
        raise SystemExit(f"unable to read file: {path}")
    return text


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Solve the cephalopod math puzzle.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    text = _read_input(args.input)
    try:
        first = calculate(parse_rows(text))
        second = calculate(parse_columns(text))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(first)
    print(second)
    return 0