import pytest

from aoc2025.day6 import MathProblem, calculate, main, parse_columns, parse_rows

EXAMPLE = (
    "123 328  51 64 \n"
    " 45 64  387 23 \n"
    "  6 98  215 314\n"
    "*   +   *   +  \n"
)


def test_solve_sum_with_zero():
    assert MathProblem([7, 0], "+").solve() == 7


def test_solve_product_with_one():
    assert MathProblem([7, 1], "*").solve() == 7


def test_solve_product_with_zero():
    assert MathProblem([7, 0, 9], "*").solve() == 0


def test_solve_unknown_operator():
    with pytest.raises(ValueError):
        MathProblem([1, 2], "-").solve()


def test_parse_rows_reads_columns_of_numbers():
    problems = parse_rows(EXAMPLE)
    assert problems == [
        MathProblem([123, 45, 6], "*"),
        MathProblem([328, 64, 98], "+"),
        MathProblem([51, 387, 215], "*"),
        MathProblem([64, 23, 314], "+"),
    ]


def test_parse_rows_mismatched_fields():
    with pytest.raises(ValueError):
        parse_rows("1 2 3\n4 5\n+ + +\n")


def test_parse_rows_needs_operator_line():
    with pytest.raises(ValueError):
        parse_rows("1 2 3\n")


def test_parse_columns_reads_digits_top_to_bottom():
    problems = parse_columns(EXAMPLE)
    assert [problem.op for problem in problems] == ["*", "+", "*", "+"]
    assert problems[-1].values == [623, 431, 4]
    assert problems[0].values == [1, 24, 356]


def test_parse_columns_pads_short_lines():
    padded = parse_columns("12 3\n4  5\n+  *\n")
    trimmed = parse_columns("12 3\n4  5\n+  *")
    assert padded == trimmed
    assert padded == [MathProblem([14, 2], "+"), MathProblem([35], "*")]


def test_parse_columns_unknown_operator():
    with pytest.raises(ValueError):
        parse_columns("1 2\n+ -\n")


def test_calculate_empty_is_zero():
    assert calculate([]) == 0


def test_calculate_example_rows():
    assert calculate(parse_rows(EXAMPLE)) == 4277556


def test_calculate_example_columns():
    assert calculate(parse_columns(EXAMPLE)) == 3263827


def test_single_digit_layout_agrees_between_readings():
    text = "1 2\n+ *\n"
    assert calculate(parse_rows(text)) == calculate(parse_columns(text))


def test_main_prints_both_totals(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["4277556", "3263827"]


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "absent.txt")])