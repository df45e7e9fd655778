import pytest

from aoc2025.day2 import main, parse_ranges, part1, part2, repeated_multiple, repeated_twice

EXAMPLE = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,"
    "1698522-1698528,446443-446449,38593856-38593862,565653-565659,"
    "824824821-824824827,2121212118-2121212124\n"
)


def test_parse_ranges():
    assert parse_ranges("11-22,95-115\n") == [(11, 22), (95, 115)]


@pytest.mark.parametrize("text", ["11-22,95", "a-b", "1-2-3"])
def test_parse_ranges_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_ranges(text)


def test_example_part1():
    assert part1(parse_ranges(EXAMPLE)) == 1227775554


def test_example_part2():
    assert part2(parse_ranges(EXAMPLE)) == 4174379265


@pytest.mark.parametrize("pattern", [1, 12, 123, 9087])
def test_doubled_patterns(pattern):
    assert repeated_twice(int(str(pattern) * 2))
    assert repeated_multiple(int(str(pattern) * 2))


@pytest.mark.parametrize("pattern", [1, 12, 123, 9087])
def test_tripled_patterns(pattern):
    assert repeated_multiple(int(str(pattern) * 3))
    assert not repeated_twice(int(str(pattern) * 3))


def test_odd_length_never_repeated_twice():
    assert not any(repeated_twice(n) for n in range(100, 1000))


@pytest.mark.parametrize("k", [2, 3, 5, 8])
def test_one_zeros_one_is_not_repeated(k):
    assert not repeated_multiple(10**k + 1)


@pytest.mark.parametrize("digit", range(10))
def test_single_digit_is_not_repeated(digit):
    assert not repeated_multiple(digit)
    assert not repeated_twice(digit)


def test_twice_implies_multiple():
    assert all(repeated_multiple(n) for n in range(1, 100000) if repeated_twice(n))


def test_single_value_range_sums_itself():
    assert part1([(6464, 6464)]) == 6464
    assert part2([(777, 777)]) == 777


def test_part1_not_above_part2():
    ranges = parse_ranges(EXAMPLE)
    assert part1(ranges) <= part2(ranges)


def test_empty_range_sums_to_zero():
    assert part1([(22, 11)]) == 0
    assert part2([(22, 11)]) == 0


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    text = "11-22,95-115"
    path.write_text(text)
    main([str(path)])
    ranges = parse_ranges(text)
    assert capsys.readouterr().out.split() == [str(part1(ranges)), str(part2(ranges))]


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "absent.txt")])