import pytest

from aoc21.day08 import Digit, do_permute, parse, part_a, part_b

STANDARD = [
    "abcefg", "cf", "acdeg", "acdfg", "bcdf",
    "abdfg", "abdefg", "acf", "abcdefg", "abcdfg",
]

EXAMPLE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
    "cdfeb fcadb cdfeb cdbaf\n"
)


def _line(table, output_digits):
    combos = " ".join(p.translate(table) for p in STANDARD)
    outputs = " ".join(STANDARD[d].translate(table) for d in output_digits)
    return f"{combos} | {outputs}"


@pytest.mark.parametrize("digit", range(10))
def test_standard_patterns_decode(digit):
    assert Digit.from_pattern(STANDARD[digit]).to_num() == digit


def test_int_uses_a_as_lowest_bit():
    assert int(Digit.from_pattern("a")) == 1
    assert int(Digit.from_pattern("g")) == 64


def test_invalid_segment_pattern_is_none():
    assert Digit.from_pattern("ab").to_num() is None


def test_unknown_segment_letter_raises():
    with pytest.raises(ValueError):
        Digit.from_pattern("abz")


def test_count_on_matches_pattern_length():
    for pattern in STANDARD:
        assert Digit.from_pattern(pattern).count_on() == len(pattern)


def test_identity_permutation_keeps_digit():
    digit = Digit.from_pattern("acdeg")
    assert do_permute(digit, range(7)) == digit


def test_parse_counts():
    displays = parse(EXAMPLE)
    assert len(displays) == 1
    assert len(displays[0].combinations) == 10
    assert len(displays[0].number) == 4


def test_parse_missing_separator_raises():
    with pytest.raises(ValueError):
        parse(" ".join(STANDARD))


def test_parse_wrong_number_count_raises():
    with pytest.raises(ValueError):
        parse(" ".join(STANDARD) + " | ab cd")


def test_part_b_example():
    assert part_b(parse(EXAMPLE)) == 5353


def test_unscrambled_display():
    table = str.maketrans("abcdefg", "abcdefg")
    displays = parse(_line(table, (1, 4, 7, 8)))
    assert part_a(displays) == 4
    assert part_b(displays) == 1478


def test_scrambled_display_is_recovered():
    table = str.maketrans("abcdefg", "cfgaedb")
    displays = parse(_line(table, (9, 0, 2, 5)))
    assert part_b(displays) == 9025
    assert part_a(displays) == 0


def test_part_b_sums_lines():
    table = str.maketrans("abcdefg", "gfedcba")
    text = _line(table, (0, 0, 1, 2)) + "\n" + _line(table, (0, 0, 3, 0))
    assert part_b(parse(text)) == 12 + 30