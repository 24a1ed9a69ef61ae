import pytest

from aoc21.day09 import find_basin, parse, part_a, part_b

EXAMPLE = """2199943210
3987894921
9856789892
8767896789
9899965678
"""


def test_parse_round_trips_through_str():
    assert str(parse(EXAMPLE)) == EXAMPLE


def test_parse_non_rectangular_raises():
    with pytest.raises(ValueError):
        parse("123\n12\n")


def test_parse_non_digit_raises():
    with pytest.raises(ValueError):
        parse("12a\n")


def test_get_outside_is_none():
    cave = parse(EXAMPLE)
    assert cave.get(-1, 0) is None
    assert cave.get(0, -1) is None
    assert cave.get(cave.nrows, 0) is None
    assert cave.get(0, cave.ncols) is None


def test_get_inside():
    cave = parse(EXAMPLE)
    assert cave.get(0, 0) == 2
    assert cave.get(4, 9) == 8


def test_adjacents_corner():
    cave = parse(EXAMPLE)
    assert cave.adjacents(0, 0) == [(1, 0), (0, 1), None, None]


def test_adjacents_inner():
    cave = parse(EXAMPLE)
    assert cave.adjacents(2, 2) == [(3, 2), (2, 3), (1, 2), (2, 1)]


def test_local_minima_are_lower_than_neighbours():
    cave = parse(EXAMPLE)
    minima = cave.local_minima()
    assert minima
    for r, c in minima:
        for p in cave.adjacents(r, c):
            if p is not None:
                assert cave.get(*p) > cave.get(r, c)


def test_basins_cover_all_non_nine_cells():
    cave = parse(EXAMPLE)
    total = sum(find_basin(cave, m) for m in cave.local_minima())
    assert total == sum(1 for row in cave.floor for v in row if v != 9)


def test_basin_from_nine_is_empty():
    cave = parse(EXAMPLE)
    assert find_basin(cave, (0, 2)) == 0


def test_part_a_example():
    assert part_a(parse(EXAMPLE)) == 15


def test_part_b_example():
    assert part_b(parse(EXAMPLE)) == 1134