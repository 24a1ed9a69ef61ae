import pytest

from aoc21.day22 import Cube, Span, count_on, parse, part_a, part_b

EXAMPLE = (
    "on x=10..12,y=10..12,z=10..12\n"
    "on x=11..13,y=11..13,z=11..13\n"
    "off x=9..11,y=9..11,z=9..11\n"
    "on x=10..10,y=10..10,z=10..10\n"
)


def _cube(x0, x1, y0, y1, z0, z1):
    return Cube(Span(x0, x1), Span(y0, y1), Span(z0, z1))


def test_example():
    commands = parse(EXAMPLE)
    assert part_a(commands) == 39
    assert part_b(commands) == 39


def test_parse_spans_are_inclusive_input():
    state, cube = parse(EXAMPLE)[2]
    assert state is False
    assert cube.x.start == 9
    assert cube.x.end - 1 == 11


def test_parse_rejects_reversed_range():
    with pytest.raises(ValueError):
        parse("on x=5..1,y=0..1,z=0..1")


def test_parse_rejects_missing_axis():
    with pytest.raises(ValueError):
        parse("on x=0..1,y=0..1")


def test_single_cube_counts_its_volume():
    cube = _cube(-3, 4, 0, 2, 5, 9)
    assert count_on([(True, cube)]) == cube.volume()


def test_on_then_off_is_empty():
    cube = _cube(0, 5, 0, 5, 0, 5)
    assert count_on([(True, cube), (False, cube)]) == 0


def test_two_overlapping_cubes():
    a = _cube(0, 4, 0, 4, 0, 4)
    b = _cube(2, 7, 1, 3, -1, 6)
    overlap = a.intersect(b)
    expected = a.volume() + b.volume() - overlap.volume()
    assert count_on([(True, a), (True, b)]) == expected


def test_intersect_is_symmetric_and_smaller():
    a = _cube(0, 4, 0, 4, 0, 4)
    b = _cube(2, 7, 1, 3, -1, 6)
    assert a.intersect(b) == b.intersect(a)
    assert a.intersect(b).volume() <= min(a.volume(), b.volume())


def test_disjoint_cubes_do_not_intersect():
    assert _cube(0, 1, 0, 1, 0, 1).intersect(_cube(1, 2, 0, 1, 0, 1)) is None


def test_restrict():
    cube = _cube(-10, 10, 0, 5, 3, 4)
    assert cube.restrict(-50, 51) == cube
    assert _cube(60, 70, 0, 1, 0, 1).restrict(-50, 51) is None


def test_empty_span_and_cube():
    assert Span(3, 3).is_empty()
    assert len(Span(5, 2)) == 0
    assert _cube(0, 1, 2, 2, 0, 1).is_empty()


def test_part_a_ignores_far_cubes():
    commands = parse("on x=100..101,y=0..1,z=0..1")
    assert part_a(commands) == 0
    assert part_b(commands) == commands[0][1].volume()