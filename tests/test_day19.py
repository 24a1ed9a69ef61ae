import itertools

import pytest

from aoc21.day19 import (
    Point,
    Sensor,
    count_combinations,
    fit,
    manhattan_distance,
    parse,
    part_a,
    part_b,
    rotations,
    solve,
)

ROTATION = (2, -1, 3)
OFFSET = Point(100, -50, 20)
SHARED = [Point(4**i, i * i, 7 * i) for i in range(12)]
EXTRA_0 = [Point(-7, 3, 9), Point(15, -20, 4)]
EXTRA_1_LOCAL = [Point(5, 5, 5)]


def _to_local(point: Point) -> Point:
    r = point - OFFSET
    return Point(-r.y, r.x, r.z)


def _sensors():
    first = Sensor(SHARED + EXTRA_0)
    second = Sensor([_to_local(p) for p in SHARED] + EXTRA_1_LOCAL)
    return first, second


def _expected_points():
    extra = {p.rotate(ROTATION) + OFFSET for p in EXTRA_1_LOCAL}
    return set(SHARED) | set(EXTRA_0) | extra


def test_local_transform_is_consistent():
    assert all(_to_local(p).rotate(ROTATION) + OFFSET == p for p in SHARED)


def test_rotations_are_distinct_and_complete():
    rots = list(rotations())
    assert len(set(rots)) == 48
    assert (1, 2, 3) in rots


def test_rotate_identity_and_example():
    p = Point(1, 2, 3)
    assert p.rotate((1, 2, 3)) == p
    assert p.rotate((2, -1, 3)) == Point(2, -1, 3)


def test_rotate_rejects_bad_axis():
    with pytest.raises(ValueError):
        Point(1, 2, 3).rotate((0, 1, 2))


def test_rotations_preserve_distances():
    a, b = Point(3, -8, 11), Point(-4, 6, 2)
    dist = manhattan_distance(a, b)
    assert all(manhattan_distance(a.rotate(r), b.rotate(r)) == dist for r in rotations())


def test_point_arithmetic_round_trip():
    a, b = Point(5, -3, 7), Point(-2, 9, 1)
    assert (a - b) + b == a
    assert manhattan_distance(a, a) == 0
    assert manhattan_distance(a, b) == manhattan_distance(b, a)


def test_count_combinations():
    assert count_combinations(12, 2) == 66
    assert count_combinations(2, 5) == 0
    assert count_combinations(9, 4) == count_combinations(9, 5)


def test_distance_map_consistent():
    sensor = Sensor(SHARED)
    mapping, dists = sensor.distance_map()
    assert set(mapping) == dists
    assert len(dists) == count_combinations(12, 2)
    for dist, (i, j) in mapping.items():
        assert i < j
        assert manhattan_distance(SHARED[i], SHARED[j]) == dist


def test_fit_places_second_sensor():
    first, second = _sensors()
    pairs = list(zip(range(12), range(12)))
    result = fit(pairs, first, second)
    offset, rotation = result
    assert offset == OFFSET
    moved = {p.rotate(rotation) + offset for p in second.beacons}
    assert set(SHARED) <= moved


def test_fit_without_overlap_returns_none():
    first = Sensor(SHARED)
    second = Sensor([Point(i, -i, 3 * i) for i in range(5)])
    assert fit([(0, 0)], first, second) is None


def test_solve_synthetic():
    points, positions = solve(list(_sensors()))
    assert positions == [Point(0, 0, 0), OFFSET]
    assert points == _expected_points()


def test_parts_synthetic():
    sensors = list(_sensors())
    assert part_a(sensors) == len(_expected_points())
    assert part_b(sensors) == manhattan_distance(Point(0, 0, 0), OFFSET)


def test_solve_unplaceable_raises():
    sensors = [Sensor(SHARED[:4]), Sensor(SHARED[4:8])]
    with pytest.raises(ValueError):
        solve(sensors)


def test_solve_empty_raises():
    with pytest.raises(ValueError):
        solve([])


def test_parse_sensors():
    text = "--- scanner 0 ---\n1,-2,3\n4,5,-6\n\n--- scanner 1 ---\n-7,8,9\n"
    sensors = parse(text)
    assert [s.beacons for s in sensors] == [
        [Point(1, -2, 3), Point(4, 5, -6)],
        [Point(-7, 8, 9)],
    ]


def test_parse_rejects_two_coordinates():
    with pytest.raises(ValueError):
        parse("--- scanner 0 ---\n1,2\n")


def test_combinations_of_shared_beacons_are_unique():
    dists = [manhattan_distance(a, b) for a, b in itertools.combinations(SHARED, 2)]
    assert len(set(dists)) == len(dists)