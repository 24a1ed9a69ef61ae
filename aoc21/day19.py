"""Day 19: reassembling the beacon map from overlapping scanners."""

import itertools
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Optional

from aoc21.tools import parse_number

Rotation = tuple[int, int, int]

_MIN_OVERLAP = 12


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, order=True)
class Point:
    """A point in scanner space; differences of points are points too."""

    x: int
    y: int
    z: int

    def rotate(self, mapping: Rotation) -> "Point":
        """Reorder and flip axes: each entry names a source axis 1..3 with a sign."""
        coords = (self.x, self.y, self.z)
        values = []
        for axis in mapping:
            if not 1 <= abs(axis) <= 3:
                raise ValueError(f"invalid axis {axis} in rotation {mapping!r}")
            values.append(_sign(axis) * coords[abs(axis) - 1])
        return Point(*values)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __str__(self) -> str:
        return f"({self.x:4}, {self.y:4}, {self.z:4})"


def rotations() -> Iterator[Rotation]:
    """All axis permutations combined with all sign flips."""
    for permutation in itertools.permutations((1, 2, 3)):
        for flags in range(8):
            yield tuple(
                ((flags >> index & 1) * 2 - 1) * axis
                for index, axis in enumerate(permutation)
            )


def manhattan_distance(a: Point, b: Point) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)


def count_combinations(n: int, r: int) -> int:
    """Number of ways to choose ``r`` of ``n`` items; 0 when ``r > n``."""
    return math.comb(n, r)


@dataclass
class Sensor:
    beacons: list[Point] = field(default_factory=list)

    def distance_map(self) -> tuple[dict[int, tuple[int, int]], set[int]]:
        """Map each pairwise beacon distance to a pair of beacon indices.

        When several pairs share a distance, the last pair wins.
        """
        mapping: dict[int, tuple[int, int]] = {}
        for (i, a), (j, b) in itertools.combinations(enumerate(self.beacons), 2):
            mapping[manhattan_distance(a, b)] = (i, j)
        return mapping, set(mapping)

    def __str__(self) -> str:
        return "-- Sensor --\n" + "".join(f"{point}\n" for point in self.beacons)


def fit(
    pairs: Sequence[tuple[int, int]], sensor_1: Sensor, sensor_2: Sensor
) -> Optional[tuple[Point, Rotation]]:
    """Find the offset and rotation placing ``sensor_2`` onto ``sensor_1``.

    ``pairs`` are candidate (beacon of sensor 1, beacon of sensor 2) index
    pairs. A placement is accepted when at least twelve beacons coincide.
    """
    known = set(sensor_1.beacons)
    for rotation in rotations():
        for index_a, index_b in pairs:
            offset = sensor_1.beacons[index_a] - sensor_2.beacons[index_b].rotate(rotation)
            moved = {p.rotate(rotation) + offset for p in sensor_2.beacons}
            if sum(1 for p in sensor_1.beacons if p in moved) >= _MIN_OVERLAP:
                return offset, rotation
        del known
        known = set(sensor_1.beacons)
    return None


def solve(sensors: Sequence[Sensor]) -> tuple[set[Point], list[Point]]:
    """Place every sensor relative to the first one.

    Returns all beacons in the first sensor's coordinates and the position
    of each sensor.
    """
    if not sensors:
        raise ValueError("no sensors given")
    placed = [Sensor(list(sensor.beacons)) for sensor in sensors]
    offsets: list[Optional[Point]] = [None] * len(sensors)
    offsets[0] = Point(0, 0, 0)
    maps = [sensor.distance_map() for sensor in sensors]
    needed = count_combinations(_MIN_OVERLAP, 2)

    while any(offset is None for offset in offsets):
        progress = False
        for a, b in itertools.combinations(range(len(sensors)), 2):
            if (offsets[a] is None) == (offsets[b] is None):
                continue
            known, unknown = (b, a) if offsets[b] is not None else (a, b)
            known_map, known_dists = maps[known]
            unknown_map, unknown_dists = maps[unknown]
            shared = sorted(known_dists & unknown_dists)
            if len(shared) < needed:
                continue
            pairs = [(known_map[d][0], unknown_map[d][0]) for d in shared]
            fitted = fit(pairs, placed[known], placed[unknown])
            if fitted is None:
                continue
            offset, rotation = fitted
            offsets[unknown] = offset
            placed[unknown] = Sensor(
                [p.rotate(rotation) + offset for p in placed[unknown].beacons]
            )
            progress = True
        if not progress:
            raise ValueError("Couldn't place every sensor")

    points = {p for sensor in placed for p in sensor.beacons}
    return points, [offset for offset in offsets if offset is not None]


def _parse_i16(text: str) -> int:
    value = parse_number(text)
    if not -0x8000 <= value <= 0x7FFF:
        raise ValueError(f"ERR: parsing string into num '{text}'")
    return value


def _parse_point(line: str) -> Point:
    parts = line.split(",")
    if len(parts) != 3:
        raise ValueError(f"expected three coordinates in {line!r}")
    return Point(*(_parse_i16(part) for part in parts))


def parse(text: str) -> list[Sensor]:
    lines = iter(text.splitlines())
    sensors = []
    for _header in lines:
        beacons = []
        for line in lines:
            if len(line) <= 1:
                break
            beacons.append(_parse_point(line))
        sensors.append(Sensor(beacons))
    return sensors


def part_a(sensors: Sequence[Sensor]) -> int:
    """Number of distinct beacons."""
    return len(solve(sensors)[0])


def part_b(sensors: Sequence[Sensor]) -> int:
    """Largest Manhattan distance between any two sensors."""
    positions = solve(sensors)[1]
    if len(positions) < 2:
        raise ValueError("at least two sensors are needed")
    return max(manhattan_distance(a, b) for a, b in itertools.combinations(positions, 2))