"""Day 22: rebooting the reactor by switching cuboids on and off."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from aoc21.tools import parse_number

Command = tuple[bool, "Cube"]


@dataclass(frozen=True, order=True)
class Span:
    """Half-open integer interval ``start..end``."""

    start: int
    end: int

    def is_empty(self) -> bool:
        return self.end <= self.start

    def __len__(self) -> int:
        return max(self.end - self.start, 0)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True, order=True)
class Cube:
    x: Span
    y: Span
    z: Span

    def intersect(self, other: "Cube") -> Optional["Cube"]:
        """The overlap of two cubes, or None if they do not overlap."""
        cube = Cube(
            Span(max(self.x.start, other.x.start), min(self.x.end, other.x.end)),
            Span(max(self.y.start, other.y.start), min(self.y.end, other.y.end)),
            Span(max(self.z.start, other.z.start), min(self.z.end, other.z.end)),
        )
        return None if cube.is_empty() else cube

    def volume(self) -> int:
        return len(self.x) * len(self.y) * len(self.z)

    def is_empty(self) -> bool:
        return self.x.is_empty() or self.y.is_empty() or self.z.is_empty()

    def restrict(self, start: int, end: int) -> Optional["Cube"]:
        """The part of the cube inside ``start..end`` on every axis."""
        bounds = Cube(Span(start, end), Span(start, end), Span(start, end))
        return self.intersect(bounds)


def count_on(commands: Sequence[Command]) -> int:
    """Number of cubes switched on after all commands.

    Overlaps are tracked as signed cuboids: each new command cancels the
    parts of existing cuboids it covers.
    """
    cubes: dict[Cube, int] = {}
    for state, cube in commands:
        for old in sorted(cubes):
            overlap = old.intersect(cube)
            if overlap is not None:
                cubes[overlap] = cubes.get(overlap, 0) - cubes[old]
        if state:
            cubes[cube] = 1
    return sum(c.volume() * weight for c, weight in cubes.items())


def _parse_i32(text: str) -> int:
    value = parse_number(text)
    if not -(1 << 31) <= value < (1 << 31):
        raise ValueError(f"ERR: parsing string into num '{text}'")
    return value


def _parse_span(text: str) -> Span:
    _, eq, bounds = text.partition("=")
    low, dots, high = bounds.partition("..")
    if not eq or not dots:
        raise ValueError(f"malformed range {text!r}")
    start, end = _parse_i32(low), _parse_i32(high)
    if start > end:
        raise ValueError(f"range {text!r} is reversed")
    return Span(start, end + 1)


def parse(text: str) -> list[Command]:
    commands = []
    for line in text.splitlines():
        state, sep, ranges = line.partition(" ")
        if not sep:
            raise ValueError(f"malformed line {line!r}")
        spans = [_parse_span(part) for part in ranges.split(",")]
        if len(spans) != 3:
            raise ValueError(f"expected three ranges in {line!r}")
        commands.append((state == "on", Cube(*spans)))
    return commands


def part_a(commands: Sequence[Command]) -> int:
    """Cubes on within the initialization region -50..50."""
    restricted = []
    for state, cube in commands:
        inside = cube.restrict(-50, 51)
        if inside is not None:
            restricted.append((state, inside))
    return count_on(restricted)


def part_b(commands: Sequence[Command]) -> int:
    """Cubes on in the whole reactor."""
    return count_on(commands)