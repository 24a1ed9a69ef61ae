"""Day 6: lanternfish population growth."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from aoc21.tools import parse_number


@dataclass
class CompressedSchool:
    """Fish counts grouped by timer.

    ``new_fish`` holds fish still in their first, longer cycle (timers 8
    and 7); ``old_fish`` holds the regular seven-day cycle (timers 6..0).
    """

    new_fish: list[int]
    old_fish: list[int]

    def step(self) -> None:
        self.new_fish = self.new_fish[-1:] + self.new_fish[:-1]
        self.old_fish = self.old_fish[-1:] + self.old_fish[:-1]
        into_normal_cycle = self.new_fish[0]
        new_born = self.old_fish[0]
        self.old_fish[0] += into_normal_cycle
        self.new_fish[0] = new_born

    def count(self) -> int:
        return sum(self.new_fish) + sum(self.old_fish)


def compress(fishes: Iterable[int]) -> CompressedSchool:
    counts = Counter(fishes)
    buckets = [counts[timer] for timer in range(8, -1, -1)]
    return CompressedSchool(buckets[:2], buckets[2:])


def _parse_u8(text: str) -> int:
    value = parse_number(text)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"ERR: parsing string into num '{text}'")
    return value


def parse(text: str) -> list[int]:
    return [_parse_u8(v) for v in text.strip().split(",")]


def simulate(fishes: Iterable[int], days: int) -> int:
    """Number of fish after ``days`` days."""
    school = compress(fishes)
    for _ in range(days):
        school.step()
    return school.count()


def part_a(fishes: Iterable[int]) -> int:
    return simulate(fishes, 80)


def part_b(fishes: Iterable[int]) -> int:
    return simulate(fishes, 256)