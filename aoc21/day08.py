"""Day 8: decoding scrambled seven-segment displays."""

import functools
import itertools
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

# Segment a is bit 0, g is bit 6; listed in the order of the digits 0..9.
_DIGIT_CODES = (
    0b1110111, 0b0100100,
    0b1011101, 0b1101101,
    0b0101110, 0b1101011,
    0b1111011, 0b0100101,
    0b1111111, 0b1101111,
)

_UNIQUE_SEGMENT_COUNTS = frozenset({2, 3, 4, 7})


@dataclass(frozen=True)
class Digit:
    on_segments: tuple[bool, ...]

    @classmethod
    def from_pattern(cls, value: str) -> "Digit":
        """Build a digit from letters a..g naming the lit segments."""
        segments = [False] * 7
        for char in value:
            index = ord(char) - ord("a")
            if not 0 <= index < 7:
                raise ValueError(f"Unknown segment {char!r}")
            segments[index] = True
        return cls(tuple(segments))

    def count_on(self) -> int:
        return sum(self.on_segments)

    def __int__(self) -> int:
        return sum(1 << index for index, on in enumerate(self.on_segments) if on)

    def to_num(self) -> Optional[int]:
        """The digit shown, or None if the segments form no digit."""
        code = int(self)
        return _DIGIT_CODES.index(code) if code in _DIGIT_CODES else None


@dataclass(frozen=True)
class Display:
    combinations: tuple[Digit, ...]
    number: tuple[Digit, ...]


def do_permute(digit: Digit, permutation: Sequence[int]) -> Digit:
    """Rewire a digit: segment ``i`` takes the state of segment ``permutation[i]``."""
    return Digit(tuple(digit.on_segments[source] for source in permutation))


def _digits(text: str, count: int, what: str) -> tuple[Digit, ...]:
    digits = tuple(Digit.from_pattern(pattern) for pattern in text.split())
    if len(digits) != count:
        raise ValueError(f"Input string {what} doesn't fit")
    return digits


def parse(text: str) -> list[Display]:
    displays = []
    for line in text.splitlines():
        combinations, sep, number = line.partition("|")
        if not sep:
            raise ValueError(f"missing '|' in line {line!r}")
        displays.append(
            Display(_digits(combinations, 10, "comb"), _digits(number, 4, "number"))
        )
    return displays


def part_a(displays: Iterable[Display]) -> int:
    """Output digits that are 1, 4, 7 or 8."""
    return sum(
        1
        for display in displays
        for digit in display.number
        if digit.count_on() in _UNIQUE_SEGMENT_COUNTS
    )


def _decode(display: Display) -> int:
    for permutation in itertools.permutations(range(7)):
        if all(do_permute(p, permutation).to_num() is not None for p in display.combinations):
            break
    else:
        raise ValueError("Couldn't find a solution")
    digits = [do_permute(digit, permutation).to_num() for digit in display.number]
    if None in digits:
        raise ValueError("Output digit does not match the found wiring")
    return functools.reduce(lambda acc, value: acc * 10 + value, digits, 0)


def part_b(displays: Iterable[Display]) -> int:
    """Sum of all decoded output numbers."""
    return sum(_decode(display) for display in displays)