"""Day 2: steering the submarine."""

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from aoc21.tools import parse_number

log = logging.getLogger(__name__)


class Direction(enum.Enum):
    FORWARD = "forward"
    UP = "up"
    DOWN = "down"
    NOOP = "noop"


_KEYWORDS = {
    "forward": Direction.FORWARD,
    "up": Direction.UP,
    "down": Direction.DOWN,
}


@dataclass(frozen=True)
class Command:
    direction: Direction
    amount: int = 0


def _parse_i8(text: str) -> int:
    value = parse_number(text)
    if not -128 <= value <= 127:
        raise ValueError(f"ERR: parsing string into num '{text}'")
    return value


def parse_line(line: str) -> Command:
    """Parse a line such as ``forward 5``; unknown commands become NOOP."""
    keyword, sep, amount = line.partition(" ")
    direction = _KEYWORDS.get(keyword) if sep else None
    if direction is None:
        log.error("ERR parsing %s", line)
        return Command(Direction.NOOP)
    return Command(direction, _parse_i8(amount))


def parse(text: str) -> list[Command]:
    return [parse_line(line) for line in text.splitlines()]


def part_a(commands: Iterable[Command]) -> int:
    """Horizontal position times depth with plain up/down movement."""
    position = depth = 0
    for command in commands:
        if command.direction is Direction.FORWARD:
            position += command.amount
        elif command.direction is Direction.DOWN:
            depth += command.amount
        elif command.direction is Direction.UP:
            depth -= command.amount
    return position * depth


def part_b(commands: Iterable[Command]) -> int:
    """Horizontal position times depth when up/down change the aim."""
    position = depth = aim = 0
    for command in commands:
        if command.direction is Direction.DOWN:
            aim += command.amount
        elif command.direction is Direction.UP:
            aim -= command.amount
        elif command.direction is Direction.FORWARD:
            position += command.amount
            depth += aim * command.amount
    return position * depth