"""Day 1: counting depth increases of a sonar sweep."""

import logging
from collections.abc import Sequence

from aoc21.tools import parse_number

log = logging.getLogger(__name__)

INVALID_DEPTH = 0xFFFF


def _parse_depth(line: str) -> int:
    try:
        value = parse_number(line)
    except ValueError:
        value = None
    if value is None or not 0 <= value <= INVALID_DEPTH:
        log.warning("ERR: parsing string %r", line)
        return INVALID_DEPTH
    return value


def parse(text: str) -> list[int]:
    """Parse one depth per line; unreadable lines become INVALID_DEPTH."""
    depths = [_parse_depth(line) for line in text.splitlines()]
    log.info("Parsed %d sonar points", len(depths))
    return depths


def _count_increases(values: Sequence[int]) -> int:
    return sum(a < b for a, b in zip(values, values[1:]))


def part_a(depths: Sequence[int]) -> int:
    """Number of measurements larger than the previous one."""
    if not depths:
        raise ValueError("no depths given")
    return _count_increases(depths)


def part_b(depths: Sequence[int]) -> int:
    """Number of increases of the three-measurement sliding window sums."""
    if len(depths) < 2:
        raise ValueError("at least two depths are needed")
    windows = [a + b + c for a, b, c in zip(depths, depths[1:], depths[2:])]
    if not windows:
        raise ValueError("at least three depths are needed")
    return _count_increases(windows)