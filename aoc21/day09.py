"""Day 9: low points and basins of a smoke-filled cave floor."""

import math
from dataclasses import dataclass
from typing import Optional

Position = tuple[int, int]

_OFFSETS = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass
class CaveMap:
    floor: list[list[int]]

    @property
    def nrows(self) -> int:
        return len(self.floor)

    @property
    def ncols(self) -> int:
        return len(self.floor[0]) if self.floor else 0

    def get(self, row: int, col: int) -> Optional[int]:
        """Height at (row, col), or None outside the map."""
        if not (0 <= row < self.nrows and 0 <= col < len(self.floor[row])):
            return None
        return self.floor[row][col]

    def adjacents(self, row: int, col: int) -> list[Optional[Position]]:
        """The four orthogonal neighbours; None for those outside the map."""
        result: list[Optional[Position]] = []
        for dr, dc in _OFFSETS:
            r, c = row + dr, col + dc
            inside = 0 <= r < self.nrows and 0 <= c < self.ncols
            result.append((r, c) if inside else None)
        return result

    def local_minima(self) -> list[Position]:
        """Positions lower than all of their neighbours, row by row."""
        minima = []
        for row in range(self.nrows):
            for col in range(self.ncols):
                height = self.floor[row][col]
                neighbours = (p for p in self.adjacents(row, col) if p is not None)
                if all(self.floor[r][c] > height for r, c in neighbours):
                    minima.append((row, col))
        return minima

    def __str__(self) -> str:
        return "".join("".join(map(str, row)) + "\n" for row in self.floor)


def _parse_row(row: str) -> list[int]:
    if any(char not in "0123456789" for char in row):
        raise ValueError(f"invalid height in row {row!r}")
    return [int(char) for char in row]


def parse(text: str) -> CaveMap:
    floor = [_parse_row(row) for row in text.splitlines()]
    if any(len(row) != len(floor[0]) for row in floor):
        raise ValueError("Map isn't rectangular")
    return CaveMap(floor)


def find_basin(cave: CaveMap, minimum: Position) -> int:
    """Size of the basin around ``minimum``, bounded by height 9."""
    searched: set[Position] = set()
    to_search = [minimum]
    size = 0
    while to_search:
        position = to_search.pop()
        if position in searched:
            continue
        searched.add(position)
        if cave.get(*position) == 9:
            continue
        size += 1
        to_search.extend(
            p for p in cave.adjacents(*position) if p is not None and p not in searched
        )
    return size


def part_a(cave: CaveMap) -> int:
    """Sum of the risk levels (height plus one) of all low points."""
    return sum(cave.floor[r][c] + 1 for r, c in cave.local_minima())


def part_b(cave: CaveMap) -> int:
    """Product of the sizes of the three largest basins."""
    sizes = sorted((find_basin(cave, m) for m in cave.local_minima()), reverse=True)
    return math.prod(sizes[:3])