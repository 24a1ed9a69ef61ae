"""Day 18: snailfish number arithmetic."""

import functools
import itertools
import operator
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class SailfishNumber:
    """A snailfish number as its regular values with their nesting depth."""

    numbers: list[tuple[int, int]] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> "SailfishNumber":
        numbers = []
        depth = 0
        for char in text:
            if char == "[":
                depth += 1
            elif char == "]":
                depth -= 1
            elif char == ",":
                continue
            elif char in "0123456789":
                numbers.append((depth, int(char)))
            else:
                raise ValueError(f"unexpected character {char!r}")
        return cls(numbers)

    def __add__(self, other: "SailfishNumber") -> "SailfishNumber":
        if not isinstance(other, SailfishNumber):
            return NotImplemented
        result = SailfishNumber(
            [(depth + 1, value) for depth, value in self.numbers + other.numbers]
        )
        while result.explode() or result.split():
            pass
        return result

    def explode(self) -> bool:
        """Explode the leftmost pair nested four deep; True if one exploded."""
        nums = self.numbers
        pos = next((i for i, (depth, _) in enumerate(nums) if depth >= 5), None)
        if pos is None:
            return False
        if pos + 1 >= len(nums):
            raise ValueError("exploding pair is incomplete")
        depth, left = nums[pos]
        right = nums[pos + 1][1]
        if pos > 0:
            d, v = nums[pos - 1]
            nums[pos - 1] = (d, v + left)
        if pos + 1 < len(nums) - 1:
            d, v = nums[pos + 2]
            nums[pos + 2] = (d, v + right)
        del nums[pos + 1]
        nums[pos] = (depth - 1, 0)
        return True

    def split(self) -> bool:
        """Split the leftmost value over 9 into a pair; True if one split."""
        nums = self.numbers
        pos = next((i for i, (_, value) in enumerate(nums) if value > 9), None)
        if pos is None:
            return False
        depth, value = nums[pos]
        nums[pos] = (depth + 1, value // 2)
        nums.insert(pos + 1, (depth + 1, value - value // 2))
        return True

    def magnitude(self) -> int:
        nums = list(self.numbers)
        if not nums:
            raise ValueError("empty snailfish number")
        while len(nums) > 1:
            deepest = max(depth for depth, _ in nums)
            rpos = max(i for i, (depth, _) in enumerate(nums) if depth == deepest)
            if rpos == 0:
                raise ValueError("malformed snailfish number")
            depth, value = nums.pop(rpos)
            left = nums[rpos - 1][1]
            nums[rpos - 1] = (depth - 1, 3 * left + 2 * value)
        return nums[0][1]


def parse(text: str) -> list[SailfishNumber]:
    return [SailfishNumber.parse(line) for line in text.strip().splitlines()]


def part_a(numbers: Sequence[SailfishNumber]) -> int:
    """Magnitude of the sum of all numbers in order."""
    if not numbers:
        raise ValueError("no numbers given")
    return functools.reduce(operator.add, numbers).magnitude()


def part_b(numbers: Sequence[SailfishNumber]) -> int:
    """Largest magnitude of the sum of any two different numbers."""
    if len(numbers) < 2:
        raise ValueError("at least two numbers are needed")
    return max((a + b).magnitude() for a, b in itertools.permutations(numbers, 2))