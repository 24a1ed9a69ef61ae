"""Day 21: Dirac Dice with a deterministic and a quantum die."""

import functools
from collections.abc import Sequence
from dataclasses import dataclass

from aoc21.tools import parse_number

Positions = tuple[int, int]

_BOARD = 10
_DIE_SIDES = 100
_QUANTUM_GOAL = 21

# Number of ways three rolls of a three-sided die add up to each sum.
_ROLL_PATHS = ((3, 1), (4, 3), (5, 6), (6, 7), (7, 6), (8, 3), (9, 1))


def _move(position: int, steps: int) -> int:
    return (position + steps - 1) % _BOARD + 1


@dataclass(frozen=True)
class GameResult:
    """Final state of a game played with the deterministic die."""

    positions: Positions
    scores: tuple[int, int]
    dice_rolls: int


def deterministic_game(positions: Sequence[int], max_score: int = 1000) -> GameResult:
    """Play with a die yielding 1, 2, ..., 100, 1, ... until someone reaches ``max_score``."""
    places = list(positions)
    scores = [0, 0]
    rolls = 0
    player = 0
    while all(score < max_score for score in scores):
        moves = sum(roll % _DIE_SIDES + 1 for roll in range(rolls, rolls + 3))
        rolls += 3
        places[player] = _move(places[player], moves)
        scores[player] += places[player]
        player = (player + 1) % len(scores)
    return GameResult((places[0], places[1]), (scores[0], scores[1]), rolls)


def count_wins_brute_force(
    positions: Sequence[int], max_score: int = _QUANTUM_GOAL
) -> tuple[int, int]:
    """Universes won by each player, found by walking every game."""
    wins = [0, 0]

    def play(mover: int, pos_mover: int, score_mover: int,
             pos_other: int, score_other: int, weight: int) -> None:
        if score_other >= max_score:
            wins[1 - mover] += weight
            return
        for roll, paths in _ROLL_PATHS:
            moved = _move(pos_mover, roll)
            play(1 - mover, pos_other, score_other, moved, score_mover + moved, weight * paths)

    play(0, positions[0], 0, positions[1], 0, 1)
    return wins[0], wins[1]


def count_wins_cached(
    positions: Sequence[int], max_score: int = _QUANTUM_GOAL
) -> tuple[int, int]:
    """Universes won by each player, with repeated game states cached."""

    @functools.lru_cache(maxsize=None)
    def wins(pos_a: int, pos_b: int, score_a: int, score_b: int) -> tuple[int, int]:
        if score_a >= max_score:
            return 1, 0
        if score_b >= max_score:
            return 0, 1
        total_a = total_b = 0
        for roll, paths in _ROLL_PATHS:
            moved = _move(pos_a, roll)
            other, mover = wins(pos_b, moved, score_b, score_a + moved)
            total_a += paths * mover
            total_b += paths * other
        return total_a, total_b

    return wins(positions[0], positions[1], 0, 0)


def _parse_u16(text: str) -> int:
    value = parse_number(text)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"ERR: parsing string into num '{text}'")
    return value


def _parse_start(line: str) -> int:
    _, sep, value = line.partition(": ")
    if not sep:
        raise ValueError(f"malformed start line {line!r}")
    return _parse_u16(value)


def parse(text: str) -> Positions:
    first, sep, second = text.strip().partition("\n")
    if not sep:
        raise ValueError("expected two starting positions")
    return _parse_start(first), _parse_start(second)


def part_a(positions: Sequence[int]) -> int:
    """Losing score times the number of die rolls."""
    result = deterministic_game(positions, 1000)
    return min(result.scores) * result.dice_rolls


def part_b(positions: Sequence[int]) -> int:
    """Universes won by the player who wins more often."""
    return max(count_wins_cached(positions, _QUANTUM_GOAL))