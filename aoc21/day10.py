"""Day 10: corrupted and incomplete chunk lines."""

from collections.abc import Iterable
from typing import Optional

_PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_OPENER_OF = {closing: opening for opening, closing in _PAIRS.items()}
_ILLEGAL_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_SCORES = {"(": 1, "[": 2, "{": 3, "<": 4}


def check_line(line: str) -> tuple[Optional[str], Optional[str]]:
    """Check the brackets of a line.

    Returns ``(open_chunks, None)`` with the still open brackets in order
    when the line is not corrupted, or ``(None, illegal)`` with the first
    wrong closing bracket.
    """
    stack: list[str] = []
    for char in line:
        if char in _PAIRS:
            stack.append(char)
        elif char in _OPENER_OF:
            if not stack:
                raise ValueError(f"closing {char!r} without an open chunk")
            if stack[-1] != _OPENER_OF[char]:
                return None, char
            stack.pop()
        else:
            raise ValueError(f"Unknown character encountered: {char!r}")
    return "".join(stack), None


def parse(text: str) -> list[str]:
    return text.splitlines()


def part_a(lines: Iterable[str]) -> int:
    """Syntax error score of all corrupted lines."""
    return sum(
        _ILLEGAL_SCORES[illegal]
        for _, illegal in map(check_line, lines)
        if illegal is not None
    )


def _completion_score(open_chunks: str) -> int:
    score = 0
    for char in reversed(open_chunks):
        score = score * 5 + _COMPLETION_SCORES[char]
    return score


def part_b(lines: Iterable[str]) -> int:
    """Middle completion score of the lines that are not corrupted."""
    scores = sorted(
        _completion_score(open_chunks)
        for open_chunks, _ in map(check_line, lines)
        if open_chunks is not None
    )
    if len(scores) % 2 != 1:
        raise ValueError("Number of scored lines shouldn't be even")
    return scores[len(scores) // 2]