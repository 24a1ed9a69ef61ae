"""Strict integer parsing for puzzle input."""

import string

_DIGITS = string.digits + string.ascii_lowercase


def parse_number(value: str, radix: int = 10) -> int:
    """Parse ``value`` as an integer in ``radix``.

    Only an optional sign followed by digits of the radix is accepted;
    whitespace, underscores and empty strings are rejected.
    """
    if not 2 <= radix <= 36:
        raise ValueError(f"radix {radix} is out of range 2..36")
    digits = value[1:] if value[:1] in ("+", "-") else value
    allowed = _DIGITS[:radix]
    if not digits or any(char not in allowed for char in digits.lower()):
        raise ValueError(f"ERR: parsing string into num '{value}'")
    return int(value, radix)