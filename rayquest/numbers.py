"""Integer parsing and formatting helpers, plus a few number predicates."""

from __future__ import annotations

import math
import re

_C_SPACE = " \t\n\r\v\f"
_BASE_BLANK = " \t\n"
_SIGNS = "+-"
_DECIMAL = re.compile(r"[0-9]*")


def _check_base(base: str) -> None:
    if len(base) < 2:
        raise ValueError("a base needs at least two symbols")
    if any(sign in base for sign in _SIGNS):
        raise ValueError("a base may not contain '+' or '-'")
    if len(set(base)) != len(base):
        raise ValueError("a base may not repeat a symbol")


def _check_natural(number: int) -> None:
    if number < 0:
        raise ValueError(f"expected a non-negative integer, got {number}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring whatever follows it.

    Leading C whitespace is skipped and one optional sign is accepted.
    Text with no digits in that position parses as 0.
    """
    body = text.lstrip(_C_SPACE)
    negative = body.startswith("-")
    if body[:1] in ("-", "+"):
        body = body[1:]
    digits = _DECIMAL.match(body).group()
    value = int(digits) if digits else 0
    return -value if negative else value


def atoi_base(text: str, base: str) -> int:
    """Parse text as an integer written with the symbols of base.

    Leading spaces, tabs and newlines are skipped.  A sign is honoured only
    as the first character; parsing stops at any later sign.  Every other
    character must belong to the base.  Raises ValueError for an invalid
    base, an empty text or a foreign character.
    """
    _check_base(base)
    if not text:
        raise ValueError("nothing to parse")
    body = text.lstrip(_BASE_BLANK)
    foreign = [char for char in body if char not in base and char not in _SIGNS]
    if foreign:
        raise ValueError(f"{foreign[0]!r} is not a symbol of base {base!r}")
    radix = len(base)
    sign = 1
    value = 0
    for position, char in enumerate(body):
        if char in _SIGNS:
            if position:
                break
            if char == "-":
                sign = -1
            continue
        value = value * radix + base.index(char)
    return sign * value


def format_base(number: int, base: str) -> str:
    """Write an integer with the symbols of base, most significant first.

    Raises ValueError if the base is shorter than two symbols, repeats a
    symbol or contains a sign.
    """
    _check_base(base)
    radix = len(base)
    remaining = abs(number)
    digits = []
    while True:
        remaining, digit = divmod(remaining, radix)
        digits.append(base[digit])
        if not remaining:
            break
    sign = "-" if number < 0 else ""
    return sign + "".join(reversed(digits))


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return f"{number:d}"


def is_prime(number: int) -> bool:
    """Return True if number has exactly two divisors.

    Raises ValueError for negative numbers.
    """
    _check_natural(number)
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, math.isqrt(number) + 1))


def exact_sqrt(number: int) -> int:
    """Return the square root of a perfect square, or 0 otherwise.

    The search only covers roots up to half the number, so 1 also yields 0.
    Raises ValueError for negative numbers.
    """
    _check_natural(number)
    root = math.isqrt(number)
    if root * root == number and root <= number // 2:
        return root
    return 0