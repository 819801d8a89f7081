"""String helpers and validators shared by the donor registry."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional

VALID_BLOOD_TYPES: tuple[str, ...] = (
    "A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-",
    "a+", "a-", "b+", "b-", "ab+", "ab-", "o+", "o-",
)

INVALID_BLOOD_TYPE_MESSAGE = (
    "Tipo de sangre no válido. Los tipos válidos son: "
    "A+, A-, B+, B-, AB+, AB-, O+, O-."
)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def trim(text: str) -> str:
    """Strip leading and trailing space characters (only ' ')."""
    return text.strip(" ")


def is_valid_number(text: str) -> bool:
    """Return True when every character is an ASCII digit (True for '')."""
    return all("0" <= ch <= "9" for ch in text)


def convert_to_int(text: str) -> int:
    """Read a leading 32-bit integer from ``text``.

    Leading whitespace and a sign are accepted and anything after the digits
    is ignored. Raises ValueError when there are no digits and OverflowError
    when the value does not fit in 32 bits.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError("La entrada contiene caracteres no numéricos")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError("Entrada fuera de rango")
    return value


def is_valid_blood_type(value: str) -> bool:
    """Return True when ``value`` is one of the accepted blood types."""
    return value in VALID_BLOOD_TYPES


def prompt_blood_type(
    prompt: str,
    readline: Optional[Callable[[], str]] = None,
    write: Optional[Callable[[str], object]] = None,
) -> str:
    """Ask repeatedly until a valid blood type is entered and return it.

    Raises EOFError when the input runs out.
    """
    readline = readline or sys.stdin.readline
    write = write or sys.stdout.write
    while True:
        write(prompt + "\n")
        line = readline()
        if not line:
            raise EOFError("input ended before a valid blood type was entered")
        answer = line.removesuffix("\n")
        if is_valid_blood_type(answer):
            return answer
        write(INVALID_BLOOD_TYPE_MESSAGE + "\n")