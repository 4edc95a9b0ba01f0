"""Parsing and validation of the simulation's command-line arguments."""

from collections.abc import Sequence

INT_MAX = 2**31 - 1


class ArgumentError(ValueError):
    """Raised when the simulation arguments are missing or invalid."""


def is_space(char: str) -> bool:
    """Return True for the characters the argument parser skips as blanks."""
    return len(char) == 1 and 7 <= ord(char) <= 32


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse_long(text: str) -> int:
    """Parse a decimal integer the way the simulator reads its arguments.

    Leading blanks and one sign are accepted. Any other non-digit character
    makes the result -1. Once a positive value passes INT_MAX, the digits read
    so far are returned without looking further.
    """
    rest = text.lstrip("".join(chr(code) for code in range(7, 33)))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not _is_digit(char):
            return -1
        result = result * 10 + (ord(char) - ord("0"))
        if result * sign > INT_MAX:
            return result
    return result * sign


def validate_args(args: Sequence[str]) -> list[int]:
    """Check the simulation arguments and return them as integers.

    ``args`` holds the arguments without the program name: four or five
    positive integers (philosophers, time to die, time to eat, time to sleep
    and, optionally, the number of meals each must eat).
    """
    if not 4 <= len(args) <= 5:
        raise ArgumentError("Wrong number of arguments")
    values = []
    for arg in args:
        value = parse_long(arg)
        if not 0 < value <= INT_MAX:
            raise ArgumentError(f"invalid argument: {arg!r}")
        values.append(value)
    return values