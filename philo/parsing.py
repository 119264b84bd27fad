"""Command-line argument validation and parsing for the dining simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

MAX_PHILOSOPHERS = 200
MAX_ARGUMENT = 4294967295
_WORD_MODULUS = 2**64
_SPACE = {chr(code) for code in range(9, 14)} | {" "}
_DIGITS = "0123456789"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are rejected.

    ``to_stdout`` tells whether the message belongs on standard output
    rather than standard error.
    """

    def __init__(self, message: str, to_stdout: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.to_stdout = to_stdout


@dataclass(frozen=True)
class Settings:
    """Parameters of one dinner; times are in microseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: Optional[int] = None


def parse_number(text: str) -> int:
    """Read an unsigned number: skip leading blanks, stop at the first non-digit."""
    stripped = text.lstrip("".join(_SPACE))
    result = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        result = (result * 10 + int(char)) % _WORD_MODULUS
    return result


def all_digits(args: Sequence[str]) -> bool:
    """Return True when every argument consists of decimal digits only."""
    return all(char in _DIGITS for arg in args for char in arg)


def check_limits(args: Sequence[str]) -> None:
    """Check the philosopher count and the size of every other argument."""
    count = parse_number(args[0])
    if count > MAX_PHILOSOPHERS:
        raise ArgumentError("Number of philosophers can't exceed 200")
    if count == 0:
        raise ArgumentError("Add at least one philosopher", to_stdout=True)
    if any(parse_number(arg) > MAX_ARGUMENT for arg in args[1:]):
        raise ArgumentError("Don't exceed the size_t max in arguments")


def parse_arguments(args: Sequence[str]) -> Settings:
    """Validate the arguments (without the program name) and build Settings."""
    if len(args) not in (4, 5):
        raise ArgumentError("Write the correct number of arguments, please")
    if not all_digits(args):
        raise ArgumentError("Only positive numbers are accepted as arguments")
    check_limits(args)
    numbers = [parse_number(arg) for arg in args]
    return Settings(
        philosophers=numbers[0],
        time_to_die=numbers[1],
        time_to_eat=numbers[2],
        time_to_sleep=numbers[3],
        meals=numbers[4] if len(numbers) == 5 else None,
    )