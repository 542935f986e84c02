"""Validation of the command-line arguments and the simulation settings."""

from dataclasses import dataclass
from typing import Optional

from .numbers import is_valid_number, parse_long


class ArgumentError(ValueError):
    """Raised when the simulation arguments are missing or out of range."""


def check_args(args):
    """Validate the argument strings and return them as integers.

    Expects 4 or 5 values: philosophers, time to die, time to eat,
    time to sleep and, optionally, the number of meals each must eat.
    """
    args = list(args)
    if len(args) not in (4, 5):
        raise ArgumentError("The args ara not correct")
    if not all(is_valid_number(arg) for arg in args):
        raise ArgumentError("Error args")
    values = [parse_long(arg) for arg in args]
    if values[0] < 2 or any(value <= 0 for value in values[1:]):
        raise ArgumentError("Error: Wrong arguments")
    return values


@dataclass(frozen=True)
class Config:
    """Settings of one simulation; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: Optional[int] = None

    @classmethod
    def from_args(cls, args):
        """Build a configuration from the argument strings, validating them first."""
        values = check_args(args)
        meals = values[4] if len(values) == 5 else None
        return cls(values[0], values[1], values[2], values[3], meals)