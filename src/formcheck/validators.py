"""
Stock validators for common input checks.

Every validator takes the raw value first and returns an Outcome:
Ok(value) when the input is acceptable, Err(message) when it is not.
Each message can be overridden by the caller.

Example:
    from formcheck import validators

    def age(value: str):
        return validators.in_range(value, 0, 130, "Age must be between 0 and 130!")

    def email(value: str):
        return validators.matches(value, EMAIL_PATTERN, "A valid email is required!")
"""

import math
import re
from typing import Any, Callable, Iterable

from formcheck.models.outcome import Err, Ok, Outcome

NOT_EMPTY_MESSAGE = "The value must not be an empty!"
INTEGER_MESSAGE = "The value has to be an integer!"
FLOAT_MESSAGE = "The value has to be a float!"
NUMBER_MESSAGE = "The value has to be integer or float!"
LESS_THAN_MESSAGE = "The value has to be less than required value!"
AT_MOST_MESSAGE = "The value has to be less or equal to required value!"
GREATER_THAN_MESSAGE = "The value has to be greater than required value!"
AT_LEAST_MESSAGE = "The value has to be greater or equal to required value!"
EQUAL_TO_MESSAGE = "The value has to be equal to required value!"

# Whole-string numeric formats; ASCII digits only, no padding or separators
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def not_empty(value: str, msg: str = NOT_EMPTY_MESSAGE) -> Outcome:
    """Validate that the input is not an empty string."""
    if value == "":
        return Err(error=msg)
    return Ok(value=value)


def is_integer(value: str, msg: str = INTEGER_MESSAGE) -> Outcome:
    """Validate that the whole input is an integer written in ASCII digits."""
    num = _parse_integer(value)
    if num is None:
        return Err(error=msg)
    return Ok(value=num)


def is_float(value: str, msg: str = FLOAT_MESSAGE) -> Outcome:
    """Validate that the whole input is a finite decimal number ("3" is accepted as 3.0)."""
    num = _parse_float(value)
    if num is None:
        return Err(error=msg)
    return Ok(value=num)


def less_than(value: str, limit: float, msg: str = LESS_THAN_MESSAGE) -> Outcome:
    return _compare(value, msg, lambda num: num < limit)


def at_most(value: str, limit: float, msg: str = AT_MOST_MESSAGE) -> Outcome:
    return _compare(value, msg, lambda num: num <= limit)


def greater_than(value: str, limit: float, msg: str = GREATER_THAN_MESSAGE) -> Outcome:
    return _compare(value, msg, lambda num: num > limit)


def at_least(value: str, limit: float, msg: str = AT_LEAST_MESSAGE) -> Outcome:
    return _compare(value, msg, lambda num: num >= limit)


def in_range(value: str, minimum: float, maximum: float, msg: str) -> Outcome:
    """Validate that the input is a number in the closed interval [minimum, maximum]."""
    return _compare(value, msg, lambda num: minimum <= num <= maximum)


def equal_to(value: str, expected: float | str, msg: str = EQUAL_TO_MESSAGE) -> Outcome:
    """
    Validate that the input equals the expected value.

    A string expectation is compared verbatim (e.g. password confirmation);
    a numeric one parses the input as a number first.
    """
    if isinstance(expected, str):
        if value == expected:
            return Ok(value=value)
        return Err(error=msg)
    return _compare(value, msg, lambda num: num == expected)


def is_true(value: bool, msg: str) -> Outcome:
    """Validate a checkbox-like input is ticked."""
    if value is True:
        return Ok(value=True)
    return Err(error=msg)


def in_list(value: Any, choices: Iterable[Any], msg: str) -> Outcome:
    """Validate that the input is one of the allowed choices."""
    if value in list(choices):
        return Ok(value=value)
    return Err(error=msg)


def matches(value: str, pattern: str | re.Pattern, msg: str) -> Outcome:
    """Validate that the input matches a regex pattern."""
    if re.search(pattern, value):
        return Ok(value=value)
    return Err(error=msg)


def optional(validator: Callable[[Any], Outcome]) -> Callable[[Any], Outcome]:
    """
    Make a validator accept empty input.

    Empty raw input ("" or None) succeeds with Ok(None) without calling
    the wrapped validator; anything else is delegated to it.
    """

    def _optional(value: Any) -> Outcome:
        if value is None or value == "":
            return Ok(value=None)
        return validator(value)

    return _optional


def _parse_integer(value: Any) -> int | None:
    if not isinstance(value, str) or not INTEGER_PATTERN.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # Exceeds the interpreter's int string conversion limit
        return None


def _parse_float(value: Any) -> float | None:
    if not isinstance(value, str) or not FLOAT_PATTERN.fullmatch(value):
        return None
    num = float(value)
    # "1e999" matches the pattern but overflows
    if not math.isfinite(num):
        return None
    return num


def _parse_number(value: Any) -> int | float | None:
    """Parse text as an integer, falling back to a float. Non-text input is rejected."""
    num = _parse_integer(value)
    if num is None:
        return _parse_float(value)
    return num


def _compare(value: str, msg: str, check: Callable[[float], bool]) -> Outcome:
    num = _parse_number(value)
    if num is None:
        return Err(error=NUMBER_MESSAGE)
    if check(num):
        return Ok(value=num)
    return Err(error=msg)
