"""Kaprekar Routine — one rearrange-and-subtract step and the digit-match test.

Invariants:
    - compute_step accepts only FourDigitValue input (MIN_VALUE–MAX_VALUE)
    - Digits are always taken from the DIGIT_WIDTH zero-padded string, so 999 sorts as 0999
    - digits_match compares natural (unpadded) decimal strings
    - StepResult is frozen: created per iteration, never mutated

Design Decisions:
    - Text-based digit sorting: sorted() on the padded string, reparsed with int()
    - rearrange is the unchecked step used by the seek loop for intermediate values
      below MIN_VALUE; compute_step is the validated public entry point
"""

from dataclasses import dataclass
from typing import Any

from kaprekar.core.domain_types import (
    DIGIT_WIDTH, MIN_VALUE, MAX_VALUE, FourDigitValue,
)
from kaprekar.core.errors import ErrorContext, InvalidInputError


@dataclass(frozen=True)
class StepResult:
    """One iteration: desc_value - asc_value = difference."""
    value: int
    asc_value: int
    desc_value: int
    difference: int


def pad_digits(value: int, width: int = DIGIT_WIDTH) -> str:
    """Decimal string left-padded with '0' to at least `width` chars."""
    return str(value).rjust(width, "0")


def validate_four_digit(value: Any, context: ErrorContext | None = None) -> FourDigitValue:
    """Return value as FourDigitValue or raise InvalidInputError."""
    # bool is an int subclass; True must not pass as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, context)
    if value < MIN_VALUE or value > MAX_VALUE:
        raise InvalidInputError(value, context)
    return FourDigitValue(value)


def rearrange(value: int) -> StepResult:
    digits = pad_digits(value)
    asc_value = int("".join(sorted(digits)))
    desc_value = int("".join(sorted(digits, reverse=True)))
    return StepResult(
        value=value,
        asc_value=asc_value,
        desc_value=desc_value,
        difference=desc_value - asc_value,
    )


def compute_step(value: int) -> StepResult:
    """Sort the four digits both ways and subtract. Pure."""
    return rearrange(validate_four_digit(value))


def digits_match(a: int, b: int) -> bool:
    """True when a and b have the same multiset of decimal digits.

    1234 vs 4321 -> True, 1234 vs 1233 -> False, 1111 vs 0 -> False.
    """
    return sorted(str(a)) == sorted(str(b))
