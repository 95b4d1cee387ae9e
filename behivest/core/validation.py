"""Argument checks and rounding shared by the calculators."""

from __future__ import annotations

import math
from typing import List, Optional


class InvalidArgumentError(ValueError):
    """Raised when a calculator receives a negative or non-finite input.

    Also raised when the inputs are valid on their own but the projected
    amount no longer fits in a float.
    """

    def __init__(self, fields: List[str], message: Optional[str] = None):
        super().__init__(
            message
            or f"All values must be finite and non-negative (got invalid: {', '.join(fields)})"
        )
        self.fields = fields


def require_non_negative(**values: float) -> None:
    """Raise InvalidArgumentError naming every argument below zero, NaN or infinite."""
    invalid = [name for name, value in values.items() if not math.isfinite(value) or value < 0]
    if invalid:
        raise InvalidArgumentError(invalid)


def result_overflow() -> InvalidArgumentError:
    return InvalidArgumentError([], "Inputs produce an amount too large to represent")


def round_half_up(value: float) -> int:
    if not math.isfinite(value):
        raise result_overflow()
    # Math.round semantics: 2.5 -> 3, -2.5 -> -2
    return math.floor(value + 0.5)
