"""
Validators for field values.

Each validator checks a single value and reports pass/fail plus an error
message. Fields chain them in order and stop at the first failure.
"""

from .core import (
    Validator,
    RequiredValidator,
    BooleanRequiredValidator,
    BooleanTrueValidator,
    LengthValidator,
    IntegerValidator,
    RegexValidator,
    is_falsy,
    is_zero,
    is_numeric,
)

__all__ = [
    "Validator",
    "RequiredValidator",
    "BooleanRequiredValidator",
    "BooleanTrueValidator",
    "LengthValidator",
    "IntegerValidator",
    "RegexValidator",
    "is_falsy",
    "is_zero",
    "is_numeric",
]
