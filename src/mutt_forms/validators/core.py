"""
Core validators.

Validators are small stateful rules: ``validate(value)`` returns a bool and,
on failure, leaves a human-readable message in ``error``. They never raise
for bad input - a failed validation is an expected outcome, not an error.

``error`` is reset at the start of every ``validate()`` call, so it always
describes the most recent call only.

Subclasses implement ``check(value)`` and report failures through
``fail(kind)``, which looks the message up in ``messages``.
"""

import math
import numbers
import re
from typing import Any, Dict, Optional, Union

from mutt_forms.protocols.form_config import get_form_config

REQUIRED_MESSAGE = "This field is required."
MIN_LENGTH_MESSAGE = "Length must be at least {min_length}!"
MAX_LENGTH_MESSAGE = "Length must be no more than {max_length}!"
INT_REQUIRED_MESSAGE = "Value must be an integer"
INVALID_PATTERN_MESSAGE = "Value must match the pattern: {pattern}"


def is_falsy(value: Any) -> bool:
    """Python falsiness, with NaN also counting as an absent value."""
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def is_zero(value: Any) -> bool:
    """True for numeric zero (0, 0.0, Decimal(0)); False is not zero here."""
    return (
        isinstance(value, numbers.Number)
        and not isinstance(value, bool)
        and value == 0
    )


# Numeric strings as a browser form parses them: decimal with optional
# exponent, Infinity, and unsigned hex/octal/binary literals. Surrounding
# whitespace is ignored and a blank string counts as zero.
_NUMERIC_STRING = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+"
)


def is_numeric(value: Any) -> bool:
    """
    True if value is a number or a string that parses as one.

    Strings follow the browser's number grammar rather than float(): "0x10"
    and " " are numeric, while "1_000", "inf" and "nan" are not.
    """
    if isinstance(value, bool):
        return True
    if isinstance(value, numbers.Number):
        try:
            return not math.isnan(value)
        except TypeError:
            # complex and friends
            return True
    if isinstance(value, str):
        text = value.strip()
        return text == "" or _NUMERIC_STRING.fullmatch(text) is not None
    return False


class Validator:
    """
    Base validator. Accepts every value.

    Args:
        messages: Optional {error kind: message} overrides
    """

    def __init__(self, messages: Optional[Dict[str, str]] = None):
        self.error: Optional[str] = None
        self.messages: Dict[str, str] = {
            "required": REQUIRED_MESSAGE,
        }
        self.messages.update(get_form_config().messages)
        if messages:
            self.messages.update(messages)

    def validate(self, value: Any) -> bool:
        """
        Validate a value.

        Args:
            value: Value to validate

        Returns:
            True if the value passed, False otherwise (see ``error``)
        """
        self.error = None
        return self.check(value)

    def check(self, value: Any) -> bool:
        return True

    def fail(self, kind: str) -> bool:
        """Record the message for ``kind`` as the current error."""
        self.error = self.messages[kind]
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(error={self.error!r})"


class RequiredValidator(Validator):
    """Fails on absent values. Numeric zero counts as present."""

    def check(self, value: Any) -> bool:
        if is_falsy(value) and not is_zero(value):
            return self.fail("required")
        return True


class BooleanRequiredValidator(Validator):
    """Passes only for True or False; None and everything else fails."""

    def check(self, value: Any) -> bool:
        if not (value is True or value is False):
            return self.fail("required")
        return True


class BooleanTrueValidator(Validator):
    """Passes only for True (e.g. "accept the terms" checkboxes)."""

    def check(self, value: Any) -> bool:
        if value is not True:
            return self.fail("required")
        return True


class LengthValidator(Validator):
    """
    Validate the length of a string or sequence.

    A bound of None (or 0) is not checked. Values without a length are
    measured through their string form. Absent values fail with ``required``
    unless ``allow_empty`` is set.

    Args:
        min_length: Minimum length
        max_length: Maximum length
        messages: Optional message overrides (``min_length``, ``max_length``)
        allow_empty: Let absent values pass (optional fields)
    """

    def __init__(self, min_length: Optional[int] = None, max_length: Optional[int] = None,
                 messages: Optional[Dict[str, str]] = None, allow_empty: bool = False):
        super().__init__(messages)

        self.min_length = min_length
        self.max_length = max_length
        self.allow_empty = allow_empty

        if "min_length" not in self.messages:
            self.messages["min_length"] = MIN_LENGTH_MESSAGE.format(min_length=min_length)

        if "max_length" not in self.messages:
            self.messages["max_length"] = MAX_LENGTH_MESSAGE.format(max_length=max_length)

    def check(self, value: Any) -> bool:
        if is_falsy(value):
            if self.allow_empty:
                return True
            return self.fail("required")

        length = len(value) if hasattr(value, "__len__") else len(str(value))

        if self.min_length and length < self.min_length:
            return self.fail("min_length")

        if self.max_length and length > self.max_length:
            return self.fail("max_length")

        return True


class IntegerValidator(Validator):
    """
    Validate that a supplied value is numeric.

    Absent values pass; pair with RequiredValidator for mandatory fields.
    """

    def __init__(self, messages: Optional[Dict[str, str]] = None):
        super().__init__(messages)

        if "int_required" not in self.messages:
            self.messages["int_required"] = INT_REQUIRED_MESSAGE

    def check(self, value: Any) -> bool:
        # Only check the type if we have a value
        if not is_falsy(value) and not is_numeric(value):
            return self.fail("int_required")
        return True


class RegexValidator(Validator):
    """
    Validate a value against a regular expression.

    The pattern is searched (not fully matched), so anchor it with ``^...$``
    to constrain the whole value.

    Args:
        pattern: Pattern string or compiled pattern
        messages: Optional message overrides (``invalid_pattern``)
        allow_empty: Let absent values pass instead of failing ``required``
    """

    def __init__(self, pattern: Union[str, re.Pattern], messages: Optional[Dict[str, str]] = None,
                 allow_empty: bool = False):
        super().__init__(messages)

        self.pattern: re.Pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.allow_empty = allow_empty

        if "invalid_pattern" not in self.messages:
            self.messages["invalid_pattern"] = INVALID_PATTERN_MESSAGE.format(
                pattern=self.pattern.pattern
            )

    def check(self, value: Any) -> bool:
        if is_falsy(value):
            if self.allow_empty:
                return True
            return self.fail("required")

        if not self.pattern.search(str(value)):
            return self.fail("invalid_pattern")

        return True
