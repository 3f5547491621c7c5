# SPDX-License-Identifier: MIT
"""Numeric version fields: major, minor and patch.

Fields are stored as their canonical decimal text rather than as ``int`` so
that values of any magnitude survive a parse/format round trip unchanged,
and so that comparing and bumping never depend on interpreter limits.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from .exceptions import (
    ArithmeticCapabilityMissingError,
    InvalidFieldError,
    InvalidMajorError,
    InvalidMinorError,
    InvalidPatchError,
)

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
NUMERIC_PATTERN = re.compile(r"0|[1-9][0-9]*")

_F = TypeVar("_F", bound="NumericField")


def compare_digits(left: str, right: str) -> int:
    """Compare two canonical decimal strings by numeric magnitude.

    Both strings must be free of leading zeros, so the longer one is the
    larger number and equal lengths compare digit by digit.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right
    """
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    if left != right:
        return -1 if left < right else 1
    return 0


def increment_digits(value: str) -> str:
    """Add one to a canonical decimal string.

    Examples:
        >>> increment_digits("41")
        '42'
        >>> increment_digits("1999")
        '2000'
        >>> increment_digits("99")
        '100'
    """
    head = value.rstrip("9")
    carried = "0" * (len(value) - len(head))
    if not head:
        return "1" + carried
    return head[:-1] + str(int(head[-1]) + 1) + carried


@dataclass(frozen=True, slots=True, repr=False)
class NumericField:
    """A non-negative integer field held as canonical decimal text.

    Attributes:
        value: Decimal digits, ``"0"`` or without a leading zero
    """

    value: str

    error: ClassVar[type[InvalidFieldError]] = InvalidFieldError

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or NUMERIC_PATTERN.fullmatch(self.value) is None:
            raise self.error.from_string(self.value)

    @classmethod
    def from_int(cls: type[_F], value: int) -> _F:
        """Create a field from a non-negative Python integer.

        Raises:
            InvalidFieldError: If value is negative or not an int
            ArithmeticCapabilityMissingError: If the interpreter refuses to
                convert value to decimal text
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise cls.error(
                value,
                f"{cls.error.field_name.capitalize()} must be an int, got {type(value).__name__}",
            )
        if value < 0:
            raise cls.error.from_int(value)
        try:
            text = str(value)
        except ValueError as e:
            raise ArithmeticCapabilityMissingError.int_conversion(value, e) from e
        return cls(text)

    @classmethod
    def from_string(cls: type[_F], value: str) -> _F:
        """Create a field from its decimal text, kept verbatim.

        Raises:
            InvalidFieldError: If value is not ``0`` or digits without a leading zero
        """
        return cls(value)

    def to_string(self) -> str:
        return self.value

    def to_int(self) -> int:
        """Return the field as a Python integer.

        Raises:
            ArithmeticCapabilityMissingError: If the interpreter refuses to
                convert this many digits
        """
        try:
            return int(self.value)
        except ValueError as e:
            raise ArithmeticCapabilityMissingError.int_conversion(self.value, e) from e

    def bump(self: _F) -> _F:
        """Return a new field holding this value plus one."""
        return type(self)(increment_digits(self.value))

    def compare(self, other: NumericField) -> int:
        """Compare numerically, returning -1, 0 or 1."""
        return compare_digits(self.value, other.value)

    def sort_key(self) -> tuple[int, str]:
        """Return a key that orders fields by magnitude."""
        return (len(self.value), self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare(other) >= 0


class Major(NumericField):
    """Major version number (incompatible API changes)."""

    __slots__ = ()
    error = InvalidMajorError


class Minor(NumericField):
    """Minor version number (backward compatible features)."""

    __slots__ = ()
    error = InvalidMinorError


class Patch(NumericField):
    """Patch version number (backward compatible bug fixes)."""

    __slots__ = ()
    error = InvalidPatchError
