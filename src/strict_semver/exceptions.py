# SPDX-License-Identifier: MIT
"""Exceptions raised while constructing or deriving semantic versions."""

from __future__ import annotations

from typing import Any


class SemverError(Exception):
    """Base exception for all strict_semver errors."""

    pass


class InvalidFieldError(SemverError, ValueError):
    """Raised when a numeric version field is negative or not canonical."""

    field_name = "field"

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Invalid {self.field_name}: {value!r}"
        super().__init__(self.message)

    @classmethod
    def from_int(cls, value: int) -> "InvalidFieldError":
        """Describe a negative integer without formatting its digits."""
        return cls(value, f"{cls.field_name.capitalize()} must be a non-negative integer")

    @classmethod
    def from_string(cls, value: str) -> "InvalidFieldError":
        return cls(
            value,
            f"{cls.field_name.capitalize()} must be '0' or digits without a leading zero, got {value!r}",
        )


class InvalidMajorError(InvalidFieldError):
    """Raised when a major version field is invalid."""

    field_name = "major"


class InvalidMinorError(InvalidFieldError):
    """Raised when a minor version field is invalid."""

    field_name = "minor"


class InvalidPatchError(InvalidFieldError):
    """Raised when a patch version field is invalid."""

    field_name = "patch"


class InvalidPreReleaseError(SemverError, ValueError):
    """Raised when a pre-release string violates the identifier rules."""

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Invalid pre-release: {value!r}"
        super().__init__(self.message)

    @classmethod
    def from_string(cls, value: str) -> "InvalidPreReleaseError":
        return cls(value)


class InvalidBuildMetadataError(SemverError, ValueError):
    """Raised when a build metadata string violates the identifier rules."""

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Invalid build metadata: {value!r}"
        super().__init__(self.message)

    @classmethod
    def from_string(cls, value: str) -> "InvalidBuildMetadataError":
        return cls(value)


class InvalidVersionError(SemverError, ValueError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class ArithmeticCapabilityMissingError(SemverError, ArithmeticError):
    """Raised when the interpreter refuses an integer conversion of a field.

    CPython limits the number of digits converted between ``int`` and
    ``str`` (see ``sys.set_int_max_str_digits``). Fields are stored as
    decimal strings so parsing, comparing and bumping never hit that limit,
    but converting to or from a Python ``int`` can.
    """

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or "Integer conversion exceeds the interpreter's digit limit"
        super().__init__(self.message)

    @classmethod
    def int_conversion(cls, value: Any, error: ValueError) -> "ArithmeticCapabilityMissingError":
        return cls(value, f"Integer conversion refused by the interpreter: {error}")
