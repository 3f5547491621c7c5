# SPDX-License-Identifier: MIT
"""Pre-release identifiers and their SemVer precedence.

Precedence follows https://semver.org/#spec-item-11:

- a release (empty pre-release) ranks above any pre-release
- identifiers are compared left to right
- numeric identifiers compare by magnitude
- alphanumeric identifiers compare by ASCII code point
- numeric identifiers rank below alphanumeric ones
- a shorter identifier list ranks below a longer one it prefixes
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .exceptions import InvalidPreReleaseError
from .numeric import compare_digits

IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")


def _is_numeric(identifier: str) -> bool:
    return identifier.isdigit()


def compare_identifiers(left: str, right: str) -> int:
    """Compare two pre-release identifiers, returning -1, 0 or 1."""
    left_numeric = _is_numeric(left)
    right_numeric = _is_numeric(right)

    if left_numeric and right_numeric:
        return compare_digits(left, right)
    if left_numeric:
        return -1
    if right_numeric:
        return 1
    if left != right:
        return -1 if left < right else 1
    return 0


@dataclass(frozen=True, slots=True, repr=False)
class PreRelease:
    """Dot-separated pre-release identifiers, or empty for a release.

    Attributes:
        value: The pre-release text without the leading ``-``
    """

    value: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidPreReleaseError(
                self.value, f"Pre-release must be a string, got {type(self.value).__name__}"
            )
        if not self.value:
            return
        for identifier in self.value.split("."):
            if IDENTIFIER_PATTERN.fullmatch(identifier) is None:
                raise InvalidPreReleaseError.from_string(self.value)
            if _is_numeric(identifier) and len(identifier) > 1 and identifier.startswith("0"):
                raise InvalidPreReleaseError(
                    self.value,
                    f"Numeric pre-release identifier {identifier!r} must not have a leading zero",
                )

    @classmethod
    def empty(cls) -> PreRelease:
        """Return the pre-release of a release version."""
        return cls("")

    @classmethod
    def from_string(cls, value: str) -> PreRelease:
        """Parse pre-release text such as ``alpha.1``; ``""`` means none.

        Raises:
            InvalidPreReleaseError: If an identifier is empty, contains
                characters outside ``[0-9A-Za-z-]`` or is numeric with a
                leading zero
        """
        return cls(value)

    @property
    def identifiers(self) -> tuple[str, ...]:
        if not self.value:
            return ()
        return tuple(self.value.split("."))

    def is_empty(self) -> bool:
        return not self.value

    def to_string(self) -> str:
        return self.value

    def equals(self, other: PreRelease) -> bool:
        return self.value == other.value

    def compare(self, other: PreRelease) -> int:
        """Compare by SemVer precedence, returning -1, 0 or 1."""
        if self.value == other.value:
            return 0
        # A release outranks all of its pre-releases
        if not self.value:
            return 1
        if not other.value:
            return -1

        ours = self.identifiers
        theirs = other.identifiers
        for left, right in zip(ours, theirs):
            result = compare_identifiers(left, right)
            if result:
                return result

        if len(ours) != len(theirs):
            return -1 if len(ours) < len(theirs) else 1
        return 0

    def sort_key(self) -> tuple:
        """Return a key that orders pre-releases by precedence."""
        if not self.value:
            return (1,)
        parts = []
        for identifier in self.identifiers:
            if _is_numeric(identifier):
                parts.append((0, len(identifier), identifier))
            else:
                parts.append((1, identifier))
        return (0, tuple(parts))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"PreRelease({self.value!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return self.compare(other) >= 0
