# SPDX-License-Identifier: MIT
"""Build metadata identifiers.

Build metadata is informational only and never takes part in precedence,
so this type offers equality but no ordering.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidBuildMetadataError
from .prerelease import IDENTIFIER_PATTERN


@dataclass(frozen=True, slots=True, repr=False)
class BuildMetadata:
    """Dot-separated build identifiers such as ``build.1848``, or empty.

    Unlike pre-release identifiers, numeric build identifiers may carry
    leading zeros (``20240101.007`` is valid).
    """

    value: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidBuildMetadataError(
                self.value, f"Build metadata must be a string, got {type(self.value).__name__}"
            )
        if self.value and any(
            IDENTIFIER_PATTERN.fullmatch(identifier) is None for identifier in self.value.split(".")
        ):
            raise InvalidBuildMetadataError.from_string(self.value)

    @classmethod
    def empty(cls) -> BuildMetadata:
        return cls("")

    @classmethod
    def from_string(cls, value: str) -> BuildMetadata:
        """Parse build metadata text without the leading ``+``; ``""`` means none.

        Raises:
            InvalidBuildMetadataError: If an identifier is empty or contains
                characters outside ``[0-9A-Za-z-]``
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

    def equals(self, other: BuildMetadata) -> bool:
        return self.value == other.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"BuildMetadata({self.value!r})"
