# SPDX-License-Identifier: MIT
"""Semantic version parsing, precedence and bumping.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Union

from .build_metadata import BuildMetadata
from .exceptions import InvalidVersionError
from .numeric import Major, Minor, Patch
from .prerelease import PreRelease

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant), restricted to
# ASCII digits. Must be used with fullmatch: "$" would accept a trailing newline.
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)


@dataclass(frozen=True, slots=True, repr=False)
class Version:
    """Represents a parsed semantic version.

    Equality (``==``, :meth:`equals`) is textual and includes build
    metadata. Ordering (``<``, :meth:`compare`) follows SemVer precedence
    and ignores build metadata, so ``1.0.0+a`` and ``1.0.0+b`` are neither
    equal nor ordered apart.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_release: Pre-release identifiers (e.g., "alpha.1", "beta", "rc.2"), possibly empty
        build_metadata: Build metadata (e.g., "build.123", "20240101"), possibly empty
    """

    major: Major
    minor: Minor
    patch: Patch
    pre_release: PreRelease = field(default_factory=PreRelease.empty)
    build_metadata: BuildMetadata = field(default_factory=BuildMetadata.empty)

    def __post_init__(self) -> None:
        for name, expected in (
            ("major", Major),
            ("minor", Minor),
            ("patch", Patch),
            ("pre_release", PreRelease),
            ("build_metadata", BuildMetadata),
        ):
            value = getattr(self, name)
            if not isinstance(value, expected):
                raise InvalidVersionError(
                    repr(value), f"{name} must be a {expected.__name__}, got {type(value).__name__}"
                )

    @classmethod
    def from_string(cls, version_string: str) -> Version:
        """Parse a semantic version string into a Version object.

        Args:
            version_string: A string following semantic versioning format
                (MAJOR.MINOR.PATCH[-prerelease][+build])

        Returns:
            A Version object whose string form is exactly version_string

        Raises:
            InvalidVersionError: If the string does not follow semantic versioning

        Examples:
            >>> Version.from_string("1.0.0-alpha.1")
            Version('1.0.0-alpha.1')

            >>> str(Version.from_string("2.0.0-rc.1+build.456").build_metadata)
            'build.456'
        """
        if not isinstance(version_string, str):
            raise InvalidVersionError(
                str(version_string), f"Version must be a string, got {type(version_string).__name__}"
            )

        if not version_string:
            raise InvalidVersionError(version_string, "Version string cannot be empty")

        match = SEMVER_PATTERN.fullmatch(version_string)
        if not match:
            raise InvalidVersionError(version_string)

        return cls(
            major=Major.from_string(match.group("major")),
            minor=Minor.from_string(match.group("minor")),
            patch=Patch.from_string(match.group("patch")),
            pre_release=PreRelease.from_string(match.group("prerelease") or ""),
            build_metadata=BuildMetadata.from_string(match.group("buildmetadata") or ""),
        )

    @classmethod
    def from_parts(
        cls,
        major: Major,
        minor: Minor,
        patch: Patch,
        pre_release: Optional[PreRelease] = None,
        build_metadata: Optional[BuildMetadata] = None,
    ) -> Version:
        """Compose a version from already validated fields."""
        return cls(
            major=major,
            minor=minor,
            patch=patch,
            pre_release=pre_release if pre_release is not None else PreRelease.empty(),
            build_metadata=build_metadata if build_metadata is not None else BuildMetadata.empty(),
        )

    @property
    def is_pre_release(self) -> bool:
        """Return True if this is a pre-release version."""
        return not self.pre_release.is_empty()

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_string(self) -> str:
        version = self.base_version
        if not self.pre_release.is_empty():
            version += f"-{self.pre_release}"
        if not self.build_metadata.is_empty():
            version += f"+{self.build_metadata}"
        return version

    def equals(self, other: Version) -> bool:
        """Return True if both versions have the same canonical string."""
        return self.to_string() == other.to_string()

    def compare(self, other: Version) -> int:
        """Compare by SemVer precedence, returning -1, 0 or 1.

        Build metadata is never consulted.
        """
        for ours, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            result = ours.compare(theirs)
            if result:
                return result
        return self.pre_release.compare(other.pre_release)

    def bump_major(self) -> Version:
        """Return the next major version, e.g. 1.2.3-rc.1 -> 2.0.0."""
        bumped = Version(self.major.bump(), Minor("0"), Patch("0"))
        logger.debug("Bumped major version %s -> %s", self, bumped)
        return bumped

    def bump_minor(self) -> Version:
        """Return the next minor version, e.g. 1.2.3 -> 1.3.0."""
        bumped = Version(self.major, self.minor.bump(), Patch("0"))
        logger.debug("Bumped minor version %s -> %s", self, bumped)
        return bumped

    def bump_patch(self) -> Version:
        """Return the next patch version, e.g. 1.2.3+build.7 -> 1.2.4."""
        bumped = Version(self.major, self.minor, self.patch.bump())
        logger.debug("Bumped patch version %s -> %s", self, bumped)
        return bumped

    def with_pre_release(self, pre_release: Union[PreRelease, str]) -> Version:
        """Return a copy with the given pre-release and the same build metadata.

        Raises:
            InvalidPreReleaseError: If pre_release is an invalid string
        """
        if isinstance(pre_release, str):
            pre_release = PreRelease.from_string(pre_release)
        return Version(self.major, self.minor, self.patch, pre_release, self.build_metadata)

    def with_build_metadata(self, build_metadata: Union[BuildMetadata, str]) -> Version:
        """Return a copy with the given build metadata.

        Raises:
            InvalidBuildMetadataError: If build_metadata is an invalid string
        """
        if isinstance(build_metadata, str):
            build_metadata = BuildMetadata.from_string(build_metadata)
        return Version(self.major, self.minor, self.patch, self.pre_release, build_metadata)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return self.to_string()

    def __repr__(self) -> str:
        return f"Version({self.to_string()!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Equivalent to :meth:`Version.from_string`.

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning
    """
    return Version.from_string(version_string)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None
