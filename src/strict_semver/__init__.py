# SPDX-License-Identifier: MIT
"""Strict Semantic Versioning 2.0.0 value objects.

This package parses, validates, compares and bumps semantic versions. Every
value is immutable and reproduces its input text exactly, including numeric
fields larger than any machine integer.

Example:
    >>> from strict_semver import Version, compare_versions, is_valid_semver
    >>>
    >>> version = Version.from_string("1.2.3-alpha.1+build.456")
    >>> str(version.major)
    '1'
    >>> str(version.pre_release)
    'alpha.1'
    >>> str(version.bump_minor())
    '1.3.0'
    >>>
    >>> is_valid_semver("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .exceptions import (
    SemverError,
    InvalidFieldError,
    InvalidMajorError,
    InvalidMinorError,
    InvalidPatchError,
    InvalidPreReleaseError,
    InvalidBuildMetadataError,
    InvalidVersionError,
    ArithmeticCapabilityMissingError,
)
from .numeric import (
    NumericField,
    Major,
    Minor,
    Patch,
)
from .prerelease import PreRelease
from .build_metadata import BuildMetadata
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
)

__all__ = [
    # Errors
    "SemverError",
    "InvalidFieldError",
    "InvalidMajorError",
    "InvalidMinorError",
    "InvalidPatchError",
    "InvalidPreReleaseError",
    "InvalidBuildMetadataError",
    "InvalidVersionError",
    "ArithmeticCapabilityMissingError",
    # Fields
    "NumericField",
    "Major",
    "Minor",
    "Patch",
    "PreRelease",
    "BuildMetadata",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
]
