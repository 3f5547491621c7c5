# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta < 1.0.0
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Iterable, Union

from .semver import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have the same precedence
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return _coerce(version1).compare(_coerce(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)
    return (
        v.major.sort_key(),
        v.minor.sort_key(),
        v.patch.sort_key(),
        v.pre_release.sort_key(),
    )


def sort_versions(versions: Iterable[Union[str, Version]], reverse: bool = False) -> list[Version]:
    """Parse and sort versions by precedence.

    The sort is stable, so versions differing only in build metadata keep
    their input order.

    Raises:
        InvalidVersionError: If any version string is invalid
    """
    parsed = [_coerce(version) for version in versions]
    return sorted(parsed, key=version_key, reverse=reverse)
