# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and precedence.

These tests verify that:
- Every generated valid version string round-trips exactly
- compare is reflexive, antisymmetric and transitive
- version_key orders versions the same way compare does
- Build metadata never affects precedence
- Bumping always yields a strictly higher version and never wraps
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from strict_semver import (
    Major,
    PreRelease,
    Version,
    compare_versions,
    version_key,
)
from strict_semver.numeric import compare_digits

# =============================================================================
# Strategies for generating test data
# =============================================================================

# Canonical numeric text of any width
numeric_fields = st.integers(min_value=0, max_value=10**40).map(str)

# Small numbers so that generated versions often tie
small_numeric_fields = st.integers(min_value=0, max_value=3).map(str)

# Alphanumeric identifiers always contain a non-digit
alphanumeric_identifiers = st.from_regex(r"[0-9]*[A-Za-z-][0-9A-Za-z-]*", fullmatch=True)

prerelease_identifiers = st.one_of(numeric_fields, alphanumeric_identifiers)

build_identifiers = st.from_regex(r"[0-9A-Za-z-]+", fullmatch=True)

# Identifiers chosen to exercise every comparison branch
tie_prone_identifiers = st.sampled_from(["0", "1", "2", "10", "alpha", "beta", "rc", "a-1", "A"])


def _join(parts: list[str]) -> str:
    return ".".join(parts)


@st.composite
def version_strings(draw, numbers=numeric_fields, identifiers=prerelease_identifiers):
    """Generate a valid SemVer string."""
    text = f"{draw(numbers)}.{draw(numbers)}.{draw(numbers)}"
    pre_release = draw(st.lists(identifiers, max_size=4).map(_join))
    build = draw(st.lists(build_identifiers, max_size=3).map(_join))
    if pre_release:
        text += f"-{pre_release}"
    if build:
        text += f"+{build}"
    return text


tie_prone_versions = version_strings(numbers=small_numeric_fields, identifiers=tie_prone_identifiers).map(
    Version.from_string
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class TestRoundTripProperty:
    """Parsing preserves the exact input text."""

    @given(text=version_strings())
    @settings(max_examples=200)
    def test_round_trip(self, text: str) -> None:
        """Test that str(from_string(s)) == s."""
        assert str(Version.from_string(text)) == text

    @given(text=version_strings())
    @settings(max_examples=100)
    def test_parts_round_trip(self, text: str) -> None:
        """Test that recomposing the parsed fields reproduces the version."""
        v = Version.from_string(text)
        rebuilt = Version.from_parts(v.major, v.minor, v.patch, v.pre_release, v.build_metadata)
        assert rebuilt == v
        assert str(rebuilt) == text


class TestOrderingProperties:
    """compare is a total preorder consistent with version_key."""

    @given(v=tie_prone_versions)
    @settings(max_examples=100)
    def test_reflexive(self, v: Version) -> None:
        """Test that every version compares equal to itself."""
        assert v.compare(v) == 0

    @given(a=tie_prone_versions, b=tie_prone_versions)
    @settings(max_examples=300)
    def test_antisymmetric(self, a: Version, b: Version) -> None:
        """Test that swapping arguments negates the result."""
        assert a.compare(b) == -b.compare(a)

    @given(a=tie_prone_versions, b=tie_prone_versions, c=tie_prone_versions)
    @settings(max_examples=300)
    def test_transitive(self, a: Version, b: Version, c: Version) -> None:
        """Test that a <= b and b <= c imply a <= c."""
        if a.compare(b) <= 0 and b.compare(c) <= 0:
            assert a.compare(c) <= 0
        if a.compare(b) == 0 and b.compare(c) == 0:
            assert a.compare(c) == 0

    @given(a=tie_prone_versions, b=tie_prone_versions)
    @settings(max_examples=300)
    def test_key_consistent_with_compare(self, a: Version, b: Version) -> None:
        """Test that sorting by key agrees with compare."""
        key_a = version_key(a)
        key_b = version_key(b)
        expected = (key_a > key_b) - (key_a < key_b)
        assert a.compare(b) == expected

    @given(text=version_strings(), build=st.lists(build_identifiers, min_size=1, max_size=3).map(_join))
    @settings(max_examples=100)
    def test_build_metadata_ignored(self, text: str, build: str) -> None:
        """Test that replacing build metadata keeps precedence."""
        v = Version.from_string(text)
        assert compare_versions(v, v.with_build_metadata(build)) == 0

    @given(text=version_strings(identifiers=tie_prone_identifiers))
    @settings(max_examples=100)
    def test_release_beats_pre_release(self, text: str) -> None:
        """Test that dropping the pre-release never lowers precedence."""
        v = Version.from_string(text)
        release = v.with_pre_release(PreRelease.empty())
        if v.is_pre_release:
            assert release.compare(v) == 1
        else:
            assert release.compare(v) == 0


class TestNumericProperties:
    """Numeric fields behave like unbounded integers."""

    @given(a=st.integers(min_value=0, max_value=10**40), b=st.integers(min_value=0, max_value=10**40))
    @settings(max_examples=200)
    def test_compare_matches_int(self, a: int, b: int) -> None:
        """Test that digit comparison agrees with integer comparison."""
        assert compare_digits(str(a), str(b)) == _sign(a - b)
        assert Major.from_int(a).compare(Major.from_int(b)) == _sign(a - b)

    @given(n=st.integers(min_value=0, max_value=10**40))
    @settings(max_examples=200)
    def test_bump_adds_one(self, n: int) -> None:
        """Test that bump never wraps and always adds exactly one."""
        assert Major.from_int(n).bump().to_int() == n + 1

    @given(text=version_strings())
    @settings(max_examples=100)
    def test_bumps_increase(self, text: str) -> None:
        """Test that every bump yields a strictly higher version."""
        v = Version.from_string(text)
        for bumped in (v.bump_major(), v.bump_minor(), v.bump_patch()):
            assert bumped.compare(v) == 1
            assert not bumped.is_pre_release
            assert bumped.build_metadata.is_empty()
