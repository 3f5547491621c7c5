# SPDX-License-Identifier: MIT
"""Unit tests for pre-release identifiers and their precedence."""

import pytest

from strict_semver import InvalidPreReleaseError, PreRelease
from strict_semver.prerelease import compare_identifiers


class TestFromString:
    """Tests for parsing pre-release text."""

    @pytest.mark.parametrize(
        "value",
        [
            "alpha",
            "alpha.1",
            "alpha.beta",
            "0",
            "0.3.7",
            "x.7.z.92",
            "x-y-z.--",
            "alpha0.valid",
            "alpha.0valid",
            "0A.is.legal",
            "---RC-SNAPSHOT.12.9.1--.12",
            "alpha-a.b-c-somethinglong",
            "DEV-SNAPSHOT",
            "99999999999999999999999",
        ],
    )
    def test_valid(self, value):
        """Test that valid pre-releases keep their exact text."""
        assert PreRelease.from_string(value).to_string() == value

    @pytest.mark.parametrize(
        "value",
        [
            ".",
            "alpha.",
            ".alpha",
            "alpha..1",
            "01",
            "alpha.01",
            "0123.0123",
            "alpha_beta",
            "alpha+beta",
            "alpha beta",
            "αλφα",
            "alpha\n",
        ],
    )
    def test_invalid(self, value):
        """Test that malformed pre-releases are rejected."""
        with pytest.raises(InvalidPreReleaseError) as excinfo:
            PreRelease.from_string(value)
        assert excinfo.value.value == value

    def test_empty_string_is_empty(self):
        """Test that an empty string means no pre-release."""
        assert PreRelease.from_string("") == PreRelease.empty()
        assert PreRelease.from_string("").is_empty()

    def test_empty(self):
        """Test the empty pre-release."""
        assert str(PreRelease.empty()) == ""
        assert PreRelease.empty().identifiers == ()

    def test_non_string_rejected(self):
        """Test that non-string input is rejected."""
        with pytest.raises(InvalidPreReleaseError):
            PreRelease.from_string(1)  # type: ignore

    def test_identifiers(self):
        """Test splitting into identifiers."""
        assert PreRelease.from_string("rc.1.b").identifiers == ("rc", "1", "b")


class TestEquals:
    """Tests for textual equality."""

    def test_same_value(self):
        """Test that identical text is equal."""
        assert PreRelease.from_string("beta.2").equals(PreRelease.from_string("beta.2"))
        assert PreRelease.from_string("beta.2") == PreRelease.from_string("beta.2")

    def test_different_value(self):
        """Test that different text is not equal."""
        assert not PreRelease.from_string("alpha").equals(PreRelease.from_string("beta"))


class TestCompare:
    """Tests for SemVer pre-release precedence."""

    @pytest.mark.parametrize(
        "lower, higher",
        [
            # Chain from https://semver.org/#spec-item-11
            ("alpha", "alpha.1"),
            ("alpha.1", "alpha.beta"),
            ("alpha.beta", "beta"),
            ("beta", "beta.2"),
            ("beta.2", "beta.11"),
            ("beta.11", "rc.1"),
            ("rc.1", ""),
            # Numeric identifiers compare by magnitude
            ("alpha.1", "alpha.2"),
            ("1", "10"),
            ("9", "10"),
            ("1.99999999999999999999", "1.100000000000000000000"),
            # Numeric identifiers rank below alphanumeric ones
            ("1", "a"),
            ("999", "-"),
            ("1", "1a"),
            ("alpha.1", "alpha.a"),
            # Alphanumeric identifiers compare by ASCII code point
            ("A", "a"),
            ("RC", "alpha"),
            ("alpha-1", "alpha1"),
            ("alpha10", "alpha9"),
            # Shorter prefix ranks lower
            ("alpha", "alpha.0"),
            ("a.b", "a.b.c"),
            # Release ranks above any pre-release
            ("0", ""),
            ("zzz.999", ""),
        ],
    )
    def test_ordering(self, lower, higher):
        """Test that each pair is ordered in both directions."""
        low = PreRelease.from_string(lower)
        high = PreRelease.from_string(higher)
        assert low.compare(high) == -1
        assert high.compare(low) == 1
        assert low < high
        assert high > low

    @pytest.mark.parametrize("value", ["", "alpha", "alpha.1", "0.3.7"])
    def test_reflexive(self, value):
        """Test that a pre-release compares equal to itself."""
        assert PreRelease.from_string(value).compare(PreRelease.from_string(value)) == 0
        assert PreRelease.from_string(value) <= PreRelease.from_string(value)
        assert PreRelease.from_string(value) >= PreRelease.from_string(value)

    def test_sort_key_matches_compare(self):
        """Test that sorting by key yields precedence order."""
        expected = ["alpha", "alpha.1", "alpha.beta", "beta", "beta.2", "beta.11", "rc.1", ""]
        shuffled = [expected[i] for i in (5, 0, 7, 2, 6, 1, 4, 3)]
        ordered = sorted((PreRelease.from_string(v) for v in shuffled), key=PreRelease.sort_key)
        assert [str(p) for p in ordered] == expected

    def test_sorted_uses_operators(self):
        """Test that sorted() works without a key."""
        values = [PreRelease.from_string(v) for v in ("beta", "", "alpha")]
        assert [str(p) for p in sorted(values)] == ["alpha", "beta", ""]


class TestCompareIdentifiers:
    """Tests for the single-identifier comparison."""

    def test_both_numeric(self):
        """Test numeric magnitude comparison."""
        assert compare_identifiers("2", "10") == -1

    def test_mixed(self):
        """Test that the numeric side is lower."""
        assert compare_identifiers("10", "a") == -1
        assert compare_identifiers("a", "10") == 1

    def test_both_alphanumeric(self):
        """Test ASCII comparison."""
        assert compare_identifiers("beta", "alpha") == 1
        assert compare_identifiers("rc", "rc") == 0
