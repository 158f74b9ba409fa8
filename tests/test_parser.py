"""
Tests for versioncmp.versioning.parser module.

Tests building Version structures including:
- Numeric value-groups
- Stability classification and keyword stripping
- Nightly detection
- Meta collection and numeric fallbacks
"""

from __future__ import annotations

import pytest

from versioncmp.versioning import STABILITY_RANK, Version, parse, stability_rank


class TestValues:
    """Tests for numeric value-groups."""

    def test_plain_semver(self):
        """Test a plain major.minor.patch version."""
        assert parse("1.0.0") == Version(values=((1, 0, 0),))

    def test_groups_keep_order(self):
        """Test that groups are kept in input order."""
        version = parse("1.3.1_2023-11-16_91b66b0783")
        assert version.values == ((1, 3, 1), (2023,), (11, 16))
        assert version.meta == ("91b66b0783",)

    def test_leading_zeros(self):
        """Test that leading zeros are parsed away."""
        assert parse("01-02-2024").values == ((1, 2, 2024),)

    def test_group_without_numbers_dropped(self):
        """Test that a group with no numeric token adds no value-group."""
        version = parse("1.2-abc_3")
        assert version.values == ((1, 2), (3,))
        assert version.meta == ("abc",)

    def test_no_numbers(self):
        """Test that a pure text identifier has no values."""
        version = parse("abc")
        assert version.values == ()
        assert version.meta == ("abc",)

    def test_empty_string(self):
        """Test that the empty string parses to an empty meta token."""
        assert parse("") == Version(meta=("",))


class TestStability:
    """Tests for stability classification."""

    def test_default_stable(self):
        """Test that versions without keywords are stable."""
        assert parse("1.2.3").stability == "stable"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1-dev", "dev"),
            ("1-devel", "dev"),
            ("1-develop", "dev"),
            ("1-pre", "pre"),
            ("1-prerel", "pre"),
            ("1-prerelease", "pre"),
            ("1-alpha", "alpha"),
            ("1-beta", "beta"),
            ("1-rc", "rc"),
            ("1-candidate", "rc"),
            ("1-releasecandidate", "rc"),
        ],
    )
    def test_keywords(self, raw, expected):
        """Test every stability keyword."""
        assert parse(raw).stability == expected

    def test_case_insensitive(self):
        """Test that keywords match regardless of case."""
        assert parse("1-BETA").stability == "beta"

    def test_keyword_prefix_stripped(self):
        """Test that "rc2" yields stability rc and value 2."""
        version = parse("1.0.0-rc2")
        assert version.stability == "rc"
        assert version.values == ((1, 0, 0), (2,))
        assert version.meta == ()

    def test_keyword_suffix_stripped(self):
        """Test that "2rc" yields stability rc and value 2."""
        version = parse("1.0.0-2rc")
        assert version.stability == "rc"
        assert version.values == ((1, 0, 0), (2,))

    def test_longest_keyword_wins(self):
        """Test that "prerelease" is stripped whole, not as "pre"."""
        version = parse("1-prerelease")
        assert version.stability == "pre"
        assert version.meta == ("",)

    def test_devel_with_number(self):
        """Test that "devel1" strips "devel", not just "dev"."""
        version = parse("devel1")
        assert version.stability == "dev"
        assert version.values == ((1,),)

    def test_last_keyword_wins(self):
        """Test that the last stability keyword overrides earlier ones."""
        assert parse("1.2.3-alpha.beta").stability == "beta"

    def test_pre_release_spelling(self):
        """Test that "pre-release" classifies as pre."""
        version = parse("1-pre-release-2")
        assert version.stability == "pre"
        assert version.values == ((1, 2),)

    def test_unrelated_letter_prefix_is_meta(self):
        """Test that "r1262506" is not mistaken for a release candidate."""
        version = parse("123.0.6312.59-r1262506")
        assert version.stability == "stable"
        assert version.meta == ("r1262506",)


class TestNightly:
    """Tests for nightly detection."""

    def test_nightly_token(self):
        """Test that a nightly token sets the flag and is discarded."""
        version = parse("1.0.0-nightly-12412")
        assert version.nightly is True
        assert version.values == ((1, 0, 0), (12412,))
        assert version.meta == ()

    def test_nightly_substring_case_insensitive(self):
        """Test that "Nightly" embedded in a token is detected."""
        assert parse("2024-01-02-NightlyBuild").nightly is True

    def test_not_nightly(self):
        """Test that regular versions are not nightly."""
        assert parse("1.0.0").nightly is False


class TestMeta:
    """Tests for meta collection and numeric fallbacks."""

    def test_meta_lowercased(self):
        """Test that meta tokens are stored lower-cased."""
        assert parse("1-ABC").meta == ("abc",)

    def test_meta_keeps_duplicates(self):
        """Test that duplicate meta tokens are kept in order."""
        assert parse("1-x-y-x").meta == ("x", "y", "x")

    def test_32bit_max_is_value(self):
        """Test that the largest unsigned 32-bit number is a value."""
        assert parse("4294967295").values == ((4294967295,),)

    def test_overflow_becomes_meta(self):
        """Test that numbers beyond 32 bits fall back to meta."""
        version = parse("1.4294967296")
        assert version.values == ((1,),)
        assert version.meta == ("4294967296",)

    def test_very_long_number_is_meta(self):
        """Test that digit runs beyond int() conversion limits become meta."""
        version = parse("9" * 5000)
        assert version.values == ()
        assert version.meta == ("9" * 5000,)

    def test_many_leading_zeros(self):
        """Test that leading zeros do not count towards the size limit."""
        assert parse("0" * 5000 + "1").values == ((1,),)

    @pytest.mark.parametrize("token", ["+1", " 1", "١٢", "²"])
    def test_non_plain_digits_are_meta(self, token):
        """Test that signs, spaces and non-ASCII digits are not numbers."""
        assert parse(token).values == ()

    def test_unicode_text(self):
        """Test that non-ASCII text is kept as meta without errors."""
        version = parse("1.0-日本語")
        assert version.values == ((1, 0),)
        assert version.meta == ("日本語",)


class TestRanks:
    """Tests for the stability rank table."""

    def test_canonical_order(self):
        """Test dev < alpha < beta < rc < pre < stable."""
        order = ["dev", "alpha", "beta", "rc", "pre", "stable"]
        assert [stability_rank(s) for s in order] == [0, 1, 2, 3, 4, 5]

    def test_version_rank_property(self):
        """Test that Version.rank follows the table."""
        assert parse("1-rc").rank == STABILITY_RANK["rc"]

    def test_tables_are_read_only(self):
        """Test that the rank table cannot be modified."""
        with pytest.raises(TypeError):
            STABILITY_RANK["pre"] = 0  # type: ignore[index]


class TestIdempotence:
    """Tests for parse determinism."""

    @pytest.mark.parametrize(
        "raw", ["1.3_2023-07-21_0e150ed6c4", "1-prerelease", "", "x.y.z", "1.0-rc1"]
    )
    def test_parse_twice_equal(self, raw):
        """Test that parsing the same string twice gives equal results."""
        assert parse(raw) == parse(raw)

    def test_version_is_frozen(self):
        """Test that Version is immutable."""
        version = parse("1.0")
        with pytest.raises(AttributeError):
            version.stability = "dev"  # type: ignore[misc]
