"""
Tests for identifier sanitization.

These tests verify:
    - Type-name sanitization (collapse, leading strip, idempotence)
    - Member-name sanitization (collapse, digit prefix)
    - The asymmetry between the two rules
    - The suffix-increment rule
"""

import pytest
from enumgen.identifiers import (
    sanitize_type_name,
    sanitize_member_name,
    next_suffix_name,
    is_valid_identifier,
)


class TestSanitizeTypeName:
    """Test type-name sanitization."""

    def test_valid_name_unchanged(self):
        """Already-valid names should pass through."""
        assert sanitize_type_name("Colors") == "Colors"
        assert sanitize_type_name("Color_Set2") == "Color_Set2"

    def test_invalid_run_collapses_to_single_underscore(self):
        """A run of invalid characters becomes one underscore."""
        assert sanitize_type_name("My Big-Enum") == "My_Big_Enum"
        assert sanitize_type_name("A!@#B") == "A_B"

    def test_underscores_preserved(self):
        """Type names keep existing underscores."""
        assert sanitize_type_name("A__B") == "A__B"

    def test_leading_digits_and_underscores_stripped(self):
        """Leading digits and underscores are stripped repeatedly."""
        assert sanitize_type_name("2Colors!") == "Colors_"
        assert sanitize_type_name("_1_2_Name") == "Name"
        assert sanitize_type_name("  Name") == "Name"

    @pytest.mark.parametrize("text", ["123", "___", "!!!", "", "1 2 3"])
    def test_fully_invalid_input_gives_empty(self, text):
        """Input with no usable leading letter sanitizes to empty."""
        assert sanitize_type_name(text) == ""

    @pytest.mark.parametrize("text", [
        "2Colors!", "My Enum", "__x__", "a-b-c", "9lives", "Ünïcode", "", "x..y",
    ])
    def test_idempotent(self, text):
        """Applying the sanitizer twice equals applying it once."""
        once = sanitize_type_name(text)
        assert sanitize_type_name(once) == once


class TestSanitizeMemberName:
    """Test member-name sanitization."""

    def test_valid_name_unchanged(self):
        assert sanitize_member_name("Red") == "Red"
        assert sanitize_member_name("Red_1") == "Red_1"

    def test_invalid_trailing_character(self):
        """'Green!' becomes 'Green_'."""
        assert sanitize_member_name("Green!") == "Green_"

    def test_underscore_is_part_of_replaced_run(self):
        """Underscores next to invalid characters collapse with them."""
        assert sanitize_member_name("a_-_b") == "a_b"
        assert sanitize_member_name("a__b") == "a_b"

    def test_leading_digit_gets_underscore_prefix(self):
        """A leading digit is kept and prefixed with one underscore."""
        assert sanitize_member_name("1st") == "_1st"
        assert sanitize_member_name("50% Grey") == "_50_Grey"

    def test_leading_letters_never_stripped(self):
        assert sanitize_member_name("_Red") == "_Red"
        assert sanitize_member_name("!Red") == "_Red"

    def test_empty_stays_empty(self):
        assert sanitize_member_name("") == ""

    def test_differs_from_type_rule(self):
        """The two sanitizers intentionally disagree on underscores and digits."""
        assert sanitize_type_name("1__A") == "A"
        assert sanitize_member_name("1__A") == "_1_A"

    @pytest.mark.parametrize("text", ["Green!", "1st", "a__b", "Red_1", "!!", "x y z"])
    def test_idempotent(self, text):
        once = sanitize_member_name(text)
        assert sanitize_member_name(once) == once


class TestNextSuffixName:
    """Test the suffix-increment rule."""

    def test_appends_suffix_when_missing(self):
        assert next_suffix_name("Red") == "Red_1"

    def test_increments_existing_suffix(self):
        assert next_suffix_name("Red_1") == "Red_2"

    def test_increment_crosses_digit_boundary(self):
        assert next_suffix_name("Foo_9") == "Foo_10"
        assert next_suffix_name("Foo_99") == "Foo_100"

    def test_digits_without_underscore_are_not_a_suffix(self):
        """'Red1' has no '_<digits>' suffix, so '_1' is appended."""
        assert next_suffix_name("Red1") == "Red1_1"

    def test_only_last_suffix_changes(self):
        assert next_suffix_name("A_1_1") == "A_1_2"

    def test_leading_zeros_dropped_on_increment(self):
        assert next_suffix_name("Foo_007") == "Foo_8"


class TestIsValidIdentifier:

    def test_valid(self):
        assert is_valid_identifier("Red")
        assert is_valid_identifier("_1st")

    def test_invalid(self):
        assert not is_valid_identifier("")
        assert not is_valid_identifier("1st")
        assert not is_valid_identifier("Green!")
