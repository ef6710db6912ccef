"""Tests for validation rules."""

import pytest

from patchable.update import (
    NULL_NOT_PERMITTED_MESSAGE,
    AllowedValues,
    MaxLength,
    MinLength,
    Pattern,
    Predicate,
    Range,
    Required,
)


class TestRequired:
    """Tests for the Required rule."""

    def test_rejects_null(self) -> None:
        assert Required().is_valid(None) is False

    @pytest.mark.parametrize("value", ["", "   "])
    def test_rejects_blank_strings(self, value: str) -> None:
        assert Required().is_valid(value) is False

    def test_allow_empty_strings(self) -> None:
        assert Required(allow_empty_strings=True).is_valid("") is True

    def test_accepts_values(self) -> None:
        assert Required().is_valid("x") is True
        assert Required().is_valid(0) is True
        assert Required().is_valid([]) is True

    def test_null_message_defaults(self) -> None:
        assert Required().null_message() == NULL_NOT_PERMITTED_MESSAGE

    def test_custom_message_used_everywhere(self) -> None:
        rule = Required(message="This is required")
        assert rule.null_message() == "This is required"
        assert rule.error_message() == "This is required"


class TestLengthRules:
    """Tests for MinLength and MaxLength."""

    def test_min_length(self) -> None:
        rule = MinLength(2)
        assert rule.is_valid("ab") is True
        assert rule.is_valid("a") is False
        assert rule.is_valid(["a", "b", "c"]) is True
        assert rule.error_message() == "length must be at least 2"

    def test_max_length(self) -> None:
        rule = MaxLength(2)
        assert rule.is_valid("ab") is True
        assert rule.is_valid("abc") is False
        assert rule.error_message() == "length must be at most 2"

    def test_value_without_length_fails(self) -> None:
        assert MinLength(1).is_valid(5) is False
        assert MaxLength(1).is_valid(5) is False

    def test_null_passes(self) -> None:
        assert MinLength(1).is_valid(None) is True


class TestRange:
    """Tests for Range."""

    def test_bounds_inclusive(self) -> None:
        rule = Range(minimum=0, maximum=10)
        assert rule.is_valid(0) is True
        assert rule.is_valid(10) is True
        assert rule.is_valid(-1) is False
        assert rule.is_valid(11) is False

    def test_open_bounds(self) -> None:
        assert Range(minimum=0).is_valid(10**9) is True
        assert Range(maximum=0).is_valid(-(10**9)) is True

    def test_incomparable_value_fails(self) -> None:
        assert Range(minimum=0).is_valid("a") is False

    def test_messages(self) -> None:
        assert Range(minimum=1, maximum=2).error_message() == "value must be between 1 and 2"
        assert Range(minimum=1).error_message() == "value must be at least 1"
        assert Range(maximum=2).error_message() == "value must be at most 2"


class TestPattern:
    """Tests for Pattern."""

    def test_full_match_required(self) -> None:
        rule = Pattern(r"[A-Z]+")
        assert rule.is_valid("ABC") is True
        assert rule.is_valid("ABc") is False

    def test_custom_message(self) -> None:
        assert Pattern(r"\d+", message="digits only").error_message() == "digits only"


class TestAllowedValuesAndPredicate:
    """Tests for AllowedValues and Predicate."""

    def test_allowed_values(self) -> None:
        rule = AllowedValues(("red", "green"))
        assert rule.is_valid("red") is True
        assert rule.is_valid("blue") is False
        assert rule.error_message() == "value must be one of: 'red', 'green'"

    def test_predicate(self) -> None:
        def is_even(value: int) -> bool:
            return value % 2 == 0

        rule = Predicate(is_even)
        assert rule.is_valid(2) is True
        assert rule.is_valid(3) is False
        assert rule.error_message() == "value failed check is_even"
