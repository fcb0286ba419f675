"""Tests for the built-in field rules."""

from __future__ import annotations

from decimal import Decimal

import pytest

from recordrules.validators import (
    Custom,
    Length,
    Nested,
    NotBlank,
    Range,
    Required,
    RuleTypeError,
    Violation,
)

# -- Length ------------------------------------------------------------------


def test_length_within_bounds_passes():
    assert Length(min=3, max=20).check("eko") is None
    assert Length(min=3, max=20).check("x" * 20) is None


def test_length_below_min_reports_bounds_and_count():
    violation = Length(min=3, max=20).check("ek")
    assert violation is not None
    assert violation.code == "length"
    assert violation.message == "length must be between 3 and 20"
    assert violation.params == {"min": 3, "max": 20, "count": 2, "value": "ek"}


def test_length_above_max_fails():
    assert Length(min=3, max=20).check("x" * 21) is not None


def test_length_counts_characters_not_bytes():
    # 5 characters, 10 bytes in UTF-8
    assert Length(max=5).check("ééééé") is None


def test_length_measures_before_trimming():
    assert Length(min=3, max=20).check("   ") is None


def test_length_only_min_or_max_messages():
    assert Length(min=1).check("").message == "length must be at least 1"
    assert Length(max=2).check("abc").message == "length must be at most 2"


def test_length_equal():
    assert Length(equal=4).check("abcd") is None
    violation = Length(equal=4).check("abc")
    assert violation.message == "length must be exactly 4"
    assert violation.params["equal"] == 4


def test_length_counts_collection_elements_without_echoing_them():
    violation = Length(min=1).check([])
    assert violation.params == {"min": 1, "count": 0}
    assert Length(min=1).check([object()]) is None


def test_length_code_and_message_overrides():
    violation = Length(min=3, max=20, code="username", message="too short").check("o")
    assert violation.code == "username"
    assert violation.message == "too short"


def test_length_rejects_unsized_values():
    with pytest.raises(RuleTypeError):
        Length(min=1).check(42)


def test_length_needs_a_bound():
    with pytest.raises(ValueError):
        Length()


# -- Range -------------------------------------------------------------------


@pytest.mark.parametrize("value", [12, 1000, 100_000_000, 12.0, Decimal("99.5")])
def test_range_inclusive_bounds_pass(value):
    assert Range(min=12, max=100_000_000).check(value) is None


@pytest.mark.parametrize("value", [11, -1000, 100_000_001])
def test_range_outside_bounds_fails(value):
    violation = Range(min=12, max=100_000_000).check(value)
    assert violation.code == "range"
    assert violation.params == {"min": 12, "max": 100_000_000, "value": value}


def test_range_single_sided():
    assert Range(min=0).check(-1).message == "value must be at least 0"
    assert Range(max=10).check(11).message == "value must be at most 10"


@pytest.mark.parametrize("value", ["12", True, None, [1]])
def test_range_rejects_non_numbers(value):
    with pytest.raises(RuleTypeError):
        Range(min=0).check(value)


# -- NotBlank / Required -----------------------------------------------------


@pytest.mark.parametrize("value", ["", " ", "        ", "\t\n"])
def test_not_blank_fails_on_whitespace(value):
    violation = NotBlank().check(value)
    assert violation.code == "not_blank"
    assert violation.message == "Value cannot be blank"


def test_not_blank_passes_text_with_surrounding_space():
    assert NotBlank().check("  a  ") is None


def test_not_blank_and_length_compose_independently():
    value = "   "
    assert Length(min=3, max=20).check(value) is None
    assert NotBlank().check(value) is not None


def test_required():
    assert Required().check(None).code == "required"
    assert Required().check("") is None
    assert Required.checks_none is True
    assert Length.checks_none is False


# -- Custom ------------------------------------------------------------------


def test_custom_none_and_true_pass():
    assert Custom(lambda v: None).check("x") is None
    assert Custom(lambda v: True).check("x") is None


def test_custom_false_uses_rule_code_and_function_name():
    def is_even(value):
        return value % 2 == 0

    violation = Custom(is_even).check(3)
    assert violation.code == "is_even"
    assert violation.message == "is_even failed"

    violation = Custom(is_even, code="odd", message="must be even").check(3)
    assert (violation.code, violation.message) == ("odd", "must be even")


def test_custom_violation_is_kept_unless_overridden():
    def shout(value):
        return Violation(code="quiet", message="needs capitals")

    assert Custom(shout).check("abc").code == "quiet"
    overridden = Custom(shout, message="SHOUT").check("abc")
    assert overridden.code == "quiet"
    assert overridden.message == "SHOUT"


def test_custom_bad_return_type_is_a_programmer_error():
    with pytest.raises(RuleTypeError):
        Custom(lambda v: "nope").check("x")


def test_custom_exceptions_propagate():
    def explode(value):
        raise ZeroDivisionError("boom")

    with pytest.raises(ZeroDivisionError):
        Custom(explode).check("x")


# -- Nested ------------------------------------------------------------------


def test_nested_never_reports_on_its_own():
    assert Nested().check(object()) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [([], True), ((1, 2), True), ("abc", False), ({"a": 1}, False), (object(), False)],
)
def test_nested_collection_detection(value, expected):
    assert Nested.is_collection(value) is expected
