"""Tests for exceptions module."""

from __future__ import annotations

from recordrules.validators.exceptions import (
    MissingContextError,
    RecordRulesError,
    RecordValidationError,
    RuleTypeError,
    SchemaNotFoundError,
)
from recordrules.validators.models import Violation, ViolationSet

# -- SchemaNotFoundError -----------------------------------------------------


def test_schema_not_found_fuzzy_suggestion():
    err = SchemaNotFoundError("LoginRequst", ["LoginRequest", "Product"])
    assert "LoginRequst" in str(err)
    assert err.suggestions == ["LoginRequest"]
    assert "Did you mean: LoginRequest?" in str(err)


def test_schema_not_found_to_dict():
    err = SchemaNotFoundError("Zzz", ["Product", "LoginRequest"])
    d = err.to_dict()
    assert d["error"] == "SCHEMA_NOT_FOUND"
    assert d["suggestions"] == []
    assert d["registered"] == ["LoginRequest", "Product"]


# -- MissingContextError / RuleTypeError -------------------------------------


def test_missing_context_message():
    err = MissingContextError("RegisterUserRequest", "can_register")
    assert "validate_with_context()" in str(err)
    assert err.to_dict() == {
        "error": "MISSING_CONTEXT",
        "record_type": "RegisterUserRequest",
        "rule": "can_register",
    }


def test_rule_type_error_is_a_type_error():
    err = RuleTypeError("range", "a number", "12")
    assert isinstance(err, TypeError)
    assert isinstance(err, RecordRulesError)
    assert err.to_dict()["value_type"] == "str"


# -- RecordValidationError ---------------------------------------------------


def test_record_validation_error_lists_fields():
    violations = ViolationSet()
    violations.add("username", Violation(code="length", message="too short"))
    err = RecordValidationError("LoginRequest", violations)

    assert str(err) == "LoginRequest failed validation on: username"
    d = err.to_dict()
    assert d["error"] == "VALIDATION_FAILED"
    assert d["violations"]["username"]["violations"][0]["code"] == "length"


def test_base_to_dict():
    err = RecordRulesError("bad table")
    assert err.to_dict() == {"error": "RecordRulesError", "message": "bad table"}
