"""
Rule engine exception hierarchy.

Violations are data, not exceptions. Everything raised from here signals a
programmer error (bad rule table, missing context) except
``RecordValidationError``, which callers opt into through
``ValidationResult.raise_for_violations()``.

All exceptions inherit from ``RecordRulesError`` and provide ``to_dict()``
for logging and API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from recordrules.validators.models import ViolationSet


class RecordRulesError(Exception):
    """Base exception for all rule engine errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class SchemaNotFoundError(RecordRulesError):
    """
    No rule table is registered for the record's type.

    Suggests registered type names that look like the one asked for.
    """

    def __init__(self, record_type: str, registered: list[str]) -> None:
        self.record_type = record_type
        self.registered = registered
        self.suggestions = get_close_matches(record_type, registered, n=3, cutoff=0.6)

        message = f"No schema registered for '{record_type}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "SCHEMA_NOT_FOUND",
            "record_type": self.record_type,
            "suggestions": self.suggestions,
            "registered": sorted(self.registered),
        }


class MissingContextError(RecordRulesError):
    """A context-aware rule was evaluated by ``validate()`` instead of ``validate_with_context()``."""

    def __init__(self, record_type: str, rule: str) -> None:
        self.record_type = record_type
        self.rule = rule
        super().__init__(
            f"Rule '{rule}' on '{record_type}' needs a context; "
            f"use validate_with_context()"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MISSING_CONTEXT",
            "record_type": self.record_type,
            "rule": self.rule,
        }


class RuleTypeError(RecordRulesError, TypeError):
    """A rule was applied to a value it cannot check (e.g. a range on text)."""

    def __init__(self, rule: str, expected: str, value: Any) -> None:
        self.rule = rule
        self.expected = expected
        self.value_type = type(value).__name__
        super().__init__(f"Rule '{rule}' expects {expected}, got {self.value_type}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RULE_TYPE_ERROR",
            "rule": self.rule,
            "expected": self.expected,
            "value_type": self.value_type,
        }


class RecordValidationError(RecordRulesError):
    """A record failed validation. Carries the full violation mapping."""

    def __init__(self, record_type: str, violations: ViolationSet) -> None:
        self.record_type = record_type
        self.violations = violations
        fields = ", ".join(violations.fields())
        super().__init__(f"{record_type} failed validation on: {fields}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "record_type": self.record_type,
            "violations": self.violations.to_dict(),
        }
