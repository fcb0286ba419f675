"""Record validator: rule tables, the validation engine, and its violation model.

Usage:
    from recordrules.validators import validation_engine

    result = validation_engine.validate(login_request)
    if not result.passed:
        # Report result.violations.to_dict()
"""

from recordrules.validators.engine import ValidationEngine, validation_engine
from recordrules.validators.exceptions import (
    MissingContextError,
    RecordRulesError,
    RecordValidationError,
    RuleTypeError,
    SchemaNotFoundError,
)
from recordrules.validators.field_rules import Custom, Length, Nested, NotBlank, Range, Required
from recordrules.validators.models import (
    RECORD_KEY,
    FieldErrors,
    ValidationResult,
    Violation,
    ViolationKind,
    ViolationSet,
)
from recordrules.validators.record_rules import ContextRule, SchemaRule
from recordrules.validators.schema import FieldSpec, RecordSchema

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "RecordSchema",
    "FieldSpec",
    "Length",
    "Range",
    "NotBlank",
    "Required",
    "Custom",
    "Nested",
    "SchemaRule",
    "ContextRule",
    "ValidationResult",
    "ViolationSet",
    "FieldErrors",
    "Violation",
    "ViolationKind",
    "RECORD_KEY",
    "RecordRulesError",
    "RecordValidationError",
    "SchemaNotFoundError",
    "MissingContextError",
    "RuleTypeError",
]
