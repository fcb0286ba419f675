"""Violation models: violation kinds, the per-field violation mapping, and the result.

All validation is deterministic: same record and context → same violations.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from recordrules.validators.exceptions import RecordValidationError

# Key used for record rules that are not attributed to a specific field
RECORD_KEY = "__all__"


class ViolationKind(str, Enum):
    """Where a violation was produced."""

    FIELD = "field"    # Single-field constraint breach
    NESTED = "nested"  # Breach inside an embedded record or collection element
    RECORD = "record"  # Cross-field or context-dependent breach


class Violation(BaseModel):
    """A single recorded constraint breach."""

    code: str
    message: Optional[str] = None
    kind: ViolationKind = ViolationKind.FIELD
    params: dict[str, Any] = Field(default_factory=dict)  # Rule bounds and offending value

    model_config = {"use_enum_values": True, "validate_default": True, "frozen": True}


class FieldErrors(BaseModel):
    """Everything that went wrong with one field."""

    violations: list[Violation] = Field(default_factory=list)
    nested: Optional["ViolationSet"] = None
    items: dict[int, "ViolationSet"] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.violations and self.nested is None and not self.items

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.violations:
            data["violations"] = [v.model_dump(exclude={"kind"}) for v in self.violations]
        if self.nested is not None:
            data["nested"] = self.nested.to_dict()
        if self.items:
            data["items"] = {index: child.to_dict() for index, child in self.items.items()}
        return data


class ViolationSet(BaseModel):
    """Field-keyed, insertion-ordered collection of all violations from one call.

    Keys follow declaration order: field rules first, then record rules in the
    order they were declared. Nested records and collection elements keep their
    own ViolationSet under the parent field.
    """

    errors: dict[str, FieldErrors] = Field(default_factory=dict)

    # ── Building ──

    def add(self, field: str, violation: Violation) -> None:
        self._entry(field).violations.append(violation)

    def add_nested(self, field: str, child: "ViolationSet") -> None:
        if child.is_empty():
            return
        self._entry(field).nested = child

    def add_item(self, field: str, index: int, child: "ViolationSet") -> None:
        if child.is_empty():
            return
        self._entry(field).items[index] = child

    def _entry(self, field: str) -> FieldErrors:
        if field not in self.errors:
            self.errors[field] = FieldErrors()
        return self.errors[field]

    # ── Reading ──

    def is_empty(self) -> bool:
        return all(entry.is_empty() for entry in self.errors.values())

    def field_violations(self, field: str) -> list[Violation]:
        """Direct violations of a field (not those of its nested children)."""
        entry = self.errors.get(field)
        return list(entry.violations) if entry else []

    def codes(self, field: str) -> list[str]:
        return [v.code for v in self.field_violations(field)]

    def count(self) -> int:
        """Total number of violations, nested ones included."""
        return sum(len(found) for found in self.flatten().values())

    def summary(self) -> dict[str, int]:
        """Count of violations by kind."""
        counts = {kind.value: 0 for kind in ViolationKind}
        for found in self.flatten().values():
            for violation in found:
                counts[ViolationKind(violation.kind).value] += 1
        return counts

    def flatten(self, prefix: str = "") -> dict[str, list[Violation]]:
        """Dotted-path view: ``address.street``, ``variants[0].price``."""
        flat: dict[str, list[Violation]] = {}
        for field, entry in self.errors.items():
            path = f"{prefix}.{field}" if prefix else field
            if entry.violations:
                flat[path] = list(entry.violations)
            if entry.nested is not None:
                flat.update(entry.nested.flatten(path))
            for index, child in entry.items.items():
                flat.update(child.flatten(f"{path}[{index}]"))
        return flat

    def as_nested(self) -> "ViolationSet":
        """Copy with every violation re-tagged as a nested breach."""
        retagged = ViolationSet()
        for field, entry in self.errors.items():
            retagged.errors[field] = FieldErrors(
                violations=[v.model_copy(update={"kind": ViolationKind.NESTED.value}) for v in entry.violations],
                nested=entry.nested.as_nested() if entry.nested is not None else None,
                items={index: child.as_nested() for index, child in entry.items.items()},
            )
        return retagged

    def to_dict(self) -> dict[str, Any]:
        return {field: entry.to_dict() for field, entry in self.errors.items() if not entry.is_empty()}

    def fields(self) -> list[str]:
        return [field for field, entry in self.errors.items() if not entry.is_empty()]

    def __contains__(self, field: object) -> bool:
        return field in self.errors and not self.errors[field].is_empty()

    def __getitem__(self, field: str) -> FieldErrors:
        return self.errors[field]


FieldErrors.model_rebuild()


class ValidationResult(BaseModel):
    """Outcome of one validation call, as returned by the validation engine."""

    passed: bool = Field(description="True if no rule produced a violation")
    record_type: str = ""
    violations: ViolationSet = Field(default_factory=ViolationSet)
    summary: dict[str, int] = Field(
        description="Count of violations by kind",
        default_factory=lambda: {"field": 0, "nested": 0, "record": 0},
    )

    @classmethod
    def build(cls, record_type: str, violations: ViolationSet) -> "ValidationResult":
        """Build a result from a collected violation mapping."""
        return cls(
            passed=violations.is_empty(),
            record_type=record_type,
            violations=violations,
            summary=violations.summary(),
        )

    def raise_for_violations(self) -> None:
        """Raise RecordValidationError if the record failed."""
        if not self.passed:
            raise RecordValidationError(self.record_type, self.violations)
