"""Base rules: abstract classes implementing the Strategy Pattern.

Each rule is a standalone, independently testable unit.
New rules are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from recordrules.validators.models import RECORD_KEY, Violation, ViolationKind


class BaseRule(ABC):
    """Abstract base for all rules.

    Contract:
        - check() is deterministic: same input → same output
        - check() returns at most one Violation (None = no issue)
        - check() never mutates the value, record or context it is given
    """

    def __init__(self, code: Optional[str] = None, message: Optional[str] = None):
        self.code = code
        self.message = message

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for logging and default violation codes."""
        ...

    # ── Helper Methods ──

    def _violation(
        self,
        default_message: Optional[str] = None,
        kind: ViolationKind = ViolationKind.FIELD,
        **params: Any,
    ) -> Violation:
        """Convenience method to create a Violation, applying code/message overrides."""
        return Violation(
            code=self.code or self.name,
            message=self.message or default_message,
            kind=kind,
            params=params,
        )

    def _override(self, violation: Violation, kind: ViolationKind) -> Violation:
        """Apply this rule's configured code/message to a violation returned by a predicate."""
        return Violation(
            code=self.code or violation.code,
            message=self.message or violation.message,
            kind=kind,
            params=violation.params,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r})"


class FieldRule(BaseRule):
    """A check scoped to a single field value.

    Rules skip ``None`` (an unset optional field) unless ``checks_none`` is set.
    """

    checks_none = False

    @abstractmethod
    def check(self, value: Any) -> Optional[Violation]:
        """Check one field value.

        Args:
            value: The field's current value (never None unless checks_none)

        Returns:
            A Violation, or None if the value satisfies the rule
        """
        ...


class RecordRule(BaseRule):
    """A check scoped to the whole record, attributed to one field key.

    Args:
        field: Key the violation is filed under (default ``__all__``)
        code: Violation code override
        message: Violation message override
        skip_on_field_errors: Skip this rule when its dependencies already failed
        depends_on: Fields this rule reads; empty means every field
    """

    uses_context = False

    def __init__(
        self,
        field: str = RECORD_KEY,
        code: Optional[str] = None,
        message: Optional[str] = None,
        skip_on_field_errors: bool = True,
        depends_on: tuple[str, ...] = (),
    ):
        super().__init__(code=code, message=message)
        self.field = field
        self.skip_on_field_errors = skip_on_field_errors
        self.depends_on = tuple(depends_on)

    @abstractmethod
    def check(self, record: Any, context: Any = None) -> Optional[Violation]:
        """Check the whole record.

        Args:
            record: The record under validation
            context: Read-only external context (context-aware rules only)

        Returns:
            A Violation, or None if the record satisfies the rule
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field!r}, code={self.code!r})"
