"""Record rules: cross-field predicates and context-dependent predicates."""

from typing import Any, Callable, Optional

from recordrules.validators.base import RecordRule
from recordrules.validators.exceptions import RuleTypeError
from recordrules.validators.field_rules import PredicateResult
from recordrules.validators.models import RECORD_KEY, Violation, ViolationKind


class SchemaRule(RecordRule):
    """Externally supplied predicate on the whole record.

    The function receives the record and returns None or True on success,
    False for a violation using this rule's code and message, or a Violation.
    """

    def __init__(
        self,
        function: Callable[[Any], PredicateResult],
        field: str = RECORD_KEY,
        code: Optional[str] = None,
        message: Optional[str] = None,
        skip_on_field_errors: bool = True,
        depends_on: tuple[str, ...] = (),
    ):
        super().__init__(
            field=field,
            code=code,
            message=message,
            skip_on_field_errors=skip_on_field_errors,
            depends_on=depends_on,
        )
        self.function = function

    @property
    def name(self) -> str:
        return getattr(self.function, "__name__", "schema")

    def check(self, record: Any, context: Any = None) -> Optional[Violation]:
        return self._interpret(self._call(record, context))

    def _call(self, record: Any, context: Any) -> PredicateResult:
        return self.function(record)

    def _interpret(self, outcome: PredicateResult) -> Optional[Violation]:
        if outcome is None or outcome is True:
            return None
        if outcome is False:
            return self._violation(f"{self.name} failed", kind=ViolationKind.RECORD)
        if isinstance(outcome, Violation):
            return self._override(outcome, ViolationKind.RECORD)
        raise RuleTypeError(self.name, "a predicate returning None, bool or Violation", outcome)


class ContextRule(SchemaRule):
    """Record predicate that also reads the external context.

    The function receives ``(record, context)``. The engine only runs it from
    ``validate_with_context()``.
    """

    uses_context = True

    def __init__(
        self,
        function: Callable[[Any, Any], PredicateResult],
        field: str = RECORD_KEY,
        code: Optional[str] = None,
        message: Optional[str] = None,
        skip_on_field_errors: bool = True,
        depends_on: tuple[str, ...] = (),
    ):
        super().__init__(
            function,
            field=field,
            code=code,
            message=message,
            skip_on_field_errors=skip_on_field_errors,
            depends_on=depends_on,
        )

    def _call(self, record: Any, context: Any) -> PredicateResult:
        return self.function(record, context)
