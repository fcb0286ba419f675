"""Field rules: length bounds, numeric ranges, blank/required checks, custom predicates, nesting."""

from collections.abc import Mapping, Sequence, Sized
from decimal import Decimal
from typing import Any, Callable, Optional, Union

from recordrules.validators.base import FieldRule
from recordrules.validators.exceptions import RuleTypeError
from recordrules.validators.models import Violation, ViolationKind

Number = Union[int, float, Decimal]

# What a custom field predicate may return
PredicateResult = Union[None, bool, Violation]


class Length(FieldRule):
    """Character count of text, or element count of a collection, within bounds.

    Text is measured as given, before any trimming. Bounds are inclusive.
    """

    def __init__(
        self,
        min: Optional[int] = None,
        max: Optional[int] = None,
        equal: Optional[int] = None,
        code: Optional[str] = None,
        message: Optional[str] = None,
    ):
        super().__init__(code=code, message=message)
        if min is None and max is None and equal is None:
            raise ValueError("Length needs at least one of min, max or equal")
        self.min = min
        self.max = max
        self.equal = equal

    @property
    def name(self) -> str:
        return "length"

    def check(self, value: Any) -> Optional[Violation]:
        if not isinstance(value, Sized):
            raise RuleTypeError(self.name, "text or a collection", value)
        count = len(value)
        shown = {"value": value} if isinstance(value, str) else {}

        if self.equal is not None:
            if count != self.equal:
                return self._violation(
                    f"length must be exactly {self.equal}",
                    equal=self.equal, count=count, **shown,
                )
            return None

        if (self.min is not None and count < self.min) or (self.max is not None and count > self.max):
            return self._violation(self._bounds_message(), **self._bounds(), count=count, **shown)
        return None

    def _bounds(self) -> dict[str, int]:
        return {k: v for k, v in (("min", self.min), ("max", self.max)) if v is not None}

    def _bounds_message(self) -> str:
        if self.min is not None and self.max is not None:
            return f"length must be between {self.min} and {self.max}"
        if self.min is not None:
            return f"length must be at least {self.min}"
        return f"length must be at most {self.max}"


class Range(FieldRule):
    """Numeric value within inclusive bounds."""

    def __init__(
        self,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
        code: Optional[str] = None,
        message: Optional[str] = None,
    ):
        super().__init__(code=code, message=message)
        if min is None and max is None:
            raise ValueError("Range needs at least one of min or max")
        self.min = min
        self.max = max

    @property
    def name(self) -> str:
        return "range"

    def check(self, value: Any) -> Optional[Violation]:
        # bool is an int subclass but never a meaningful quantity here
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise RuleTypeError(self.name, "a number", value)

        if (self.min is not None and value < self.min) or (self.max is not None and value > self.max):
            bounds = {k: v for k, v in (("min", self.min), ("max", self.max)) if v is not None}
            if self.min is not None and self.max is not None:
                text = f"value must be between {self.min} and {self.max}"
            elif self.min is not None:
                text = f"value must be at least {self.min}"
            else:
                text = f"value must be at most {self.max}"
            return self._violation(text, **bounds, value=value)
        return None


class NotBlank(FieldRule):
    """Text that is not empty once surrounding whitespace is trimmed."""

    @property
    def name(self) -> str:
        return "not_blank"

    def check(self, value: Any) -> Optional[Violation]:
        if not isinstance(value, str):
            raise RuleTypeError(self.name, "text", value)
        if not value.strip():
            return self._violation("Value cannot be blank", value=value)
        return None


class Required(FieldRule):
    """Value is present (not None)."""

    checks_none = True

    @property
    def name(self) -> str:
        return "required"

    def check(self, value: Any) -> Optional[Violation]:
        if value is None:
            return self._violation("Value is required")
        return None


class Custom(FieldRule):
    """Externally supplied predicate on a field value.

    The function receives the value and returns None or True on success,
    False for a violation using this rule's code and message, or a Violation
    describing the breach itself.
    """

    def __init__(
        self,
        function: Callable[[Any], PredicateResult],
        code: Optional[str] = None,
        message: Optional[str] = None,
    ):
        super().__init__(code=code, message=message)
        self.function = function

    @property
    def name(self) -> str:
        return getattr(self.function, "__name__", "custom")

    def check(self, value: Any) -> Optional[Violation]:
        outcome = self.function(value)
        if outcome is None or outcome is True:
            return None
        if outcome is False:
            return self._violation(f"{self.name} failed", value=value)
        if isinstance(outcome, Violation):
            return self._override(outcome, ViolationKind.FIELD)
        raise RuleTypeError(self.name, "a predicate returning None, bool or Violation", outcome)


class Nested(FieldRule):
    """Validate an embedded record, or every record of a collection, with its own rules.

    The engine performs the recursion; child violations are filed under the
    parent field (per element index for collections). An empty collection
    passes; pair with Length(min=1) to require elements.

    Args:
        schema: Child RecordSchema. If None, resolved from the child's type.
    """

    def __init__(self, schema=None):
        super().__init__()
        self.schema = schema

    @property
    def name(self) -> str:
        return "nested"

    def check(self, value: Any) -> Optional[Violation]:
        return None

    @staticmethod
    def is_collection(value: Any) -> bool:
        return isinstance(value, Sequence) and not isinstance(value, (str, bytes, Mapping))
