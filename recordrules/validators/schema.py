"""Rule tables: the explicit, statically built mapping of field → ordered rules.

Tables are built once at import time and never modified afterwards:

    LOGIN_SCHEMA = RecordSchema(
        "LoginRequest",
        fields=[
            FieldSpec("username", [Length(min=3, max=20)]),
            FieldSpec("password", [Length(min=3, max=20)]),
        ],
    )
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from recordrules.validators.base import FieldRule, RecordRule


def read_field(record: Any, name: str) -> Any:
    """Read a field from a mapping (by key) or an object (by attribute).

    Missing fields read as None so that Required can report them.
    """
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


@dataclass(frozen=True)
class FieldSpec:
    """One field of a rule table.

    Args:
        name: Key the field's violations are filed under
        rules: Rules run in order against the field value
        accessor: Optional reader; defaults to attribute or key lookup by name
    """

    name: str
    rules: tuple[FieldRule, ...] = ()
    accessor: Optional[Callable[[Any], Any]] = None

    def __post_init__(self):
        object.__setattr__(self, "rules", tuple(self.rules))

    def read(self, record: Any) -> Any:
        if self.accessor is not None:
            return self.accessor(record)
        return read_field(record, self.name)


@dataclass(frozen=True)
class RecordSchema:
    """The full rule table of one record type: field rules, then record rules."""

    name: str
    fields: tuple[FieldSpec, ...] = ()
    rules: tuple[RecordRule, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "rules", tuple(self.rules))
        names = [spec.name for spec in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Schema '{self.name}' declares fields more than once: {', '.join(duplicates)}")

    @property
    def field_names(self) -> list[str]:
        return [spec.name for spec in self.fields]

    @property
    def uses_context(self) -> bool:
        """True if any record rule of this table reads the context."""
        return any(rule.uses_context for rule in self.rules)
