"""Validation Engine: runs a record's rule table and collects every violation.

This is the main entry point for record validation. It resolves the rule
table for the record, runs field rules then record rules, and returns a
ValidationResult holding the full violation mapping.

Usage:
    engine = ValidationEngine()
    result = engine.validate(login_request)
    result = engine.validate_with_context(register_request, database_context)
    if not result.passed:
        # Show result.violations.to_dict() to the caller
"""

import time
from typing import Any, Optional

import structlog

from recordrules.config import get_settings
from recordrules.validators.base import FieldRule, RecordRule
from recordrules.validators.catalog import DEFAULT_SCHEMAS
from recordrules.validators.exceptions import MissingContextError, SchemaNotFoundError
from recordrules.validators.field_rules import Nested
from recordrules.validators.models import ValidationResult, Violation, ViolationSet
from recordrules.validators.schema import RecordSchema

logger = structlog.get_logger()


class ValidationEngine:
    """Resolves rule tables by record type and evaluates them.

    Design principles:
        - Deterministic: same record and context → same violations
        - Exhaustive: never stops at the first violation
        - Stateless per call: the registry is only written during setup
        - Observable: logs every validation run with timing
    """

    def __init__(self, schemas: Optional[dict[type, RecordSchema]] = None):
        """Initialize with the catalog schemas or a custom registry.

        Args:
            schemas: Optional mapping of record type → rule table. If None, uses the catalog.
        """
        self.schemas = dict(schemas) if schemas is not None else dict(DEFAULT_SCHEMAS)

    def validate(self, record: Any, schema: Optional[RecordSchema] = None) -> ValidationResult:
        """Run every rule against the record.

        Args:
            record: The record instance (object or mapping)
            schema: Rule table to use; resolved from the record type if None

        Returns:
            ValidationResult with pass/fail and all violations

        Raises:
            MissingContextError: If the rule table holds context-aware rules
            SchemaNotFoundError: If no rule table is registered for the record type
        """
        return self._run(record, schema, context=None, has_context=False)

    def validate_with_context(
        self,
        record: Any,
        context: Any,
        schema: Optional[RecordSchema] = None,
    ) -> ValidationResult:
        """Run every rule, giving context-aware rules read-only access to ``context``.

        The context is passed down to nested records as well.
        """
        return self._run(record, schema, context=context, has_context=True)

    def register(self, record_type: type, schema: RecordSchema) -> None:
        """Register (or replace) the rule table for a record type."""
        self.schemas[record_type] = schema
        logger.debug("schema_registered", record_type=record_type.__name__, schema=schema.name)

    def unregister(self, record_type: type) -> None:
        """Remove a record type's rule table."""
        if self.schemas.pop(record_type, None) is not None:
            logger.debug("schema_unregistered", record_type=record_type.__name__)

    def schema_for(self, record: Any) -> RecordSchema:
        """Find the rule table for a record by its type, then its base classes."""
        for klass in type(record).__mro__:
            if klass in self.schemas:
                return self.schemas[klass]
        raise SchemaNotFoundError(
            type(record).__name__,
            [record_type.__name__ for record_type in self.schemas],
        )

    # ── Evaluation ──

    def _run(
        self,
        record: Any,
        schema: Optional[RecordSchema],
        context: Any,
        has_context: bool,
    ) -> ValidationResult:
        start_time = time.perf_counter()

        schema = schema or self.schema_for(record)
        violations = self._collect(record, schema, context, has_context)
        result = ValidationResult.build(schema.name, violations)

        duration_ms = round((time.perf_counter() - start_time) * 1000, 3)

        logger.info(
            "validation_complete",
            record_type=schema.name,
            passed=result.passed,
            total_violations=violations.count(),
            summary=result.summary,
            with_context=has_context,
            duration_ms=duration_ms,
        )

        if duration_ms > get_settings().SLOW_VALIDATION_MS:
            logger.warning(
                "validation_slow",
                record_type=schema.name,
                duration_ms=duration_ms,
                threshold_ms=get_settings().SLOW_VALIDATION_MS,
            )

        return result

    def _collect(
        self,
        record: Any,
        schema: RecordSchema,
        context: Any,
        has_context: bool,
    ) -> ViolationSet:
        """Evaluate one rule table against one record (recursing into nested fields)."""
        if schema.uses_context and not has_context:
            rule = next(r for r in schema.rules if r.uses_context)
            raise MissingContextError(schema.name, rule.name)

        violations = ViolationSet()

        # 1. Field rules, in declaration order
        for spec in schema.fields:
            value = spec.read(record)
            for rule in spec.rules:
                if value is None and not rule.checks_none:
                    continue
                if isinstance(rule, Nested):
                    self._collect_nested(violations, spec.name, value, rule, context, has_context)
                    continue
                found = self._check_field(rule, value, schema, spec.name)
                if found is not None:
                    violations.add(spec.name, found)

        # 2. Record rules see the field errors as they stood after step 1
        failed_fields = set(violations.fields())

        for rule in schema.rules:
            if rule.skip_on_field_errors:
                dependencies = set(rule.depends_on or schema.field_names)
                if failed_fields & dependencies:
                    logger.debug(
                        "record_rule_skipped",
                        record_type=schema.name,
                        rule=rule.name,
                        failed_fields=sorted(failed_fields & dependencies),
                    )
                    continue
            found = self._check_record(rule, record, context, schema)
            if found is not None:
                violations.add(rule.field, found)

        return violations

    def _collect_nested(
        self,
        violations: ViolationSet,
        field: str,
        value: Any,
        rule: Nested,
        context: Any,
        has_context: bool,
    ) -> None:
        if Nested.is_collection(value):
            for index, item in enumerate(value):
                if item is None:
                    continue
                child = self._collect(item, rule.schema or self.schema_for(item), context, has_context)
                violations.add_item(field, index, child.as_nested())
        else:
            child = self._collect(value, rule.schema or self.schema_for(value), context, has_context)
            violations.add_nested(field, child.as_nested())

    def _check_field(self, rule: FieldRule, value: Any, schema: RecordSchema, field: str) -> Optional[Violation]:
        try:
            return rule.check(value)
        except Exception as e:
            logger.error(
                "rule_failed",
                record_type=schema.name,
                field=field,
                rule=rule.name,
                error=str(e),
            )
            raise

    def _check_record(self, rule: RecordRule, record: Any, context: Any, schema: RecordSchema) -> Optional[Violation]:
        try:
            return rule.check(record, context)
        except Exception as e:
            logger.error(
                "rule_failed",
                record_type=schema.name,
                field=rule.field,
                rule=rule.name,
                error=str(e),
            )
            raise


# Module-level singleton
validation_engine = ValidationEngine()
