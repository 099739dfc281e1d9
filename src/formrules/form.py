"""Form validation: every field, one pass, one verdict.

Usage::

    from formrules import FormValidator

    validator = FormValidator(
        [
            {"name": "email", "rules": ["required", "email"]},
            {"name": "dni", "rules": "spanish_dni"},
        ],
        {"email": "user@example.com", "dni": ""},
    )
    if not validator.validate_form():
        render(errors=validator.errors)
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from formrules._internal.types import ValueLookup
from formrules.collector import ErrorCollector
from formrules.config import ValidatorConfig
from formrules.evaluator import compile_field, evaluate_field
from formrules.fields import Field, normalize_fields

logger = logging.getLogger("formrules.validation")


class FormValidator:
    """Validates a fixed set of fields against a value lookup.

    The field definitions and the values are fixed at construction. Each
    call to ``validate_form()`` is an independent pass with its own error
    collector, so calling it again with unchanged inputs yields the same
    errors.
    """

    __slots__ = ("_collector", "_config", "_fields", "_values")

    def __init__(
        self,
        fields: Iterable[Field | Mapping[str, object]],
        values: ValueLookup,
        config: ValidatorConfig | None = None,
    ) -> None:
        self._fields = normalize_fields(fields)
        self._values = values
        self._config = config or ValidatorConfig()
        self._collector = ErrorCollector()

    @property
    def fields(self) -> tuple[Field, ...]:
        return self._fields

    @property
    def values(self) -> ValueLookup:
        """The caller's lookup, read-only where it is a plain mapping."""
        if isinstance(self._values, dict):
            return MappingProxyType(self._values)
        return self._values

    @property
    def errors(self) -> Mapping[str, str]:
        """Errors from the latest pass.

        Empty before the first pass and after a pass aborted by a
        configuration error.
        """
        return self._collector.errors

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    def add_error(self, field_name: str, message: str) -> None:
        self._collector.add_error(field_name, message)

    def validate_form(self) -> bool:
        """Evaluate every field; return True iff no field failed.

        Raises ``ConfigurationError`` subclasses for unknown rules, bad rule
        arguments, or values missing from the lookup. Field failures never
        stop the pass.
        """
        self._collector = ErrorCollector()
        compiled = [compile_field(field) for field in self._fields]
        messages = self._config.message_catalog()
        collector = ErrorCollector()

        for field in compiled:
            error = evaluate_field(
                field,
                self._values,
                messages,
                blank_is_empty=self._config.blank_is_empty,
            )
            if error is not None:
                collector.add_error(field.name, error)

        self._collector = collector
        logger.debug(
            "validated %d field(s), %d failed",
            len(compiled),
            len(collector),
        )
        return not collector
