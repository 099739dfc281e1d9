"""Validation result: immutable container for one pass's errors."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from formrules._internal.types import ValueLookup
from formrules.config import ValidatorConfig
from formrules.fields import Field
from formrules.form import FormValidator


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating values against field rules.

    The result is falsy when invalid, so you can write::

        result = validate(fields, form)
        if not result:
            return Template("form.html", form=form, errors=result.errors)

    ``errors`` maps field names to a single message each::

        {"email": "Please enter a valid email",
         "dni": "Please enter a valid DNI"}
    """

    errors: dict[str, str]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid, enabling the ``if not result:`` pattern."""
        return self.is_valid


def validate(
    fields: Iterable[Field | Mapping[str, object]],
    values: ValueLookup,
    config: ValidatorConfig | None = None,
) -> ValidationResult:
    """Run one validation pass and return its result.

    Args:
        fields: ``Field`` objects or ``{"name": ..., "rules": ...}``
            mappings, in the order errors should be reported.
        values: Any lookup of field names to string values: a plain
            ``dict`` or a parsed form mapping.
        config: Optional ``ValidatorConfig`` (locale, message overrides).

    Example::

        result = validate(
            [Field.of("age", ["required", "intnumber", "greater_than=17"])],
            {"age": "15"},
        )
        # result.errors == {"age": "This field must be greater than 17"}
    """
    validator = FormValidator(fields, values, config)
    validator.validate_form()
    return ValidationResult(errors=dict(validator.errors))
