"""Per-field rule chain evaluation.

A field is evaluated in two steps. ``compile_field()`` parses and resolves
every rule expression up front, so an unknown rule or a bad argument is
reported even when an earlier rule would fail or the field is exempt.
``evaluate_field()`` then runs the chain against a value:

1. A field without ``required`` whose value is empty is valid; no other
   rule runs.
2. Otherwise rules run in declared order and evaluation stops at the
   first failure. That failure's message is the field's only error.
"""

import logging
from dataclasses import dataclass

from formrules._internal.types import ValueLookup
from formrules.errors import MissingValueError
from formrules.fields import Field
from formrules.messages import MessageCatalog
from formrules.rules import BoundRule, resolve
from formrules.tokens import parse_rule

logger = logging.getLogger("formrules.validation")


@dataclass(frozen=True, slots=True)
class CompiledField:
    """A field whose rule chain has been resolved against the catalog."""

    name: str
    chain: tuple[BoundRule, ...]

    @property
    def is_required(self) -> bool:
        return any(bound.name == "required" for bound in self.chain)


def compile_field(field: Field) -> CompiledField:
    """Resolve every rule of *field*, raising on unknown names or bad args."""
    chain = tuple(resolve(parse_rule(expr), field=field.name) for expr in field.rules)
    return CompiledField(field.name, chain)


def is_empty(value: str | None, *, blank_is_empty: bool = False) -> bool:
    """``None`` and ``""`` are empty. ``"0"`` is not."""
    if value is None or value == "":
        return True
    return blank_is_empty and not value.strip()


def lookup_value(values: ValueLookup, field_name: str) -> str | None:
    if field_name not in values:
        raise MissingValueError(field_name)
    return values[field_name]


def evaluate_field(
    field: CompiledField,
    values: ValueLookup,
    messages: MessageCatalog,
    *,
    blank_is_empty: bool = False,
) -> str | None:
    """Return the field's error message, or ``None`` if it is valid."""
    raw = lookup_value(values, field.name)
    empty = is_empty(raw, blank_is_empty=blank_is_empty)
    if empty and not field.is_required:
        return None

    value = "" if empty else raw
    for bound in field.chain:
        error = bound(field.name, value, messages)  # type: ignore[arg-type]
        if error is not None:
            logger.debug("field %r failed rule %r", field.name, bound.name)
            return error
    return None
