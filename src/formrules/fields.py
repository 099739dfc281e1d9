"""Field definitions: a name plus an ordered chain of rule expressions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from formrules.errors import FieldDefinitionError


@dataclass(frozen=True, slots=True)
class Field:
    """One field to validate. Immutable for the duration of a pass.

    ``rules`` may be given as a single expression or a sequence; it is
    always stored as a tuple::

        Field.of("email", ["required", "email"])
        Field.of("nickname", "username")
    """

    name: str
    rules: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = f"Field name must be a non-empty string, got {self.name!r}"
            raise FieldDefinitionError(msg)
        object.__setattr__(self, "rules", _normalize_rules(self.name, self.rules))

    @classmethod
    def of(cls, name: str, rules: str | Sequence[str] = ()) -> Field:
        return cls(name, rules)  # type: ignore[arg-type]

    @classmethod
    def from_mapping(cls, definition: Mapping[str, object]) -> Field:
        """Build a field from ``{"name": ..., "rules": ...}``."""
        try:
            name = definition["name"]
            rules = definition["rules"]
        except KeyError as exc:
            msg = f"Field definition {dict(definition)!r} is missing {exc.args[0]!r}"
            raise FieldDefinitionError(msg) from None
        return cls(name, rules)  # type: ignore[arg-type]


def _normalize_rules(name: str, rules: object) -> tuple[str, ...]:
    if isinstance(rules, str):
        return (rules,)
    if not isinstance(rules, Iterable):
        msg = f"Rules for field {name!r} must be a string or a sequence of strings"
        raise FieldDefinitionError(msg)
    normalized = tuple(rules)
    for expression in normalized:
        if not isinstance(expression, str):
            msg = f"Rule expressions for field {name!r} must be strings, got {expression!r}"
            raise FieldDefinitionError(msg)
    return normalized


def normalize_fields(fields: Iterable[Field | Mapping[str, object]]) -> tuple[Field, ...]:
    """Accept ``Field`` objects or plain mappings, return ``Field`` objects."""
    normalized: list[Field] = []
    for field in fields:
        if isinstance(field, Field):
            normalized.append(field)
        elif isinstance(field, Mapping):
            normalized.append(Field.from_mapping(field))
        else:
            msg = f"Expected a Field or a mapping, got {type(field).__name__}"
            raise FieldDefinitionError(msg)
    return tuple(normalized)
