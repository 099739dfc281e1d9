"""Failure message catalogs.

Messages live here rather than in the rules so one locale is used
consistently and callers can swap or override wording without touching
rule logic. Templates are ``str.format`` strings with two placeholders:
``{field}`` (the field name) and ``{arg}`` (the rule argument as written).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from formrules.errors import ConfigurationError

_ENGLISH = {
    "required": "This field is required",
    "alphabetic": "This field only allows letters and spaces",
    "alphanumeric": "This field only allows alphanumeric characters",
    "email": "Please enter a valid email",
    "intnumber": "This field only allows integers",
    "equal_to": "This field must be equal to {arg}",
    "exact_length": "This field must be exactly {arg} characters in length",
    "greater_than": "This field must be greater than {arg}",
    "less_than": "This field must be less than {arg}",
    "min_length": "This field must be at least {arg} characters in length",
    "max_length": "This field must be at most {arg} characters in length",
    "name": "Please enter a valid name",
    "spanish_dni": "Please enter a valid DNI",
    "username": "Usernames may only contain letters, digits, underscores or hyphens",
}

_SPANISH = {
    "required": "Este campo es obligatorio",
    "alphabetic": "Este campo solo admite letras y espacios",
    "alphanumeric": "Este campo solo admite caracteres alfanuméricos",
    "email": "Introduce un email válido",
    "intnumber": "Este campo solo admite números enteros",
    "equal_to": "Este campo debe ser igual a {arg}",
    "exact_length": "Este campo debe tener exactamente {arg} caracteres",
    "greater_than": "Este campo debe ser mayor que {arg}",
    "less_than": "Este campo debe ser menor que {arg}",
    "min_length": "Este campo debe tener al menos {arg} caracteres",
    "max_length": "Este campo debe tener como máximo {arg} caracteres",
    "name": "Introduce un nombre válido",
    "spanish_dni": "Introduce un DNI válido",
    "username": "El nombre de usuario solo puede contener letras, números, guiones o guiones bajos",
}


def _check_template(rule: str, template: str) -> None:
    try:
        template.format(field="", arg="")
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
        msg = f"Invalid message template for rule {rule!r}: {template!r} ({exc})"
        raise ConfigurationError(msg) from exc


@dataclass(frozen=True, slots=True)
class MessageCatalog:
    """An immutable rule-name → message-template table for one locale."""

    locale: str
    templates: Mapping[str, str]

    def __post_init__(self) -> None:
        for rule, template in self.templates.items():
            _check_template(rule, template)
        object.__setattr__(self, "templates", MappingProxyType(dict(self.templates)))

    def format(self, rule: str, *, field: str, arg: str | None = None) -> str:
        """Render the failure message for *rule* on *field*."""
        try:
            template = self.templates[rule]
        except KeyError:
            msg = f"Message catalog {self.locale!r} has no message for rule {rule!r}"
            raise ConfigurationError(msg) from None
        return template.format(field=field, arg="" if arg is None else arg)

    def with_overrides(self, overrides: Mapping[str, str]) -> MessageCatalog:
        """Return a new catalog with some templates replaced.

        Overriding a rule the catalog does not know is almost always a
        typo, so it is rejected.
        """
        unknown = sorted(set(overrides) - set(self.templates))
        if unknown:
            msg = f"Message overrides for unknown rules: {', '.join(unknown)}"
            raise ConfigurationError(msg)
        return MessageCatalog(self.locale, {**self.templates, **overrides})


ENGLISH = MessageCatalog("en", _ENGLISH)
SPANISH = MessageCatalog("es", _SPANISH)

CATALOGS: Mapping[str, MessageCatalog] = MappingProxyType({"en": ENGLISH, "es": SPANISH})


def get_catalog(locale: str) -> MessageCatalog:
    """Look up a built-in catalog by locale code."""
    try:
        return CATALOGS[locale]
    except KeyError:
        available = ", ".join(sorted(CATALOGS))
        msg = f"Unknown locale {locale!r}. Available: {available}"
        raise ConfigurationError(msg) from None
