"""Validator configuration.

ValidatorConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from formrules.messages import MessageCatalog, get_catalog


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(locale="es", blank_is_empty=True)
    """

    # Messages
    locale: str = "en"  # built-in catalog: "en" or "es"
    messages: Mapping[str, str] | None = None  # per-rule template overrides

    # Emptiness: treat whitespace-only input as empty (for required and the exemption)
    blank_is_empty: bool = False

    def __post_init__(self) -> None:
        # Fail at construction, not on the first failing field
        self.message_catalog()

    def message_catalog(self) -> MessageCatalog:
        """The effective catalog: the locale's messages plus overrides."""
        catalog = get_catalog(self.locale)
        if self.messages:
            catalog = catalog.with_overrides(self.messages)
        return catalog
