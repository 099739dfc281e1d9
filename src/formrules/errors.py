"""formrules exception hierarchy.

Validation failures are data (messages in the error map), never exceptions.
Everything raised here is a defect in the caller's setup and aborts the
validation pass.
"""


class FormRulesError(Exception):
    """Base for all formrules-specific errors."""


class ConfigurationError(FormRulesError):
    """Raised when field definitions, values, or config are inconsistent."""


class FieldDefinitionError(ConfigurationError):
    """A field definition is malformed (missing name/rules, non-string rule)."""


class UnknownRuleError(ConfigurationError):
    """A rule name is not part of the built-in catalog.

    Skipping an unknown rule would produce a false "valid" verdict, so
    dispatch refuses it outright.
    """

    def __init__(self, rule: str, field: str | None = None) -> None:
        self.rule = rule
        self.field = field
        where = f" on field {field!r}" if field is not None else ""
        super().__init__(f"Unknown validation rule {rule!r}{where}")


class RuleArgumentError(ConfigurationError):
    """A rule got an argument it cannot use, or lacks one it needs."""

    def __init__(
        self,
        rule: str,
        detail: str,
        *,
        field: str | None = None,
        arg: str | None = None,
    ) -> None:
        self.rule = rule
        self.field = field
        self.arg = arg
        where = f" on field {field!r}" if field is not None else ""
        super().__init__(f"Rule {rule!r}{where}: {detail}")


class MissingValueError(ConfigurationError):
    """The value lookup has no entry for a declared field.

    Not treated as empty: that would trigger the optional-field exemption
    and hide the caller's bug.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"No value supplied for declared field {field!r}")
