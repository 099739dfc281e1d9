"""formrules: validate named values against ordered chains of named rules.

Each field carries a rule chain such as ``["required", "min_length=3"]``.
Rules run in order and stop at the first failure, so a field reports at
most one message. Fields without ``required`` are skipped when empty.

Basic usage::

    from formrules import FormValidator

    validator = FormValidator(
        [{"name": "username", "rules": ["required", "username", "max_length=20"]}],
        {"username": "ada_l"},
    )
    validator.validate_form()  # True
    validator.errors  # {}

Or in one call::

    from formrules import validate

    result = validate(fields, form)
    if not result:
        ...
"""

__version__ = "0.1.0"
__all__ = [
    "ENGLISH",
    "RULES",
    "SPANISH",
    "ArgKind",
    "ConfigurationError",
    "ErrorCollector",
    "Field",
    "FieldDefinitionError",
    "FormRulesError",
    "FormValidator",
    "MessageCatalog",
    "MissingValueError",
    "Rule",
    "RuleArgumentError",
    "RuleToken",
    "UnknownRuleError",
    "ValidationResult",
    "ValidatorConfig",
    "parse_rule",
    "validate",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ENGLISH": "formrules.messages",
    "SPANISH": "formrules.messages",
    "MessageCatalog": "formrules.messages",
    "RULES": "formrules.rules",
    "ArgKind": "formrules.rules",
    "Rule": "formrules.rules",
    "ConfigurationError": "formrules.errors",
    "FieldDefinitionError": "formrules.errors",
    "FormRulesError": "formrules.errors",
    "MissingValueError": "formrules.errors",
    "RuleArgumentError": "formrules.errors",
    "UnknownRuleError": "formrules.errors",
    "ErrorCollector": "formrules.collector",
    "Field": "formrules.fields",
    "FormValidator": "formrules.form",
    "RuleToken": "formrules.tokens",
    "parse_rule": "formrules.tokens",
    "ValidationResult": "formrules.result",
    "validate": "formrules.result",
    "ValidatorConfig": "formrules.config",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formrules`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
