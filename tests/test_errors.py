"""Tests for formrules.errors: exception hierarchy and error messages."""

from formrules.errors import (
    ConfigurationError,
    FieldDefinitionError,
    FormRulesError,
    MissingValueError,
    RuleArgumentError,
    UnknownRuleError,
)


class TestHierarchy:
    def test_configuration_error_is_formrules_error(self) -> None:
        assert issubclass(ConfigurationError, FormRulesError)

    def test_setup_defects_are_configuration_errors(self) -> None:
        for exc_type in (FieldDefinitionError, UnknownRuleError, RuleArgumentError, MissingValueError):
            assert issubclass(exc_type, ConfigurationError)


class TestMessages:
    def test_unknown_rule(self) -> None:
        err = UnknownRuleError("bogus", "email")
        assert str(err) == "Unknown validation rule 'bogus' on field 'email'"

    def test_unknown_rule_without_field(self) -> None:
        assert str(UnknownRuleError("bogus")) == "Unknown validation rule 'bogus'"

    def test_rule_argument(self) -> None:
        err = RuleArgumentError("min_length", "argument must be an integer", field="x", arg="a")
        assert str(err) == "Rule 'min_length' on field 'x': argument must be an integer"
        assert err.arg == "a"

    def test_missing_value(self) -> None:
        err = MissingValueError("email")
        assert err.field == "email"
        assert "'email'" in str(err)
