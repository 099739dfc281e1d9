"""Tests for formrules.evaluator: exemption, short-circuit, compilation."""

import logging

import pytest

from formrules.errors import MissingValueError, RuleArgumentError, UnknownRuleError
from formrules.evaluator import compile_field, evaluate_field, is_empty
from formrules.fields import Field
from formrules.messages import ENGLISH


def evaluate(rules: str | list[str], value: str | None, **kwargs: bool) -> str | None:
    compiled = compile_field(Field.of("f", rules))
    return evaluate_field(compiled, {"f": value}, ENGLISH, **kwargs)


class TestIsEmpty:
    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value: str | None) -> None:
        assert is_empty(value)

    def test_zero_is_not_empty(self) -> None:
        assert not is_empty("0")

    def test_whitespace_not_empty_by_default(self) -> None:
        assert not is_empty("   ")

    def test_whitespace_empty_when_blank_is_empty(self) -> None:
        assert is_empty(" \t", blank_is_empty=True)


class TestCompileField:
    def test_chain_in_order(self) -> None:
        compiled = compile_field(Field.of("f", ["required", "min_length=3"]))
        assert [b.name for b in compiled.chain] == ["required", "min_length"]
        assert compiled.chain[1].arg == 3

    def test_is_required(self) -> None:
        assert compile_field(Field.of("f", ["email", "required"])).is_required
        assert not compile_field(Field.of("f", ["email"])).is_required

    def test_required_rejects_argument(self) -> None:
        with pytest.raises(RuleArgumentError):
            compile_field(Field.of("f", ["required=1"]))

    def test_unknown_rule_reports_field(self) -> None:
        with pytest.raises(UnknownRuleError, match="on field 'f'"):
            compile_field(Field.of("f", ["required", "bogus"]))


class TestExemption:
    @pytest.mark.parametrize(
        "rules",
        [["email"], ["min_length=3", "intnumber"], ["spanish_dni"], ["equal_to=x"]],
    )
    def test_empty_optional_field_skips_every_rule(self, rules: list[str]) -> None:
        assert evaluate(rules, "") is None

    def test_none_is_empty(self) -> None:
        assert evaluate(["email"], None) is None

    def test_required_disables_exemption(self) -> None:
        assert evaluate(["required", "min_length=3"], "") == "This field is required"

    def test_required_anywhere_disables_exemption(self) -> None:
        # min_length runs first and fails before required is reached
        error = evaluate(["min_length=3", "required"], "")
        assert error == "This field must be at least 3 characters in length"

    def test_zero_is_not_exempt(self) -> None:
        assert evaluate(["greater_than=5"], "0") == "This field must be greater than 5"

    def test_blank_exempt_with_blank_is_empty(self) -> None:
        assert evaluate(["email"], "   ", blank_is_empty=True) is None

    def test_blank_fails_required_with_blank_is_empty(self) -> None:
        assert evaluate(["required"], "  ", blank_is_empty=True) == "This field is required"

    def test_blank_passes_required_by_default(self) -> None:
        assert evaluate(["required"], "  ") is None


class TestShortCircuit:
    def test_first_failure_wins(self) -> None:
        error = evaluate(["min_length=5", "intnumber"], "ab")
        assert error == "This field must be at least 5 characters in length"

    def test_later_rule_reported_when_earlier_pass(self) -> None:
        error = evaluate(["min_length=2", "intnumber"], "ab")
        assert error == "This field only allows integers"

    def test_all_pass(self) -> None:
        assert evaluate(["required", "intnumber", "less_than=100"], "42") is None

    def test_later_rules_not_invoked(self) -> None:
        calls: list[str] = []

        class Spy:
            def format(self, rule: str, *, field: str, arg: str | None = None) -> str:
                calls.append(rule)
                return rule

        compiled = compile_field(Field.of("f", ["intnumber", "email", "min_length=99"]))
        error = evaluate_field(compiled, {"f": "abc"}, Spy())  # type: ignore[arg-type]
        assert error == "intnumber"
        assert calls == ["intnumber"]


class TestMissingValue:
    def test_missing_key_raises(self) -> None:
        compiled = compile_field(Field.of("f", ["email"]))
        with pytest.raises(MissingValueError, match="'f'") as excinfo:
            evaluate_field(compiled, {}, ENGLISH)
        assert excinfo.value.field == "f"


class TestLogging:
    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="formrules.validation"):
            evaluate(["email"], "nope")
        assert any("failed rule 'email'" in r.message for r in caplog.records)

    def test_success_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="formrules.validation"):
            evaluate(["email"], "user@example.com")
        assert not caplog.records
