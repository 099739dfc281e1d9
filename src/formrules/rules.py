"""Built-in validation rules.

The catalog is closed: ``RULES`` is built once at import and never
mutated. Each rule pairs a pure check with the kind of argument it takes::

    def check(value: str, arg) -> bool:
        '''Return True if the value passes.'''

Rule expressions reach the catalog through ``resolve()``, which turns a
parsed ``RuleToken`` into a ``BoundRule`` (rule plus coerced argument) or
raises a configuration error. Unknown names and bad arguments are never
silently skipped.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType

from formrules._internal.types import Check
from formrules.errors import RuleArgumentError, UnknownRuleError
from formrules.messages import MessageCatalog
from formrules.tokens import RuleToken


class ArgKind(Enum):
    """What a rule's argument must look like."""

    NONE = "none"  # bare rule, no "=" allowed
    TEXT = "text"  # taken verbatim
    INTEGER = "integer"  # parsed as a base-10 int
    ORDERED = "ordered"  # numeric-or-string comparison operand


@dataclass(frozen=True, slots=True)
class Rule:
    """A named entry in the catalog."""

    name: str
    check: Check
    arg_kind: ArgKind = ArgKind.NONE

    def bind(self, raw_arg: str | None, *, field: str | None = None) -> BoundRule:
        """Coerce *raw_arg* for this rule and return a callable binding."""
        return BoundRule(self, _coerce_arg(self, raw_arg, field), raw_arg)


@dataclass(frozen=True, slots=True)
class BoundRule:
    """A rule with its argument already coerced, ready to evaluate."""

    rule: Rule
    arg: object
    raw_arg: str | None = None

    @property
    def name(self) -> str:
        return self.rule.name

    def __call__(self, field_name: str, value: str, messages: MessageCatalog) -> str | None:
        """Return the failure message, or ``None`` if *value* passes."""
        if self.rule.check(value, self.arg):
            return None
        return messages.format(self.rule.name, field=field_name, arg=self.raw_arg)


# Integer arguments: optional sign and ASCII digits, nothing else ("5_0" is not 50)
_INTEGER_ARG_RE = re.compile(r"[+-]?[0-9]+")


def _coerce_arg(rule: Rule, raw: str | None, field: str | None) -> object:
    kind = rule.arg_kind
    if kind is ArgKind.NONE:
        if raw is not None:
            raise RuleArgumentError(rule.name, "takes no argument", field=field, arg=raw)
        return None
    if raw is None:
        msg = f"requires an argument (write {rule.name}=...)"
        raise RuleArgumentError(rule.name, msg, field=field)
    if kind is ArgKind.INTEGER:
        stripped = raw.strip()
        if not _INTEGER_ARG_RE.fullmatch(stripped):
            msg = f"argument must be an integer, got {raw!r}"
            raise RuleArgumentError(rule.name, msg, field=field, arg=raw)
        try:
            return int(stripped)
        except ValueError as exc:
            msg = f"argument is not a usable integer ({exc})"
            raise RuleArgumentError(rule.name, msg, field=field, arg=raw) from exc
    return raw


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def _required(value: str, _arg: object) -> bool:
    return value != ""


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

# Letters (plus the Spanish accented set), spaces and apostrophes
_ALPHABETIC_RE = re.compile(r"[A-Za-z 'áéíóúñçÁÉÍÓÚÑÇ]+")
_ALPHANUMERIC_RE = re.compile(r"[A-Za-z0-9\- 'áéíóúñçÁÉÍÓÚÑÇ]+")
_INTNUMBER_RE = re.compile(r"-?[0-9]+")
# Lowercase words separated by single spaces, one trailing space tolerated
_NAME_RE = re.compile(r"[a-z]+(?: [a-z]+)* ?")
_USERNAME_RE = re.compile(r"[A-Za-z0-9_\-]+")

# Basic email pattern: checks structure, not deliverability
_EMAIL_RE = re.compile(r"[a-z0-9_.\-]+@[0-9a-z.\-]+\.[a-z.]{2,6}", re.IGNORECASE | re.ASCII)


def _matching(pattern: re.Pattern[str]) -> Check:
    def check(value: str, _arg: object) -> bool:
        return pattern.fullmatch(value) is not None

    return check


# ---------------------------------------------------------------------------
# Checksum
# ---------------------------------------------------------------------------

DNI_LETTERS = "TRWAGMYFPDXBNJZSQVHLCKET"

_DNI_RE = re.compile(r"[0-9]{8}[A-Za-z]")


def _spanish_dni(value: str, _arg: object) -> bool:
    """Eight digits and a control letter picked by ``digits mod 23``."""
    if not _DNI_RE.fullmatch(value):
        return False
    return DNI_LETTERS[int(value[:8]) % 23] == value[8].upper()


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

# Decimal number as typed into a form: sign, fraction, exponent, padding
_NUMERIC_RE = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")


def compare(value: str, operand: str) -> int:
    """Three-way compare, numerically when both sides are numbers.

    Falls back to lexicographic string order when either side is not
    numeric, so ``"10" > "9"`` but ``"b" > "a10"``.
    """
    left: Decimal | str = value
    right: Decimal | str = operand
    if _NUMERIC_RE.fullmatch(value) and _NUMERIC_RE.fullmatch(operand):
        # Decimal keeps integers past 2**53 exact
        try:
            left, right = Decimal(value.strip()), Decimal(operand.strip())
        except ArithmeticError:
            # exponent outside Decimal's range: keep string order
            left, right = value, operand
    return (left > right) - (left < right)  # type: ignore[operator]


def _greater_than(value: str, arg: object) -> bool:
    return compare(value, str(arg)) > 0


def _less_than(value: str, arg: object) -> bool:
    return compare(value, str(arg)) < 0


def _equal_to(value: str, arg: object) -> bool:
    return value == arg


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def _exact_length(value: str, arg: object) -> bool:
    return len(value) == arg


def _min_length(value: str, arg: object) -> bool:
    return len(value) >= arg  # type: ignore[operator]


def _max_length(value: str, arg: object) -> bool:
    return len(value) <= arg  # type: ignore[operator]


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

RULES: Mapping[str, Rule] = MappingProxyType(
    {
        rule.name: rule
        for rule in (
            Rule("required", _required),
            Rule("alphabetic", _matching(_ALPHABETIC_RE)),
            Rule("alphanumeric", _matching(_ALPHANUMERIC_RE)),
            Rule("email", _matching(_EMAIL_RE)),
            Rule("intnumber", _matching(_INTNUMBER_RE)),
            Rule("equal_to", _equal_to, ArgKind.TEXT),
            Rule("exact_length", _exact_length, ArgKind.INTEGER),
            Rule("greater_than", _greater_than, ArgKind.ORDERED),
            Rule("less_than", _less_than, ArgKind.ORDERED),
            Rule("min_length", _min_length, ArgKind.INTEGER),
            Rule("max_length", _max_length, ArgKind.INTEGER),
            Rule("name", _matching(_NAME_RE)),
            Rule("spanish_dni", _spanish_dni),
            Rule("username", _matching(_USERNAME_RE)),
        )
    }
)


def resolve(token: RuleToken, *, field: str | None = None) -> BoundRule:
    """Dispatch a parsed token to its catalog entry.

    Raises ``UnknownRuleError`` for names outside the catalog and
    ``RuleArgumentError`` when the argument does not fit the rule.
    """
    try:
        rule = RULES[token.name]
    except KeyError:
        raise UnknownRuleError(token.name, field) from None
    return rule.bind(token.arg, field=field)
