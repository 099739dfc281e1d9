"""Rule expression parsing.

A rule expression is either ``name`` or ``name=argument``. Only the first
``=`` splits; the argument is taken verbatim, so ``equal_to=a=b`` compares
against ``"a=b"``.
"""

from dataclasses import dataclass

from formrules.errors import FieldDefinitionError


@dataclass(frozen=True, slots=True)
class RuleToken:
    """A parsed rule expression. ``arg`` is ``None`` when no ``=`` was present."""

    name: str
    arg: str | None = None

    def __str__(self) -> str:
        if self.arg is None:
            return self.name
        return f"{self.name}={self.arg}"


def parse_rule(expression: str) -> RuleToken:
    """Split a raw rule expression into name and optional argument.

    The name is not checked against the rule catalog here; unknown names
    are reported when the token is resolved.
    """
    if not isinstance(expression, str):
        msg = f"Rule expressions must be strings, got {type(expression).__name__}"
        raise FieldDefinitionError(msg)
    name, sep, arg = expression.partition("=")
    if not sep:
        return RuleToken(name)
    return RuleToken(name, arg)
