"""Keyed store of field name → error message for one validation pass."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType


class ErrorCollector:
    """Ordered field → message map. Insertion order is failure order.

    ``add_error`` overwrites any earlier message for the same field, so a
    field never carries more than one message.
    """

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: dict[str, str] = {}

    def add_error(self, field_name: str, message: str) -> None:
        self._errors[field_name] = message

    @property
    def errors(self) -> Mapping[str, str]:
        """Read-only live view of the collected errors."""
        return MappingProxyType(self._errors)

    def as_dict(self) -> dict[str, str]:
        """A detached copy, safe to hand to templates or serializers."""
        return dict(self._errors)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._errors

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"ErrorCollector({self._errors!r})"
