"""Shared type aliases and protocols used across formrules modules."""

from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

# Pure rule check: (value, parsed argument) -> passed?
Check: TypeAlias = Callable[[str, object], bool]


@runtime_checkable
class ValueLookup(Protocol):
    """A read-only mapping of field name to raw input value.

    Only ``__getitem__`` and ``__contains__`` are required, so a ``dict``,
    any ``Mapping[str, str]``, or a multi-value form mapping whose
    ``__getitem__`` returns the first value all qualify.
    """

    def __getitem__(self, key: str) -> str | None: ...
    def __contains__(self, key: object) -> bool: ...
