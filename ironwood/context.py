"""Evaluation context holding the shared string pool."""

from __future__ import annotations

from ironwood.intern import StringId, StringInterner

__all__ = ["Context"]


class Context:
    """Evaluation context; owns the string interner."""

    def __init__(self) -> None:
        self._interner = StringInterner()

    def intern(self, s: str) -> StringId:
        return self._interner.intern(s)

    def resolve(self, string_id: StringId) -> str | None:
        return self._interner.resolve(string_id)

    def __repr__(self) -> str:
        return f"Context({self._interner!r})"