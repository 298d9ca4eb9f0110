"""String interning: each distinct string is stored once and named by a small id."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["StringId", "StringInterner"]


@dataclass(frozen=True, order=True)
class StringId:
    """Identifier of an interned string."""

    raw: int

    def __post_init__(self) -> None:
        if not 0 <= self.raw < 2**32:
            raise ValueError(f"string id out of range: {self.raw}")


class StringInterner:
    """Pool that maps strings to ids and back."""

    def __init__(self) -> None:
        self._ids: dict[str, StringId] = {}
        self._strings: dict[StringId, str] = {}

    def intern(self, s: str) -> StringId:
        """Return the id for ``s``, assigning the next free id if it is new."""
        existing = self._ids.get(s)
        if existing is not None:
            return existing
        string_id = StringId(len(self._ids))
        self._ids[s] = string_id
        self._strings[string_id] = s
        return string_id

    def resolve(self, string_id: StringId) -> str | None:
        """Return the string for ``string_id``, or None if it is unknown."""
        return self._strings.get(string_id)

    def get_id(self, s: str) -> StringId | None:
        """Return the id of ``s`` if it has been interned, else None."""
        return self._ids.get(s)

    def __contains__(self, s: object) -> bool:
        return s in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"StringInterner(len={len(self)})"