"""Expression tree for parsed S-expressions and the built-in functions."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from ironwood.intern import StringId
from ironwood.value import Value

__all__ = ["Expr", "Literal", "Variable", "Call", "ListExpr", "BuiltinFunction"]


class Expr:
    """Base of all parsed S-expressions."""

    __slots__ = ()

    def is_literal(self) -> bool:
        return isinstance(self, Literal)

    def is_variable(self) -> bool:
        return isinstance(self, Variable)

    def is_call(self) -> bool:
        return isinstance(self, Call)

    def is_list(self) -> bool:
        return isinstance(self, ListExpr)


@dataclass(frozen=True)
class Literal(Expr):
    """A literal value."""

    value: Value


@dataclass(frozen=True)
class Variable(Expr):
    """A reference to a variable by interned name."""

    name: StringId


@dataclass(frozen=True)
class Call(Expr):
    """A call of a function, named by interned id, with arguments."""

    function: StringId
    args: tuple[Expr, ...] = ()

    def __init__(self, function: StringId, args: Iterable[Expr] = ()) -> None:
        object.__setattr__(self, "function", function)
        object.__setattr__(self, "args", tuple(args))


@dataclass(frozen=True)
class ListExpr(Expr):
    """A list literal."""

    items: tuple[Expr, ...] = ()

    def __init__(self, items: Iterable[Expr] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))


class BuiltinFunction(enum.Enum):
    """Functions built into the engine, keyed by their source spelling."""

    AND = "and"
    OR = "or"
    NOT = "not"

    EQUAL = "="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="

    IN = "in"
    NOT_IN = "not-in"
    ONE_OF = "one-of"
    ALL_OF = "all-of"
    NONE_OF = "none-of"

    GEO_WITHIN_RADIUS = "geo_within_radius"

    @classmethod
    def from_str(cls, s: str) -> BuiltinFunction | None:
        """Return the function spelled ``s``, or None if there is none."""
        try:
            return cls(s)
        except ValueError:
            return None

    def as_str(self) -> str:
        return self.value