"""Building blocks for an S-expression engine: string interning, typed values and an expression tree."""

__version__ = "0.1.0"
__all__ = ["context", "expr", "intern", "value"]