"""
--------------------------------------------------------------------------------
<varmotif project>
varmotif/trilean.py

Three-valued logic over {TRUE, FALSE, MAYBE}.

  • negate : TRUE <-> FALSE, MAYBE -> MAYBE
  • and_   : FALSE dominates, then MAYBE, else TRUE
  • or_    : TRUE dominates, then MAYBE, else FALSE

Every operator is total over the closed variant set; the tests enumerate all
nine operand pairs for each binary operator.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Trilean(Enum):
    TRUE = "true"
    FALSE = "false"
    MAYBE = "maybe"

    @classmethod
    def from_bool(cls, value: Optional[bool]) -> "Trilean":
        match value:
            case True:
                return cls.TRUE
            case False:
                return cls.FALSE
            case None:
                return cls.MAYBE
            case other:
                raise TypeError(f"Cannot lift {other!r} to Trilean")

    def __invert__(self) -> "Trilean":
        return negate(self)

    def __and__(self, other: "Trilean") -> "Trilean":
        if not isinstance(other, Trilean):
            return NotImplemented
        return and_(self, other)

    def __or__(self, other: "Trilean") -> "Trilean":
        if not isinstance(other, Trilean):
            return NotImplemented
        return or_(self, other)

    def __bool__(self) -> bool:
        # MAYBE has no truth value.
        raise TypeError("Trilean has no boolean value; compare against Trilean.TRUE")


def negate(x: Trilean) -> Trilean:
    match x:
        case Trilean.TRUE:
            return Trilean.FALSE
        case Trilean.FALSE:
            return Trilean.TRUE
        case Trilean.MAYBE:
            return Trilean.MAYBE
        case other:
            raise TypeError(f"Not a Trilean: {other!r}")


def and_(x: Trilean, y: Trilean) -> Trilean:
    match (x, y):
        case (Trilean.FALSE, Trilean()) | (Trilean(), Trilean.FALSE):
            return Trilean.FALSE
        case (Trilean.MAYBE, Trilean()) | (Trilean(), Trilean.MAYBE):
            return Trilean.MAYBE
        case (Trilean.TRUE, Trilean.TRUE):
            return Trilean.TRUE
        case other:
            raise TypeError(f"Not a Trilean pair: {other!r}")


def or_(x: Trilean, y: Trilean) -> Trilean:
    match (x, y):
        case (Trilean.TRUE, Trilean()) | (Trilean(), Trilean.TRUE):
            return Trilean.TRUE
        case (Trilean.MAYBE, Trilean()) | (Trilean(), Trilean.MAYBE):
            return Trilean.MAYBE
        case (Trilean.FALSE, Trilean.FALSE):
            return Trilean.FALSE
        case other:
            raise TypeError(f"Not a Trilean pair: {other!r}")
