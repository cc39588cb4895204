"""
--------------------------------------------------------------------------------
<varmotif project>
varmotif/motif.py

Motif value types.

A Motif is a non-empty, ordered tuple of position constraints. Each position
is either ANY (accepts every nucleotide) or a SymbolSet of 1-4 distinct
nucleotides. Malformed motifs raise InvalidMotif at construction, so a Motif
instance that exists is always scannable.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple, Union

from .errors import InvalidMotif
from .nucleotide import ALPHABET, Nucleotide


@dataclass(frozen=True)
class AnySymbol:
    def __repr__(self) -> str:
        return "ANY"


ANY = AnySymbol()


@dataclass(frozen=True)
class SymbolSet:
    symbols: FrozenSet[Nucleotide]

    def __post_init__(self):
        symbols = frozenset(self.symbols)
        if not symbols:
            raise InvalidMotif("Position constraint must accept at least one nucleotide")
        bad = [s for s in symbols if not isinstance(s, Nucleotide)]
        if bad:
            raise TypeError(f"SymbolSet members must be Nucleotide, got {bad!r}")
        object.__setattr__(self, "symbols", symbols)

    @classmethod
    def of(cls, *symbols: Nucleotide) -> "SymbolSet":
        return cls(frozenset(symbols))

    def __repr__(self) -> str:
        return "SymbolSet(" + "".join(sorted(s.value for s in self.symbols)) + ")"


PositionConstraint = Union[AnySymbol, SymbolSet]
ConstraintLike = Union[PositionConstraint, Nucleotide, Iterable[Nucleotide]]


def accepts(constraint: PositionConstraint, n: Nucleotide) -> bool:
    match constraint:
        case AnySymbol():
            return True
        case SymbolSet(symbols=symbols):
            return n in symbols
        case other:
            raise TypeError(f"Not a position constraint: {other!r}")


def coerce_constraint(item: ConstraintLike) -> PositionConstraint:
    """Accept a constraint, a bare Nucleotide, or an iterable of Nucleotides."""
    match item:
        case AnySymbol() | SymbolSet():
            return item
        case Nucleotide():
            return SymbolSet.of(item)
        case str():
            raise TypeError(f"Raw text {item!r} is not a constraint; use varmotif.parsing.parse_motif")
        case _:
            return SymbolSet(frozenset(item))


@dataclass(frozen=True)
class Motif:
    positions: Tuple[PositionConstraint, ...]

    def __post_init__(self):
        positions = tuple(coerce_constraint(p) for p in self.positions)
        if not positions:
            raise InvalidMotif("Motif must contain at least one position")
        object.__setattr__(self, "positions", positions)

    @classmethod
    def of(cls, *positions: ConstraintLike) -> "Motif":
        return cls(tuple(positions))

    @property
    def width(self) -> int:
        return len(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)

    def __getitem__(self, j: int) -> PositionConstraint:
        return self.positions[j]

    def accepts_at(self, seq, offset: int) -> bool:
        return all(accepts(c, seq[offset + j]) for j, c in enumerate(self.positions))


def as_motif(motif: Union[Motif, Iterable[ConstraintLike]]) -> Motif:
    if isinstance(motif, Motif):
        return motif
    return Motif(tuple(motif))


def degeneracy(motif: Motif) -> int:
    """Number of distinct concrete sequences the motif accepts."""
    n = 1
    for c in motif.positions:
        match c:
            case AnySymbol():
                n *= len(ALPHABET)
            case SymbolSet(symbols=symbols):
                n *= len(symbols)
            case other:
                raise TypeError(f"Not a position constraint: {other!r}")
    return n
