"""
--------------------------------------------------------------------------------
<varmotif project>
varmotif/nucleotide.py

Closed DNA alphabet and point-mutation variants.

Nucleotide is the four-symbol alphabet {A, C, G, T}. Mutation is one of
Insertion, Deletion or Substitution(before, after); only Substitution carries
a payload. Substitution(x, x) is representable and costs nothing.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple, Union

INDEL_COST = 5
SUBSTITUTION_COST = 1


class Nucleotide(Enum):
    A = "A"
    C = "C"
    G = "G"
    T = "T"

    def __str__(self) -> str:
        return self.value


ALPHABET: Tuple[Nucleotide, ...] = tuple(Nucleotide)


def complement(n: Nucleotide) -> Nucleotide:
    match n:
        case Nucleotide.A:
            return Nucleotide.T
        case Nucleotide.T:
            return Nucleotide.A
        case Nucleotide.C:
            return Nucleotide.G
        case Nucleotide.G:
            return Nucleotide.C
        case other:
            raise TypeError(f"Not a Nucleotide: {other!r}")


def reverse_complement(seq: Sequence[Nucleotide]) -> Tuple[Nucleotide, ...]:
    return tuple(complement(n) for n in reversed(seq))


@dataclass(frozen=True)
class Insertion:
    pass


@dataclass(frozen=True)
class Deletion:
    pass


@dataclass(frozen=True)
class Substitution:
    before: Nucleotide
    after: Nucleotide

    def __post_init__(self):
        for name in ("before", "after"):
            value = getattr(self, name)
            if not isinstance(value, Nucleotide):
                raise TypeError(f"Substitution.{name} must be a Nucleotide, got {value!r}")


Mutation = Union[Insertion, Deletion, Substitution]


def mutation_cost(m: Mutation) -> int:
    match m:
        case Insertion() | Deletion():
            return INDEL_COST
        case Substitution(before=x, after=y) if x == y:
            return 0
        case Substitution():
            return SUBSTITUTION_COST
        case other:
            raise TypeError(f"Not a Mutation: {other!r}")


def mutations_between(ref: Sequence[Nucleotide], alt: Sequence[Nucleotide]) -> List[Tuple[int, Substitution]]:
    """
    Per-position substitutions between two equal-length sequences.

    Returns (position, Substitution) pairs, 0-based and ascending, for every
    position where the symbols differ. Gapped comparison is out of scope, so
    unequal lengths are rejected.
    """
    if len(ref) != len(alt):
        raise ValueError(f"Sequences must have equal length (got {len(ref)} and {len(alt)})")
    return [(i, Substitution(x, y)) for i, (x, y) in enumerate(zip(ref, alt)) if x != y]


def total_cost(mutations: Iterable[Mutation]) -> int:
    return sum(mutation_cost(m) for m in mutations)
