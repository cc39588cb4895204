"""
--------------------------------------------------------------------------------
<varmotif project>
varmotif/parsing.py

Text front-end: builds Nucleotide sequences and Motifs from strings.

The matching core never calls into this module; it only receives values that
are already valid. Case policy is explicit:
  • "strict" (default): only upper-case A/C/G/T (and motif codes) are accepted
  • "fold"            : input is upper-cased before validation

Motif notation, one position per token:
  A C G T          exact base
  N                any base
  [CG]             explicit set of bases
  R Y S W K M      two-base IUPAC codes
  B D H V          three-base IUPAC codes

e.g. "A[CG]NNCA" == Motif.of(A, {C, G}, ANY, ANY, C, A)
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Literal, Sequence, Tuple

from .errors import InvalidAlphabetSymbol, InvalidMotif
from .motif import ANY, AnySymbol, Motif, PositionConstraint, SymbolSet
from .nucleotide import Nucleotide

CasePolicy = Literal["strict", "fold"]

_BASES: Dict[str, Nucleotide] = {n.value: n for n in Nucleotide}

_IUPAC: Dict[str, FrozenSet[Nucleotide]] = {
    code: frozenset(_BASES[b] for b in bases)
    for code, bases in {
        "R": "AG",
        "Y": "CT",
        "S": "CG",
        "W": "AT",
        "K": "GT",
        "M": "AC",
        "B": "CGT",
        "D": "AGT",
        "H": "ACT",
        "V": "ACG",
    }.items()
}


def _apply_case(text: str, case: CasePolicy) -> str:
    match case:
        case "strict":
            return text
        case "fold":
            return text.upper()
        case other:
            raise ValueError(f"Unknown case policy {other!r}. Allowed: ['fold', 'strict']")


def _base(ch: str, pos: int) -> Nucleotide:
    try:
        return _BASES[ch]
    except KeyError:
        raise InvalidAlphabetSymbol(ch, pos) from None


def _trim(text: str, case: CasePolicy) -> Tuple[str, int]:
    """Strip surrounding whitespace; also return the offset of the first kept character."""
    body = text.strip()
    lead = len(text) - len(text.lstrip())
    return _apply_case(body, case), lead


def parse_sequence(text: str, *, case: CasePolicy = "strict") -> Tuple[Nucleotide, ...]:
    if not isinstance(text, str):
        raise TypeError(f"Sequence text must be a string, got {type(text).__name__}")
    s, lead = _trim(text, case)
    return tuple(_base(ch, lead + i) for i, ch in enumerate(s))


def parse_motif(text: str, *, case: CasePolicy = "strict") -> Motif:
    if not isinstance(text, str):
        raise TypeError(f"Motif text must be a string, got {type(text).__name__}")
    s, lead = _trim(text, case)
    if not s:
        raise InvalidMotif("Motif text is empty")

    positions: List[PositionConstraint] = []
    i = 0
    while i < len(s):
        ch = s[i]
        if ch == "[":
            close = s.find("]", i + 1)
            if close == -1:
                raise InvalidAlphabetSymbol(ch, lead + i, f"Unterminated '[' at position {lead + i}")
            members = s[i + 1 : close]
            if not members:
                raise InvalidMotif(f"Empty set '[]' at position {lead + i}")
            positions.append(SymbolSet(frozenset(_base(c, lead + i + 1 + k) for k, c in enumerate(members))))
            i = close + 1
            continue
        if ch == "N":
            positions.append(ANY)
        elif ch in _IUPAC:
            positions.append(SymbolSet(_IUPAC[ch]))
        else:
            positions.append(SymbolSet.of(_base(ch, lead + i)))
        i += 1
    return Motif(tuple(positions))


def format_sequence(seq: Sequence[Nucleotide]) -> str:
    return "".join(n.value for n in seq)


def format_motif(motif: Motif) -> str:
    out: List[str] = []
    for c in motif.positions:
        match c:
            case AnySymbol():
                out.append("N")
            case SymbolSet(symbols=symbols) if len(symbols) == 1:
                out.append(next(iter(symbols)).value)
            case SymbolSet(symbols=symbols):
                out.append("[" + "".join(sorted(n.value for n in symbols)) + "]")
            case other:
                raise TypeError(f"Not a position constraint: {other!r}")
    return "".join(out)
