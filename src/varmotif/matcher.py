"""
--------------------------------------------------------------------------------
<varmotif project>
varmotif/matcher.py

Sliding-window motif search over nucleotide sequences.

  • find_all           : every offset where the motif matches, ascending,
                         overlaps included
  • exists             : stops at the first match
  • find_all_parallel  : offset range split into chunks on a thread pool;
                         cooperative cancellation raises ScanCancelled
  • find_all_strands   : forward and reverse-complement hits reported in
                         forward coordinates

Two engines return identical offsets: "python" (reference O(n*w) scan) and
"numpy" (vectorised acceptance-mask lookup).
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Literal, Optional, Sequence, Tuple

import numpy as np

from .errors import ScanCancelled
from .motif import AnySymbol, Motif, SymbolSet, as_motif, degeneracy
from .nucleotide import ALPHABET, Nucleotide, reverse_complement

logger = logging.getLogger(__name__)

Engine = Literal["python", "numpy"]
Strands = Literal["forward", "both"]

_CODE: Dict[Nucleotide, int] = {n: i for i, n in enumerate(ALPHABET)}


@dataclass(frozen=True)
class Hit:
    offset: int
    strand: Literal["+", "-"] = "+"


def _n_offsets(seq_len: int, width: int) -> int:
    return max(0, seq_len - width + 1)


# --- reference engine ---------------------------------------------------------


def _iter_matches(seq: Sequence[Nucleotide], motif: Motif, start: int, stop: int) -> Iterator[int]:
    for i in range(start, stop):
        if motif.accepts_at(seq, i):
            yield i


# --- numpy engine -------------------------------------------------------------


def encode(seq: Sequence[Nucleotide]) -> np.ndarray:
    """Map a nucleotide sequence to int8 codes in ALPHABET order."""
    try:
        return np.fromiter((_CODE[n] for n in seq), dtype=np.int8, count=len(seq))
    except KeyError as e:
        raise TypeError(f"Sequence contains a non-Nucleotide value: {e.args[0]!r}") from None


def acceptance_mask(motif: Motif) -> np.ndarray:
    """Boolean (width, 4) table: mask[j, code] is True iff position j accepts code."""
    mask = np.zeros((motif.width, len(ALPHABET)), dtype=bool)
    for j, c in enumerate(motif.positions):
        match c:
            case AnySymbol():
                mask[j, :] = True
            case SymbolSet(symbols=symbols):
                for n in symbols:
                    mask[j, _CODE[n]] = True
            case other:
                raise TypeError(f"Not a position constraint: {other!r}")
    return mask


def _numpy_offsets(codes: np.ndarray, mask: np.ndarray, start: int, stop: int) -> List[int]:
    if stop <= start:
        return []
    ok = np.ones(stop - start, dtype=bool)
    for j in range(mask.shape[0]):
        ok &= mask[j, codes[start + j : stop + j]]
    return (np.flatnonzero(ok) + start).tolist()


# --- public API ---------------------------------------------------------------


def find_all(seq: Sequence[Nucleotide], motif, *, engine: Engine = "python") -> List[int]:
    m = as_motif(motif)
    n_off = _n_offsets(len(seq), m.width)
    logger.debug(
        "find_all: len=%d width=%d degeneracy=%d engine=%s", len(seq), m.width, degeneracy(m), engine
    )
    match engine:
        case "python":
            return list(_iter_matches(seq, m, 0, n_off))
        case "numpy":
            return _numpy_offsets(encode(seq), acceptance_mask(m), 0, n_off)
        case other:
            raise ValueError(f"Unknown engine {other!r}. Allowed: ['numpy', 'python']")


def exists(seq: Sequence[Nucleotide], motif) -> bool:
    m = as_motif(motif)
    return next(_iter_matches(seq, m, 0, _n_offsets(len(seq), m.width)), None) is not None


def find_all_parallel(
    seq: Sequence[Nucleotide],
    motif,
    *,
    workers: int = 4,
    chunk_size: int = 4096,
    engine: Engine = "python",
    cancel: Optional[threading.Event] = None,
) -> List[int]:
    """
    Chunked, thread-pooled equivalent of find_all.

    Each chunk covers a disjoint slice of the offset range, so merging chunk
    results needs no de-duplication. When `cancel` is set the scan raises
    ScanCancelled instead of returning a partial result.
    """
    m = as_motif(motif)
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    if engine not in ("python", "numpy"):
        raise ValueError(f"Unknown engine {engine!r}. Allowed: ['numpy', 'python']")

    n_off = _n_offsets(len(seq), m.width)
    bounds: List[Tuple[int, int]] = [(s, min(s + chunk_size, n_off)) for s in range(0, n_off, chunk_size)]
    if not bounds:
        return []

    if engine == "numpy":
        codes, mask = encode(seq), acceptance_mask(m)

        def _scan(start: int, stop: int) -> List[int]:
            return _numpy_offsets(codes, mask, start, stop)

    else:

        def _scan(start: int, stop: int) -> List[int]:
            return list(_iter_matches(seq, m, start, stop))

    def _chunk(start: int, stop: int) -> List[int]:
        if cancel is not None and cancel.is_set():
            raise ScanCancelled(f"Scan cancelled before chunk [{start}, {stop})")
        return _scan(start, stop)

    n_workers = min(workers, len(bounds))
    logger.debug("find_all_parallel: %d chunk(s) of <=%d offsets on %d worker(s)", len(bounds), chunk_size, n_workers)

    offsets: List[int] = []
    with ThreadPoolExecutor(max_workers=n_workers) as executor:
        futures: List[Future[List[int]]] = [executor.submit(_chunk, s, e) for s, e in bounds]
        try:
            for fut in futures:
                offsets.extend(fut.result())
        except ScanCancelled:
            for fut in futures:
                fut.cancel()
            logger.debug("find_all_parallel: cancelled")
            raise

    # Late chunks may still have completed after the event was set.
    if cancel is not None and cancel.is_set():
        raise ScanCancelled("Scan cancelled")
    return sorted(offsets)


Finder = Callable[[Sequence[Nucleotide], Motif], List[int]]


def find_all_strands(
    seq: Sequence[Nucleotide],
    motif,
    *,
    strands: Strands = "forward",
    finder: Optional[Finder] = None,
) -> List[Hit]:
    """
    Scan the forward strand, and with strands="both" the reverse complement.

    Minus-strand hits are mapped back to forward coordinates: a match at
    index k of the reverse complement covers forward offset len(seq) - (k + w).
    """
    m = as_motif(motif)
    if strands not in ("forward", "both"):
        raise ValueError(f"strands must be 'forward' or 'both', got {strands!r}")
    find = finder or find_all

    hits = {Hit(i, "+") for i in find(seq, m)}
    if strands == "both":
        for k in find(reverse_complement(seq), m):
            hits.add(Hit(len(seq) - (k + m.width), "-"))
    return sorted(hits, key=lambda h: (h.offset, h.strand))
