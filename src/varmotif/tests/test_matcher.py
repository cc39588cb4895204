"""
--------------------------------------------------------------------------------
<varmotif project>
src/varmotif/tests/test_matcher.py

Sliding-window scan: concrete scenarios, overlap handling, engine and
thread-pool equivalence, cancellation and strand mapping.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import random
import threading

import numpy as np
import pytest

from varmotif.errors import InvalidMotif, ScanCancelled
from varmotif.matcher import (
    Hit,
    acceptance_mask,
    encode,
    exists,
    find_all,
    find_all_parallel,
    find_all_strands,
)
from varmotif.motif import ANY, Motif, SymbolSet
from varmotif.nucleotide import ALPHABET, Nucleotide

A, C, G, T = Nucleotide.A, Nucleotide.C, Nucleotide.G, Nucleotide.T

ENGINES = ["python", "numpy"]


def _random_seq(n: int, seed: int = 7) -> tuple:
    rng = random.Random(seed)
    return tuple(rng.choice(ALPHABET) for _ in range(n))


@pytest.mark.parametrize("engine", ENGINES)
def test_scenario_degenerate_motif_at_start(engine: str) -> None:
    seq = (A, G, G, T, C, A)
    motif = Motif.of(A, {C, G}, ANY, ANY, C, A)
    assert find_all(seq, motif, engine=engine) == [0]
    assert exists(seq, motif)


@pytest.mark.parametrize("engine", ENGINES)
def test_scenario_overlapping_matches(engine: str) -> None:
    assert find_all((A, A, A), Motif.of(A, A), engine=engine) == [0, 1]


@pytest.mark.parametrize("engine", ENGINES)
def test_scenario_no_match(engine: str) -> None:
    assert find_all((C, C, C), Motif.of(A), engine=engine) == []
    assert not exists((C, C, C), Motif.of(A))


def test_scenario_empty_motif_rejected() -> None:
    for seq in [(), (A, C, G)]:
        with pytest.raises(InvalidMotif):
            find_all(seq, [])
        with pytest.raises(InvalidMotif):
            exists(seq, [])


def test_empty_constraint_set_rejected_before_scanning() -> None:
    with pytest.raises(InvalidMotif):
        find_all((A, C), [A, set()])


@pytest.mark.parametrize("engine", ENGINES)
def test_sequence_shorter_than_motif_is_empty(engine: str) -> None:
    motif = Motif.of(ANY, ANY, ANY)
    assert find_all((), motif, engine=engine) == []
    assert find_all((A, C), motif, engine=engine) == []
    assert not exists((A, C), motif)


def test_any_only_motif_matches_every_window() -> None:
    seq = _random_seq(10)
    assert find_all(seq, Motif.of(ANY, ANY)) == list(range(9))


def test_input_sequence_is_not_mutated() -> None:
    seq = [A, C, G, T, A, C]
    before = list(seq)
    find_all(seq, Motif.of(A, C))
    find_all(seq, Motif.of(A, C), engine="numpy")
    assert seq == before


def test_appending_never_removes_offsets() -> None:
    motif = Motif.of({A, G}, ANY, T)
    seq = _random_seq(60, seed=11)
    prev: list = []
    for n in range(len(seq) + 1):
        cur = find_all(seq[:n], motif)
        assert set(prev) <= set(cur)
        prev = cur


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_engines_agree_on_random_input(seed: int) -> None:
    seq = _random_seq(500, seed=seed)
    motif = Motif.of(A, {C, T}, ANY, G)
    ref = find_all(seq, motif, engine="python")
    assert find_all(seq, motif, engine="numpy") == ref
    assert exists(seq, motif) == bool(ref)


def test_unknown_engine_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown engine"):
        find_all((A,), Motif.of(A), engine="regex")


def test_encode_and_mask() -> None:
    assert encode((A, C, G, T)).tolist() == [0, 1, 2, 3]
    mask = acceptance_mask(Motif.of(A, ANY, {C, G}))
    assert mask.shape == (3, 4)
    assert mask.tolist() == [
        [True, False, False, False],
        [True, True, True, True],
        [False, True, True, False],
    ]
    with pytest.raises(TypeError, match="non-Nucleotide"):
        encode(("A",))


@pytest.mark.parametrize("engine", ENGINES)
@pytest.mark.parametrize("chunk_size", [1, 7, 64, 10_000])
def test_parallel_matches_serial(engine: str, chunk_size: int) -> None:
    seq = _random_seq(400, seed=5)
    motif = Motif.of(ANY, {A, T}, C)
    expected = find_all(seq, motif)
    got = find_all_parallel(seq, motif, workers=4, chunk_size=chunk_size, engine=engine)
    assert got == expected
    assert got == sorted(set(got))


def test_parallel_short_sequence_and_validation() -> None:
    assert find_all_parallel((A,), Motif.of(A, A)) == []
    with pytest.raises(InvalidMotif):
        find_all_parallel((A,), [])
    with pytest.raises(ValueError, match="workers"):
        find_all_parallel((A,), Motif.of(A), workers=0)
    with pytest.raises(ValueError, match="chunk_size"):
        find_all_parallel((A,), Motif.of(A), chunk_size=0)


def test_parallel_cancellation_raises_instead_of_truncating() -> None:
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(ScanCancelled):
        find_all_parallel(_random_seq(100), Motif.of(A), workers=2, chunk_size=10, cancel=cancel)


def test_parallel_unset_cancel_event_completes() -> None:
    seq = _random_seq(100)
    assert find_all_parallel(seq, Motif.of(G, G), cancel=threading.Event()) == find_all(seq, Motif.of(G, G))


def test_strands_forward_only() -> None:
    seq = (A, A, T, T)
    assert find_all_strands(seq, Motif.of(A, A)) == [Hit(0, "+")]


def test_strands_both_reports_forward_coordinates() -> None:
    # AAATGTCAAGG contains TTGACA on the minus strand at forward offset 3
    seq = (A, A, A, T, G, T, C, A, A, G, G)
    motif = Motif.of(T, T, G, A, C, A)
    assert find_all_strands(seq, motif, strands="forward") == []
    assert find_all_strands(seq, motif, strands="both") == [Hit(3, "-")]


def test_strands_palindrome_reports_both_strands_sorted() -> None:
    # ACGT is its own reverse complement
    seq = (G, A, C, G, T, A)
    hits = find_all_strands(seq, Motif.of(A, C, G, T), strands="both")
    assert hits == [Hit(1, "+"), Hit(1, "-")]


def test_strands_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError, match="strands"):
        find_all_strands((A,), Motif.of(A), strands="minus")


def test_strands_uses_custom_finder() -> None:
    calls = []

    def finder(seq, motif):
        calls.append(len(seq))
        return find_all(seq, motif, engine="numpy")

    hits = find_all_strands((A, C, G, T), Motif.of(SymbolSet.of(A)), strands="both", finder=finder)
    assert calls == [4, 4]
    assert hits == [Hit(0, "+"), Hit(3, "-")]


def test_numpy_offsets_are_plain_ints() -> None:
    out = find_all((A, A), Motif.of(A), engine="numpy")
    assert all(type(i) is int for i in out)
    assert not isinstance(out, np.ndarray)


class _CountingSeq(list):
    def __init__(self, items):
        super().__init__(items)
        self.reads = 0

    def __getitem__(self, i):
        self.reads += 1
        return super().__getitem__(i)


def test_exists_stops_at_first_match() -> None:
    seq = _CountingSeq([A] * 1000)
    assert exists(seq, Motif.of(A))
    assert seq.reads == 1


def test_exists_without_match_reads_every_window() -> None:
    seq = _CountingSeq([C] * 50)
    assert not exists(seq, Motif.of(A))
    assert seq.reads == 50


def test_acceptance_mask_rejects_unknown_constraint() -> None:
    m = Motif.of(A)
    object.__setattr__(m, "positions", (None,))
    with pytest.raises(TypeError, match="position constraint"):
        acceptance_mask(m)
