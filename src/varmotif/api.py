"""
--------------------------------------------------------------------------------
<varmotif project>
varmotif/api.py

Config-driven entry points:
  - scan      : typed sequence + motif -> strand-aware hits
  - scan_text : same, parsing both inputs with the configured case policy
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import threading
from typing import List, Optional, Sequence

from .config import ScanConfig
from .matcher import Hit, find_all, find_all_parallel, find_all_strands
from .motif import Motif, as_motif
from .nucleotide import Nucleotide
from .parsing import parse_motif, parse_sequence


def scan(
    seq: Sequence[Nucleotide],
    motif,
    config: Optional[ScanConfig] = None,
    *,
    cancel: Optional[threading.Event] = None,
) -> List[Hit]:
    cfg = config or ScanConfig()
    m = as_motif(motif)

    def _find(s: Sequence[Nucleotide], mm: Motif) -> List[int]:
        if cfg.workers > 1 or cancel is not None:
            return find_all_parallel(
                s, mm, workers=cfg.workers, chunk_size=cfg.chunk_size, engine=cfg.engine, cancel=cancel
            )
        return find_all(s, mm, engine=cfg.engine)

    return find_all_strands(seq, m, strands=cfg.strands, finder=_find)


def scan_text(
    sequence: str,
    motif: str,
    config: Optional[ScanConfig] = None,
    *,
    cancel: Optional[threading.Event] = None,
) -> List[Hit]:
    cfg = config or ScanConfig()
    return scan(parse_sequence(sequence, case=cfg.case), parse_motif(motif, case=cfg.case), cfg, cancel=cancel)
