"""
--------------------------------------------------------------------------------
<varmotif project>
varmotif/__init__.py

Closed variant alphabets and motif scanning.

Public API:
  - Trilean, negate, and_, or_
  - Nucleotide, complement, Mutation variants, mutation_cost
  - Motif, ANY, SymbolSet
  - find_all, exists, find_all_parallel, find_all_strands
  - parse_sequence, parse_motif
  - scan, scan_text (ScanConfig-driven)
  - setup_console_logging: Rich console handler for embedding applications;
    the library itself only logs through logging.getLogger(__name__)
--------------------------------------------------------------------------------
"""

from ._logging import setup_console_logging
from .api import scan, scan_text
from .config import ScanConfig, load_config
from .errors import ConfigError, InvalidAlphabetSymbol, InvalidMotif, ScanCancelled, VarMotifError
from .matcher import Hit, exists, find_all, find_all_parallel, find_all_strands
from .motif import ANY, Motif, SymbolSet, accepts
from .nucleotide import (
    Deletion,
    Insertion,
    Mutation,
    Nucleotide,
    Substitution,
    complement,
    mutation_cost,
    mutations_between,
    reverse_complement,
    total_cost,
)
from .parsing import format_motif, format_sequence, parse_motif, parse_sequence
from .trilean import Trilean, and_, negate, or_

__all__ = [
    "ANY",
    "ConfigError",
    "Deletion",
    "Hit",
    "Insertion",
    "InvalidAlphabetSymbol",
    "InvalidMotif",
    "Motif",
    "Mutation",
    "Nucleotide",
    "ScanCancelled",
    "ScanConfig",
    "Substitution",
    "SymbolSet",
    "Trilean",
    "VarMotifError",
    "accepts",
    "and_",
    "complement",
    "exists",
    "find_all",
    "find_all_parallel",
    "find_all_strands",
    "format_motif",
    "format_sequence",
    "load_config",
    "mutation_cost",
    "mutations_between",
    "negate",
    "or_",
    "parse_motif",
    "parse_sequence",
    "reverse_complement",
    "scan",
    "scan_text",
    "setup_console_logging",
    "total_cost",
]
