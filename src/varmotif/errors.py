"""
--------------------------------------------------------------------------------
<varmotif project>
varmotif/errors.py

--------------------------------------------------------------------------------
"""

from __future__ import annotations


class VarMotifError(Exception):
    """Base exception for this package."""


class InvalidMotif(VarMotifError, ValueError):
    """Motif is empty or one of its positions accepts no symbol."""


class InvalidAlphabetSymbol(VarMotifError, ValueError):
    """Raised by the text parsers for a character outside the alphabet."""

    def __init__(self, symbol: str, position: int, message: str | None = None):
        self.symbol = symbol
        self.position = position
        super().__init__(message or f"Invalid symbol {symbol!r} at position {position}")


class ScanCancelled(VarMotifError):
    """A parallel scan was cancelled before every chunk completed."""


class ConfigError(VarMotifError): ...
