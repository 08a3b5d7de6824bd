from __future__ import annotations


class TeikindError(Exception):
    """Base class for errors raised by teikind."""


class ConfigError(TeikindError):
    """Raised when an indexer config file is missing or invalid."""


class TransactionFormatError(TeikindError):
    """Raised when a transaction document cannot be loaded."""


class DatumDecodeError(TeikindError):
    """Raised when an output's inline datum does not match its record shape."""
