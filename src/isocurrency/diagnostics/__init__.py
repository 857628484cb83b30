"""Diagnostic system for isocurrency errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import CurrencyError, IdentifierParseError
from .templates import ErrorTemplate

__all__ = [
    "CurrencyError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "IdentifierParseError",
]
