"""Diagnostic system for Fluent errors.

Provides structured error diagnostics with codes, hints, and help URLs.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import FluentError, FluentParseError, FluentResolutionError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FluentError",
    "FluentParseError",
    "FluentResolutionError",
]
