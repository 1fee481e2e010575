"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2999: Resolution errors (function argument failures)
        4000-4999: Parsing errors (decimal text parsing)
    """

    # Resolution errors (2000-2999)
    TYPE_MISMATCH = 2006

    # Parsing errors (4000-4999)
    PARSE_DECIMAL_FAILED = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools. The message
    becomes the text of the FluentError that carries the diagnostic.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        function_name: Function name where error occurred (format errors)
        argument_name: Argument name that caused error (format errors)
        expected_type: Expected type for argument (format errors)
        received_type: Actual type received (format errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    function_name: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message
