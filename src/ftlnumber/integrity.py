"""Internal fault exceptions for fail-fast invariant checks.

These exceptions indicate SYSTEM FAILURES, not user-facing Fluent errors.
They should propagate to the top level; callers are not expected to
recover from them.

Design:
    - NOT subclasses of FluentError (different error domain)
    - Carry diagnostic context for post-mortem analysis
    - Immutable after construction
    - @final decorator prevents subclassing

Hierarchy:
    DataIntegrityError (base - system failures)
    ├─ ImmutabilityViolationError (mutation attempt on frozen error)
    └─ NumberInvariantError (formatting or plural operand invariant broken)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

__all__ = [
    "DataIntegrityError",
    "ImmutabilityViolationError",
    "IntegrityContext",
    "NumberInvariantError",
]


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Context for integrity error diagnosis.

    Attributes:
        component: System component where error occurred (number, operands)
        operation: Operation being performed (as_string, plural_operands)
        key: Identifier involved, such as the raw value (optional)
        expected: Expected shape or value (optional)
        actual: Actual shape or value found (optional)
    """

    component: str
    operation: str
    key: str | None = None
    expected: str | None = None
    actual: str | None = None


class DataIntegrityError(Exception):
    """Base exception for all internal integrity failures.

    NOT a FluentError subclass. These are SYSTEM failures, not user-facing
    Fluent errors. They indicate bugs or corrupted state and should
    propagate to the top level.

    This exception is immutable after construction.

    Attributes:
        context: Structured diagnostic context for post-mortem analysis
    """

    __slots__ = ("_context", "_frozen")

    _context: IntegrityContext | None
    _frozen: bool

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
    ) -> None:
        """Initialize DataIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        super().__init__(message)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_frozen", True)

    # Python's exception handling sets these attributes when propagating exceptions.
    _PYTHON_EXCEPTION_ATTRS: frozenset[str] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    def __setattr__(self, name: str, value: object) -> None:
        """Reject all attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in self._PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify integrity error attribute: {name}"
            raise ImmutabilityViolationError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete integrity error attribute: {name}"
        raise ImmutabilityViolationError(msg)

    @property
    def context(self) -> IntegrityContext | None:
        """Structured diagnostic context."""
        return self._context

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


@final
class ImmutabilityViolationError(DataIntegrityError):
    """Attempt to mutate or delete an attribute of a frozen error object."""


@final
class NumberInvariantError(DataIntegrityError):
    """A formatting or plural operand invariant was violated.

    Raised when the canonical decimal string lacks a decimal point where one
    is guaranteed, or when plural operands cannot be derived from it. Both
    indicate a programming error, never bad user input.
    """
