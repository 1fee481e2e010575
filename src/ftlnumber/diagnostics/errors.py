"""Fluent exception hierarchy with structured diagnostics.

All exceptions may carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FluentError",
    "FluentParseError",
    "FluentResolutionError",
]


class FluentError(Exception):
    """Base exception for all Fluent errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FluentError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class FluentResolutionError(FluentError):
    """Runtime error while evaluating a function call.

    Example: NUMBER() called with a value that is not a number.
    """


class FluentParseError(FluentError):
    """Error while parsing decimal text into a FluentNumber.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing (empty for locale-neutral parsing)
        parse_type: Type of parsing attempted ('number')

    Example:
        >>> try:
        ...     FluentNumber.parse("1.2.3")
        ... except FluentParseError as error:
        ...     print(error.input_value, error.parse_type)
        1.2.3 number
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
        parse_type: str = "",
    ) -> None:
        """Initialize FluentParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            locale_code: The locale used for parsing
            parse_type: Type of parsing ('number')
        """
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code
        self.parse_type = parse_type
