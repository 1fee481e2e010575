"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    # Base documentation URL
    _DOCS_BASE = "https://projectfluent.org/fluent/guide"

    @staticmethod
    def parse_decimal_failed(input_value: str) -> Diagnostic:
        """Decimal text is not a valid numeral.

        Args:
            input_value: The text that failed to parse

        Returns:
            Diagnostic for PARSE_DECIMAL_FAILED
        """
        msg = f"Failed to parse '{input_value}' as a decimal number"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DECIMAL_FAILED,
            message=msg,
            hint="Use digits with at most one '.', e.g. 1.50",
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html",
        )

    @staticmethod
    def type_mismatch(
        function_name: str,
        argument_name: str,
        expected_type: str,
        received_type: str,
    ) -> Diagnostic:
        """Function received an argument of the wrong type.

        Args:
            function_name: FTL function name (e.g., NUMBER)
            argument_name: Offending argument
            expected_type: Type the function accepts
            received_type: Type actually received

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        msg = f"Invalid argument type for {function_name}() function"
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=msg,
            hint=f"Pass a number or a numeric string to {function_name}()",
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html",
            function_name=function_name,
            argument_name=argument_name,
            expected_type=expected_type,
            received_type=received_type,
        )
