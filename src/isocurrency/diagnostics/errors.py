"""Exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CurrencyError(Exception):
    """Base exception for all isocurrency errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CurrencyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class IdentifierParseError(CurrencyError, ValueError):
    """Malformed or unrecognized identifier text.

    Returned (not raised) by parse_iso(), parse_region() and parse_tag().
    Raised by their must_* counterparts, which are reserved for literals
    known to be valid.

    Attributes:
        input_value: The string that failed to parse
        parse_type: Kind of identifier ('currency', 'region', 'language_tag')

    Example:
        >>> code, errors = parse_iso("UUU")
        >>> errors[0].parse_type
        'currency'
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        parse_type: str = "",
    ) -> None:
        """Initialize IdentifierParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            parse_type: Kind of identifier ('currency', 'region', 'language_tag')
        """
        super().__init__(message)
        self.input_value = input_value
        self.parse_type = parse_type
