"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def currency_length_invalid(value: str, expected: int) -> Diagnostic:
        """Currency code text has the wrong length.

        Args:
            value: The input string
            expected: Required number of characters

        Returns:
            Diagnostic for CURRENCY_LENGTH_INVALID
        """
        msg = f"Currency code '{value}' must be exactly {expected} letters, got {len(value)}"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_LENGTH_INVALID,
            message=msg,
            hint="ISO 4217 alphabetic codes have three letters (USD, EUR, JPY)",
        )

    @staticmethod
    def currency_character_invalid(value: str) -> Diagnostic:
        """Currency code text contains a non-ASCII-letter character.

        Args:
            value: The input string

        Returns:
            Diagnostic for CURRENCY_CHARACTER_INVALID
        """
        msg = f"Currency code '{value}' must contain only ASCII letters"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CHARACTER_INVALID,
            message=msg,
            hint="Digits, punctuation and non-ASCII letters are never part of an ISO 4217 code",
        )

    @staticmethod
    def currency_unknown(value: str) -> Diagnostic:
        """Well-formed currency code absent from the code table.

        Args:
            value: The uppercased code

        Returns:
            Diagnostic for CURRENCY_UNKNOWN
        """
        msg = f"Unknown ISO 4217 currency code '{value}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Use a code listed by list_currencies()",
        )

    @staticmethod
    def region_invalid(value: str) -> Diagnostic:
        """Malformed region identifier.

        Args:
            value: The input string

        Returns:
            Diagnostic for REGION_INVALID
        """
        msg = f"Region '{value}' is not an ISO 3166-1 alpha-2 or UN M49 code"
        return Diagnostic(
            code=DiagnosticCode.REGION_INVALID,
            message=msg,
            hint="Use two letters (NL, US) or three digits (150, 419)",
        )

    @staticmethod
    def language_tag_invalid(value: str, reason: str) -> Diagnostic:
        """Malformed BCP 47 language tag.

        Args:
            value: The input string
            reason: Which part of the tag was rejected

        Returns:
            Diagnostic for LANGUAGE_TAG_INVALID
        """
        msg = f"Language tag '{value}' is not well-formed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_TAG_INVALID,
            message=msg,
            hint="Use BCP 47 tags such as 'nl', 'nl-BE', 'zh-Hant' or 'en-u-cu-eur'",
        )

    @staticmethod
    def default_currency_invalid(value: str, env_var: str, fallback: str) -> Diagnostic:
        """Configured default currency is not a known ISO 4217 code.

        Args:
            value: The configured value
            env_var: Environment variable the value came from
            fallback: Code used instead

        Returns:
            Diagnostic for DEFAULT_CURRENCY_INVALID
        """
        msg = f"{env_var}='{value}' is not a known ISO 4217 code; using {fallback}"
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_CURRENCY_INVALID,
            message=msg,
            hint=f"Set {env_var} to a three-letter code such as EUR",
            severity="warning",
        )
