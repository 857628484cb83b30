"""Diagnostic codes and data structures.

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
        4100-4199: Currency code parsing
        4200-4299: Region identifier parsing
        4300-4399: Language tag parsing
        4900-4999: Configuration
    """

    # Currency code parsing (4100-4199)
    CURRENCY_LENGTH_INVALID = 4101
    CURRENCY_CHARACTER_INVALID = 4102
    CURRENCY_UNKNOWN = 4103

    # Region parsing (4200-4299)
    REGION_INVALID = 4201

    # Language tag parsing (4300-4399)
    LANGUAGE_TAG_INVALID = 4301

    # Configuration (4900-4999)
    DEFAULT_CURRENCY_INVALID = 4901


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[CURRENCY_UNKNOWN]: Unknown ISO 4217 currency code 'UUU'
              = help: Use a code listed by list_currencies()
        """
        # Control characters in user input must not forge extra log lines.
        message = self.message.encode("unicode_escape").decode("ascii")
        lines = [f"{self.severity}[{self.code.name}]: {message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
