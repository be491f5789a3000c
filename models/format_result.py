"""
Result types returned by the number formatter.

A formatting call either succeeds with text or fails with one of a fixed set
of reasons. The reasons keep the exact human-readable messages callers have
historically compared against, available through ``str(result)``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FormatError(str, Enum):
    """Why a number could not be formatted."""

    INVALID_THOUSANDS_SEPARATOR = "Invalid thousands separator"
    INVALID_DECIMAL_SEPARATOR = "Invalid decimal separator"
    SAME_SEPARATORS = (
        "The thousands separator cannot be the same as the decimal separator"
    )
    NOT_FINITE = "Cannot format a non-finite number"


class NumberFormatError(ValueError):
    """Raised where a failed format cannot be returned as a result."""

    def __init__(self, error: FormatError) -> None:
        super().__init__(error.value)
        self.error = error


@dataclass(frozen=True)
class FormatResult:
    """Outcome of a single formatting call."""

    text: str = ""
    error: Optional[FormatError] = None

    @classmethod
    def success(cls, text: str) -> "FormatResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: FormatError) -> "FormatResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the formatted text, raising NumberFormatError on failure."""
        if self.error is not None:
            raise NumberFormatError(self.error)
        return self.text

    def __str__(self) -> str:
        if self.error is not None:
            return self.error.value
        return self.text
