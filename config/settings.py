"""
Formatter configuration and constants.

Environment-driven values may be set in the process environment or a .env file.
"""

import os
from dataclasses import dataclass, field

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class FormatConfig:
    """Immutable defaults for the number formatter."""

    DEFAULT_PRECISION: int = 2
    DEFAULT_THOUSANDS_SEP: str = "."
    DEFAULT_DECIMAL_SEP: str = ","
    ALLOWED_SEPARATORS: tuple = (".", ",")

    # Width of the fixed-point rendering the decimal digits are taken from.
    # Precision above this width yields only this many digits.
    FIXED_POINT_DIGITS: int = 6

    # When set, negative-precision zeroing only skips a literal "." instead
    # of the configured thousands separator.
    LEGACY_ZERO_MASK: bool = field(
        default_factory=lambda: _env_flag("NUMBER_FORMAT_LEGACY_ZERO_MASK")
    )


@dataclass(frozen=True)
class AppConfig:
    """Settings for the Streamlit playground page."""

    APP_TITLE: str = field(
        default_factory=lambda: os.environ.get(
            "NUMBER_FORMAT_APP_TITLE", "Number Formatter"
        )
    )
    PAGE_ICON: str = ""
    LAYOUT: str = "centered"

    # Rows shown in the preview table
    SAMPLE_VALUES: tuple = (
        0.0,
        0.5,
        12.3456,
        1234.56,
        -1234.5,
        1000000.0,
        987654321.123,
    )


# Singleton instances
format_config = FormatConfig()
app_config = AppConfig()
