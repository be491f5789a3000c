"""
Utility functions – number formatting with configurable separators.

Examples:
    format_number(1234.56, 2, ".", ",")    -> '1.234,56'
    format_number(1000000, 0, ".", ",")    -> '1.000.000'
    format_number(1234567, -4, ".", ",")   -> '1.230.000'
    format_default(-1234.5)                -> '-1.234,50'
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Tuple

import pandas as pd

from config.settings import format_config
from models.format_result import FormatError, FormatResult, NumberFormatError

logger = logging.getLogger(__name__)


def validate_separators(thousands_sep: str, decimal_sep: str) -> Optional[FormatError]:
    """Return the first separator problem found, or None if the pair is usable."""
    allowed = format_config.ALLOWED_SEPARATORS
    if thousands_sep not in allowed:
        return FormatError.INVALID_THOUSANDS_SEPARATOR
    if decimal_sep not in allowed:
        return FormatError.INVALID_DECIMAL_SEPARATOR
    if thousands_sep == decimal_sep:
        return FormatError.SAME_SEPARATORS
    return None


def triplet_count(magnitude: int) -> int:
    """
    Number of three-digit groups in the integer part of *magnitude*.

    Same as floor(log10(m) / 3) + 1, worked out from the decimal digit count
    so it stays exact for large values. Anything below 1 counts as a single
    group, rendered as "0".
    """
    magnitude = abs(int(magnitude))
    if magnitude < 1:
        return 1
    return (len(str(magnitude)) - 1) // 3 + 1


def split_magnitude(value: float, precision: int) -> Tuple[int, str]:
    """Integer part and decimal digits of a non-negative *value*, as printed."""
    value = float(value)
    integer_part = int(value)
    if value - integer_part <= 0 or precision <= 0:
        return integer_part, ""

    step = Decimal(1).scaleb(-format_config.FIXED_POINT_DIGITS)
    rounded = Decimal(repr(value)).quantize(step, rounding=ROUND_HALF_UP)
    whole, _, digits = format(rounded, "f").partition(".")
    return int(whole), digits[:precision]


def _group_triplets(magnitude: int, thousands_sep: str) -> str:
    groups: List[str] = []
    remaining = magnitude
    for index in range(triplet_count(magnitude) - 1, -1, -1):
        scale = 1000 ** index
        group = remaining // scale
        remaining -= group * scale
        # Only the leading group goes unpadded
        groups.append(str(group).zfill(3) if groups else str(group))
    return thousands_sep.join(groups)


def _zero_trailing(text: str, places: int, protected: str) -> str:
    """Blank the last *places* digits of a grouped integer string."""
    # Widen the span by the separators interleaved every three digits
    span = places + (places - 1) // 3
    chars = list(text)
    stop = max(len(chars) - span, 0)
    for pos in range(len(chars) - 1, stop - 1, -1):
        if chars[pos] != protected:
            chars[pos] = "0"
    return "".join(chars)


def _format_validated(
    n: float,
    precision: int,
    thousands_sep: str,
    decimal_sep: str,
    legacy_zero_mask: bool,
) -> FormatResult:
    value = float(n)
    if not math.isfinite(value):
        logger.debug("Refusing to format non-finite value %r", value)
        return FormatResult.failure(FormatError.NOT_FINITE)

    sign = ""
    if value < 0:
        sign = "-"
        value = -value

    integer_part, digits = split_magnitude(value, precision)
    decimal_part = decimal_sep + digits if digits else ""

    integer_text = _group_triplets(integer_part, thousands_sep)

    if precision < 0:
        protected = "." if legacy_zero_mask else thousands_sep
        integer_text = _zero_trailing(integer_text, -precision, protected)

    return FormatResult.success(sign + integer_text + decimal_part)


def format_number(
    n: float,
    precision: int,
    thousands_sep: str,
    decimal_sep: str,
    legacy_zero_mask: Optional[bool] = None,
) -> FormatResult:
    """
    Format *n* using only the given separators and precision.

    Args:
        n: The number to format.
        precision: Decimal digits to show. A negative precision shows no
            decimals and blanks that many trailing integer digits with zeros.
        thousands_sep: "." or ",".
        decimal_sep: "." or ",", different from *thousands_sep*.
        legacy_zero_mask: Skip only a literal "." when blanking digits instead
            of the configured thousands separator. Defaults to
            ``format_config.LEGACY_ZERO_MASK``.

    Returns:
        A FormatResult; ``str(result)`` is the formatted text, or the
        error message when the separators are rejected.
    """
    error = validate_separators(thousands_sep, decimal_sep)
    if error is not None:
        logger.debug(
            "Rejected separators thousands=%r decimal=%r: %s",
            thousands_sep,
            decimal_sep,
            error.value,
        )
        return FormatResult.failure(error)

    if legacy_zero_mask is None:
        legacy_zero_mask = format_config.LEGACY_ZERO_MASK

    return _format_validated(
        n, precision, thousands_sep, decimal_sep, legacy_zero_mask
    )


def format_default(n: float) -> str:
    """
    Format with a dot for thousands, a comma for decimals and two decimal digits.

    Examples:
        format_default(1234.5) -> '1.234,50'
        format_default(0)      -> '0'
    """
    result = _format_validated(
        n,
        format_config.DEFAULT_PRECISION,
        format_config.DEFAULT_THOUSANDS_SEP,
        format_config.DEFAULT_DECIMAL_SEP,
        legacy_zero_mask=False,
    )
    return str(result)


def format_series(
    series: pd.Series,
    precision: int,
    thousands_sep: str,
    decimal_sep: str,
    na_rep: str = "",
) -> pd.Series:
    """
    Format every value of a numeric Series, keeping its index and name.

    Missing values become *na_rep*. Invalid separators raise
    NumberFormatError before any value is touched.
    """
    error = validate_separators(thousands_sep, decimal_sep)
    if error is not None:
        raise NumberFormatError(error)

    legacy = format_config.LEGACY_ZERO_MASK

    def _one(value) -> str:
        if pd.isna(value):
            return na_rep
        return str(
            _format_validated(value, precision, thousands_sep, decimal_sep, legacy)
        )

    return series.map(_one).astype(object)
