"""
Controller layer – applies one formatting setup to values for the view.

Sits between the formatter utilities and the Streamlit page. Holds the
precision and separator choice and turns raw numbers into results or a
preview table.
"""

import logging
import math
from typing import Iterable, Optional

import pandas as pd

from config.settings import format_config
from models.format_result import FormatError, FormatResult
from utils.formatters import (
    format_number,
    format_series,
    split_magnitude,
    triplet_count,
    validate_separators,
)

logger = logging.getLogger(__name__)


class FormatController:
    """
    Formats numbers with a fixed precision and separator pair.

    Unset arguments fall back to the configured defaults.
    """

    def __init__(
        self,
        precision: Optional[int] = None,
        thousands_sep: Optional[str] = None,
        decimal_sep: Optional[str] = None,
    ) -> None:
        self.precision = (
            format_config.DEFAULT_PRECISION if precision is None else int(precision)
        )
        self.thousands_sep = (
            format_config.DEFAULT_THOUSANDS_SEP if thousands_sep is None else thousands_sep
        )
        self.decimal_sep = (
            format_config.DEFAULT_DECIMAL_SEP if decimal_sep is None else decimal_sep
        )

        if self.error is not None:
            logger.warning(
                "Separator setup rejected (thousands=%r, decimal=%r): %s",
                self.thousands_sep,
                self.decimal_sep,
                self.error.value,
            )
        else:
            logger.info(
                "Formatting with precision=%d thousands=%r decimal=%r",
                self.precision,
                self.thousands_sep,
                self.decimal_sep,
            )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @property
    def error(self) -> Optional[FormatError]:
        return validate_separators(self.thousands_sep, self.decimal_sep)

    @property
    def is_valid(self) -> bool:
        return self.error is None

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_value(self, value: float) -> FormatResult:
        return format_number(
            value, self.precision, self.thousands_sep, self.decimal_sep
        )

    def _triplets(self, value: float) -> Optional[int]:
        if not math.isfinite(value):
            return None
        integer_part, _ = split_magnitude(abs(value), self.precision)
        return triplet_count(integer_part)

    def preview_table(self, values: Iterable[float]) -> pd.DataFrame:
        """
        Build a table of raw values next to their formatted text.

        Returns a DataFrame with columns:
            Value | Formatted | Triplets
        """
        df = pd.DataFrame({"Value": pd.Series(list(values), dtype=float)})
        if not self.is_valid:
            df["Formatted"] = self.error.value
            df["Triplets"] = None
            return df

        df["Formatted"] = format_series(
            df["Value"],
            self.precision,
            self.thousands_sep,
            self.decimal_sep,
            na_rep=FormatError.NOT_FINITE.value,
        )
        df["Triplets"] = df["Value"].map(self._triplets)
        return df
