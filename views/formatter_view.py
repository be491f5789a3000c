"""
View layer – Streamlit rendering for the formatter playground.

Purely presentational: it collects inputs and renders results handed over
by the controller.
"""

from typing import Tuple

import pandas as pd
import streamlit as st

from config.settings import app_config, format_config
from models.format_result import FormatResult

_SEPARATOR_LABELS = {".": "Dot (.)", ",": "Comma (,)"}


# ======================================================================
# Page Header
# ======================================================================

def render_page_header() -> None:
    """Render the page title and a short description."""
    st.title(app_config.APP_TITLE)
    st.caption(
        "Group digits in triplets with your choice of separators. "
        "A negative precision blanks trailing integer digits."
    )
    st.divider()


# ======================================================================
# Controls
# ======================================================================

def _separator_index(sep: str) -> int:
    return list(format_config.ALLOWED_SEPARATORS).index(sep)


def render_controls() -> Tuple[float, int, str, str]:
    """
    Render sidebar inputs.

    Returns (value, precision, thousands_sep, decimal_sep).
    """
    with st.sidebar:
        st.markdown("### Settings")
        value = st.number_input("Number", value=1234.56, format="%.6f")
        precision = st.number_input(
            "Precision",
            value=format_config.DEFAULT_PRECISION,
            min_value=-12,
            max_value=12,
            step=1,
        )
        thousands_sep = st.selectbox(
            "Thousands separator",
            format_config.ALLOWED_SEPARATORS,
            index=_separator_index(format_config.DEFAULT_THOUSANDS_SEP),
            format_func=_SEPARATOR_LABELS.get,
        )
        decimal_sep = st.selectbox(
            "Decimal separator",
            format_config.ALLOWED_SEPARATORS,
            index=_separator_index(format_config.DEFAULT_DECIMAL_SEP),
            format_func=_SEPARATOR_LABELS.get,
        )
    return float(value), int(precision), thousands_sep, decimal_sep


# ======================================================================
# Result
# ======================================================================

def render_result(result: FormatResult) -> None:
    """Show the formatted number, or the reason it could not be formatted."""
    if result.ok:
        st.metric(label="Formatted", value=result.text)
    else:
        st.error(str(result))


# ======================================================================
# Preview Table
# ======================================================================

def render_preview_table(preview_df: pd.DataFrame) -> None:
    """Render sample values formatted with the current settings."""
    st.subheader("Preview")
    if preview_df.empty:
        st.info("No sample values configured.")
        return
    st.dataframe(preview_df, width="stretch", hide_index=True)
