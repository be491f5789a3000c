"""
Number Formatter Playground: Main Application Entry Point.
Run with: streamlit run app.py
"""

import logging
import sys
from pathlib import Path

import streamlit as st

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
load_dotenv()

from config.settings import app_config
from controllers.format_controller import FormatController
from views.formatter_view import (
    render_controls,
    render_page_header,
    render_preview_table,
    render_result,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title=app_config.APP_TITLE,
    page_icon=app_config.PAGE_ICON or None,
    layout=app_config.LAYOUT,
)


def main() -> None:
    value, precision, thousands_sep, decimal_sep = render_controls()
    controller = FormatController(precision, thousands_sep, decimal_sep)

    render_page_header()
    render_result(controller.format_value(value))
    if controller.is_valid:
        render_preview_table(controller.preview_table(app_config.SAMPLE_VALUES))


if __name__ == "__main__":
    main()
