"""
Debuget Streamlit Panel
Shows a report inside a Streamlit app
"""

import asyncio
import logging
from dataclasses import replace
from typing import Any, Optional

import streamlit as st

from debuget.core import ReportComposer, ReportModel
from debuget.core.composer import raw_fallback

logger = logging.getLogger(__name__)


def _build(composer: ReportComposer, error: Any) -> ReportModel:
    theme = composer.theme_store.theme
    return asyncio.run(composer.build_model(error, theme))


def show_error(error: Any, composer: Optional[ReportComposer] = None,
               expanded: bool = False) -> Optional[ReportModel]:
    """
    Render an error report with Streamlit widgets.

    Args:
        error: The raised value
        composer: Composer to use, the process default if omitted
        expanded: Whether the full report starts expanded

    Returns:
        The report model that was displayed, None when the report could not
        be built and the raw stack text was shown instead
    """
    composer = composer or ReportComposer()
    try:
        model = _build(composer, error)
    except Exception:
        logger.exception("Error formatting error")
        st.code(raw_fallback(error), language=None)
        return None

    st.error(f"**{model.header}**\n\n{model.error_name}: {model.error_message}")
    st.info(f"💡 {model.explanation}")

    # ANSI sequences are not rendered by st.code
    plain = replace(composer.theme_store.theme, colors=False)
    with st.expander("Full report", expanded=expanded):
        st.code(composer.render(model, plain), language=None)

    return model
