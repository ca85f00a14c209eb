"""
Debuget UI Module
Terminal styling and box drawing. The Streamlit panel lives in
debuget.ui.streamlit_panel and is imported on demand.
"""

from .styling import Styler, EMPHASIS
from .box import draw_box, visible_width, strip_ansi

__all__ = [
    "Styler",
    "EMPHASIS",
    "draw_box",
    "visible_width",
    "strip_ansi",
]
