"""
Debuget Core Module
Theme store, stack resolution, composition and reporting
"""

from .theme import Theme, ThemeStore, default_theme_store
from .stack import Frame, StackResolver, TracebackStackResolver, select_frames
from .composer import ReportComposer, ReportModel
from .reporter import DiagnosticSink, Reporter, StreamSink

__all__ = [
    "Theme",
    "ThemeStore",
    "default_theme_store",
    "Frame",
    "StackResolver",
    "TracebackStackResolver",
    "select_frames",
    "ReportComposer",
    "ReportModel",
    "DiagnosticSink",
    "Reporter",
    "StreamSink",
]
