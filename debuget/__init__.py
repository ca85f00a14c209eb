"""
Debuget
Categorized, human-readable error reports for Python processes
"""

from collections.abc import Mapping
from typing import Any, Optional

from .config import APP_VERSION
from .core import (
    Frame, ReportComposer, ReportModel, Reporter, StreamSink, Theme, ThemeStore,
    default_theme_store,
)
from .errors import Category, ErrorDescriptor, classify, describe, explain

__version__ = APP_VERSION

default_reporter = Reporter(ReportComposer(default_theme_store))


async def report(error: Any) -> None:
    """Classify, compose and write one report to stderr"""
    await default_reporter.report(error)


async def format_error(error: Any) -> str:
    """Return the rendered report without writing it"""
    return await default_reporter.format(error)


def update_theme(partial: Optional[Mapping] = None, **fields: Any) -> Theme:
    """Merge settings into the process-wide theme"""
    return default_reporter.update_theme(partial, **fields)


__all__ = [
    "Category",
    "ErrorDescriptor",
    "Frame",
    "ReportComposer",
    "ReportModel",
    "Reporter",
    "StreamSink",
    "Theme",
    "ThemeStore",
    "classify",
    "describe",
    "explain",
    "format_error",
    "report",
    "update_theme",
]
