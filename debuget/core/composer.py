"""
Debuget Report Composer
Classifies, explains and renders an error as a boxed report
"""

import logging
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Optional

from debuget.config import (
    ANONYMOUS_FUNCTION, BOX_BORDER_COLOR, BOX_BORDER_STYLE, BOX_MARGIN,
    BOX_PADDING, UNKNOWN_ERROR, UNKNOWN_LOCATION
)
from debuget.errors import (
    Category, ErrorDescriptor, classify, describe, explain, header_for
)
from debuget.ui.box import draw_box
from debuget.ui.styling import Styler

from .stack import Frame, StackResolver, TracebackStackResolver, select_frames
from .theme import Theme, ThemeStore, default_theme_store

logger = logging.getLogger(__name__)


# ==========================================
# REPORT MODEL
# ==========================================

@dataclass
class ReportModel:
    """Everything needed to render one report"""
    category: Category
    header: str
    explanation: str
    timestamp: str
    error_name: str
    error_message: str
    location: str
    status: Optional[int] = None
    code: Optional[str] = None
    frames: List[Frame] = field(default_factory=list)
    causes: List[str] = field(default_factory=list)
    show_stack: bool = True


def iso_timestamp() -> str:
    """Current UTC time as 2024-01-02T03:04:05.678Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def where_it_broke(stack: Optional[str]) -> str:
    """
    The call site that raised, trimmed.

    Python tracebacks list the raising frame last, so the last `File ...`
    entry wins. Other stack texts put it on the line after the header.
    """
    lines = (stack or "").split("\n")
    frame_lines = [line.strip() for line in lines if line.startswith('  File "')]
    if frame_lines:
        return frame_lines[-1]
    if len(lines) > 1 and lines[1].strip():
        return lines[1].strip()
    return UNKNOWN_LOCATION


def raw_fallback(error: Any) -> str:
    """Unformatted text for when composition fails"""
    try:
        if isinstance(error, BaseException):
            text = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        else:
            descriptor = describe(error)
            text = descriptor.stack or descriptor.summary
        return text.rstrip("\n") or UNKNOWN_ERROR
    except Exception:
        logger.exception("Could not produce raw stack text")
        return UNKNOWN_ERROR


# ==========================================
# COMPOSER
# ==========================================

class ReportComposer:
    """Builds and renders reports against a theme store and a stack resolver"""

    def __init__(
        self,
        theme_store: Optional[ThemeStore] = None,
        resolver: Optional[StackResolver] = None,
    ):
        self.theme_store = theme_store or default_theme_store
        self.resolver = resolver or TracebackStackResolver()

    async def build_model(self, error: Any, theme: Optional[Theme] = None) -> ReportModel:
        theme = theme or self.theme_store.theme
        descriptor = describe(error)
        category = classify(descriptor)

        model = ReportModel(
            category=category,
            header=header_for(category, emoji=theme.emoji),
            explanation=explain(descriptor),
            timestamp=iso_timestamp(),
            status=descriptor.status_code or descriptor.status,
            error_name=descriptor.display_name,
            error_message=descriptor.message or "",
            code=descriptor.code,
            location=where_it_broke(descriptor.stack),
            causes=[cause.summary for cause in descriptor.causes],
            show_stack=theme.show_stack,
        )

        if theme.show_stack:
            frames = await self.resolver.resolve(error)
            model.frames = select_frames(frames, theme.stack_depth)

        return model

    def render(self, model: ReportModel, theme: Theme) -> str:
        style = Styler(enabled=theme.colors).apply

        meta = [style("dim", model.timestamp)]
        if model.status:
            meta.append(f"{style('label', 'Status:')} {model.status}")
        meta.append(f"{style('error', 'Error:')} {model.error_name}: {model.error_message}")
        if model.code:
            meta.append(f"{style('label', 'Code:')} {model.code}")
        if model.causes:
            meta.append(style("label", "Causes:"))
            meta.extend(f"  - {cause}" for cause in model.causes)

        sections = [
            style("critical", model.header),
            "\n".join(meta),
            f"{style('label', 'What happened?')}  {style('info', model.explanation)}",
            f"{style('label', 'Where it broke:')}  {style('code', model.location)}",
        ]
        if model.show_stack:
            journey = "\n\n".join(self._render_frame(frame, style) for frame in model.frames)
            sections.append(f"{style('label', 'Call journey:')}\n{journey}")

        return draw_box(
            "\n\n".join(sections),
            padding=BOX_PADDING,
            margin=BOX_MARGIN,
            border_style=BOX_BORDER_STYLE,
            border_color=BOX_BORDER_COLOR if theme.colors else None,
        )

    @staticmethod
    def _render_frame(frame: Frame, style) -> str:
        name = style("code", frame.function_name or ANONYMOUS_FUNCTION)
        where = style("path", f"{frame.file_name}:{frame.line_number}")
        return f"{style('dim', '➜')} {name}\n   {where}"

    async def compose(self, error: Any, theme: Optional[Theme] = None) -> str:
        """
        Render a full report for `error`.

        Never raises: on any failure the problem is logged and the raw
        stack text is returned instead.
        """
        try:
            theme = theme or self.theme_store.theme
            model = await self.build_model(error, theme)
            return self.render(model, theme)
        except Exception:
            logger.exception("Error formatting error")
            return raw_fallback(error)
