"""
Debuget Reporter
Composes reports and writes them to the diagnostic stream
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any, Optional, Protocol, TextIO

from .composer import ReportComposer, raw_fallback
from .theme import Theme

logger = logging.getLogger(__name__)


class DiagnosticSink(Protocol):
    def write(self, text: str, severity: str = "error") -> None:
        ...


class StreamSink:
    """Writes reports to a text stream, stderr unless told otherwise"""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved lazily so that redirected/captured stderr is honored
        return self._stream or sys.stderr

    def write(self, text: str, severity: str = "error") -> None:
        self.stream.write(text + "\n")
        self.stream.flush()


class Reporter:
    """Entry point used by hooks and framework adapters"""

    def __init__(
        self,
        composer: Optional[ReportComposer] = None,
        sink: Optional[DiagnosticSink] = None,
    ):
        self.composer = composer or ReportComposer()
        self.sink = sink or StreamSink()

    async def format(self, error: Any, theme: Optional[Theme] = None) -> str:
        return await self.composer.compose(error, theme)

    async def report(self, error: Any) -> None:
        """Compose one report and write it; never raises"""
        try:
            text = await self.composer.compose(error)
        except Exception:
            logger.exception("Error formatting error")
            text = raw_fallback(error)

        try:
            self.sink.write("\n" + text + "\n", "error")
        except Exception as exc:
            logger.warning("Diagnostic sink failed: %s", exc)

    def update_theme(self, partial: Optional[Mapping] = None, **fields: Any) -> Theme:
        """Merge fields into the live theme; the rest keep their values"""
        return self.composer.theme_store.update(partial, **fields)
