"""
Debuget Theme Store
Process-wide presentation settings with a merge-style update
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Optional

from debuget.config import (
    DEFAULT_EMOJI, DEFAULT_COLORS, DEFAULT_STACK_DEPTH, DEFAULT_SHOW_STACK
)

logger = logging.getLogger(__name__)

# camelCase spellings accepted by update()
_ALIASES = {
    "stackDepth": "stack_depth",
    "showStack": "show_stack",
}


@dataclass(frozen=True)
class Theme:
    """Presentation switches for rendered reports"""
    emoji: bool = DEFAULT_EMOJI
    colors: bool = DEFAULT_COLORS
    stack_depth: int = DEFAULT_STACK_DEPTH
    show_stack: bool = DEFAULT_SHOW_STACK


class ThemeStore:
    """Holds the live Theme; each update replaces it with a merged copy"""

    def __init__(self, theme: Optional[Theme] = None):
        self._theme = theme or Theme()

    @property
    def theme(self) -> Theme:
        return self._theme

    def update(self, partial: Optional[Mapping] = None, **overrides: Any) -> Theme:
        """
        Merge the given fields into the live theme.

        Args:
            partial: Mapping of fields, camelCase keys allowed
            **overrides: Fields as keyword arguments

        Returns:
            The new live theme. Unspecified fields keep their prior values.
        """
        known = {f.name for f in fields(Theme)}
        changes = {}
        for key, value in {**dict(partial or {}), **overrides}.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                logger.warning("Ignoring unknown theme setting %r", key)
                continue
            if name == "stack_depth":
                try:
                    value = max(0, int(value))
                except (TypeError, ValueError):
                    logger.warning("Ignoring non-integer stack_depth %r", value)
                    continue
            changes[name] = value

        self._theme = replace(self._theme, **changes)
        return self._theme


default_theme_store = ThemeStore()
