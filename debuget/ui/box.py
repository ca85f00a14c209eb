"""
Debuget Box Renderer
Draws a bordered box around multi-line, possibly ANSI-styled text
"""

import re
import unicodedata
from typing import Optional

from .styling import Styler

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

BORDER_STYLES = {
    # top-left, top-right, bottom-left, bottom-right, horizontal, vertical
    "round": ("╭", "╮", "╰", "╯", "─", "│"),
    "single": ("┌", "┐", "└", "┘", "─", "│"),
    "double": ("╔", "╗", "╚", "╝", "═", "║"),
    "classic": ("+", "+", "+", "+", "-", "|"),
}

VARIATION_SELECTOR = "\ufe0f"


def strip_ansi(text: str) -> str:
    return ANSI_PATTERN.sub("", text)


def _char_width(char: str) -> int:
    if unicodedata.combining(char) or unicodedata.category(char) in ("Mn", "Me", "Cf"):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def visible_width(text: str) -> int:
    """Terminal column width of `text`, ignoring escape sequences"""
    width = 0
    previous = 0
    for char in strip_ansi(text):
        if char == VARIATION_SELECTOR:
            # emoji presentation widens a narrow base glyph
            if previous == 1:
                width += 1
                previous = 2
            continue
        previous = _char_width(char)
        width += previous
    return width


def draw_box(
    content: str,
    padding: int = 1,
    margin: int = 1,
    border_style: str = "round",
    border_color: Optional[str] = None,
) -> str:
    """
    Wrap `content` in a border.

    Padding and margin count lines vertically and three columns per unit
    horizontally. `border_color` is a hex color; None leaves the border plain.
    """
    tl, tr, bl, br, horizontal, vertical = BORDER_STYLES[border_style]
    paint = (lambda s: Styler().color(border_color, s)) if border_color else (lambda s: s)

    lines = content.split("\n")
    inner = max(visible_width(line) for line in lines)
    pad_x = " " * (padding * 3)
    offset = " " * (margin * 3)
    span = inner + len(pad_x) * 2

    blank = f"{offset}{paint(vertical)}{' ' * span}{paint(vertical)}"
    body = [
        f"{offset}{paint(vertical)}{pad_x}{line}{' ' * (inner - visible_width(line))}{pad_x}{paint(vertical)}"
        for line in lines
    ]

    rows = (
        [""] * margin
        + [f"{offset}{paint(tl + horizontal * span + tr)}"]
        + [blank] * padding
        + body
        + [blank] * padding
        + [f"{offset}{paint(bl + horizontal * span + br)}"]
        + [""] * margin
    )
    return "\n".join(rows)
