"""
Debuget Terminal Styling
ANSI escape sequences for the report's emphasis roles
"""

from typing import Dict, Tuple

from debuget.config import PALETTE

RESET = "\x1b[0m"

BOLD = "1"
DIM = "2"
ITALIC = "3"
UNDERLINE = "4"
RED = "31"


def hex_to_ansi(hex_color: str) -> str:
    """'#FF6B6B' -> '38;2;255;107;107' (truecolor foreground)"""
    value = hex_color.lstrip("#")
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return f"38;2;{r};{g};{b}"


# emphasis -> SGR parameters
EMPHASIS: Dict[str, Tuple[str, ...]] = {
    "critical": (hex_to_ansi(PALETTE["critical"]), BOLD),
    "warning": (hex_to_ansi(PALETTE["warning"]),),
    "info": (hex_to_ansi(PALETTE["info"]),),
    "code": (hex_to_ansi(PALETTE["code"]), ITALIC),
    "path": (hex_to_ansi(PALETTE["path"]), UNDERLINE),
    "dim": (DIM,),
    "label": (BOLD,),
    "error": (RED,),
}


def paint(text: str, *params: str) -> str:
    if not params:
        return text
    return f"\x1b[{';'.join(params)}m{text}{RESET}"


class Styler:
    """Applies emphasis styles, or returns text untouched when disabled"""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def apply(self, emphasis: str, text: str) -> str:
        if not self.enabled:
            return text
        return paint(text, *EMPHASIS[emphasis])

    def color(self, hex_color: str, text: str) -> str:
        if not self.enabled:
            return text
        return paint(text, hex_to_ansi(hex_color))
