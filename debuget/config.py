"""
Debuget Configuration
App-wide constants and defaults
"""

# App Info
APP_VERSION = "1.0.0"

# Default Theme Settings
DEFAULT_EMOJI = True
DEFAULT_COLORS = True
DEFAULT_STACK_DEPTH = 3
DEFAULT_SHOW_STACK = True

# Palette (hex, rendered as ANSI truecolor)
PALETTE = {
    "critical": "#FF6B6B",
    "warning": "#FFD93D",
    "info": "#6CBEED",
    "code": "#A9E34B",
    "path": "#748FFC",
}

# Box Settings
BOX_PADDING = 1
BOX_MARGIN = 1
BOX_BORDER_STYLE = "round"
BOX_BORDER_COLOR = "#FF6B6B"

# Frames whose file path contains one of these belong to installed packages
THIRD_PARTY_MARKERS = ("site-packages", "dist-packages", "node_modules")

# Placeholders
UNKNOWN_LOCATION = "Unknown location"
UNKNOWN_ERROR = "Unknown error"
ANONYMOUS_FUNCTION = "<anonymous>"
