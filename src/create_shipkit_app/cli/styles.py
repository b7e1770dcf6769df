"""Centralized color and style management for the create-shipkit-app CLI.

Design Philosophy:
- Semantic color names (success, error, warning) rather than direct colors
- Rich console markup helpers for inline styling
- Questionary style integration for interactive prompts
"""

import sys
from dataclasses import dataclass

from questionary import Style as QuestionaryStyle
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# ============================================================================
# THEME CONFIGURATION
# ============================================================================


@dataclass
class ColorTheme:
    """Color theme for the CLI.

    Error, warning and success follow UI conventions; the remaining colors
    give the tool its identity.
    """

    error: str = "#ff0000"
    warning: str = "#ffaa00"
    success: str = "#22c55e"

    primary: str = "#3b82f6"  # ShipKit blue
    accent: str = "#a78bfa"
    command: str = "#94a3b8"
    path: str = "#a2ae9d"
    info: str = "#60a5fa"

    text_primary: str = "#ffffff"
    text_secondary: str = "#888888"
    text_dim: str = "#666666"


SHIPKIT_THEME = ColorTheme()


def _build_rich_theme(theme: ColorTheme) -> Theme:
    return Theme(
        {
            # Status styles
            "success": f"bold {theme.success}",
            "error": f"bold {theme.error}",
            "warning": f"bold {theme.warning}",
            "info": f"bold {theme.info}",
            # Text styles
            "primary": f"bold {theme.primary}",
            "secondary": theme.text_secondary,
            "dim": theme.text_dim,
            # Component-specific styles
            "header": f"bold {theme.primary}",
            "label": "bold",
            "value": theme.text_secondary,
            "path": theme.path,
            "command": theme.command,
            "accent": theme.accent,
        }
    )


def _build_questionary_style(theme: ColorTheme) -> QuestionaryStyle:
    return QuestionaryStyle(
        [
            ("qmark", f"fg:{theme.accent} bold"),
            ("question", "bold"),
            ("answer", f"fg:{theme.primary} bold"),
            ("pointer", f"fg:{theme.primary} bold"),
            ("highlighted", f"fg:{theme.primary} bold"),
            ("selected", f"fg:{theme.accent}"),
            ("instruction", f"fg:{theme.text_dim} italic"),
            ("text", f"fg:{theme.text_secondary}"),
        ]
    )


shipkit_theme = _build_rich_theme(SHIPKIT_THEME)
custom_style = _build_questionary_style(SHIPKIT_THEME)

# Singleton console instance with theme
# On Windows, force UTF-8 encoding to support Unicode characters (✓, ✗, ⚠️, etc.)
if sys.platform == "win32":
    console = Console(theme=shipkit_theme, force_terminal=True, legacy_windows=False)
else:
    console = Console(theme=shipkit_theme)

# Errors go to stderr so piping stdout stays clean
error_console = Console(theme=shipkit_theme, stderr=True)


# ============================================================================
# STYLE HELPERS
# ============================================================================


class Styles:
    """Style names defined in the Rich theme."""

    ERROR = "error"
    INFO = "info"
    DIM = "dim"


class Messages:
    """Pre-formatted message helpers for common patterns.

    User-supplied text is escaped so brackets in names and paths are not
    read as Rich markup.
    """

    @staticmethod
    def success(text: str) -> str:
        """Format a success message with checkmark."""
        return f"[success]✓ {escape(text)}[/success]"

    @staticmethod
    def warning(text: str) -> str:
        """Format a warning message with warning symbol."""
        return f"[warning]⚠️  {escape(text)}[/warning]"

    @staticmethod
    def command(text: str) -> str:
        return f"[command]{escape(text)}[/command]"

    @staticmethod
    def path(text: str) -> str:
        return f"[path]{escape(text)}[/path]"


__all__ = [
    "ColorTheme",
    "SHIPKIT_THEME",
    "console",
    "error_console",
    "custom_style",
    "Styles",
    "Messages",
]
