"""
Component Logger Framework

Provides colored logging for the generator's components with:
- Unified API for all components (resolver, materializer, installer, git)
- Rich terminal output with component-specific colors
- Graceful fallbacks when configuration is unavailable

Usage:
    logger = get_logger("materializer")
    logger.info("Rendering template files")
    logger.debug("Detailed trace")
    logger.success("Project files created")
    logger.warning("Something to note")
    logger.error("Something went wrong")

    # Custom loggers with explicit parameters
    logger = get_logger(name="custom_component", color="blue")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from create_shipkit_app.errors import ConfigurationError
from create_shipkit_app.utils.config import get_config_value


class ComponentLogger:
    """
    Rich-formatted logger with a per-component color and message hierarchy.

    Message Types:
    - info: Normal operational messages
    - debug: Detailed tracing information
    - warning: Warning messages
    - error: Error messages
    - success: Success messages
    """

    def __init__(self, base_logger: logging.Logger, component_name: str, color: str = "white"):
        self.base_logger = base_logger
        self.component_name = component_name
        self.color = color

    def _format_message(self, message: str, style: str, emoji: str = "") -> str:
        """Format message with Rich markup and emoji prefix."""
        prefix = f"{emoji}{self.component_name.title()}: "
        if style:
            return f"[{style}]{prefix}{message}[/{style}]"
        return f"{prefix}{message}"

    def info(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, self.color))

    def debug(self, message: str) -> None:
        style = f"dim {self.color}" if self.color != "white" else "dim white"
        self.base_logger.debug(self._format_message(message, style, "🔍 "))

    def warning(self, message: str) -> None:
        self.base_logger.warning(self._format_message(message, "bold yellow", "⚠️  "))

    def error(self, message: str, exc_info: bool = False) -> None:
        self.base_logger.error(self._format_message(message, "bold red", "❌ "), exc_info=exc_info)

    def success(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, "bold green", "✅ "))



def _configured_level(default: int) -> int:
    try:
        level_name = get_config_value("logging.level", None)
    except ConfigurationError:
        return default
    if isinstance(level_name, str):
        level = logging.getLevelName(level_name.upper())
        if isinstance(level, int):
            return level
    return default


def _setup_rich_logging(level: int = logging.WARNING) -> None:
    """Configure Rich logging for the root logger (called once)."""
    root_logger = logging.getLogger()

    # Prevent duplicate handler registration
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            return

    root_logger.setLevel(_configured_level(level))

    try:
        rich_tracebacks = get_config_value("logging.rich_tracebacks", True)
        show_full_paths = get_config_value("logging.show_full_paths", False)
    except ConfigurationError:
        rich_tracebacks = True
        show_full_paths = False

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=rich_tracebacks,
        markup=True,  # Enable [bold], [green], etc. in log messages
        show_path=show_full_paths,
        show_time=False,
        show_level=True,
        tracebacks_show_locals=False,
    )

    root_logger.addHandler(handler)


def configure_logging(verbose: bool = False) -> None:
    """Set the root log level for a CLI run; verbose mode shows debug output."""
    _setup_rich_logging()
    logging.getLogger().setLevel(logging.DEBUG if verbose else _configured_level(logging.WARNING))


def get_logger(
    component_name: str = None,
    *,
    name: str = None,
    color: str = None,
) -> ComponentLogger:
    """
    Get a component logger.

    Args:
        component_name: Component name (e.g., 'resolver', 'git'); its color is
            read from ``logging.logging_colors.<component_name>`` in the config
        name: Direct logger name for custom loggers (keyword-only)
        color: Direct color specification (keyword-only)

    Returns:
        ComponentLogger instance

    Examples:
        logger = get_logger("installer")
        logger.info("Running pnpm install")

        logger = get_logger(name="test_logger", color="blue")
    """
    _setup_rich_logging()

    if name is not None:
        return ComponentLogger(logging.getLogger(name), name, color or "white")

    if component_name is None:
        raise ValueError(
            "Component name is required. Usage: get_logger('component_name') or "
            "get_logger(name='custom_name', color='blue')"
        )

    try:
        color = get_config_value(f"logging.logging_colors.{component_name}") or "white"
    except ConfigurationError:
        # Logging must keep working when the config file is broken
        color = "white"

    return ComponentLogger(logging.getLogger(component_name), component_name, color)
