"""Shared utilities: configuration and component logging."""

from .config import get_config_value
from .logger import get_logger

__all__ = ["get_config_value", "get_logger"]
