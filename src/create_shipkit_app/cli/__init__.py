"""Command-line interface for create-shipkit-app.

Architecture:
    Uses Click for command-line parsing and Rich for console output.
    The command module only parses arguments and presents results; the
    pipeline itself lives in ``create_shipkit_app.orchestrator``.
"""

from .main import cli, main

__all__ = ["cli", "main"]
