"""Exception hierarchy for the scaffolding pipeline.

Every failure a component reports is a ``ScaffoldError`` carrying an
``ErrorKind`` and a human-readable message. Components raise; only the
CLI decides how an error is presented and which exit status it maps to.

Error kinds:
    - INPUT: bad project name, unknown template or feature, unsupported
      runtime, unusable target directory. Raised before any filesystem write.
    - ENVIRONMENT: a required tool (git, package manager) is not installed.
    - IO: a file could not be copied or written during materialization.
    - SUBPROCESS: an install or git command exited non-zero.
    - ABORTED: the user declined to continue.
"""

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    INPUT = "input"
    ENVIRONMENT = "environment"
    IO = "io"
    SUBPROCESS = "subprocess"
    ABORTED = "aborted"


class ScaffoldError(Exception):
    """Base exception for all scaffolding errors."""

    kind: ErrorKind = ErrorKind.INPUT

    def __init__(self, message: str, kind: ErrorKind | None = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind


class ConfigurationError(ScaffoldError):
    """The user configuration file could not be loaded."""


# Input errors


class InvalidProjectNameError(ScaffoldError):
    pass


class TemplateNotFoundError(ScaffoldError):
    def __init__(self, name: str, available: list[str]):
        super().__init__(
            f"Unknown template '{name}'. Available templates: {', '.join(available)}"
        )
        self.name = name
        self.available = available


class UnknownFeatureError(ScaffoldError):
    def __init__(self, message: str, unknown: list[str]):
        super().__init__(message)
        self.unknown = unknown


class MissingEnvVarsError(ScaffoldError):
    def __init__(self, missing: list[str]):
        super().__init__(f"No values given for environment variables: {', '.join(missing)}")
        self.missing = missing


class UnsupportedRuntimeError(ScaffoldError):
    pass


class DirectoryNotEmptyError(ScaffoldError):
    """Target path is a file, a non-empty directory, or cannot be read."""


# Environment errors


class ToolNotInstalledError(ScaffoldError):
    kind = ErrorKind.ENVIRONMENT

    def __init__(self, tool: str, message: str | None = None):
        super().__init__(message or f"{tool} is not installed or not available in PATH")
        self.tool = tool


class GitNotInstalledError(ToolNotInstalledError):
    def __init__(self):
        super().__init__("git", "Git is not installed or not available in PATH")


# I/O errors


class MaterializationError(ScaffoldError):
    kind = ErrorKind.IO

    def __init__(self, path: Path, cause: BaseException):
        super().__init__(f"Failed to write {path}: {cause}")
        self.path = path
        self.cause = cause


# Subprocess errors


class SubprocessError(ScaffoldError):
    kind = ErrorKind.SUBPROCESS

    def __init__(self, tool: str, command: list[str], message: str, returncode: int | None = None):
        super().__init__(message)
        self.tool = tool
        self.command = command
        self.returncode = returncode


class InstallError(SubprocessError):
    pass


class GitCommandError(SubprocessError):
    def __init__(self, subcommand: str, command: list[str], detail: str, returncode: int | None = None):
        super().__init__(
            "git",
            command,
            f"Failed to initialize git repository: 'git {subcommand}' failed: {detail}",
            returncode,
        )
        self.subcommand = subcommand


class AbortedError(ScaffoldError):
    kind = ErrorKind.ABORTED
