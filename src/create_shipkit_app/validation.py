"""Input and environment validation.

Every check returns a ``ValidationResult``; none of them raise for an
invalid input. The directory and runtime checks only read external
state (a filesystem probe, ``node --version``).
"""

import re
import subprocess
from collections.abc import Iterable
from pathlib import Path

from create_shipkit_app.models import ValidationResult
from create_shipkit_app.naming import check_package_name
from create_shipkit_app.utils.logger import get_logger

logger = get_logger("validation")

MIN_NODE_MAJOR = 18

_VERSION_PATTERN = re.compile(r"v?(\d+)(?:\.(\d+))?(?:\.(\d+))?")


def validate_project_name(name: str) -> ValidationResult:
    """Validate a project name against npm package naming rules.

    All violations are reported together in one message.
    """
    check = check_package_name(name)

    if not check.valid_for_new_packages:
        return ValidationResult.fail(f'Invalid project name "{name}": {", ".join(check.issues)}')

    return ValidationResult.ok()


def validate_project_directory(project_path: str | Path) -> ValidationResult:
    """Validate that a directory is suitable for creating a new project.

    A path that does not exist yet, or an existing empty directory, is
    suitable. Read-only: nothing is created.
    """
    path = Path(project_path)
    try:
        if path.exists():
            if not path.is_dir():
                return ValidationResult.fail(f'Path "{path}" exists but is not a directory')

            if any(path.iterdir()):
                return ValidationResult.fail(f'Directory "{path}" is not empty')
    except OSError as e:
        return ValidationResult.fail(f'Cannot access directory "{path}": {e}')

    return ValidationResult.ok()


def get_node_version() -> str | None:
    """Probe the installed Node.js version (e.g. ``"v20.11.1"``); None if unavailable."""
    try:
        result = subprocess.run(["node", "--version"], capture_output=True, text=True)
    except OSError:
        logger.debug("node executable not found")
        return None

    if result.returncode != 0:
        logger.debug(f"node --version exited with {result.returncode}")
        return None
    return result.stdout.strip() or None


def parse_major_version(version: str) -> int | None:
    """Extract the major version from strings like ``v20.11.1`` or ``18``."""
    match = _VERSION_PATTERN.match(version.strip())
    if not match:
        return None
    return int(match.group(1))


def validate_system_requirements(version: str | None = None) -> ValidationResult:
    """Check that Node.js ``MIN_NODE_MAJOR`` or newer is available.

    Args:
        version: Node.js version string; probed with ``node --version`` when omitted

    Returns:
        ValidationResult describing whether the runtime is supported
    """
    if version is None:
        version = get_node_version()
        if version is None:
            return ValidationResult.fail(
                f"Node.js {MIN_NODE_MAJOR}.0.0 or higher is required, but no Node.js runtime was found"
            )

    major = parse_major_version(version)
    if major is None or major < MIN_NODE_MAJOR:
        return ValidationResult.fail(
            f"Node.js {MIN_NODE_MAJOR}.0.0 or higher is required. You are using {version}"
        )

    return ValidationResult.ok()


def unknown_features(requested: Iterable[str], available: Iterable[str]) -> list[str]:
    """Requested identifiers missing from ``available``, deduplicated, in request order."""
    known = set(available)
    return [name for name in dict.fromkeys(requested) if name not in known]


def validate_features(requested: Iterable[str], available: Iterable[str]) -> ValidationResult:
    """Validate feature names against the available catalog."""
    available = list(available)
    invalid = unknown_features(requested, available)

    if invalid:
        return ValidationResult.fail(
            f"Invalid features: {', '.join(invalid)}. "
            f"Available features: {', '.join(available)}"
        )

    return ValidationResult.ok()
