"""Package manager detection and dependency installation.

Examples:
    Basic usage::

        from create_shipkit_app.installer import get_best_package_manager, install_dependencies

        pm = get_best_package_manager()   # pnpm, yarn or npm
        install_dependencies(project_path, pm)
"""

import subprocess
from pathlib import Path

from create_shipkit_app.errors import InstallError, ToolNotInstalledError
from create_shipkit_app.models import PackageManager
from create_shipkit_app.utils.logger import get_logger

logger = get_logger("installer")

# Probe order for auto-detection
PREFERENCE_ORDER = (PackageManager.PNPM, PackageManager.YARN, PackageManager.NPM)

INSTALL_COMMANDS = {
    PackageManager.NPM: "npm install",
    PackageManager.PNPM: "pnpm install",
    PackageManager.YARN: "yarn install",
}

DEV_COMMANDS = {
    PackageManager.NPM: "npm run dev",
    PackageManager.PNPM: "pnpm dev",
    PackageManager.YARN: "yarn dev",
}


def _lookup(table: dict, package_manager: PackageManager | str) -> str:
    try:
        return table[PackageManager(package_manager)]
    except ValueError as e:
        raise ValueError(f"Unsupported package manager: {package_manager}") from e


def get_install_command(package_manager: PackageManager | str) -> str:
    """Get the installation command for a package manager (e.g. ``"pnpm install"``)."""
    return _lookup(INSTALL_COMMANDS, package_manager)


def get_dev_command(package_manager: PackageManager | str) -> str:
    """Get the dev server command for a package manager (e.g. ``"npm run dev"``)."""
    return _lookup(DEV_COMMANDS, package_manager)


def check_package_manager(package_manager: PackageManager | str) -> bool:
    """Check whether ``<pm> --version`` runs successfully."""
    package_manager = PackageManager(package_manager)
    try:
        result = subprocess.run(
            [package_manager.value, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return result.returncode == 0


def get_best_package_manager() -> PackageManager:
    """Get the best available package manager.

    Probes pnpm, yarn and npm in that order and returns the first one that
    responds. Falls back to npm, which ships with Node.js.
    """
    for package_manager in PREFERENCE_ORDER:
        if check_package_manager(package_manager):
            logger.debug(f"Detected package manager: {package_manager}")
            return package_manager

    logger.debug("No package manager responded, falling back to npm")
    return PackageManager.NPM


def install_dependencies(project_path: str | Path, package_manager: PackageManager | str) -> None:
    """Install dependencies using the specified package manager.

    The install runs in ``project_path`` with the terminal's standard
    streams so progress is visible live. No timeout is applied.

    Raises:
        ToolNotInstalledError: If the package manager cannot be started
        InstallError: If the install exits with a non-zero status
    """
    package_manager = PackageManager(package_manager)
    command = [package_manager.value, "install"]

    logger.info(f"Running {' '.join(command)} in {project_path}")
    try:
        result = subprocess.run(command, cwd=str(project_path))
    except OSError as e:
        raise ToolNotInstalledError(
            package_manager.value,
            f"Failed to install dependencies with {package_manager}. "
            f"{package_manager} could not be started: {e}",
        ) from e

    if result.returncode != 0:
        raise InstallError(
            package_manager.value,
            command,
            f"Failed to install dependencies with {package_manager}. "
            f"Command '{' '.join(command)}' exited with status {result.returncode}",
            result.returncode,
        )
