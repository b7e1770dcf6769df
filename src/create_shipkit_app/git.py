"""Git repository initialization for new projects.

The mutating sequence is ``git init`` → default ``.gitignore`` (only if
missing) → ``git add .`` → ``git commit``. ``check_git_available`` and
``is_git_repository`` are read-only probes callers use beforehand;
``initialize_git`` is not idempotent, so skip it for a directory that is
already inside a repository.
"""

import subprocess
from pathlib import Path

from create_shipkit_app.errors import GitCommandError, GitNotInstalledError, MaterializationError
from create_shipkit_app.utils.logger import get_logger

logger = get_logger("git")

INITIAL_COMMIT_MESSAGE = "Initial commit from create-shipkit-app"

DEFAULT_GITIGNORE = """\
# Dependencies
node_modules/
.pnp
.pnp.js

# Testing
/coverage

# Next.js
/.next/
/out/

# Production
/build

# Misc
.DS_Store
*.pem

# Debug
npm-debug.log*
yarn-debug.log*
yarn-error.log*

# Local env files
.env.local
.env.development.local
.env.test.local
.env.production.local

# Vercel
.vercel

# TypeScript
*.tsbuildinfo
next-env.d.ts

# IDE
.vscode/
.idea/

# OS
Thumbs.db
"""


def check_git_available() -> bool:
    """Check if git is available."""
    try:
        result = subprocess.run(
            ["git", "--version"], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
        )
    except OSError:
        return False
    return result.returncode == 0


def is_git_repository(project_path: str | Path) -> bool:
    """Check if ``project_path`` is inside a git work tree."""
    path = Path(project_path)
    if not path.is_dir():
        return False
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--git-dir"],
            cwd=str(path),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return result.returncode == 0


def ensure_gitignore(project_path: str | Path) -> bool:
    """Write the default ``.gitignore`` if the project has none.

    An existing file is never overwritten.

    Returns:
        True if the file was written
    """
    gitignore_path = Path(project_path) / ".gitignore"
    if gitignore_path.exists():
        logger.debug(".gitignore already present, leaving it untouched")
        return False

    try:
        gitignore_path.write_text(DEFAULT_GITIGNORE)
    except OSError as e:
        raise MaterializationError(gitignore_path, e) from e
    return True


def _run_git(subcommand: str, args: list[str], project_path: Path) -> None:
    command = ["git", *args]
    logger.debug(f"Running {' '.join(command)}")
    try:
        result = subprocess.run(command, cwd=str(project_path), capture_output=True, text=True)
    except OSError as e:
        raise GitCommandError(subcommand, command, str(e)) from e

    if result.returncode != 0:
        detail = (result.stderr or result.stdout or "").strip() or f"exit status {result.returncode}"
        raise GitCommandError(subcommand, command, detail, result.returncode)


def initialize_git(project_path: str | Path) -> None:
    """Initialize a git repository and create the initial commit.

    Raises:
        GitNotInstalledError: If git is not available
        GitCommandError: If any git subcommand fails (names the subcommand)
    """
    if not check_git_available():
        raise GitNotInstalledError()

    path = Path(project_path)
    _run_git("init", ["init"], path)
    if ensure_gitignore(path):
        logger.info("Created default .gitignore")
    _run_git("add", ["add", "."], path)
    _run_git("commit", ["commit", "-m", INITIAL_COMMIT_MESSAGE], path)
    logger.success("Git repository initialized")
