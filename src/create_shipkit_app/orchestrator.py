"""Scaffolding pipeline.

Sequences the components for one run:

    name → resolve config → runtime/tool checks → target directory check
         → (confirm) → materialize → install? → git?

Every input check happens before the first filesystem write. The
optional stages report a ``StageOutcome``; only a missing git downgrades
to a warning, every other failure propagates to the caller.
"""

from pathlib import Path
from typing import Protocol

from create_shipkit_app.errors import (
    AbortedError,
    DirectoryNotEmptyError,
    GitNotInstalledError,
    InvalidProjectNameError,
    ToolNotInstalledError,
    UnsupportedRuntimeError,
)
from create_shipkit_app.git import initialize_git, is_git_repository
from create_shipkit_app.installer import check_package_manager, install_dependencies
from create_shipkit_app.materializer import ProjectMaterializer
from create_shipkit_app.models import (
    CreateAppOptions,
    ProjectConfig,
    RunSummary,
    StageOutcome,
)
from create_shipkit_app.resolver import Prompter, resolve_project_config
from create_shipkit_app.utils.logger import get_logger
from create_shipkit_app.validation import (
    validate_project_directory,
    validate_project_name,
    validate_system_requirements,
)

logger = get_logger("orchestrator")

DEFAULT_PROJECT_NAME = "my-shipkit-app"


class Reporter(Protocol):
    """Receives progress events; presentation is up to the implementation."""

    def config(self, config: ProjectConfig) -> None: ...

    def stage(self, message: str) -> None: ...

    def done(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...


class NullReporter:
    def config(self, config: ProjectConfig) -> None:
        pass

    def stage(self, message: str) -> None:
        pass

    def done(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        logger.warning(message)


def _resolve_project_name(options: CreateAppOptions, prompter: Prompter | None) -> str:
    name = options.project_name
    if name is None and prompter is not None and not options.use_defaults:
        name = prompter.project_name(DEFAULT_PROJECT_NAME)
    if not name:
        name = DEFAULT_PROJECT_NAME

    result = validate_project_name(name)
    if not result:
        raise InvalidProjectNameError(result.message)
    return name


def _preflight_install(options: CreateAppOptions) -> None:
    """Runtime and package manager checks, only needed when installing."""
    result = validate_system_requirements()
    if not result:
        raise UnsupportedRuntimeError(result.message)

    if not check_package_manager(options.package_manager):
        raise ToolNotInstalledError(
            options.package_manager.value,
            f"Package manager '{options.package_manager}' is not installed or not available "
            "in PATH. Install it, choose another with --pm, or pass --skip-install.",
        )


def _run_git_stage(project_path: Path, reporter: Reporter) -> StageOutcome:
    if is_git_repository(project_path):
        reporter.warning("Already inside a git repository, skipping git initialization")
        return StageOutcome.skipped("already inside a git repository")

    reporter.stage("Initializing git repository...")
    try:
        initialize_git(project_path)
    except GitNotInstalledError as e:
        reporter.warning(f"{e.message}. Skipping git initialization.")
        return StageOutcome.failed(e.message)

    reporter.done("Git repository initialized")
    return StageOutcome.succeeded()


def create_app(
    options: CreateAppOptions,
    prompter: Prompter | None = None,
    reporter: Reporter | None = None,
    materializer: ProjectMaterializer | None = None,
) -> RunSummary:
    """Run the scaffolding pipeline.

    Args:
        options: User intent for this run
        prompter: Interactive collaborator; None (or ``use_defaults``) means no prompts
        reporter: Progress sink
        materializer: File writer (defaults to the bundled templates)

    Returns:
        RunSummary with the project path, resolved config and stage outcomes

    Raises:
        ScaffoldError: Any validation, resolution, materialization, install or
            git failure (except a missing git, which is reported as a FAILED
            git outcome)
    """
    reporter = reporter or NullReporter()
    interactive = prompter is not None and not options.use_defaults

    project_name = _resolve_project_name(options, prompter)
    config = resolve_project_config(options, project_name, prompter if interactive else None)

    if not options.skip_install:
        _preflight_install(options)

    project_path = (options.base_dir / project_name).resolve()
    result = validate_project_directory(project_path)
    if not result:
        raise DirectoryNotEmptyError(result.message)

    reporter.config(config)
    if interactive and not prompter.confirm(config):
        raise AbortedError("Aborted.")

    reporter.stage("Scaffolding project files...")
    files = (materializer or ProjectMaterializer()).materialize(config, project_path)
    reporter.done("Project files created")

    if options.skip_install:
        install = StageOutcome.skipped("--skip-install")
    else:
        reporter.stage("Installing dependencies...")
        install_dependencies(project_path, config.package_manager)
        reporter.done("Dependencies installed")
        install = StageOutcome.succeeded()

    if options.skip_git:
        git = StageOutcome.skipped("--skip-git")
    else:
        git = _run_git_stage(project_path, reporter)

    return RunSummary(
        project_path=project_path,
        config=config,
        install=install,
        git=git,
        files=files,
    )
