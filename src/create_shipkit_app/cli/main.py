"""Main CLI entry point for create-shipkit-app.

Parses the command line into ``CreateAppOptions``, runs the scaffolding
pipeline, and turns its result or failure into console output and an
exit status (0 on success, 1 on any failure).
"""

import sys
import traceback

import click
from rich.markup import escape

from create_shipkit_app import __version__
from create_shipkit_app.catalog import DEFAULT_TEMPLATE, template_names
from create_shipkit_app.errors import ConfigurationError, ErrorKind, ScaffoldError
from create_shipkit_app.installer import get_dev_command, get_install_command
from create_shipkit_app.models import (
    CreateAppOptions,
    PackageManager,
    ProjectConfig,
    RunSummary,
    StageStatus,
)
from create_shipkit_app.utils.config import get_config_value
from create_shipkit_app.utils.logger import configure_logging, get_logger
from create_shipkit_app.validation import validate_project_name

from .styles import Messages, Styles, console, error_console

logger = get_logger("cli")

PACKAGE_MANAGERS = [pm.value for pm in PackageManager]
DEFAULT_PACKAGE_MANAGER = PackageManager.PNPM.value


def _config_default(path: str, fallback: str, choices: list[str] | None = None):
    """Build a click default that prefers the user config file over ``fallback``."""

    def default() -> str:
        try:
            value = get_config_value(path, fallback)
        except ConfigurationError as e:
            logger.warning(f"Ignoring configuration file: {e}")
            return fallback
        if not isinstance(value, str) or (choices is not None and value not in choices):
            logger.warning(f"Invalid value for '{path}' in configuration: {value!r}")
            return fallback
        return value

    return default


def parse_features(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated feature list, dropping blanks."""
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


class ConsoleReporter:
    """Prints pipeline progress to the themed console."""

    def config(self, config: ProjectConfig) -> None:
        console.print("\n📋 [header]Project Configuration:[/header]")
        console.print(f"  Name: {escape(config.name)}", style=Styles.DIM)
        console.print(f"  Template: {config.template.name}", style=Styles.DIM)
        console.print(f"  Features: {', '.join(config.feature_names) or 'None'}", style=Styles.DIM)
        console.print(f"  Package Manager: {config.package_manager}", style=Styles.DIM)

    def stage(self, message: str) -> None:
        console.print(f"  {escape(message)}", style=Styles.INFO)

    def done(self, message: str) -> None:
        console.print(f"  {Messages.success(message)}")

    def warning(self, message: str) -> None:
        console.print(f"  {Messages.warning(message)}")


def _print_summary(summary: RunSummary) -> None:
    config = summary.config

    console.print("\n✅ [success]Your ShipKit app has been created![/success]")
    console.print(f"   {Messages.path(str(summary.project_path))}", soft_wrap=True)

    if summary.install.status is StageStatus.SKIPPED:
        console.print("  • Dependencies: skipped", style=Styles.DIM)
    if summary.git.status is StageStatus.SKIPPED:
        console.print(f"  • Git: skipped ({escape(summary.git.reason or '')})", style=Styles.DIM)
    elif summary.git.status is StageStatus.FAILED:
        console.print(f"  {Messages.warning(f'Git: not initialized ({summary.git.reason})')}")

    console.print("\n📋 [bold]Next steps:[/bold]")
    console.print(f"  {Messages.command(f'cd {config.name}')}")
    if summary.install.status is not StageStatus.SUCCEEDED:
        console.print(f"  {Messages.command(get_install_command(config.package_manager))}")
    console.print(f"  {Messages.command(get_dev_command(config.package_manager))}")
    console.print("\nHappy coding! 🎉")


def _report_error(error: BaseException, verbose: bool) -> None:
    error_console.print("\n❌ An error occurred:", style=Styles.ERROR)
    if isinstance(error, ScaffoldError):
        error_console.print(escape(error.message), style=Styles.ERROR, soft_wrap=True)
    else:
        error_console.print(
            f"Unexpected error: {escape(str(error))}", style=Styles.ERROR, soft_wrap=True
        )

    if verbose:
        error_console.print(escape(traceback.format_exc()), style=Styles.DIM, soft_wrap=True)
    elif not isinstance(error, ScaffoldError):
        error_console.print("Run again with --verbose for the full traceback.", style=Styles.DIM)


@click.command(name="create-shipkit-app")
@click.argument("project_name", required=False)
@click.option(
    "--template",
    "-t",
    default=_config_default("defaults.template", DEFAULT_TEMPLATE),
    show_default=DEFAULT_TEMPLATE,
    help=f"Template to use ({', '.join(template_names())})",
)
@click.option(
    "--features",
    default=None,
    help="Comma-separated list of features to include (default: the template's features)",
)
@click.option(
    "--pm",
    "package_manager",
    type=click.Choice(PACKAGE_MANAGERS, case_sensitive=False),
    default=_config_default("defaults.package_manager", DEFAULT_PACKAGE_MANAGER, PACKAGE_MANAGERS),
    show_default=DEFAULT_PACKAGE_MANAGER,
    help="Package manager to use",
)
@click.option("--skip-install", is_flag=True, help="Skip dependency installation")
@click.option("--skip-git", is_flag=True, help="Skip git initialization")
@click.option("--yes", "-y", is_flag=True, help="Skip interactive prompts and use defaults")
@click.option("--verbose", is_flag=True, help="Enable verbose logging and full error output")
@click.version_option(version=__version__, prog_name="create-shipkit-app")
def cli(
    project_name: str | None,
    template: str,
    features: str | None,
    package_manager: str,
    skip_install: bool,
    skip_git: bool,
    yes: bool,
    verbose: bool,
):
    """Create a new ShipKit application.

    PROJECT_NAME: Name of your project and its directory (e.g., my-app)

    Examples:

    \b
      # Interactive setup
      $ create-shipkit-app

      # Minimal template with npm, no prompts
      $ create-shipkit-app my-app -t minimal --pm npm -y

      # Pick features explicitly
      $ create-shipkit-app my-app --features auth-nextauth,payments-stripe

      # Only write files
      $ create-shipkit-app my-app --skip-install --skip-git
    """
    configure_logging(verbose)
    console.print(f"🚀 [primary]Create ShipKit App v{__version__}[/primary]\n")

    if project_name is not None:
        validation = validate_project_name(project_name)
        if not validation:
            error_console.print(
                f"Error: {escape(validation.message)}", style=Styles.ERROR, soft_wrap=True
            )
            sys.exit(1)

    options = CreateAppOptions(
        project_name=project_name,
        template=template,
        features=parse_features(features),
        package_manager=PackageManager(package_manager.lower()),
        skip_install=skip_install,
        skip_git=skip_git,
        use_defaults=yes,
        verbose=verbose,
    )

    # Prompts need a terminal; piped or scripted runs fall back to defaults
    prompter = None
    if not yes and sys.stdin.isatty():
        from create_shipkit_app.prompts import QuestionaryPrompter

        prompter = QuestionaryPrompter()

    from create_shipkit_app.orchestrator import create_app

    try:
        summary = create_app(options, prompter=prompter, reporter=ConsoleReporter())
    except ScaffoldError as e:
        if e.kind is ErrorKind.ABORTED:
            console.print(Messages.warning(e.message), soft_wrap=True)
        else:
            _report_error(e, verbose)
        sys.exit(1)
    except Exception as e:
        _report_error(e, verbose)
        sys.exit(1)

    _print_summary(summary)


def main():
    """Entry point for the create-shipkit-app command."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nAborted.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
