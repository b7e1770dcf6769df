"""Interactive prompts for the scaffolding pipeline.

``QuestionaryPrompter`` implements the resolver's ``Prompter`` protocol
with questionary. It is only used for interactive terminals; runs with
``--yes`` or without a TTY never construct it.
"""

from collections.abc import Iterable

import questionary
from questionary import Choice

from create_shipkit_app.cli.styles import Messages, console, custom_style
from create_shipkit_app.errors import AbortedError
from create_shipkit_app.models import FeatureConfig, ProjectConfig
from create_shipkit_app.validation import validate_project_name

# Variable names containing these markers are read with hidden input
SECRET_MARKERS = ("SECRET", "KEY", "TOKEN", "PASSWORD")


def _answer(value):
    """questionary returns None when the prompt is cancelled (Ctrl+C / ESC)."""
    if value is None:
        raise AbortedError("Aborted.")
    return value


def _validate_name(text: str) -> bool | str:
    result = validate_project_name(text)
    return True if result else result.message


def is_secret(name: str) -> bool:
    upper = name.upper()
    return any(marker in upper for marker in SECRET_MARKERS)


class QuestionaryPrompter:
    """Asks the user for the parts of a run they did not pass on the command line."""

    def project_name(self, default: str) -> str:
        return _answer(
            questionary.text(
                "What is your project named?",
                default=default,
                validate=_validate_name,
                style=custom_style,
            ).ask()
        )

    def features(self, available: list[FeatureConfig], preselected: Iterable[str]) -> list[str]:
        preselected = set(preselected)
        choices = [
            Choice(
                f"{feature.name:24} - {feature.description}",
                value=feature.name,
                checked=feature.name in preselected,
            )
            for feature in available
        ]
        return _answer(
            questionary.checkbox(
                "Which features would you like to include?",
                choices=choices,
                style=custom_style,
            ).ask()
        )

    def env_vars(self, names: list[str]) -> dict[str, str]:
        if not names:
            return {}

        console.print("\n[dim]Environment variables (leave blank to fill in later)[/dim]")
        values = {}
        for name in names:
            ask = questionary.password if is_secret(name) else questionary.text
            values[name] = _answer(ask(f"{name}:", style=custom_style).ask()).strip()
        return values

    def confirm(self, config: ProjectConfig) -> bool:
        confirmed = questionary.confirm(
            "Continue with this configuration?", default=True, style=custom_style
        ).ask()
        if not confirmed:
            console.print(Messages.warning("Aborted."))
        return bool(confirmed)
