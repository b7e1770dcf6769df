"""Template resolution.

Turns ``CreateAppOptions`` into a ``ProjectConfig``: looks up the
template, settles the feature list, validates it against the catalog,
and builds the environment-variable map.
"""

from collections.abc import Iterable, Mapping
from typing import Protocol

from create_shipkit_app import catalog
from create_shipkit_app.errors import (
    MissingEnvVarsError,
    TemplateNotFoundError,
    UnknownFeatureError,
)
from create_shipkit_app.models import (
    CreateAppOptions,
    FeatureConfig,
    ProjectConfig,
    Template,
)
from create_shipkit_app.utils.logger import get_logger
from create_shipkit_app.validation import unknown_features, validate_features

logger = get_logger("resolver")


class Prompter(Protocol):
    """Interactive collaborator used when a run is not in "use defaults" mode."""

    def project_name(self, default: str) -> str: ...

    def features(self, available: list[FeatureConfig], preselected: Iterable[str]) -> list[str]: ...

    def env_vars(self, names: list[str]) -> Mapping[str, str]: ...

    def confirm(self, config: ProjectConfig) -> bool: ...


def get_template(name: str) -> Template:
    template = catalog.get_template_by_name(name)
    if template is None:
        raise TemplateNotFoundError(name, catalog.template_names())
    return template


def merge_dependencies(
    template: Template, features: Iterable[FeatureConfig]
) -> tuple[list[str], list[str]]:
    """Sorted, deduplicated (dependencies, dev_dependencies) for a template plus features."""
    dependencies = set(template.dependencies)
    dev_dependencies = set(template.dev_dependencies)
    for feature in features:
        dependencies.update(feature.dependencies)
        dev_dependencies.update(feature.dev_dependencies)
    return sorted(dependencies), sorted(dev_dependencies)


def collect_env_var_names(features: Iterable[FeatureConfig]) -> list[str]:
    """Union of the features' declared variables, in first-declared order."""
    names: dict[str, None] = {}
    for feature in features:
        names.update(dict.fromkeys(feature.env_vars))
    return list(names)


def _select_feature_names(
    options: CreateAppOptions, template: Template, prompter: Prompter | None
) -> list[str]:
    requested = list(options.feature_names())
    if requested:
        return requested

    if prompter is not None and not options.use_defaults:
        return list(dict.fromkeys(prompter.features(catalog.get_available_features(), template.features)))

    return list(template.features)


def _resolve_env_vars(
    names: list[str], options: CreateAppOptions, prompter: Prompter | None
) -> dict[str, str]:
    if not names:
        return {}

    if prompter is None or options.use_defaults:
        return dict.fromkeys(names, "")

    answers = prompter.env_vars(names)
    missing = [name for name in names if name not in answers]
    if missing:
        raise MissingEnvVarsError(missing)
    return {name: answers[name] for name in names}


def resolve_project_config(
    options: CreateAppOptions,
    project_name: str | None = None,
    prompter: Prompter | None = None,
) -> ProjectConfig:
    """Resolve the plan for one scaffolding run.

    Args:
        options: User intent
        project_name: Final project name (defaults to ``options.project_name``)
        prompter: Optional interactive collaborator; ignored when
            ``options.use_defaults`` is set

    Returns:
        Immutable ProjectConfig

    Raises:
        TemplateNotFoundError: If the template is not in the catalog
        UnknownFeatureError: If any requested feature is not in the catalog
        MissingEnvVarsError: If the prompter leaves environment variables unanswered
    """
    name = project_name or options.project_name
    if not name:
        raise ValueError("Project name is required")

    template = get_template(options.template)
    feature_names = _select_feature_names(options, template, prompter)

    available = catalog.feature_names()
    result = validate_features(feature_names, available)
    if not result:
        raise UnknownFeatureError(result.message, unknown_features(feature_names, available))

    features = tuple(catalog.FEATURES[feature] for feature in feature_names)
    env_vars = _resolve_env_vars(collect_env_var_names(features), options, prompter)

    logger.debug(
        f"Resolved template '{template.name}' with features: {', '.join(feature_names) or 'none'}"
    )

    return ProjectConfig(
        name=name,
        template=template,
        features=features,
        package_manager=options.package_manager,
        env_vars=env_vars,
    )
