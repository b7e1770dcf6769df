"""Data model for the scaffolding pipeline.

All records are frozen dataclasses. Catalog entries (Template,
FeatureConfig) are static, a ProjectConfig is built once per run by the
resolver, and everything downstream only reads it.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType


class PackageManager(str, Enum):
    """Supported JavaScript package managers."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"

    def __str__(self) -> str:
        return self.value


class FeatureCategory(str, Enum):
    """Category a feature belongs to."""

    AUTHENTICATION = "authentication"
    DATABASE = "database"
    EMAIL = "email"
    PAYMENTS = "payments"
    CMS = "cms"
    ANALYTICS = "analytics"
    DEPLOYMENT = "deployment"
    UI = "ui"


def _dedupe(items: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates while keeping first-seen order."""
    return tuple(dict.fromkeys(items))


@dataclass(frozen=True)
class CreateAppOptions:
    """User intent for one scaffolding run.

    Attributes:
        project_name: Name of the project (also the directory name); may be None
            when the name should be prompted for or defaulted
        template: Template identifier
        features: Requested feature identifiers in request order (duplicates allowed)
        package_manager: Package manager used for install and next-step hints
        skip_install: Don't run the package manager
        skip_git: Don't initialize a git repository
        use_defaults: Never prompt; fall back to defaults
        verbose: Surface full failure detail
        cwd: Directory the project is created under (defaults to the working directory)
    """

    project_name: str | None = None
    template: str = "full"
    features: tuple[str, ...] = ()
    package_manager: PackageManager = PackageManager.PNPM
    skip_install: bool = False
    skip_git: bool = False
    use_defaults: bool = False
    verbose: bool = False
    cwd: Path | None = None

    def __post_init__(self):
        # Accept any iterable / plain strings from callers, store normalized values
        object.__setattr__(self, "features", tuple(self.features))
        object.__setattr__(self, "package_manager", PackageManager(self.package_manager))

    def feature_names(self) -> tuple[str, ...]:
        """Requested features, deduplicated in request order."""
        return _dedupe(self.features)

    @property
    def base_dir(self) -> Path:
        return Path(self.cwd) if self.cwd is not None else Path.cwd()


@dataclass(frozen=True)
class Template:
    """A predefined starter file set plus baseline dependencies.

    ``optional_paths`` lists template-relative paths that only make sense
    when at least one feature of the given category is selected; they are
    pruned from the materialized tree otherwise.
    """

    name: str
    description: str
    version: str = "1.0.0"
    features: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    optional_paths: Mapping[FeatureCategory, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "optional_paths", MappingProxyType(dict(self.optional_paths)))


@dataclass(frozen=True)
class FeatureConfig:
    """An optional capability bundle layered onto a template."""

    name: str
    description: str
    category: FeatureCategory
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    env_vars: tuple[str, ...] = ()
    files: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectConfig:
    """Fully resolved, immutable plan for one scaffolding run."""

    name: str
    template: Template
    features: tuple[FeatureConfig, ...]
    package_manager: PackageManager
    env_vars: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "features", tuple(self.features))
        object.__setattr__(self, "env_vars", MappingProxyType(dict(self.env_vars)))

    @property
    def feature_names(self) -> tuple[str, ...]:
        return tuple(feature.name for feature in self.features)

    @property
    def categories(self) -> frozenset[FeatureCategory]:
        return frozenset(feature.category for feature in self.features)

    @property
    def dependencies(self) -> tuple[str, ...]:
        """Sorted union of template and feature dependencies."""
        merged = set(self.template.dependencies)
        for feature in self.features:
            merged.update(feature.dependencies)
        return tuple(sorted(merged))

    @property
    def dev_dependencies(self) -> tuple[str, ...]:
        """Sorted union of template and feature dev dependencies."""
        merged = set(self.template.dev_dependencies)
        for feature in self.features:
            merged.update(feature.dev_dependencies)
        return tuple(sorted(merged))


@dataclass(frozen=True)
class ValidationResult:
    """Uniform outcome of every validation check."""

    is_valid: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(False, message)

    def __bool__(self) -> bool:
        return self.is_valid


class StageStatus(str, Enum):
    """Result of an optional, best-effort pipeline stage."""

    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class StageOutcome:
    status: StageStatus
    reason: str | None = None

    @classmethod
    def skipped(cls, reason: str | None = None) -> "StageOutcome":
        return cls(StageStatus.SKIPPED, reason)

    @classmethod
    def succeeded(cls) -> "StageOutcome":
        return cls(StageStatus.SUCCEEDED)

    @classmethod
    def failed(cls, reason: str) -> "StageOutcome":
        return cls(StageStatus.FAILED, reason)


@dataclass
class RunSummary:
    """What a completed run produced, used for the final report."""

    project_path: Path
    config: ProjectConfig
    install: StageOutcome
    git: StageOutcome
    files: list[Path] = field(default_factory=list)
