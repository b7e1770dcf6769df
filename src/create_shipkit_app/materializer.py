"""Project materialization.

This module provides the ProjectMaterializer class which handles:
- Discovery of bundled templates in the create_shipkit_app package
- Rendering Jinja2 templates with project-specific context
- Layering feature files onto the template tree
- Generating package.json and environment files from the resolved plan
"""

import json
import shutil
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from create_shipkit_app.errors import DirectoryNotEmptyError, MaterializationError
from create_shipkit_app.installer import get_dev_command, get_install_command
from create_shipkit_app.models import ProjectConfig
from create_shipkit_app.utils.logger import get_logger
from create_shipkit_app.validation import validate_project_directory

logger = get_logger("materializer")

# Files with these extensions are rendered; everything else is copied as-is
TEXT_EXTENSIONS = frozenset(
    {
        ".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs", ".json", ".md", ".mdx",
        ".txt", ".yml", ".yaml", ".toml", ".ini", ".css", ".scss",
        ".sass", ".less", ".html", ".xml", ".svg",
    }
)  # fmt: skip

# Stored without the leading dot so packaging tools don't drop or apply them
RENAMED_FILES = {
    "gitignore": ".gitignore",
}

PACKAGE_SCRIPTS = {
    "build": "next build",
    "dev": "next dev",
    "start": "next start",
    "lint": "next lint",
    "type-check": "tsc --noEmit",
}


def is_text_file(path: Path) -> bool:
    """Check if a file should be processed as a template."""
    return (
        path.suffix == ".j2"
        or path.suffix.lower() in TEXT_EXTENSIONS
        or path.name in RENAMED_FILES
    )


def output_name(path: Path) -> str:
    """Name a template file gets in the generated project."""
    name = path.name
    if name.endswith(".j2"):
        name = name[: -len(".j2")]
    return RENAMED_FILES.get(name, name)


class ProjectMaterializer:
    """Writes a resolved ProjectConfig to disk.

    Attributes:
        template_root: Path to the bundled templates directory
        jinja_env: Jinja2 environment for template rendering
    """

    def __init__(self, template_root: Path | None = None):
        self.template_root = Path(template_root) if template_root else self._get_template_root()
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.template_root)),
            autoescape=select_autoescape(["html", "xml"]),
            keep_trailing_newline=True,
        )

    def _get_template_root(self) -> Path:
        """Get path to the bundled templates directory.

        Raises:
            RuntimeError: If templates directory cannot be found
        """
        import create_shipkit_app.templates

        template_path = Path(create_shipkit_app.templates.__file__).parent
        if template_path.exists():
            return template_path

        raise RuntimeError(
            "Could not locate create_shipkit_app templates directory. "
            "Ensure create-shipkit-app is properly installed."
        )

    def app_template_dir(self, template_name: str) -> Path:
        return self.template_root / "apps" / template_name

    def feature_template_dir(self, feature_name: str) -> Path:
        return self.template_root / "features" / feature_name

    def build_context(self, config: ProjectConfig) -> dict[str, Any]:
        """Variables available to every template."""
        return {
            "projectName": config.name,
            "template": config.template,
            "templateName": config.template.name,
            "features": config.features,
            "featureNames": list(config.feature_names),
            "packageManager": config.package_manager.value,
            "envVars": dict(config.env_vars),
            "installCommand": get_install_command(config.package_manager),
            "devCommand": get_dev_command(config.package_manager),
        }

    def materialize(self, config: ProjectConfig, project_path: Path) -> list[Path]:
        """Create the project tree for ``config`` at ``project_path``.

        Steps:
        1. Refuse a non-empty target, create it otherwise
        2. Render/copy the template's files
        3. Render/copy each selected feature's files
        4. Prune paths whose feature category was not selected
        5. Generate package.json
        6. Generate .env.local / .env.example

        Returns:
            Paths of the files written

        Raises:
            DirectoryNotEmptyError: If the target exists and is not empty
            MaterializationError: On any copy/write failure (names the file)
        """
        project_path = Path(project_path)
        check = validate_project_directory(project_path)
        if not check:
            raise DirectoryNotEmptyError(check.message)

        try:
            project_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MaterializationError(project_path, e) from e

        ctx = self.build_context(config)
        written: list[Path] = []

        # 2. Template files
        template_dir = self.app_template_dir(config.template.name)
        if not template_dir.is_dir():
            raise MaterializationError(
                template_dir, FileNotFoundError(f"Template '{config.template.name}' not found")
            )
        for source in sorted(template_dir.rglob("*")):
            if source.is_file():
                rel_path = source.relative_to(template_dir)
                written.append(self._write_file(source, rel_path, project_path, ctx))

        # 3. Feature files
        for feature in config.features:
            feature_dir = self.feature_template_dir(feature.name)
            for rel_name in feature.files:
                source = self._find_feature_source(feature_dir, rel_name)
                destination = self._write_file(source, Path(rel_name), project_path, ctx)
                if destination in written:
                    logger.debug(
                        f"{feature.name} replaced {rel_name} written by an earlier feature"
                    )
                else:
                    written.append(destination)

        # 4. Optional paths
        self._prune_optional_paths(config, project_path)
        written = [path for path in written if path.exists()]

        # 5-6. Generated files
        written.append(self._write_package_json(config, project_path))
        written.extend(self._write_env_files(config, project_path))

        logger.success(f"Created {len(written)} files in {project_path}")
        return written

    def _find_feature_source(self, feature_dir: Path, rel_name: str) -> Path:
        for candidate in (feature_dir / rel_name, feature_dir / f"{rel_name}.j2"):
            if candidate.is_file():
                return candidate
        raise MaterializationError(
            feature_dir / rel_name, FileNotFoundError("feature template file is missing")
        )

    def _write_file(self, source: Path, rel_path: Path, project_path: Path, ctx: dict) -> Path:
        """Render or copy one template file into the project."""
        destination = project_path / rel_path.parent / output_name(rel_path)

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MaterializationError(destination.parent, e) from e

        if not is_text_file(source):
            try:
                shutil.copy2(source, destination)
            except OSError as e:
                raise MaterializationError(destination, e) from e
            return destination

        try:
            content = source.read_text(encoding="utf-8")
        except OSError as e:
            raise MaterializationError(source, e) from e

        template_name = source.relative_to(self.template_root).as_posix()
        try:
            rendered = self.jinja_env.get_template(template_name).render(**ctx)
        except TemplateError as e:
            logger.warning(f"Failed to process template {rel_path}: {e}")
            rendered = content

        try:
            destination.write_text(rendered, encoding="utf-8")
        except OSError as e:
            raise MaterializationError(destination, e) from e
        logger.debug(f"Wrote {destination}")
        return destination

    def _prune_optional_paths(self, config: ProjectConfig, project_path: Path) -> None:
        selected = config.categories
        for category, paths in config.template.optional_paths.items():
            if category in selected:
                continue
            for rel_path in paths:
                target = project_path / rel_path
                try:
                    if target.is_dir():
                        shutil.rmtree(target)
                    elif target.exists():
                        target.unlink()
                    else:
                        continue
                except OSError as e:
                    raise MaterializationError(target, e) from e
                logger.debug(f"Removed {rel_path} (no {category.value} feature selected)")

    def _write_package_json(self, config: ProjectConfig, project_path: Path) -> Path:
        package_json = {
            "name": config.name,
            "version": "0.1.0",
            "private": True,
            "type": "module",
            "scripts": dict(PACKAGE_SCRIPTS),
            "dependencies": {dep: "latest" for dep in config.dependencies},
            "devDependencies": {dep: "latest" for dep in config.dev_dependencies},
        }

        path = project_path / "package.json"
        try:
            path.write_text(json.dumps(package_json, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise MaterializationError(path, e) from e
        return path

    def _write_env_files(self, config: ProjectConfig, project_path: Path) -> list[Path]:
        names = sorted(config.env_vars)
        if not names:
            return []

        env_local = "".join(f"{name}={config.env_vars[name]}\n" for name in names)
        env_example = "".join(f"{name}=your_{name.lower()}_here\n" for name in names)

        written = []
        for filename, content in ((".env.local", env_local), (".env.example", env_example)):
            path = project_path / filename
            try:
                path.write_text(content, encoding="utf-8")
            except OSError as e:
                raise MaterializationError(path, e) from e
            written.append(path)
        return written
