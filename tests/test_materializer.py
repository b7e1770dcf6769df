"""Tests for ProjectMaterializer."""

import json
from unittest.mock import patch

import pytest

from create_shipkit_app import catalog
from create_shipkit_app.errors import DirectoryNotEmptyError, MaterializationError
from create_shipkit_app.materializer import ProjectMaterializer, is_text_file, output_name
from create_shipkit_app.models import PackageManager, ProjectConfig, Template


def make_config(template="minimal", features=None, env_vars=None, name="demo-app", pm="npm"):
    template = catalog.TEMPLATES[template] if isinstance(template, str) else template
    names = template.features if features is None else features
    return ProjectConfig(
        name=name,
        template=template,
        features=tuple(catalog.FEATURES[n] for n in names),
        package_manager=PackageManager(pm),
        env_vars=env_vars or {},
    )


@pytest.fixture
def materializer():
    return ProjectMaterializer()


class TestFileClassification:
    def test_text_files(self, tmp_path):
        assert is_text_file(tmp_path / "page.tsx")
        assert is_text_file(tmp_path / "README.MD")
        assert is_text_file(tmp_path / "gitignore")
        assert is_text_file(tmp_path / "anything.bin.j2")
        assert not is_text_file(tmp_path / "favicon.png")

    def test_output_names(self, tmp_path):
        assert output_name(tmp_path / "gitignore") == ".gitignore"
        assert output_name(tmp_path / "layout.tsx.j2") == "layout.tsx"
        assert output_name(tmp_path / "page.tsx") == "page.tsx"


class TestTemplateRendering:
    def test_minimal_substitutes_project_name(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        materializer.materialize(make_config(), project)

        page = (project / "src" / "app" / "page.tsx").read_text()
        assert "Welcome to demo-app" in page
        assert "{{" not in page
        assert "Template: minimal" in page
        assert "Package Manager: npm" in page

    def test_binary_files_copied_verbatim(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        materializer.materialize(make_config(), project)

        source = materializer.app_template_dir("minimal") / "public" / "favicon.png"
        assert (project / "public" / "favicon.png").read_bytes() == source.read_bytes()

    def test_gitignore_renamed(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        materializer.materialize(make_config("full"), project)

        assert (project / ".gitignore").is_file()
        assert not (project / "gitignore").exists()

    def test_creates_missing_parent_directories(self, materializer, tmp_path):
        project = tmp_path / "nested" / "deeper" / "demo-app"
        materializer.materialize(make_config(), project)
        assert (project / "package.json").is_file()

    def test_returns_written_files(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        files = materializer.materialize(make_config(), project)

        assert project / "package.json" in files
        assert project / "src" / "app" / "page.tsx" in files
        assert all(path.is_file() for path in files)


class TestFeatureFiles:
    def test_feature_files_written(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        materializer.materialize(make_config(features=["auth-nextauth", "payments-stripe"]), project)

        assert (project / "src" / "lib" / "auth.ts").is_file()
        assert (project / "src" / "middleware.ts").is_file()
        assert (project / "src" / "lib" / "stripe.ts").is_file()

    def test_shared_feature_file_listed_once(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        files = materializer.materialize(
            make_config(features=["auth-supabase", "database-supabase"]), project
        )

        assert len(files) == len(set(files))
        assert files.count(project / "src" / "lib" / "supabase.ts") == 1

    def test_unselected_feature_files_absent(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        materializer.materialize(make_config(features=["ui-shadcn"]), project)

        assert (project / "components.json").is_file()
        assert not (project / "src" / "lib" / "auth.ts").exists()

    def test_authentication_pages_pruned_without_auth_feature(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        materializer.materialize(make_config("full", features=["ui-shadcn"]), project)

        assert not (project / "src" / "app" / "(authentication)").exists()
        assert (project / "src" / "app" / "dashboard" / "page.tsx").is_file()

    def test_authentication_pages_kept_with_auth_feature(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        materializer.materialize(make_config("full"), project)

        assert (project / "src" / "app" / "(authentication)" / "sign-in" / "page.tsx").is_file()


class TestGeneratedFiles:
    def test_package_json(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        config = make_config(features=["payments-stripe"])
        materializer.materialize(config, project)

        package = json.loads((project / "package.json").read_text())
        assert package["name"] == "demo-app"
        assert package["private"] is True
        assert package["scripts"]["dev"] == "next dev"
        assert set(package["dependencies"]) == set(config.dependencies)
        assert "stripe" in package["dependencies"]
        assert set(package["devDependencies"]) == set(config.dev_dependencies)

    def test_env_files(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        config = make_config(
            features=["email-resend"], env_vars={"RESEND_API_KEY": "re_123"}
        )
        materializer.materialize(config, project)

        assert (project / ".env.local").read_text() == "RESEND_API_KEY=re_123\n"
        assert (project / ".env.example").read_text() == "RESEND_API_KEY=your_resend_api_key_here\n"

    def test_no_env_files_without_variables(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        materializer.materialize(make_config(features=[]), project)

        assert not (project / ".env.local").exists()
        assert not (project / ".env.example").exists()


class TestFailures:
    def test_refuses_non_empty_directory(self, materializer, tmp_path):
        project = tmp_path / "demo-app"
        project.mkdir()
        (project / "keep.txt").write_text("mine")

        with pytest.raises(DirectoryNotEmptyError):
            materializer.materialize(make_config(), project)

        assert [p.name for p in project.iterdir()] == ["keep.txt"]

    def test_write_failure_names_the_file(self, materializer, tmp_path):
        project = tmp_path / "demo-app"

        with patch("pathlib.Path.write_text", side_effect=PermissionError("denied")):
            with pytest.raises(MaterializationError) as exc_info:
                materializer.materialize(make_config(), project)

        assert str(project) in str(exc_info.value.path)
        assert "denied" in exc_info.value.message

    def test_broken_template_written_raw(self, tmp_path):
        root = tmp_path / "templates"
        app_dir = root / "apps" / "custom"
        app_dir.mkdir(parents=True)
        (app_dir / "broken.md").write_text("Hello {{ projectName\n")
        (app_dir / "ok.md").write_text("Hello {{ projectName }}\n")

        template = Template(name="custom", description="Custom")
        project = tmp_path / "demo-app"
        ProjectMaterializer(template_root=root).materialize(
            make_config(template, features=[]), project
        )

        assert (project / "broken.md").read_text() == "Hello {{ projectName\n"
        assert (project / "ok.md").read_text() == "Hello demo-app\n"

    def test_missing_template_directory(self, tmp_path):
        root = tmp_path / "templates"
        root.mkdir()
        template = Template(name="ghost", description="Not bundled")

        with pytest.raises(MaterializationError, match="ghost"):
            ProjectMaterializer(template_root=root).materialize(
                make_config(template, features=[]), tmp_path / "demo-app"
            )
