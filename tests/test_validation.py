"""Tests for input and environment validation."""

from unittest.mock import patch

import pytest

from create_shipkit_app.validation import (
    MIN_NODE_MAJOR,
    get_node_version,
    parse_major_version,
    unknown_features,
    validate_features,
    validate_project_directory,
    validate_project_name,
    validate_system_requirements,
)


class TestValidateProjectName:
    def test_valid_name(self):
        result = validate_project_name("my-app")
        assert result.is_valid
        assert result.message is None

    def test_uppercase_and_space_rejected(self):
        result = validate_project_name("My App")
        assert not result.is_valid
        assert result.message.startswith('Invalid project name "My App":')
        # Every violation is reported in one message
        assert "URL-friendly" in result.message
        assert "capital letters" in result.message

    def test_leading_dot_rejected(self):
        assert not validate_project_name(".hidden")


class TestValidateProjectDirectory:
    def test_nonexistent_path_is_valid(self, tmp_path):
        assert validate_project_directory(tmp_path / "new-project").is_valid

    def test_empty_directory_is_valid(self, tmp_path):
        target = tmp_path / "empty"
        target.mkdir()
        assert validate_project_directory(target).is_valid

    def test_non_empty_directory_is_invalid(self, tmp_path):
        target = tmp_path / "existing"
        target.mkdir()
        (target / "README.md").write_text("hello")

        result = validate_project_directory(target)

        assert not result.is_valid
        assert "is not empty" in result.message

    def test_hidden_file_counts_as_content(self, tmp_path):
        (tmp_path / ".env").write_text("X=1")
        assert not validate_project_directory(tmp_path)

    def test_file_path_is_invalid(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("not a directory")

        result = validate_project_directory(target)

        assert not result.is_valid
        assert "is not a directory" in result.message

    def test_does_not_create_directory(self, tmp_path):
        target = tmp_path / "probe-only"
        validate_project_directory(target)
        assert not target.exists()

    def test_unreadable_directory_reported(self, tmp_path):
        with patch("pathlib.Path.iterdir", side_effect=PermissionError("denied")):
            result = validate_project_directory(tmp_path)

        assert not result.is_valid
        assert "Cannot access directory" in result.message


class TestSystemRequirements:
    @pytest.mark.parametrize("version", ["v18.0.0", "v20.11.1", "22.1.0", "v18"])
    def test_supported_versions(self, version):
        assert validate_system_requirements(version).is_valid

    @pytest.mark.parametrize("version", ["v16.20.2", "v14.0.0", "garbage"])
    def test_unsupported_versions(self, version):
        result = validate_system_requirements(version)
        assert not result.is_valid
        assert f"Node.js {MIN_NODE_MAJOR}.0.0 or higher is required" in result.message
        assert version in result.message

    def test_probes_node_when_version_omitted(self, completed):
        with patch("subprocess.run", return_value=completed(stdout="v20.5.0\n")) as mock_run:
            result = validate_system_requirements()

        assert result.is_valid
        assert mock_run.call_args[0][0] == ["node", "--version"]

    def test_missing_node(self):
        with patch("subprocess.run", side_effect=FileNotFoundError("node")):
            result = validate_system_requirements()

        assert not result.is_valid
        assert "no Node.js runtime was found" in result.message

    def test_node_version_probe_failure(self, completed):
        with patch("subprocess.run", return_value=completed(returncode=1)):
            assert get_node_version() is None

    def test_parse_major_version(self):
        assert parse_major_version("v20.11.1") == 20
        assert parse_major_version("18") == 18
        assert parse_major_version("not-a-version") is None


class TestValidateFeatures:
    def test_names_exactly_the_unknown_feature(self):
        result = validate_features(["auth", "unknown"], ["auth", "db"])

        assert not result.is_valid
        assert result.message.startswith("Invalid features: unknown.")
        assert unknown_features(["auth", "unknown"], ["auth", "db"]) == ["unknown"]

    def test_subset_is_valid(self):
        assert validate_features(["auth"], ["auth", "db"]).is_valid

    def test_empty_request_is_valid(self):
        assert validate_features([], ["auth"]).is_valid

    def test_lists_every_unknown_feature_once(self):
        result = validate_features(["x", "auth", "y", "x"], ["auth"])

        assert "Invalid features: x, y." in result.message
        assert "Available features: auth" in result.message
