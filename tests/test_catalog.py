"""Tests for the template and feature catalogs."""

import dataclasses

import pytest

from create_shipkit_app import catalog
from create_shipkit_app.models import FeatureCategory


def test_templates_available():
    assert catalog.template_names() == ["minimal", "full"]
    assert catalog.DEFAULT_TEMPLATE in catalog.TEMPLATES


def test_template_default_features_exist_in_catalog():
    for template in catalog.get_available_templates():
        for feature in template.features:
            assert feature in catalog.FEATURES, f"{template.name} references {feature}"


def test_every_category_is_represented():
    categories = {feature.category for feature in catalog.get_available_features()}
    assert categories == set(FeatureCategory)


def test_lookup_by_name():
    assert catalog.get_template_by_name("minimal").name == "minimal"
    assert catalog.get_feature_by_name("payments-stripe").category is FeatureCategory.PAYMENTS
    assert catalog.get_template_by_name("nope") is None
    assert catalog.get_feature_by_name("nope") is None


def test_registries_are_read_only():
    with pytest.raises(TypeError):
        catalog.TEMPLATES["custom"] = catalog.TEMPLATES["minimal"]
    with pytest.raises(TypeError):
        del catalog.FEATURES["ui-shadcn"]


def test_entries_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.TEMPLATES["full"].name = "changed"
    with pytest.raises(TypeError):
        catalog.TEMPLATES["full"].optional_paths[FeatureCategory.UI] = ("x",)


def test_feature_files_are_bundled():
    from create_shipkit_app.materializer import ProjectMaterializer

    materializer = ProjectMaterializer()
    for feature in catalog.get_available_features():
        feature_dir = materializer.feature_template_dir(feature.name)
        for rel_name in feature.files:
            assert (feature_dir / rel_name).is_file() or (
                feature_dir / f"{rel_name}.j2"
            ).is_file(), f"{feature.name} is missing {rel_name}"


def test_templates_are_bundled():
    from create_shipkit_app.materializer import ProjectMaterializer

    materializer = ProjectMaterializer()
    for name in catalog.template_names():
        assert materializer.app_template_dir(name).is_dir()
