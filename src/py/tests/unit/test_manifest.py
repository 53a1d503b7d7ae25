"""Tests for create_domus_app.scaffolding.manifest module."""

import pytest

from create_domus_app.config import ProjectConfig
from create_domus_app.scaffolding.manifest import (
    BASE_DEPENDENCIES,
    ESLINT_OVERLAY,
    ManifestOverlay,
    build_base_manifest,
    build_manifest,
    merge_manifest,
)

ESLINT_DEV_DEPENDENCIES = {"eslint", "@typescript-eslint/parser", "@typescript-eslint/eslint-plugin"}


def test_manifest_key_order() -> None:
    manifest = build_manifest(ProjectConfig(name="my-app"))
    assert list(manifest) == [
        "name",
        "description",
        "version",
        "main",
        "scripts",
        "keywords",
        "author",
        "license",
        "dependencies",
        "devDependencies",
    ]


def test_manifest_base_fields() -> None:
    manifest = build_manifest(ProjectConfig(name="my-app", typescript_version="5.4.5"))

    assert manifest["name"] == "my-app"
    assert manifest["version"] == "0.1.0"
    assert manifest["license"] == "MIT"
    assert manifest["dependencies"] == BASE_DEPENDENCIES
    assert manifest["devDependencies"]["typescript"] == "5.4.5"
    assert manifest["scripts"]["build"] == "tsc"
    assert manifest["scripts"]["dev"] == "ts-node-dev --respawn --transpile-only index.ts"


def test_manifest_without_eslint_has_no_overlay_keys() -> None:
    manifest = build_manifest(ProjectConfig(name="my-app", use_eslint=False))

    assert "lint" not in manifest["scripts"]
    assert not ESLINT_DEV_DEPENDENCIES & manifest["devDependencies"].keys()
    assert list(manifest["scripts"]) == ["build", "dev", "test"]


def test_manifest_with_eslint_has_every_overlay_key() -> None:
    manifest = build_manifest(ProjectConfig(name="my-app", use_eslint=True))

    assert manifest["scripts"]["lint"] == "eslint . --ext .ts"
    assert ESLINT_DEV_DEPENDENCIES <= manifest["devDependencies"].keys()
    assert manifest["devDependencies"]["eslint"] == "^9.29.0"
    assert manifest["devDependencies"]["@typescript-eslint/parser"] == "^8.34.1"
    assert manifest["devDependencies"]["@typescript-eslint/eslint-plugin"] == "^8.34.1"


def test_manifest_with_eslint_key_order() -> None:
    manifest = build_manifest(ProjectConfig(name="my-app", use_eslint=True))

    assert list(manifest["scripts"]) == ["build", "dev", "lint", "test"]
    assert list(manifest["devDependencies"]) == [
        "@types/express",
        "@types/node",
        "ts-node",
        "ts-node-dev",
        "typescript",
        "eslint",
        "@typescript-eslint/parser",
        "@typescript-eslint/eslint-plugin",
    ]


def test_manifest_overlay_adds_exactly_its_keys() -> None:
    project = ProjectConfig(name="my-app")
    base = build_base_manifest(project)
    merged = merge_manifest(base, ESLINT_OVERLAY)

    assert merged["scripts"].keys() - base["scripts"].keys() == set(ESLINT_OVERLAY.scripts)
    assert merged["devDependencies"].keys() - base["devDependencies"].keys() == set(ESLINT_OVERLAY.dev_dependencies)
    assert merged["dependencies"] == base["dependencies"]


def test_merge_manifest_does_not_mutate_base() -> None:
    base = build_base_manifest(ProjectConfig(name="my-app"))
    merge_manifest(base, ESLINT_OVERLAY)
    assert "lint" not in base["scripts"]
    assert "eslint" not in base["devDependencies"]


def test_merge_manifest_without_overlay_returns_copy() -> None:
    base = build_base_manifest(ProjectConfig(name="my-app"))
    merged = merge_manifest(base, None)
    assert merged == base
    assert merged["scripts"] is not base["scripts"]


def test_merge_manifest_rejects_redefined_keys() -> None:
    base = build_base_manifest(ProjectConfig(name="my-app"))
    overlay = ManifestOverlay(name="broken", scripts={"build": "webpack"})
    with pytest.raises(ValueError, match="build"):
        merge_manifest(base, overlay)
