"""Tests for create_domus_app.config module."""

import logging
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from create_domus_app.config import (
    DEFAULT_REGISTRY_TIMEOUT,
    DEFAULT_REGISTRY_URL,
    LoggingConfig,
    ProjectConfig,
    RegistryConfig,
    ScaffoldConfig,
)


def test_project_config_defaults() -> None:
    project = ProjectConfig(name="my-app")
    assert project.typescript_version == "5.2.2"
    assert project.use_eslint is True
    assert project.port == 3000


def test_project_config_is_immutable() -> None:
    project = ProjectConfig(name="my-app")
    with pytest.raises(FrozenInstanceError):
        project.name = "other"  # type: ignore[misc]


def test_project_config_requires_name() -> None:
    with pytest.raises(ValueError, match="Project name is required"):
        ProjectConfig(name="")


def test_registry_config_defaults() -> None:
    config = RegistryConfig()
    assert config.url == DEFAULT_REGISTRY_URL
    assert config.timeout == DEFAULT_REGISTRY_TIMEOUT


def test_registry_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CREATE_DOMUS_APP_REGISTRY", "https://npm.internal/")
    monkeypatch.setenv("CREATE_DOMUS_APP_REGISTRY_TIMEOUT", "2.5")

    config = RegistryConfig()

    assert config.url == "https://npm.internal"
    assert config.timeout == 2.5


def test_registry_config_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CREATE_DOMUS_APP_REGISTRY_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="CREATE_DOMUS_APP_REGISTRY_TIMEOUT"):
        RegistryConfig()


@pytest.mark.parametrize(
    ("env_value", "expected_level", "python_level"),
    [
        ("quiet", "quiet", logging.ERROR),
        ("VERBOSE", "verbose", logging.DEBUG),
        ("normal", "normal", logging.WARNING),
        ("loud", "normal", logging.WARNING),
    ],
)
def test_logging_config_from_env(
    monkeypatch: pytest.MonkeyPatch, env_value: str, expected_level: str, python_level: int
) -> None:
    monkeypatch.setenv("CREATE_DOMUS_APP_LOG_LEVEL", env_value)
    config = LoggingConfig()
    assert config.level == expected_level
    assert config.python_level == python_level


def test_scaffold_config_project_dir(tmp_path: Path) -> None:
    config = ScaffoldConfig(cwd=tmp_path)
    assert config.project_dir(ProjectConfig(name="my-app")) == (tmp_path / "my-app").resolve()
