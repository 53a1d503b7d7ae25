"""Configuration for the scaffolding pipeline.

Settings that come from the host (working directory, registry location, log
level) are resolved here once and handed to each component explicitly.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

__all__ = (
    "DEFAULT_PORT",
    "DEFAULT_REGISTRY_TIMEOUT",
    "DEFAULT_REGISTRY_URL",
    "DEFAULT_TYPESCRIPT_VERSION",
    "LoggingConfig",
    "ProjectConfig",
    "RegistryConfig",
    "ScaffoldConfig",
)


DEFAULT_TYPESCRIPT_VERSION = "5.2.2"
DEFAULT_PORT = 3000
DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"
DEFAULT_REGISTRY_TIMEOUT = 10.0


@dataclass(frozen=True)
class ProjectConfig:
    """Answers collected from the operator.

    Attributes:
        name: Project name, also the name of the generated directory.
        typescript_version: TypeScript version pinned in ``devDependencies``.
        use_eslint: Whether the ESLint block and config file are generated.
        port: Fallback port the generated server listens on when ``PORT`` is unset.
    """

    name: str
    typescript_version: str = DEFAULT_TYPESCRIPT_VERSION
    use_eslint: bool = True
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        if not self.name:
            msg = "Project name is required"
            raise ValueError(msg)


def get_default_log_level() -> "Literal['quiet', 'normal', 'verbose']":
    """Get default log level from environment variable.

    Checks CREATE_DOMUS_APP_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv("CREATE_DOMUS_APP_LOG_LEVEL", "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


@dataclass
class LoggingConfig:
    """Logging configuration for console output.

    Attributes:
        level: Logging verbosity level.
            - "quiet": Errors only
            - "normal": Warnings and operator messages (default)
            - "verbose": Debug output, including registry and probe details
            Can also be set via CREATE_DOMUS_APP_LOG_LEVEL environment variable.
    """

    level: "Literal['quiet', 'normal', 'verbose']" = field(default_factory=get_default_log_level)

    @property
    def python_level(self) -> int:
        match self.level:
            case "quiet":
                return logging.ERROR
            case "verbose":
                return logging.DEBUG
            case _:
                return logging.WARNING


def _resolve_registry_url() -> str:
    return os.getenv("CREATE_DOMUS_APP_REGISTRY", DEFAULT_REGISTRY_URL).rstrip("/") or DEFAULT_REGISTRY_URL


def _resolve_registry_timeout() -> float:
    env_value = os.getenv("CREATE_DOMUS_APP_REGISTRY_TIMEOUT")
    if env_value is None or not env_value.strip():
        return DEFAULT_REGISTRY_TIMEOUT
    try:
        return float(env_value)
    except ValueError:
        msg = f"Invalid CREATE_DOMUS_APP_REGISTRY_TIMEOUT: {env_value!r}. Expected a number of seconds"
        raise ValueError(msg) from None


@dataclass
class RegistryConfig:
    """npm registry settings.

    Attributes:
        url: Registry base URL (CREATE_DOMUS_APP_REGISTRY).
        timeout: Request timeout in seconds (CREATE_DOMUS_APP_REGISTRY_TIMEOUT).
    """

    url: str = field(default_factory=_resolve_registry_url)
    timeout: float = field(default_factory=_resolve_registry_timeout)


@dataclass
class ScaffoldConfig:
    """Settings for one scaffolding run.

    Attributes:
        cwd: Directory the project directory is created in.
        registry: Registry settings used for version validation.
        install: Whether dependencies are installed after generation.
        concurrent_detection: Probe package managers in the background while prompting.
        logging: Console logging settings.
    """

    cwd: Path = field(default_factory=Path.cwd)
    registry: RegistryConfig = field(default_factory=RegistryConfig)
    install: bool = True
    concurrent_detection: bool = True
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def project_dir(self, project: ProjectConfig) -> Path:
        """Resolve the directory a project is generated in.

        Returns:
            The absolute project directory.
        """
        return (self.cwd / project.name).resolve()
