"""Create DomusJS App: interactive scaffolder for DomusJS services.

Running ``create-domus-app`` asks for a project name, a TypeScript version and
whether ESLint should be set up, writes the project files and installs the
dependencies with pnpm, Yarn, Bun or npm, whichever is found first.

Programmatic usage:
    from pathlib import Path

    from create_domus_app import ProjectConfig, build_artifacts, write_artifacts

    artifacts = build_artifacts(ProjectConfig(name="my-app", use_eslint=False))
    write_artifacts(Path("my-app"), artifacts)
"""

from create_domus_app.commands import ScaffoldResult, create_project
from create_domus_app.config import LoggingConfig, ProjectConfig, RegistryConfig, ScaffoldConfig
from create_domus_app.executor import PackageManagerKind, detect_package_manager
from create_domus_app.registry import VersionValidator
from create_domus_app.scaffolding import Artifact, build_artifacts, write_artifacts

__all__ = (
    "Artifact",
    "LoggingConfig",
    "PackageManagerKind",
    "ProjectConfig",
    "RegistryConfig",
    "ScaffoldConfig",
    "ScaffoldResult",
    "VersionValidator",
    "build_artifacts",
    "create_project",
    "detect_package_manager",
    "write_artifacts",
)
