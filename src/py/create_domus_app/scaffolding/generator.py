"""Project scaffolding generator.

This module renders a project's files in memory and writes them to disk.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import msgspec

from create_domus_app.exceptions import ArtifactWriteError
from create_domus_app.scaffolding.manifest import build_manifest
from create_domus_app.scaffolding.templates import ESLINT_CONFIG, ROUTES_TS, SERVER_TS, TSCONFIG, render_index_ts

if TYPE_CHECKING:
    from create_domus_app.config import ProjectConfig

__all__ = ("Artifact", "build_artifacts", "render_json", "write_artifacts")

logger = logging.getLogger("create_domus_app")

MANIFEST_FILE = "package.json"
TSCONFIG_FILE = "tsconfig.json"
ESLINT_CONFIG_FILE = "eslint.config.mjs"
INDEX_FILE = "index.ts"
SERVER_FILE = "server.ts"
ROUTES_FILE = "routes.ts"


@dataclass(frozen=True)
class Artifact:
    """A generated file.

    Attributes:
        relative_path: POSIX path relative to the project directory.
        content: Fully rendered file content.
    """

    relative_path: str
    content: str


def render_json(document: Any) -> str:
    """Render a JSON document with two-space indentation and a trailing newline.

    Key order of the input mappings is preserved.

    Returns:
        The JSON text.
    """
    return msgspec.json.format(msgspec.json.encode(document), indent=2).decode("utf-8") + "\n"


def build_artifacts(project: "ProjectConfig") -> tuple[Artifact, ...]:
    """Render every file of a project.

    The result depends only on ``project``; the order is fixed.

    Args:
        project: The collected project configuration.

    Returns:
        The artifacts, manifest first and source stubs last.
    """
    artifacts = [
        Artifact(MANIFEST_FILE, render_json(build_manifest(project))),
        Artifact(TSCONFIG_FILE, render_json(TSCONFIG)),
    ]
    if project.use_eslint:
        artifacts.append(Artifact(ESLINT_CONFIG_FILE, ESLINT_CONFIG))
    artifacts.extend(
        [
            Artifact(INDEX_FILE, render_index_ts(project.port)),
            Artifact(SERVER_FILE, SERVER_TS),
            Artifact(ROUTES_FILE, ROUTES_TS),
        ]
    )
    return tuple(artifacts)


def write_artifacts(output_dir: Path, artifacts: Iterable[Artifact]) -> list[Path]:
    """Write artifacts beneath ``output_dir``.

    The directory and any missing parents are created. Existing files are
    overwritten. Files written before a failure are left in place.

    Args:
        output_dir: Project directory.
        artifacts: Artifacts to write.

    Raises:
        ArtifactWriteError: If the directory or a file cannot be written.

    Returns:
        List of written file paths.
    """
    from create_domus_app.utils import console

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactWriteError(str(output_dir), e) from e

    written: list[Path] = []
    for artifact in artifacts:
        output_path = output_dir.joinpath(*Path(artifact.relative_path).parts)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(artifact.content, encoding="utf-8")
        except OSError as e:
            raise ArtifactWriteError(str(output_path), e) from e
        logger.debug("Wrote %d bytes to %s", len(artifact.content), output_path)
        console.print(f"[green]Created {output_path}[/]")
        written.append(output_path)
    return written
