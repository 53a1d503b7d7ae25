"""``package.json`` assembly.

The manifest is built from two named parts: the base manifest every project
gets, and the ESLint overlay. ``merge_manifest`` applies an overlay block by
block, so a feature is either present with all of its keys or not at all.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from create_domus_app.config import ProjectConfig

__all__ = (
    "BASE_DEPENDENCIES",
    "BASE_DEV_DEPENDENCIES",
    "BASE_SCRIPTS",
    "ESLINT_OVERLAY",
    "ManifestOverlay",
    "build_base_manifest",
    "build_manifest",
    "merge_manifest",
)

BASE_SCRIPTS: dict[str, str] = {
    "build": "tsc",
    "dev": "ts-node-dev --respawn --transpile-only index.ts",
    "test": 'echo "Error: no test specified" && exit 1',
}

BASE_DEPENDENCIES: dict[str, str] = {
    "@domusjs/core": "^0.1.0",
    "@domusjs/infrastructure": "^0.1.0",
    "express": "^5.1.0",
    "reflect-metadata": "^0.2.2",
    "tsyringe": "^4.9.1",
}

BASE_DEV_DEPENDENCIES: dict[str, str] = {
    "@types/express": "^5.0.3",
    "@types/node": "^22.15.3",
    "ts-node": "^10.9.2",
    "ts-node-dev": "^2.0.0",
}


def _str_dict_factory() -> dict[str, str]:
    return {}


@dataclass(frozen=True)
class ManifestOverlay:
    """Optional manifest blocks contributed by a feature.

    Attributes:
        name: Feature name, used for logging only.
        scripts: Entries merged into ``scripts``.
        dev_dependencies: Entries merged into ``devDependencies``.
    """

    name: str
    scripts: dict[str, str] = field(default_factory=_str_dict_factory)
    dev_dependencies: dict[str, str] = field(default_factory=_str_dict_factory)


ESLINT_OVERLAY = ManifestOverlay(
    name="eslint",
    scripts={"lint": "eslint . --ext .ts"},
    dev_dependencies={
        "eslint": "^9.29.0",
        "@typescript-eslint/parser": "^8.34.1",
        "@typescript-eslint/eslint-plugin": "^8.34.1",
    },
)


def build_base_manifest(project: "ProjectConfig") -> dict[str, Any]:
    """Build the manifest shared by every generated project.

    Returns:
        An ordered ``package.json`` document.
    """
    return {
        "name": project.name,
        "description": "",
        "version": "0.1.0",
        "main": "index.js",
        "scripts": dict(BASE_SCRIPTS),
        "keywords": [],
        "author": "",
        "license": "MIT",
        "dependencies": dict(BASE_DEPENDENCIES),
        "devDependencies": {**BASE_DEV_DEPENDENCIES, "typescript": project.typescript_version},
    }


def _merge_block(base: Mapping[str, str], extra: Mapping[str, str], before: "str | None" = None) -> dict[str, str]:
    duplicates = base.keys() & extra.keys()
    if duplicates:
        msg = f"Overlay redefines existing keys: {sorted(duplicates)}"
        raise ValueError(msg)
    if before is None or before not in base:
        return {**base, **extra}
    merged: dict[str, str] = {}
    for key, value in base.items():
        if key == before:
            merged.update(extra)
        merged[key] = value
    return merged


def merge_manifest(base: Mapping[str, Any], overlay: "ManifestOverlay | None") -> dict[str, Any]:
    """Combine a base manifest with an optional overlay.

    The base is not modified. Overlay scripts go ahead of the ``test`` script;
    other overlay keys are appended after the base keys of their block. An
    overlay may only add keys; redefining a base key is an error.

    Args:
        base: The base manifest.
        overlay: The overlay to apply, or None for the base manifest alone.

    Raises:
        ValueError: If the overlay redefines a key of the base manifest.

    Returns:
        A new manifest document.
    """
    merged = {key: dict(value) if isinstance(value, Mapping) else value for key, value in base.items()}
    if overlay is None:
        return merged
    merged["scripts"] = _merge_block(merged["scripts"], overlay.scripts, before="test")
    merged["devDependencies"] = _merge_block(merged["devDependencies"], overlay.dev_dependencies)
    return merged


def build_manifest(project: "ProjectConfig") -> dict[str, Any]:
    """Build the ``package.json`` document for a project.

    Returns:
        The base manifest, with the ESLint overlay applied when enabled.
    """
    overlay = ESLINT_OVERLAY if project.use_eslint else None
    return merge_manifest(build_base_manifest(project), overlay)
