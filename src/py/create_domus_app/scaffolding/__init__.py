"""Project scaffolding module for create-domus-app.

Generated projects contain:
- ``package.json`` (with an optional ESLint block)
- ``tsconfig.json``
- ``eslint.config.mjs`` (only when ESLint is enabled)
- ``index.ts``, ``server.ts`` and ``routes.ts`` stubs for an Express server
"""

from create_domus_app.scaffolding.generator import Artifact, build_artifacts, write_artifacts
from create_domus_app.scaffolding.manifest import ESLINT_OVERLAY, ManifestOverlay, build_manifest, merge_manifest

__all__ = [
    "ESLINT_OVERLAY",
    "Artifact",
    "ManifestOverlay",
    "build_artifacts",
    "build_manifest",
    "merge_manifest",
    "write_artifacts",
]
