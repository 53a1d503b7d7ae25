"""JavaScript package manager executors.

This module provides executor classes for the package managers a generated
project can be installed with (pnpm, Yarn, Bun and npm) and the detection
logic that picks one of them.
"""

import logging
import platform
import shutil
import subprocess
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

from create_domus_app.exceptions import InstallError, PackageManagerNotFoundError

__all__ = (
    "PRIORITY",
    "BunExecutor",
    "NpmExecutor",
    "PackageManagerExecutor",
    "PackageManagerKind",
    "PnpmExecutor",
    "YarnExecutor",
    "detect_package_manager",
    "get_executor",
)

logger = logging.getLogger("create_domus_app")

Runner = Callable[..., "subprocess.CompletedProcess[Any]"]


class PackageManagerKind(str, Enum):
    """Supported package managers."""

    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"
    NPM = "npm"


PRIORITY: tuple[PackageManagerKind, ...] = (PackageManagerKind.PNPM, PackageManagerKind.YARN, PackageManagerKind.BUN)
"""Probe order. ``NPM`` is not probed, it is the fallback."""

FALLBACK = PackageManagerKind.NPM


def _shell() -> bool:
    return platform.system() == "Windows"


class PackageManagerExecutor:
    """Base class for package manager executors."""

    kind: ClassVar[PackageManagerKind]

    def __init__(self, executable_path: "Path | str | None" = None, runner: "Runner | None" = None) -> None:
        self.executable_path = executable_path
        self.runner = runner

    @property
    def bin_name(self) -> str:
        return self.kind.value

    def _run(self, command: list[str], **kwargs: Any) -> "subprocess.CompletedProcess[Any]":
        runner = self.runner or subprocess.run
        return runner(command, shell=_shell(), check=False, **kwargs)

    def _resolve_executable(self) -> str:
        if self.executable_path:
            return str(self.executable_path)
        path = shutil.which(self.bin_name)
        if path is None:
            raise PackageManagerNotFoundError(self.bin_name)
        return path

    @property
    def version_command(self) -> list[str]:
        """Get the probe command (e.g., pnpm --version)."""
        return [self.bin_name, "--version"]

    @property
    def install_command(self) -> list[str]:
        """Get the install command (e.g., pnpm install)."""
        return [self.bin_name, "install"]

    @property
    def dev_command(self) -> list[str]:
        """Get the command that starts the generated dev server (e.g., npm run dev)."""
        return [self.bin_name, "run", "dev"]

    def is_available(self) -> bool:
        """Probe for the executable by running its version command.

        Output is discarded. A missing executable or a non-zero exit means unavailable.

        Returns:
            True if the probe exited successfully.
        """
        try:
            process = self._run(
                self.version_command, stdin=subprocess.DEVNULL, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
            )
        except OSError as e:
            logger.debug("Probe %s failed: %s", self.version_command, e)
            return False
        logger.debug("Probe %s exited with %s", self.version_command, process.returncode)
        return process.returncode == 0

    def install(self, cwd: Path) -> None:
        """Install dependencies with standard streams attached to the terminal.

        Raises:
            PackageManagerNotFoundError: If the executable cannot be found.
            InstallError: If the install command cannot be started or exits with a non-zero status.
        """
        command = [self._resolve_executable(), *self.install_command[1:]]
        try:
            process = self._run(command, cwd=cwd)
        except FileNotFoundError:
            raise PackageManagerNotFoundError(self.bin_name) from None
        except OSError as e:
            raise InstallError(command, None, e.strerror or str(e)) from e
        if process.returncode != 0:
            raise InstallError(command, process.returncode)


class PnpmExecutor(PackageManagerExecutor):
    """PNPM executor."""

    kind = PackageManagerKind.PNPM


class YarnExecutor(PackageManagerExecutor):
    """Yarn executor."""

    kind = PackageManagerKind.YARN


class BunExecutor(PackageManagerExecutor):
    """Bun executor."""

    kind = PackageManagerKind.BUN


class NpmExecutor(PackageManagerExecutor):
    """npm executor."""

    kind = PackageManagerKind.NPM


_EXECUTORS: dict[PackageManagerKind, type[PackageManagerExecutor]] = {
    PackageManagerKind.PNPM: PnpmExecutor,
    PackageManagerKind.YARN: YarnExecutor,
    PackageManagerKind.BUN: BunExecutor,
    PackageManagerKind.NPM: NpmExecutor,
}


def get_executor(kind: "PackageManagerKind | str", runner: "Runner | None" = None) -> PackageManagerExecutor:
    """Create the executor for a package manager.

    Returns:
        An executor instance for ``kind``.
    """
    return _EXECUTORS[PackageManagerKind(kind)](runner=runner)


def detect_package_manager(
    candidates: "Sequence[PackageManagerKind]" = PRIORITY,
    runner: "Runner | None" = None,
) -> PackageManagerKind:
    """Select the first available package manager.

    Candidates are probed in order and probing stops at the first success.

    Args:
        candidates: Package managers to probe, highest priority first.
        runner: Subprocess runner used for the probes. Defaults to ``subprocess.run``.

    Returns:
        The first candidate whose probe succeeded, otherwise npm.
    """
    for kind in candidates:
        if get_executor(kind, runner=runner).is_available():
            logger.debug("Detected package manager %s", kind.value)
            return kind
    logger.debug("No preferred package manager found, falling back to %s", FALLBACK.value)
    return FALLBACK
