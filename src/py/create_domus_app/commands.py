"""Scaffolding commands.

This module wires the prompt flow, file generation and dependency
installation into one pipeline.
"""

import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

from create_domus_app.exceptions import InstallError, PackageManagerNotFoundError
from create_domus_app.executor import PackageManagerKind, detect_package_manager, get_executor
from create_domus_app.prompts import ConfigCollector
from create_domus_app.registry import VersionValidator
from create_domus_app.scaffolding import build_artifacts, write_artifacts

if TYPE_CHECKING:
    import httpx

    from create_domus_app.config import ProjectConfig, ScaffoldConfig
    from create_domus_app.executor import PackageManagerExecutor, Runner
    from create_domus_app.prompts import ConfirmAsker, TextAsker

__all__ = ("ScaffoldResult", "create_project", "run_install")

logger = logging.getLogger("create_domus_app")


@dataclass
class ScaffoldResult:
    """Outcome of a scaffolding run.

    Attributes:
        project: The collected configuration.
        project_dir: Directory the project was written to.
        files: Written files, in generation order.
        package_manager: Package manager used for installation, None when installation was skipped.
        installed: Whether the install command succeeded.
    """

    project: "ProjectConfig"
    project_dir: Path
    files: list[Path]
    package_manager: "PackageManagerKind | None" = None
    installed: bool = False


def run_install(executor: "PackageManagerExecutor", project_dir: Path) -> bool:
    """Install dependencies of a generated project.

    A failed installation is reported but leaves the generated files in place.

    Returns:
        True if the install command succeeded.
    """
    from create_domus_app.utils import console

    console.rule(f"[cyan]Installing dependencies with {executor.bin_name}[/]", align="left")
    try:
        executor.install(project_dir)
    except (InstallError, PackageManagerNotFoundError) as e:
        logger.debug("Install in %s failed", project_dir, exc_info=True)
        console.print(f"[bold red]Dependency installation failed: {e!s}[/]")
        return False
    return True


def create_project(
    config: "ScaffoldConfig",
    *,
    ask_text: "TextAsker | None" = None,
    ask_confirm: "ConfirmAsker | None" = None,
    http_client: "httpx.Client | None" = None,
    runner: "Runner | None" = None,
    detector: "Callable[[], PackageManagerKind] | None" = None,
) -> ScaffoldResult:
    """Collect answers, generate the project and install its dependencies.

    Package manager detection has no dependency on the answers, so with
    ``config.concurrent_detection`` it runs on a worker thread while the
    operator answers the prompts. Its result is only read after the files are
    written.

    Args:
        config: Run settings.
        ask_text: Text prompt function passed to the collector.
        ask_confirm: Yes/no prompt function passed to the collector.
        http_client: Client used for registry lookups.
        runner: Subprocess runner used for probes and installation.
        detector: Package manager detection function. Defaults to probing the host.

    Raises:
        ScaffoldCancelledError: If the operator aborts a prompt. Nothing is written.
        ArtifactWriteError: If a file cannot be written.

    Returns:
        The outcome of the run.
    """
    from create_domus_app.utils import console

    detect = detector or partial(detect_package_manager, runner=runner)
    pool: "ThreadPoolExecutor | None" = None
    detection: "Future[PackageManagerKind] | None" = None
    if config.install and config.concurrent_detection:
        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="create-domus-app-detect")
        detection = pool.submit(detect)

    try:
        with VersionValidator(config.registry, client=http_client) as validator:
            project = ConfigCollector(validator, ask_text=ask_text, ask_confirm=ask_confirm).run()

        project_dir = config.project_dir(project)
        files = write_artifacts(project_dir, build_artifacts(project))
        console.print(f"\n[bold green]Project [bold]{project.name}[/bold] created successfully![/]\n")
        result = ScaffoldResult(project=project, project_dir=project_dir, files=files)
        if not config.install:
            return result

        result.package_manager = detection.result() if detection is not None else detect()
        result.installed = run_install(get_executor(result.package_manager, runner=runner), project_dir)
        return result
    finally:
        if pool is not None:
            pool.shutdown(wait=False, cancel_futures=True)
