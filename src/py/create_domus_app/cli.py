import sys
from typing import TYPE_CHECKING

from click import command, option

from create_domus_app.__metadata__ import __version__

if TYPE_CHECKING:
    from create_domus_app.config import LoggingConfig


def _resolve_logging(verbose: bool, quiet: bool) -> "LoggingConfig":
    from create_domus_app.config import LoggingConfig

    if verbose:
        return LoggingConfig(level="verbose")
    if quiet:
        return LoggingConfig(level="quiet")
    return LoggingConfig()


@command(name="create-domus-app", help="Create a new DomusJS application.")
@option(
    "--no-install",
    help="Do not install dependencies after generating the project.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@option("--quiet", type=bool, help="Only show errors.", default=False, is_flag=True)
def create_domus_app(no_install: "bool", verbose: "bool", quiet: "bool") -> None:
    """Create a new DomusJS application in the current directory."""
    from pathlib import Path

    from create_domus_app.commands import create_project
    from create_domus_app.config import ScaffoldConfig
    from create_domus_app.exceptions import ArtifactWriteError, ScaffoldCancelledError
    from create_domus_app.executor import PackageManagerKind, get_executor
    from create_domus_app.utils import configure_logging, console

    logging_config = _resolve_logging(verbose, quiet)
    configure_logging(logging_config)
    config = ScaffoldConfig(cwd=Path.cwd(), install=not no_install, logging=logging_config)

    console.print(f"\n[bold bright_cyan]Create DomusJS App[/] [dim]v{__version__}[/]\n")
    try:
        result = create_project(config)
    except ScaffoldCancelledError as e:
        console.print(f"\n[red]{e!s}[/]\n")
        sys.exit(e.exit_code)
    except ArtifactWriteError as e:
        console.print(f"[bold red]{e!s}[/]")
        sys.exit(e.exit_code)

    executor = get_executor(result.package_manager or PackageManagerKind.NPM)
    console.print("\n[yellow]Next steps:[/]\n")
    console.print(f"[blue]   cd {result.project.name}[/]")
    console.print(f"[blue]   {' '.join(executor.dev_command)}[/]\n")
