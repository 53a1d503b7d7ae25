"""Create DomusJS App exception classes."""

__all__ = [
    "ArtifactWriteError",
    "CreateDomusAppError",
    "InstallError",
    "PackageManagerNotFoundError",
    "ScaffoldCancelledError",
]


class CreateDomusAppError(Exception):
    """Base exception for create-domus-app related errors."""


class ScaffoldCancelledError(CreateDomusAppError):
    """Raised when the operator aborts an interactive prompt."""

    exit_code = 1

    def __init__(self, field: "str | None" = None) -> None:
        self.field = field
        super().__init__("Operation cancelled by user.")


class ArtifactWriteError(CreateDomusAppError):
    """Raised when the project directory or a generated file cannot be written."""

    def __init__(self, path: str, error: OSError) -> None:
        """Initialize the exception.

        Args:
            path: The path that could not be created or written.
            error: The underlying operating system error.
        """
        super().__init__(f"Could not write {path!r}: {error.strerror or error!s}")
        self.path = path
        self.exit_code = error.errno or 1


class PackageManagerNotFoundError(CreateDomusAppError):
    """Raised when the package manager executable is not found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable {executable!r} not found.")
        self.executable = executable


class InstallError(CreateDomusAppError):
    """Raised when the dependency installation cannot be started or exits with a non-zero status."""

    def __init__(self, command: list[str], return_code: "int | None", reason: "str | None" = None) -> None:
        if return_code is None:
            message = f"Command {command!r} could not be started: {reason}."
        else:
            message = f"Command {command!r} failed with return code {return_code}."
        super().__init__(message)
        self.command = command
        self.return_code = return_code
