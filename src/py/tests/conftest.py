import subprocess
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from create_domus_app.config import RegistryConfig

# Environment variables that may affect test behavior - clear before each test
_APP_ENV_VARS = [
    "CREATE_DOMUS_APP_REGISTRY",
    "CREATE_DOMUS_APP_REGISTRY_TIMEOUT",
    "CREATE_DOMUS_APP_LOG_LEVEL",
]

PUBLISHED_TYPESCRIPT_VERSIONS = {"5.2.2", "5.4.5"}


@pytest.fixture(autouse=True)
def clean_app_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear create-domus-app environment variables before each test for isolation."""
    for var in _APP_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def registry_config() -> RegistryConfig:
    return RegistryConfig(url="https://registry.test", timeout=1.0)


@pytest.fixture
def registry_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def registry_client(registry_requests: list[httpx.Request]) -> Generator[httpx.Client, None, None]:
    """A client answering 200 for published TypeScript versions and 404 otherwise."""

    def handler(request: httpx.Request) -> httpx.Response:
        registry_requests.append(request)
        package, _, version = request.url.path.strip("/").rpartition("/")
        if package == "typescript" and version in PUBLISHED_TYPESCRIPT_VERSIONS:
            return httpx.Response(200, json={"name": package, "version": version})
        return httpx.Response(404, json={"error": "version not found"})

    client = httpx.Client(transport=httpx.MockTransport(handler))
    yield client
    client.close()


def make_runner(
    available: "set[str] | None" = None, install_code: int = 0
) -> "tuple[Callable[..., subprocess.CompletedProcess[Any]], list[list[str]]]":
    """Build a fake subprocess runner.

    Version checks succeed for executables in ``available``. Install commands
    return ``install_code``.
    """
    available = available or set()
    calls: list[list[str]] = []

    def runner(command: list[str], **kwargs: Any) -> "subprocess.CompletedProcess[Any]":
        calls.append(list(command))
        if command[-1] == "--version":
            return subprocess.CompletedProcess(command, 0 if command[0] in available else 127)
        return subprocess.CompletedProcess(command, install_code)

    return runner, calls


@pytest.fixture
def runner_factory() -> "Callable[..., tuple[Callable[..., subprocess.CompletedProcess[Any]], list[list[str]]]]":
    return make_runner
