"""npm registry lookups.

Only existence of an exact ``package@version`` is checked. The lookup is
fail-closed: a timeout, a connection error and an HTTP error status are all
reported as "version does not exist". A flaky network therefore shows up as a
rejected version and the operator has to answer the prompt again.
"""

import logging
from types import TracebackType
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx

if TYPE_CHECKING:
    from create_domus_app.config import RegistryConfig

__all__ = ("VersionValidator",)

logger = logging.getLogger("create_domus_app")


class VersionValidator:
    """Check whether a version of a package is published on the registry."""

    def __init__(self, config: "RegistryConfig", client: "httpx.Client | None" = None) -> None:
        """Initialize the validator.

        Args:
            config: Registry URL and timeout.
            client: Optional pre-built client. The validator only closes clients it created.
        """
        self.config = config
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=httpx.Timeout(self.config.timeout))
        return self._client

    def version_url(self, package: str, version: str) -> str:
        """Build the registry document URL for ``package@version``.

        Scoped package names keep their ``@`` and have the ``/`` escaped.

        Returns:
            The absolute registry URL.
        """
        return f"{self.config.url}/{quote(package, safe='@')}/{quote(version, safe='')}"

    def exists(self, package: str, version: str) -> bool:
        """Query the registry for an exact version.

        There is no retry. Any failure is treated as a missing version.

        Returns:
            True when the registry answered 200 for the version document.
        """
        if not version:
            return False
        url = self.version_url(package, version)
        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            logger.debug("Registry lookup for %s@%s failed, treating as missing: %s", package, version, e)
            return False
        if response.status_code != httpx.codes.OK:
            logger.debug("Registry returned %s for %s@%s", response.status_code, package, version)
            return False
        return True

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "VersionValidator":
        return self

    def __exit__(
        self,
        exc_type: "type[BaseException] | None",
        exc_val: "BaseException | None",
        exc_tb: "TracebackType | None",
    ) -> None:
        self.close()
