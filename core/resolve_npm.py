"""npm registry version lookup."""

import asyncio
import logging
from urllib.parse import quote

import httpx

from .errors import RegistryLookupFailure

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"


class NpmResolver:
    """Resolver for the latest published version of npm packages."""

    def __init__(
        self,
        registry_url: str = DEFAULT_REGISTRY_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize npm resolver.

        Args:
            registry_url: Base URL of the npm registry
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.registry_url = registry_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def package_url(self, package_name: str) -> str:
        """Registry URL of a package document; scoped names keep their '@'."""
        return f"{self.registry_url}/{quote(package_name, safe='@')}"

    async def get_latest_version(
        self, package_name: str, client: httpx.AsyncClient | None = None
    ) -> str | None:
        """Get the latest published version for a package.

        Args:
            package_name: Name of the package
            client: Shared client; a temporary one is opened when omitted

        Returns:
            Version string from dist-tags.latest, or None if unavailable
        """
        try:
            if client is None:
                async with self._client() as own_client:
                    return await self._fetch_latest(package_name, own_client)
            return await self._fetch_latest(package_name, client)
        except RegistryLookupFailure as e:
            logger.warning(str(e))
            return None

    async def fetch_latest_versions(self, package_names: list[str]) -> list[str | None]:
        """Resolve the latest version of every package concurrently.

        Args:
            package_names: Package names to look up

        Returns:
            Latest versions in the same order as package_names
        """
        if not package_names:
            return []

        async with self._client() as client:
            tasks = [self.get_latest_version(name, client) for name in package_names]
            return await asyncio.gather(*tasks)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            headers={"Accept": "application/json"},
        )

    async def _fetch_latest(self, package_name: str, client: httpx.AsyncClient) -> str:
        """Fetch dist-tags.latest from the registry.

        Raises:
            RegistryLookupFailure: On any HTTP, transport or payload error
        """
        try:
            url = self.package_url(package_name)
        except TypeError as e:
            raise RegistryLookupFailure(package_name, f"invalid package name: {e}")
        logger.debug("GET %s", url)

        try:
            response = await client.get(url)
            response.raise_for_status()
            metadata = response.json()
        except httpx.TimeoutException:
            raise RegistryLookupFailure(package_name, "request timed out")
        except httpx.HTTPStatusError as e:
            reason = e.response.reason_phrase or f"HTTP {e.response.status_code}"
            raise RegistryLookupFailure(package_name, reason)
        except httpx.HTTPError as e:
            raise RegistryLookupFailure(package_name, f"network error: {e}")
        except ValueError as e:
            raise RegistryLookupFailure(package_name, f"invalid JSON response: {e}")

        dist_tags = metadata.get("dist-tags") if isinstance(metadata, dict) else None
        latest = dist_tags.get("latest") if isinstance(dist_tags, dict) else None
        if not isinstance(latest, str) or not latest:
            raise RegistryLookupFailure(package_name, "no 'latest' dist-tag")
        return latest
