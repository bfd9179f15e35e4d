"""HTTP client for the component registry service."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from component_registry.models.component import ComponentData, ComponentMeta

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://localhost:3001"


def _segment(value: str) -> str:
    """Quote a value for use as a single URL path segment."""
    return quote(value, safe="")


class KitRegistryClientError(Exception):
    """Raised when the registry cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class KitClient:
    """Synchronous client issuing the registry's read-only queries."""

    def __init__(
        self,
        base_url: str = DEFAULT_SERVER_URL,
        http_client: httpx.Client | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        """Create KitClient.

        Args:
            base_url: Registry server URL
            http_client: Optional pre-built client (tests pass one with a mock transport)
            timeout_seconds: Request timeout when no client is given
        """
        self._base_url = base_url.rstrip("/")
        self._http = http_client or httpx.Client(timeout=timeout_seconds)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "KitClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list_kits(self) -> list[str]:
        return list(self._get_json("/kits")["kits"])

    def list_components(self, kit: str) -> list[ComponentMeta]:
        """List a kit's component metadata.

        Raises:
            KitRegistryClientError: On transport failure, non-2xx status or a non-JSON body
        """
        items = self._get_json(f"/{_segment(kit)}/components")
        return [ComponentMeta.from_dict(item) for item in items]

    def get_component(self, kit: str, name: str) -> ComponentData:
        """Get one component.

        Raises:
            KitRegistryClientError: On transport failure, non-2xx status or a non-JSON body
        """
        data = self._get_json(f"/{_segment(kit)}/components/{_segment(name)}")
        return ComponentData.from_dict(data)

    def list_components_or_empty(self, kit: str) -> list[ComponentMeta]:
        """Like list_components(), but degrades to an empty list on any failure."""
        try:
            return self.list_components(kit)
        except KitRegistryClientError as err:
            logger.error("Error fetching components: %s", err)
            return []

    def get_component_or_none(self, kit: str, name: str) -> ComponentData | None:
        """Like get_component(), but degrades to None on any failure."""
        try:
            return self.get_component(kit, name)
        except KitRegistryClientError as err:
            logger.error("Error fetching component: %s", err)
            return None

    def _get_json(self, path: str) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = self._http.get(url)
        except httpx.HTTPError as err:
            raise KitRegistryClientError(f"Could not reach {url}: {err}") from err

        if response.is_success:
            try:
                return response.json()
            except ValueError as err:
                raise KitRegistryClientError(
                    f"Invalid JSON from {url}", status_code=response.status_code
                ) from err

        message = response.reason_phrase or f"HTTP {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and "error" in body:
            message = str(body["error"])
        raise KitRegistryClientError(message, status_code=response.status_code)
