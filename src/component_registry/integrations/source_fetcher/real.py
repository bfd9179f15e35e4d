"""httpx-backed source fetcher."""

import httpx

from component_registry.integrations.source_fetcher.abc import SourceFetcher, SourceFetchError


class RealSourceFetcher(SourceFetcher):
    """Production fetcher issuing GET requests through an httpx.AsyncClient.

    Every request is bounded by the configured timeout; a timeout surfaces
    as a SourceFetchError for that document only.
    """

    def __init__(
        self,
        timeout_seconds: float,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create RealSourceFetcher.

        Args:
            timeout_seconds: Timeout applied to each individual request
            client: Optional pre-built client (tests pass one with a mock transport)
        """
        self._timeout = httpx.Timeout(timeout_seconds)
        self._client = client or httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def fetch_text(self, url: str) -> str:
        try:
            response = await self._client.get(url, timeout=self._timeout)
            response.raise_for_status()
        except httpx.TimeoutException as err:
            raise SourceFetchError(url, "timed out") from err
        except httpx.HTTPStatusError as err:
            raise SourceFetchError(url, f"HTTP {err.response.status_code}") from err
        except httpx.HTTPError as err:
            raise SourceFetchError(url, str(err) or type(err).__name__) from err
        return response.text
