"""Abstract interface for fetching raw component sources."""

from abc import ABC, abstractmethod


class SourceFetchError(Exception):
    """Raised when a single upstream document cannot be fetched."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class SourceFetcher(ABC):
    """Abstract interface for reading raw text documents from an upstream store.

    Implementations include:
    - FakeSourceFetcher: In-memory documents for testing
    - RealSourceFetcher: httpx-backed for production
    """

    @abstractmethod
    async def fetch_text(self, url: str) -> str:
        """Fetch the document at url as text.

        Args:
            url: Absolute URL of the document

        Returns:
            The document body

        Raises:
            SourceFetchError: If the document is unreachable, times out, or
                the upstream answers with a non-2xx status
        """
        ...
