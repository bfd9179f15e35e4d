"""In-memory fake implementation of SourceFetcher for testing."""

import asyncio
from collections import Counter

from component_registry.integrations.source_fetcher.abc import SourceFetcher, SourceFetchError


class FakeSourceFetcher(SourceFetcher):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.
    """

    def __init__(
        self,
        *,
        documents: dict[str, str] | None = None,
        failing_urls: set[str] | None = None,
        failures_before_success: int = 0,
        delay_seconds: float = 0.0,
    ) -> None:
        """Create FakeSourceFetcher with pre-configured documents.

        Args:
            documents: Mapping of url -> document text
            failing_urls: URLs that always fail
            failures_before_success: Number of initial fetches of each URL
                that fail before the document is served
            delay_seconds: Time each fetch sleeps before answering, so that
                tests can overlap concurrent callers
        """
        self._documents = documents or {}
        self._failing_urls = failing_urls or set()
        self._failures_before_success = failures_before_success
        self._delay_seconds = delay_seconds
        self._fetch_calls: list[str] = []
        self._attempts: Counter[str] = Counter()

    @property
    def fetch_calls(self) -> list[str]:
        """Read-only access to fetched URLs, in call order."""
        return self._fetch_calls.copy()

    async def fetch_text(self, url: str) -> str:
        """Return the stored document or raise SourceFetchError."""
        self._fetch_calls.append(url)
        self._attempts[url] += 1

        if self._delay_seconds:
            await asyncio.sleep(self._delay_seconds)

        if url in self._failing_urls:
            raise SourceFetchError(url, "simulated failure")
        if self._attempts[url] <= self._failures_before_success:
            raise SourceFetchError(url, "simulated transient failure")
        if url not in self._documents:
            raise SourceFetchError(url, "404 Not Found")
        return self._documents[url]
