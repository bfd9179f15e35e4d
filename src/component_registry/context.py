"""Server context for dependency injection."""

from dataclasses import dataclass

from component_registry.integrations.source_fetcher.fake import FakeSourceFetcher
from component_registry.kits import ProviderRegistry, build_default_registry
from component_registry.providers.remote import SHADCN_BASE_URL


@dataclass(frozen=True)
class ServerContext:
    """Server context containing all dependencies.

    This is a frozen dataclass that holds the provider registry for the
    lifetime of the process. Use for_test() for testing scenarios.
    """

    providers: ProviderRegistry

    @classmethod
    def for_test(
        cls,
        *,
        documents: dict[str, str] | None = None,
        failing_urls: set[str] | None = None,
        base_url: str = SHADCN_BASE_URL,
    ) -> "ServerContext":
        """Create a test context with the default kits over a fake fetcher.

        Args:
            documents: url -> document text served by FakeSourceFetcher
            failing_urls: URLs for which FakeSourceFetcher always fails
            base_url: Base URL for the shadcn kit

        Returns:
            ServerContext with fake implementations
        """
        fetcher = FakeSourceFetcher(documents=documents, failing_urls=failing_urls)
        return cls(providers=build_default_registry(shadcn_base_url=base_url, fetcher=fetcher))
