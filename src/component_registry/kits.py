"""Mapping from kit name to the provider serving it."""

from collections.abc import Mapping

from component_registry.integrations.source_fetcher.abc import SourceFetcher
from component_registry.providers.abc import Provider
from component_registry.providers.remote import (
    SHADCN_COMPONENT_FILES,
    SHADCN_KIT,
    RemoteFetchProvider,
)
from component_registry.providers.static import STARTER_COMPONENTS, STARTER_KIT, StaticProvider


class KitNotFoundError(Exception):
    """Raised when no provider is registered under a kit name."""

    def __init__(self, kit: str) -> None:
        self.kit = kit
        super().__init__(f"Kit '{kit}' not found")


class ProviderRegistry:
    """Fixed kit -> provider mapping, built once at startup.

    The registry holds no cache of its own; each provider owns its loader.
    """

    def __init__(self, providers: Mapping[str, Provider]) -> None:
        self._providers = dict(providers)

    def resolve(self, kit: str) -> Provider:
        """Get the provider for a kit.

        Raises:
            KitNotFoundError: If the kit is unknown
        """
        provider = self._providers.get(kit)
        if provider is None:
            raise KitNotFoundError(kit)
        return provider

    def kit_names(self) -> list[str]:
        """Known kit names in registration order."""
        return list(self._providers)

    def __contains__(self, kit: object) -> bool:
        return kit in self._providers


def build_default_registry(*, shadcn_base_url: str, fetcher: SourceFetcher) -> ProviderRegistry:
    """Build the registry of every kit shipped with the server."""
    return ProviderRegistry(
        {
            SHADCN_KIT: RemoteFetchProvider(
                SHADCN_KIT,
                base_url=shadcn_base_url,
                filenames=SHADCN_COMPONENT_FILES,
                fetcher=fetcher,
            ),
            STARTER_KIT: StaticProvider(STARTER_KIT, STARTER_COMPONENTS),
        }
    )
