"""Kit providers."""

from component_registry.providers.abc import Provider
from component_registry.providers.cached import CachedProvider
from component_registry.providers.remote import RemoteFetchProvider
from component_registry.providers.static import StaticProvider

__all__ = ["CachedProvider", "Provider", "RemoteFetchProvider", "StaticProvider"]
