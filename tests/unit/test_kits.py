"""Tests for the kit -> provider registry."""

import pytest

from component_registry.integrations.source_fetcher.fake import FakeSourceFetcher
from component_registry.kits import KitNotFoundError, ProviderRegistry, build_default_registry
from component_registry.providers.remote import RemoteFetchProvider
from component_registry.providers.static import StaticProvider


def test_resolve_known_kit() -> None:
    provider = StaticProvider("starter", [])
    registry = ProviderRegistry({"starter": provider})

    assert registry.resolve("starter") is provider
    assert "starter" in registry


def test_resolve_unknown_kit_raises() -> None:
    registry = ProviderRegistry({})

    with pytest.raises(KitNotFoundError) as exc_info:
        registry.resolve("unknownkit")

    assert exc_info.value.kit == "unknownkit"
    assert "unknownkit" not in registry


def test_default_registry_kits() -> None:
    registry = build_default_registry(
        shadcn_base_url="https://upstream.test/ui",
        fetcher=FakeSourceFetcher(),
    )

    assert registry.kit_names() == ["shadcn", "starter"]
    assert isinstance(registry.resolve("shadcn"), RemoteFetchProvider)
    assert isinstance(registry.resolve("starter"), StaticProvider)


def test_default_registry_builds_independent_loaders() -> None:
    fetcher = FakeSourceFetcher()
    first = build_default_registry(shadcn_base_url="https://a.test", fetcher=fetcher)
    second = build_default_registry(shadcn_base_url="https://a.test", fetcher=fetcher)

    assert first.resolve("shadcn") is not second.resolve("shadcn")
