"""Upstream source fetching integration."""

from component_registry.integrations.source_fetcher.abc import SourceFetcher, SourceFetchError
from component_registry.integrations.source_fetcher.fake import FakeSourceFetcher

__all__ = ["FakeSourceFetcher", "SourceFetcher", "SourceFetchError"]
