"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from component_registry.context import ServerContext
from component_registry.integrations.source_fetcher.fake import FakeSourceFetcher
from component_registry.kits import build_default_registry
from component_registry.main import create_app
from component_registry.providers.remote import SHADCN_COMPONENT_FILES, component_name
from component_registry.services.kit_service import KitService

BASE_URL = "https://upstream.test/ui"


def build_documents(
    base_url: str = BASE_URL,
    filenames: tuple[str, ...] = SHADCN_COMPONENT_FILES,
) -> dict[str, str]:
    """Build url -> tsx documents for every manifest file."""
    return {
        f"{base_url}/{filename}": f"export function {component_name(filename)}() {{}}\n"
        for filename in filenames
    }


@pytest.fixture
def shadcn_documents() -> Callable[..., dict[str, str]]:
    """Provide the document builder for tests configuring their own fetcher."""
    return build_documents


@pytest.fixture
def fake_fetcher() -> FakeSourceFetcher:
    """Create a FakeSourceFetcher serving the whole shadcn manifest."""
    return FakeSourceFetcher(documents=build_documents())


@pytest.fixture
def server_context(fake_fetcher: FakeSourceFetcher) -> ServerContext:
    """Create a ServerContext with the default kits over the fake fetcher."""
    return ServerContext(
        providers=build_default_registry(shadcn_base_url=BASE_URL, fetcher=fake_fetcher)
    )


@pytest.fixture
def kit_service(server_context: ServerContext) -> KitService:
    """Create a KitService with fake context."""
    return KitService(server_context)


@pytest.fixture
async def async_client(server_context: ServerContext) -> AsyncGenerator[AsyncClient]:
    """Create an async test client."""
    app = create_app(context=server_context)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
