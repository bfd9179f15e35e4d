"""Provider base answering queries from a RegistryLoader."""

from abc import abstractmethod

from component_registry.loader import LoaderState, PopulationResult, RegistryLoader
from component_registry.models.component import ComponentData, ComponentMeta
from component_registry.providers.abc import Provider


class CachedProvider(Provider):
    """Provider whose component table is built once and memoized.

    Subclasses define how a table is populated and the order in which
    component names are listed.
    """

    def __init__(self, kit: str) -> None:
        self._loader = RegistryLoader(kit, self.populate)

    @property
    def loader(self) -> RegistryLoader:
        return self._loader

    @property
    def state(self) -> LoaderState:
        return self._loader.state

    @abstractmethod
    async def populate(self) -> PopulationResult:
        """Run one population of the component table."""
        ...

    @abstractmethod
    def ordered_names(self) -> list[str]:
        """Return every known component name in listing order."""
        ...

    async def list_components(self) -> list[ComponentMeta]:
        components = await self._loader.load()
        return [components[name].metadata for name in self.ordered_names() if name in components]

    async def get_component(self, name: str) -> ComponentData | None:
        components = await self._loader.load()
        return components.get(name)
