"""Provider backed by a fixed, hand-authored component table."""

from collections.abc import Sequence

from component_registry.loader import PopulationResult
from component_registry.models.component import ComponentCode, ComponentData, ComponentMeta
from component_registry.providers.cached import CachedProvider

STARTER_KIT = "starter"

STARTER_COMPONENTS: tuple[ComponentData, ...] = (
    ComponentData(
        metadata=ComponentMeta(
            name="button",
            version="0.1.0",
            tags=("action", "form"),
            themes=("default",),
        ),
        code=ComponentCode(
            tsx='<button className="bg-primary text-white py-2 px-4 rounded">Click me</button>',
            css=".bg-primary { background-color: #1d4ed8; }",
        ),
        preview_url="https://dummycdn.com/previews/button.png",
    ),
)


class StaticProvider(CachedProvider):
    """Provider serving an embedded table. It performs no I/O."""

    def __init__(self, kit: str, components: Sequence[ComponentData]) -> None:
        """Create StaticProvider.

        Args:
            kit: Kit name
            components: Table entries, listed in the given order

        Raises:
            ValueError: If two entries share a name
        """
        super().__init__(kit)
        self._components: dict[str, ComponentData] = {}
        for component in components:
            if component.name in self._components:
                raise ValueError(f"Duplicate component '{component.name}' in kit '{kit}'")
            self._components[component.name] = component

    async def populate(self) -> PopulationResult:
        return PopulationResult(components=dict(self._components))

    def ordered_names(self) -> list[str]:
        return list(self._components)
