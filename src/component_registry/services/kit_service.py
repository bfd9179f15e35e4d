"""Business logic for kit-scoped component queries."""

import logging

from component_registry.context import ServerContext
from component_registry.loader import PopulationFailedError
from component_registry.models.component import ComponentData, ComponentMeta

logger = logging.getLogger(__name__)


class ComponentNotFoundError(Exception):
    """Raised when a known kit has no component with the requested name."""

    def __init__(self, kit: str, name: str) -> None:
        self.kit = kit
        self.name = name
        super().__init__(f"Component '{name}' not found in kit '{kit}'")


class KitService:
    """Resolves kits through the provider registry and queries their provider.

    A kit whose population failed answers as if it were empty; the failed
    run is not cached, so the next query retries it.
    """

    def __init__(self, ctx: ServerContext) -> None:
        """Create KitService with server context.

        Args:
            ctx: Server context with injected dependencies
        """
        self._ctx = ctx

    def list_kits(self) -> list[str]:
        return self._ctx.providers.kit_names()

    async def list_components(self, kit: str) -> list[ComponentMeta]:
        """List the components of a kit.

        Args:
            kit: Kit name

        Returns:
            Component metadata, empty when the kit could not be populated

        Raises:
            KitNotFoundError: If the kit is unknown
        """
        provider = self._ctx.providers.resolve(kit)
        try:
            return await provider.list_components()
        except PopulationFailedError as err:
            logger.warning("Listing kit '%s' while unavailable: %s", kit, err)
            return []

    async def get_component(self, kit: str, name: str) -> ComponentData:
        """Get one component of a kit.

        Args:
            kit: Kit name
            name: Component name

        Returns:
            ComponentData whose metadata.name equals name

        Raises:
            KitNotFoundError: If the kit is unknown
            ComponentNotFoundError: If the kit has no such component, or could
                not be populated
        """
        provider = self._ctx.providers.resolve(kit)
        try:
            component = await provider.get_component(name)
        except PopulationFailedError as err:
            logger.warning("Getting '%s' from kit '%s' while unavailable: %s", name, kit, err)
            component = None

        if component is None:
            raise ComponentNotFoundError(kit, name)
        return component
