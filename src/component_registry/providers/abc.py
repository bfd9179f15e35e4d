"""Abstract provider contract implemented by every kit backend."""

from abc import ABC, abstractmethod

from component_registry.models.component import ComponentData, ComponentMeta


class Provider(ABC):
    """Backend answering list/get queries for one kit.

    Implementations include:
    - StaticProvider: fixed, hand-authored table
    - RemoteFetchProvider: table fetched from an upstream document store
    """

    @abstractmethod
    async def list_components(self) -> list[ComponentMeta]:
        """List metadata of every component in the kit.

        Returns:
            Component metadata, empty for an empty kit

        Raises:
            PopulationFailedError: If the backing source is entirely unavailable
        """
        ...

    @abstractmethod
    async def get_component(self, name: str) -> ComponentData | None:
        """Get a component by name.

        Args:
            name: Component name within the kit

        Returns:
            The ComponentData if found, None otherwise

        Raises:
            PopulationFailedError: If the backing source is entirely unavailable
        """
        ...
