"""Lazy, memoized component table per kit.

A RegistryLoader owns the component table of exactly one provider. The table
is built by a population callable the first time it is requested and kept for
the lifetime of the process. Concurrent first-touch callers share a single
in-flight population run and all observe its outcome.

A run in which every attempted entry failed is not cached: the loader stays
unloaded and the next caller starts a fresh run. A run with at least one
success (or with nothing to attempt) moves the loader to the loaded state for
good, even when some entries were dropped.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from component_registry.models.component import ComponentData

logger = logging.getLogger(__name__)


class LoaderState(str, Enum):
    """Population state of a RegistryLoader."""

    UNLOADED = "unloaded"
    LOADED = "loaded"


@dataclass(frozen=True)
class PopulationResult:
    """Outcome of one population run.

    Partial success is a normal outcome: failed entries are reported in
    ``failures`` (name -> reason) instead of aborting the run.
    """

    components: dict[str, ComponentData]
    failures: dict[str, str] = field(default_factory=dict)
    attempted: int = 0

    @property
    def failed_entirely(self) -> bool:
        return self.attempted > 0 and not self.components


class PopulationFailedError(Exception):
    """Raised when a population run produced no usable component."""

    def __init__(self, kit: str, failures: Mapping[str, str]) -> None:
        self.kit = kit
        self.failures = dict(failures)
        super().__init__(f"Population of kit '{kit}' failed ({len(self.failures)} failure(s))")


PopulateFn = Callable[[], Awaitable[PopulationResult]]


class RegistryLoader:
    """Per-kit lazy cache enforcing at most one in-flight population run."""

    def __init__(self, kit: str, populate: PopulateFn) -> None:
        """Create RegistryLoader.

        Args:
            kit: Kit name, used for logging and errors
            populate: Coroutine function performing one population run
        """
        self._kit = kit
        self._populate = populate
        self._components: Mapping[str, ComponentData] | None = None
        self._inflight: asyncio.Task[Mapping[str, ComponentData]] | None = None
        self._population_count = 0

    @property
    def state(self) -> LoaderState:
        if self._components is None:
            return LoaderState.UNLOADED
        return LoaderState.LOADED

    @property
    def population_count(self) -> int:
        """Number of population runs started so far."""
        return self._population_count

    async def load(self) -> Mapping[str, ComponentData]:
        """Return the component table, populating it on first use.

        Returns:
            Read-only mapping of component name -> ComponentData

        Raises:
            PopulationFailedError: If the population run this call observed
                produced nothing; the loader remains unloaded
        """
        if self._components is not None:
            return self._components

        if self._inflight is None:
            self._population_count += 1
            self._inflight = asyncio.create_task(self._run())
            self._inflight.add_done_callback(self._clear_inflight)

        # A caller going away must not cancel the shared run
        return await asyncio.shield(self._inflight)

    async def _run(self) -> Mapping[str, ComponentData]:
        logger.info("Populating kit '%s'", self._kit)
        try:
            result = await self._populate()
        except Exception as err:
            logger.warning("Population of kit '%s' raised: %s", self._kit, err)
            raise PopulationFailedError(self._kit, {"*": str(err)}) from err

        if result.failed_entirely:
            logger.warning(
                "Population of kit '%s' failed: all %d entries failed",
                self._kit,
                result.attempted,
            )
            raise PopulationFailedError(self._kit, result.failures)

        self._components = MappingProxyType(dict(result.components))
        logger.info(
            "Kit '%s' loaded: %d component(s), %d failure(s)",
            self._kit,
            len(result.components),
            len(result.failures),
        )
        return self._components

    def _clear_inflight(self, task: asyncio.Task[Mapping[str, ComponentData]]) -> None:
        self._inflight = None
        # Mark the outcome as retrieved when every waiter has gone away
        if not task.cancelled():
            task.exception()
