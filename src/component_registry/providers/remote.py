"""Provider whose table is fetched from an upstream document store.

The set of components is a closed manifest of filenames. A population run
fetches ``{base_url}/{filename}`` for every filename concurrently; a file
that cannot be fetched is logged and left out of the table.
"""

import asyncio
import logging
from collections.abc import Sequence
from pathlib import PurePosixPath

from component_registry.integrations.source_fetcher.abc import SourceFetcher, SourceFetchError
from component_registry.loader import PopulationResult
from component_registry.models.component import ComponentCode, ComponentData, ComponentMeta
from component_registry.providers.cached import CachedProvider

logger = logging.getLogger(__name__)

SHADCN_KIT = "shadcn"

SHADCN_BASE_URL = "https://raw.githubusercontent.com/shadcn-ui/ui/main/apps/www/registry/default/ui"

SHADCN_COMPONENT_FILES: tuple[str, ...] = (
    "accordion.tsx",
    "alert.tsx",
    "alert-dialog.tsx",
    "aspect-ratio.tsx",
    "avatar.tsx",
    "badge.tsx",
    "breadcrumb.tsx",
    "button.tsx",
    "calendar.tsx",
    "card.tsx",
    "carousel.tsx",
    "chart.tsx",
    "checkbox.tsx",
    "collapsible.tsx",
    "command.tsx",
    "context-menu.tsx",
    "dialog.tsx",
    "drawer.tsx",
    "dropdown-menu.tsx",
    "form.tsx",
    "hover-card.tsx",
    "input.tsx",
    "input-otp.tsx",
    "label.tsx",
    "menubar.tsx",
    "navigation-menu.tsx",
    "pagination.tsx",
    "popover.tsx",
    "progress.tsx",
    "radio-group.tsx",
    "resizable.tsx",
    "scroll-area.tsx",
    "select.tsx",
    "separator.tsx",
    "sheet.tsx",
    "sidebar.tsx",
    "skeleton.tsx",
    "slider.tsx",
    "sonner.tsx",
    "switch.tsx",
    "table.tsx",
    "tabs.tsx",
    "textarea.tsx",
    "toast.tsx",
    "toaster.tsx",
    "toggle.tsx",
    "toggle-group.tsx",
    "tooltip.tsx",
)

DEFAULT_VERSION = "0.1.0"
DEFAULT_THEMES = ("default",)


def component_name(filename: str) -> str:
    """Strip the extension from a manifest filename."""
    return PurePosixPath(filename).stem


class RemoteFetchProvider(CachedProvider):
    """Provider populated by fetching each manifest file from base_url."""

    def __init__(
        self,
        kit: str,
        *,
        base_url: str,
        filenames: Sequence[str],
        fetcher: SourceFetcher,
    ) -> None:
        """Create RemoteFetchProvider.

        Args:
            kit: Kit name
            base_url: Upstream base path; files are read from {base_url}/{filename}
            filenames: Closed manifest of component filenames
            fetcher: Integration used to read each file
        """
        super().__init__(kit)
        self._base_url = base_url.rstrip("/")
        self._filenames = tuple(filenames)
        self._fetcher = fetcher

    def url_for(self, filename: str) -> str:
        return f"{self._base_url}/{filename}"

    def ordered_names(self) -> list[str]:
        return [component_name(filename) for filename in self._filenames]

    async def populate(self) -> PopulationResult:
        outcomes = await asyncio.gather(*(self._fetch_one(f) for f in self._filenames))

        components: dict[str, ComponentData] = {}
        failures: dict[str, str] = {}
        for name, outcome in outcomes:
            if isinstance(outcome, ComponentData):
                components[name] = outcome
            else:
                failures[name] = outcome

        return PopulationResult(
            components=components,
            failures=failures,
            attempted=len(self._filenames),
        )

    async def _fetch_one(self, filename: str) -> tuple[str, ComponentData | str]:
        """Fetch one file, returning (name, component) or (name, failure reason)."""
        name = component_name(filename)
        try:
            tsx = await self._fetcher.fetch_text(self.url_for(filename))
        except SourceFetchError as err:
            logger.warning("Failed to fetch %s: %s", name, err.reason)
            return name, err.reason
        except Exception as err:
            logger.warning("Unexpected error fetching %s: %s", name, err, exc_info=True)
            return name, str(err) or type(err).__name__

        return name, ComponentData(
            metadata=ComponentMeta(
                name=name,
                version=DEFAULT_VERSION,
                tags=(),
                themes=DEFAULT_THEMES,
            ),
            code=ComponentCode(tsx=tsx, css=""),
        )
