"""Component record data models."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ComponentMeta:
    """Metadata describing one component within a kit.

    The name is the only lookup key and is unique within a kit. The version
    is an opaque semver-like string.
    """

    name: str
    version: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    themes: tuple[str, ...] = field(default_factory=tuple)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "ComponentMeta":
        return ComponentMeta(
            name=data["name"],
            version=data["version"],
            tags=tuple(data.get("tags") or ()),
            themes=tuple(data.get("themes") or ()),
        )


@dataclass(frozen=True)
class ComponentCode:
    """Source payload of a component."""

    tsx: str
    css: str | None = None


@dataclass(frozen=True)
class ComponentData:
    """A component's metadata together with its source payload."""

    metadata: ComponentMeta
    code: ComponentCode
    preview_url: str | None = None

    @property
    def name(self) -> str:
        return self.metadata.name

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "ComponentData":
        """Parse the JSON wire format served by the registry.

        The preview URL travels as ``previewUrl``; missing optional fields
        fall back to their defaults.
        """
        code = data.get("code") or {}
        return ComponentData(
            metadata=ComponentMeta.from_dict(data["metadata"]),
            code=ComponentCode(tsx=code.get("tsx", ""), css=code.get("css")),
            preview_url=data.get("previewUrl"),
        )
