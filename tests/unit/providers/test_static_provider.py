"""Tests for StaticProvider."""

import pytest

from component_registry.models.component import ComponentCode, ComponentData, ComponentMeta
from component_registry.providers.static import STARTER_COMPONENTS, StaticProvider


def _component(name: str) -> ComponentData:
    return ComponentData(
        metadata=ComponentMeta(name=name, version="2.0.0", tags=("layout",)),
        code=ComponentCode(tsx=f"<div className='{name}' />"),
    )


async def test_lists_table_in_order() -> None:
    provider = StaticProvider("kit", [_component("stack"), _component("grid")])

    metas = await provider.list_components()

    assert [m.name for m in metas] == ["stack", "grid"]
    assert metas[0].tags == ("layout",)


async def test_get_component_by_name() -> None:
    provider = StaticProvider("kit", [_component("stack")])

    component = await provider.get_component("stack")

    assert component is not None
    assert component.metadata.name == "stack"
    assert await provider.get_component("grid") is None


async def test_empty_table_lists_nothing() -> None:
    provider = StaticProvider("kit", [])

    assert await provider.list_components() == []
    assert await provider.get_component("anything") is None


def test_duplicate_names_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate component 'stack'"):
        StaticProvider("kit", [_component("stack"), _component("stack")])


async def test_starter_table_contains_button() -> None:
    provider = StaticProvider("starter", STARTER_COMPONENTS)

    button = await provider.get_component("button")

    assert button is not None
    assert button.code.css == ".bg-primary { background-color: #1d4ed8; }"
    assert button.preview_url == "https://dummycdn.com/previews/button.png"
    assert button.metadata.tags == ("action", "form")
