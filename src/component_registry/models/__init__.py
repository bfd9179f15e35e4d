"""Data models for the component registry."""

from component_registry.models.component import ComponentCode, ComponentData, ComponentMeta

__all__ = ["ComponentCode", "ComponentData", "ComponentMeta"]
