"""Lookup table of region plugins, filled by :mod:`app.regions` on import."""

from __future__ import annotations

from typing import Optional

from app.regions.base import RegionPlugin
from app.schemas.region import RegionSummary


class RegionRegistry:
    _plugins: dict[str, RegionPlugin] = {}

    @classmethod
    def register(cls, plugin: RegionPlugin) -> None:
        """Add *plugin*; a second plugin with the same id is a ``ValueError``."""
        region_id = plugin.region_id
        if region_id in cls._plugins:
            raise ValueError(f"Region '{region_id}' already registered")
        cls._plugins[region_id] = plugin

    @classmethod
    def unregister(cls, region_id: str) -> None:
        cls._plugins.pop(region_id, None)

    @classmethod
    def get(cls, region_id: str) -> Optional[RegionPlugin]:
        return cls._plugins.get(region_id)

    @classmethod
    def get_or_raise(cls, region_id: str) -> RegionPlugin:
        try:
            return cls._plugins[region_id]
        except KeyError:
            raise KeyError(
                f"Region '{region_id}' not registered. Available: {cls.ids()}"
            ) from None

    @classmethod
    def ids(cls) -> list[str]:
        """Registered region ids, sorted."""
        return sorted(cls._plugins)

    @classmethod
    def summaries(cls) -> list[RegionSummary]:
        return [cls._plugins[region_id].summary() for region_id in cls.ids()]
