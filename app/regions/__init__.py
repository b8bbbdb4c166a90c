"""
Body-region plugins.

Importing this package registers the built-in regions.  A new region is
added by writing a :class:`~app.regions.base.RegionPlugin` subclass with
its drill table and adding it to ``_BUILTIN`` below.
"""

from app.regions.achilles.plugin import AchillesPlugin
from app.regions.foot.plugin import FootPlugin
from app.regions.knee.plugin import KneePlugin
from app.regions.registry import RegionRegistry
from app.regions.shoulder.plugin import ShoulderPlugin

_BUILTIN = (KneePlugin, AchillesPlugin, ShoulderPlugin, FootPlugin)

for _plugin_cls in _BUILTIN:
    RegionRegistry.register(_plugin_cls())

__all__ = ["RegionRegistry"]
