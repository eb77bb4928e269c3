from worldmap.app.ui.country_path import CountryPathItem
from worldmap.app.ui.world_map import WorldMap

__all__ = ["CountryPathItem", "WorldMap"]
