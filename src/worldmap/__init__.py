"""Embeddable, interactive world map widget for PySide6."""
from importlib.metadata import version, PackageNotFoundError

from worldmap.model.geo import GeoPoint, distance_between, distance_kilometers, distance_meters

try:
    __version__ = version("worldmap")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = ["GeoPoint", "distance_between", "distance_kilometers", "distance_meters"]
