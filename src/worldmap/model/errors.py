"""Exceptions raised by the map model."""
from __future__ import annotations


class WorldMapError(Exception):
    """Base exception for the map widget."""


class UnknownCountry(WorldMapError, KeyError):
    """Raised when a country identifier is not in the registry."""

    def __init__(self, country_id: str) -> None:
        super().__init__(country_id)
        self.country_id = country_id

    def __str__(self) -> str:
        return f"Unknown country: {self.country_id!r}"


class OrphanFragment(WorldMapError, LookupError):
    """Raised when a shape fragment was never registered to a country."""

    def __init__(self, fragment: object) -> None:
        super().__init__(fragment)
        self.fragment = fragment

    def __str__(self) -> str:
        return f"Fragment {self.fragment!r} does not belong to any registered country"


class CatalogError(WorldMapError, ValueError):
    """Raised when shape catalog data is malformed."""
