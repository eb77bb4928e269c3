"""
Shape Catalog
=============
Read-only set of country outlines the map is drawn from.

Each country owns one or more fragments (islands, exclaves). A fragment is a
closed outline in design units; the catalog never projects or simplifies the
data, it only validates and exposes it.

JSON layout::

    {
      "design_width": 1009,
      "design_height": 665,
      "countries": [
        {"id": "FR", "name": "France", "iso3": "FRA",
         "fragments": [[[x, y], [x, y], ...], ...]}
      ]
    }

The bundled ``world_lowres.json`` is a coarse outline set of 26 countries
(several with islands or exclaves), enough for the demo and the tests. The
population table covers far more; figures for countries outside the catalog
are loaded but never joined. Pass a fuller catalog file to
``ShapeCatalog.from_json`` for complete coverage.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, TYPE_CHECKING

import numpy as np

from worldmap import config
from worldmap.model.errors import CatalogError, UnknownCountry

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ShapeFragment:
    """One closed outline belonging to exactly one country."""
    country_id: str
    index: int
    points: npt.NDArray[np.float64]  # (N, 2), N >= 3

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(x_min, y_min, x_max, y_max) in design units."""
        x_min, y_min = self.points.min(axis=0)
        x_max, y_max = self.points.max(axis=0)
        return float(x_min), float(y_min), float(x_max), float(y_max)


@dataclass(frozen=True, eq=False)
class CountryShape:
    id: str
    name: str
    iso3: Optional[str] = None
    fragments: tuple[ShapeFragment, ...] = field(default_factory=tuple)


class ShapeCatalog:
    """Ordered, read-only mapping of country id -> CountryShape."""

    def __init__(
        self,
        countries: list[CountryShape],
        design_width: float = config.PREFERRED_WIDTH,
        design_height: float = config.PREFERRED_HEIGHT,
    ) -> None:
        self._countries: Dict[str, CountryShape] = {}
        for country in countries:
            if country.id in self._countries:
                raise CatalogError(f"Duplicate country id '{country.id}'.")
            if not country.fragments:
                raise CatalogError(f"Country '{country.id}' has no fragments.")
            self._countries[country.id] = country
        self.design_width = float(design_width)
        self.design_height = float(design_height)

    def __getitem__(self, country_id: str) -> CountryShape:
        try:
            return self._countries[country_id]
        except KeyError:
            raise UnknownCountry(country_id) from None

    def __contains__(self, country_id: object) -> bool:
        return country_id in self._countries

    def __iter__(self) -> Iterator[CountryShape]:
        return iter(self._countries.values())

    def __len__(self) -> int:
        return len(self._countries)

    def ids(self) -> list[str]:
        return list(self._countries.keys())

    def fragments(self) -> Dict[str, tuple[ShapeFragment, ...]]:
        """Country id -> fragments, in catalog order."""
        return {cid: c.fragments for cid, c in self._countries.items()}

    # ---- loading ----

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ShapeCatalog:
        try:
            raw_countries = data["countries"]
            design_width = float(data.get("design_width", config.PREFERRED_WIDTH))
            design_height = float(data.get("design_height", config.PREFERRED_HEIGHT))
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"Invalid catalog header: {e}") from e

        if design_width <= 0 or design_height <= 0:
            raise CatalogError(f"Invalid design size {design_width}x{design_height}.")

        countries = [_country_from_dict(raw) for raw in raw_countries]
        return ShapeCatalog(countries, design_width=design_width, design_height=design_height)

    @staticmethod
    def from_json(path: str) -> ShapeCatalog:
        logger.info(f"Loading shape catalog from: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog '{path}' is not valid JSON: {e}") from e

        catalog = ShapeCatalog.from_dict(data)
        n_fragments = sum(len(c.fragments) for c in catalog)
        logger.debug(f"Loaded {len(catalog)} countries with {n_fragments} fragments.")
        return catalog


def _country_from_dict(raw: Dict[str, Any]) -> CountryShape:
    try:
        country_id = str(raw["id"])
        raw_fragments = raw["fragments"]
    except (KeyError, TypeError) as e:
        raise CatalogError(f"Country entry is missing {e}.") from e

    fragments = []
    for i, outline in enumerate(raw_fragments):
        try:
            points = np.asarray(outline, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise CatalogError(f"Fragment {i} of '{country_id}' is not numeric: {e}") from e
        if points.ndim != 2 or points.shape[1] != 2 or points.shape[0] < 3:
            raise CatalogError(
                f"Fragment {i} of '{country_id}' must be an (N, 2) outline with N >= 3, got {points.shape}."
            )
        points.setflags(write=False)
        fragments.append(ShapeFragment(country_id=country_id, index=i, points=points))

    return CountryShape(
        id=country_id,
        name=str(raw.get("name", country_id)),
        iso3=raw.get("iso3"),
        fragments=tuple(fragments),
    )


def load_default_catalog() -> ShapeCatalog:
    """Bundled low-resolution world outlines."""
    return ShapeCatalog.from_json(config.DEFAULT_CATALOG_PATH)
