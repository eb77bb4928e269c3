"""
Demo window: the low-resolution world with population figures and airports.

Run with: python -m worldmap
"""
from __future__ import annotations

import logging
import sys
from typing import Any

from PySide6.QtWidgets import QMainWindow

from worldmap.app.application import create_app, VISIBLE_APP_NAME
from worldmap.app.ui.world_map import WorldMap
from worldmap.logging_config import setup_logging
from worldmap.model.geo import GeoPoint, distance_kilometers
from worldmap.model.population import MISSING_VALUE, format_population, join_country_values, load_population

logger = logging.getLogger(__name__)

AIRPORTS = [
    GeoPoint("SFO", 37.619751, -122.374366),
    GeoPoint("YYC", 51.128148, -114.010791),
    GeoPoint("ORD", 41.975806, -87.905294),
    GeoPoint("YOW", 45.321867, -75.668200),
    GeoPoint("JFK", 40.642660, -73.781232),
    GeoPoint("GRU", -23.427337, -46.478853),
    GeoPoint("RKV", 64.131830, -21.945686),
    GeoPoint("MAD", 40.483162, -3.579211),
    GeoPoint("CDG", 49.014162, 2.541908),
    GeoPoint("LHR", 51.471125, -0.461951),
    GeoPoint("FRA", 50.040864, 8.560409, color="#00ff00"),
    GeoPoint("SVO", 55.972401, 37.412537),
    GeoPoint("DEL", 28.555839, 77.100956),
    GeoPoint("PEK", 40.077624, 116.605458),
    GeoPoint("NRT", 35.766948, 140.385254),
    GeoPoint("SYD", -33.939040, 151.174996),
]


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)

        self.world = WorldMap(parent=self)
        self.setCentralWidget(self.world)

        self.population = join_country_values(self.world.catalog, load_population())
        self.world.set_on_country_press(self._on_country_press)
        self.world.add_locations(*AIRPORTS)

        self._log_distances()

    def _on_country_press(self, country_id: str, event: Any) -> None:
        country = self.world.catalog[country_id]
        logger.info(f"{country.name} ({country.iso3})")
        value = self.population.get(country_id, MISSING_VALUE)
        if value == MISSING_VALUE:
            logger.info("No population data")
        else:
            logger.info(f"{format_population(value)} million people")

    def _log_distances(self) -> None:
        origin, *others = self.world.locations()
        for other in others:
            logger.info(f"{origin.name} -> {other.name}: {distance_kilometers(origin, other):,.0f} km")


def main() -> int:
    """Main entry point for the demo."""
    setup_logging(logging.INFO)
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
