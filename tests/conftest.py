from __future__ import annotations

import os

import numpy as np
import pytest

# Widget tests must not need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from worldmap.model.catalog import CountryShape, ShapeCatalog, ShapeFragment


class FakeFragment:
    """Stand-in for a drawable fragment; records every fill it receives."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.fills: list[str] = []

    @property
    def fill(self) -> str | None:
        return self.fills[-1] if self.fills else None

    def set_fill(self, color: str) -> None:
        self.fills.append(color)

    def __repr__(self) -> str:
        return f"FakeFragment({self.name!r})"


def _square(country_id: str, index: int, x: float, y: float, size: float = 10.0) -> ShapeFragment:
    points = np.array([[x, y], [x + size, y], [x + size, y + size], [x, y + size]], dtype=np.float64)
    return ShapeFragment(country_id=country_id, index=index, points=points)


@pytest.fixture
def small_catalog() -> ShapeCatalog:
    """Two countries: an archipelago of three islands and a single-shape one."""
    archipelago = CountryShape(
        id="AA",
        name="Archipelago",
        iso3="AAA",
        fragments=(_square("AA", 0, 0, 0), _square("AA", 1, 20, 0), _square("AA", 2, 40, 0)),
    )
    mainland = CountryShape(id="BB", name="Mainland", iso3="BBB", fragments=(_square("BB", 0, 0, 40, 30),))
    return ShapeCatalog([archipelago, mainland], design_width=100.0, design_height=80.0)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
