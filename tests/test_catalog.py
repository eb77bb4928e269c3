from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from worldmap.model.catalog import CountryShape, ShapeCatalog, load_default_catalog
from worldmap.model.errors import CatalogError, UnknownCountry
from worldmap.model.registry import CountryRegistry


def test_default_catalog_loads() -> None:
    catalog = load_default_catalog()
    assert len(catalog) > 20
    assert (catalog.design_width, catalog.design_height) == (1009.0, 665.0)
    assert "FR" in catalog
    assert catalog["FR"].iso3 == "FRA"


def test_default_catalog_has_multi_fragment_countries() -> None:
    catalog = load_default_catalog()
    assert len(catalog["JP"].fragments) == 4
    assert len(catalog["FR"].fragments) == 2


def test_default_catalog_fits_design_area() -> None:
    catalog = load_default_catalog()
    for country in catalog:
        for fragment in country.fragments:
            x_min, y_min, x_max, y_max = fragment.bounds
            assert 0.0 <= x_min <= x_max <= catalog.design_width
            assert 0.0 <= y_min <= y_max <= catalog.design_height


def test_registry_over_catalog_fragments() -> None:
    catalog = load_default_catalog()
    registry = CountryRegistry(catalog.fragments())
    assert registry.all_country_ids() == set(catalog.ids())
    for country_id in registry:
        for fragment in registry.fragments_of(country_id):
            assert registry.country_of(fragment) == country_id == fragment.country_id


def test_fragment_points_are_read_only() -> None:
    fragment = load_default_catalog()["DE"].fragments[0]
    with pytest.raises(ValueError):
        fragment.points[0, 0] = 1.0


def test_unknown_country(small_catalog: ShapeCatalog) -> None:
    with pytest.raises(UnknownCountry):
        small_catalog["ZZ"]


def test_from_json(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "design_width": 200,
        "design_height": 100,
        "countries": [
            {"id": "XX", "name": "Nowhere", "fragments": [[[0, 0], [1, 0], [1, 1]]]},
        ],
    }), encoding="utf-8")

    catalog = ShapeCatalog.from_json(str(path))

    assert catalog.ids() == ["XX"]
    assert catalog["XX"].iso3 is None
    assert catalog["XX"].fragments[0].points.shape == (3, 2)


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"countries": [{"name": "no id", "fragments": []}]},
        {"countries": [{"id": "XX", "fragments": [[[0, 0], [1, 1]]]}]},
        {"countries": [{"id": "XX", "fragments": [[[0, 0, 0], [1, 1, 1], [2, 2, 2]]]}]},
        {"countries": [{"id": "XX", "fragments": [[["a", "b"], [1, 1], [2, 2]]]}]},
        {"countries": [{"id": "XX", "fragments": []}]},
        {"design_width": 0, "countries": []},
    ],
)
def test_malformed_catalog_is_rejected(data: dict) -> None:
    with pytest.raises(CatalogError):
        ShapeCatalog.from_dict(data)


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError):
        ShapeCatalog.from_json(str(path))


def test_duplicate_country_id(small_catalog: ShapeCatalog) -> None:
    shape = CountryShape(id="XX", name="X", fragments=small_catalog["BB"].fragments)
    with pytest.raises(CatalogError):
        ShapeCatalog([shape, shape])


def test_fragment_bounds(small_catalog: ShapeCatalog) -> None:
    fragment = small_catalog["AA"].fragments[1]
    assert fragment.bounds == (20.0, 0.0, 30.0, 10.0)
    assert isinstance(fragment.points, np.ndarray)
