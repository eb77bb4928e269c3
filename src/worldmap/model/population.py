"""
Population per country.

The shape catalog is static geometry; values attached to countries live in a
separate mapping owned by the application. Data is keyed by ISO3 code and
joined to catalog ids through each country's ``iso3`` field.
"""
from __future__ import annotations

import json
import logging
from typing import Dict, Mapping, Optional

from worldmap import config
from worldmap.model.catalog import ShapeCatalog

logger = logging.getLogger(__name__)

MISSING_VALUE = -1.0


def load_population(path: Optional[str] = None) -> Dict[str, float]:
    """Load ISO3 -> population in millions. Defaults to the bundled 2016 figures."""
    path = path or config.DEFAULT_POPULATION_PATH
    logger.info(f"Loading population data from: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"Population data in '{path}' must be an object of ISO3 -> value.")
    return {str(k).upper(): float(v) for k, v in raw.items()}


def join_country_values(
    catalog: ShapeCatalog,
    data: Mapping[str, float],
    missing: float = MISSING_VALUE,
) -> Dict[str, float]:
    """
    Map catalog country ids to values from ISO3-keyed ``data``.

    Countries without an ISO3 code have no join key and are left out.
    Countries whose code is absent from ``data`` get ``missing``.
    """
    values: Dict[str, float] = {}
    for country in catalog:
        if not country.iso3:
            logger.debug(f"Country '{country.id}' has no ISO3 code, skipping.")
            continue
        values[country.id] = data.get(country.iso3.upper(), missing)
    return values


def format_population(value: float) -> str:
    """Population in whole millions, as shown to the user."""
    return str(int(value))
