"""ISO 3166-1 country list loading and indexing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import yaml

from .models import Country


DEFAULT_DATASET_PATH = Path(__file__).resolve().parent / "data" / "countries.yaml"

_LOGGER = logging.getLogger("countrydir.countries")


def load_countries(path: Path = DEFAULT_DATASET_PATH) -> tuple[Country, ...]:
    """Load and validate a country list, preserving file order."""
    if not path.exists():
        raise FileNotFoundError(f"Countries file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if not isinstance(raw, list):
        raise ValueError(f"Expected list in {path}")

    countries: list[Country] = []
    seen_codes: set[str] = set()
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ValueError(f"Expected mapping at index {idx} in {path}")
        try:
            country = Country.from_mapping(item)
        except ValueError as exc:
            raise ValueError(f"Invalid country at index {idx} in {path}: {exc}") from exc
        if country.code in seen_codes:
            raise ValueError(f"Duplicate code '{country.code}' in {path}")
        seen_codes.add(country.code)
        countries.append(country)
    _LOGGER.debug("Loaded %d countries from %s", len(countries), path)
    return tuple(countries)


def country_index_by_code(countries: Iterable[Country]) -> dict[str, Country]:
    return {country.code: country for country in countries}
