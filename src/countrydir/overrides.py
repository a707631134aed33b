"""Country override loading and derived collections."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Sequence

import yaml

from .models import Country, CountryOverrides


_LOGGER = logging.getLogger("countrydir.overrides")


def load_overrides(path: Path) -> CountryOverrides:
    """Load optional rename/add/remove overrides; a missing file means none."""
    if not path.exists():
        return CountryOverrides()
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        return CountryOverrides()
    if not isinstance(raw, dict):
        raise ValueError(f"Expected mapping in {path}")
    try:
        return CountryOverrides.from_mapping(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid overrides in {path}: {exc}") from exc


def apply_overrides(
    countries: Sequence[Country],
    overrides: CountryOverrides,
) -> tuple[Country, ...]:
    """Return a new code-sorted tuple with `overrides` applied.

    Order of application: removals, renames, additions. `countries` is not modified.
    """
    known = {country.code for country in countries}
    unknown = sorted((set(overrides.rename) | set(overrides.remove)) - known)
    if unknown:
        raise ValueError(f"Overrides reference unknown codes: {', '.join(unknown)}")

    removed = set(overrides.remove)
    out: list[Country] = []
    for country in countries:
        if country.code in removed:
            continue
        new_name = overrides.rename.get(country.code)
        if new_name is not None:
            country = dataclasses.replace(country, name=new_name)
        out.append(country)

    present = {country.code for country in out}
    for country in overrides.add:
        if country.code in present:
            raise ValueError(f"Cannot add '{country.code}': code already present")
        present.add(country.code)
        out.append(country)

    _LOGGER.debug(
        "Applied overrides: %d renamed, %d added, %d removed",
        len(overrides.rename),
        len(overrides.add),
        len(removed),
    )
    return tuple(sorted(out, key=lambda item: item.code))
