"""Lookup and search over the canonical country set or a caller-supplied one.

`ALL` is built once at import and never mutated. Callers who want renamed or extra
entries derive their own sequence (see `countrydir.overrides`) and pass it to the
`*_custom` variants.
"""

from __future__ import annotations

from typing import Sequence

from .countries import load_countries
from .models import Country


ALL: tuple[Country, ...] = load_countries()


def from_code(code: str) -> Country | None:
    return from_code_custom(ALL, code)


def from_code_custom(countries: Sequence[Country], code: str) -> Country | None:
    """First record whose code equals `code` exactly, or None.

    Codes that are not two characters long are a miss, not an error. No case
    normalization is applied.
    """
    if len(code) != 2:
        return None
    for country in countries:
        if country.code == code:
            return country
    return None


def search(query: str) -> list[Country]:
    return search_custom(ALL, query)


def search_custom(countries: Sequence[Country], query: str) -> list[Country]:
    """Records whose "name code" text contains `query`, ignoring case, in input order."""
    needle = query.casefold()
    return [country for country in countries if needle in country.search_text.casefold()]
