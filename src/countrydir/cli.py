"""CLI entrypoint for the country directory."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .config import AppConfig, load_config
from .directory import from_code_custom, search_custom
from .models import Country
from .util import dump_json, setup_logging
from .validate import format_report_lines, validate_countries

LOGGER = logging.getLogger("countrydir.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="countrydir",
        description="ISO 3166-1 country lookup and search.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--config", default=None, help="Path to YAML config.")
        p.add_argument("--verbose", action="store_true", help="Enable debug logs.")
        p.add_argument("--json", action="store_true", help="Print results as JSON.")

    lookup_p = subparsers.add_parser("lookup", help="Find a country by its alpha-2 code.")
    add_common(lookup_p)
    lookup_p.add_argument("code", help="Alpha-2 code, matched exactly (case-sensitive).")

    search_p = subparsers.add_parser("search", help="Search countries by name or code.")
    add_common(search_p)
    search_p.add_argument("query", help="Case-insensitive substring.")

    list_p = subparsers.add_parser("list", help="Print every country in the collection.")
    add_common(list_p)

    validate_p = subparsers.add_parser("validate", help="Validate the configured collection.")
    add_common(validate_p)

    return parser


def _load_and_setup(args: argparse.Namespace) -> AppConfig:
    cfg = AppConfig.default() if args.config is None else load_config(args.config)
    setup_logging(cfg.logging.log_file, verbose=args.verbose)
    return cfg


def _format_line(country: Country) -> str:
    return f"{country.flag} {country.code} {country.name}"


def _print_countries(countries: Sequence[Country], *, as_json: bool) -> None:
    if as_json:
        print(dump_json([country.to_dict() for country in countries]))
        return
    for country in countries:
        print(_format_line(country))


def _run_lookup(countries: Sequence[Country], *, code: str, as_json: bool) -> int:
    country = from_code_custom(countries, code)
    if country is None:
        LOGGER.error("No country with code %r.", code)
        return 1
    if as_json:
        print(dump_json(country.to_dict()))
    else:
        print(_format_line(country))
    return 0


def _run_search(countries: Sequence[Country], *, query: str, as_json: bool) -> int:
    matches = search_custom(countries, query)
    LOGGER.debug("Query %r matched %d of %d countries.", query, len(matches), len(countries))
    _print_countries(matches, as_json=as_json)
    return 0


def _run_validate(countries: Sequence[Country]) -> int:
    report = validate_countries(countries)
    for line in format_report_lines(report):
        LOGGER.info(line)
    return 0 if report.ok else 1


def _dispatch(args: argparse.Namespace) -> int:
    cfg = _load_and_setup(args)
    countries = cfg.load_directory()
    as_json = bool(args.json) or cfg.output.format == "json"
    command = str(args.command)
    if command == "lookup":
        return _run_lookup(countries, code=str(args.code), as_json=as_json)
    if command == "search":
        return _run_search(countries, query=str(args.query), as_json=as_json)
    if command == "list":
        _print_countries(countries, as_json=as_json)
        return 0
    if command == "validate":
        return _run_validate(countries)
    raise ValueError(f"Unknown command: {command}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _dispatch(args)


if __name__ == "__main__":
    raise SystemExit(main())
