"""Validation layer for country collections."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .models import Country, flag_emoji


@dataclass(slots=True)
class ValidationReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def add_info(self, msg: str) -> None:
        self.infos.append(msg)


def _is_alpha2(code: str) -> bool:
    return len(code) == 2 and code.isascii() and code.isalpha() and code.isupper()


def validate_countries(countries: Sequence[Country]) -> ValidationReport:
    """Check code format, uniqueness, ordering and flag consistency."""
    report = ValidationReport()
    if not countries:
        report.add_error("Country collection is empty.")
        return report
    report.add_info(f"Countries: {len(countries)}")

    for country in countries:
        if not country.name.strip():
            report.add_error(f"Empty name for code '{country.code}'")
        if not _is_alpha2(country.code):
            report.add_error(f"Invalid code '{country.code}' ({country.name})")
        elif country.flag != flag_emoji(country.code):
            report.add_warning(f"{country.code}: flag does not match code")

    code_counts = Counter(country.code for country in countries)
    for code, count in sorted(code_counts.items()):
        if count > 1:
            report.add_error(f"Duplicate code '{code}' ({count} records)")

    for prev, cur in zip(countries, countries[1:]):
        if cur.code < prev.code:
            report.add_error(f"Out of order: '{cur.code}' follows '{prev.code}'")

    name_counts = Counter(country.name.casefold() for country in countries)
    for name, count in sorted(name_counts.items()):
        if count > 1:
            report.add_info(f"Name '{name}' shared by {count} records")
    return report


def format_report_lines(report: ValidationReport) -> Iterable[str]:
    for info in report.infos:
        yield f"[INFO] {info}"
    for warning in report.warnings:
        yield f"[WARN] {warning}"
    for error in report.errors:
        yield f"[ERROR] {error}"
    if report.ok:
        yield "[OK] Validation completed with no errors."
