"""Typed configuration loader for `countrydir.yaml`."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, cast

import yaml

from .countries import load_countries
from .directory import ALL
from .models import Country
from .overrides import apply_overrides, load_overrides


_OUTPUT_FORMATS = {"text", "json"}


def _mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"Expected mapping for '{field_name}'")
    return cast(Mapping[str, Any], value)


def _str(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Expected non-empty string for '{field_name}'")
    return value.strip()


def _optional_path(value: Any, field_name: str, root_dir: Path) -> Path | None:
    if value is None:
        return None
    p = Path(_str(value, field_name))
    return p if p.is_absolute() else root_dir / p


@dataclass(frozen=True, slots=True)
class DatasetConfig:
    path: Path | None = None
    overrides: Path | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], root_dir: Path) -> DatasetConfig:
        return cls(
            path=_optional_path(raw.get("path"), "dataset.path", root_dir),
            overrides=_optional_path(raw.get("overrides"), "dataset.overrides", root_dir),
        )


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: str = "text"

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> OutputConfig:
        fmt = _str(raw.get("format", "text"), "output.format").casefold()
        if fmt not in _OUTPUT_FORMATS:
            raise ValueError(
                "output.format must be one of: " + ", ".join(sorted(_OUTPUT_FORMATS))
            )
        return cls(format=fmt)


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    log_file: Path | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], root_dir: Path) -> LoggingConfig:
        return cls(log_file=_optional_path(raw.get("log_file"), "logging.log_file", root_dir))


@dataclass(frozen=True, slots=True)
class AppConfig:
    source_path: Path | None
    dataset: DatasetConfig
    output: OutputConfig
    logging: LoggingConfig

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], source_path: Path) -> AppConfig:
        root_dir = source_path.parent.resolve()
        return cls(
            source_path=source_path.resolve(),
            dataset=DatasetConfig.from_mapping(_mapping(raw.get("dataset"), "dataset"), root_dir),
            output=OutputConfig.from_mapping(_mapping(raw.get("output"), "output")),
            logging=LoggingConfig.from_mapping(_mapping(raw.get("logging"), "logging"), root_dir),
        )

    @classmethod
    def default(cls) -> AppConfig:
        return cls(
            source_path=None,
            dataset=DatasetConfig(),
            output=OutputConfig(),
            logging=LoggingConfig(),
        )

    def load_directory(self) -> tuple[Country, ...]:
        """Country collection described by this config: the canonical set unless overridden."""
        base = ALL if self.dataset.path is None else load_countries(self.dataset.path)
        if self.dataset.overrides is None:
            return base
        return apply_overrides(base, load_overrides(self.dataset.overrides))


def load_config(path: str | Path) -> AppConfig:
    """Load and validate the YAML config file into typed settings."""
    cfg_path = Path(path).resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValueError("Top-level config must be a YAML mapping")
    return AppConfig.from_mapping(cast(Mapping[str, Any], raw), cfg_path)
