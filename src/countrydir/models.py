"""Domain models shared across directory modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


_REGIONAL_INDICATOR_A = 0x1F1E6


def _require_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Expected non-empty string for '{field_name}'")
    return value.strip()


def normalize_code(value: Any, field_name: str = "code") -> str:
    """Return an uppercased alpha-2 code or raise ValueError."""
    raw = _require_str(value, field_name)
    normalized = raw.upper()
    if len(normalized) != 2 or not (normalized.isascii() and normalized.isalpha()):
        raise ValueError(f"Invalid {field_name}: '{value}'")
    return normalized


def flag_emoji(code: str) -> str:
    """Regional-indicator pair for an alpha-2 code, e.g. 'AU' -> '🇦🇺'."""
    return "".join(chr(_REGIONAL_INDICATOR_A + ord(ch) - ord("A")) for ch in code)


@dataclass(frozen=True, slots=True)
class Country:
    """ISO 3166-1 country record."""

    name: str
    code: str
    flag: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Country:
        name = _require_str(data.get("name"), "name")
        code = normalize_code(data.get("code"), "code")
        flag_raw = data.get("flag")
        flag = _require_str(flag_raw, "flag") if flag_raw is not None else flag_emoji(code)
        return cls(name=name, code=code, flag=flag)

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "code": self.code, "flag": self.flag}

    @property
    def search_text(self) -> str:
        return f"{self.name} {self.code}"


@dataclass(frozen=True, slots=True)
class CountryOverrides:
    """Renames, additions and removals applied on top of a base country list."""

    rename: Mapping[str, str] = field(default_factory=dict)
    add: tuple[Country, ...] = ()
    remove: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.rename or self.add or self.remove)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CountryOverrides:
        rename_raw = data.get("rename", {})
        if rename_raw is None:
            rename: dict[str, str] = {}
        elif isinstance(rename_raw, dict):
            rename = {
                normalize_code(k, "rename key"): _require_str(v, "rename value")
                for k, v in rename_raw.items()
            }
        else:
            raise ValueError("Expected mapping for 'rename'")

        add_raw = data.get("add", [])
        add: list[Country] = []
        if add_raw is not None:
            if not isinstance(add_raw, list):
                raise ValueError("Expected list for 'add'")
            for idx, item in enumerate(add_raw):
                if not isinstance(item, Mapping):
                    raise ValueError(f"Expected mapping for 'add[{idx}]'")
                add.append(Country.from_mapping(item))

        remove_raw = data.get("remove", [])
        remove: list[str] = []
        if remove_raw is not None:
            if not isinstance(remove_raw, list):
                raise ValueError("Expected list for 'remove'")
            for item in remove_raw:
                remove.append(normalize_code(item, "remove[]"))

        both = sorted(set(rename) & set(remove))
        if both:
            raise ValueError(f"Codes both renamed and removed: {', '.join(both)}")

        return cls(rename=rename, add=tuple(add), remove=tuple(remove))
