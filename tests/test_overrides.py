"""Tests for override loading and derived collections."""

import pytest

from countrydir.directory import ALL, from_code, from_code_custom, search_custom
from countrydir.models import Country, CountryOverrides
from countrydir.overrides import apply_overrides, load_overrides


OVERRIDES_YAML = """\
rename:
  TR: Turkey
add:
  - code: XK
    name: Kosovo
remove:
  - AQ
"""


def test_load_overrides_missing_file_means_none(tmp_path):
    assert load_overrides(tmp_path / "missing.yaml").is_empty


def test_load_overrides_empty_file_means_none(tmp_path):
    path = tmp_path / "overrides.yaml"
    path.write_text("", encoding="utf-8")
    assert load_overrides(path).is_empty


def test_load_overrides_rejects_list(tmp_path):
    path = tmp_path / "overrides.yaml"
    path.write_text("- AU\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Expected mapping"):
        load_overrides(path)


def test_load_overrides_wraps_field_errors(tmp_path):
    path = tmp_path / "overrides.yaml"
    path.write_text("remove: AQ\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid overrides"):
        load_overrides(path)


def test_apply_overrides_derives_new_collection(tmp_path):
    path = tmp_path / "overrides.yaml"
    path.write_text(OVERRIDES_YAML, encoding="utf-8")
    derived = apply_overrides(ALL, load_overrides(path))

    assert len(derived) == 249
    assert from_code_custom(derived, "TR").name == "Turkey"
    assert from_code_custom(derived, "AQ") is None
    assert from_code_custom(derived, "XK") == Country(name="Kosovo", code="XK", flag="🇽🇰")
    codes = [country.code for country in derived]
    assert codes == sorted(codes)

    assert from_code("TR").name == "Türkiye"
    assert from_code("AQ") is not None
    assert from_code("XK") is None
    assert search_custom(ALL, "kosovo") == []


def test_apply_overrides_rejects_unknown_codes():
    with pytest.raises(ValueError, match="unknown codes: XK"):
        apply_overrides(ALL, CountryOverrides(rename={"XK": "Kosovo"}))


def test_apply_overrides_rejects_duplicate_addition():
    overrides = CountryOverrides(add=(Country(name="Oz", code="AU", flag="🇦🇺"),))
    with pytest.raises(ValueError, match="already present"):
        apply_overrides(ALL, overrides)


def test_apply_overrides_allows_replacing_removed_code():
    overrides = CountryOverrides(
        remove=("AU",),
        add=(Country(name="Oz", code="AU", flag="🇦🇺"),),
    )
    derived = apply_overrides(ALL, overrides)
    assert from_code_custom(derived, "AU").name == "Oz"
    assert len(derived) == len(ALL)


def test_apply_overrides_leaves_input_untouched():
    base = [Country(name="Austria", code="AT", flag="🇦🇹")]
    derived = apply_overrides(base, CountryOverrides(rename={"AT": "Österreich"}))
    assert base[0].name == "Austria"
    assert derived[0].name == "Österreich"
