"""Tests for country list loading."""

import pytest

from countrydir.countries import DEFAULT_DATASET_PATH, country_index_by_code, load_countries


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_default_dataset_loads():
    countries = load_countries(DEFAULT_DATASET_PATH)
    assert len(countries) == 249
    assert countries[0].code == "AD"
    assert countries[-1].code == "ZW"


def test_norway_code_is_not_parsed_as_boolean():
    index = country_index_by_code(load_countries())
    assert index["NO"].name == "Norway"


def test_load_countries_preserves_file_order(tmp_path):
    path = _write(
        tmp_path / "countries.yaml",
        '- {code: "AT", name: "Austria"}\n- {code: "AU", name: "Australia"}\n',
    )
    countries = load_countries(path)
    assert [country.code for country in countries] == ["AT", "AU"]
    assert countries[1].flag == "🇦🇺"


def test_load_countries_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_countries(tmp_path / "nope.yaml")


def test_load_countries_rejects_non_list(tmp_path):
    path = _write(tmp_path / "countries.yaml", "AU: Australia\n")
    with pytest.raises(ValueError, match="Expected list"):
        load_countries(path)


def test_load_countries_rejects_non_mapping_item(tmp_path):
    path = _write(tmp_path / "countries.yaml", "- AU\n")
    with pytest.raises(ValueError, match="index 0"):
        load_countries(path)


def test_load_countries_rejects_bad_code(tmp_path):
    path = _write(tmp_path / "countries.yaml", '- {code: "AUS", name: "Australia"}\n')
    with pytest.raises(ValueError, match="Invalid country at index 0"):
        load_countries(path)


def test_load_countries_rejects_duplicate_code(tmp_path):
    path = _write(
        tmp_path / "countries.yaml",
        '- {code: "AU", name: "Australia"}\n- {code: "au", name: "Oz"}\n',
    )
    with pytest.raises(ValueError, match="Duplicate code 'AU'"):
        load_countries(path)
