import pytest

from rdsdecode.country import Country, lookup_iso, lookup_name


def test_known_country_name_and_iso():
    assert lookup_name(Country.POLAND) == "Poland"
    assert lookup_iso(Country.POLAND) == "PL"


def test_first_and_last_entries():
    assert lookup_name(Country.ALBANIA) == "Albania"
    assert lookup_iso(Country.ALBANIA) == "AL"
    assert lookup_name(Country.BRAZIL_OR_EQUATOR) == "Brazil/Equator"
    assert lookup_iso(Country.BRAZIL_OR_EQUATOR) == "--"


def test_area_without_iso_code():
    assert lookup_name(Country.USA_OR_VI_OR_PR) == "USA/VI/PR"
    assert lookup_iso(Country.USA_OR_VI_OR_PR) == "--"


@pytest.mark.parametrize("value", [Country.UNKNOWN, -1, len(Country), 1000])
def test_unknown_values(value):
    assert lookup_name(value) == "Unknown"
    assert lookup_iso(value) == "??"


def test_plain_int_matches_enum():
    assert lookup_name(int(Country.CZECHIA)) == lookup_name(Country.CZECHIA) == "Czechia"


def test_every_country_has_name_and_code():
    for country in Country:
        if country is Country.UNKNOWN:
            continue
        assert lookup_name(country) != "Unknown"
        assert len(lookup_iso(country)) == 2
        assert lookup_iso(country) != "??"