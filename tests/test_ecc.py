import pytest

from rdsdecode.country import Country, lookup_iso, lookup_name
from rdsdecode.ecc import ECC_UNKNOWN, PI_UNKNOWN, lookup_country


@pytest.mark.parametrize(
    "pi, ecc, expected",
    [
        (0x34DB, 0xE2, Country.POLAND),
        (0x2000, 0xE2, Country.CZECHIA),
        (0x1234, 0xE0, Country.GERMANY),
        (0xD000, 0xE0, Country.GERMANY),
        (0xC201, 0xE1, Country.UNITED_KINGDOM),
        (0xF201, 0xE1, Country.FRANCE),
        (0x1000, 0xF0, Country.AUSTRALIA_CAPITAL_TERRITORY),
        (0xB000, 0xA1, Country.CANADA),
        (0x3000, 0xA2, Country.BRAZIL_OR_EQUATOR),
        (0xA000, 0xD4, Country.SOUTH_SUDAN),
        (0x3000, 0xE5, Country.KYRGYZSTAN),
        (0x9000, 0xF4, Country.CHINA),
        (0xF000, 0xA6, Country.ST_PIERRE_AND_MIQUELON),
    ],
)
def test_known_countries(pi, ecc, expected):
    assert lookup_country(pi, ecc) == expected


def test_gap_in_table_is_unknown():
    assert lookup_country(0xC000, 0xA0) == Country.UNKNOWN
    assert lookup_country(0xE000, 0xE0) == Country.UNKNOWN


@pytest.mark.parametrize("ecc", [0x00, 0x9F, 0xA7, 0xCF, 0xD5, 0xE6, 0xEF, 0xF5, 0xFF])
def test_ecc_outside_tables_is_unknown(ecc):
    assert lookup_country(0x3000, ecc) == Country.UNKNOWN


def test_pi_country_zero_is_unknown():
    assert lookup_country(0x0FFF, 0xE2) == Country.UNKNOWN


def test_unknown_pi_and_ecc():
    assert lookup_country(PI_UNKNOWN, 0xE2) == Country.UNKNOWN
    assert lookup_country(None, 0xE2) == Country.UNKNOWN
    assert lookup_country(0x3000, ECC_UNKNOWN) == Country.UNKNOWN
    assert lookup_country(0x3000, None) == Country.UNKNOWN


def test_only_country_nibble_matters():
    results = {lookup_country(0x3000 | low, 0xE2) for low in range(0, 0x1000, 0x111)}
    assert results == {Country.POLAND}


def test_every_table_cell_is_a_country():
    for ecc in range(0x100):
        for nibble in range(16):
            result = lookup_country(nibble << 12, ecc)
            assert isinstance(result, Country)
            if nibble == 0:
                assert result == Country.UNKNOWN


def test_result_resolves_to_names():
    country = lookup_country(0x34DB, 0xE2)
    assert lookup_iso(country) == "PL"
    assert lookup_name(country) == "Poland"