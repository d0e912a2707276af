"""Country lookup from the PI country nibble and the extended country code."""

from typing import Optional

from .country import Country

__all__ = ["PI_UNKNOWN", "ECC_UNKNOWN", "lookup_country"]

PI_UNKNOWN = -1
ECC_UNKNOWN = -1

_C = Country
_U = Country.UNKNOWN

# Tables based on IEC 62106-4:2018. Each row is an ECC value and holds one
# entry per PI country nibble 1..F.
_ECC_A0_A6 = (
    # A0
    (_C.USA_OR_VI_OR_PR, _C.USA_OR_VI_OR_PR, _C.USA_OR_VI_OR_PR,
     _C.USA_OR_VI_OR_PR, _C.USA_OR_VI_OR_PR, _C.USA_OR_VI_OR_PR,
     _C.USA_OR_VI_OR_PR, _C.USA_OR_VI_OR_PR, _C.USA_OR_VI_OR_PR,
     _C.USA_OR_VI_OR_PR, _C.USA_OR_VI_OR_PR, _U,
     _C.USA_OR_VI_OR_PR, _C.USA_OR_VI_OR_PR, _U),
    # A1
    (_U, _U, _U, _U, _U, _U, _U, _U, _U, _U,
     _C.CANADA, _C.CANADA, _C.CANADA, _C.CANADA, _C.GREENLAND),
    # A2
    (_C.ANGUILLA, _C.ANTIGUA_AND_BARBUDA, _C.BRAZIL_OR_EQUATOR,
     _C.FALKLAND_ISLANDS, _C.BARBADOS, _C.BELIZE, _C.CAYMAN_ISLANDS,
     _C.COSTA_RICA, _C.CUBA, _C.ARGENTINA, _C.BRAZIL,
     _C.BRAZIL_OR_BERMUDA, _C.BRAZIL_OR_NETHERLANDS_ANTILLES,
     _C.GUADELOUPE, _C.BAHAMAS),
    # A3
    (_C.BOLIVIA, _C.COLOMBIA, _C.JAMAICA, _C.MARTINIQUE, _U,
     _C.PARAGUAY, _C.NICARAGUA, _U, _C.PANAMA, _C.DOMINICA,
     _C.DOMINICAN_REPUBLIC, _C.CHILE, _C.GRENADA,
     _C.TURKS_AND_CAICOS_ISLANDS, _C.GUYANA),
    # A4
    (_C.GUATEMALA, _C.HONDURAS, _C.ARUBA, _U, _C.MONTSERRAT,
     _C.TRINIDAD_AND_TOBAGO, _C.PERU, _C.SURINAME, _C.URUGUAY,
     _C.ST_KITTS, _C.ST_LUCIA, _C.EL_SALVADOR, _C.HAITI,
     _C.VENEZUELA, _C.VIRGIN_ISLANDS),
    # A5
    (_U, _U, _U, _U, _U, _U, _U, _U, _U, _U,
     _C.MEXICO, _C.ST_VINCENT, _C.MEXICO, _C.MEXICO, _C.MEXICO),
    # A6
    (_U, _U, _U, _U, _U, _U, _U, _U, _U, _U, _U, _U, _U, _U,
     _C.ST_PIERRE_AND_MIQUELON),
)

_ECC_D0_D4 = (
    # D0
    (_C.CAMEROON, _C.CENTRAL_AFRICAN_REPUBLIC, _C.DJIBOUTIA,
     _C.MADAGASCAR, _C.MALI, _C.ANGOLA, _C.EQUATORIAL_GUINEA, _C.GABON,
     _C.GUINEA, _C.SOUTH_AFRICA, _C.BURKINA_FASO, _C.REPUBLIC_OF_CONGO,
     _C.TOGO, _C.BENIN, _C.MALAWI),
    # D1
    (_C.NAMIBIA, _C.LIBERIA, _C.GHANA, _C.MAURITANIA,
     _C.SAO_TOME_AND_PRINCIPE, _C.CAPE_VERDE, _C.SENEGAL, _C.GAMBIA,
     _C.BURUNDI, _C.ASCENSION_ISLAND, _C.BOTSWANA, _C.COMOROS,
     _C.TANZANIA, _C.ETHIOPIA, _C.NIGERIA),
    # D2
    (_C.SIERRA_LEONE, _C.ZIMBABWE, _C.MOZAMBIQUE, _C.UGANDA,
     _C.SWAZILAND, _C.KENYA, _C.SOMALIA, _C.NIGER, _C.CHAD,
     _C.GUINEA_BISSAU, _C.DR_CONGO, _C.COTE_DIVOIRE, _U, _C.ZAMBIA,
     _C.ERITREA),
    # D3
    (_U, _U, _C.WESTERN_SAHARA, _C.CABINDA, _C.RWANDA, _C.LESOTHO, _U,
     _C.SEYCHELLES, _U, _C.MAURITIUS, _U, _C.SUDAN, _U, _U, _U),
    # D4
    (_U, _U, _U, _U, _U, _U, _U, _U, _U, _C.SOUTH_SUDAN,
     _U, _U, _U, _U, _U),
)

_ECC_E0_E5 = (
    # E0
    (_C.GERMANY, _C.ALGERIA, _C.ANDORRA, _C.ISRAEL, _C.ITALY,
     _C.BELGIUM, _C.RUSSIA, _C.PALESTINE, _C.ALBANIA, _C.AUSTRIA,
     _C.HUNGARY, _C.MALTA, _C.GERMANY, _U, _C.EGYPT),
    # E1
    (_C.GREECE, _C.CYPRUS, _C.SAN_MARINO, _C.SWITZERLAND, _C.JORDAN,
     _C.FINLAND, _C.LUXEMBOURG, _C.BULGARIA, _C.DENMARK, _C.GIBRALTAR,
     _C.IRAQ, _C.UNITED_KINGDOM, _C.LIBYA, _C.ROMANIA, _C.FRANCE),
    # E2
    (_C.MOROCCO, _C.CZECHIA, _C.POLAND, _C.VATICAN, _C.SLOVAKIA,
     _C.SYRIA, _C.TUNISIA, _U, _C.LIECHTENSTEIN, _C.ICELAND, _C.MONACO,
     _C.LITHUANIA, _C.SERBIA, _C.SPAIN, _C.NORWAY),
    # E3
    (_C.MONTENEGRO, _C.IRELAND, _C.TURKEY, _U, _C.TAJIKISTAN, _U, _U,
     _C.NETHERLANDS, _C.LATVIA, _C.LEBANON, _C.AZERBAIJAN, _C.CROATIA,
     _C.KAZAKHSTAN, _C.SWEDEN, _C.BELARUS),
    # E4
    (_C.MOLDOVA, _C.ESTONIA, _C.MACEDONIA, _U, _U, _C.UKRAINE,
     _C.KOSOVO, _C.PORTUGAL, _C.SLOVENIA, _C.ARMENIA, _C.UZBEKISTAN,
     _C.GEORGIA, _U, _C.TURKMENISTAN, _C.BOSNIA_HERZEGOVINA),
    # E5
    (_U, _U, _C.KYRGYZSTAN, _U, _U, _U, _U, _U, _U, _U, _U, _U, _U, _U,
     _U),
)

_ECC_F0_F4 = (
    # F0
    (_C.AUSTRALIA_CAPITAL_TERRITORY, _C.AUSTRALIA_NEW_SOUTH_WALES,
     _C.AUSTRALIA_VICTORIA, _C.AUSTRALIA_QUEENSLAND,
     _C.AUSTRALIA_SOUTH_AUSTRALIA, _C.AUSTRALIA_WESTERN_AUSTRALIA,
     _C.AUSTRALIA_TASMANIA, _C.AUSTRALIA_NORTHERN_TERRITORY,
     _C.SAUDI_ARABIA, _C.AFGHANISTAN, _C.MYANMAR, _C.CHINA,
     _C.NORTH_KOREA, _C.BAHREIN, _C.MALAYSIA),
    # F1
    (_C.KIRIBATI, _C.BHUTAN, _C.BANGLADESH, _C.PAKISTAN, _C.FIJI,
     _C.OMAN, _C.NAURU, _C.IRAN, _C.NEW_ZEALAND, _C.SOLOMON_ISLANDS,
     _C.BRUNEI_DARUSSALAM, _C.SRI_LANKA, _C.TAIWAN, _C.SOUTH_KOREA,
     _C.HONG_KONG),
    # F2
    (_C.KUWAIT, _C.QATAR, _C.CAMBODIA, _C.SAMOA, _C.INDIA, _C.MACAO,
     _C.VIETNAM, _C.PHILIPPINES, _C.JAPAN, _C.SINGAPORE, _C.MALDIVES,
     _C.INDONESIA, _C.UNITED_ARAB_EMIRATES, _C.NEPAL, _C.VANUATU),
    # F3
    (_C.LAOS, _C.THAILAND, _C.TONGA, _U, _U, _U, _U, _C.CHINA,
     _C.PAPUA_NEW_GUINEA, _U, _C.YEMEN, _U, _U, _C.MICRONESIA,
     _C.MONGOLIA),
    # F4
    (_U, _U, _U, _U, _U, _U, _U, _U, _C.CHINA, _U, _C.MARSHALL_ISLANDS,
     _U, _U, _U, _U),
)

# First ECC value of each table, with the table itself.
_TABLES = (
    (0xA0, _ECC_A0_A6),
    (0xD0, _ECC_D0_D4),
    (0xE0, _ECC_E0_E5),
    (0xF0, _ECC_F0_F4),
)


def lookup_country(pi: Optional[int], ecc: Optional[int]) -> Country:
    """Return the country for a PI code and ECC, or ``Country.UNKNOWN``.

    A PI of ``None`` or ``PI_UNKNOWN`` and an ECC outside the known ranges
    yield ``Country.UNKNOWN``.
    """
    if pi is None or ecc is None or pi == PI_UNKNOWN:
        return Country.UNKNOWN

    pi_country = (pi >> 12) & 0xF
    if pi_country == 0:
        return Country.UNKNOWN

    for first, table in _TABLES:
        if first <= ecc < first + len(table):
            return table[ecc - first][pi_country - 1]

    return Country.UNKNOWN