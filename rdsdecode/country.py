"""Country identifiers with their English names and ISO 3166 codes."""

from enum import IntEnum

__all__ = ["Country", "lookup_name", "lookup_iso"]


class Country(IntEnum):
    """Countries and areas that can be derived from PI and ECC codes."""

    UNKNOWN = 0
    ALBANIA = 1
    ESTONIA = 2
    ALGERIA = 3
    ETHIOPIA = 4
    ANDORRA = 5
    ANGOLA = 6
    FINLAND = 7
    ARMENIA = 8
    FRANCE = 9
    ASCENSION_ISLAND = 10
    GABON = 11
    AUSTRIA = 12
    GAMBIA = 13
    AZERBAIJAN = 14
    GEORGIA = 15
    GERMANY = 16
    BAHREIN = 17
    GHANA = 18
    BELARUS = 19
    GIBRALTAR = 20
    BELGIUM = 21
    GREECE = 22
    BENIN = 23
    GUINEA = 24
    BOSNIA_HERZEGOVINA = 25
    GUINEA_BISSAU = 26
    BOTSWANA = 27
    HUNGARY = 28
    BULGARIA = 29
    ICELAND = 30
    BURKINA_FASO = 31
    IRAQ = 32
    BURUNDI = 33
    IRELAND = 34
    CABINDA = 35
    ISRAEL = 36
    CAMEROON = 37
    ITALY = 38
    JORDAN = 39
    CAPE_VERDE = 40
    KAZAKHSTAN = 41
    CENTRAL_AFRICAN_REPUBLIC = 42
    KENYA = 43
    CHAD = 44
    KOSOVO = 45
    COMOROS = 46
    KUWAIT = 47
    DR_CONGO = 48
    KYRGYZSTAN = 49
    REPUBLIC_OF_CONGO = 50
    LATVIA = 51
    COTE_DIVOIRE = 52
    LEBANON = 53
    CROATIA = 54
    LESOTHO = 55
    CYPRUS = 56
    LIBERIA = 57
    CZECHIA = 58
    LIBYA = 59
    DENMARK = 60
    LIECHTENSTEIN = 61
    DJIBOUTIA = 62
    LITHUANIA = 63
    EGYPT = 64
    LUXEMBOURG = 65
    EQUATORIAL_GUINEA = 66
    MACEDONIA = 67
    ERITREA = 68
    MADAGASCAR = 69
    SEYCHELLES = 70
    MALAWI = 71
    SIERRA_LEONE = 72
    MALI = 73
    SLOVAKIA = 74
    MALTA = 75
    SLOVENIA = 76
    MAURITANIA = 77
    SOMALIA = 78
    MAURITIUS = 79
    SOUTH_AFRICA = 80
    MOLDOVA = 81
    SOUTH_SUDAN = 82
    MONACO = 83
    SPAIN = 84
    MONGOLIA = 85
    SUDAN = 86
    MONTENEGRO = 87
    SWAZILAND = 88
    MOROCCO = 89
    SWEDEN = 90
    MOZAMBIQUE = 91
    SWITZERLAND = 92
    NAMIBIA = 93
    SYRIA = 94
    NETHERLANDS = 95
    TAJIKISTAN = 96
    NIGER = 97
    TANZANIA = 98
    NIGERIA = 99
    TOGO = 100
    NORWAY = 101
    TUNISIA = 102
    OMAN = 103
    TURKEY = 104
    PALESTINE = 105
    TURKMENISTAN = 106
    POLAND = 107
    UGANDA = 108
    PORTUGAL = 109
    UKRAINE = 110
    QATAR = 111
    UNITED_ARAB_EMIRATES = 112
    ROMANIA = 113
    UNITED_KINGDOM = 114
    RUSSIA = 115
    UZBEKISTAN = 116
    RWANDA = 117
    VATICAN = 118
    SAN_MARINO = 119
    WESTERN_SAHARA = 120
    SAO_TOME_AND_PRINCIPE = 121
    YEMEN = 122
    SAUDI_ARABIA = 123
    ZAMBIA = 124
    SENEGAL = 125
    ZIMBABWE = 126
    SERBIA = 127
    ANGUILLA = 128
    GUYANA = 129
    ANTIGUA_AND_BARBUDA = 130
    HAITI = 131
    ARGENTINA = 132
    HONDURAS = 133
    ARUBA = 134
    JAMAICA = 135
    BAHAMAS = 136
    MARTINIQUE = 137
    BARBADOS = 138
    MEXICO = 139
    BELIZE = 140
    MONTSERRAT = 141
    BRAZIL_OR_BERMUDA = 142
    BRAZIL_OR_NETHERLANDS_ANTILLES = 143
    BOLIVIA = 144
    NICARAGUA = 145
    BRAZIL = 146
    PANAMA = 147
    CANADA = 148
    PARAGUAY = 149
    CAYMAN_ISLANDS = 150
    PERU = 151
    CHILE = 152
    USA_OR_VI_OR_PR = 153
    COLOMBIA = 154
    ST_KITTS = 155
    COSTA_RICA = 156
    ST_LUCIA = 157
    CUBA = 158
    ST_PIERRE_AND_MIQUELON = 159
    DOMINICA = 160
    ST_VINCENT = 161
    DOMINICAN_REPUBLIC = 162
    SURINAME = 163
    EL_SALVADOR = 164
    TRINIDAD_AND_TOBAGO = 165
    TURKS_AND_CAICOS_ISLANDS = 166
    FALKLAND_ISLANDS = 167
    GREENLAND = 168
    URUGUAY = 169
    GRENADA = 170
    VENEZUELA = 171
    GUADELOUPE = 172
    VIRGIN_ISLANDS = 173
    GUATEMALA = 174
    AFGHANISTAN = 175
    SOUTH_KOREA = 176
    LAOS = 177
    AUSTRALIA_CAPITAL_TERRITORY = 178
    MACAO = 179
    AUSTRALIA_NEW_SOUTH_WALES = 180
    MALAYSIA = 181
    AUSTRALIA_VICTORIA = 182
    MALDIVES = 183
    AUSTRALIA_QUEENSLAND = 184
    MARSHALL_ISLANDS = 185
    AUSTRALIA_SOUTH_AUSTRALIA = 186
    MICRONESIA = 187
    AUSTRALIA_WESTERN_AUSTRALIA = 188
    MYANMAR = 189
    AUSTRALIA_TASMANIA = 190
    NAURU = 191
    AUSTRALIA_NORTHERN_TERRITORY = 192
    NEPAL = 193
    BANGLADESH = 194
    NEW_ZEALAND = 195
    BHUTAN = 196
    PAKISTAN = 197
    BRUNEI_DARUSSALAM = 198
    PAPUA_NEW_GUINEA = 199
    CAMBODIA = 200
    PHILIPPINES = 201
    CHINA = 202
    SAMOA = 203
    SINGAPORE = 204
    SOLOMON_ISLANDS = 205
    FIJI = 206
    SRI_LANKA = 207
    HONG_KONG = 208
    TAIWAN = 209
    INDIA = 210
    THAILAND = 211
    INDONESIA = 212
    TONGA = 213
    IRAN = 214
    VANUATU = 215
    JAPAN = 216
    VIETNAM = 217
    KIRIBATI = 218
    NORTH_KOREA = 219
    BRAZIL_OR_EQUATOR = 220


# Indexed by ``country - 1``.
_NAMES = (
    "Albania", "Estonia", "Algeria", "Ethiopia", "Andorra",
    "Angola", "Finland", "Armenia", "France", "Ascension Island",
    "Gabon", "Austria", "Gambia", "Azerbaijan", "Georgia",
    "Germany", "Bahrein", "Ghana", "Belarus", "Gibraltar",
    "Belgium", "Greece", "Benin", "Guinea", "Bosnia Herzegovina",
    "Guinea-Bissau", "Botswana", "Hungary", "Bulgaria", "Iceland",
    "Burkina Faso", "Iraq", "Burundi", "Ireland", "Cabinda",
    "Israel", "Cameroon", "Italy", "Jordan", "Cape Verde",
    "Kazakhstan", "Central African Republic", "Kenya", "Chad", "Kosovo",
    "Comoros", "Kuwait", "DR Congo", "Kyrgyzstan", "Republic of Congo",
    "Latvia", "Cote d'Ivoire", "Lebanon", "Croatia", "Lesotho",
    "Cyprus", "Liberia", "Czechia", "Libya", "Denmark",
    "Liechtenstein", "Djiboutia", "Lithuania", "Egypt", "Luxembourg",
    "Equatorial Guinea", "Macedonia", "Eritrea", "Madagascar", "Seychelles",
    "Malawi", "Sierra Leone", "Mali", "Slovakia", "Malta",
    "Slovenia", "Mauritania", "Somalia", "Mauritius", "South Africa",
    "Moldova", "South Sudan", "Monaco", "Spain", "Mongolia",
    "Sudan", "Montenegro", "Swaziland", "Morocco", "Sweden",
    "Mozambique", "Switzerland", "Namibia", "Syria", "Netherlands",
    "Tajikistan", "Niger", "Tanzania", "Nigeria", "Togo",
    "Norway", "Tunisia", "Oman", "Turkey", "Palestine",
    "Turkmenistan", "Poland", "Uganda", "Portugal", "Ukraine",
    "Qatar", "United Arab Emirates", "Romania", "United Kingdom", "Russia",
    "Uzbekistan", "Rwanda", "Vatican", "San Marino", "Western Sahara",
    "Sao Tome and Principe", "Yemen", "Saudi Arabia", "Zambia", "Senegal",
    "Zimbabwe", "Serbia", "Anguilla", "Guyana", "Antigua and Barbuda",
    "Haiti", "Argentina", "Honduras", "Aruba", "Jamaica",
    "Bahamas", "Martinique", "Barbados", "Mexico", "Belize",
    "Montserrat", "Brazil/Bermuda", "Brazil/AN", "Bolivia", "Nicaragua",
    "Brazil", "Panama", "Canada", "Paraguay", "Cayman Islands",
    "Peru", "Chile", "USA/VI/PR", "Colombia", "St. Kitts",
    "Costa Rica", "St. Lucia", "Cuba", "St. Pierre and Miquelon", "Dominica",
    "St. Vincent", "Dominican Republic", "Suriname", "El Salvador",
    "Trinidad and Tobago",
    "Turks and Caicos islands", "Falkland Islands", "Greenland", "Uruguay",
    "Grenada",
    "Venezuela", "Guadeloupe", "Virgin Islands", "Guatemala", "Afghanistan",
    "South Korea", "Laos", "Australia Capital Territory", "Macao",
    "Australia New South Wales",
    "Malaysia", "Australia Victoria", "Maldives", "Australia Queensland",
    "Marshall Islands",
    "Australia South Australia", "Micronesia", "Australia Western Australia",
    "Myanmar", "Australia Tasmania",
    "Nauru", "Australia Northern Territory", "Nepal", "Bangladesh",
    "New Zealand",
    "Bhutan", "Pakistan", "Brunei Darussalam", "Papua New Guinea", "Cambodia",
    "Philippines", "China", "Samoa", "Singapore", "Solomon Islands",
    "Fiji", "Sri Lanka", "Hong Kong", "Taiwan", "India",
    "Thailand", "Indonesia", "Tonga", "Iran", "Vanuatu",
    "Japan", "Vietnam", "Kiribati", "North Korea", "Brazil/Equator",
)

# Indexed by ``country - 1``.
_ISO_CODES = (
    "AL", "EE", "DZ", "ET", "AD", "AO", "FI", "AM", "FR", "SH",
    "GA", "AT", "GM", "AZ", "GE", "DE", "BH", "GH", "BY", "GI",
    "BE", "GR", "BJ", "GN", "BA", "GW", "BW", "HU", "BG", "IS",
    "BF", "IQ", "BI", "IE", "--", "IL", "CM", "IT", "JO", "CV",
    "KZ", "CF", "KE", "TD", "XK", "KM", "KW", "CD", "KG", "CG",
    "LV", "CI", "LB", "HR", "LS", "CY", "LR", "CZ", "LY", "DK",
    "LI", "DJ", "LT", "EG", "LU", "GQ", "MK", "ER", "MG", "SC",
    "MW", "SL", "ML", "SK", "MT", "SI", "MR", "SO", "MU", "ZA",
    "MD", "SS", "MC", "ES", "MN", "SD", "ME", "SZ", "MA", "SE",
    "MZ", "CH", "NA", "SY", "NL", "TJ", "NE", "TZ", "NG", "TG",
    "NO", "TN", "OM", "TR", "PS", "TM", "PL", "UG", "PT", "UA",
    "QA", "AE", "RO", "GB", "RU", "UZ", "RW", "VA", "SM", "EH",
    "ST", "YE", "SA", "ZM", "SN", "ZW", "RS", "AI", "GY", "AG",
    "HT", "AR", "HN", "AW", "JM", "BS", "MQ", "BB", "MX", "BZ",
    "MS", "--", "--", "BO", "NI", "BR", "PA", "CA", "PY", "KY",
    "PE", "CL", "--", "CO", "KN", "CR", "LC", "CU", "PM", "DM",
    "VC", "DO", "SR", "SN", "TT", "TB", "FK", "GL", "UY", "GD",
    "VE", "GP", "VG", "GT", "AF", "KR", "LA", "AU", "MO", "AU",
    "MY", "AU", "MV", "AU", "MH", "AU", "FM", "AU", "MM", "AU",
    "NR", "AU", "NP", "BD", "NZ", "BT", "PK", "BN", "PG", "KH",
    "PH", "CN", "WS", "SG", "SB", "FJ", "LK", "HK", "TW", "IN",
    "TH", "ID", "TO", "IR", "VU", "JP", "VN", "KI", "KP", "--",
)

_UNKNOWN_NAME = "Unknown"
_UNKNOWN_ISO = "??"


def _lookup(country: int, table: tuple, unknown: str) -> str:
    if not Country.UNKNOWN < country < len(Country):
        return unknown
    return table[int(country) - 1]


def lookup_name(country: int) -> str:
    """Return the English name of a country, or ``"Unknown"``."""
    return _lookup(country, _NAMES, _UNKNOWN_NAME)


def lookup_iso(country: int) -> str:
    """Return the ISO 3166 alpha-2 code of a country, or ``"??"``."""
    return _lookup(country, _ISO_CODES, _UNKNOWN_ISO)