"""Reference tables and field validators shared by the service collectors."""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

# One entry per line: ISO 3166-1 alpha-2 code, a space, then the country name.
_COUNTRY_TABLE = """
AD Andorra
AE United Arab Emirates
AF Afghanistan
AG Antigua and Barbuda
AI Anguilla
AL Albania
AM Armenia
AO Angola
AQ Antarctica
AR Argentina
AS American Samoa
AT Austria
AU Australia
AW Aruba
AX Åland Islands
AZ Azerbaijan
BA Bosnia and Herzegovina
BB Barbados
BD Bangladesh
BE Belgium
BF Burkina Faso
BG Bulgaria
BH Bahrain
BI Burundi
BJ Benin
BL Saint Barthélemy
BM Bermuda
BN Brunei Darussalam
BO Bolivia (Plurinational State of)
BQ Bonaire, Sint Eustatius and Saba
BR Brazil
BS Bahamas
BT Bhutan
BV Bouvet Island
BW Botswana
BY Belarus
BZ Belize
CA Canada
CC Cocos (Keeling) Islands
CD Congo, Democratic Republic of the
CF Central African Republic
CG Congo
CH Switzerland
CI Côte d'Ivoire
CK Cook Islands
CL Chile
CM Cameroon
CN China
CO Colombia
CR Costa Rica
CU Cuba
CV Cabo Verde
CW Curaçao
CX Christmas Island
CY Cyprus
CZ Czechia
DE Germany
DJ Djibouti
DK Denmark
DM Dominica
DO Dominican Republic
DZ Algeria
EC Ecuador
EE Estonia
EG Egypt
EH Western Sahara
ER Eritrea
ES Spain
ET Ethiopia
FI Finland
FJ Fiji
FK Falkland Islands (Malvinas)
FM Micronesia (Federated States of)
FO Faroe Islands
FR France
GA Gabon
GB United Kingdom of Great Britain and Northern Ireland
GD Grenada
GE Georgia
GF French Guiana
GG Guernsey
GH Ghana
GI Gibraltar
GL Greenland
GM Gambia
GN Guinea
GP Guadeloupe
GQ Equatorial Guinea
GR Greece
GS South Georgia and the South Sandwich Islands
GT Guatemala
GU Guam
GW Guinea-Bissau
GY Guyana
HK Hong Kong
HM Heard Island and McDonald Islands
HN Honduras
HR Croatia
HT Haiti
HU Hungary
ID Indonesia
IE Ireland
IL Israel
IM Isle of Man
IN India
IO British Indian Ocean Territory
IQ Iraq
IR Iran (Islamic Republic of)
IS Iceland
IT Italy
JE Jersey
JM Jamaica
JO Jordan
JP Japan
KE Kenya
KG Kyrgyzstan
KH Cambodia
KI Kiribati
KM Comoros
KN Saint Kitts and Nevis
KP Korea (Democratic People's Republic of)
KR Korea, Republic of
KW Kuwait
KY Cayman Islands
KZ Kazakhstan
LA Lao People's Democratic Republic
LB Lebanon
LC Saint Lucia
LI Liechtenstein
LK Sri Lanka
LR Liberia
LS Lesotho
LT Lithuania
LU Luxembourg
LV Latvia
LY Libya
MA Morocco
MC Monaco
MD Moldova, Republic of
ME Montenegro
MF Saint Martin (French part)
MG Madagascar
MH Marshall Islands
MK North Macedonia
ML Mali
MM Myanmar
MN Mongolia
MO Macao
MP Northern Mariana Islands
MQ Martinique
MR Mauritania
MS Montserrat
MT Malta
MU Mauritius
MV Maldives
MW Malawi
MX Mexico
MY Malaysia
MZ Mozambique
NA Namibia
NC New Caledonia
NE Niger
NF Norfolk Island
NG Nigeria
NI Nicaragua
NL Netherlands
NO Norway
NP Nepal
NR Nauru
NU Niue
NZ New Zealand
OM Oman
PA Panama
PE Peru
PF French Polynesia
PG Papua New Guinea
PH Philippines
PK Pakistan
PL Poland
PM Saint Pierre and Miquelon
PN Pitcairn
PR Puerto Rico
PS Palestine, State of
PT Portugal
PW Palau
PY Paraguay
QA Qatar
RE Réunion
RO Romania
RS Serbia
RU Russian Federation
RW Rwanda
SA Saudi Arabia
SB Solomon Islands
SC Seychelles
SD Sudan
SE Sweden
SG Singapore
SH Saint Helena, Ascension and Tristan da Cunha
SI Slovenia
SJ Svalbard and Jan Mayen
SK Slovakia
SL Sierra Leone
SM San Marino
SN Senegal
SO Somalia
SR Suriname
SS South Sudan
ST Sao Tome and Principe
SV El Salvador
SX Sint Maarten (Dutch part)
SY Syrian Arab Republic
SZ Eswatini
TC Turks and Caicos Islands
TD Chad
TF French Southern Territories
TG Togo
TH Thailand
TJ Tajikistan
TK Tokelau
TL Timor-Leste
TM Turkmenistan
TN Tunisia
TO Tonga
TR Türkiye
TT Trinidad and Tobago
TV Tuvalu
TW Taiwan, Province of China
TZ Tanzania, United Republic of
UA Ukraine
UG Uganda
UM United States Minor Outlying Islands
US United States of America
UY Uruguay
UZ Uzbekistan
VA Holy See
VC Saint Vincent and the Grenadines
VE Venezuela (Bolivarian Republic of)
VG Virgin Islands (British)
VI Virgin Islands (U.S.)
VN Viet Nam
VU Vanuatu
WF Wallis and Futuna
WS Samoa
YE Yemen
YT Mayotte
ZA South Africa
ZM Zambia
ZW Zimbabwe
"""


def _load_table(table: str) -> Mapping[str, str]:
    entries = (row.split(" ", 1) for row in table.strip().splitlines())
    return MappingProxyType({code: name for code, name in entries})


COUNTRY_CODES = _load_table(_COUNTRY_TABLE)

SMS_PROVIDERS = frozenset("Topolo Rond Kildy".split())

VOICE_PROVIDERS = frozenset("TransparentCalls E-Voice JustPhone".split())

EMAIL_PROVIDERS = frozenset(
    "Gmail|Yahoo|Hotmail|MSN|Orange|Comcast|AOL|Live|RediffMail|GMX|Proton Mail|Yandex|Mail.ru".split("|")
)

STATUSES = frozenset(("active", "closed"))

_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"[+-]?0[xX]")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _atoi(text: str) -> int:
    """Parse a strict base-10 integer that must fit in 64 bits."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float32(text: str) -> float:
    """Parse a number and round it to single precision, rejecting overflow."""
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        raise ValueError(f"invalid float: {text!r}")
    if _HEX_RE.match(text):
        if "p" not in text.lower():
            raise ValueError(f"hexadecimal float needs an exponent: {text!r}")
        value = float.fromhex(text)
    else:
        value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        raise ValueError(f"float out of range: {text!r}")
    try:
        packed = struct.pack("<f", value)
    except OverflowError as exc:
        raise ValueError(f"float out of range: {text!r}") from exc
    return struct.unpack("<f", packed)[0]


def _succeeds(parse, text: str) -> bool:
    try:
        parse(text)
    except ValueError:
        return False
    return True


def _read_lines(path: str | Path) -> Iterator[str]:
    """Yield the lines of a data file, dropping line terminators."""
    text = Path(path).read_bytes().decode("utf-8", errors="surrogateescape")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line.removesuffix("\r")


def code_to_country(code: str) -> str:
    """Return the full country name for an alpha-2 code, or an empty string."""
    return COUNTRY_CODES.get(code, "")


def is_valid_country(country: str) -> bool:
    """Whether the string is a known alpha-2 country code."""
    return country in COUNTRY_CODES


def is_valid_bandwidth(bandwidth: str) -> bool:
    """Whether the bandwidth is an integer between 0 and 100."""
    try:
        return 0 <= _atoi(bandwidth) <= 100
    except ValueError:
        return False


def is_valid_response_time(response_time: str) -> bool:
    """Whether the response time is a non-negative integer."""
    try:
        return _atoi(response_time) >= 0
    except ValueError:
        return False


def is_valid_sms_provider(provider: str) -> bool:
    """Whether the provider is a known SMS provider."""
    return provider in SMS_PROVIDERS


def is_valid_voice_provider(provider: str) -> bool:
    """Whether the provider is a known voice-call provider."""
    return provider in VOICE_PROVIDERS


def is_valid_email_provider(provider: str) -> bool:
    """Whether the provider is a known e-mail provider."""
    return provider in EMAIL_PROVIDERS


def is_valid_load(load: str) -> bool:
    """Whether the load is an integer between 0 and 100."""
    try:
        return 0 <= _atoi(load) <= 100
    except ValueError:
        return False


def is_valid_stability(stability: str) -> bool:
    """Whether the stability parses as a single-precision float."""
    return _succeeds(_parse_float32, stability)


def is_valid_purity(purity: str) -> bool:
    """Whether the purity is an integer."""
    return _succeeds(_atoi, purity)


def is_valid_ttfb(ttfb: str) -> bool:
    """Whether the time to first byte is an integer."""
    return _succeeds(_atoi, ttfb)


def is_valid_median_duration(median: str) -> bool:
    """Whether the median call duration is an integer."""
    return _succeeds(_atoi, median)


def is_valid_delivery_time(delivery_time: str) -> bool:
    """Whether the delivery time is a positive integer."""
    try:
        return _atoi(delivery_time) > 0
    except ValueError:
        return False


def is_valid_status(status: str) -> bool:
    """Whether the status is a known incident status."""
    return status in STATUSES