"""Lookup tables for METAR code decoding."""

from types import MappingProxyType
from typing import Mapping, Tuple

# Phenomenon code -> phrase. Compound codes (TSRA) are looked up whole.
CONDITIONS: Mapping[str, str] = MappingProxyType({
    "RA": "RAIN",
    "DZ": "DRIZZLE",
    "SN": "SNOW",
    "SG": "SNOW GRAINS",
    "IC": "ICE CRYSTALS",
    "PL": "ICE PELLETS",
    "GR": "HAIL",
    "GS": "SMALL HAIL/SNOW PELLETS",
    "UP": "UNKNOWN PRECIPITATION",
    "BR": "MIST",
    "FG": "FOG",
    "FU": "SMOKE",
    "VA": "VOLCANIC ASH",
    "SA": "SAND",
    "HZ": "HAZE",
    "PY": "SPRAY",
    "DU": "DUST",
    "SQ": "SQUALL",
    "SS": "SANDSTORM",
    "DS": "DUSTSTORM",
    "PO": "WELL DEVELOPED DUST/SAND WHIRLS",
    "FC": "FUNNEL CLOUD",
    "VC": "IN VICINITY",
    "MI": "SHALLOW",
    "BC": "PATCHES",
    "SH": "SHOWERS",
    "PR": "PARTIAL",
    "TS": "THUNDERSTORM",
    "TSRA": "THUNDERSTORM/HEAVY RAIN",
    "BL": "BLOWING",
    "DR": "DRIFTING",
    "FZ": "FREEZING",
})

COVERAGE: Mapping[str, str] = MappingProxyType({
    "FEW": "FEW",
    "SKC": "SKY CLEAR",
    "OVC": "OVERCAST",
    "SCT": "SCATTERED",
    "BKN": "BROKEN",
    "VV": "VERTICLE VISIBILITY",
})

CLOUD_TYPES: Mapping[str, str] = MappingProxyType({
    "CB": "CUMULONIMBUS",
    "TCU": "TOWERING CUMULUS",
    "CBMAM": "CUMULONIMBUS MAMMATUS",
})

# Intensity prefix -> modifier, checked in order after the vicinity prefix
INTENSITY_PREFIXES: Tuple[Tuple[str, str], ...] = (
    ("-", "LIGHT"),
    ("+", "HEAVY"),
)

VICINITY_PREFIX = "VC"
VICINITY_PHRASE = "IN VICINITY"

# (inclusive upper bound in degrees, label). Each sector starts just above
# the previous bound; 0-11 and 350-360 are both N.
COMPASS_SECTORS: Tuple[Tuple[int, str], ...] = (
    (11, "N"),
    (34, "NNE"),
    (56, "NE"),
    (79, "ENE"),
    (101, "E"),
    (124, "ESE"),
    (146, "SE"),
    (169, "SSE"),
    (191, "S"),
    (214, "SSW"),
    (236, "SW"),
    (259, "WSW"),
    (281, "W"),
    (304, "WNW"),
    (326, "NW"),
    (349, "NNW"),
    (360, "N"),
)
