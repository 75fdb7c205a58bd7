"""METAR decoder - turns a service report record into readable values."""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from metardecoder.codes import (
    CLOUD_TYPES,
    COMPASS_SECTORS,
    CONDITIONS,
    COVERAGE,
    INTENSITY_PREFIXES,
    VICINITY_PHRASE,
    VICINITY_PREFIX,
)
from metardecoder.stations import LocationInfo
from metardecoder.utils import c_to_f, hundreds_ft_to_ft, parse_float, parse_int

logger = logging.getLogger(__name__)


def _str(value) -> str:
    return "" if value is None else str(value)


def _list(value, name: str, allow_null: bool = True) -> list:
    """Return a JSON array field as a list; null means empty."""
    if value is None and allow_null:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{name} must be a list, got {type(value).__name__}")
    return list(value)


class RawReport:
    """Report record as received from the weather service."""

    def __init__(
        self,
        station: str = "",
        altimeter: str = "",
        temperature: str = "",
        dewpoint: str = "",
        wind_direction: str = "",
        conditions: Iterable[str] = (),
        cloud_layers: Iterable[Sequence[str]] = (),
        wind_speed: str = "",
        wind_gust: str = "",
        visibility: str = "",
        flight_rules: str = "",
        raw_report: str = "",
        remarks: str = "",
        time: str = "",
        location_info: Optional[LocationInfo] = None,
    ):
        self.station = station
        self.altimeter = altimeter
        self.temperature = temperature
        self.dewpoint = dewpoint
        self.wind_direction = wind_direction
        self.conditions: Tuple[str, ...] = tuple(conditions)
        self.cloud_layers: Tuple[Tuple[str, ...], ...] = tuple(
            tuple(layer) for layer in cloud_layers
        )
        self.wind_speed = wind_speed
        self.wind_gust = wind_gust
        self.visibility = visibility
        self.flight_rules = flight_rules
        self.raw_report = raw_report
        self.remarks = remarks
        self.time = time
        self.location_info = location_info or LocationInfo()

    @classmethod
    def from_dict(cls, data: dict) -> "RawReport":
        """
        Build a report from the service's JSON object.

        Keys match case-insensitively. Missing keys become empty strings
        or empty lists.

        Raises:
            ValueError: If Other-List, Cloud-List or a cloud layer is not a list
        """
        fields = {str(key).lower(): value for key, value in data.items()}

        def get(key: str):
            return fields.get(key.lower())

        return cls(
            station=_str(get("Station")),
            altimeter=_str(get("Altimeter")),
            temperature=_str(get("Temperature")),
            dewpoint=_str(get("Dewpoint")),
            wind_direction=_str(get("Wind-Direction")),
            conditions=[_str(c) for c in _list(get("Other-List"), "Other-List")],
            cloud_layers=[
                [_str(token) for token in _list(layer, "Cloud-List layer", allow_null=False)]
                for layer in _list(get("Cloud-List"), "Cloud-List")
            ],
            wind_speed=_str(get("Wind-Speed")),
            wind_gust=_str(get("Wind-Gust")),
            visibility=_str(get("Visibility")),
            flight_rules=_str(get("Flight-Rules")),
            raw_report=_str(get("Raw-Report")),
            remarks=_str(get("Remarks")),
            time=_str(get("Time")),
            location_info=LocationInfo.from_dict(get("Info")),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "station": self.station,
            "altimeter": self.altimeter,
            "temperature": self.temperature,
            "dewpoint": self.dewpoint,
            "wind_direction": self.wind_direction,
            "wind_speed": self.wind_speed,
            "wind_gust": self.wind_gust,
            "visibility": self.visibility,
            "flight_rules": self.flight_rules,
            "raw_report": self.raw_report,
            "remarks": self.remarks,
            "time": self.time,
            "conditions": list(self.conditions),
            "cloud_layers": [list(layer) for layer in self.cloud_layers],
            "location_info": self.location_info.to_dict(),
        }


class DecodedCondition:
    """A decoded weather phenomenon."""

    def __init__(self, modifier: str = "", desc: str = "", other: str = ""):
        """
        Args:
            modifier: LIGHT, HEAVY or empty
            desc: Phenomenon phrase, empty if the code is unknown
            other: IN VICINITY or empty
        """
        self.modifier = modifier
        self.desc = desc
        self.other = other

    def to_dict(self) -> dict:
        return {
            "modifier": self.modifier,
            "desc": self.desc,
            "other": self.other,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, DecodedCondition):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"DecodedCondition({self.modifier!r}, {self.desc!r}, {self.other!r})"


class DecodedCloudLayer:
    """A decoded cloud layer."""

    def __init__(self, coverage: str = "", height_ft: int = 0, type: str = ""):
        self.coverage = coverage
        self.height_ft = height_ft
        self.type = type

    def to_dict(self) -> dict:
        return {
            "coverage": self.coverage,
            "height_ft": self.height_ft,
            "type": self.type,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, DecodedCloudLayer):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"DecodedCloudLayer({self.coverage!r}, {self.height_ft!r}, {self.type!r})"


class DecodedReport:
    """Raw report plus its human-readable derived values."""

    def __init__(self, raw: RawReport):
        self.raw = raw
        self.station = raw.station
        self.wind_direction = raw.wind_direction
        self.wind_speed = raw.wind_speed
        self.wind_gust = raw.wind_gust
        self.visibility = raw.visibility
        self.flight_rules = raw.flight_rules
        self.raw_report = raw.raw_report
        self.remarks = raw.remarks
        self.time = raw.time
        self.location_info = raw.location_info
        self.conditions = list(raw.conditions)
        self.cloud_layers = [list(layer) for layer in raw.cloud_layers]

        self.altimeter = "0.00"
        self.temperature = "0.0"
        self.temperature_f = "32.0"
        self.dewpoint = "0.0"
        self.dewpoint_f = "32.0"
        self.wind_direction_desc = ""
        self.conditions_dec: List[DecodedCondition] = []
        self.cloud_layers_dec: List[DecodedCloudLayer] = []

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "station": self.station,
            "altimeter": self.altimeter,
            "temperature": self.temperature,
            "temperature_f": self.temperature_f,
            "dewpoint": self.dewpoint,
            "dewpoint_f": self.dewpoint_f,
            "wind_direction": self.wind_direction,
            "wind_direction_desc": self.wind_direction_desc,
            "wind_speed": self.wind_speed,
            "wind_gust": self.wind_gust,
            "visibility": self.visibility,
            "flight_rules": self.flight_rules,
            "raw_report": self.raw_report,
            "remarks": self.remarks,
            "time": self.time,
            "conditions": self.conditions,
            "conditions_dec": [c.to_dict() for c in self.conditions_dec],
            "cloud_layers": self.cloud_layers,
            "cloud_layers_dec": [c.to_dict() for c in self.cloud_layers_dec],
            "location_info": self.location_info.to_dict(),
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, DecodedReport):
            return NotImplemented
        return self.to_dict() == other.to_dict()


def decode_altimeter(altimeter: str) -> str:
    """Scale a hundredths altimeter setting ("3012") to inches of mercury ("30.12")."""
    return f"{parse_float(altimeter, 'altimeter') / 100:.2f}"


def decode_temperature(value: str, field: str = "temperature") -> Tuple[str, str]:
    """
    Decode a temperature or dewpoint.

    "M" marks a negative value (M05 is -5 degrees C).

    Returns:
        Tuple of (celsius, fahrenheit), both formatted to one decimal
    """
    celsius = parse_float(_str(value).replace("M", "-", 1), field)
    return f"{celsius:.1f}", f"{c_to_f(celsius):.1f}"


def get_direction_desc(degrees: int) -> str:
    """
    Classify a wind direction into a 16-point compass label.

    Args:
        degrees: Direction in degrees; 0-360 is classified

    Returns:
        Label such as "NNE", or empty string outside 0-360
    """
    if degrees < 0:
        return ""
    for upper, label in COMPASS_SECTORS:
        if degrees <= upper:
            return label
    return ""


def decode_condition(code: str) -> DecodedCondition:
    """Decode one phenomenon code such as "VC+TSRA"."""
    vicinity = False
    if code.startswith(VICINITY_PREFIX):
        vicinity = True
        code = code[len(VICINITY_PREFIX):]

    modifier = ""
    for prefix, name in INTENSITY_PREFIXES:
        if code.startswith(prefix):
            modifier = name
            code = code[len(prefix):]
            break

    desc = CONDITIONS.get(code, "")
    if not desc:
        logger.debug(f"Unknown weather phenomenon code: {code!r}")

    return DecodedCondition(
        modifier=modifier,
        desc=desc,
        other=VICINITY_PHRASE if vicinity else "",
    )


def decode_conditions(codes: Iterable[str]) -> List[DecodedCondition]:
    return [decode_condition(code) for code in codes]


def decode_cloud_layer(layer: Sequence[str]) -> DecodedCloudLayer:
    """
    Decode one cloud layer, e.g. ["BKN", "025", "CB"].

    Layers missing the coverage or height token are zero-filled rather
    than dropped.
    """
    if len(layer) < 2:
        logger.debug(f"Malformed cloud layer {list(layer)!r}, zero-filling")

    coverage_code = layer[0] if len(layer) > 0 else ""
    height = parse_int(layer[1], "cloud height") if len(layer) > 1 else 0

    decoded = DecodedCloudLayer(
        coverage=COVERAGE.get(coverage_code, ""),
        height_ft=hundreds_ft_to_ft(height),
    )
    if len(layer) > 2:
        decoded.type = CLOUD_TYPES.get(layer[2], "")
    return decoded


def decode_cloud_layers(layers: Iterable[Sequence[str]]) -> List[DecodedCloudLayer]:
    return [decode_cloud_layer(layer) for layer in layers]


def decode_metar(raw: RawReport) -> DecodedReport:
    """
    Decode a raw report into a new DecodedReport.

    The raw report is not modified. Malformed numbers decode to zero and
    unknown codes to empty phrases; nothing here raises.
    """
    decoded = DecodedReport(raw)

    decoded.altimeter = decode_altimeter(raw.altimeter)
    decoded.temperature, decoded.temperature_f = decode_temperature(raw.temperature)
    decoded.dewpoint, decoded.dewpoint_f = decode_temperature(raw.dewpoint, "dewpoint")

    wind_degrees = parse_int(raw.wind_direction, "wind direction")
    decoded.wind_direction_desc = get_direction_desc(wind_degrees)

    decoded.conditions_dec = decode_conditions(raw.conditions)
    decoded.cloud_layers_dec = decode_cloud_layers(raw.cloud_layers)

    return decoded
