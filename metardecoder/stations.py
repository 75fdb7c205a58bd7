"""Station identifiers and location info."""

from typing import Optional

DEFAULT_ICAO_PREFIX = "K"


class InvalidAirportCode(ValueError):
    """Raised when an airport code cannot be normalized to ICAO form."""

    def __init__(self, icao: str):
        super().__init__(f"Invalid airport code: {icao}")
        self.icao = icao


def format_icao(icao: str, prefix: str = DEFAULT_ICAO_PREFIX) -> str:
    """
    Normalize an airport code to a 4-letter ICAO code.

    Three-letter codes (e.g. "lax") get the regional prefix prepended,
    continental US ("K") by default.

    Args:
        icao: 3 or 4 character airport code, any case
        prefix: Prefix for 3-letter codes

    Returns:
        Uppercase ICAO code

    Raises:
        InvalidAirportCode: If the code is not 3 or 4 characters long
    """
    if len(icao) < 3 or len(icao) > 4:
        raise InvalidAirportCode(icao)

    icao = icao.upper()
    if len(icao) < 4:
        icao = prefix.upper() + icao

    return icao


class LocationInfo:
    """Station location details returned alongside a report."""

    def __init__(
        self,
        city: str = "",
        country: str = "",
        name: str = "",
        state: str = "",
    ):
        self.city = city
        self.country = country
        self.name = name
        self.state = state

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "LocationInfo":
        """Build from the service's "Info" object."""
        if not isinstance(data, dict):
            return cls()
        fields = {str(key).lower(): value for key, value in data.items()}
        return cls(
            city=str(fields.get("city") or ""),
            country=str(fields.get("country") or ""),
            name=str(fields.get("name") or ""),
            state=str(fields.get("state") or ""),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "City": self.city,
            "Country": self.country,
            "Name": self.name,
            "State": self.state,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, LocationInfo):
            return NotImplemented
        return self.to_dict() == other.to_dict()
