import math
import re
from typing import NamedTuple, Union

from .navigation_utils import latitude_cardinal, longitude_cardinal


class NmeaCoordinate(NamedTuple):
    """NMEA ddmm.mmmm magnitude with its hemisphere letter"""

    magnitude: float
    hemisphere: str  # N, S, E or W


def decimal_to_nmea(position: float) -> float:
    """
    Convert decimal degrees into NMEA ddmm.mmmm form.

    The sign is dropped: -48.1173 and 48.1173 both give 4807.038. Track the
    hemisphere separately, or use decimal_to_nmea_coordinate.

    Args:
        position: Latitude or longitude in decimal degrees

    Returns:
        float: Degrees * 100 + minutes, never negative
    """
    degrees = int(position)
    minutes = (position - degrees) * 60
    return abs(degrees * 100 + minutes)


def nmea_to_decimal(value: float) -> float:
    """
    Convert an NMEA ddmm.mmmm value into decimal degrees.

    Args:
        value: Degrees * 100 + minutes

    Returns:
        float: Decimal degrees
    """
    degrees = math.floor(value / 100)
    minutes = value - degrees * 100
    return degrees + minutes / 60


def decimal_to_nmea_coordinate(position: float, is_latitude: bool) -> NmeaCoordinate:
    """Convert signed decimal degrees into an NMEA magnitude and hemisphere"""
    if is_latitude:
        hemisphere = latitude_cardinal(position)
    else:
        hemisphere = longitude_cardinal(position)
    return NmeaCoordinate(decimal_to_nmea(position), hemisphere)


def nmea_coordinate_to_decimal(magnitude: float, hemisphere: str) -> float:
    """
    Convert an NMEA magnitude and hemisphere letter into signed decimal degrees.

    Args:
        magnitude: NMEA ddmm.mmmm value as found in the sentence
        hemisphere: N, S, E or W

    Returns:
        float: Decimal degrees (negative for South/West)
    """
    hemisphere = hemisphere.upper()
    if hemisphere not in ("N", "S", "E", "W"):
        raise ValueError(f"Invalid hemisphere: '{hemisphere}'")

    value = nmea_to_decimal(abs(magnitude))
    return -value if hemisphere in ("S", "W") else value


# Degrees, optional minutes, optional hemisphere letter: "48 07.038 N", "11 E"
COORDINATE_TEXT = re.compile(
    r"^(?P<degrees>-?\d+(?:\.\d*)?)(?:\s+(?P<minutes>\d+(?:\.\d*)?))?\s*(?P<hemisphere>[NSEW])?$"
)


def parse_coordinate(coord: Union[str, float, int]) -> float:
    """
    Read a waypoint coordinate from a route file.

    Numbers are taken as decimal degrees. Text may be decimal degrees
    ("48.1173"), degrees with a hemisphere ("11 E", "11° E") or degrees and
    decimal minutes with a hemisphere ("48° 07.038' N"). S and W give a
    negative result.
    """
    if isinstance(coord, (float, int)):
        return float(coord)

    text = " ".join(coord.replace("°", " ").replace("'", " ").replace('"', " ").split())
    match = COORDINATE_TEXT.match(text)
    if match is None or (match.group("minutes") and not match.group("hemisphere")):
        raise ValueError(f"Unable to parse coordinate: {coord}")

    value = float(match.group("degrees"))
    if match.group("minutes"):
        value += float(match.group("minutes")) / 60
    if match.group("hemisphere") in ("S", "W"):
        value = -value
    return value
