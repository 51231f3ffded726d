import logging
import math
from typing import TYPE_CHECKING, Optional

from .angle_utils import normalize, to_degrees, to_radians

if TYPE_CHECKING:
    from nmea_navigation.models.route import Waypoint

EARTH_RADIUS_KM = 6371

# Principal and intercardinal labels at every multiple of 45 degrees
PRINCIPAL_DIRECTIONS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
# Labels for the open range following each principal direction
BETWEEN_DIRECTIONS = ["NNE", "ENE", "ESE", "SSE", "SSW", "WSW", "WNW", "NNW"]


def distance_between_points(
    from_lat: float, from_lon: float, to_lat: float, to_lon: float
) -> float:
    """
    Calculate the great-circle distance between two points using the
    haversine formula on a spherical Earth.

    Coordinates are taken as given: no range checks or longitude wraparound.

    Args:
        from_lat: Start latitude in decimal degrees
        from_lon: Start longitude in decimal degrees
        to_lat: End latitude in decimal degrees
        to_lon: End longitude in decimal degrees

    Returns:
        float: Distance in nautical miles
    """
    dlat = to_radians(to_lat - from_lat)
    dlon = to_radians(from_lon - to_lon)
    a = math.sin(dlat / 2) * math.sin(dlat / 2) + math.cos(
        to_radians(from_lat)
    ) * math.cos(to_radians(to_lat)) * math.sin(dlon / 2) * math.sin(dlon / 2)
    # Rounding can push a just past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    kilometers = EARTH_RADIUS_KM * c
    return (kilometers / 1.609344) * 0.8684


def calculate_initial_bearing(
    lat_a: float, lon_a: float, lat_b: float, lon_b: float
) -> float:
    """Calculate true initial bearing from A to B, 0 <= bearing < 360"""
    lat1 = to_radians(lat_a)
    lat2 = to_radians(lat_b)
    dlon = to_radians(lon_b - lon_a)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(
        lat2
    ) * math.cos(dlon)

    return normalize(to_degrees(math.atan2(y, x)))


def calculate_bearing(lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> int:
    """
    Calculate true bearing from A to B in whole degrees.

    The bearing is truncated, not rounded: 89.9 gives 89. Use
    calculate_initial_bearing when sub-degree precision matters.
    """
    return int(calculate_initial_bearing(lat_a, lon_a, lat_b, lon_b))


def calculate_turn(heading: int, bearing: int) -> Optional[str]:
    """
    Return the turn needed to come from the current heading onto a bearing.

    Headings are compared numerically, so crossing north is not taken into
    account: heading 359 with bearing 1 gives "R".

    Args:
        heading: Current heading in degrees
        bearing: Required bearing in degrees

    Returns:
        Optional[str]: "L" when heading < bearing, "R" when heading > bearing,
            None when already on the bearing
    """
    if heading < bearing:
        return "L"
    if heading > bearing:
        return "R"
    return None


def cardinal_from_bearing(bearing: int) -> str:
    """
    Convert a bearing into a 16-point compass label.

    Exact multiples of 45 give the principal or intercardinal label; every
    bearing strictly between two of them takes the label of the range that
    follows the lower one (1..44 is NNE, 46..89 is ENE, and so on).

    Args:
        bearing: Bearing in whole degrees, 0 to 360 inclusive

    Returns:
        str: Compass label
    """
    bearing = int(bearing)
    if not 0 <= bearing <= 360:
        raise ValueError(f"Bearing must be between 0 and 360, got: {bearing}")

    sector, offset = divmod(bearing, 45)
    if offset == 0:
        return PRINCIPAL_DIRECTIONS[sector % 8]
    return BETWEEN_DIRECTIONS[sector]


def longitude_cardinal(longitude: float) -> str:
    """Return 'E' for positive longitude, 'W' otherwise (including zero)"""
    return "E" if longitude > 0 else "W"


def latitude_cardinal(latitude: float) -> str:
    """Return 'N' for positive latitude, 'S' otherwise (including zero)"""
    return "N" if latitude > 0 else "S"


def _cross_track_terms(
    waypoint_from: "Waypoint",
    waypoint_to: "Waypoint",
    current_lat: float,
    current_lon: float,
):
    """Distance from the last waypoint and the bearing difference off the route"""
    distance = distance_between_points(
        waypoint_from.latitude, waypoint_from.longitude, current_lat, current_lon
    )
    route_bearing = calculate_bearing(
        waypoint_from.latitude,
        waypoint_from.longitude,
        waypoint_to.latitude,
        waypoint_to.longitude,
    )
    current_bearing = calculate_bearing(
        waypoint_from.latitude, waypoint_from.longitude, current_lat, current_lon
    )
    # Plain difference, not the shorter way around the circle
    angle = abs(route_bearing - current_bearing)

    logging.debug(
        f"XTE terms: distance={distance:.4f}NM route={route_bearing} "
        f"current={current_bearing} angle={angle}"
    )
    return distance, angle


def legacy_cross_track_error(
    waypoint_from: "Waypoint",
    waypoint_to: "Waypoint",
    current_lat: float,
    current_lon: float,
) -> float:
    """
    Cross-track error using the legacy formula.

    Takes the sine of the integer degree difference as if it were radians,
    for compatibility with the legacy formula. The result is not the distance
    to the route line; corrected_cross_track_error gives that.

    Args:
        waypoint_from: Waypoint the current leg starts from
        waypoint_to: Waypoint the current leg leads to
        current_lat: Current latitude in decimal degrees
        current_lon: Current longitude in decimal degrees

    Returns:
        float: Legacy cross-track value, never negative
    """
    distance, angle = _cross_track_terms(
        waypoint_from, waypoint_to, current_lat, current_lon
    )
    return abs(math.sin(angle) * distance)


def corrected_cross_track_error(
    waypoint_from: "Waypoint",
    waypoint_to: "Waypoint",
    current_lat: float,
    current_lon: float,
) -> float:
    """
    Distance from the current position to the route line between two waypoints.

    Args:
        waypoint_from: Waypoint the current leg starts from
        waypoint_to: Waypoint the current leg leads to
        current_lat: Current latitude in decimal degrees
        current_lon: Current longitude in decimal degrees

    Returns:
        float: Cross-track error in nautical miles, never negative
    """
    distance, angle = _cross_track_terms(
        waypoint_from, waypoint_to, current_lat, current_lon
    )
    return abs(math.sin(to_radians(angle)) * distance)


def calculate_cross_track_error(
    waypoint_from: "Waypoint",
    waypoint_to: "Waypoint",
    current_lat: float,
    current_lon: float,
    legacy: bool = True,
) -> float:
    """
    Calculate the cross-track error (XTE) in nautical miles.

    Args:
        waypoint_from: Waypoint the current leg starts from
        waypoint_to: Waypoint the current leg leads to
        current_lat: Current latitude in decimal degrees
        current_lon: Current longitude in decimal degrees
        legacy: True for legacy_cross_track_error values, False for
            corrected_cross_track_error

    Returns:
        float: Cross-track error, never negative
    """
    if legacy:
        return legacy_cross_track_error(
            waypoint_from, waypoint_to, current_lat, current_lon
        )
    return corrected_cross_track_error(
        waypoint_from, waypoint_to, current_lat, current_lon
    )
