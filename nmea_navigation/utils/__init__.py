"""Utility functions for angles, coordinates, navigation and units."""

from .angle_utils import normalize, to_radians, to_degrees, circular_difference
from .navigation_utils import (
    distance_between_points,
    calculate_bearing,
    calculate_initial_bearing,
    calculate_turn,
    cardinal_from_bearing,
    longitude_cardinal,
    latitude_cardinal,
    legacy_cross_track_error,
    corrected_cross_track_error,
    calculate_cross_track_error,
)
from .coordinate_utils import (
    NmeaCoordinate,
    decimal_to_nmea,
    nmea_to_decimal,
    decimal_to_nmea_coordinate,
    nmea_coordinate_to_decimal,
    parse_coordinate,
)

__all__ = [
    "normalize",
    "to_radians",
    "to_degrees",
    "circular_difference",
    "distance_between_points",
    "calculate_bearing",
    "calculate_initial_bearing",
    "calculate_turn",
    "cardinal_from_bearing",
    "longitude_cardinal",
    "latitude_cardinal",
    "legacy_cross_track_error",
    "corrected_cross_track_error",
    "calculate_cross_track_error",
    "NmeaCoordinate",
    "decimal_to_nmea",
    "nmea_to_decimal",
    "decimal_to_nmea_coordinate",
    "nmea_coordinate_to_decimal",
    "parse_coordinate",
]
