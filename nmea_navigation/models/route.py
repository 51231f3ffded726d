from dataclasses import dataclass
from typing import Optional

from nmea_navigation.utils.navigation_utils import (
    calculate_bearing,
    distance_between_points,
)


@dataclass(frozen=True)
class Waypoint:
    """Single waypoint in a route plan"""

    identifier: str
    altitude: float  # Metres
    latitude: float  # Latitude in decimal degrees
    longitude: float  # Longitude in decimal degrees


@dataclass
class Position:
    """Current position"""

    lat: float
    lon: float


@dataclass(frozen=True)
class RouteLeg:
    """Represents the leg between two waypoints"""

    start: Waypoint
    end: Waypoint

    @property
    def distance(self) -> float:
        """Leg length in nautical miles"""
        return distance_between_points(
            self.start.latitude,
            self.start.longitude,
            self.end.latitude,
            self.end.longitude,
        )

    @property
    def bearing(self) -> int:
        """Initial bearing from start to end in whole degrees true"""
        return calculate_bearing(
            self.start.latitude,
            self.start.longitude,
            self.end.latitude,
            self.end.longitude,
        )


def leg_from_route(waypoints, index: int = 0) -> Optional[RouteLeg]:
    """
    Get the leg starting at the given waypoint index.

    Args:
        waypoints: Ordered sequence of Waypoint
        index: Index of the leg's starting waypoint

    Returns:
        Optional[RouteLeg]: The leg, or None when index has no following waypoint
    """
    if index < 0 or index + 1 >= len(waypoints):
        return None
    return RouteLeg(waypoints[index], waypoints[index + 1])
