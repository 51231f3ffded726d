"""Models module containing core data structures."""

from .route import Waypoint, Position, RouteLeg, leg_from_route
from .fix import RMCFix

__all__ = ["Waypoint", "Position", "RouteLeg", "leg_from_route", "RMCFix"]
