"""
NMEA Navigation
Great-circle navigation math and NMEA 0183 sentence helpers for GPS receivers.
"""

from .models.route import Waypoint, Position, RouteLeg
from .models.fix import RMCFix
from .services.sentence_service import SentenceType

__version__ = "0.1.0"

# Export main classes for easier imports
__all__ = [
    "Waypoint",
    "Position",
    "RouteLeg",
    "RMCFix",
    "SentenceType",
]
