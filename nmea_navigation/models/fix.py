from dataclasses import dataclass
from typing import Optional

from .route import Position


@dataclass
class RMCFix:
    """Recommended minimum navigation data read from a GPRMC sentence"""

    time: str  # hhmmss[.ss] UTC as sent by the receiver
    status: str  # A = valid, V = receiver warning
    position: Optional[Position]  # None when the receiver has no fix
    speed_knots: Optional[float]  # Speed over ground
    course: Optional[float]  # Track made good, degrees true
    date: str  # ddmmyy

    @property
    def is_valid(self) -> bool:
        return self.status == "A"
