import math


def normalize(degrees: float) -> float:
    """
    Normalize an angle into the range [0, 360).

    Args:
        degrees: Angle in degrees, any magnitude or sign

    Returns:
        float: Equivalent angle in degrees, 0 <= result < 360
    """
    # Skip whole turns at once so large negative inputs stay cheap
    if degrees < -360:
        degrees += 360 * math.floor(-degrees / 360)
    while degrees < 0:
        degrees += 360

    return degrees % 360


def to_radians(degrees: float) -> float:
    """Convert degrees to radians"""
    return math.radians(degrees)


def to_degrees(radians: float) -> float:
    """Convert radians to degrees"""
    return math.degrees(radians)


def circular_difference(a: float, b: float) -> float:
    """
    Smallest angle between two directions, going either way around the circle.

    Unlike the plain absolute difference used by calculate_turn and the
    cross-track error, 359 and 1 are 2 degrees apart here.

    Args:
        a: First direction in degrees
        b: Second direction in degrees

    Returns:
        float: Angle between the two directions, 0 <= result <= 180
    """
    diff = abs(normalize(a) - normalize(b))
    return min(diff, 360 - diff)
