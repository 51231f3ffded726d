"""Constant-factor speed and distance conversions."""

MPH_PER_KNOT = 1.15077945
KPH_PER_KNOT = 1.852
STATUTE_MILES_PER_NM = 1.15077945
KM_PER_NM = 1.852
FEET_PER_METER = 3.2808399


def mph_to_knots(mph: float) -> float:
    return mph / MPH_PER_KNOT


def kph_to_knots(kph: float) -> float:
    return kph / KPH_PER_KNOT


def knots_to_mph(knots: float) -> float:
    return knots * MPH_PER_KNOT


def knots_to_kph(knots: float) -> float:
    return knots * KPH_PER_KNOT


def nautical_miles_to_statute_miles(nautical_miles: float) -> float:
    """Convert nautical miles to statute miles"""
    return nautical_miles * STATUTE_MILES_PER_NM


def nautical_miles_to_km(nautical_miles: float) -> float:
    """Convert nautical miles to kilometers"""
    return nautical_miles * KM_PER_NM


def km_to_nautical_miles(kilometers: float) -> float:
    return kilometers / KM_PER_NM


def meters_to_feet(meters: float) -> float:
    return meters * FEET_PER_METER


def feet_to_meters(feet: float) -> float:
    return feet / FEET_PER_METER
