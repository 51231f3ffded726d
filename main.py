#!/usr/bin/env python3

import argparse
import logging
import sys
import yaml
from typing import Dict, Any, List, Optional

from nmea_navigation.models.route import Waypoint, leg_from_route
from nmea_navigation.services.sentence_service import (
    SentenceType,
    find_sentence,
    parse_rmc,
    verify_checksum,
)
from nmea_navigation.utils.coordinate_utils import parse_coordinate
from nmea_navigation.utils.datetime_utils import (
    nmea_date_to_string,
    nmea_time_to_string,
)
from nmea_navigation.utils.navigation_utils import (
    calculate_bearing,
    calculate_cross_track_error,
    calculate_turn,
    cardinal_from_bearing,
    distance_between_points,
    latitude_cardinal,
    longitude_cardinal,
)


# Keys each entry of the route's waypoint list must carry
WAYPOINT_KEYS = ("identifier", "lat", "lon")


def parse_log_level(name: str) -> int:
    """Map a level name from the route file or command line to its logging value."""
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ValueError(f"Unknown loglevel '{name}'")
    return level


def validate_route_config(config: Any):
    """Check that a route plan holds at least two complete waypoints."""
    if not isinstance(config, dict):
        raise ValueError(f"Route configuration must be a mapping, got {type(config).__name__}")

    waypoints = config.get("waypoints")
    if not isinstance(waypoints, list) or len(waypoints) < 2:
        raise ValueError("Config key 'waypoints' must list at least two waypoints")

    for index, waypoint in enumerate(waypoints):
        if not isinstance(waypoint, dict):
            raise ValueError(f"Config key 'waypoints[{index}]' must be a mapping")
        missing = [key for key in WAYPOINT_KEYS if key not in waypoint]
        if missing:
            raise ValueError(
                f"Config key 'waypoints[{index}]' is missing: {', '.join(missing)}"
            )


def load_route_config(config_path: str) -> Dict[str, Any]:
    """Read a YAML route plan and check the keys the report relies on."""
    with open(config_path, "r") as f:
        config = yaml.safe_load(f)
    validate_route_config(config)
    return config


def create_waypoint(waypoint_config: Dict[str, Any]) -> Waypoint:
    """Create waypoint from configuration dictionary."""
    return Waypoint(
        identifier=str(waypoint_config["identifier"]),
        altitude=float(waypoint_config.get("altitude", 0.0)),
        latitude=parse_coordinate(waypoint_config["lat"]),
        longitude=parse_coordinate(waypoint_config["lon"]),
    )


def build_report(
    gps_data: str,
    waypoints: List[Waypoint],
    active_leg: int = 0,
    legacy_xte: bool = True,
) -> Optional[Dict[str, Any]]:
    """
    Work out navigation data for the first RMC fix in captured GPS data.

    Args:
        gps_data: Raw NMEA text
        waypoints: Route plan
        active_leg: Index of the waypoint the current leg starts from
        legacy_xte: Report legacy cross-track values instead of corrected ones

    Returns:
        Optional[Dict[str, Any]]: Report fields, None when the data holds no RMC.
            Without a position only time, date, status and leg are reported
    """
    leg = leg_from_route(waypoints, active_leg)
    if leg is None:
        raise ValueError(
            f"Active leg {active_leg} needs a following waypoint, route has {len(waypoints)}"
        )

    sentence = find_sentence(gps_data, SentenceType.GPRMC)
    if sentence is None:
        return None

    checksum_ok = verify_checksum(sentence)
    if not checksum_ok:
        logging.warning(f"RMC checksum does not match: {sentence.strip()}")

    fix = parse_rmc(sentence)
    if not fix.is_valid:
        logging.warning(f"Receiver reports fix status '{fix.status}'")

    report = {
        "time": nmea_time_to_string(fix.time) if fix.time else "",
        "date": nmea_date_to_string(fix.date) if fix.date else "",
        "status": fix.status,
        "checksum_ok": checksum_ok,
        "leg": f"{leg.start.identifier} -> {leg.end.identifier}",
    }
    if fix.position is None:
        logging.warning("RMC sentence carries no position, skipping navigation data")
        return report

    lat = fix.position.lat
    lon = fix.position.lon
    bearing = calculate_bearing(lat, lon, leg.end.latitude, leg.end.longitude)

    report.update(
        {
            "latitude": f"{abs(lat):.5f} {latitude_cardinal(lat)}",
            "longitude": f"{abs(lon):.5f} {longitude_cardinal(lon)}",
            "distance_nm": distance_between_points(
                lat, lon, leg.end.latitude, leg.end.longitude
            ),
            "bearing": bearing,
            "cardinal": cardinal_from_bearing(bearing),
            "turn": None,
            "xte_nm": calculate_cross_track_error(
                leg.start, leg.end, lat, lon, legacy=legacy_xte
            ),
            "xte_mode": "legacy" if legacy_xte else "corrected",
        }
    )
    if fix.course is not None:
        report["turn"] = calculate_turn(int(fix.course), bearing)

    return report


def main(argv: Optional[List[str]] = None) -> int:
    """Report navigation data for a captured NMEA stream against a route plan"""
    parser = argparse.ArgumentParser(description="NMEA Navigation Report")
    parser.add_argument(
        "--config", required=True, help="Path to YAML route configuration file"
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Path to captured NMEA 0183 text, or '-' for standard input",
    )
    parser.add_argument(
        "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override logging level",
    )
    parser.add_argument(
        "--active_leg", type=int, help="Override index of the active route leg"
    )
    parser.add_argument(
        "--corrected_xte",
        action="store_true",
        help="Report corrected cross-track error instead of legacy values",
    )

    args = parser.parse_args(argv)

    # Load configuration
    config = load_route_config(args.config)

    # Command-line arguments override config file
    if args.loglevel:
        config["loglevel"] = args.loglevel
    if args.active_leg is not None:
        config["active_leg"] = args.active_leg
    if args.corrected_xte:
        config["legacy_xte"] = False

    # Set up logging
    logging.basicConfig(
        level=parse_log_level(config.get("loglevel", "INFO")),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    waypoints = [create_waypoint(wp) for wp in config["waypoints"]]
    logging.info(f"Loaded route with {len(waypoints)} waypoints")

    if args.input == "-":
        gps_data = sys.stdin.read()
    else:
        with open(args.input, "r") as f:
            gps_data = f.read()

    report = build_report(
        gps_data,
        waypoints,
        active_leg=config.get("active_leg", 0),
        legacy_xte=config.get("legacy_xte", True),
    )
    if report is None:
        logging.error(SentenceType.GPRMC.missing_marker)
        return 1

    for key, value in report.items():
        if isinstance(value, float):
            value = f"{value:.3f}"
        print(f"{key:>12}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
