from datetime import UTC, date, datetime
from typing import Optional


def _check_field(value: str, name: str):
    if len(value) < 6:
        raise ValueError(f"NMEA {name} field must have at least 6 characters, got: '{value}'")


def nmea_time_to_string(nmea_time: str) -> str:
    """
    Format an NMEA hhmmss[.ss] time field as hh:mm:ss.

    Fractional seconds are dropped.
    """
    _check_field(nmea_time, "time")
    return f"{nmea_time[0:2]}:{nmea_time[2:4]}:{nmea_time[4:6]}"


def nmea_date_to_string(nmea_date: str) -> str:
    """
    Format an NMEA ddmmyy date field as dd/mm/20yy.

    Two-digit years are always placed in the 2000s, so 230394 gives 23/03/2094.
    """
    _check_field(nmea_date, "date")
    return f"{nmea_date[0:2]}/{nmea_date[2:4]}/20{nmea_date[4:6]}"


def nmea_time_to_datetime(nmea_time: str, on_date: Optional[date] = None) -> datetime:
    """
    Combine an NMEA hhmmss[.ss] time field with a calendar date.

    Args:
        nmea_time: Time field from an RMC or GGA sentence
        on_date: Date the time belongs to. Defaults to today (UTC)

    Returns:
        datetime: Timezone-aware UTC datetime, whole seconds
    """
    _check_field(nmea_time, "time")
    if on_date is None:
        on_date = datetime.now(UTC).date()

    time_of_day = datetime.strptime(nmea_time_to_string(nmea_time), "%H:%M:%S").time()
    return datetime.combine(on_date, time_of_day, tzinfo=UTC)
