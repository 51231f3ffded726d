import unittest
from datetime import UTC, date, datetime

from nmea_navigation.utils.datetime_utils import (
    nmea_date_to_string,
    nmea_time_to_datetime,
    nmea_time_to_string,
)


class TestDateTimeFields(unittest.TestCase):
    def test_time_to_string(self):
        self.assertEqual(nmea_time_to_string("123519"), "12:35:19")
        self.assertEqual(nmea_time_to_string("000001.00"), "00:00:01")

    def test_date_to_string(self):
        self.assertEqual(nmea_date_to_string("010125"), "01/01/2025")
        # Two-digit years always land in the 2000s
        self.assertEqual(nmea_date_to_string("230394"), "23/03/2094")

    def test_time_to_datetime(self):
        result = nmea_time_to_datetime("123519", date(1994, 3, 23))
        self.assertEqual(result, datetime(1994, 3, 23, 12, 35, 19, tzinfo=UTC))

    def test_time_to_datetime_defaults_to_today(self):
        result = nmea_time_to_datetime("235959.50")
        self.assertEqual(result.tzinfo, UTC)
        self.assertEqual((result.hour, result.minute, result.second), (23, 59, 59))

    def test_short_fields_rejected(self):
        with self.assertRaises(ValueError):
            nmea_time_to_string("1235")
        with self.assertRaises(ValueError):
            nmea_date_to_string("")
        with self.assertRaises(ValueError):
            nmea_time_to_datetime("12")

    def test_invalid_time_of_day(self):
        with self.assertRaises(ValueError):
            nmea_time_to_datetime("256100")


if __name__ == "__main__":
    unittest.main()
