import unittest

from nmea_navigation.services.sentence_service import (
    SentenceType,
    calculate_checksum,
    extract_gpgga_sentence,
    extract_gpgsa_sentence,
    extract_gprmc_sentence,
    extract_sentence,
    find_sentence,
    parse_rmc,
    split_fields,
    verify_checksum,
)

RMC = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"
GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"


class TestChecksum(unittest.TestCase):
    def test_known_sentences(self):
        self.assertEqual(calculate_checksum(RMC), "6A")
        self.assertEqual(calculate_checksum(GGA), "47")

    def test_checksum_field_not_included(self):
        body = RMC[: RMC.index("*")]
        self.assertEqual(calculate_checksum(body), "6A")
        self.assertEqual(calculate_checksum(body + "*"), "6A")
        self.assertEqual(calculate_checksum(RMC + "\r\n"), "6A")

    def test_delimiters_skipped(self):
        self.assertEqual(calculate_checksum("$A*B"), calculate_checksum("$AB"))
        self.assertEqual(calculate_checksum("A$B"), "03")

    def test_first_character_seeds_accumulator(self):
        self.assertEqual(calculate_checksum("$A"), "41")
        self.assertEqual(calculate_checksum("$AA"), "00")
        self.assertEqual(calculate_checksum("$AAB"), "42")

    def test_two_uppercase_hex_digits(self):
        self.assertEqual(calculate_checksum("$"), "00")
        self.assertEqual(calculate_checksum("$m"), "6D")

    def test_verify(self):
        self.assertTrue(verify_checksum(RMC))
        self.assertTrue(verify_checksum(GGA + "\r\n"))
        self.assertTrue(verify_checksum(RMC.replace("*6A", "*6a")))
        self.assertFalse(verify_checksum(RMC.replace("*6A", "*00")))
        self.assertFalse(verify_checksum(RMC[: RMC.index("*")]))


class TestExtraction(unittest.TestCase):
    def setUp(self):
        self.stream = f"{GGA}\r\n{RMC}\r\n"

    def test_extract_prefixes_fragment(self):
        self.assertEqual(extract_gprmc_sentence(self.stream), "$GP" + RMC[1:] + "\r\n")
        self.assertEqual(extract_gpgga_sentence(self.stream), "$GP" + GGA[1:] + "\r\n")

    def test_missing_sentences(self):
        self.assertEqual(extract_gpgga_sentence(RMC), "[NO_GPGGA_SENTENCE_PRESENT]")
        self.assertEqual(extract_gpgsa_sentence(self.stream), "[NO_GPGSA_SENTENCE_PRESENT]")
        self.assertEqual(extract_gprmc_sentence(""), "[NO_GPRMC_SENTENCE_PRESENT]")

    def test_extract_by_code(self):
        self.assertEqual(
            extract_sentence(self.stream, "GPRMC"),
            extract_sentence(self.stream, SentenceType.GPRMC),
        )

    def test_unknown_type(self):
        with self.assertRaises(ValueError):
            extract_sentence(self.stream, "GPXTE")

    def test_find_returns_sentence_as_received(self):
        self.assertEqual(find_sentence(self.stream, SentenceType.GPRMC), RMC + "\r\n")
        self.assertIsNone(find_sentence(self.stream, SentenceType.GPGSA))

    def test_first_match_wins(self):
        later = RMC.replace("123519", "123520")
        self.assertEqual(find_sentence(f"{RMC}{later}", "GPRMC"), RMC)

    def test_case_sensitive(self):
        self.assertIsNone(find_sentence(RMC.lower(), SentenceType.GPRMC))


class TestParsing(unittest.TestCase):
    def test_split_fields(self):
        self.assertEqual(
            split_fields(RMC + "\r\n"),
            [
                "GPRMC",
                "123519",
                "A",
                "4807.038",
                "N",
                "01131.000",
                "E",
                "022.4",
                "084.4",
                "230394",
                "003.1",
                "W",
            ],
        )

    def test_parse_rmc(self):
        fix = parse_rmc(RMC)
        self.assertEqual(fix.time, "123519")
        self.assertEqual(fix.date, "230394")
        self.assertTrue(fix.is_valid)
        self.assertAlmostEqual(fix.position.lat, 48.1173, places=9)
        self.assertAlmostEqual(fix.position.lon, 11 + 31 / 60, places=9)
        self.assertAlmostEqual(fix.speed_knots, 22.4)
        self.assertAlmostEqual(fix.course, 84.4)

    def test_parse_rmc_southern_hemisphere_without_motion(self):
        fix = parse_rmc("$GPRMC,123519,V,4807.038,S,01131.000,W,,,230394,,")
        self.assertFalse(fix.is_valid)
        self.assertLess(fix.position.lat, 0)
        self.assertLess(fix.position.lon, 0)
        self.assertIsNone(fix.speed_knots)
        self.assertIsNone(fix.course)

    def test_parse_rmc_without_fix(self):
        body = "$GPRMC,123519,V,,,,,,,230394,,,N"
        fix = parse_rmc(f"{body}*{calculate_checksum(body)}\r\n")
        self.assertFalse(fix.is_valid)
        self.assertIsNone(fix.position)
        self.assertIsNone(fix.speed_knots)
        self.assertIsNone(fix.course)
        self.assertEqual(fix.date, "230394")

    def test_parse_rejects_other_sentences(self):
        with self.assertRaises(ValueError):
            parse_rmc(GGA)

    def test_parse_rejects_short_sentence(self):
        with self.assertRaises(ValueError):
            parse_rmc("$GPRMC,123519,A,4807.038,N*00")

    def test_parse_rejects_bad_coordinate(self):
        with self.assertRaises(ValueError):
            parse_rmc("$GPRMC,123519,A,48x7.038,N,01131.000,E,022.4,084.4,230394,003.1,W")


if __name__ == "__main__":
    unittest.main()
