from enum import Enum
import logging
import re
from typing import List, Optional, Union

from nmea_navigation.models.fix import RMCFix
from nmea_navigation.models.route import Position
from nmea_navigation.utils.coordinate_utils import nmea_coordinate_to_decimal

# Checksum field closing a sentence: *hh plus optional line terminator
CHECKSUM_FIELD = re.compile(r"\*([0-9A-Fa-f]{2})\s*$")


class SentenceType(Enum):
    """NMEA 0183 sentences that can be extracted from a GPS stream"""

    GPRMC = "GPRMC"
    GPGGA = "GPGGA"
    GPGSA = "GPGSA"

    @property
    def missing_marker(self) -> str:
        """Text returned by extract_sentence when no such sentence is present"""
        return f"[NO_{self.value}_SENTENCE_PRESENT]"


def _sentence_body(sentence: str) -> str:
    """Sentence text without its line terminator and trailing checksum field"""
    sentence = sentence.rstrip("\r\n")
    match = CHECKSUM_FIELD.search(sentence)
    if match:
        sentence = sentence[: match.start()]
    return sentence


def calculate_checksum(sentence: str) -> str:
    """
    Calculate NMEA 0183 checksum by XORing the characters of the sentence.

    Every '$' and '*' is skipped without ending the scan. A checksum field
    already closing the sentence (*hh) is not part of the checksum, so a
    complete received sentence and its body without the field give the same
    result.

    Args:
        sentence: NMEA sentence string

    Returns:
        Two-character uppercase hex string of checksum
    """
    checksum = 0
    for char in _sentence_body(sentence):
        if char in ("$", "*"):
            continue
        # The first contributing character seeds the accumulator
        if checksum == 0:
            checksum = ord(char)
        else:
            checksum ^= ord(char)

    return f"{checksum:02X}"


def verify_checksum(sentence: str) -> bool:
    """
    Check a sentence against the checksum field it carries.

    Args:
        sentence: Complete NMEA sentence, e.g. "$GPGGA,...*47"

    Returns:
        bool: True when the *hh field matches; False when it differs or is absent
    """
    match = CHECKSUM_FIELD.search(sentence.rstrip("\r\n"))
    if not match:
        logging.debug(f"No checksum field in sentence: '{sentence}'")
        return False

    expected = match.group(1).upper()
    actual = calculate_checksum(sentence)
    if expected != actual:
        logging.debug(f"Checksum mismatch: sent {expected}, calculated {actual}")
        return False
    return True


def _find_fragment(gps_data: str, code: str) -> Optional[str]:
    """First '$'-separated fragment starting with the sentence code"""
    for fragment in gps_data.split("$"):
        if fragment.startswith(code):
            return fragment

    logging.debug(f"No {code} sentence in {len(gps_data)} characters of GPS data")
    return None


def find_sentence(
    gps_data: str, sentence_type: Union[SentenceType, str]
) -> Optional[str]:
    """
    Find the first sentence of a given type in raw GPS data.

    Matching is a case-sensitive prefix test on the text following each '$';
    the checksum is not checked.

    Args:
        gps_data: Raw text as read from the receiver, possibly several sentences
        sentence_type: SentenceType or its five-character code

    Returns:
        Optional[str]: The sentence as received, starting with '$', or None
            when the data holds none of that type
    """
    fragment = _find_fragment(gps_data, SentenceType(sentence_type).value)
    if fragment is None:
        return None
    return "$" + fragment


def extract_sentence(gps_data: str, sentence_type: Union[SentenceType, str]) -> str:
    """
    Extract the first sentence of a given type from raw GPS data.

    Kept for consumers of the established text format: the fragment is
    returned behind a "$GP" prefix, so "$GPRMC,..." comes back as
    "$GPGPRMC,...". Use find_sentence to get the sentence as received.

    Returns:
        str: The prefixed sentence, or "[NO_<TYPE>_SENTENCE_PRESENT]" when
            there is none
    """
    sentence_type = SentenceType(sentence_type)
    fragment = _find_fragment(gps_data, sentence_type.value)
    if fragment is None:
        return sentence_type.missing_marker
    return "$GP" + fragment


def extract_gprmc_sentence(gps_data: str) -> str:
    return extract_sentence(gps_data, SentenceType.GPRMC)


def extract_gpgga_sentence(gps_data: str) -> str:
    return extract_sentence(gps_data, SentenceType.GPGGA)


def extract_gpgsa_sentence(gps_data: str) -> str:
    return extract_sentence(gps_data, SentenceType.GPGSA)


def split_fields(sentence: str) -> List[str]:
    """
    Split a sentence into its comma-separated fields.

    The leading '$', the checksum field and the line terminator are removed,
    so the first field is the talker and sentence code (e.g. "GPRMC").
    """
    return _sentence_body(sentence).lstrip("$").split(",")


def _optional_float(field: str) -> Optional[float]:
    return float(field) if field else None


def parse_rmc(sentence: str) -> RMCFix:
    """
    Read position, speed, course, date and time from an RMC sentence.

    Format: $--RMC,hhmmss.ss,A,llll.ll,a,yyyyy.yy,a,x.x,x.x,ddmmyy,x.x,a*hh

    Args:
        sentence: Complete RMC sentence

    Returns:
        RMCFix: Parsed fix; latitude and longitude signed decimal degrees,
            position None when the coordinate fields are empty
    """
    fields = split_fields(sentence)
    if not fields[0].endswith("RMC"):
        raise ValueError(f"Not an RMC sentence: '{sentence}'")
    if len(fields) < 10:
        raise ValueError(
            f"RMC sentence must have at least 10 fields, got {len(fields)}: '{sentence}'"
        )

    position = None
    try:
        # A receiver without a fix leaves the coordinate fields empty
        if fields[3] and fields[5]:
            position = Position(
                lat=nmea_coordinate_to_decimal(float(fields[3]), fields[4]),
                lon=nmea_coordinate_to_decimal(float(fields[5]), fields[6]),
            )
        speed = _optional_float(fields[7])
        course = _optional_float(fields[8])
    except ValueError as e:
        raise ValueError(f"Malformed RMC sentence: '{sentence}'") from e

    return RMCFix(
        time=fields[1],
        status=fields[2],
        position=position,
        speed_knots=speed,
        course=course,
        date=fields[9],
    )
