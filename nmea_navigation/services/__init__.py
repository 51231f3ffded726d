"""NMEA 0183 sentence checksums, extraction and field parsing."""

from .sentence_service import (
    SentenceType,
    calculate_checksum,
    verify_checksum,
    find_sentence,
    extract_sentence,
    extract_gprmc_sentence,
    extract_gpgga_sentence,
    extract_gpgsa_sentence,
    split_fields,
    parse_rmc,
)

__all__ = [
    "SentenceType",
    "calculate_checksum",
    "verify_checksum",
    "find_sentence",
    "extract_sentence",
    "extract_gprmc_sentence",
    "extract_gpgga_sentence",
    "extract_gpgsa_sentence",
    "split_fields",
    "parse_rmc",
]
