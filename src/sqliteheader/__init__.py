"""Decoder for the 100-byte SQLite 3 database file header."""

from .header import (
    DatabaseHeader,
    DecodeResult,
    HeaderDecoder,
    HeaderError,
    parse_header,
    read_header_file,
)

__all__ = [
    "DatabaseHeader",
    "DecodeResult",
    "HeaderDecoder",
    "HeaderError",
    "parse_header",
    "read_header_file",
]
