"""SQLite database header decoding."""

from .ByteReader import ByteReader, ByteSource
from .HeaderDecoder import HEADER_SIZE, HeaderDecoder, parse_header, read_header_file
from .errors import (
    HeaderError,
    HeaderIOError,
    HeaderReadError,
    InvalidFractionError,
    InvalidPageSizeError,
    MagicMismatchError,
    ShortReadError,
    UnexpectedNonZero,
    UnexpectedZeroError,
)
from .models import (
    DatabaseHeader,
    DecodeResult,
    FreePageList,
    JournalMode,
    SchemaVersion,
    TextEncoding,
    Unknown,
    VacuumMode,
    VacuumSetting,
)
from .validators import SQLITE_MAGIC

__all__ = [
    "ByteReader",
    "ByteSource",
    "DatabaseHeader",
    "DecodeResult",
    "FreePageList",
    "HEADER_SIZE",
    "HeaderDecoder",
    "HeaderError",
    "HeaderIOError",
    "HeaderReadError",
    "InvalidFractionError",
    "InvalidPageSizeError",
    "JournalMode",
    "MagicMismatchError",
    "SQLITE_MAGIC",
    "SchemaVersion",
    "ShortReadError",
    "TextEncoding",
    "UnexpectedNonZero",
    "UnexpectedZeroError",
    "Unknown",
    "VacuumMode",
    "VacuumSetting",
    "parse_header",
    "read_header_file",
]
