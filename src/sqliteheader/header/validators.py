"""Field validators for the database header."""

from .errors import (
    InvalidFractionError,
    InvalidPageSizeError,
    MagicMismatchError,
    UnexpectedNonZero,
)

# "SQLite format 3" followed by a NUL byte
SQLITE_MAGIC = b"SQLite format 3\x00"

MIN_PAGE_SIZE = 512
MAX_PAGE_SIZE = 65536

MAX_PAYLOAD_FRACTION = 64
MIN_PAYLOAD_FRACTION = 32
LEAF_PAYLOAD_FRACTION = 32

RESERVED_REGION_OFFSET = 72
RESERVED_REGION_SIZE = 20


def validate_magic(data: bytes) -> None:
    """Raise MagicMismatchError unless data is exactly the SQLite magic string."""
    if data != SQLITE_MAGIC:
        raise MagicMismatchError(data.decode("utf-8", errors="replace"))


def validate_page_size(raw: int) -> int:
    """
    Turn the raw 16-bit page size into the page size in bytes.

    65536 does not fit in 16 bits, so it is stored as 1. That case has to be
    handled before the power of two test, since 1 is itself a power of two.

    Raises:
        InvalidPageSizeError: If the value is below 512 or not a power of two
    """
    if raw == 1:
        return MAX_PAGE_SIZE
    if raw < MIN_PAGE_SIZE:
        raise InvalidPageSizeError(raw, f"value must be >= {MIN_PAGE_SIZE}")
    if raw & (raw - 1):
        raise InvalidPageSizeError(raw, "value must be a power of 2")
    return raw


def validate_fraction(value: int, expected: int, name: str) -> int:
    if value != expected:
        raise InvalidFractionError(name, expected, value)
    return value


def check_reserved_zeros(
    data: bytes, base_offset: int = RESERVED_REGION_OFFSET
) -> UnexpectedNonZero | None:
    """
    Scan the reserved region for the first non-zero byte.

    Returns a finding instead of raising: a dirty reserved region does not
    stop the rest of the header from being decoded.
    """
    for i, byte in enumerate(data):
        if byte != 0:
            return UnexpectedNonZero(
                offset=i, header_offset=base_offset + i, value=byte
            )
    return None
