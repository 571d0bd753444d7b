"""
Header errors - fatal decode failures and non-fatal findings
"""

from dataclasses import dataclass


class HeaderError(ValueError):
    """Base class for fatal header decode errors"""

    pass


class MagicMismatchError(HeaderError):
    """First 16 bytes are not the SQLite 3 magic string"""

    def __init__(self, found: str):
        self.found = found
        super().__init__(
            f"Invalid SQLite file: expected 'SQLite format 3\\x00', got {found!r}"
        )


class InvalidPageSizeError(HeaderError):
    """Page size is too small or not a power of two"""

    def __init__(self, raw: int, reason: str):
        self.raw = raw
        super().__init__(f"Invalid page size, {reason}, found: {raw}")


class InvalidFractionError(HeaderError):
    """One of the fixed payload fractions has the wrong value"""

    def __init__(self, name: str, expected: int, found: int):
        self.name = name
        self.expected = expected
        self.found = found
        super().__init__(f"{name} must be {expected}, found: {found}")


class UnexpectedZeroError(HeaderError):
    """A field that must never be zero was zero"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Unexpected zero value for {field}")


class HeaderReadError(HeaderError):
    """The byte source could not supply a field"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class ShortReadError(HeaderReadError):
    """The byte source ran out before a field was complete"""

    def __init__(self, field: str, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(
            field,
            f"Unexpected end of data reading {field}: expected {expected} bytes, got {got}",
        )


class HeaderIOError(HeaderReadError):
    """The byte source raised an I/O error"""

    def __init__(self, field: str, cause: OSError):
        super().__init__(field, f"I/O error reading {field}: {cause}")


@dataclass(slots=True, frozen=True)
class UnexpectedNonZero:
    """
    Non-fatal finding: the reserved region holds a non-zero byte.

    Attributes:
        offset: Position of the first non-zero byte within the reserved span
        header_offset: The same position counted from the start of the header
        value: The offending byte
    """

    offset: int
    header_offset: int
    value: int

    def __str__(self) -> str:
        return (
            f"Reserved space byte {self.offset} (header offset {self.header_offset}) "
            f"is non-zero: {self.value:#04x}"
        )
