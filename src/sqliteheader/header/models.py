from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .errors import UnexpectedNonZero, UnexpectedZeroError


@dataclass(slots=True, frozen=True)
class Unknown:
    """A raw value this library does not recognise, kept as read."""

    raw: int


class JournalMode(Enum):
    LEGACY = 1  # rollback journal
    WRITE_AHEAD_LOG = 2


class SchemaVersion(Enum):
    ONE = 1  # baseline, readable by every SQLite 3 release
    TWO = 2  # 3.1.3 and above
    THREE = 3  # 3.1.4 and above
    FOUR = 4  # 3.3.0 and above


class TextEncoding(Enum):
    UTF8 = 1
    UTF16LE = 2
    UTF16BE = 3

    @property
    def codec(self) -> str:
        """Python codec name for text stored in this encoding."""
        return {
            TextEncoding.UTF8: "utf-8",
            TextEncoding.UTF16LE: "utf-16-le",
            TextEncoding.UTF16BE: "utf-16-be",
        }[self]


class VacuumMode(Enum):
    FULL = "full"
    INCREMENTAL = "incremental"


def non_zero(raw: int) -> int | None:
    """Map 0 ("not recorded") to None and pass anything else through."""
    return raw or None


def journal_mode_from_raw(raw: int) -> JournalMode | Unknown:
    try:
        return JournalMode(raw)
    except ValueError:
        return Unknown(raw)


def schema_version_from_raw(raw: int) -> SchemaVersion | Unknown:
    """
    Map the schema format number to a SchemaVersion.

    Raises:
        UnexpectedZeroError: If raw is 0; the schema format is never unset
    """
    if raw == 0:
        raise UnexpectedZeroError("schema version")
    try:
        return SchemaVersion(raw)
    except ValueError:
        return Unknown(raw)


def text_encoding_from_raw(raw: int) -> TextEncoding | Unknown:
    try:
        return TextEncoding(raw)
    except ValueError:
        return Unknown(raw)


@dataclass(slots=True, frozen=True)
class FreePageList:
    """Location and size of the freelist; absent entirely when it is empty."""

    start_page: int
    length: int

    def __post_init__(self):
        if self.start_page == 0:
            raise ValueError("Free page list start page must be non-zero")

    @classmethod
    def from_raw(cls, start_page: int, length: int) -> "FreePageList | None":
        if non_zero(start_page) is None:
            return None
        return cls(start_page=start_page, length=length)


@dataclass(slots=True, frozen=True)
class VacuumSetting:
    """
    Auto-vacuum configuration.

    largest_root_page is the page number of the largest root b-tree page,
    which SQLite only records when auto-vacuum is enabled.
    """

    mode: VacuumMode
    largest_root_page: int

    def __post_init__(self):
        if self.largest_root_page == 0:
            raise ValueError("Vacuum largest root page must be non-zero")

    @classmethod
    def from_raw(cls, largest_root_page: int, incremental: int) -> "VacuumSetting | None":
        if non_zero(largest_root_page) is None:
            return None
        mode = VacuumMode.INCREMENTAL if incremental else VacuumMode.FULL
        return cls(mode=mode, largest_root_page=largest_root_page)


@dataclass(slots=True, frozen=True)
class DatabaseHeader:
    """
    SQLite database file header (100 bytes total).

    Binary format:
    ┌────────┬──────┬───────────────────────────────────────────────────┐
    │ Offset │ Size │ Field                                             │
    ├────────┼──────┼───────────────────────────────────────────────────┤
    │ 0      │ 16   │ magic 'SQLite format 3\\0'                         │
    │ 16     │ 2    │ page size (1 means 65536)                         │
    │ 18     │ 1    │ write version (1 legacy, 2 WAL)                   │
    │ 19     │ 1    │ read version (1 legacy, 2 WAL)                    │
    │ 20     │ 1    │ reserved bytes per page                           │
    │ 21     │ 1    │ max embedded payload fraction (64)                │
    │ 22     │ 1    │ min embedded payload fraction (32)                │
    │ 23     │ 1    │ leaf payload fraction (32)                        │
    │ 24     │ 4    │ file change counter                               │
    │ 28     │ 4    │ database size in pages                            │
    │ 32     │ 4    │ first freelist trunk page                         │
    │ 36     │ 4    │ total freelist pages                              │
    │ 40     │ 4    │ schema cookie                                     │
    │ 44     │ 4    │ schema format number (1-4)                        │
    │ 48     │ 4    │ default page cache size                           │
    │ 52     │ 4    │ largest root b-tree page (auto-vacuum)            │
    │ 56     │ 4    │ text encoding (1 UTF-8, 2 UTF-16le, 3 UTF-16be)   │
    │ 60     │ 4    │ user version (signed)                             │
    │ 64     │ 4    │ incremental vacuum flag                           │
    │ 68     │ 4    │ application id                                    │
    │ 72     │ 20   │ reserved for expansion, zero                      │
    │ 92     │ 4    │ version-valid-for number                          │
    │ 96     │ 4    │ SQLITE_VERSION_NUMBER of last writer              │
    └────────┴──────┴───────────────────────────────────────────────────┘
    Byte order: All integers use big-endian encoding (most significant byte first).
    """

    HEADER_SIZE: ClassVar[int] = 100

    magic: bytes
    page_size: int
    write_version: JournalMode | Unknown
    read_version: JournalMode | Unknown
    reserved_bytes_per_page: int
    max_payload_fraction: int
    min_payload_fraction: int
    leaf_payload_fraction: int
    change_counter: int
    database_size_pages: int | None
    free_page_list: FreePageList | None
    schema_cookie: int
    schema_version: SchemaVersion | Unknown
    cache_size_pages: int
    vacuum_setting: VacuumSetting | None
    text_encoding: TextEncoding | Unknown
    user_version: int
    application_id: int
    version_valid_for: int
    library_write_version: int

    @property
    def journal_mode(self) -> JournalMode | None:
        """The journal mode, or None when read and write versions disagree."""
        if self.write_version == self.read_version and isinstance(
            self.write_version, JournalMode
        ):
            return self.write_version
        return None

    @property
    def usable_page_size(self) -> int:
        return self.page_size - self.reserved_bytes_per_page

    @property
    def sqlite_version(self) -> str:
        """library_write_version as 'X.Y.Z' (encoded as X*1000000 + Y*1000 + Z)."""
        v = self.library_write_version
        return f"{v // 1_000_000}.{v // 1000 % 1000}.{v % 1000}"

    @property
    def is_database_size_valid(self) -> bool:
        # Legacy writers leave a stale page count; it can only be trusted
        # when the change counter matches version-valid-for
        return (
            self.database_size_pages is not None
            and self.change_counter == self.version_valid_for
        )


@dataclass(slots=True, frozen=True)
class DecodeResult:
    """A decoded header together with any non-fatal findings."""

    header: DatabaseHeader
    findings: tuple[UnexpectedNonZero, ...] = ()
