from os import PathLike
import logging

from .ByteReader import ByteReader, ByteSource
from .models import (
    DatabaseHeader,
    DecodeResult,
    FreePageList,
    VacuumSetting,
    journal_mode_from_raw,
    non_zero,
    schema_version_from_raw,
    text_encoding_from_raw,
)
from .validators import (
    LEAF_PAYLOAD_FRACTION,
    MAX_PAYLOAD_FRACTION,
    MIN_PAYLOAD_FRACTION,
    RESERVED_REGION_OFFSET,
    RESERVED_REGION_SIZE,
    SQLITE_MAGIC,
    check_reserved_zeros,
    validate_fraction,
    validate_magic,
    validate_page_size,
)

logger = logging.getLogger(__name__)

HEADER_SIZE = DatabaseHeader.HEADER_SIZE


class HeaderDecoder:
    """
    Decodes the 100-byte SQLite database header.

    Fields are read strictly in file order and decoding stops at the first
    fatal error, leaving the remaining bytes unread. A non-zero reserved
    region is reported as a finding instead of failing the decode.

    The decoder keeps no state between calls, so one instance can be shared.

    Usage:
        with open("app.db", "rb") as f:
            result = HeaderDecoder().decode(f)
        print(result.header.page_size, result.findings)
    """

    def decode(self, source: ByteSource | bytes | bytearray | memoryview) -> DecodeResult:
        """
        Decode a header from a byte source positioned at the start of the file.

        Raises:
            HeaderError: On the first field that cannot be read or is invalid
        """
        reader = ByteReader(source)

        magic = reader.read_bytes(len(SQLITE_MAGIC), "magic string")
        validate_magic(magic)

        page_size = validate_page_size(reader.read_u16("page size"))
        write_version = journal_mode_from_raw(reader.read_u8("write version"))
        read_version = journal_mode_from_raw(reader.read_u8("read version"))
        reserved_bytes = reader.read_u8("reserved bytes per page")

        max_fraction = validate_fraction(
            reader.read_u8("maximum payload fraction"),
            MAX_PAYLOAD_FRACTION,
            "Maximum payload fraction",
        )
        min_fraction = validate_fraction(
            reader.read_u8("minimum payload fraction"),
            MIN_PAYLOAD_FRACTION,
            "Minimum payload fraction",
        )
        leaf_fraction = validate_fraction(
            reader.read_u8("leaf payload fraction"),
            LEAF_PAYLOAD_FRACTION,
            "Leaf payload fraction",
        )

        change_counter = reader.read_u32("change counter")
        database_size = non_zero(reader.read_u32("database size"))

        first_free_page = reader.read_u32("first free page")
        free_page_count = reader.read_u32("free page list length")
        free_page_list = FreePageList.from_raw(first_free_page, free_page_count)

        schema_cookie = reader.read_u32("schema cookie")
        schema_version = schema_version_from_raw(
            reader.read_u32("schema format version")
        )
        cache_size = reader.read_u32("cache size")

        # The vacuum variant depends on the incremental flag at offset 64,
        # so the root page is held until then
        largest_root_page = reader.read_u32("largest root page")
        text_encoding = text_encoding_from_raw(reader.read_u32("text encoding"))
        user_version = reader.read_i32("user version")
        incremental_vacuum = reader.read_u32("incremental vacuum")
        vacuum_setting = VacuumSetting.from_raw(largest_root_page, incremental_vacuum)

        application_id = reader.read_u32("application id")

        findings = []
        reserved = reader.read_bytes(RESERVED_REGION_SIZE, "reserved region")
        finding = check_reserved_zeros(reserved, RESERVED_REGION_OFFSET)
        if finding is not None:
            logger.warning(finding)
            findings.append(finding)

        version_valid_for = reader.read_u32("version valid for")
        library_write_version = reader.read_u32("library write version")

        header = DatabaseHeader(
            magic=magic,
            page_size=page_size,
            write_version=write_version,
            read_version=read_version,
            reserved_bytes_per_page=reserved_bytes,
            max_payload_fraction=max_fraction,
            min_payload_fraction=min_fraction,
            leaf_payload_fraction=leaf_fraction,
            change_counter=change_counter,
            database_size_pages=database_size,
            free_page_list=free_page_list,
            schema_cookie=schema_cookie,
            schema_version=schema_version,
            cache_size_pages=cache_size,
            vacuum_setting=vacuum_setting,
            text_encoding=text_encoding,
            user_version=user_version,
            application_id=application_id,
            version_valid_for=version_valid_for,
            library_write_version=library_write_version,
        )
        logger.debug(
            "Decoded header: page_size=%d change_counter=%d",
            page_size,
            change_counter,
        )
        return DecodeResult(header=header, findings=tuple(findings))


def parse_header(source: ByteSource | bytes | bytearray | memoryview) -> DatabaseHeader:
    """Decode a header and return just the record; findings are only logged."""
    return HeaderDecoder().decode(source).header


def read_header_file(path: str | PathLike) -> DecodeResult:
    """Decode the header at the start of the database file at path."""
    with open(path, "rb") as f:
        return HeaderDecoder().decode(f)
