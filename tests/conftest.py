import struct

import pytest

# Field values for a small rollback-journal database
DEFAULT_FIELDS = {
    "magic": b"SQLite format 3\x00",
    "page_size": 4096,
    "write_version": 1,
    "read_version": 1,
    "reserved_bytes": 0,
    "max_fraction": 64,
    "min_fraction": 32,
    "leaf_fraction": 32,
    "change_counter": 7,
    "database_size": 3,
    "first_free_page": 0,
    "free_page_count": 0,
    "schema_cookie": 2,
    "schema_version": 4,
    "cache_size": 0,
    "largest_root_page": 0,
    "text_encoding": 1,
    "user_version": 0,
    "incremental_vacuum": 0,
    "application_id": 0,
    "reserved": b"\x00" * 20,
    "version_valid_for": 7,
    "library_write_version": 3045001,
}

HEADER_FORMAT = ">16sHBBBBBB9Ii2I20sII"


def build_header(**overrides) -> bytes:
    fields = {**DEFAULT_FIELDS, **overrides}
    return struct.pack(
        HEADER_FORMAT,
        fields["magic"],
        fields["page_size"],
        fields["write_version"],
        fields["read_version"],
        fields["reserved_bytes"],
        fields["max_fraction"],
        fields["min_fraction"],
        fields["leaf_fraction"],
        fields["change_counter"],
        fields["database_size"],
        fields["first_free_page"],
        fields["free_page_count"],
        fields["schema_cookie"],
        fields["schema_version"],
        fields["cache_size"],
        fields["largest_root_page"],
        fields["text_encoding"],
        fields["user_version"],
        fields["incremental_vacuum"],
        fields["application_id"],
        fields["reserved"],
        fields["version_valid_for"],
        fields["library_write_version"],
    )


@pytest.fixture
def make_header():
    """Factory for 100-byte headers; keyword arguments override raw field values."""
    return build_header
