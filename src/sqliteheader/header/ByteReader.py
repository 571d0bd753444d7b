from typing import Protocol
import io
import struct

from .errors import HeaderIOError, ShortReadError


class ByteSource(Protocol):
    """Anything that can hand out the next n bytes (files, BytesIO, sockets)."""

    def read(self, n: int, /) -> bytes: ...


class ByteReader:
    """
    Sequential big-endian field reader over a ByteSource.

    Every read consumes exactly the requested width. Nothing is buffered
    ahead and the source is never seeked.

    Usage:
        reader = ByteReader(b"\\x10\\x00...")
        page_size = reader.read_u16("page size")
    """

    def __init__(self, source: ByteSource | bytes | bytearray | memoryview) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._source = source
        self._offset = 0

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._offset

    def read_bytes(self, n: int, field: str) -> bytes:
        """
        Read exactly n bytes, raising if the source cannot supply them.

        Args:
            n: Number of bytes to read
            field: Description for error messages (e.g., "schema cookie")

        Raises:
            ShortReadError: If the source ends before n bytes arrive
            HeaderIOError: If the source raised an OSError
        """
        buf = bytearray()
        # Raw files, pipes and sockets may return fewer bytes than asked;
        # only an empty read means the stream has ended
        while len(buf) < n:
            try:
                chunk = self._source.read(n - len(buf))
            except OSError as e:
                raise HeaderIOError(field, e) from e

            # Non-blocking sources hand back None when nothing is ready
            if not chunk:
                raise ShortReadError(field, n, len(buf))
            buf += chunk

        self._offset += n
        return bytes(buf)

    def read_u8(self, field: str) -> int:
        return self._unpack(">B", 1, field)

    def read_u16(self, field: str) -> int:
        return self._unpack(">H", 2, field)

    def read_u32(self, field: str) -> int:
        return self._unpack(">I", 4, field)

    def read_i32(self, field: str) -> int:
        return self._unpack(">i", 4, field)

    def _unpack(self, fmt: str, size: int, field: str) -> int:
        return struct.unpack(fmt, self.read_bytes(size, field))[0]
