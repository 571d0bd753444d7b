from os import PathLike
from typing import Callable, Iterator, Optional
import logging
import time

from xxhash import xxh3_64_intdigest

from sqliteheader.header import HEADER_SIZE, DecodeResult, HeaderDecoder

logger = logging.getLogger(__name__)


class HeaderWatcher:
    """
    Re-reads a live database header and yields it whenever it changes.

    Each poll reads the first 100 bytes and fingerprints them with xxh3.
    A result is yielded on the first poll and afterwards only when the
    fingerprint differs from the last one yielded. Decode errors propagate
    to the caller; there is no retry.

    Usage:
        for result in HeaderWatcher("app.db", interval=2.0):
            print(result.header.change_counter)
    """

    def __init__(
        self,
        path: str | PathLike,
        interval: float = 1.0,
        max_polls: Optional[int] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval < 0:
            raise ValueError(f"Poll interval must be >= 0, got {interval}")
        self.path = path
        self.interval = interval
        self.max_polls = max_polls
        self._sleep = sleep
        self._decoder = HeaderDecoder()
        self._last_fingerprint: int | None = None
        self._polls = 0

    @staticmethod
    def fingerprint(data: bytes) -> int:
        """Deterministic 64-bit hash of raw header bytes."""
        return xxh3_64_intdigest(data)

    def _read_raw(self) -> bytes:
        with open(self.path, "rb") as f:
            return f.read(HEADER_SIZE)

    def poll(self) -> DecodeResult | None:
        """Read the header once; return it if it changed since the last yield."""
        self._polls += 1
        raw = self._read_raw()
        fingerprint = self.fingerprint(raw)
        if fingerprint == self._last_fingerprint:
            return None

        result = self._decoder.decode(raw)
        self._last_fingerprint = fingerprint
        logger.info("Header changed: %s (fingerprint %#018x)", self.path, fingerprint)
        return result

    def __iter__(self) -> Iterator[DecodeResult]:
        """Return self as iterator."""
        return self

    def __next__(self) -> DecodeResult:
        """Block until the header changes or max_polls is exhausted."""
        while self.max_polls is None or self._polls < self.max_polls:
            if self._polls > 0:
                self._sleep(self.interval)
            result = self.poll()
            if result is not None:
                return result
        raise StopIteration
