"""Tests for HeaderWatcher change detection."""

import pytest
from sqliteheader.header import MagicMismatchError
from sqliteheader.watch import HeaderWatcher


class TestHeaderWatcher:
    def test_yields_once_for_unchanged_header(self, tmp_path, make_header):
        """Test repeated polls of the same bytes yield a single result."""
        path = tmp_path / "app.db"
        path.write_bytes(make_header() + b"\x00" * 100)
        sleeps = []

        results = list(HeaderWatcher(path, interval=0.5, max_polls=3, sleep=sleeps.append))

        assert len(results) == 1
        assert results[0].header.change_counter == 7
        assert sleeps == [0.5, 0.5]

    def test_yields_again_after_change(self, tmp_path, make_header):
        path = tmp_path / "app.db"
        path.write_bytes(make_header(change_counter=1))

        def bump(_interval):
            path.write_bytes(make_header(change_counter=2))

        watcher = HeaderWatcher(path, max_polls=4, sleep=bump)
        counters = [result.header.change_counter for result in watcher]

        assert counters == [1, 2]

    def test_bytes_after_header_are_ignored(self, tmp_path, make_header):
        """Test page data changes do not count as header changes."""
        path = tmp_path / "app.db"
        path.write_bytes(make_header() + b"\x01")

        def touch_body(_interval):
            path.write_bytes(make_header() + b"\x02")

        results = list(HeaderWatcher(path, max_polls=2, sleep=touch_body))

        assert len(results) == 1

    def test_fingerprint_is_deterministic(self, make_header):
        data = make_header()
        assert HeaderWatcher.fingerprint(data) == HeaderWatcher.fingerprint(bytes(data))
        assert HeaderWatcher.fingerprint(data) != HeaderWatcher.fingerprint(
            make_header(change_counter=8)
        )

    def test_decode_error_propagates(self, tmp_path, make_header):
        path = tmp_path / "app.db"
        path.write_bytes(make_header(magic=b"X" * 16))

        with pytest.raises(MagicMismatchError):
            next(iter(HeaderWatcher(path, max_polls=1, sleep=lambda _: None)))

    def test_negative_interval_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="interval"):
            HeaderWatcher(tmp_path / "app.db", interval=-1)
