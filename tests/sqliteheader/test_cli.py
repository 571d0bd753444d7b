"""Tests for the sqlite-header command line driver."""

import csv
import logging

from sqliteheader.cli import log_level, main


class TestCliValid:
    def test_prints_header_table(self, tmp_path, make_header, capsys):
        path = tmp_path / "app.db"
        path.write_bytes(make_header(page_size=8192))

        assert main([str(path)]) == 0

        out = capsys.readouterr().out
        assert "app.db Header Information" in out
        assert "8192 bytes" in out
        assert "3.45.1" in out

    def test_exports_csv(self, tmp_path, make_header):
        path = tmp_path / "app.db"
        path.write_bytes(make_header(text_encoding=3))
        output = tmp_path / "header.csv"

        assert main([str(path), "-o", str(output)]) == 0

        with open(output, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["Header Entry", "Value", "File Offset", "Length (bytes)"]
        assert ["Text Encoding", "UTF16BE", "56", "4"] in rows

    def test_reports_findings(self, tmp_path, make_header, capsys):
        path = tmp_path / "app.db"
        path.write_bytes(make_header(reserved=b"\x00" * 19 + b"\x09"))

        assert main([str(path)]) == 0
        assert "Warning: Reserved space byte 19" in capsys.readouterr().out

    def test_watch_mode(self, tmp_path, make_header, capsys):
        path = tmp_path / "app.db"
        path.write_bytes(make_header())

        assert main([str(path), "--watch", "--interval", "0", "--max-polls", "2"]) == 0
        assert capsys.readouterr().out.count("Header Information") == 1


class TestCliInvalid:
    def test_invalid_header_exits_1(self, tmp_path, make_header, capsys):
        path = tmp_path / "app.db"
        path.write_bytes(make_header(page_size=1000))

        assert main([str(path)]) == 1
        assert "Invalid page size" in capsys.readouterr().err

    def test_missing_file_exits_1(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.db")]) == 1
        assert "Error" in capsys.readouterr().err


class TestLogLevel:
    def test_console_only_shows_warnings(self):
        """Test a plain run keeps informational log lines off the console."""
        assert log_level(None) == logging.WARNING

    def test_log_file_records_info(self, tmp_path):
        assert log_level(str(tmp_path / "run.log")) == logging.INFO

    def test_verbose_enables_debug(self, tmp_path):
        assert log_level(None, verbose=True) == logging.DEBUG
        assert log_level(str(tmp_path / "run.log"), verbose=True) == logging.DEBUG
