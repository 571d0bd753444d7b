"""
Command line driver: print (and optionally export or watch) a database header
"""

from enum import Enum
from typing import Optional, Sequence
import argparse
import csv
import logging
import os
import sys

from prettytable import PrettyTable

from .header import DatabaseHeader, DecodeResult, HeaderError, Unknown, read_header_file
from .watch import HeaderWatcher

logger = logging.getLogger(__name__)

COLUMNS = ["Header Entry", "Value", "File Offset", "Length (bytes)"]


def log_level(filename: Optional[str], verbose: bool = False) -> int:
    """DEBUG with -v, INFO when logging to a file, otherwise only warnings."""
    if verbose:
        return logging.DEBUG
    if filename:
        return logging.INFO
    return logging.WARNING


def setup_logger(filename: Optional[str], verbose: bool = False) -> None:
    logging.basicConfig(
        filename=filename,
        level=log_level(filename, verbose),
        format="%(asctime)s - %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _describe(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, Unknown):
        return f"unknown ({value.raw})"
    if isinstance(value, Enum):
        return value.name
    return str(value)


def header_rows(header: DatabaseHeader) -> list[list[str]]:
    """One row per header entry: name, decoded value, offset, length."""
    free_list = header.free_page_list
    vacuum = header.vacuum_setting
    return [
        ["Header String", header.magic.rstrip(b"\x00").decode("ascii"), "0", "16"],
        ["Page Size", f"{header.page_size} bytes", "16", "2"],
        ["Write Version", _describe(header.write_version), "18", "1"],
        ["Read Version", _describe(header.read_version), "19", "1"],
        ["Reserved Bytes Per Page", str(header.reserved_bytes_per_page), "20", "1"],
        ["Maximum Payload Fraction", str(header.max_payload_fraction), "21", "1"],
        ["Minimum Payload Fraction", str(header.min_payload_fraction), "22", "1"],
        ["Leaf Payload Fraction", str(header.leaf_payload_fraction), "23", "1"],
        ["File Change Counter", str(header.change_counter), "24", "4"],
        ["Database Size (pages)", _describe(header.database_size_pages), "28", "4"],
        ["First Freelist Trunk Page", _describe(free_list and free_list.start_page), "32", "4"],
        ["Freelist Pages", str(free_list.length if free_list else 0), "36", "4"],
        ["Schema Cookie", str(header.schema_cookie), "40", "4"],
        ["Schema Format", _describe(header.schema_version), "44", "4"],
        ["Default Page Cache Size", str(header.cache_size_pages), "48", "4"],
        ["Largest Root Page", _describe(vacuum and vacuum.largest_root_page), "52", "4"],
        ["Text Encoding", _describe(header.text_encoding), "56", "4"],
        ["User Version", str(header.user_version), "60", "4"],
        ["Vacuum Mode", _describe(vacuum and vacuum.mode), "64", "4"],
        ["Application ID", str(header.application_id), "68", "4"],
        ["Version Valid For", str(header.version_valid_for), "92", "4"],
        ["SQLite Version", header.sqlite_version, "96", "4"],
    ]


def render(result: DecodeResult, title: str) -> str:
    table = PrettyTable(COLUMNS)
    table.align = "l"
    table.title = title
    for row in header_rows(result.header):
        table.add_row(row)

    lines = [table.get_string()]
    for finding in result.findings:
        lines.append(f"Warning: {finding}")
    return "\n".join(lines)


def export_csv(result: DecodeResult, output_path: str) -> None:
    with open(output_path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile, quoting=csv.QUOTE_MINIMAL)
        writer.writerow(COLUMNS)
        writer.writerows(header_rows(result.header))
    logger.info("Header exported to '%s'", output_path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlite-header",
        description="Decode and display the header of an SQLite database file.",
    )
    parser.add_argument("db_file", help="Path to the SQLite database file")
    parser.add_argument("-o", "--output", help="Also export the header to this CSV file")
    parser.add_argument(
        "--watch", action="store_true", help="Re-read the header and print it when it changes"
    )
    parser.add_argument(
        "--interval", type=float, default=1.0, help="Seconds between reads in watch mode"
    )
    parser.add_argument(
        "--max-polls", type=int, default=None, help="Stop watching after this many reads"
    )
    parser.add_argument("--log-file", help="Write log messages to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(args.log_file, args.verbose)

    db_file = os.path.abspath(args.db_file)
    title = f"{os.path.basename(db_file)} Header Information"
    logger.info("Input file: %s", db_file)

    try:
        if args.watch:
            watcher = HeaderWatcher(db_file, interval=args.interval, max_polls=args.max_polls)
            for result in watcher:
                print(render(result, title), flush=True)
                if args.output:
                    export_csv(result, args.output)
        else:
            result = read_header_file(db_file)
            print(render(result, title))
            if args.output:
                export_csv(result, args.output)
    except (HeaderError, OSError) as e:
        print(f"Error: '{db_file}': {e}", file=sys.stderr)
        logger.error("Failed to decode '%s': %s", db_file, e)
        return 1
    except KeyboardInterrupt:
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
