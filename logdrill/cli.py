"""Command-line entry point: filter a log file and optionally serve the result."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

from .files import save_file
from .parser import ParseJob
from .sanitizer import (
    UNSET,
    SanitizeError,
    check_filename,
    check_ip,
    check_not_empty,
    check_pattern,
    check_port,
    check_strict_match_only,
    check_web_filename,
)
from .web_server import launch_server


def _boolean(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise argparse.ArgumentTypeError(f"expected 'true' or 'false', got {value!r}")


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port {value!r}") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port {value!r} out of range")
    return port


def _seconds(value: str) -> int:
    try:
        seconds = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid interval {value!r}") from None
    if seconds < 0:
        raise argparse.ArgumentTypeError(f"interval {value!r} must not be negative")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="logdrill", description="Filter log lines by patterns and save them."
    )
    parser.add_argument(
        "-f", "--elem-to-find", dest="elem_to_find", required=True,
        help="pattern to find in logs",
    )
    parser.add_argument(
        "-i", "--include-regex", dest="include_regex", default=UNSET,
        help="pattern to find in addition to the pattern defined by -f",
    )
    parser.add_argument(
        "-e", "--exclude-regex", dest="exclude_regex", default=UNSET,
        help="exclude logs found by -i and -f that match this pattern",
    )
    parser.add_argument(
        "-o", "--output", default="output.txt", help="output filename (default output.txt)"
    )
    parser.add_argument(
        "-m", "--match-only", dest="match_only", default=UNSET,
        help="keep only what matches this pattern inside the -f and -i matches",
    )
    parser.add_argument("-l", "--logfile", required=True, help="logfile to analyze")
    parser.add_argument(
        "-s", "--strict", type=_boolean, default=False, metavar="BOOL",
        help="keep only the -f and -i matches instead of whole lines",
    )
    parser.add_argument(
        "-d", "--duplicate", type=_boolean, default=True, metavar="BOOL",
        help="when false, no duplicate entry is saved",
    )
    parser.add_argument(
        "-w", "--webserver", type=_boolean, default=False, metavar="BOOL",
        help="serve the output file over HTTP",
    )
    parser.add_argument(
        "--ip", default="254.254.254.254", help="address the web server listens on"
    )
    parser.add_argument(
        "--port", type=_port, default=0, help="port the web server listens on"
    )
    parser.add_argument(
        "--parsing-time", dest="parsing_time", type=_seconds, default=3600,
        help="seconds between two analyses of the logfile (default 3600)",
    )
    parser.add_argument(
        "--erase", type=_boolean, default=True, metavar="BOOL",
        help="when false, the existing output file is kept",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Validate *args*, filter the log, save it and serve it if asked."""
    check_pattern(args.elem_to_find, True)
    output = check_not_empty(args.output, False)
    logfile = check_not_empty(args.logfile, True)
    check_filename(output)
    check_filename(logfile)
    check_strict_match_only(args.strict, args.match_only)
    if args.webserver:
        check_not_empty(args.ip, True)
        check_ip(args.ip)
        check_port(args.port)
        check_web_filename(output, args.webserver)

    job = ParseJob(
        filename=logfile,
        elem_to_find=args.elem_to_find,
        exclude_regex=args.exclude_regex,
        include_regex=args.include_regex,
        strict=args.strict,
        duplicate=args.duplicate,
        match_only=args.match_only,
    )
    entries = job.run()
    try:
        save_file(output, entries, args.erase, args.duplicate)
    except OSError as exc:
        raise OSError(f"Failed to save content to file: {exc}") from exc

    if args.webserver:
        launch_server(args.ip, args.port, output, job, args.parsing_time, args.erase)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with *argv* and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except SanitizeError as exc:
        print(f"Error ! {exc}", file=sys.stderr)
    except re.error as exc:
        print(f"Error ! Invalid pattern: {exc}", file=sys.stderr)
    except (OSError, ValueError) as exc:
        print(f"Error ! {exc}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())