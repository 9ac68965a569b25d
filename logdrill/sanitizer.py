"""Validation of command-line values before any work is done."""

from __future__ import annotations

import ipaddress
import re

UNSET = "$#$$##$$#$#"
"""Marker for an optional pattern the user did not give; as a regex it never matches."""

_LETTERS = re.compile(r"[a-zA-Z]")
_UNWANTED_FILENAME_CHARS = re.compile(r"""[\\/=:*?"',;!{}\[\]()'<>|]+""")


class SanitizeError(ValueError):
    """Raised when a user-supplied option is unusable."""


def check_pattern(pattern: str, required: bool) -> str:
    """Ensure a required search pattern is not empty; return it."""
    if not pattern and required:
        raise SanitizeError("You need to define the option 'f' or 'elem_to_find'")
    return pattern


def check_not_empty(value: str, required: bool) -> str:
    """Ensure a required string option is not empty; return it."""
    if not value and required:
        raise SanitizeError(
            "Verify the option 'l' or 'logfile', or ip and port option "
            "if you want to use web server"
        )
    return value


def check_web_filename(filename: str, webserver: bool) -> str:
    """Reject an output filename holding a path separator '/'; return it.

    The check applies whether or not *webserver* is set.
    """
    if "/" in filename:
        raise SanitizeError("You cannot use '/' or '\\' when you want to use webserver")
    return filename


def check_ip(ip: str) -> str:
    """Ensure *ip* is a plain numeric address usable by the web server; return it."""
    try:
        if "%" in ip:
            raise ValueError(f"{ip!r} carries a scope identifier")
        ipaddress.ip_address(ip)
    except ValueError as exc:
        raise SanitizeError(f"Bad Ip given for the webserver IP: {exc}") from exc
    if _LETTERS.search(ip):
        raise SanitizeError(
            "Please define a valid IP for the webserver. "
            "Ipv6 is not currently supported"
        )
    return ip


def check_port(port: int) -> int:
    """Ensure *port* is set and within 1..65534; return it."""
    if port > 65534 or port < 0:
        raise SanitizeError("The given port is out of supported ports by standards of network")
    if port == 0:
        raise SanitizeError("Please specify a port.")
    return port


def check_filename(filename: str) -> str:
    """Reject filenames containing special characters; return the name."""
    if _UNWANTED_FILENAME_CHARS.search(filename):
        raise SanitizeError(f"The given filename '{filename}' contain invalid special character")
    return filename


def check_strict_match_only(strict: bool, match_only: str) -> str:
    """Refuse strict mode combined with a match-only pattern; return *match_only*."""
    if strict and match_only != UNSET:
        raise SanitizeError("Strict option and match_only option cannot be set in the same time!")
    return match_only