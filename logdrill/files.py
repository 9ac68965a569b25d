"""Opening log files and saving filtered entries."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable, Iterator
from typing import BinaryIO, Union

PathLike = Union[str, "os.PathLike[str]"]


def open_log(filename: PathLike, required: bool) -> BinaryIO:
    """Open *filename* for binary reading.

    A file that cannot be opened is an error when *required*; otherwise it is
    created empty and opened.
    """
    try:
        return open(filename, "rb")
    except OSError as exc:
        if required:
            raise FileNotFoundError(
                errno.ENOENT, "Given filename doesn't exist", os.fspath(filename)
            ) from exc
    with open(filename, "wb"):
        pass
    return open(filename, "rb")


def _iter_lines(handle: BinaryIO) -> Iterator[bytes]:
    """Yield raw lines without their trailing '\\n' or '\\r\\n'."""
    for raw in handle:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        yield raw


def _unique_entries(entries: Iterable[str]) -> Iterator[str]:
    """Yield each entry the first time it is seen."""
    seen: set[str] = set()
    for entry in entries:
        if entry not in seen:
            seen.add(entry)
            yield entry


def save_file(
    filename: PathLike, lines: Iterable[str], erase_file: bool, duplicate: bool
) -> None:
    """Write *lines* to *filename*, one entry per line.

    With *erase_file* the entries replace the file. Without it, a file kept
    with *duplicate* set receives its existing lines concatenated with no
    separators, and with *duplicate* unset it receives the entries with
    repeats removed.
    """
    entries = list(lines)
    if erase_file:
        content = "".join(f"{entry}\n" for entry in entries)
    elif duplicate:
        with open_log(filename, False) as handle:
            content = "".join(raw.decode("utf-8") for raw in _iter_lines(handle))
    else:
        open_log(filename, False).close()
        content = "".join(f"{entry}\n" for entry in _unique_entries(entries))

    with open(filename, "w", encoding="utf-8", newline="") as out:
        out.write(content)