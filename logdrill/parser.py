"""Filtering log lines with find, include, exclude and match-only patterns."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass

from .files import PathLike, _iter_lines, _unique_entries, open_log
from .sanitizer import UNSET


@dataclass(frozen=True)
class ParseJob:
    """One filtering pass over a log file."""

    filename: PathLike
    elem_to_find: str
    exclude_regex: str = UNSET
    include_regex: str = UNSET
    strict: bool = False
    duplicate: bool = True
    match_only: str = UNSET

    def run(self) -> list[str]:
        """Return the selected entries of the log file, in file order."""
        find = re.compile(self.elem_to_find)
        exclude = re.compile(self.exclude_regex)
        include = re.compile(self.include_regex)
        only = re.compile(self.match_only)

        entries: list[str] = []
        with open_log(self.filename, True) as handle:
            for raw in _iter_lines(handle):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError as exc:
                    print(f"Error of line reading : {exc}", file=sys.stderr)
                    continue
                entries.extend(self._select(line, find, include, exclude, only))

        if not self.duplicate:
            entries = list(_unique_entries(entries))
        return entries

    def _select(
        self,
        line: str,
        find: re.Pattern[str],
        include: re.Pattern[str],
        exclude: re.Pattern[str],
        only: re.Pattern[str],
    ) -> Iterator[str]:
        if exclude.search(line) or not (find.search(line) or include.search(line)):
            return
        if self.strict:
            for pattern in (find, include):
                yield from (m.group() for m in pattern.finditer(line))
        elif self.match_only == UNSET:
            yield line
        else:
            for pattern in (find, include):
                for match in pattern.finditer(line):
                    yield from (sub.group() for sub in only.finditer(match.group()))


def parse_log(
    filename: PathLike,
    elem_to_find: str,
    exclude_regex: str = UNSET,
    include_regex: str = UNSET,
    strict: bool = False,
    duplicate: bool = True,
    match_only: str = UNSET,
) -> list[str]:
    """Filter *filename* and return the selected entries."""
    return ParseJob(
        filename=filename,
        elem_to_find=elem_to_find,
        exclude_regex=exclude_regex,
        include_regex=include_regex,
        strict=strict,
        duplicate=duplicate,
        match_only=match_only,
    ).run()