import re

import pytest

from logdrill.parser import ParseJob, parse_log

LINES = [
    "INFO start",
    "ERROR disk full",
    "ERROR net down",
    "WARN low mem",
    "ERROR disk full",
]


@pytest.fixture
def log_path(tmp_path):
    path = tmp_path / "app.log"
    path.write_text("\n".join(LINES) + "\n")
    return path


def test_whole_lines_matching_pattern(log_path):
    assert parse_log(log_path, "ERROR") == [LINES[1], LINES[2], LINES[4]]


def test_exclude_removes_lines(log_path):
    assert parse_log(log_path, "ERROR", exclude_regex="disk") == [LINES[2]]


def test_include_adds_lines_in_file_order(log_path):
    result = parse_log(log_path, "ERROR", include_regex="WARN")
    assert result == [LINES[1], LINES[2], LINES[3], LINES[4]]


def test_exclude_applies_to_included_lines(log_path):
    result = parse_log(log_path, "ERROR", exclude_regex="mem|disk", include_regex="WARN")
    assert result == [LINES[2]]


def test_without_duplicates_keeps_first_occurrence(log_path):
    result = parse_log(log_path, "ERROR", duplicate=False)
    assert result == [LINES[1], LINES[2]]


def test_strict_returns_only_matched_text(log_path):
    result = parse_log(log_path, r"ERROR \w+", strict=True)
    assert result == ["ERROR disk", "ERROR net", "ERROR disk"]
    assert all(line.startswith(r) for r, line in zip(result, [LINES[1], LINES[2], LINES[4]]))


def test_strict_without_duplicates(log_path):
    result = parse_log(log_path, r"ERROR \w+", strict=True, duplicate=False)
    assert result == ["ERROR disk", "ERROR net"]


def test_strict_lists_find_matches_before_include_matches(tmp_path):
    path = tmp_path / "mixed.log"
    path.write_text("b2 a1 a3\nb4 only\n")
    result = parse_log(path, r"a\d", include_regex=r"b\d", strict=True)
    assert result == ["a1", "a3", "b2", "b4"]


def test_match_only_extracts_within_matches(log_path):
    result = parse_log(log_path, "ERROR.*", match_only=r"\w+$")
    assert result == ["full", "down", "full"]


def test_match_only_searches_include_matches_too(tmp_path):
    path = tmp_path / "ids.log"
    path.write_text("user=alice id=17\nguest id=42\n")
    result = parse_log(path, r"user=\w+", include_regex=r"id=\d+", match_only=r"[a-z]+$|\d+")
    assert result == ["alice", "17", "42"]


def test_no_match_gives_empty_list(log_path):
    assert parse_log(log_path, "CRITICAL") == []


def test_crlf_line_endings_are_stripped(tmp_path):
    path = tmp_path / "win.log"
    path.write_bytes(b"ERROR one\r\nINFO two\r\n")
    assert parse_log(path, "ERROR") == ["ERROR one"]


def test_invalid_utf8_line_is_skipped(tmp_path, capsys):
    path = tmp_path / "bad.log"
    path.write_bytes(b"ERROR ok\n\xff\xfe ERROR bad\nERROR fine\n")
    assert parse_log(path, "ERROR") == ["ERROR ok", "ERROR fine"]
    assert "Error of line reading" in capsys.readouterr().err


def test_missing_logfile_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_log(tmp_path / "absent.log", "ERROR")


def test_invalid_pattern_raises(log_path):
    with pytest.raises(re.error):
        parse_log(log_path, "ERROR(")


def test_parse_job_run_matches_parse_log(log_path):
    job = ParseJob(log_path, "ERROR", include_regex="INFO", duplicate=False)
    assert job.run() == parse_log(log_path, "ERROR", include_regex="INFO", duplicate=False)
    assert job.run()[0] == LINES[0]


def test_result_lines_come_from_log(log_path):
    result = parse_log(log_path, "e")
    assert set(result) <= set(LINES)
    assert "INFO start" not in result