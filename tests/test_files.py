import pytest

from logdrill.files import open_log, save_file


def test_open_log_missing_required_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_log(tmp_path / "missing.log", True)


def test_open_log_missing_optional_creates_empty_file(tmp_path):
    path = tmp_path / "new.log"
    with open_log(path, False) as handle:
        assert handle.read() == b""
    assert path.exists()


def test_open_log_existing_returns_content(tmp_path):
    path = tmp_path / "app.log"
    path.write_bytes(b"first\nsecond\n")
    with open_log(path, True) as handle:
        assert handle.read() == b"first\nsecond\n"


def test_save_file_erase_writes_entries_in_order(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("old content\n")
    entries = ["alpha", "beta", "alpha"]
    save_file(path, entries, True, True)
    assert path.read_text().splitlines() == entries


def test_save_file_erase_keeps_repeats_even_without_duplicates(tmp_path):
    path = tmp_path / "out.txt"
    entries = ["x", "x", "y"]
    save_file(path, entries, True, False)
    assert path.read_text().splitlines() == entries


def test_save_file_each_entry_ends_with_newline(tmp_path):
    path = tmp_path / "out.txt"
    save_file(path, ["a", "b"], True, True)
    text = path.read_text()
    assert text.endswith("\n")
    assert text.count("\n") == 2


def test_save_file_empty_entries_gives_empty_file(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("stale\n")
    save_file(path, [], True, True)
    assert path.read_text() == ""


def test_save_file_keep_without_duplicates_dedupes_new_entries(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("old\n")
    save_file(path, ["x", "y", "x", "y", "z"], False, False)
    assert path.read_text().splitlines() == ["x", "y", "z"]


def test_save_file_keep_with_duplicates_joins_existing_lines(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("one\ntwo\n")
    save_file(path, ["new"], False, True)
    assert path.read_text() == "onetwo"


def test_save_file_keep_creates_missing_file(tmp_path):
    path = tmp_path / "fresh.txt"
    save_file(path, ["a", "a", "b"], False, False)
    assert path.read_text().splitlines() == ["a", "b"]