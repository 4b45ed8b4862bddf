"""End-to-end tests for the command line interface."""
import csv

from core.models import EXPORT_COLUMNS
from crmprep.cli import main


def test_process_command_writes_csv(write_csv, contact_rows, tmp_path):
    source = write_csv(contact_rows)
    output = tmp_path / "formatted.csv"

    exit_code = main(["process", str(source), "--output", str(output), "--preview", "0"])

    assert exit_code == 0
    with open(output, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = list(reader)
    assert reader.fieldnames[: len(EXPORT_COLUMNS)] == EXPORT_COLUMNS
    assert len(rows) == len(contact_rows)
    assert rows[0]["DateOfBirth"] == "1990-05-14"
    assert rows[1]["DateOfBirth"] == "not a date"


def test_process_command_with_profile_and_passthrough(write_csv, contact_rows, tmp_path):
    output = tmp_path / "formatted.csv"

    exit_code = main([
        "process", str(write_csv(contact_rows)),
        "--profile", "registered", "--passthrough", "off",
        "-o", str(output), "--preview", "0",
    ])

    assert exit_code == 0
    with open(output, newline="", encoding="utf-8") as f:
        assert csv.DictReader(f).fieldnames == EXPORT_COLUMNS


def test_enhance_without_credentials_still_exports(write_csv, contact_rows, tmp_path):
    output = tmp_path / "formatted.csv"

    exit_code = main(["process", str(write_csv(contact_rows)), "--enhance", "-o", str(output)])

    assert exit_code == 0
    assert output.exists()


def test_unreadable_file_exits_with_error(tmp_path):
    output = tmp_path / "formatted.csv"

    assert main(["process", str(tmp_path / "missing.csv"), "-o", str(output)]) == 1
    assert not output.exists()


def test_unknown_profile_exits_with_error(write_csv, contact_rows):
    assert main(["process", str(write_csv(contact_rows)), "--profile", "fuzzy"]) == 1


def test_info_commands():
    assert main(["version"]) == 0
    assert main(["config"]) == 0
    assert main(["profiles"]) == 0
