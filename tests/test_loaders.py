"""Tests for spreadsheet loading."""
from datetime import datetime

import pandas as pd
import pytest

from core.errors import LoadError
from crmprep.loaders import CSVLoader, ExcelLoader, get_loader, load_spreadsheet


def test_csv_loader_keeps_column_order_and_text(write_csv, contact_rows):
    path = write_csv(contact_rows)

    records, headers = load_spreadsheet(str(path))

    assert headers == list(contact_rows[0].keys())
    assert list(records[0].keys()) == headers
    assert records[0]["Full Name"] == "Jane Doe"
    assert records[1]["Email Address"] == ""


def test_csv_loader_detects_semicolons(write_csv):
    rows = [
        {"Name": "Jane Doe", "Email": "jane@example.com", "City": "Springfield"},
        {"Name": "John Roe", "Email": "john@example.com", "City": "Shelbyville"},
        {"Name": "Ann Poe", "Email": "ann@example.com", "City": "Capital City"},
    ]
    path = write_csv(rows, delimiter=";")

    records, headers = CSVLoader(str(path)).load()

    assert headers == ["Name", "Email", "City"]
    assert records[2]["City"] == "Capital City"


def test_csv_loader_reads_latin1(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes("Name,City\nJosé Núñez,Montréal\n".encode("latin1"))

    records, _ = CSVLoader(str(path)).load()

    assert records[0]["Name"] == "José Núñez"
    assert records[0]["City"] == "Montréal"


def test_header_only_csv_is_rejected(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("Name,Email\n", encoding="utf-8")

    with pytest.raises(LoadError):
        load_spreadsheet(str(path))


def test_excel_loader_reads_first_sheet(tmp_path):
    path = tmp_path / "contacts.xlsx"
    first = pd.DataFrame(
        {
            "Full Name": ["Jane Doe", "Madonna"],
            "Phone": [6135550100, None],
            "DOB": [datetime(1990, 5, 14), None],
        }
    )
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        first.to_excel(writer, sheet_name="Contacts", index=False)
        pd.DataFrame({"Other": [1]}).to_excel(writer, sheet_name="Other", index=False)

    records, headers = ExcelLoader(str(path)).load()

    assert headers == ["Full Name", "Phone", "DOB"]
    assert records[0]["Full Name"] == "Jane Doe"
    assert records[0]["DOB"].date().isoformat() == "1990-05-14"
    assert records[1]["Phone"] == ""
    assert records[1]["DOB"] == ""


def test_missing_file_raises_load_error(tmp_path):
    with pytest.raises(LoadError):
        load_spreadsheet(str(tmp_path / "nope.csv"))


def test_corrupt_workbook_raises_load_error(tmp_path):
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"this is not a zip archive")

    with pytest.raises(LoadError):
        load_spreadsheet(str(path))


def test_unsupported_extension(tmp_path):
    path = tmp_path / "contacts.pdf"
    path.write_bytes(b"%PDF")

    with pytest.raises(LoadError):
        get_loader(str(path))
