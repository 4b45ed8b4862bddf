"""Tests for the field-level normalizers."""
from datetime import date, datetime

import pytest

from core.models import DEFAULT_STAGE, VALID_STAGES
from crmprep.normalizers import (
    decompose_address,
    join_and_split,
    normalize_date,
    split_name,
    to_text,
    validate_stage,
)


@pytest.mark.parametrize(
    "full_name, expected",
    [
        ("Jane Doe", ("Jane", "Doe")),
        ("Madonna", ("Madonna", "")),
        ("Jane Mary Smith", ("Jane", "Mary Smith")),
        ("  Jane   Doe  ", ("Jane", "Doe")),
        ("", ("", "")),
    ],
)
def test_split_name(full_name, expected):
    assert split_name(full_name) == expected


def test_join_and_split_recombines_columns():
    assert join_and_split("Jane", "Doe") == ("Jane", "Doe")
    assert join_and_split("Jane Doe", "") == ("Jane", "Doe")
    assert join_and_split("", "Doe") == ("Doe", "")


def test_normalize_date_iso_and_passthrough():
    assert normalize_date("1990-05-14") == "1990-05-14"
    assert normalize_date("not a date") == "not a date"
    assert normalize_date("") == ""


def test_normalize_date_accepts_common_formats_and_cells():
    assert normalize_date("May 14, 1990") == "1990-05-14"
    assert normalize_date(datetime(1990, 5, 14, 0, 0)) == "1990-05-14"
    assert normalize_date(date(1990, 5, 14)) == "1990-05-14"


def test_normalize_date_keeps_bare_numbers():
    assert normalize_date(33000) == "33000"


@pytest.mark.parametrize("cell", ["1990", "12", " 33000 ", "33000.5"])
def test_normalize_date_keeps_numeric_text_like_numeric_cells(cell):
    """A CSV cell holding a number matches the same .xlsx numeric cell."""
    assert normalize_date(cell) == cell.strip()
    assert normalize_date("1990") == normalize_date(1990)


def test_decompose_comma_separated_address():
    parts = decompose_address("123 Main St, Springfield, ON, A1B2C3")

    assert parts.street == "123 Main St"
    assert parts.city == "Springfield"
    assert parts.province == "ON"
    assert parts.postal_code == "A1B2C3"


def test_decompose_three_part_address_has_no_postal_code():
    parts = decompose_address("123 Main St\nSpringfield\nON")

    assert (parts.street, parts.city, parts.province, parts.postal_code) == (
        "123 Main St", "Springfield", "ON", ""
    )


def test_decompose_whitespace_address_assigns_from_tail():
    parts = decompose_address("123 Main St Springfield ON A1B2C3")

    assert parts.postal_code == "A1B2C3"
    assert parts.province == "ON"
    assert parts.city == "Springfield"
    assert parts.street == "123 Main St"


def test_decompose_short_address_leaves_street_empty():
    parts = decompose_address("Springfield ON")

    assert parts.postal_code == "ON"
    assert parts.province == "Springfield"
    assert parts.city == ""
    assert parts.street == ""


def test_validate_stage_is_exact_and_case_sensitive():
    for stage in VALID_STAGES:
        assert validate_stage(stage) == stage

    assert validate_stage("client") == DEFAULT_STAGE
    assert validate_stage(" Client") == DEFAULT_STAGE
    assert validate_stage("") == DEFAULT_STAGE
    assert validate_stage(None) == DEFAULT_STAGE
    assert validate_stage(3) == DEFAULT_STAGE


def test_to_text_handles_spreadsheet_scalars():
    assert to_text(None) == ""
    assert to_text(float("nan")) == ""
    assert to_text(6135550100.0) == "6135550100"
    assert to_text(12.5) == "12.5"
    assert to_text("  Jane ") == "Jane"
    assert to_text(datetime(1990, 5, 14)) == "1990-05-14"
