"""Pytest configuration to make the local packages importable without installation."""
import csv
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import reload_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from a developer .env and real AI credentials."""

    for name in (
        "OPENAI_API_KEY",
        "ANTHROPIC_API_KEY",
        "AI_PROVIDER",
        "MAPPING_PROFILE",
        "PASSTHROUGH_MODE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "output"))
    return reload_config(tmp_path / "missing.env")


@pytest.fixture
def contact_rows() -> list:
    """Rows shaped like a typical broker export (column order matters)."""

    return [
        {
            "Full Name": "Jane Doe",
            "Email Address": "jane@example.com",
            "Home Phone": "613-555-0100",
            "Address": "123 Main St, Springfield, ON, A1B2C3",
            "Date of Birth": "1990-05-14",
            "Stage": "Client",
            "Referral Notes": "met at open house",
        },
        {
            "Full Name": "Madonna",
            "Email Address": "",
            "Home Phone": "",
            "Address": "",
            "Date of Birth": "not a date",
            "Stage": "client",
            "Referral Notes": "",
        },
    ]


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write rows to a CSV file and return its path."""

    def _write(rows: list, name: str = "contacts.csv", delimiter: str = ",") -> Path:
        path = tmp_path / name
        headers = list(rows[0].keys())
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=headers, delimiter=delimiter)
            writer.writeheader()
            writer.writerows(rows)
        return path

    return _write
