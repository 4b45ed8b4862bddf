"""Tests for the contact record model and configuration."""
import os

from core.config import reload_config
from core.models import DEFAULT_STAGE, EXPORT_COLUMNS, ContactRecord


def test_stage_invariant_holds_on_construction():
    assert ContactRecord(borrower_stage="Hot Lead").borrower_stage == DEFAULT_STAGE
    assert ContactRecord(borrower_stage="Client").borrower_stage == "Client"


def test_to_dict_appends_extension_after_fixed_columns():
    record = ContactRecord(first_name="Jane", extra={"Tier": "Gold"})

    row = record.to_dict()

    assert list(row) == EXPORT_COLUMNS + ["Tier"]
    assert row["Tier"] == "Gold"


def test_from_dict_accepts_columns_attributes_and_unknown_keys():
    record = ContactRecord.from_dict({
        "FirstName": "Jane",
        "last_name": "Doe",
        "Phone": 6135550100,
        "Email": None,
        "Tier": "Gold",
        "BorrowerStage.Name": "client",
    })

    assert (record.first_name, record.last_name) == ("Jane", "Doe")
    assert record.phone == "6135550100"
    assert record.email == ""
    assert record.extra == {"Tier": "Gold"}
    assert record.borrower_stage == DEFAULT_STAGE


def test_config_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "AI_PROVIDER=anthropic\nANTHROPIC_API_KEY=test-key\nMAPPING_PROFILE=positional\n",
        encoding="utf-8",
    )

    try:
        config = reload_config(env_file)

        assert config.ai_provider == "anthropic"
        assert config.ai_api_key == "test-key"
        assert config.has_ai_provider
        assert config.mapping_profile == "positional"
        assert config.get_config_status()["enhancement"]["configured"] is True
    finally:
        # load_dotenv writes into os.environ
        for name in ("AI_PROVIDER", "ANTHROPIC_API_KEY", "MAPPING_PROFILE"):
            os.environ.pop(name, None)
