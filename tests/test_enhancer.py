"""Tests for the AI enhancement boundary (no network)."""
import json
from types import SimpleNamespace

from core.models import ContactRecord
from crmprep.services import RecordEnhancer, SYSTEM_PROMPT


class FakeOpenAI:
    """Mimics ``client.chat.completions.create`` returning a fixed reply."""

    def __init__(self, content=None, error=None):
        self.calls = []
        self._content = content
        self._error = error
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error:
            raise self._error
        message = SimpleNamespace(content=self._content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeAnthropic:
    def __init__(self, text):
        self.calls = []
        self._text = text
        self.messages = SimpleNamespace(create=self._create)

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(content=[SimpleNamespace(text=self._text)])


def _records():
    return [
        ContactRecord(first_name="jane", last_name="doe", email="JANE@EXAMPLE.COM", extra={"Notes": "vip"}),
        ContactRecord(first_name="Madonna"),
    ]


def test_valid_json_replaces_records():
    records = _records()
    cleaned = [record.to_dict() for record in records]
    cleaned[0]["FirstName"] = "Jane"
    cleaned[0]["LastName"] = "Doe"
    cleaned[1]["BorrowerStage.Name"] = "Hot Lead"
    client = FakeOpenAI(content=json.dumps(cleaned))

    result = RecordEnhancer(client=client).enhance(records)

    assert result is not records
    assert (result[0].first_name, result[0].last_name) == ("Jane", "Doe")
    assert result[0].extra == {"Notes": "vip"}
    assert result[1].borrower_stage == "Prospect"

    sent = client.calls[0]["messages"]
    assert sent[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert '"FirstName": "jane"' in sent[1]["content"]


def test_markdown_fenced_json_is_accepted():
    records = _records()
    reply = "```json\n" + json.dumps([r.to_dict() for r in records]) + "\n```"

    result = RecordEnhancer(client=FakeOpenAI(content=reply)).enhance(records)

    assert [r.to_dict() for r in result] == [r.to_dict() for r in records]


def test_non_json_response_falls_back_unchanged():
    records = _records()
    before = [r.to_dict() for r in records]
    enhancer = RecordEnhancer(client=FakeOpenAI(content="Sure! Here are your cleaned contacts."))

    result = enhancer.enhance(records)

    assert result is records
    assert [r.to_dict() for r in result] == before
    assert enhancer.get_stats()["fallbacks"] == 1
    assert "JSONDecodeError" in enhancer.get_errors()[0]


def test_wrong_record_count_falls_back():
    records = _records()
    reply = json.dumps([records[0].to_dict()])

    assert RecordEnhancer(client=FakeOpenAI(content=reply)).enhance(records) is records


def test_empty_and_non_array_responses_fall_back():
    records = _records()

    assert RecordEnhancer(client=FakeOpenAI(content="")).enhance(records) is records
    assert RecordEnhancer(client=FakeOpenAI(content=None)).enhance(records) is records
    assert RecordEnhancer(client=FakeOpenAI(content='{"FirstName": "Jane"}')).enhance(records) is records


def test_client_error_falls_back():
    records = _records()
    enhancer = RecordEnhancer(client=FakeOpenAI(error=ConnectionError("network down")))

    assert enhancer.enhance(records) is records
    assert "network down" in enhancer.get_errors()[0]


def test_missing_credentials_fall_back():
    enhancer = RecordEnhancer.from_config()
    records = _records()

    assert not enhancer.is_available
    assert enhancer.enhance(records) is records


def test_anthropic_provider_sends_system_prompt():
    records = _records()
    client = FakeAnthropic(json.dumps([r.to_dict() for r in records]))

    result = RecordEnhancer(ai_provider="anthropic", client=client).enhance(records)

    assert len(result) == 2
    assert client.calls[0]["system"] == SYSTEM_PROMPT
    assert client.calls[0]["messages"][0]["role"] == "user"
