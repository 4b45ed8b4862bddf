"""
AI record enhancement

Sends the mapped contact set to a language model for CRM cleanup and
reads back a JSON array of records in the same shape. Enhancement is
best-effort: on any failure the original records are returned unchanged.
"""

import json
import logging
import re
from typing import Any, List, Optional

import openai
from anthropic import Anthropic

from core.models import ContactRecord

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are a CRM data cleanup assistant for a mortgage brokerage.

You receive a JSON array of contact records exported from a spreadsheet.
Clean each record:
- Fix capitalization of names, cities and street names
- Move values that landed in the wrong field (e.g. an email in Phone) to the right field
- Format phone numbers consistently
- Keep DateOfBirth as YYYY-MM-DD when it is a date
- BorrowerStage.Name must be one of: Active Lead, Business Partner Only, Prospect, Client
- Never invent data; leave unknown values as empty strings

Return ONLY a JSON array with exactly the same number of records, in the same
order, using exactly the same keys. No commentary, no markdown."""

USER_PROMPT = """Clean these {count} contact records:

{records}"""

_FENCE = re.compile(r'^```(?:json)?\s*(.*?)\s*```$', re.DOTALL | re.IGNORECASE)


class RecordEnhancer:
    """
    Clean contact records with an AI provider.

    Example:
        enhancer = RecordEnhancer.from_config()
        records = enhancer.enhance(records)
    """

    def __init__(
        self,
        ai_provider: str = 'openai',
        ai_api_key: str = '',
        ai_model: Optional[str] = None,
        max_tokens: int = 4096,
        client: Any = None,
    ):
        self.ai_provider = ai_provider
        self.ai_model = ai_model
        self.max_tokens = max_tokens

        # Initialize AI client once
        self._ai_client = client
        if self._ai_client is None and ai_api_key:
            if ai_provider == 'openai':
                self._ai_client = openai.OpenAI(api_key=ai_api_key)
            elif ai_provider == 'anthropic':
                self._ai_client = Anthropic(api_key=ai_api_key)

        # Stats
        self.ai_call_count = 0
        self.fallbacks = 0

        # Distinct errors collected during enhancement
        self._errors: List[str] = []

    @classmethod
    def from_config(cls, config=None) -> 'RecordEnhancer':
        """Create enhancer from the centralized config (.env)."""
        if config is None:
            from core.config import get_config
            config = get_config()

        return cls(
            ai_provider=config.ai_provider,
            ai_api_key=config.ai_api_key,
            ai_model=config.ai_model,
        )

    @property
    def is_available(self) -> bool:
        return self._ai_client is not None

    # =========================================================================
    # AI CALL
    # =========================================================================

    def _call_ai(self, payload: str, count: int) -> str:
        """Send one request; raises on transport/provider errors."""
        prompt = USER_PROMPT.format(count=count, records=payload)

        if self.ai_provider == 'openai':
            response = self._ai_client.chat.completions.create(
                model=self.ai_model or 'gpt-4o-mini',
                messages=[
                    {'role': 'system', 'content': SYSTEM_PROMPT},
                    {'role': 'user', 'content': prompt},
                ],
                temperature=0,
                max_tokens=self.max_tokens,
            )
            self.ai_call_count += 1
            return (response.choices[0].message.content or '').strip()

        elif self.ai_provider == 'anthropic':
            response = self._ai_client.messages.create(
                model=self.ai_model or 'claude-3-haiku-20240307',
                max_tokens=self.max_tokens,
                temperature=0,
                system=SYSTEM_PROMPT,
                messages=[{'role': 'user', 'content': prompt}],
            )
            self.ai_call_count += 1
            return response.content[0].text.strip() if response.content else ''

        raise ValueError(f"Unsupported AI provider '{self.ai_provider}'")

    def _parse_response(self, raw: str, expected: int) -> List[ContactRecord]:
        """Parse the model reply into records; raises ValueError if unusable."""
        if not raw:
            raise ValueError("empty response")

        text = raw.strip()
        fenced = _FENCE.match(text)
        if fenced:
            text = fenced.group(1)

        data = json.loads(text)

        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        if len(data) != expected:
            raise ValueError(f"expected {expected} records, got {len(data)}")
        if not all(isinstance(item, dict) for item in data):
            raise ValueError("array items must be objects")

        return [ContactRecord.from_dict(item) for item in data]

    # =========================================================================
    # MAIN
    # =========================================================================

    def enhance(self, records: List[ContactRecord]) -> List[ContactRecord]:
        """
        Clean the full record set in a single request.

        Args:
            records: Mapped contact records

        Returns:
            Cleaned records, or ``records`` itself if enhancement failed
        """
        if not records:
            return records

        if not self._ai_client:
            self._record_error(f"No AI client configured for provider '{self.ai_provider}'")
            return records

        payload = json.dumps([record.to_dict() for record in records], ensure_ascii=False, indent=1)

        try:
            raw = self._call_ai(payload, len(records))
            enhanced = self._parse_response(raw, len(records))
        except Exception as e:
            self._record_error(f"AI enhancement failed ({self.ai_provider}): {type(e).__name__}: {e}")
            return records

        logger.info("Enhanced %d records via %s", len(enhanced), self.ai_provider)
        return enhanced

    def _record_error(self, err: str):
        self.fallbacks += 1
        logger.warning("%s; keeping original records", err)
        if err not in self._errors:
            self._errors.append(err)

    def get_stats(self) -> dict:
        return {
            'ai_calls': self.ai_call_count,
            'fallbacks': self.fallbacks,
        }

    def get_errors(self) -> List[str]:
        return list(self._errors)
