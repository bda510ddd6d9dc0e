"""Gemini generateContent adapter (provider 1)."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from relaybot.adapters.http_json import HttpJsonError, request_json
from relaybot.models.provider import GenerateContentResponse

LOGGER = logging.getLogger(__name__)


class GeminiAnswerSource:
    name = "gemini"

    def __init__(self, api_key: str, model: str, endpoint: str, timeout_seconds: int = 30) -> None:
        self._api_key = api_key
        self._url = endpoint.format(model=model)
        self._timeout_seconds = timeout_seconds

    def try_answer(self, query: str) -> Optional[str]:
        body = {"contents": [{"parts": [{"text": query}]}]}
        try:
            payload = request_json(
                url=self._url,
                method="POST",
                params={"key": self._api_key},
                body=body,
                timeout_seconds=self._timeout_seconds,
                label="gemini API",
            )
        except HttpJsonError as exc:
            LOGGER.warning("gemini request failed: %s", exc)
            return None

        try:
            response = GenerateContentResponse.model_validate(payload)
        except ValidationError as exc:
            LOGGER.warning("gemini response has unexpected shape: %s", exc.error_count())
            return None

        text = response.first_text()
        if not text.strip():
            block_reason = response.prompt_feedback.block_reason if response.prompt_feedback else None
            if block_reason:
                LOGGER.info("gemini blocked prompt reason=%s", block_reason)
            else:
                LOGGER.info("gemini returned no answer candidates=%s", len(response.candidates))
            return None
        return text
