"""Google Custom Search JSON API adapter (provider 2).

Unlike the Gemini source, this source always produces a user-facing text:
the formatted top results, or a fixed message for "no results" and errors.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from relaybot.adapters.http_json import HttpJsonError, request_json
from relaybot.bot.templates import search_answer_text, search_result_block
from relaybot.config.settings import MAX_SEARCH_RESULTS
from relaybot.models.provider import SearchItem, SearchResponse

LOGGER = logging.getLogger(__name__)


def format_search_results(items: list[SearchItem], max_results: int = MAX_SEARCH_RESULTS) -> str:
    limit = max(1, min(max_results, MAX_SEARCH_RESULTS))
    blocks = [search_result_block(item.snippet or "", item.link or "") for item in items[:limit]]
    return search_answer_text(blocks)


class GoogleSearchAnswerSource:
    name = "google_search"

    def __init__(
        self,
        api_key: str,
        engine_id: str,
        endpoint: str,
        no_results_text: str,
        error_text: str,
        max_results: int = MAX_SEARCH_RESULTS,
        timeout_seconds: int = 30,
    ) -> None:
        self._api_key = api_key
        self._engine_id = engine_id
        self._endpoint = endpoint
        self._no_results_text = no_results_text
        self._error_text = error_text
        self._max_results = max_results
        self._timeout_seconds = timeout_seconds

    def try_answer(self, query: str) -> Optional[str]:
        try:
            payload = request_json(
                url=self._endpoint,
                method="GET",
                params={"q": query, "key": self._api_key, "cx": self._engine_id},
                timeout_seconds=self._timeout_seconds,
                label="custom search API",
            )
            response = SearchResponse.model_validate(payload)
        except HttpJsonError as exc:
            LOGGER.warning("search request failed: %s", exc)
            return self._error_text
        except ValidationError as exc:
            LOGGER.warning("search response has unexpected shape: %s", exc.error_count())
            return self._error_text

        if not response.items:
            LOGGER.info("search returned no results")
            return self._no_results_text

        LOGGER.info("search returned items=%s used=%s", len(response.items), min(len(response.items), self._max_results, MAX_SEARCH_RESULTS))
        return format_search_results(response.items, max_results=self._max_results)
