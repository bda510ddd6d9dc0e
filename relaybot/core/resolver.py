"""Answer resolution over an ordered chain of answer sources."""

from __future__ import annotations

import logging
import time
from typing import Sequence

from relaybot.adapters.answer_source import AnswerSource

LOGGER = logging.getLogger(__name__)


class AnswerResolver:
    """Return the first usable answer from ``sources``, else ``fallback_text``.

    A source's text is returned verbatim; answers are never merged across
    sources. ``resolve`` does not raise.
    """

    def __init__(self, sources: Sequence[AnswerSource], fallback_text: str) -> None:
        if not (fallback_text or "").strip():
            raise ValueError("fallback_text must not be empty")
        self._sources = list(sources)
        self._fallback_text = fallback_text

    @property
    def source_names(self) -> list[str]:
        return [source.name for source in self._sources]

    def resolve(self, query: str) -> str:
        for source in self._sources:
            started_at = time.perf_counter()
            try:
                text = source.try_answer(query)
            except Exception:
                LOGGER.exception("answer source crashed source=%s", source.name)
                continue
            elapsed_ms = int((time.perf_counter() - started_at) * 1000)

            if text and text.strip():
                LOGGER.info("answer resolved source=%s elapsed_ms=%s", source.name, elapsed_ms)
                return text
            LOGGER.info("no answer source=%s elapsed_ms=%s", source.name, elapsed_ms)

        LOGGER.info("no source produced an answer; using fallback")
        return self._fallback_text
