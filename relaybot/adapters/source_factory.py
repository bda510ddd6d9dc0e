"""Factory for building the ordered answer source chain."""

from __future__ import annotations

import logging

from relaybot.adapters.answer_source import AnswerSource
from relaybot.adapters.gemini_source import GeminiAnswerSource
from relaybot.adapters.search_source import GoogleSearchAnswerSource
from relaybot.config.secrets import RuntimeSecrets
from relaybot.config.settings import Settings

LOGGER = logging.getLogger(__name__)


class SourceFactoryError(RuntimeError):
    """Answer source initialization error."""


def create_answer_sources(settings: Settings, secrets: RuntimeSecrets) -> list[AnswerSource]:
    providers = settings.providers
    sources: list[AnswerSource] = []

    for name in providers.order:
        if name == "gemini":
            cfg = providers.gemini
            if not cfg.enabled or not secrets.gemini_api_key:
                LOGGER.info("answer source skipped name=%s (not configured)", name)
                continue
            sources.append(
                GeminiAnswerSource(
                    api_key=secrets.gemini_api_key,
                    model=cfg.model,
                    endpoint=cfg.endpoint,
                    timeout_seconds=providers.timeout_seconds,
                )
            )
            continue

        if name == "google_search":
            cfg = providers.google_search
            if not cfg.enabled or not secrets.google_api_key or not secrets.google_cse_id:
                LOGGER.info("answer source skipped name=%s (not configured)", name)
                continue
            sources.append(
                GoogleSearchAnswerSource(
                    api_key=secrets.google_api_key,
                    engine_id=secrets.google_cse_id,
                    endpoint=cfg.endpoint,
                    no_results_text=settings.messages.no_results,
                    error_text=settings.messages.search_error,
                    max_results=cfg.max_results,
                    timeout_seconds=providers.timeout_seconds,
                )
            )
            continue

        raise SourceFactoryError(f"unsupported answer source: {name}")

    return sources
