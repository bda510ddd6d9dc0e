"""Application runtime wiring."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from relaybot.adapters.source_factory import create_answer_sources
from relaybot.config.secrets import load_runtime_secrets
from relaybot.config.settings import Settings, load_settings
from relaybot.core.resolver import AnswerResolver

LOGGER = logging.getLogger(__name__)


class AppRuntime:
    def __init__(self, settings_path: Optional[Path] = None) -> None:
        self.settings: Settings = load_settings(settings_path)

        providers = self.settings.providers
        secrets = load_runtime_secrets(
            backend=self.settings.secrets.backend,
            service_name=self.settings.secrets.service_name,
            require_gemini=("gemini" in providers.order and providers.gemini.enabled),
            require_search=("google_search" in providers.order and providers.google_search.enabled),
        )
        self.telegram_bot_token = secrets.telegram_bot_token

        sources = create_answer_sources(settings=self.settings, secrets=secrets)
        self.resolver = AnswerResolver(sources=sources, fallback_text=self.settings.messages.no_answer)
        LOGGER.info("answer chain sources=%s", ",".join(self.resolver.source_names) or "(none)")

    def resolve(self, query: str) -> str:
        return self.resolver.resolve(query)
