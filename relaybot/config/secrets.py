"""Secret accessor facade.

Accounts (environment variable names; lower-cased in the OS credential store):
- TELEGRAM_BOT_TOKEN
- GEMINI_API_KEY
- GOOGLE_API_KEY
- GOOGLE_CSE_ID
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from relaybot.secrets.base import SecretStore, SecretStoreError
from relaybot.secrets.factory import create_secret_store

TELEGRAM_BOT_TOKEN = "TELEGRAM_BOT_TOKEN"
GEMINI_API_KEY = "GEMINI_API_KEY"
GOOGLE_API_KEY = "GOOGLE_API_KEY"
GOOGLE_CSE_ID = "GOOGLE_CSE_ID"


@dataclass(frozen=True)
class RuntimeSecrets:
    telegram_bot_token: str
    gemini_api_key: Optional[str]
    google_api_key: Optional[str]
    google_cse_id: Optional[str]


def _optional_secret(store: SecretStore, account: str) -> Optional[str]:
    try:
        return store.get_secret(account)
    except SecretStoreError:
        return None


def _secret(store: SecretStore, account: str, required: bool) -> Optional[str]:
    if required:
        return store.get_secret(account)
    return _optional_secret(store=store, account=account)


def load_runtime_secrets(
    backend: str = "env",
    service_name: str = "relaybot",
    require_gemini: bool = True,
    require_search: bool = True,
) -> RuntimeSecrets:
    store = create_secret_store(backend=backend, service_name=service_name)
    return RuntimeSecrets(
        telegram_bot_token=store.get_secret(TELEGRAM_BOT_TOKEN),
        gemini_api_key=_secret(store, GEMINI_API_KEY, require_gemini),
        google_api_key=_secret(store, GOOGLE_API_KEY, require_search),
        google_cse_id=_secret(store, GOOGLE_CSE_ID, require_search),
    )


__all__ = ["RuntimeSecrets", "load_runtime_secrets", "SecretStoreError"]
