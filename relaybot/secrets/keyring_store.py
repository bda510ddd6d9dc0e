"""OS credential store adapter.

Accounts are stored lower-cased (``telegram_bot_token``, ``gemini_api_key``,
...) under one service name, e.g. ``keyring set relaybot gemini_api_key``.
"""

from __future__ import annotations

from typing import Optional

import keyring
from keyring.errors import KeyringError

from relaybot.secrets.base import SecretStore, SecretStoreError


class KeyringSecretStore(SecretStore):
    def __init__(self, service_name: str) -> None:
        self.service_name = service_name

    def lookup(self, account: str) -> Optional[str]:
        try:
            return keyring.get_password(self.service_name, account.lower())
        except KeyringError as exc:
            raise SecretStoreError(f"credential store unavailable for '{account.lower()}': {exc}") from exc

    def describe(self) -> str:
        return f"credential store service '{self.service_name}'"
