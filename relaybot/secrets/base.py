"""Secret stores: where the bot token and provider API keys are read from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class SecretStoreError(RuntimeError):
    """Raised when a secret cannot be loaded."""


class SecretStore(ABC):
    @abstractmethod
    def lookup(self, account: str) -> Optional[str]:
        """Return the raw stored value, or None when the account has no value."""

    def get_secret(self, account: str) -> str:
        value = (self.lookup(account) or "").strip()
        if not value:
            raise SecretStoreError(f"missing secret '{account}' in {self.describe()}")
        return value

    def describe(self) -> str:
        return type(self).__name__
