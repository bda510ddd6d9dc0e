"""Secret store factory based on configured backend."""

from __future__ import annotations

from relaybot.secrets.base import SecretStore, SecretStoreError
from relaybot.secrets.env_store import EnvSecretStore
from relaybot.secrets.keyring_store import KeyringSecretStore


def create_secret_store(backend: str = "env", service_name: str = "relaybot") -> SecretStore:
    name = (backend or "env").strip().lower()
    if name == "env":
        return EnvSecretStore()
    if name == "keyring":
        return KeyringSecretStore(service_name=service_name)
    raise SecretStoreError(f"unsupported secret backend: {backend} (supported: env, keyring)")
