"""Process environment secret adapter (.env aware)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from relaybot.secrets.base import SecretStore


class EnvSecretStore(SecretStore):
    def __init__(self, dotenv_path: Optional[Path] = None) -> None:
        # .env is looked up from the working directory; exported values take precedence.
        load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)

    def lookup(self, account: str) -> Optional[str]:
        return os.environ.get(account)

    def describe(self) -> str:
        return "environment (.env)"
