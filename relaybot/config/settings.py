"""Settings loader for relaybot."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from relaybot.bot import templates

PROVIDER_NAMES = ("gemini", "google_search")

DEFAULT_GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
DEFAULT_GEMINI_MODEL = "gemini-1.5-flash-latest"
DEFAULT_SEARCH_ENDPOINT = "https://www.googleapis.com/customsearch/v1"
# Answers never carry more than this many search results.
MAX_SEARCH_RESULTS = 3


@dataclass(frozen=True)
class TelegramConfig:
    start_command: str
    drop_pending_updates: bool
    concurrent_updates: bool


@dataclass(frozen=True)
class GeminiConfig:
    enabled: bool
    model: str
    endpoint: str


@dataclass(frozen=True)
class SearchConfig:
    enabled: bool
    endpoint: str
    max_results: int


@dataclass(frozen=True)
class ProvidersConfig:
    order: list[str]
    timeout_seconds: int
    gemini: GeminiConfig
    google_search: SearchConfig


@dataclass(frozen=True)
class MessagesConfig:
    welcome: str
    thinking: str
    no_results: str
    search_error: str
    no_answer: str
    unexpected_error: str


@dataclass(frozen=True)
class SecretsConfig:
    backend: str
    service_name: str


@dataclass(frozen=True)
class Settings:
    version: str
    telegram: TelegramConfig
    providers: ProvidersConfig
    messages: MessagesConfig
    secrets: SecretsConfig


class SettingsLoadError(RuntimeError):
    """Raised when settings cannot be loaded."""


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SettingsLoadError(f"{key} must be an object")
    return value


def _value(data: dict[str, Any], key: str, default: Any) -> Any:
    # An empty YAML key (`welcome:`) loads as None; treat it as absent.
    value = data.get(key)
    return default if value is None else value


def _text(data: dict[str, Any], key: str, default: str, where: str) -> str:
    value = _value(data, key, default)
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise SettingsLoadError(f"{where}.{key} must be a string")
    text = str(value).strip()
    if not text:
        raise SettingsLoadError(f"{where}.{key} must not be empty")
    return text


def _flag(data: dict[str, Any], key: str, default: bool, where: str) -> bool:
    value = _value(data, key, default)
    if not isinstance(value, bool):
        raise SettingsLoadError(f"{where}.{key} must be true or false")
    return value


def _integer(data: dict[str, Any], key: str, default: int, where: str) -> int:
    value = _value(data, key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsLoadError(f"{where}.{key} must be an integer")
    return value


def parse_settings(raw: dict[str, Any]) -> Settings:
    if not isinstance(raw, dict):
        raise SettingsLoadError("settings root must be an object")

    telegram_raw = _section(raw, "telegram")
    providers_raw = _section(raw, "providers")
    gemini_raw = _section(providers_raw, "gemini")
    search_raw = _section(providers_raw, "google_search")
    messages_raw = _section(raw, "messages")
    secrets_raw = _section(raw, "secrets")

    start_command = _text(telegram_raw, "start_command", "/start", "telegram")
    if not start_command.startswith("/") or " " in start_command:
        raise SettingsLoadError(f"invalid telegram.start_command: {start_command}")

    order_raw = _value(providers_raw, "order", list(PROVIDER_NAMES))
    if not isinstance(order_raw, list):
        raise SettingsLoadError("providers.order must be a list")
    order = [str(x).strip() for x in order_raw]
    for name in order:
        if name not in PROVIDER_NAMES:
            raise SettingsLoadError(f"unknown provider in providers.order: {name}")
    if len(set(order)) != len(order):
        raise SettingsLoadError("providers.order must not contain duplicates")

    timeout_seconds = _integer(providers_raw, "timeout_seconds", 30, "providers")
    max_results = _integer(search_raw, "max_results", MAX_SEARCH_RESULTS, "providers.google_search")
    if timeout_seconds <= 0:
        raise SettingsLoadError("providers.timeout_seconds must be > 0")
    if not 1 <= max_results <= MAX_SEARCH_RESULTS:
        raise SettingsLoadError(f"providers.google_search.max_results must be within 1..{MAX_SEARCH_RESULTS}")

    gemini_endpoint = _text(gemini_raw, "endpoint", DEFAULT_GEMINI_ENDPOINT, "providers.gemini")
    if "{model}" not in gemini_endpoint:
        raise SettingsLoadError("providers.gemini.endpoint must contain {model} placeholder")

    secret_backend = _text(secrets_raw, "backend", "env", "secrets").lower()
    if secret_backend not in {"env", "keyring"}:
        raise SettingsLoadError(f"invalid secrets.backend: {secret_backend}")

    return Settings(
        version=str(raw.get("version", "1")),
        telegram=TelegramConfig(
            start_command=start_command,
            drop_pending_updates=_flag(telegram_raw, "drop_pending_updates", True, "telegram"),
            concurrent_updates=_flag(telegram_raw, "concurrent_updates", True, "telegram"),
        ),
        providers=ProvidersConfig(
            order=order,
            timeout_seconds=timeout_seconds,
            gemini=GeminiConfig(
                enabled=_flag(gemini_raw, "enabled", True, "providers.gemini"),
                model=_text(gemini_raw, "model", DEFAULT_GEMINI_MODEL, "providers.gemini"),
                endpoint=gemini_endpoint,
            ),
            google_search=SearchConfig(
                enabled=_flag(search_raw, "enabled", True, "providers.google_search"),
                endpoint=_text(search_raw, "endpoint", DEFAULT_SEARCH_ENDPOINT, "providers.google_search"),
                max_results=max_results,
            ),
        ),
        messages=MessagesConfig(
            welcome=_text(messages_raw, "welcome", templates.WELCOME_TEXT, "messages"),
            thinking=_text(messages_raw, "thinking", templates.THINKING_TEXT, "messages"),
            no_results=_text(messages_raw, "no_results", templates.NO_RESULTS_TEXT, "messages"),
            search_error=_text(messages_raw, "search_error", templates.SEARCH_ERROR_TEXT, "messages"),
            no_answer=_text(messages_raw, "no_answer", templates.NO_ANSWER_TEXT, "messages"),
            unexpected_error=_text(messages_raw, "unexpected_error", templates.UNEXPECTED_ERROR_TEXT, "messages"),
        ),
        secrets=SecretsConfig(
            backend=secret_backend,
            service_name=_text(secrets_raw, "service_name", "relaybot", "secrets"),
        ),
    )


def default_settings() -> Settings:
    return parse_settings({})


def load_settings(path: Optional[Path]) -> Settings:
    if path is None:
        return default_settings()
    if not path.exists():
        raise SettingsLoadError(f"settings file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise SettingsLoadError(f"settings file is not valid YAML: {path}") from exc
    if raw is None:
        return default_settings()
    return parse_settings(raw)
