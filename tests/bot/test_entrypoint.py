from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest
from telegram import Chat, Message, MessageEntity, Update
from telegram.ext import CommandHandler, MessageHandler

from relaybot.config.settings import default_settings
from relaybot.main import build_application, main
from relaybot.secrets.base import SecretStoreError


class _EmptyStore:
    def get_secret(self, account: str) -> str:
        raise SecretStoreError(f"missing: {account}")


def test_main_exits_non_zero_when_secret_missing(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(
        "relaybot.config.secrets.create_secret_store",
        lambda backend, service_name: _EmptyStore(),
    )
    assert main(["--settings", "config/settings.yaml"]) == 2
    assert "required secret is missing" in capsys.readouterr().out


def test_main_exits_non_zero_on_invalid_settings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("providers:\n  timeout_seconds: -1\n", encoding="utf-8")
    assert main(["--settings", str(path)]) == 2
    assert "settings are invalid" in capsys.readouterr().out


def test_build_application_registers_start_and_text_handlers() -> None:
    runtime = SimpleNamespace(
        settings=default_settings(),
        telegram_bot_token="123456:TEST-TOKEN",
        resolve=lambda query: "answer",
    )
    app = build_application(runtime)  # type: ignore[arg-type]

    registered = app.handlers[0]
    assert isinstance(registered[0], CommandHandler)
    assert "start" in registered[0].commands
    assert isinstance(registered[1], MessageHandler)


def test_text_handler_accepts_other_slash_commands() -> None:
    runtime = SimpleNamespace(
        settings=default_settings(),
        telegram_bot_token="123456:TEST-TOKEN",
        resolve=lambda query: "answer",
    )
    app = build_application(runtime)  # type: ignore[arg-type]
    text_handler = app.handlers[0][1]

    message = Message(
        message_id=1,
        date=datetime.now(timezone.utc),
        chat=Chat(id=42, type=Chat.PRIVATE),
        text="/help me with python",
        entities=[MessageEntity(type=MessageEntity.BOT_COMMAND, offset=0, length=5)],
    )
    assert text_handler.check_update(Update(update_id=1, message=message))
