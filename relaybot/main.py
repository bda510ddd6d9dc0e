"""relaybot Telegram bot entrypoint."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Optional

from telegram import BotCommand
from telegram.ext import Application, ApplicationBuilder, CommandHandler, MessageHandler, filters

from relaybot.bot.handlers import TelegramHandlers
from relaybot.config.settings import SettingsLoadError
from relaybot.core.runtime import AppRuntime
from relaybot.secrets.base import SecretStoreError

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs, which include the bot token.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("telegram").setLevel(logging.WARNING)


def _resolve_settings_path(raw: Optional[str], workspace_root: Path) -> Optional[Path]:
    value = (raw or os.getenv("RELAYBOT_SETTINGS_PATH", "")).strip()
    if value:
        return Path(value)
    default_path = workspace_root / "config" / "settings.yaml"
    if default_path.exists():
        return default_path
    return None


def _build_post_init(start_command: str):
    async def _post_init(application: Application) -> None:
        """Register command menu shown in Telegram chat UI."""
        await application.bot.set_my_commands(
            commands=[BotCommand(start_command.lstrip("/"), "Show welcome message")]
        )

    return _post_init


def build_application(runtime: AppRuntime) -> Application:
    telegram_cfg = runtime.settings.telegram
    handlers = TelegramHandlers(
        runtime,
        messages=runtime.settings.messages,
        start_command=telegram_cfg.start_command,
    )

    app = (
        ApplicationBuilder()
        .token(runtime.telegram_bot_token)
        .concurrent_updates(telegram_cfg.concurrent_updates)
        .post_init(_build_post_init(telegram_cfg.start_command))
        .build()
    )
    # Same group: the first matching handler wins, so the start command never reaches `question`.
    app.add_handler(CommandHandler(telegram_cfg.start_command.lstrip("/"), handlers.start))
    app.add_handler(MessageHandler(filters.TEXT, handlers.question))
    return app


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="relaybot Telegram runner")
    parser.add_argument(
        "--settings",
        help="Path to settings YAML (default: config/settings.yaml when present)",
    )
    args = parser.parse_args(argv)

    _configure_logging()

    workspace_root = Path(os.getenv("RELAYBOT_WORKSPACE_ROOT", Path.cwd()))
    settings_path = _resolve_settings_path(args.settings, workspace_root=workspace_root)
    LOGGER.info("starting settings=%s", settings_path or "(built-in defaults)")

    try:
        runtime = AppRuntime(settings_path=settings_path)
    except SecretStoreError as exc:
        LOGGER.error("startup blocked by missing secret: %s", exc)
        print(
            "Startup failed: a required secret is missing.\n"
            f"- detail: {exc}\n"
            "Set TELEGRAM_BOT_TOKEN, GEMINI_API_KEY, GOOGLE_API_KEY and GOOGLE_CSE_ID "
            "in the environment or in a .env file (see .env.example)."
        )
        return 2
    except SettingsLoadError as exc:
        LOGGER.error("startup blocked by invalid settings: %s", exc)
        print(
            "Startup failed: settings are invalid.\n"
            f"- settings: {settings_path}\n"
            f"- detail: {exc}"
        )
        return 2

    app = build_application(runtime)
    LOGGER.info("bot is running")
    app.run_polling(drop_pending_updates=runtime.settings.telegram.drop_pending_updates)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
