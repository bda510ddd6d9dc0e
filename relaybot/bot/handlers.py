"""Telegram update handlers."""

from __future__ import annotations

import asyncio
import html
import logging
import re
import time
from typing import Protocol

from telegram import Update
from telegram.constants import ParseMode
from telegram.error import BadRequest
from telegram.ext import ContextTypes

from relaybot.config.settings import MessagesConfig
from relaybot.core.query import normalize_query, split_message

LOGGER = logging.getLogger(__name__)


class Resolver(Protocol):
    def resolve(self, query: str) -> str:
        ...


def _chat_id(update: Update) -> int:
    assert update.effective_chat is not None
    return int(update.effective_chat.id)


_CODE = re.compile(r"```(?:[\w+-]*\n)?(.*?)```|`([^`\n]+)`", re.DOTALL)
_BOLD = re.compile(r"\*\*(?=\S)(.+?)(?<=\S)\*\*")


def _inline_html(text: str) -> str:
    return _BOLD.sub(r"<b>\1</b>", html.escape(text))


def _render_telegram_html(text: str) -> str:
    """Render the Markdown subset Gemini answers use most (code and **bold**) as Telegram HTML."""
    source = text or ""
    out: list[str] = []
    pos = 0
    for match in _CODE.finditer(source):
        out.append(_inline_html(source[pos : match.start()]))
        if match.group(1) is not None:
            block = html.escape(match.group(1).strip("\n"))
            out.append(f"<pre>{block}</pre>")
        else:
            out.append(f"<code>{html.escape(match.group(2))}</code>")
        pos = match.end()
    out.append(_inline_html(source[pos:]))
    return "".join(out)


class TelegramHandlers:
    def __init__(self, resolver: Resolver, messages: MessagesConfig, start_command: str = "/start") -> None:
        self.resolver = resolver
        self.messages = messages
        self.start_command = start_command

    async def _reply(self, update: Update, text: str) -> None:
        message = update.effective_message
        if message is None:
            return
        try:
            await message.reply_text(
                _render_telegram_html(text),
                parse_mode=ParseMode.HTML,
                disable_web_page_preview=True,
            )
        except BadRequest:
            await message.reply_text(text, disable_web_page_preview=True)

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._reply(update, self.messages.welcome)

    async def question(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        message = update.effective_message
        if message is None:
            return
        query = normalize_query(message.text, start_command=self.start_command)
        if query is None:
            return

        try:
            await self._reply(update, self.messages.thinking)
            LOGGER.info("question received chat_id=%s text_len=%s", _chat_id(update), len(query))
            started_at = time.time()
            # Providers use blocking HTTP; keep the event loop free for other chats.
            answer = await asyncio.to_thread(self.resolver.resolve, query)
            elapsed_ms = int((time.time() - started_at) * 1000)
            LOGGER.info("question answered chat_id=%s elapsed_ms=%s answer_len=%s", _chat_id(update), elapsed_ms, len(answer))
            for chunk in split_message(answer):
                await self._reply(update, chunk)
        except Exception:
            LOGGER.exception("unexpected failure while handling message")
            try:
                await self._reply(update, self.messages.unexpected_error)
            except Exception:
                LOGGER.exception("failed to deliver error reply")
