import asyncio
from types import SimpleNamespace
from typing import Any, Optional

import pytest
from telegram.error import BadRequest

from relaybot.bot.handlers import TelegramHandlers, _render_telegram_html
from relaybot.config.settings import default_settings


class _FakeMessage:
    def __init__(self, text: Optional[str], fail_html: bool = False) -> None:
        self.text = text
        self.replies: list[dict[str, Any]] = []
        self._fail_html = fail_html

    async def reply_text(self, text: str, **kwargs: Any) -> None:
        if self._fail_html and kwargs.get("parse_mode"):
            raise BadRequest("Can't parse entities")
        self.replies.append({"text": text, **kwargs})


class _FakeResolver:
    def __init__(self, answer: str = "Paris is the capital of France.", error: Optional[Exception] = None) -> None:
        self.answer = answer
        self.error = error
        self.queries: list[str] = []

    def resolve(self, query: str) -> str:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.answer


def _update(message: _FakeMessage) -> Any:
    return SimpleNamespace(effective_message=message, effective_chat=SimpleNamespace(id=42))


def _handlers(resolver: _FakeResolver) -> TelegramHandlers:
    return TelegramHandlers(resolver, messages=default_settings().messages, start_command="/start")


def _texts(message: _FakeMessage) -> list[str]:
    return [r["text"] for r in message.replies]


def test_start_replies_welcome_without_resolving() -> None:
    resolver = _FakeResolver()
    message = _FakeMessage("/start")
    asyncio.run(_handlers(resolver).start(_update(message), context=None))

    assert _texts(message) == [_render_telegram_html(default_settings().messages.welcome)]
    assert resolver.queries == []


def test_question_sends_thinking_then_answer() -> None:
    resolver = _FakeResolver()
    message = _FakeMessage("  capital of France  ")
    asyncio.run(_handlers(resolver).question(_update(message), context=None))

    assert resolver.queries == ["capital of France"]
    assert _texts(message) == ["Let me think...", "Paris is the capital of France."]


@pytest.mark.parametrize("text", [None, "", "   \n", "/start"])
def test_question_ignores_empty_and_start(text: Optional[str]) -> None:
    resolver = _FakeResolver()
    message = _FakeMessage(text)
    asyncio.run(_handlers(resolver).question(_update(message), context=None))

    assert resolver.queries == []
    assert message.replies == []


def test_question_forwards_other_slash_commands() -> None:
    resolver = _FakeResolver()
    message = _FakeMessage("/help me with python")
    asyncio.run(_handlers(resolver).question(_update(message), context=None))

    assert resolver.queries == ["/help me with python"]
    assert _texts(message) == ["Let me think...", "Paris is the capital of France."]


def test_question_reports_unexpected_failure() -> None:
    resolver = _FakeResolver(error=KeyError("defect"))
    message = _FakeMessage("hello")
    asyncio.run(_handlers(resolver).question(_update(message), context=None))

    assert _texts(message) == ["Let me think...", "Something went wrong. Please try again."]


def test_question_splits_long_answers() -> None:
    resolver = _FakeResolver(answer=("line\n" * 2000).strip())
    message = _FakeMessage("long please")
    asyncio.run(_handlers(resolver).question(_update(message), context=None))

    texts = _texts(message)
    assert texts[0] == "Let me think..."
    assert len(texts) > 2
    assert all(len(t) <= 3500 for t in texts[1:])


def test_reply_falls_back_to_plain_text_on_bad_markup() -> None:
    resolver = _FakeResolver(answer="**bold** answer")
    message = _FakeMessage("q", fail_html=True)
    asyncio.run(_handlers(resolver).question(_update(message), context=None))

    assert message.replies[-1]["text"] == "**bold** answer"
    assert "parse_mode" not in message.replies[-1]


def test_render_telegram_html_escapes_and_bolds() -> None:
    assert _render_telegram_html("a < b **c**") == "a &lt; b <b>c</b>"


def test_render_telegram_html_formats_code() -> None:
    assert _render_telegram_html("use `a<b` here") == "use <code>a&lt;b</code> here"
    assert _render_telegram_html("```python\nprint(**kw)\n```") == "<pre>print(**kw)</pre>"
    assert _render_telegram_html("** not bold **") == "** not bold **"
