"""Default Telegram response texts.

Every text here can be overridden under ``messages`` in config/settings.yaml.
"""

from __future__ import annotations

WELCOME_TEXT = (
    "Welcome! Send me any question.\n"
    "I ask Gemini first and fall back to Google Search when it has no answer."
)
THINKING_TEXT = "Let me think..."
NO_RESULTS_TEXT = "Sorry, I couldn't find any relevant results from Google."
SEARCH_ERROR_TEXT = "Sorry, there was an error fetching data from Google."
NO_ANSWER_TEXT = "I couldn't find an answer, try asking differently."
UNEXPECTED_ERROR_TEXT = "Something went wrong. Please try again."

MORE_INFO_PREFIX = "More info: "


def search_result_block(snippet: str, link: str) -> str:
    return f"{snippet}\n{MORE_INFO_PREFIX}{link}"


def search_answer_text(blocks: list[str]) -> str:
    return "\n\n".join(blocks)
