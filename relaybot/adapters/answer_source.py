"""Shared answer source interface for the resolver chain."""

from __future__ import annotations

from typing import Optional, Protocol


class AnswerSource(Protocol):
    name: str

    def try_answer(self, query: str) -> Optional[str]:
        """Return answer text for the query, or None when this source has no answer."""
