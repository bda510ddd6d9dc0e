"""Inbound query normalization and outbound message splitting."""

from __future__ import annotations

from typing import Optional

# Telegram rejects messages over 4096 characters; HTML escaping can grow the text.
MESSAGE_CHUNK_LIMIT = 3500


def normalize_query(text: Optional[str], start_command: str = "/start") -> Optional[str]:
    query = (text or "").strip()
    if not query or query == start_command:
        return None
    return query


def split_message(text: str, limit: int = MESSAGE_CHUNK_LIMIT) -> list[str]:
    if limit <= 0:
        raise ValueError("limit must be > 0")
    chunks: list[str] = []
    rest = text
    while len(rest) > limit:
        cut = rest.rfind("\n", 0, limit)
        if cut <= 0:
            cut = limit
        chunk = rest[:cut].rstrip("\n")
        if chunk:
            chunks.append(chunk)
        rest = rest[cut:].lstrip("\n")
    if rest or not chunks:
        chunks.append(rest)
    return chunks
