"""Provider response contracts.

Only the fields relaybot reads are declared; everything else in the
provider envelopes is ignored.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GeminiPart(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None


class GeminiContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    parts: list[GeminiPart] = Field(default_factory=list)


class GeminiCandidate(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    content: Optional[GeminiContent] = None
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")


class GeminiPromptFeedback(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    block_reason: Optional[str] = Field(default=None, alias="blockReason")


class GenerateContentResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    candidates: list[GeminiCandidate] = Field(default_factory=list)
    prompt_feedback: Optional[GeminiPromptFeedback] = Field(default=None, alias="promptFeedback")

    def first_text(self) -> str:
        """Concatenated text parts of the first candidate, or "" when there is none."""
        if not self.candidates:
            return ""
        content = self.candidates[0].content
        if content is None:
            return ""
        return "".join(part.text for part in content.parts if part.text)


class SearchItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    snippet: Optional[str] = None
    link: Optional[str] = None


class SearchResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[SearchItem] = Field(default_factory=list)
