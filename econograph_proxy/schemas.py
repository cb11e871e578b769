"""Wire models for the Gemini generateContent payload and error envelopes."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    text: str


class SystemInstruction(BaseModel):
    parts: List[Part]


class GenerationConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response_mime_type: str = Field(default="application/json", alias="responseMimeType")


class GenerateContentRequest(BaseModel):
    """Outbound request body. ``contents`` is passed through untouched."""

    model_config = ConfigDict(populate_by_name=True)

    system_instruction: SystemInstruction = Field(alias="systemInstruction")
    contents: Any = None
    generation_config: GenerationConfig = Field(default_factory=GenerationConfig, alias="generationConfig")


class ErrorEnvelope(BaseModel):
    error: str
    details: Any = Field(default=None, description="Upstream error body, only set for upstream failures")

    def to_content(self) -> dict:
        return self.model_dump(exclude_unset=True)
