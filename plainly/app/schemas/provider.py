"""
AI Provider Schemas.

Request options for the AI collaborators consumed by the AI-assisted tools.
Those tools live outside the calculation engine; only the contract is
defined here so both sides agree on names and bounds.

**Domain Coverage**:
- TextCompletionOptions: sampling options of a text completion
- ImageSize: output size of an image generation
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TextCompletionOptions(BaseModel):
    """Options of a text completion request."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    temperature: float = Field(0.7, ge=0, le=2, description="Sampling temperature")
    max_tokens: int = Field(1024, gt=0, description="Upper bound on generated tokens")


class ImageSize(BaseModel):
    """Pixel size of a generated image."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    width: int = Field(1024, gt=0)
    height: int = Field(1024, gt=0)
