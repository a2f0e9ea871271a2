"""Uniform error body returned by mutation endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class ActionErrorResponse(BaseModel):
    """Failure half of the mutation envelope."""

    success: Literal[False] = False
    error: str = Field(..., description="Human-readable error message")
    error_code: str = Field(..., description="Machine-readable error code")
    upgrade_required: bool = Field(
        False, description="The caller should be offered a plan upgrade"
    )
    requires_description: bool = Field(
        False, description="The deck needs a better description before AI generation"
    )
    reason: str | None = Field(None, description="AI provider failure subtype")
