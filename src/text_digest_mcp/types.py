"""Shared type aliases for tool parameters and digest options."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

# ── Literal enums ────────────────────────────────────────────────────────────

SummaryModeName = Literal[
    "auto", "brief", "detailed", "bullet_points", "key_insights",
    "action_items", "technical", "executive", "questions", "pros_cons",
    "timeline", "creative", "academic", "conversational", "comparison",
]
OutputFormat = Literal["markdown", "text", "json", "html", "outline"]

# ── Annotated aliases ────────────────────────────────────────────────────────

SourceText = Annotated[str, Field(min_length=1, description="The text content to analyze")]
OptionalText = Annotated[str | None, Field(description="The text content to summarize")]
OptionalFile = Annotated[str | None, Field(
    description="Path to a UTF-8 text file to summarize (alternative to text)",
)]
FocusTerm = Annotated[str | None, Field(
    description="Term to bias sentence selection toward and filter output lines by",
)]
WordLimit = Annotated[int, Field(ge=0, description="Maximum summary length in words (0 = unlimited)")]
AbstractionLevel = Annotated[int | None, Field(
    description="1 (concrete, more detail) to 5 (abstract, less detail)",
)]
