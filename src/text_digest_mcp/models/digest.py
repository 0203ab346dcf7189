"""Digest models: options, statistics, formatter output, and the result contract.

SummaryOptions leaves the abstraction level unconstrained; the pipeline
range-checks it and reports a failed SummaryResult.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ..types import OutputFormat, SummaryModeName


class SummaryOptions(BaseModel):
    """Options for one summarization run."""

    mode: SummaryModeName = "auto"
    format: OutputFormat = "markdown"
    instructions: str | None = None
    max_length: int = Field(default=0, ge=0)  # words, 0 = unlimited
    language: str = "en"
    include_quotes: bool = False
    include_stats: bool = False
    focus: str | None = None
    abstraction_level: int = 3


class TextStats(BaseModel):
    """Reading statistics for a source text."""

    words: int
    sentences: int
    paragraphs: int
    avg_words_per_sentence: int
    characters: int
    reading_time: int  # minutes at 200 words per minute


class FormattedOutput(BaseModel):
    """Serialized summary plus formatter metadata."""

    content: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class SummaryData(BaseModel):
    """Diagnostics attached to a successful summarization."""

    mode: str
    resolved_mode: str
    format: str
    abstraction_level: int
    original_length: int
    summary_length: int
    original_words: int
    summary_words: int
    compression_ratio: int
    source: str = "text input"
    method: str = "pattern"
    instructions: str | None = None
    language: str = "en"
    metadata: dict[str, Any] = Field(default_factory=dict)


class SummaryResult(BaseModel):
    """Result contract returned by the pipeline and the summarize tool."""

    success: bool
    output: str | None = None
    error: str | None = None
    data: SummaryData | None = None
