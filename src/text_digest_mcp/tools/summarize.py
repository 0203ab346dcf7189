"""Digest tools: 4 tools on a FastMCP sub-server."""

from __future__ import annotations

import logging
from typing import Annotated

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import Field

from ..config import get_config, update_config
from ..digest import SummaryMode, analyze, summarize as run_pipeline
from ..digest.augment import generate_stats
from ..errors import DigestInputError, ErrorCategory, make_tool_error
from ..local_path_policy import read_text_file
from ..models.digest import SummaryOptions
from ..tracing import trace
from ..types import (
    AbstractionLevel,
    FocusTerm,
    OptionalFile,
    OptionalText,
    OutputFormat,
    SourceText,
    SummaryModeName,
    WordLimit,
)

logger = logging.getLogger(__name__)
digest_server = FastMCP("digest")

MODE_DESCRIPTIONS: dict[str, str] = {
    "auto": "Pick a mode from the instructions and the shape of the content",
    "brief": "Top three key sentences in one paragraph",
    "detailed": "Up to five sections with their leading lines",
    "bullet_points": "Up to ten key sentences as bullets",
    "key_insights": "Themes, figures, questions, and code at a glance",
    "action_items": "Numbered tasks, obligations, and assignments",
    "technical": "Code blocks, technical vocabulary, implementation details",
    "executive": "Overview, key metrics, and recommendations",
    "questions": "Questions the text asks or invites",
    "pros_cons": "Positive and negative points side by side",
    "timeline": "Dated events in document order",
    "creative": "Key points retold as a narrative",
    "academic": "Thesis, evidence, and conclusion",
    "conversational": "Key points in a casual register",
    "comparison": "Comparative statements plus pros and cons",
}

FORMAT_DESCRIPTIONS: dict[str, str] = {
    "markdown": "Markdown as generated",
    "text": "Plain text without markdown punctuation",
    "json": "JSON record with mode, summary, and timestamp",
    "html": "Minimal standalone HTML document",
    "outline": "Indented outline",
}


def _check_text_length(text: str) -> None:
    """Apply the configured character bounds to inline text."""
    cfg = get_config()
    length = len(text.strip())
    if length < cfg.min_text_chars:
        raise DigestInputError(f"Text must be at least {cfg.min_text_chars} characters long")
    if length > cfg.max_text_chars:
        raise DigestInputError(f"Text must be less than {cfg.max_text_chars:,} characters")


@digest_server.tool(annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False))
@trace(name="summarize", span_type="TOOL")
async def summarize(
    text: OptionalText = None,
    file: OptionalFile = None,
    instructions: Annotated[str | None, Field(
        description="Optional guidance, e.g. 'extract the action items' or 'keep it short'"
    )] = None,
    mode: SummaryModeName | None = None,
    format: OutputFormat | None = None,
    max_length: WordLimit = 0,
    language: Annotated[str, Field(description="Language label carried into the result")] = "en",
    include_quotes: bool = False,
    include_stats: bool = False,
    focus: FocusTerm = None,
    abstraction_level: AbstractionLevel = None,
) -> dict:
    """Summarize text or a text file into a structured digest.

    Provide exactly one of text or file. Summaries are built by deterministic
    pattern matching: sentences, sections, keywords, dates, figures, lists,
    questions, and action phrases are extracted and rendered in the chosen
    mode, then serialized in the chosen format.

    Args:
        text: Text content to summarize (10 to 100,000 characters).
        file: Path to a UTF-8 text file, relative to the working directory.
        instructions: Advisory guidance; steers ``auto`` and ``creative``.
        mode: Summary style (defaults to the configured mode, normally auto).
        format: Output format (defaults to the configured format, normally markdown).
        max_length: Word limit for the output; 0 means unlimited.
        language: Label echoed in the result metadata.
        include_quotes: Append source sentences that support the summary.
        include_stats: Append word, sentence, and reading-time statistics.
        focus: Term to prefer when picking sentences and filtering lines.
        abstraction_level: 1 (concrete) to 5 (abstract).

    Returns:
        Dict with success, output, and data, or success=False with an error.
    """
    cfg = get_config()
    try:
        if text is not None:
            _check_text_length(text)
        options = SummaryOptions(
            mode=mode or cfg.default_mode,
            format=format or cfg.default_format,
            instructions=instructions,
            max_length=max_length,
            language=language,
            include_quotes=include_quotes,
            include_stats=include_stats,
            focus=focus,
            abstraction_level=(
                abstraction_level if abstraction_level is not None
                else cfg.default_abstraction_level
            ),
        )
    except (DigestInputError, ValueError) as exc:
        return make_tool_error(exc)

    result = run_pipeline(text, options, file=file, loader=read_text_file)
    return result.model_dump(mode="json", exclude_none=True)


@digest_server.tool(annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False))
@trace(name="text_analyze", span_type="TOOL")
async def text_analyze(
    text: SourceText,
    top_keywords: Annotated[int, Field(ge=1, le=50, description="Number of keywords to list")] = 10,
) -> dict:
    """Report the facts the digest engine extracts from a text.

    Args:
        text: Text content to analyze.
        top_keywords: How many of the most frequent keywords to include.

    Returns:
        Dict with counts, top keywords, entities, dates, sections, and stats.
    """
    try:
        _check_text_length(text)
    except DigestInputError as exc:
        return make_tool_error(exc)

    analysis = analyze(text)
    return {
        "counts": {
            "sentences": len(analysis.sentences),
            "paragraphs": len(analysis.paragraphs),
            "sections": len(analysis.sections),
            "keywords": len(analysis.keywords),
            "entities": len(analysis.entities),
            "dates": len(analysis.dates),
            "numbers": len(analysis.numbers),
            "code_blocks": len(analysis.code_blocks),
            "lists": len(analysis.lists),
            "questions": len(analysis.questions),
            "actionable_items": len(analysis.actionable_items),
        },
        "top_keywords": [
            {"word": word, "count": analysis.keywords[word]}
            for word in analysis.top_keywords(top_keywords)
        ],
        "entities": sorted(analysis.entities),
        "dates": list(analysis.dates),
        "sections": list(analysis.sections),
        "questions": list(analysis.questions),
        "actionable_items": list(analysis.actionable_items),
        "stats": generate_stats(text).model_dump(),
    }


@digest_server.tool(annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False))
async def summary_modes() -> dict:
    """List the available summary modes and output formats.

    Returns:
        Dict with mode and format descriptions plus the configured defaults.
    """
    cfg = get_config()
    return {
        "modes": [{"name": m.value, "description": MODE_DESCRIPTIONS[m.value]} for m in SummaryMode],
        "formats": [{"name": name, "description": desc} for name, desc in FORMAT_DESCRIPTIONS.items()],
        "defaults": {
            "mode": cfg.default_mode,
            "format": cfg.default_format,
            "abstraction_level": cfg.default_abstraction_level,
        },
    }


@digest_server.tool(
    annotations=ToolAnnotations(
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
@trace(name="digest_configure", span_type="TOOL")
async def digest_configure(
    default_mode: SummaryModeName | None = None,
    default_format: OutputFormat | None = None,
    default_abstraction_level: Annotated[int | None, Field(ge=1, le=5)] = None,
) -> dict:
    """Change the defaults used when summarize is called without them.

    Args:
        default_mode: Mode used when ``mode`` is omitted.
        default_format: Format used when ``format`` is omitted.
        default_abstraction_level: Level used when ``abstraction_level`` is omitted.

    Returns:
        Dict with the resulting defaults.
    """
    try:
        cfg = update_config(
            default_mode=default_mode,
            default_format=default_format,
            default_abstraction_level=default_abstraction_level,
        )
    except ValueError as exc:
        return make_tool_error(DigestInputError(str(exc), ErrorCategory.INPUT_INVALID))
    logger.info(
        "Digest defaults updated: mode=%s format=%s abstraction_level=%d",
        cfg.default_mode,
        cfg.default_format,
        cfg.default_abstraction_level,
    )
    return {
        "default_mode": cfg.default_mode,
        "default_format": cfg.default_format,
        "default_abstraction_level": cfg.default_abstraction_level,
    }
