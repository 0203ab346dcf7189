"""Digest pipeline: validates inputs and runs every stage for one text.

Entry point: summarize(), called by the summarize tool.
Stages: analyze → mode dispatch → focus filter → quotes → stats → format → word limit.

The pipeline never raises across its boundary: input-contract violations and
loader failures come back as ``SummaryResult(success=False, error=...)``.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..errors import DigestInputError, ErrorCategory
from ..models.digest import SummaryData, SummaryOptions, SummaryResult
from ..tracing import trace
from .analyzer import analyze
from .augment import append_quotes, append_stats, extract_relevant_quotes, generate_stats, round_half_up
from .filters import apply_focus_filter, trim_to_word_limit
from .modes import generate_summary
from .render import format_output

logger = logging.getLogger(__name__)

MIN_ABSTRACTION_LEVEL = 1
MAX_ABSTRACTION_LEVEL = 5

FileLoader = Callable[[str], str]


def validate_request(text: str | None, file: str | None, abstraction_level: int) -> None:
    """Check the input contract.

    Raises:
        DigestInputError: Neither or both of text/file given, or the
            abstraction level falls outside 1-5.
    """
    if text is None and file is None:
        raise DigestInputError(
            "Either text or file parameter must be provided", ErrorCategory.INPUT_MISSING
        )
    if text is not None and file is not None:
        raise DigestInputError(
            "Cannot provide both text and file parameters", ErrorCategory.INPUT_CONFLICT
        )
    if not MIN_ABSTRACTION_LEVEL <= abstraction_level <= MAX_ABSTRACTION_LEVEL:
        raise DigestInputError(
            f"abstraction_level must be between {MIN_ABSTRACTION_LEVEL} and "
            f"{MAX_ABSTRACTION_LEVEL}, got {abstraction_level}",
            ErrorCategory.ABSTRACTION_OUT_OF_RANGE,
        )


def compression_ratio(original_words: int, summary_words: int) -> int:
    """Percent reduction in word count; 0 when the original has no words."""
    if original_words == 0:
        return 0
    return round_half_up((1 - summary_words / original_words) * 100)


def _load(file: str, loader: FileLoader | None) -> str:
    if loader is None:
        raise DigestInputError("File input requires a file loader")
    try:
        return loader(file)
    except FileNotFoundError as exc:
        raise DigestInputError(f"File not found: {file}", ErrorCategory.FILE_NOT_FOUND) from exc
    except PermissionError as exc:
        raise DigestInputError(f"Failed to read file: {exc}", ErrorCategory.PERMISSION_DENIED) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DigestInputError(f"Failed to read file: {exc}", ErrorCategory.FILE_UNREADABLE) from exc


@trace(name="digest_pipeline", span_type="CHAIN")
def summarize(
    text: str | None = None,
    options: SummaryOptions | None = None,
    *,
    file: str | None = None,
    loader: FileLoader | None = None,
) -> SummaryResult:
    """Summarize *text* (or the content *loader* returns for *file*).

    Args:
        text: In-memory source text.
        options: Summary options; defaults apply when omitted.
        file: Path label of a file source, mutually exclusive with *text*.
        loader: Callable turning *file* into its text content.

    Returns:
        SummaryResult: ``success`` with output and data, or an ``error``.
    """
    opts = options or SummaryOptions()
    try:
        validate_request(text, file, opts.abstraction_level)
        content = _load(file, loader) if file is not None else text
    except DigestInputError as exc:
        logger.debug("Rejected summarize request: %s", exc)
        return SummaryResult(success=False, error=str(exc))

    logger.debug("Summarizing text of length: %d", len(content))
    if opts.instructions:
        logger.debug("Using custom instructions: %s", opts.instructions)

    analysis = analyze(content)
    resolved, summary = generate_summary(
        opts.mode,
        analysis,
        abstraction_level=opts.abstraction_level,
        focus=opts.focus,
        instructions=opts.instructions,
    )
    if opts.focus:
        summary = apply_focus_filter(summary, opts.focus)
    if opts.include_quotes:
        summary = append_quotes(summary, extract_relevant_quotes(content, summary))
    if opts.include_stats:
        summary = append_stats(summary, generate_stats(content))

    formatted = format_output(summary, opts.format, resolved.value)
    output = formatted.content
    if opts.max_length > 0:
        output = trim_to_word_limit(output, opts.max_length)

    original_words = len(content.split())
    summary_words = len(output.split())
    ratio = compression_ratio(original_words, summary_words)
    logger.info("Summary generated (%d%% compression)", ratio)

    return SummaryResult(
        success=True,
        output=output,
        data=SummaryData(
            mode=opts.mode,
            resolved_mode=resolved.value,
            format=opts.format,
            abstraction_level=opts.abstraction_level,
            original_length=len(content),
            summary_length=len(output),
            original_words=original_words,
            summary_words=summary_words,
            compression_ratio=ratio,
            source=f"file: {file}" if file is not None else "text input",
            instructions=opts.instructions,
            language=opts.language,
            metadata=formatted.metadata,
        ),
    )
