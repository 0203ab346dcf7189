"""Post-processing filters: focus-term line filtering and word-limit trimming."""

from __future__ import annotations

SHORT_LINE_CHARS = 50
ELLIPSIS = "..."


def apply_focus_filter(summary: str, focus: str | None) -> str:
    """Keep lines that mention *focus* or are short structural lines.

    Lines under 50 characters (headers, labels) always survive. When fewer
    than half of the lines would survive, the filter is too aggressive and
    the summary comes back unchanged.
    """
    if not focus or not summary:
        return summary
    needle = focus.lower()
    lines = summary.split("\n")
    kept = [line for line in lines if needle in line.lower() or len(line) < SHORT_LINE_CHARS]
    if len(kept) * 2 < len(lines):
        return summary
    return "\n".join(kept)


def trim_to_word_limit(text: str, limit: int) -> str:
    """Cut *text* to its first *limit* whitespace-delimited words plus an ellipsis.

    Text already within the limit is returned untouched, so trimming is
    idempotent.
    """
    words = text.split()
    if len(words) <= limit:
        return text
    return " ".join(words[:limit]) + ELLIPSIS
