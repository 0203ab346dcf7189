"""Output rendering: serialize a markdown summary into the requested format.

- markdown: pass-through
- text: markdown punctuation stripped, links collapsed to their text
- json: ``{mode, summary, timestamp}`` record
- html: minimal self-contained document
- outline: indented outline lines

Only ``json`` and ``html`` embed a generation timestamp; every other format
is a pure function of its input.
"""

from __future__ import annotations

import html
import json
import re
from datetime import datetime, timezone

from ..models.digest import FormattedOutput

_LINK = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_MARKDOWN_CHARS = re.compile(r"[*_#`~]")
_FULL_BOLD = re.compile(r"^\*\*(.+)\*\*$")
_OUTLINE_ITEM = re.compile(r"^(?:[-*•+]|\d+[.)])\s")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

_HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Summary ({mode})</title>
</head>
<body>
<h1>Summary ({mode})</h1>
<p>{body}</p>
<footer>Generated on {generated}</footer>
</body>
</html>
"""


def format_output(content: str, fmt: str = "markdown", mode: str = "auto") -> FormattedOutput:
    """Render *content* as *fmt*.

    Args:
        content: Markdown summary.
        fmt: One of markdown, text, json, html, outline.
        mode: Summary mode label embedded by json and html.

    Returns:
        FormattedOutput with the rendered content and format metadata.

    Raises:
        ValueError: If *fmt* is not a known format.
    """
    metadata: dict = {"format": fmt, "mode": mode}
    if fmt == "markdown":
        rendered = content
    elif fmt == "text":
        rendered = to_plain_text(content)
    elif fmt == "outline":
        rendered = to_outline(content)
    elif fmt == "json":
        timestamp = datetime.now(timezone.utc).isoformat()
        metadata["timestamp"] = timestamp
        rendered = json.dumps(
            {"mode": mode, "summary": content, "timestamp": timestamp},
            indent=2,
            ensure_ascii=False,
        )
    elif fmt == "html":
        now = datetime.now(timezone.utc)
        metadata["timestamp"] = now.isoformat()
        rendered = to_html(content, mode, generated=now.date().isoformat())
    else:
        raise ValueError(f"Unknown output format '{fmt}'")
    return FormattedOutput(content=rendered, metadata=metadata)


def to_plain_text(content: str) -> str:
    """Collapse links to their text and drop emphasis, heading, and code characters."""
    return _MARKDOWN_CHARS.sub("", _LINK.sub(r"\1", content))


def to_outline(content: str) -> str:
    """Unwrap fully bold lines, indent list items one level and other lines two."""
    lines = []
    for line in content.split("\n"):
        stripped = line.strip()
        bold = _FULL_BOLD.match(stripped)
        if not stripped:
            lines.append("")
        elif bold:
            lines.append(bold.group(1))
        elif _OUTLINE_ITEM.match(stripped):
            lines.append(f"  {stripped}")
        else:
            lines.append(f"    {stripped}")
    return "\n".join(lines)


def to_html(content: str, mode: str, *, generated: str) -> str:
    """Embed *content* in a minimal HTML document."""
    paragraphs = _PARAGRAPH_BREAK.split(html.escape(content))
    body = "</p>\n<p>".join(p.replace("\n", "<br>\n") for p in paragraphs)
    return _HTML_TEMPLATE.format(mode=html.escape(mode), body=body, generated=generated)
