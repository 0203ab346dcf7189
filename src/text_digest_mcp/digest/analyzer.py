"""Content analysis: parse raw text into an immutable fact bundle.

``analyze()`` is total: text lacking a pattern yields an empty sequence or
mapping for that field, never an error. Each extractor is an independent
single pass over the raw text (or over the sentence sequence) and does not
read another extractor's output, apart from questions and actionable items
which filter ``sentences``.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..lexicon import is_stopword

SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")
PARAGRAPH_SPLIT = re.compile(r"\n[ \t]*\n")
HEADING_LINE = re.compile(r"^#+\s+")
TITLE_LINE = re.compile(r"^[A-Z][^.!?]*:$")
KEYWORD_TOKEN = re.compile(r"\b[a-z]{4,}\b")
ENTITY_PATTERN = re.compile(r"\b[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*\b")
NUMBER_PATTERN = re.compile(r"\b\d+(?:[.,]\d+)*%?")
CODE_BLOCK_PATTERN = re.compile(r"```.*?```", re.DOTALL)
LIST_ITEM = re.compile(r"^\s*(?:[-*•+]|\d+[.)])\s+\S")

_MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|"
    r"Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
DATE_PATTERN = re.compile(
    r"\b\d{4}-\d{1,2}-\d{1,2}\b"
    r"|\b\d{1,2}[/.-]\d{1,2}[/.-]\d{2,4}\b"
    rf"|\b{_MONTH}\.?\s+\d{{1,2}}(?:st|nd|rd|th)?(?:,?\s+\d{{4}})?\b"
    rf"|\b\d{{1,2}}(?:st|nd|rd|th)?\s+{_MONTH}(?:,?\s+\d{{4}})?\b"
    rf"|\b{_MONTH}\s+\d{{4}}\b"
)

ACTION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:will|should|must|needs? to|have to|has to|going to)\s+\w+", re.IGNORECASE),
    re.compile(r"\b(?:TODO|FIXME)\b"),
    re.compile(r"\b(?:todo|fixme|action|task|next steps?)\s*:", re.IGNORECASE),
    re.compile(r"\b(?:action items?|deliverables?)\s*:", re.IGNORECASE),
    re.compile(r"\b(?:responsible|assigned to|owner)\s*:|\b(?:responsible for|assigned to)\s+\w+", re.IGNORECASE),
    # "Mike to complete the API" style assignments at the start of a sentence or line
    re.compile(
        r"(?:^|\n)[\s•*+-]*[A-Z][a-z]+\s+to\s+"
        r"(?!(?:the|a|an|this|that|these|those|be|our|my|your|his|her|their|its)\b)[a-z]{3,}\b"
    ),
)

DEFAULT_SECTION = "Introduction"


@dataclass(frozen=True)
class ContentAnalysis:
    """Facts extracted from one input text. Never mutated after construction."""

    sentences: tuple[str, ...] = ()
    paragraphs: tuple[str, ...] = ()
    sections: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    keywords: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    entities: frozenset[str] = frozenset()
    dates: tuple[str, ...] = ()
    numbers: tuple[str, ...] = ()
    code_blocks: tuple[str, ...] = ()
    lists: tuple[tuple[str, ...], ...] = ()
    questions: tuple[str, ...] = ()
    actionable_items: tuple[str, ...] = ()

    def top_keywords(self, count: int) -> list[str]:
        """Return up to *count* keywords by descending frequency.

        Ties keep first-occurrence order.
        """
        return [word for word, _ in Counter(self.keywords).most_common(count)]


def analyze(text: str) -> ContentAnalysis:
    """Parse *text* into a ContentAnalysis."""
    sentences = extract_sentences(text)
    return ContentAnalysis(
        sentences=sentences,
        paragraphs=extract_paragraphs(text),
        sections=MappingProxyType(extract_sections(text)),
        keywords=MappingProxyType(extract_keywords(text)),
        entities=frozenset(ENTITY_PATTERN.findall(text)),
        dates=tuple(DATE_PATTERN.findall(text)),
        numbers=tuple(NUMBER_PATTERN.findall(text)),
        code_blocks=tuple(CODE_BLOCK_PATTERN.findall(text)),
        lists=extract_lists(text),
        questions=tuple(s for s in sentences if s.endswith("?")),
        actionable_items=tuple(s for s in sentences if is_actionable(s)),
    )


def find_sentences(text: str) -> list[str]:
    """Return raw sentence matches, scanning only up to the last terminator."""
    last = max(text.rfind(c) for c in ".!?")
    if last < 0:
        return []
    return SENTENCE_PATTERN.findall(text[:last + 1])


def extract_sentences(text: str) -> tuple[str, ...]:
    """Split on terminal punctuation; text with none yields no sentences."""
    return tuple(match.strip() for match in find_sentences(text))


def extract_paragraphs(text: str) -> tuple[str, ...]:
    """Return non-blank blocks separated by a blank line."""
    return tuple(p.strip() for p in PARAGRAPH_SPLIT.split(text) if p.strip())


def is_section_title(line: str) -> bool:
    """Return True for a heading-marked line or a capitalized ``Title:`` line."""
    return bool(HEADING_LINE.match(line) or TITLE_LINE.match(line))


def extract_sections(text: str) -> dict[str, tuple[str, ...]]:
    """Group body lines under the most recent section title.

    Lines before the first title land in ``Introduction``, which only exists
    when such lines do. A repeated title reopens its entry empty.
    """
    sections: dict[str, list[str]] = {}
    current = DEFAULT_SECTION
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if is_section_title(line):
            current = HEADING_LINE.sub("", line).rstrip(":").strip() or current
            sections[current] = []
        else:
            sections.setdefault(current, []).append(line)
    return {title: tuple(lines) for title, lines in sections.items()}


def extract_keywords(text: str) -> dict[str, int]:
    """Count lowercase alphabetic tokens of 4+ letters, skipping stopwords."""
    counts: dict[str, int] = {}
    for token in KEYWORD_TOKEN.findall(text.lower()):
        if is_stopword(token):
            continue
        counts[token] = counts.get(token, 0) + 1
    return counts


def extract_lists(text: str) -> tuple[tuple[str, ...], ...]:
    """Group consecutive bullet or numbered lines; any other line ends a group."""
    groups: list[tuple[str, ...]] = []
    current: list[str] = []
    for line in text.splitlines():
        if LIST_ITEM.match(line):
            current.append(line.strip())
            continue
        if current:
            groups.append(tuple(current))
            current = []
    if current:
        groups.append(tuple(current))
    return tuple(groups)


def is_actionable(sentence: str) -> bool:
    """Return True when *sentence* matches an obligation, marker, or ownership pattern."""
    return any(pattern.search(sentence) for pattern in ACTION_PATTERNS)
