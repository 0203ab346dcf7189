"""Optional summary augmenters: supporting quotes and reading statistics."""

from __future__ import annotations

import math

from ..models.digest import TextStats
from .analyzer import extract_paragraphs, find_sentences

WORDS_PER_MINUTE = 200
MAX_QUOTES = 3


def round_half_up(value: float) -> int:
    """Round .5 away from negative infinity, unlike Python's banker's rounding."""
    return math.floor(value + 0.5)


def extract_relevant_quotes(text: str, summary: str) -> list[str]:
    """Return up to three source sentences that echo the summary.

    A sentence qualifies when it is 30-149 characters long and at least four
    of its words longer than four characters appear in the summary.
    """
    haystack = summary.lower()
    quotes = []
    for match in find_sentences(text):
        sentence = match.strip()
        if not 30 <= len(sentence) < 150:
            continue
        words = sentence.lower().split()
        overlap = sum(1 for w in words if len(w) > 4 and w in haystack)
        if overlap >= 4:
            quotes.append(sentence)
            if len(quotes) == MAX_QUOTES:
                break
    return quotes


def generate_stats(text: str) -> TextStats:
    """Count words, sentences, and paragraphs and estimate reading time."""
    words = len(text.split())
    sentences = len(find_sentences(text))
    return TextStats(
        words=words,
        sentences=sentences,
        paragraphs=len(extract_paragraphs(text)),
        avg_words_per_sentence=round_half_up(words / sentences) if sentences else 0,
        characters=len(text),
        reading_time=math.ceil(words / WORDS_PER_MINUTE),
    )


def append_quotes(summary: str, quotes: list[str]) -> str:
    if not quotes:
        return summary
    block = "\n".join(f'> "{quote}"' for quote in quotes)
    return _append_section(summary, f"**Notable Quotes:**\n{block}")


def append_stats(summary: str, stats: TextStats) -> str:
    block = "\n".join([
        f"• Words: {stats.words}",
        f"• Sentences: {stats.sentences}",
        f"• Paragraphs: {stats.paragraphs}",
        f"• Average words per sentence: {stats.avg_words_per_sentence}",
        f"• Characters: {stats.characters}",
        f"• Reading time: {stats.reading_time} min",
    ])
    return _append_section(summary, f"**Statistics:**\n{block}")


def _append_section(summary: str, section: str) -> str:
    return f"{summary}\n\n{section}" if summary else section
