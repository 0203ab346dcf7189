"""Key-point scoring: rank sentences by length, digits, keywords, and position."""

from __future__ import annotations

from .analyzer import ContentAnalysis

LEADING_POSITIONS = 5
KEYWORD_WEIGHT_CAP = 3


def score_sentence(sentence: str, position: int, keywords: dict[str, int] | None = None) -> int:
    """Score one sentence.

    Args:
        sentence: Candidate sentence text.
        position: Index of the sentence in the original sentence sequence.
        keywords: Keyword frequencies; each keyword found adds min(freq, 3).

    Returns:
        Integer score, higher is more representative.
    """
    score = 0
    if 50 < len(sentence) < 200:
        score += 2
    if any(ch.isdigit() for ch in sentence):
        score += 1
    lowered = sentence.lower()
    for word, freq in (keywords or {}).items():
        if word in lowered:
            score += min(freq, KEYWORD_WEIGHT_CAP)
    if position < LEADING_POSITIONS:
        score += 2
    return score


def extract_key_points(
    analysis: ContentAnalysis,
    count: int,
    focus: str | None = None,
) -> list[str]:
    """Return the top *count* sentences, highest score first.

    When *focus* is given only sentences containing it (case-insensitive)
    are candidates. Equal scores keep document order.
    """
    if count <= 0:
        return []
    needle = focus.lower() if focus else None
    keywords = dict(analysis.keywords)
    candidates = [
        (score_sentence(sentence, position, keywords), position, sentence)
        for position, sentence in enumerate(analysis.sentences)
        if needle is None or needle in sentence.lower()
    ]
    ranked = sorted(candidates, key=lambda item: -item[0])
    return [sentence.strip() for _, _, sentence in ranked[:count]]
