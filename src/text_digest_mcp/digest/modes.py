"""Mode generators, one pure function per summary mode.

Every generator takes a ContentAnalysis plus the keyword-only knobs
``abstraction_level``, ``focus`` and ``instructions`` and returns markdown.
Generators read the analysis and never write to it. Degenerate content
produces a fixed sentinel string rather than an error.

``generate_summary()`` dispatches on :class:`SummaryMode`; ``auto`` first
resolves to a concrete mode from the instructions and the content shape.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable

from ..lexicon import (
    COMPARISON_PATTERN,
    IMPLEMENTATION_PATTERN,
    NEGATIVE_PATTERN,
    POSITIVE_PATTERN,
    RECOMMENDATION_PATTERN,
    is_technical_term,
)
from .analyzer import ContentAnalysis, is_actionable, is_section_title
from .scoring import extract_key_points

logger = logging.getLogger(__name__)

BULLET = "•"
_LIST_MARKER = re.compile(r"^(?:[-*•+]|\d+[.)])\s+")

NO_ACTION_ITEMS = "No action items found."
NO_TIMELINE = "No temporal information found."
NO_COMPARISONS = "No clear comparisons found."
NO_PROS_CONS = "No clear pros or cons identified."
NO_INSIGHTS = "No notable insights identified."
NO_TECHNICAL = "No technical content identified."
NO_EXECUTIVE = "Not enough content for an executive summary."
NO_QUESTIONS = "No questions identified."
NO_STORY = "There is not yet a story to tell here."
NO_CONVERSATION = "Honestly, there isn't much to talk about in this one."
ACADEMIC_FALLBACK_CONCLUSION = "Further analysis is required to draw a firm conclusion."
CONVERSATIONAL_FILLER = "there's a bit more detail in the original"


class SummaryMode(str, Enum):
    """Summary styles accepted by the generator dispatch."""

    AUTO = "auto"
    BRIEF = "brief"
    DETAILED = "detailed"
    BULLET_POINTS = "bullet_points"
    KEY_INSIGHTS = "key_insights"
    ACTION_ITEMS = "action_items"
    TECHNICAL = "technical"
    EXECUTIVE = "executive"
    QUESTIONS = "questions"
    PROS_CONS = "pros_cons"
    TIMELINE = "timeline"
    CREATIVE = "creative"
    ACADEMIC = "academic"
    CONVERSATIONAL = "conversational"
    COMPARISON = "comparison"


# ── helpers ──────────────────────────────────────────────────────────────────


def _depth(base: int, abstraction_level: int) -> int:
    """Scale an extraction depth: levels 1-2 go deeper, 4-5 shallower."""
    if abstraction_level <= 2:
        return base + (3 - abstraction_level)
    if abstraction_level >= 4:
        return max(1, base - (abstraction_level - 3))
    return base


def _truncate(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def _bullets(items: list[str]) -> str:
    return "\n".join(f"{BULLET} {item}" for item in items)


def _numbered(items: list[str]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, 1))


def _tidy(sentence: str) -> str:
    """Flatten a sentence onto one line.

    Drops section-title lines the sentence swallowed across line breaks and
    leading list markers.
    """
    lines = [line.strip() for line in sentence.splitlines() if line.strip()]
    body = [line for line in lines if not is_section_title(line)] or lines
    return " ".join(_LIST_MARKER.sub("", line) for line in body)


def _clause(sentence: str) -> str:
    return _tidy(sentence).rstrip(".!?").strip()


def _lower_first(text: str) -> str:
    """Lowercase the first letter unless the word looks like an acronym."""
    if len(text) > 1 and text[0].isupper() and text[1].islower():
        return text[0].lower() + text[1:]
    return text


def _matching(sentences: tuple[str, ...], pattern: re.Pattern[str], limit: int) -> list[str]:
    return [s for s in sentences if pattern.search(s)][:limit]


# ── generators ───────────────────────────────────────────────────────────────


def brief(analysis: ContentAnalysis, *, abstraction_level: int = 3,
          focus: str | None = None, instructions: str | None = None) -> str:
    """Top three key points as one paragraph."""
    return " ".join(extract_key_points(analysis, 3))


def detailed(analysis: ContentAnalysis, *, abstraction_level: int = 3,
             focus: str | None = None, instructions: str | None = None) -> str:
    """Up to five sections, each a bold title over its leading body lines."""
    lines_per_section = _depth(3, abstraction_level)
    blocks = []
    for title, body in list(analysis.sections.items())[:5]:
        block = f"**{title}**"
        if body:
            block += "\n" + " ".join(body[:lines_per_section])
        blocks.append(block)
    return "\n\n".join(blocks)


def bullet_points(analysis: ContentAnalysis, *, abstraction_level: int = 3,
                  focus: str | None = None, instructions: str | None = None) -> str:
    """Up to ten key points as bullets, preferring sentences mentioning *focus*."""
    count = min(_depth(10, abstraction_level), 10)
    points = extract_key_points(analysis, count, focus) if focus else []
    if not points:
        points = extract_key_points(analysis, count)
    return _bullets(points)


def key_insights(analysis: ContentAnalysis, *, abstraction_level: int = 3,
                 focus: str | None = None, instructions: str | None = None) -> str:
    """Numbered observations about themes, figures, questions, and code."""
    insights = []
    themes = analysis.top_keywords(5)
    if themes:
        insights.append(f"Main themes: {', '.join(themes)}")
    if len(analysis.numbers) > 5:
        insights.append(f"Data-rich content with {len(analysis.numbers)} numerical values")
    if len(analysis.questions) > 3:
        insights.append(f"Raises {len(analysis.questions)} open questions")
    if analysis.code_blocks:
        insights.append(f"Includes {len(analysis.code_blocks)} code example(s)")
    return _numbered(insights) if insights else NO_INSIGHTS


def action_items(analysis: ContentAnalysis, *, abstraction_level: int = 3,
                 focus: str | None = None, instructions: str | None = None) -> str:
    """Numbered list of up to ten actionable sentences and list lines.

    List lines catch assignments that never end in terminal punctuation. A
    line already contained in a listed sentence is skipped.
    """
    items = [_clause(item) for item in analysis.actionable_items]
    for group in analysis.lists:
        for line in group:
            clause = _clause(line)
            if clause and is_actionable(line) and not any(clause in item for item in items):
                items.append(clause)
    items = items[:10]
    return _numbered(items) if items else NO_ACTION_ITEMS


def technical(analysis: ContentAnalysis, *, abstraction_level: int = 3,
              focus: str | None = None, instructions: str | None = None) -> str:
    """Code-block count, technical vocabulary, and implementation sentences."""
    blocks = []
    if analysis.code_blocks:
        blocks.append(f"**Code Blocks:** {len(analysis.code_blocks)} found")
    terms = [word for word in analysis.top_keywords(len(analysis.keywords)) if is_technical_term(word)][:5]
    if terms:
        blocks.append(f"**Technical Terms:** {', '.join(terms)}")
    details = _matching(analysis.sentences, IMPLEMENTATION_PATTERN, 3)
    if details:
        blocks.append("**Implementation Details:**\n" + _bullets(details))
    return "\n\n".join(blocks) if blocks else NO_TECHNICAL


def executive(analysis: ContentAnalysis, *, abstraction_level: int = 3,
              focus: str | None = None, instructions: str | None = None) -> str:
    """Overview paragraph, headline figures, and recommendations."""
    blocks = []
    if analysis.paragraphs:
        blocks.append(f"**Overview:** {_truncate(analysis.paragraphs[0], 200)}")
    if analysis.numbers:
        blocks.append(f"**Key Metrics:** {', '.join(analysis.numbers[:5])}")
    recommendations = _matching(analysis.sentences, RECOMMENDATION_PATTERN, 3)
    if recommendations:
        blocks.append("**Recommendations:**\n" + _bullets(recommendations))
    return "\n\n".join(blocks) if blocks else NO_EXECUTIVE


def questions(analysis: ContentAnalysis, *, abstraction_level: int = 3,
              focus: str | None = None, instructions: str | None = None) -> str:
    """Questions asked by the text, or questions the text invites."""
    if analysis.questions:
        return "**Questions Raised:**\n" + _numbered(list(analysis.questions[:5]))

    synthesized = []
    if analysis.numbers:
        synthesized.append("What do the figures mentioned in the text represent?")
    if analysis.dates:
        synthesized.append("Why are the dates mentioned significant?")
    if analysis.actionable_items:
        synthesized.append("Who is responsible for the actions described, and by when?")
    themes = analysis.top_keywords(1)
    if themes:
        synthesized.append(f"How does {themes[0]} shape the overall message?")
    if not synthesized:
        return NO_QUESTIONS
    return "**Questions to Consider:**\n" + _numbered(synthesized[:4])


def _classify(sentences: tuple[str, ...]) -> tuple[list[str], list[str]]:
    """Split sentences into (pros, cons); positive indicators win a tie."""
    pros: list[str] = []
    cons: list[str] = []
    for sentence in sentences:
        if POSITIVE_PATTERN.search(sentence):
            pros.append(sentence)
        elif NEGATIVE_PATTERN.search(sentence):
            cons.append(sentence)
    return pros[:5], cons[:5]


def _pros_cons_block(analysis: ContentAnalysis) -> str:
    pros, cons = _classify(analysis.sentences)
    blocks = []
    if pros:
        blocks.append("**Pros:**\n" + _bullets(pros))
    if cons:
        blocks.append("**Cons:**\n" + _bullets(cons))
    return "\n\n".join(blocks)


def pros_cons(analysis: ContentAnalysis, *, abstraction_level: int = 3,
              focus: str | None = None, instructions: str | None = None) -> str:
    """Bulleted pros and cons, each capped at five."""
    return _pros_cons_block(analysis) or NO_PROS_CONS


def timeline(analysis: ContentAnalysis, *, abstraction_level: int = 3,
             focus: str | None = None, instructions: str | None = None) -> str:
    """One line per distinct date: the first sentence that mentions it."""
    entries = []
    for date in dict.fromkeys(analysis.dates):
        sentence = next((s for s in analysis.sentences if date in s), None)
        if sentence is not None:
            entries.append(f"**{date}**: {_tidy(sentence)}")
    return "\n".join(entries) if entries else NO_TIMELINE


def creative(analysis: ContentAnalysis, *, abstraction_level: int = 3,
             focus: str | None = None, instructions: str | None = None) -> str:
    """Key points retold as a short narrative."""
    points = [_clause(p) for p in extract_key_points(analysis, 5)]
    if not points:
        return NO_STORY
    story = points[0] + "".join(f", and then {_lower_first(p)}" for p in points[1:])
    opening = "Picture the story this text tells"
    if instructions:
        opening += f", told with this in mind: {instructions.strip().rstrip('.')}"
    return f"{opening}. It begins simply: {story}. And that is where the tale rests, for now."


def academic(analysis: ContentAnalysis, *, abstraction_level: int = 3,
             focus: str | None = None, instructions: str | None = None) -> str:
    """Thesis, evidence, and conclusion drawn from the outer paragraphs."""
    blocks = []
    if analysis.paragraphs:
        blocks.append(f"**Thesis:** {_truncate(analysis.paragraphs[0], 150)}")
    evidence = extract_key_points(analysis, 3)
    if evidence:
        blocks.append("**Evidence:**\n" + _bullets(evidence))
    conclusion = (
        _truncate(analysis.paragraphs[-1], 150) if analysis.paragraphs
        else ACADEMIC_FALLBACK_CONCLUSION
    )
    blocks.append(f"**Conclusion:** {conclusion}")
    return "\n\n".join(blocks)


def conversational(analysis: ContentAnalysis, *, abstraction_level: int = 3,
                   focus: str | None = None, instructions: str | None = None) -> str:
    """Key points in a casual spoken register."""
    points = [_lower_first(_clause(p)) for p in extract_key_points(analysis, 5)]
    if not points:
        return NO_CONVERSATION
    main = points[0]
    second = points[1] if len(points) > 1 else main
    third = points[2] if len(points) > 2 else CONVERSATIONAL_FILLER
    text = (
        f"So, here's the gist: {main}. "
        f"What really stands out is that {second}. "
        f"Oh, and {third}."
    )
    if len(points) > 3:
        text += " A couple more things: " + "; ".join(points[3:]) + "."
    return text


def comparison(analysis: ContentAnalysis, *, abstraction_level: int = 3,
               focus: str | None = None, instructions: str | None = None) -> str:
    """Comparative sentences followed by the pros and cons block."""
    blocks = []
    direct = _matching(analysis.sentences, COMPARISON_PATTERN, 3)
    if direct:
        blocks.append("**Direct Comparisons:**\n" + _bullets(direct))
    weighed = _pros_cons_block(analysis)
    if weighed:
        blocks.append(weighed)
    return "\n\n".join(blocks) if blocks else NO_COMPARISONS


# ── dispatch ─────────────────────────────────────────────────────────────────

Generator = Callable[..., str]

GENERATORS: dict[SummaryMode, Generator] = {
    SummaryMode.BRIEF: brief,
    SummaryMode.DETAILED: detailed,
    SummaryMode.BULLET_POINTS: bullet_points,
    SummaryMode.KEY_INSIGHTS: key_insights,
    SummaryMode.ACTION_ITEMS: action_items,
    SummaryMode.TECHNICAL: technical,
    SummaryMode.EXECUTIVE: executive,
    SummaryMode.QUESTIONS: questions,
    SummaryMode.PROS_CONS: pros_cons,
    SummaryMode.TIMELINE: timeline,
    SummaryMode.CREATIVE: creative,
    SummaryMode.ACADEMIC: academic,
    SummaryMode.CONVERSATIONAL: conversational,
    SummaryMode.COMPARISON: comparison,
}


def resolve_auto_mode(analysis: ContentAnalysis, instructions: str | None = None) -> SummaryMode:
    """Pick a concrete mode from instruction keywords, then from content shape."""
    wanted = (instructions or "").lower()
    if "action" in wanted:
        return SummaryMode.ACTION_ITEMS
    if "section" in wanted:
        return SummaryMode.DETAILED
    if "brief" in wanted or "short" in wanted:
        return SummaryMode.BRIEF

    if len(analysis.actionable_items) > 5:
        return SummaryMode.ACTION_ITEMS
    if len(analysis.code_blocks) > 2:
        return SummaryMode.TECHNICAL
    if len(analysis.numbers) > 10:
        return SummaryMode.EXECUTIVE
    return SummaryMode.DETAILED


def generate_summary(
    mode: SummaryMode | str,
    analysis: ContentAnalysis,
    *,
    abstraction_level: int = 3,
    focus: str | None = None,
    instructions: str | None = None,
) -> tuple[SummaryMode, str]:
    """Run the generator for *mode*.

    Returns:
        (resolved mode, summary markdown). ``auto`` resolves to a concrete mode.

    Raises:
        ValueError: If *mode* is not a known summary mode.
    """
    resolved = SummaryMode(mode)
    if resolved is SummaryMode.AUTO:
        resolved = resolve_auto_mode(analysis, instructions)
        logger.debug("Auto mode resolved to %s", resolved.value)
    generator = GENERATORS[resolved]
    summary = generator(
        analysis,
        abstraction_level=abstraction_level,
        focus=focus,
        instructions=instructions,
    )
    return resolved, summary
