"""Tests for the per-mode summary generators and mode dispatch."""

from __future__ import annotations

import pytest

from text_digest_mcp.digest import modes
from text_digest_mcp.digest.analyzer import analyze
from text_digest_mcp.digest.modes import (
    GENERATORS,
    SummaryMode,
    generate_summary,
    resolve_auto_mode,
)


class TestBriefAndBullets:
    def test_brief_joins_top_three(self):
        analysis = analyze("Alpha. Beta. Gamma. Delta.")
        assert modes.brief(analysis) == "Alpha. Beta. Gamma."

    def test_bullet_points_prefixed(self):
        summary = modes.bullet_points(analyze("Alpha beta. Gamma delta."))
        assert summary == "• Alpha beta.\n• Gamma delta."

    def test_bullet_points_prefers_focus(self):
        analysis = analyze("Budget is tight. Design is done. Budget review is Monday.")
        summary = modes.bullet_points(analysis, focus="budget")
        assert summary == "• Budget review is Monday.\n• Budget is tight."

    def test_bullet_points_falls_back_when_focus_absent(self):
        analysis = analyze("Design is done. Testing starts soon.")
        assert modes.bullet_points(analysis, focus="budget").count("•") == 2

    def test_bullet_points_capped_at_ten(self):
        text = " ".join(f"Sentence number {i}." for i in range(15))
        assert modes.bullet_points(analyze(text)).count("\n") == 9

    def test_bullet_points_capped_at_ten_at_deepest_level(self):
        text = " ".join(f"Sentence number {i}." for i in range(15))
        assert modes.bullet_points(analyze(text), abstraction_level=1).count("\n") == 9


class TestDetailed:
    TEXT = "# One\na\nb\nc\nd\n# Two\ne"

    def test_sections_with_first_three_lines(self):
        assert modes.detailed(analyze(self.TEXT)) == "**One**\na b c\n\n**Two**\ne"

    def test_abstraction_level_changes_depth(self):
        assert "a b c d" in modes.detailed(analyze(self.TEXT), abstraction_level=1)
        assert modes.detailed(analyze(self.TEXT), abstraction_level=5).startswith("**One**\na\n")

    def test_at_most_five_sections(self):
        text = "\n".join(f"# Part {i}\nbody {i}" for i in range(8))
        assert modes.detailed(analyze(text)).count("**Part") == 5

    def test_meeting_notes(self, meeting_notes):
        summary = modes.detailed(analyze(meeting_notes))
        assert summary.startswith("**Introduction**\nMeeting Notes - Product Launch Review")
        assert "**Discussion**" in summary
        assert "**Next Steps**" in summary
        assert "Budget concerns" not in summary

    def test_empty_text_gives_empty_summary(self):
        assert modes.detailed(analyze("")) == ""


class TestKeyInsights:
    def test_theme_line_first(self):
        summary = modes.key_insights(analyze("Caching speeds caching layers. Layers help."))
        assert summary.startswith("1. Main themes: caching, layers")

    def test_numbers_questions_and_code(self):
        text = (
            "Values 1, 2, 3, 4, 5, 6 here. Why? How? When? Where?\n"
            "```\ncode\n```"
        )
        summary = modes.key_insights(analyze(text))
        assert "6 numerical values" in summary
        assert "Raises 4 open questions" in summary
        assert "1 code example(s)" in summary

    def test_sentinel_when_nothing_found(self):
        assert modes.key_insights(analyze("")) == modes.NO_INSIGHTS


class TestActionItems:
    def test_assignments_in_order(self):
        analysis = analyze("Mike to complete API by Friday. Lisa to finalize icons by next week.")
        summary = modes.action_items(analysis)
        assert summary.split("\n")[:2] == [
            "1. Mike to complete API by Friday",
            "2. Lisa to finalize icons by next week",
        ]

    def test_meeting_notes_next_steps(self, meeting_notes):
        summary = modes.action_items(analyze(meeting_notes))
        assert summary == (
            "1. Mike to complete API by Friday\n"
            "2. Lisa to finalize icons by next week\n"
            "3. Sarah to recruit 20 beta testers"
        )

    def test_unpunctuated_list_lines(self, unpunctuated_notes):
        assert modes.action_items(analyze(unpunctuated_notes)) == (
            "1. Mike to complete API by Friday\n"
            "2. Lisa to finalize icons by next week\n"
            "3. Sarah to recruit 20 beta testers"
        )

    def test_list_line_not_repeated_after_its_sentence(self):
        summary = modes.action_items(analyze("Tasks:\n- We must ship the build.\n- Ana to review docs"))
        assert summary == "1. We must ship the build\n2. Ana to review docs"

    def test_capped_at_ten(self):
        text = " ".join(f"We must fix bug {i}." for i in range(12))
        assert modes.action_items(analyze(text)).count("\n") == 9

    def test_sentinel(self):
        assert modes.action_items(analyze("The sky is blue.")) == modes.NO_ACTION_ITEMS


class TestTechnical:
    def test_blocks(self):
        text = (
            "The database module handles every database query.\n"
            "```sql\nSELECT 1;\n```\n"
            "We implement caching in the service layer."
        )
        summary = modes.technical(analyze(text))
        assert "**Code Blocks:** 1 found" in summary
        assert "**Technical Terms:** database" in summary
        assert "**Implementation Details:**\n• The database module handles every database query." in summary

    def test_sentinel(self):
        assert modes.technical(analyze("Cats sleep a lot.")) == modes.NO_TECHNICAL


class TestExecutive:
    def test_overview_metrics_recommendations(self):
        text = "Revenue hit 5 million in 2024. We recommend expanding to Europe."
        summary = modes.executive(analyze(text))
        assert summary == (
            f"**Overview:** {text}\n\n"
            "**Key Metrics:** 5, 2024\n\n"
            "**Recommendations:**\n• We recommend expanding to Europe."
        )

    def test_overview_truncated_to_200(self):
        text = "word " * 60
        summary = modes.executive(analyze(text))
        overview = summary.split("\n")[0].removeprefix("**Overview:** ")
        assert overview.endswith("...")
        assert len(overview) == 203

    def test_sentinel(self):
        assert modes.executive(analyze("")) == modes.NO_EXECUTIVE


class TestQuestions:
    def test_literal_questions(self):
        summary = modes.questions(analyze("Is it done? It is. Who owns it?"))
        assert summary == "**Questions Raised:**\n1. Is it done?\n2. Who owns it?"

    def test_synthesized_questions(self):
        summary = modes.questions(analyze("Revenue was 40 units on March 3rd. Growth matters."))
        lines = summary.split("\n")
        assert lines[0] == "**Questions to Consider:**"
        assert len(lines) == 4
        assert lines[-1] == "3. How does revenue shape the overall message?"

    def test_sentinel(self):
        assert modes.questions(analyze("")) == modes.NO_QUESTIONS


class TestProsCons:
    def test_benefit_and_drawback(self):
        analysis = analyze("This approach offers significant benefit. However, there is a major drawback.")
        assert modes.pros_cons(analysis) == (
            "**Pros:**\n• This approach offers significant benefit.\n\n"
            "**Cons:**\n• However, there is a major drawback."
        )

    def test_positive_wins_when_both_match(self):
        summary = modes.pros_cons(analyze("The benefit comes with a risk."))
        assert summary == "**Pros:**\n• The benefit comes with a risk."

    def test_sentinel(self):
        assert modes.pros_cons(analyze("The cat sat.")) == modes.NO_PROS_CONS


class TestTimeline:
    def test_first_sentence_per_date(self):
        text = (
            "The kickoff happened on January 5, 2024. "
            "Launch is planned for March 15th. "
            "The kickoff on January 5, 2024 went well."
        )
        assert modes.timeline(analyze(text)) == (
            "**January 5, 2024**: The kickoff happened on January 5, 2024.\n"
            "**March 15th**: Launch is planned for March 15th."
        )

    def test_sentinel(self):
        assert modes.timeline(analyze("No dates here.")) == modes.NO_TIMELINE


class TestNarrativeModes:
    def test_creative_framing(self):
        summary = modes.creative(analyze("Dragons exist. Knights fight them."))
        assert summary.startswith("Picture the story this text tells. It begins simply: Dragons exist")
        assert ", and then knights fight them" in summary
        assert summary.endswith("for now.")

    def test_creative_mentions_instructions(self):
        summary = modes.creative(analyze("Dragons exist."), instructions="a bedtime tone")
        assert "told with this in mind: a bedtime tone" in summary

    def test_conversational_filler(self):
        summary = modes.conversational(analyze("Cats are great pets."))
        assert summary.startswith("So, here's the gist: cats are great pets.")
        assert modes.CONVERSATIONAL_FILLER in summary

    def test_conversational_sentinel(self):
        assert modes.conversational(analyze("")) == modes.NO_CONVERSATION

    def test_academic_sections(self):
        text = "Sleep improves memory.\n\nStudies show consistent gains.\n\nSo rest matters."
        summary = modes.academic(analyze(text))
        assert summary.startswith("**Thesis:** Sleep improves memory.")
        assert "**Evidence:**\n• " in summary
        assert summary.endswith("**Conclusion:** So rest matters.")

    def test_academic_fallback_conclusion(self):
        assert modes.academic(analyze("")) == f"**Conclusion:** {modes.ACADEMIC_FALLBACK_CONCLUSION}"


class TestComparison:
    def test_comparisons_and_pros_cons(self):
        summary = modes.comparison(analyze("Python is slower than C. The weather is mild."))
        assert summary == (
            "**Direct Comparisons:**\n• Python is slower than C.\n\n"
            "**Cons:**\n• Python is slower than C."
        )

    def test_sentinel(self):
        assert modes.comparison(analyze("The cat sat.")) == modes.NO_COMPARISONS


class TestDispatch:
    def test_every_concrete_mode_has_a_generator(self):
        assert set(GENERATORS) == set(SummaryMode) - {SummaryMode.AUTO}

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            generate_summary("haiku", analyze("Text."))

    @pytest.mark.parametrize(("instructions", "expected"), [
        ("Extract only the action items", SummaryMode.ACTION_ITEMS),
        ("Summarize each section", SummaryMode.DETAILED),
        ("Keep it brief", SummaryMode.BRIEF),
        ("short please", SummaryMode.BRIEF),
    ])
    def test_instruction_keywords(self, instructions, expected):
        assert resolve_auto_mode(analyze("Some text."), instructions) is expected

    def test_many_actions(self):
        text = " ".join(f"We must do task {i}." for i in range(6))
        assert resolve_auto_mode(analyze(text)) is SummaryMode.ACTION_ITEMS

    def test_many_code_blocks(self):
        text = "\n".join("```\nx\n```" for _ in range(3))
        assert resolve_auto_mode(analyze(text)) is SummaryMode.TECHNICAL

    def test_many_numbers(self):
        text = "Figures: " + ", ".join(str(n) for n in range(11)) + "."
        assert resolve_auto_mode(analyze(text)) is SummaryMode.EXECUTIVE

    def test_default_is_detailed(self, meeting_notes):
        assert resolve_auto_mode(analyze(meeting_notes)) is SummaryMode.DETAILED

    def test_generate_summary_returns_resolved_mode(self):
        resolved, summary = generate_summary("auto", analyze(""))
        assert resolved is SummaryMode.DETAILED
        assert summary == ""
