"""Tests for digest option and result models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from text_digest_mcp.models.digest import SummaryData, SummaryOptions, SummaryResult


class TestSummaryOptions:
    def test_defaults(self):
        opts = SummaryOptions()
        assert opts.mode == "auto"
        assert opts.format == "markdown"
        assert opts.max_length == 0
        assert opts.abstraction_level == 3
        assert opts.include_quotes is False

    def test_negative_max_length_rejected(self):
        with pytest.raises(ValidationError):
            SummaryOptions(max_length=-1)

    def test_unknown_format_rejected(self):
        with pytest.raises(ValidationError):
            SummaryOptions(format="pdf")


class TestSummaryResult:
    def test_failure_dump_omits_empty_fields(self):
        result = SummaryResult(success=False, error="nope")
        assert result.model_dump(mode="json", exclude_none=True) == {"success": False, "error": "nope"}

    def test_success_dump(self):
        data = SummaryData(
            mode="auto",
            resolved_mode="brief",
            format="markdown",
            abstraction_level=3,
            original_length=40,
            summary_length=20,
            original_words=8,
            summary_words=4,
            compression_ratio=50,
        )
        dumped = SummaryResult(success=True, output="text", data=data).model_dump(
            mode="json", exclude_none=True
        )
        assert dumped["data"]["method"] == "pattern"
        assert dumped["data"]["source"] == "text input"
        assert "instructions" not in dumped["data"]
