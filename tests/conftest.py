"""Shared test fixtures for text-digest-mcp."""

from __future__ import annotations

from typing import Any

import pytest


def unwrap_tool(tool: Any) -> Any:
    """Extract the raw coroutine from a FastMCP FunctionTool, if wrapped.

    FastMCP 2.x wraps @server.tool functions in FunctionTool (not callable).
    FastMCP 3.x preserves the original function. This helper works with both.
    """
    return getattr(tool, "fn", tool)


@pytest.fixture(autouse=True, scope="session")
def _unwrap_fastmcp_tools():
    """Patch tool modules so FunctionTool objects become directly callable.

    Tests can then ``await tool_func(...)`` regardless of FastMCP version.
    """
    import importlib
    import pkgutil

    import text_digest_mcp.tools as tools_pkg

    modules = [
        importlib.import_module(info.name)
        for info in pkgutil.walk_packages(tools_pkg.__path__, tools_pkg.__name__ + ".")
    ]
    for mod in modules:
        for name in list(vars(mod)):
            obj = getattr(mod, name, None)
            if obj is not None and hasattr(obj, "fn") and not callable(obj):
                setattr(mod, name, obj.fn)


@pytest.fixture(autouse=True)
def _disable_tracing(monkeypatch):
    """Disable MLflow tracing so tests never reach a tracking server."""
    monkeypatch.setenv("DIGEST_TRACING_ENABLED", "false")


@pytest.fixture(autouse=True)
def _isolate_dotenv(tmp_path, monkeypatch):
    """Prevent tests from loading the user's real ~/.config/text-digest-mcp/.env."""
    monkeypatch.setattr(
        "text_digest_mcp.dotenv.DEFAULT_ENV_PATH",
        tmp_path / "nonexistent.env",
    )


@pytest.fixture(autouse=True)
def clean_config():
    """Reset the config singleton between tests."""
    import text_digest_mcp.config as cfg_mod

    cfg_mod._config = None
    yield
    cfg_mod._config = None


@pytest.fixture()
def meeting_notes() -> str:
    """Meeting notes with sections, a list, dates, figures, and assignments."""
    return (
        "Meeting Notes - Product Launch Review\n"
        "\n"
        "Attendees: Sarah (PM), Mike (Dev), Lisa (Design)\n"
        "\n"
        "Discussion:\n"
        "- Sarah presented the launch timeline, targeting March 15th.\n"
        "- Mike mentioned the API integration is 80% complete and needs 2 more days.\n"
        "- Lisa showed the new UI mockups and the team loved the dark mode option.\n"
        "- Budget concerns were raised about marketing spend.\n"
        "\n"
        "Decisions:\n"
        "- Approved dark mode for the first release.\n"
        "- Marketing budget capped at $50k.\n"
        "- Beta testing starts March 1st.\n"
        "\n"
        "Next Steps:\n"
        "- Mike to complete API by Friday.\n"
        "- Lisa to finalize icons by next week.\n"
        "- Sarah to recruit 20 beta testers.\n"
    )


@pytest.fixture()
def unpunctuated_notes() -> str:
    """The same meeting written as bare list lines without terminal periods."""
    return (
        "Meeting Notes - Product Launch Review\n\nAttendees: Sarah (PM), Mike (Dev), Lisa (Design)\n\n"
        "Discussion:\n- Sarah presented the launch timeline, targeting March 15th\n"
        "- Mike mentioned the API integration is 80% complete, needs 2 more days\n"
        "- Lisa showed the new UI mockups, team loved the dark mode option\n"
        "- Budget concerns raised about marketing spend\n\n"
        "Decisions:\n- Approved dark mode for v1.0\n- Marketing budget capped at $50k\n"
        "- Beta testing starts March 1st\n\n"
        "Next Steps:\n- Mike to complete API by Friday\n- Lisa to finalize icons by next week\n"
        "- Sarah to recruit 20 beta testers"
    )
