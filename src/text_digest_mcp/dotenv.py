"""Load digest settings from ``~/.config/text-digest-mcp/.env``.

Only variables the host process left unset (missing, blank, or an
unresolved ``${NAME}`` placeholder) are filled in from the file.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

DEFAULT_ENV_PATH = Path.home() / ".config" / "text-digest-mcp" / ".env"

_ASSIGNMENT = re.compile(r"^(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*)$")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def _needs_value(key: str, current: str | None) -> bool:
    """Return True when *current* should be replaced by the file's value."""
    if current is None:
        return True
    value = _unquote(current.strip()).strip()
    if not value:
        return True
    return value in {f"${key}", f"${{{key}}}"} or (
        value.startswith(f"${{{key}:-") and value.endswith("}")
    )


def parse_dotenv(path: Path) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines; comments, blanks, and malformed lines are skipped.

    Values may be single- or double-quoted and may carry an ``export`` prefix.
    No variable expansion.
    """
    if not path.is_file():
        return {}
    result: dict[str, str] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        match = _ASSIGNMENT.match(line)
        if match:
            result[match.group(1)] = _unquote(match.group(2).strip())
    return result


def load_dotenv(path: Path | None = None) -> dict[str, str]:
    """Copy unset variables from *path* into ``os.environ``.

    Returns:
        The variables actually injected.
    """
    injected: dict[str, str] = {}
    for key, value in parse_dotenv(path or DEFAULT_ENV_PATH).items():
        if _needs_value(key, os.environ.get(key)):
            os.environ[key] = value
            injected[key] = value
    return injected
