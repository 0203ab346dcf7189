"""Policy helpers for reading local source files."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import get_config

logger = logging.getLogger(__name__)


def resolve_path(path_value: str) -> Path:
    """Resolve *path_value* against the configured working directory."""
    base = Path(get_config().working_directory or ".").expanduser()
    return (base / Path(path_value).expanduser()).resolve()


def enforce_local_access_root(path: Path) -> Path:
    """Enforce LOCAL_FILE_ACCESS_ROOT boundary when configured.

    Raises:
        PermissionError: If the path falls outside the configured access root.
    """
    cfg = get_config()
    if not cfg.local_file_access_root:
        return path

    root = Path(cfg.local_file_access_root).expanduser().resolve()
    if not path.is_relative_to(root):
        raise PermissionError(
            f"Path '{path}' is outside LOCAL_FILE_ACCESS_ROOT '{root}'"
        )
    return path


def read_text_file(path_value: str) -> str:
    """Read a UTF-8 text file after resolving it and checking the access root.

    Raises:
        FileNotFoundError: The resolved path does not exist.
        PermissionError: The path lies outside LOCAL_FILE_ACCESS_ROOT.
        UnicodeDecodeError: The file is not UTF-8 text.
    """
    path = enforce_local_access_root(resolve_path(path_value))
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path_value}")
    content = path.read_text(encoding="utf-8")
    logger.debug("Read file: %s (%d characters)", path, len(content))
    return content
