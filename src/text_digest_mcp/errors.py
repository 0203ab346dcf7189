"""Structured error handling: error categories, classification, and tool error model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCategory(str, Enum):
    """Categories of errors for diagnostics."""

    INPUT_MISSING = "INPUT_MISSING"
    INPUT_CONFLICT = "INPUT_CONFLICT"
    INPUT_INVALID = "INPUT_INVALID"
    ABSTRACTION_OUT_OF_RANGE = "ABSTRACTION_OUT_OF_RANGE"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    FILE_UNREADABLE = "FILE_UNREADABLE"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    UNKNOWN = "UNKNOWN"


class DigestInputError(ValueError):
    """Input-contract violation detected before any analysis runs."""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.INPUT_INVALID) -> None:
        super().__init__(message)
        self.category = category


class ToolError(BaseModel):
    """Structured error returned from any tool."""

    success: bool = False
    error: str
    category: str
    hint: str


def categorize_error(error: Exception) -> tuple[ErrorCategory, str]:
    """Map an exception to an ErrorCategory + human-readable hint."""
    if isinstance(error, DigestInputError):
        hints = {
            ErrorCategory.INPUT_MISSING: "Provide either text or file",
            ErrorCategory.INPUT_CONFLICT: "Provide text or file, not both",
            ErrorCategory.ABSTRACTION_OUT_OF_RANGE: "Use an abstraction_level between 1 and 5",
        }
        return error.category, hints.get(error.category, "Check the input arguments")
    if isinstance(error, FileNotFoundError):
        return ErrorCategory.FILE_NOT_FOUND, "File not found; check the path"
    if isinstance(error, PermissionError):
        return (
            ErrorCategory.PERMISSION_DENIED,
            "Path is not readable or lies outside LOCAL_FILE_ACCESS_ROOT",
        )
    if isinstance(error, (UnicodeDecodeError, IsADirectoryError)):
        return ErrorCategory.FILE_UNREADABLE, "File must be UTF-8 encoded text"
    if isinstance(error, OSError):
        return ErrorCategory.FILE_UNREADABLE, "File could not be read"
    if isinstance(error, ValueError):
        return ErrorCategory.INPUT_INVALID, "Check the input arguments"

    return (ErrorCategory.UNKNOWN, str(error))


def make_tool_error(error: Exception) -> dict:
    """Create a serialisable ToolError dict from an exception."""
    cat, hint = categorize_error(error)
    return ToolError(
        error=str(error),
        category=cat.value,
        hint=hint,
    ).model_dump(mode="json")
