"""Server configuration via environment variables."""

from __future__ import annotations

import os
from typing import get_args

from pydantic import BaseModel, Field, field_validator

from .types import OutputFormat, SummaryModeName

VALID_MODES = set(get_args(SummaryModeName))
VALID_FORMATS = set(get_args(OutputFormat))


def _resolve_tracing_enabled(flag_value: str, tracking_uri: str) -> bool:
    """Derive tracing_enabled from env vars.

    - ``DIGEST_TRACING_ENABLED=false`` → always disabled (explicit opt-out).
    - Otherwise enabled when ``MLFLOW_TRACKING_URI`` is non-empty.
    """
    if flag_value.lower() == "false":
        return False
    return bool(tracking_uri)


class ServerConfig(BaseModel):
    """Runtime configuration resolved from environment."""

    default_mode: str = Field(default="auto")
    default_format: str = Field(default="markdown")
    default_abstraction_level: int = Field(default=3)
    min_text_chars: int = Field(default=10)
    max_text_chars: int = Field(default=100_000)
    working_directory: str = Field(default="")
    local_file_access_root: str = Field(default="")
    tracing_enabled: bool = Field(default=False)
    mlflow_tracking_uri: str = Field(default="")
    mlflow_experiment_name: str = Field(default="text-digest-mcp")

    @field_validator("default_mode")
    @classmethod
    def validate_mode(cls, value: str) -> str:
        mode = value.strip().lower()
        if mode not in VALID_MODES:
            allowed = ", ".join(sorted(VALID_MODES))
            raise ValueError(f"Invalid mode '{value}'. Allowed: {allowed}")
        return mode

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        fmt = value.strip().lower()
        if fmt not in VALID_FORMATS:
            allowed = ", ".join(sorted(VALID_FORMATS))
            raise ValueError(f"Invalid format '{value}'. Allowed: {allowed}")
        return fmt

    @field_validator("default_abstraction_level")
    @classmethod
    def validate_abstraction_level(cls, value: int) -> int:
        if not 1 <= value <= 5:
            raise ValueError("default_abstraction_level must be between 1 and 5")
        return value

    @field_validator("min_text_chars", "max_text_chars")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Configuration values must be >= 1")
        return value

    @classmethod
    def from_env(cls) -> ServerConfig:
        """Build config from environment variables."""
        return cls(
            default_mode=os.getenv("DIGEST_DEFAULT_MODE", "auto"),
            default_format=os.getenv("DIGEST_DEFAULT_FORMAT", "markdown"),
            default_abstraction_level=int(os.getenv("DIGEST_ABSTRACTION_LEVEL", "3")),
            min_text_chars=int(os.getenv("DIGEST_MIN_TEXT_CHARS", "10")),
            max_text_chars=int(os.getenv("DIGEST_MAX_TEXT_CHARS", "100000")),
            working_directory=os.getenv("DIGEST_WORKING_DIR", "") or os.getcwd(),
            local_file_access_root=os.getenv("LOCAL_FILE_ACCESS_ROOT", ""),
            tracing_enabled=_resolve_tracing_enabled(
                os.getenv("DIGEST_TRACING_ENABLED", ""),
                os.getenv("MLFLOW_TRACKING_URI", ""),
            ),
            mlflow_tracking_uri=os.getenv("MLFLOW_TRACKING_URI", ""),
            mlflow_experiment_name=os.getenv("MLFLOW_EXPERIMENT_NAME", "text-digest-mcp"),
        )


# Singleton, created on first get_config() call.
_config: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Return the global config singleton, creating it on first access.

    Loads ``~/.config/text-digest-mcp/.env`` before reading env vars.
    Process environment always takes precedence over the config file.
    """
    global _config
    if _config is None:
        import logging

        from .dotenv import load_dotenv

        injected = load_dotenv()
        if injected:
            logger = logging.getLogger(__name__)
            logger.info(
                "Loaded %d var(s) from config: %s",
                len(injected),
                ", ".join(injected.keys()),
            )
        _config = ServerConfig.from_env()
    return _config


def update_config(**overrides: object) -> ServerConfig:
    """Patch the live config."""
    global _config
    cfg = get_config()
    data = cfg.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    _config = ServerConfig(**data)
    return _config
