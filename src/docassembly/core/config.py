"""Nested pydantic-settings configuration for the application.

Adapters are pure and take no configuration; these settings drive the
assembly layer, logging and the CLI.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``DOCASSEMBLY_OBSERVABILITY_`` prefix::

        export DOCASSEMBLY_OBSERVABILITY_LOG_LEVEL=DEBUG
        export DOCASSEMBLY_OBSERVABILITY_JSON_LOGS=true
    """

    model_config = {"env_prefix": "DOCASSEMBLY_OBSERVABILITY_"}

    log_level: str = "INFO"
    # None picks console output on a TTY and JSON lines otherwise
    json_logs: bool | None = None


class OutputConfig(BaseSettings):
    """Document plan output configuration.

    Env vars use ``DOCASSEMBLY_OUTPUT_`` prefix::

        export DOCASSEMBLY_OUTPUT_JSON_INDENT=0
        export DOCASSEMBLY_OUTPUT_OUTPUT_DIR=/tmp/documents
    """

    model_config = {"env_prefix": "DOCASSEMBLY_OUTPUT_"}

    json_indent: int = Field(default=2, ge=0, le=8)
    slug_max_length: int = Field(default=80, ge=8, le=255)
    output_dir: Path = Path("./documents")


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs.

    Each sub-config reads its own ``DOCASSEMBLY_<GROUP>_*`` env vars.
    """

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
