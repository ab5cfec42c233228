"""Centralized configuration for lexisearch using Pydantic Settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lexisearch.search.analyzers import available_analyzers


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Values are validated at startup; command-line flags take precedence over
    anything configured here.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Ranking
    bm25_k1: float = Field(default=1.2, ge=0.0, description="BM25 term frequency saturation")
    bm25_b: float = Field(default=0.75, ge=0.0, le=1.0, description="BM25 document length normalization")

    # Query evaluation
    max_query_terms: int = Field(default=32, ge=1, description="Maximum number of leading query tokens considered")

    # Analysis
    analyzer: str = Field(default="whitespace", description="Analyzer used for documents and queries")

    # Logging
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="warning", description="Logging level"
    )
    log_json: bool = Field(default=False, description="Emit structured JSON log lines")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @field_validator("analyzer")
    @classmethod
    def _check_analyzer(cls, value: str) -> str:
        normalized = value.lower()
        if normalized not in available_analyzers():
            raise ValueError(f"Unknown analyzer '{value}'. Available: {available_analyzers()}")
        return normalized
