"""
Configuration settings for the Learning Commons engine.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    # ========================================
    # API Server
    # ========================================
    api_host: str = Field(
        default="127.0.0.1",
        description="API server host",
    )
    api_port: int = Field(
        default=8100,
        description="API server port",
    )

    # ========================================
    # Knowledge Graph
    # ========================================
    progression_default_depth: int = Field(
        default=5,
        ge=0,
        description="Levels expanded in each direction when building a progression",
    )
    progression_max_depth: int = Field(
        default=10,
        ge=1,
        description="Upper clamp for depth requested over HTTP",
    )
    skill_mapping_top_k: int = Field(
        default=3,
        ge=1,
        description="Learning components kept when mapping a skill description",
    )
    component_listing_limit: int = Field(
        default=50,
        ge=1,
        description="Components returned by an unfiltered search",
    )

    # ========================================
    # Evaluators
    # ========================================
    evaluator_version: str = Field(
        default="1.0.0",
        description="Version tag stamped on every content evaluation",
    )
    evaluator_confidence: float = Field(
        default=0.7,
        ge=0,
        le=1,
        description="Confidence reported by the heuristic complexity scorer",
    )

    def get_graph_config(self) -> dict[str, Any]:
        """Get knowledge graph configuration as a dictionary."""
        return {
            "progression_default_depth": self.progression_default_depth,
            "progression_max_depth": self.progression_max_depth,
            "skill_mapping_top_k": self.skill_mapping_top_k,
            "component_listing_limit": self.component_listing_limit,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
