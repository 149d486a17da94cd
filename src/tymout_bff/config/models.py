"""Pydantic configuration models for the Explore BFF."""

from typing import Literal

from pydantic import BaseModel, Field

# ============================================================
# Collaborator Configs
# ============================================================


class EventDirectoryConfig(BaseModel):
    """Configuration for HTTPEventDirectory.

    ``base_url`` left unset falls back to the EVENT_SERVICE_URL env var.
    """

    base_url: str | None = None
    timeout_seconds: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Aggregation Config
# ============================================================


class ExploreConfig(BaseModel):
    """Configuration for ExploreAggregator."""

    spotlight_limit: int = Field(default=5, ge=1)

    model_config = {"frozen": True}


# ============================================================
# Server Config
# ============================================================


class ServerConfig(BaseModel):
    """Configuration for the HTTP server."""

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for process logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class BffConfig(BaseModel):
    """Root configuration for the Explore BFF."""

    event_directory: EventDirectoryConfig = Field(default_factory=EventDirectoryConfig)
    explore: ExploreConfig = Field(default_factory=ExploreConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
