"""Pydantic models for application configuration with validation."""

from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator


class EngineConfig(BaseModel):
    """Rebalance calculation tolerances."""

    balance_tolerance: float = Field(
        default=0.01,
        ge=0.0,
        le=100.0,
        description="Skip an asset when |target value - current value| is within this amount"
    )
    target_sum_tolerance: float = Field(
        default=0.01,
        ge=0.0,
        le=5.0,
        description="Allowed deviation of the target percentage sum from 100"
    )


class StorageConfig(BaseModel):
    """Snapshot persistence settings."""

    snapshot_file_path: str = Field(
        default="data/portfolio-snapshot.json",
        description="File holding the single saved portfolio snapshot"
    )


class PresentationConfig(BaseModel):
    """Display settings for rendered portfolio output."""

    deviation_display_threshold_percent: float = Field(
        default=0.1,
        ge=0.0,
        le=10.0,
        description="Show allocation deviation only when it exceeds this many percentage points"
    )
    thousands_separator: str = Field(
        default=" ",
        max_length=1,
        description="Separator between groups of thousands"
    )
    decimal_separator: str = Field(
        default=".",
        min_length=1,
        max_length=1,
        description="Separator between integer and fractional parts"
    )


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: str = Field(
        default="INFO",
        description="Root log level"
    )
    format: Literal["text", "json"] = Field(
        default="text",
        description="Log record format"
    )
    file_path: Optional[str] = Field(
        default=None,
        description="Log file with daily rotation; console only when unset"
    )
    backup_count: int = Field(
        default=30,
        ge=1,
        le=365,
        description="Number of rotated log files to keep"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        return level


class AppConfig(BaseModel):
    """Root application configuration."""

    engine: EngineConfig = Field(
        default_factory=EngineConfig,
        description="Rebalance calculation settings"
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig,
        description="Snapshot persistence settings"
    )
    presentation: PresentationConfig = Field(
        default_factory=PresentationConfig,
        description="Display settings"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging settings"
    )
