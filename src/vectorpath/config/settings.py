"""Configuration settings for vectorpath."""

from pathlib import Path

from pydantic import BaseModel, Field

from vectorpath.domain.point import Point


class GeometryConfig(BaseModel):
    """Configuration for primitive construction."""

    origin_x: float = Field(
        default=0.0,
        description="X coordinate of the cursor before the first command",
    )
    origin_y: float = Field(
        default=0.0,
        description="Y coordinate of the cursor before the first command",
    )
    arc_segment_max_angle: float = Field(
        default=90.0,
        gt=0.0,
        le=180.0,
        description="Largest arc sweep, in degrees, approximated by one cubic",
    )
    flatten_tolerance: float = Field(
        default=0.5,
        ge=0.01,
        le=10.0,
        description="Maximum deviation when flattening curves to polylines",
    )

    @property
    def origin(self) -> Point:
        """Initial cursor position as a Point."""
        return Point(self.origin_x, self.origin_y)


class ProcessingConfig(BaseModel):
    """Configuration for document processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )
    skip_empty: bool = Field(
        default=True,
        description="Skip path elements with an empty d attribute",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class VectorPathSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> VectorPathSettings:
    """Get default application settings."""
    return VectorPathSettings()
