"""Logging configuration schema."""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from pattern_catalog.config.defaults import LogDestination, LogFormat, LogLevel


class LogFileConfig(BaseModel):
    """Rotating log file configuration."""
    model_config = ConfigDict(extra="forbid")

    path: str = Field("logs/pattern_catalog.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Maximum size of a log file before rotation")
    backup_count: int = Field(5, ge=0, description="Number of rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: str = Field(LogLevel.WARNING.value, description="Root log level")
    destination: str = Field(LogDestination.STDOUT.value, description="Log destination (file, stdout, both); console records go to stderr")
    format: str = Field(LogFormat.CONSOLE.value, description="Rendering of log records (console, json)")
    file: LogFileConfig = Field(default_factory=LogFileConfig, description="Log file settings")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(LogLevel.__members__)}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        destination = v.lower()
        valid = [d.value for d in LogDestination]
        if destination not in valid:
            raise ValueError(f"Invalid log destination: {v}. Must be one of: {', '.join(valid)}")
        return destination

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        log_format = v.lower()
        valid = [f.value for f in LogFormat]
        if log_format not in valid:
            raise ValueError(f"Invalid log format: {v}. Must be one of: {', '.join(valid)}")
        return log_format
