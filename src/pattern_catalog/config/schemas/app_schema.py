"""Top-level catalogue configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.config.schemas.logging_schema import LoggingConfig


class FacadeConfig(BaseModel):
    """Settings for the facade example's backing store."""
    model_config = ConfigDict(extra="forbid")

    store_path: str = Field("/data/default.prefs", description="File the preference store pretends to use")


class CatalogConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    facade: FacadeConfig = Field(default_factory=FacadeConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogConfig":
        """Create configuration from a plain dictionary."""
        return cls.model_validate(data)
