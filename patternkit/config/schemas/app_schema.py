"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .demo_schema import DemoConfig, OutputConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    demos: DemoConfig = Field(default_factory=DemoConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Build configuration from a plain dictionary."""
        return cls.model_validate(data)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v
