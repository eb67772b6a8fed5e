"""Demonstration and output configuration schemas."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class OutputFormat(str, Enum):
    """CLI output format enumeration."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: OutputFormat = Field(OutputFormat.TABLE, description="Default output format")


class DemoConfig(BaseModel):
    """Tunables for individual demonstrations."""

    flyweight_tree_count: int = Field(
        1_000_000, description="Number of trees planted by the flyweight demo"
    )

    @field_validator("flyweight_tree_count")
    @classmethod
    def validate_tree_count(cls, v: int) -> int:
        """Validate tree count."""
        if v < 1:
            raise ValueError("Flyweight tree count must be at least 1")
        return v
