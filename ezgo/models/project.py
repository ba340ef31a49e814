"""Project configuration models (.ezgo.yml)."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


def _scalar_to_str(value: Any) -> str:
    # YAML parses `true` and `1` into Python types; keep their source spelling.
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ProjectConfig(BaseModel):
    """Contents of a project's .ezgo.yml file."""

    packages: list[str] = Field(
        default_factory=list,
        description="conda-forge packages the project links against",
    )
    environment: dict[str, str] = Field(
        default_factory=dict,
        description="Extra environment variables passed to the go compiler",
    )

    @field_validator("packages", mode="before")
    @classmethod
    def validate_packages(cls, v: Any) -> Any:
        """Treat an empty `packages:` key as an empty list."""
        return [] if v is None else v

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: Any) -> Any:
        """Treat an empty `environment:` key as empty and stringify values."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(key): _scalar_to_str(value) for key, value in v.items()}
        return v
