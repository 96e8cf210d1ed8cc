"""Configuration models.

The configuration selects the storage backend for the task collection and
holds presentation preferences for the task screen and CLI output.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Storage configuration."""

    backend: Literal["sqlite", "json"] = Field(default="sqlite")
    path: str | None = Field(
        default=None, description="Storage file path (default: user data dir)"
    )


class UIConfig(BaseModel):
    """Task screen configuration."""

    date_format: str = Field(default="%Y-%m-%d")
    confirm_delete: bool = Field(default=False)


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: str = Field(default="table")
    color: bool = Field(default=True)

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Ensure output format is one the formatters understand."""
        if v not in ("table", "json", "yaml"):
            raise ValueError(f"Unsupported output format: {v}")
        return v


class AppConfig(BaseModel):
    """Main application configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def get(self, key: str) -> Any:
        """Get a value by dotted key (e.g. ``storage.backend``).

        Raises:
            KeyError: If the key does not exist
        """
        current: Any = self
        for part in key.split("."):
            if not isinstance(current, BaseModel) or part not in type(current).model_fields:
                raise KeyError(key)
            current = getattr(current, part)
        return current

    def with_value(self, key: str, value: Any) -> AppConfig:
        """Return a validated copy with a dotted key set to ``value``.

        Raises:
            KeyError: If the key does not exist
            pydantic.ValidationError: If the value is invalid for the field
        """
        self.get(key)
        data = self.model_dump()
        *parents, leaf = key.split(".")
        target = data
        for part in parents:
            target = target[part]
        target[leaf] = value
        return AppConfig.model_validate(data)
