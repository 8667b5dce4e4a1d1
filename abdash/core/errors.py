"""Custom exceptions for abdash."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when a configuration object holds values outside their domain."""


class DatasetSchemaError(ValueError):
    """Raised when a DataFrame handed to a reporter lacks required columns."""

    def __init__(self, frame_name: str, missing: list[str]) -> None:
        self.frame_name = frame_name
        self.missing = list(missing)
        super().__init__(f"{frame_name} is missing required columns: {', '.join(self.missing)}")
