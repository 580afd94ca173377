"""Configuration schema module.

This module defines the data structures used for configuration in hemp.
The schemas are minimal but extensible through Pydantic.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from hemp.core.types.casing import Casing


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: str = "WARNING"

    # Allow arbitrary extension
    model_config = {"extra": "allow"}

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> str:
        return str(value).upper()


class PresenterConfig(BaseModel):
    """Root configuration for hemp.

    Attributes:
        default_casing: Casing used by presenters that do not set their own
        logging: Logging configuration
    """

    default_casing: Casing = Casing.SNAKE
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Allow arbitrary extension
    model_config = {"extra": "allow"}

    @field_validator("default_casing", mode="before")
    @classmethod
    def _coerce_casing(cls, value: Any) -> Casing:
        return Casing.coerce(value)
