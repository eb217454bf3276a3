"""Base pydantic models.

This module defines the foundational model classes used by descriptors,
generation plans and generated resource names. It enforces immutability
and strict schema validation so that identical input always produces
identical output.
"""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaModel(BaseModel):
    """Base immutable model for all aip-names data.

    Design principles enforced by this model:
        - Immutability: models cannot be modified after creation, so
          generation is a pure function of its input.
        - Strict schema validation: unknown or extra fields are rejected
          to avoid silent errors caused by typos in descriptor files.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )


class SettingsModel(BaseSettings):
    """Base immutable model for generator settings.

    Design principles enforced by this model:
        - Immutability: resolved settings cannot be modified after creation.
        - Tolerant schema handling: unknown environment variables are
          ignored so the surrounding environment cannot break generation.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra='ignore',
    )
