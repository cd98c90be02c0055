"""Base Pydantic schema for the project.

Provides a common base class for all Pydantic models in funcbench with
shared configuration and validation behavior.
"""

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema", "FrozenSchema"]


class BaseSchema(BaseModel):
    """Base model for all Pydantic schemas.

    - from_attributes: Allow construction from arbitrary objects
    - str_strip_whitespace: Automatically strip whitespace from strings
    """

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
    )


class FrozenSchema(BaseSchema):
    """Base model for values that must not change once created."""

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        frozen=True,
    )
