from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with ORM-style attribute loading enabled."""

    model_config = ConfigDict(from_attributes=True)


class FrozenSchema(BaseModel):
    """Base schema for static lookup tables that must never change at runtime."""

    model_config = ConfigDict(frozen=True)
