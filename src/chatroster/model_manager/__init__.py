"""Persistence of pydantic models."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
