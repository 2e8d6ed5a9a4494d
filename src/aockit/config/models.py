"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, aockit.toml only contains
overrides. An empty (or missing) aockit.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from aockit.domain.tree import TraversalOrder


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"
    # Empty delimiter splits grid rows into single characters.
    delimiter: str = ""


class TreeConfig(BaseModel):
    """[tree] section."""

    model_config = {"frozen": True}

    indent_width: int = Field(default=2, ge=1)
    order: TraversalOrder = TraversalOrder.SIBLING_FIRST

    @field_validator("order", mode="before")
    @classmethod
    def _lowercase_order(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value
