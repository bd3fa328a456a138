"""Carousel options.

Options are validated with pydantic. Defaults match the widget's historical
behaviour; any of them can be overridden from the environment.
"""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from virchual.core.errors import InvalidOptionsError

ENV_PREFIX = "VIRCHUAL_"


class CarouselOptions(BaseModel):
    """Validated carousel configuration."""

    speed: int = Field(200, ge=0, description="Transition duration in ms")
    easing: str = Field("ease-out", min_length=1)
    swipe_distance_threshold: int = Field(150, ge=0)
    flick_velocity_threshold: float = Field(0.6, ge=0)
    flick_power: int = Field(600, ge=0)
    pagination: bool = True
    window: int = Field(1, ge=0, description="Slides mounted on each side of the current one")
    bullets: int = Field(5, ge=1, description="Visible pagination bullets")
    bullet_diameter: int = Field(16, gt=0, description="Bullet size in px")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> "CarouselOptions":
        """Validate a plain mapping, raising InvalidOptionsError on failure."""
        try:
            return cls.model_validate(values)
        except ValidationError as ex:
            raise InvalidOptionsError.from_exception(ex) from ex

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, **overrides: Any) -> "CarouselOptions":
        """Build options from ``{prefix}{FIELD}`` environment variables.

        Explicit keyword overrides win over the environment. Values are left as
        strings and coerced by pydantic.
        """
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{prefix}{name.upper()}")
            if raw is not None:
                values[name] = raw
        values.update(overrides)
        return cls.from_mapping(values)
