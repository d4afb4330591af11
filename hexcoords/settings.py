"""Validated layout configuration.

Applications usually keep layout parameters in a settings file or UI; this
model validates them and builds the immutable :class:`~hexcoords.layout.Layout`.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import OffsetScheme, Parity
from .layout import Layout, OrientationKind
from .points import Point

logger = logging.getLogger(__name__)


class LayoutSettings(BaseModel):
    """Orientation, pixel size, origin and offset parity for a hex grid."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    orientation: OrientationKind = Field(default=OrientationKind.FLAT)
    size_x: float = Field(default=50.0, gt=0.0)
    size_y: float = Field(default=50.0, gt=0.0)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)
    parity: Parity = Field(default=Parity.EVEN)

    @field_validator("orientation", mode="before")
    @classmethod
    def _normalise_orientation(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("parity", mode="before")
    @classmethod
    def _coerce_parity(cls, value: object) -> Parity:
        return Parity.coerce(value)  # type: ignore[arg-type]

    @property
    def offset_scheme(self) -> OffsetScheme:
        return OffsetScheme.select(self.orientation.offset_axis, self.parity)

    def build(self) -> Layout:
        """Return the :class:`Layout` described by these settings."""

        layout = Layout(
            orientation=self.orientation,
            size=Point(self.size_x, self.size_y),
            origin=Point(self.origin_x, self.origin_y),
            parity=self.parity,
        )
        logger.debug(
            "Built %s layout size=%s origin=%s scheme=%s",
            self.orientation.value,
            layout.size,
            layout.origin,
            self.offset_scheme.name,
        )
        return layout

    @classmethod
    def from_layout(cls, layout: Layout) -> LayoutSettings:
        return cls(
            orientation=layout.orientation,
            size_x=layout.size.x,
            size_y=layout.size.y,
            origin_x=layout.origin.x,
            origin_y=layout.origin.y,
            parity=layout.parity,
        )


__all__ = ["LayoutSettings"]
