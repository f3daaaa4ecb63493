"""Layer color resolution."""
import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .styles import (
    BACKGROUND_COLOR, COPPER_COLORS, DRILL_COLOR, KEEPOUT_COLOR,
    SOLDERMASK_OVER_COPPER_COLORS, SUBSTRATE_COLOR,
)

logger = logging.getLogger(__name__)

FALLBACK_LAYER = "top"


class PcbColorMap(BaseModel):
    """
    Colors used to draw PCB elements, keyed by layer where relevant.

    Layer maps given by the caller are merged over the default layer colors.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    copper: dict[str, str] = Field(default_factory=lambda: dict(COPPER_COLORS))
    soldermask_over_copper: dict[str, str] = Field(
        default_factory=lambda: dict(SOLDERMASK_OVER_COPPER_COLORS),
        alias="soldermaskOverCopper",
    )
    substrate: str = SUBSTRATE_COLOR
    keepout: str = KEEPOUT_COLOR
    drill: str = DRILL_COLOR
    background: str = BACKGROUND_COLOR

    @field_validator("copper", mode="after")
    @classmethod
    def merge_copper_defaults(cls, colors: dict[str, str]) -> dict[str, str]:
        return {**COPPER_COLORS, **colors}

    @field_validator("soldermask_over_copper", mode="after")
    @classmethod
    def merge_soldermask_defaults(cls, colors: dict[str, str]) -> dict[str, str]:
        return {**SOLDERMASK_OVER_COPPER_COLORS, **colors}

    def copper_color(self, layer: str) -> str:
        """Copper color for a layer, falling back to the top layer."""
        return _lookup(self.copper, layer, "copper")

    def soldermask_color(self, layer: str) -> str:
        """Soldermask-over-copper color for a layer, falling back to the top layer."""
        return _lookup(self.soldermask_over_copper, layer, "soldermaskOverCopper")

    def with_overrides(self, overrides: Mapping[str, str]) -> "PcbColorMap":
        """
        Return a copy with dotted-key overrides applied.

        Keys are ``copper.<layer>``, ``soldermaskOverCopper.<layer>``,
        ``substrate``, ``keepout``, ``drill`` and ``background``.

        Raises:
            ValueError: If a key does not name a color option
        """
        data: dict[str, Any] = self.model_dump()
        for key, color in overrides.items():
            group, _, layer = key.partition(".")
            if group == "soldermaskOverCopper":
                group = "soldermask_over_copper"

            if layer:
                if group not in ("copper", "soldermask_over_copper"):
                    raise ValueError(f"Unknown color option: {key!r}")
                data[group] = {**data[group], layer: color}
            elif group in ("substrate", "keepout", "drill", "background"):
                data[group] = color
            else:
                raise ValueError(f"Unknown color option: {key!r}")

        return PcbColorMap.model_validate(data)


def _lookup(colors: Mapping[str, str], layer: str, group: str) -> str:
    color = colors.get(layer)
    if color is not None:
        return color
    logger.debug("No %s color for layer %r, using %r", group, layer, FALLBACK_LAYER)
    return colors[FALLBACK_LAYER]


DEFAULT_PCB_COLOR_MAP = PcbColorMap()
