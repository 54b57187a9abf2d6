"""Theme palette.

Eight semantic colors drive the whole UI. The palette is a fixed record:
every role is always present. On disk each role is a `#rrggbb` string.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_serializer, field_validator

from chatroster.colors.hexcodec import color_to_hex, hex_to_color
from chatroster.exceptions import PaletteError

from .color import Color

PALETTE_ROLES: tuple[str, ...] = (
    "background",
    "text",
    "action",
    "accent",
    "alert",
    "error",
    "info",
    "success",
)


class Palette(BaseModel):
    """The eight semantic colors of a theme.

    Validates from hex strings (or Color instances) and serializes every
    role back to a lowercase `#rrggbb` string. Missing roles, unknown
    keys and malformed hex values all fail validation; there is no
    partial palette.

    Example:
        >>> palette = Palette.model_validate_json(path.read_text())
        >>> palette.model_dump()["background"]
        '#2b292d'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    background: Color
    text: Color
    action: Color
    accent: Color
    alert: Color
    error: Color
    info: Color
    success: Color

    @field_validator(*PALETTE_ROLES, mode="before")
    @classmethod
    def parse_hex(cls, value: Any) -> Any:
        if isinstance(value, str):
            return hex_to_color(value)
        return value

    @field_serializer(*PALETTE_ROLES)
    def serialize_hex(self, color: Color) -> str:
        return color_to_hex(color)

    @classmethod
    def default(cls) -> "Palette":
        """Built-in dark theme."""
        return cls(
            background="#2b292d",
            text="#fecdb2",
            action="#b1b695",
            accent="#d1d1e0",
            alert="#ffa07a",
            error="#e06b75",
            info="#f5d76e",
            success="#b1b695",
        )

    @classmethod
    def from_hex_dict(cls, data: Mapping[str, Any]) -> "Palette":
        """Build a palette from a role -> hex mapping.

        Raises:
            PaletteError: Listing every missing, unknown or malformed role
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            problems = [
                (".".join(str(loc) for loc in err.get("loc", ("unknown",))), err.get("msg", "invalid"))
                for err in e.errors()
            ]
            raise PaletteError(problems) from e

    def to_hex_dict(self) -> dict[str, str]:
        """Role -> `#rrggbb` mapping, the persisted form."""
        return self.model_dump()

    def role(self, name: str) -> Color:
        """Color of a role by name.

        Raises:
            KeyError: If `name` is not one of PALETTE_ROLES
        """
        if name not in PALETTE_ROLES:
            raise KeyError(name)
        return getattr(self, name)


DEFAULT_PALETTE = Palette.default()
