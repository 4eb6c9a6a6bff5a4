"""Fill color representation and hex color parsing."""

import re
from dataclasses import dataclass
from typing import Any

from svgmesh.exceptions import ColorFormatError

_HEX_COLOR = re.compile(r"#(?:(?P<long>[0-9A-Fa-f]{6})|(?P<short>[0-9A-Fa-f]{3}))")


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA color with channels in [0, 1].

    The default is all zeros (transparent black), used for shapes
    without a fill attribute.
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Color":
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data["a"])


def _channel(digits: str) -> float:
    return int(digits, 16) / 255.0


def parse_color(value: str) -> Color:
    """Parse a ``#RRGGBB`` or ``#RGB`` hex color.

    Short form expands each digit (``#F00`` is ``#FF0000``). Parsed
    colors are fully opaque.

    Args:
        value: Color attribute text

    Returns:
        Parsed color

    Raises:
        ColorFormatError: If value is not a hex color
    """
    match = _HEX_COLOR.fullmatch(value.strip())
    if match is None:
        raise ColorFormatError(value)

    digits = match.group("long")
    if digits is None:
        digits = "".join(c * 2 for c in match.group("short"))

    return Color(
        r=_channel(digits[0:2]),
        g=_channel(digits[2:4]),
        b=_channel(digits[4:6]),
        a=1.0,
    )
