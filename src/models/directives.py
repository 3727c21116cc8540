"""
Style directive models

Defines the typed style instructions a class-string token resolves to,
together with the color value type and the fixed constant tables
(named colors, gradient stops) they draw on.

Every directive is an immutable dataclass so that resolving the same token
twice yields structurally equal values.
"""

from enum import Enum
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Dict, Tuple


class Axis(Enum):
    """Axis of a per-axis padding or offset"""
    X = "x"    # horizontal
    Y = "y"    # vertical


class Side(Enum):
    """Single side of a per-side padding"""
    TOP = "top"
    BOTTOM = "bottom"
    START = "start"
    END = "end"


class GradientDirection(Enum):
    """Direction of a linear gradient fill"""
    HORIZONTAL = "horizontal"    # bg-gradient-to-r
    VERTICAL = "vertical"        # bg-gradient-to-b


@dataclass(frozen=True)
class Color:
    """
    An RGBA color

    Attributes:
        red: Red channel, 0-255
        green: Green channel, 0-255
        blue: Blue channel, 0-255
        alpha: Opacity fraction in [0, 1]

    Example:
        >>> Color(255, 0, 0).alpha_replace(0.5)
        Color(red=255, green=0, blue=0, alpha=0.5)
    """
    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def alpha_replace(self, alpha: float) -> "Color":
        """Return this color with its alpha replaced; channels are untouched"""
        return replace(self, alpha=alpha)

    def hex_format(self) -> str:
        """Format the color channels as #RRGGBB (alpha is not included)"""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def dict_export(self) -> Dict[str, Any]:
        return {"hex": self.hex_format(), "alpha": self.alpha}


class StyleDirective:
    """
    Base class of all resolved style directives

    Subclasses are frozen dataclasses. The ``kind`` tag names the variant
    in exported output.
    """
    kind: ClassVar[str] = "directive"

    def dict_export(self) -> Dict[str, Any]:
        """
        Export the directive as a JSON-ready dict

        Enum members export as their value, colors as {"hex", "alpha"}.

        Returns:
            Dict with a "kind" tag followed by the variant's fields
        """
        exported: Dict[str, Any] = {"kind": self.kind}
        for name, value in vars(self).items():
            exported[name] = _value_export(value)
        return exported


def _value_export(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Color):
        return value.dict_export()
    if isinstance(value, tuple):
        return [_value_export(item) for item in value]
    return value


@dataclass(frozen=True)
class Identity(StyleDirective):
    """No-op directive produced by unrecognized or malformed tokens"""
    kind: ClassVar[str] = "identity"


@dataclass(frozen=True)
class PaddingAll(StyleDirective):
    """Uniform padding on every side (p-)"""
    kind: ClassVar[str] = "padding_all"
    value: float


@dataclass(frozen=True)
class PaddingAxis(StyleDirective):
    """Padding along one axis (px-, py-)"""
    kind: ClassVar[str] = "padding_axis"
    axis: Axis
    value: float


@dataclass(frozen=True)
class PaddingSide(StyleDirective):
    """Padding on a single side (pt-, pb-, pl-, pr-)"""
    kind: ClassVar[str] = "padding_side"
    side: Side
    value: float


@dataclass(frozen=True)
class OffsetAll(StyleDirective):
    """Positional offset on both axes (m-), a margin approximation"""
    kind: ClassVar[str] = "offset_all"
    x: float
    y: float


@dataclass(frozen=True)
class OffsetAxis(StyleDirective):
    """
    Signed positional offset along one axis

    mb- and mr- produce negative values so that the "margin" pushes the
    element away from that side.
    """
    kind: ClassVar[str] = "offset_axis"
    axis: Axis
    value: float


@dataclass(frozen=True)
class CornerRadius(StyleDirective):
    """Rounded-corner clipping (r-)"""
    kind: ClassVar[str] = "corner_radius"
    value: float


@dataclass(frozen=True)
class Background(StyleDirective):
    """Solid background fill (bg-)"""
    kind: ClassVar[str] = "background"
    color: Color


@dataclass(frozen=True)
class Gradient(StyleDirective):
    """Linear gradient background fill"""
    kind: ClassVar[str] = "gradient"
    direction: GradientDirection
    stops: Tuple[Color, ...] = field(default=())


# Named colors recognized by bg-<name>
NAMED_COLORS: Dict[str, Color] = {
    "black": Color(0x00, 0x00, 0x00),
    "white": Color(0xFF, 0xFF, 0xFF),
    "red": Color(0xFF, 0x00, 0x00),
    "blue": Color(0x3B, 0x82, 0xF6),
    "green": Color(0x22, 0xC5, 0x5E),
    "primary": Color(0x63, 0x66, 0xF1),
}

# Fixed stop pair shared by both gradient tokens
GRADIENT_STOPS: Tuple[Color, ...] = (
    Color(0x63, 0x66, 0xF1),
    Color(0xEC, 0x48, 0x99),
)
