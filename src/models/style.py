"""
Computed style model

ComputedStyle is the reference target that directive sequences are folded
onto. Each field is a property slot; a later directive writing the same
slot replaces the earlier value.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from .directives import Color, Gradient


@dataclass(frozen=True)
class Insets:
    """Padding per side, in base units"""
    top: float = 0.0
    bottom: float = 0.0
    start: float = 0.0
    end: float = 0.0


@dataclass(frozen=True)
class ComputedStyle:
    """
    Flattened style after folding a directive sequence

    Attributes:
        padding: Padding per side
        offset_x: Horizontal positional offset
        offset_y: Vertical positional offset
        corner_radius: Corner clipping radius, or None if never set
        background: Solid color, gradient, or None if never set
    """
    padding: Insets = field(default_factory=Insets)
    offset_x: float = 0.0
    offset_y: float = 0.0
    corner_radius: Optional[float] = None
    background: Optional[Union[Color, Gradient]] = None

    def dict_export(self) -> Dict[str, Any]:
        background: Optional[Dict[str, Any]] = None
        if isinstance(self.background, Color):
            background = {"kind": "color", **self.background.dict_export()}
        elif isinstance(self.background, Gradient):
            background = self.background.dict_export()

        return {
            "padding": {
                "top": self.padding.top,
                "bottom": self.padding.bottom,
                "start": self.padding.start,
                "end": self.padding.end,
            },
            "offset": {"x": self.offset_x, "y": self.offset_y},
            "corner_radius": self.corner_radius,
            "background": background,
        }
