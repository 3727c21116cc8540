"""
Models package for classname

Contains data structures and type definitions for class-string resolution.
"""

from .state import ProgramState, pipeline
from .directives import (
    Axis,
    Side,
    GradientDirection,
    Color,
    StyleDirective,
    Identity,
    PaddingAll,
    PaddingAxis,
    PaddingSide,
    OffsetAll,
    OffsetAxis,
    CornerRadius,
    Background,
    Gradient,
    NAMED_COLORS,
    GRADIENT_STOPS,
)
from .rules import RuleSpec, RuleFamily
from .parser import ColorSplit, StyleSequence
from .style import ComputedStyle, Insets

__all__ = [
    "ProgramState",
    "pipeline",
    "Axis",
    "Side",
    "GradientDirection",
    "Color",
    "StyleDirective",
    "Identity",
    "PaddingAll",
    "PaddingAxis",
    "PaddingSide",
    "OffsetAll",
    "OffsetAxis",
    "CornerRadius",
    "Background",
    "Gradient",
    "NAMED_COLORS",
    "GRADIENT_STOPS",
    "RuleSpec",
    "RuleFamily",
    "ColorSplit",
    "StyleSequence",
    "ComputedStyle",
    "Insets",
]
