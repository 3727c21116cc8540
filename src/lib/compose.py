"""
Folding directive sequences onto a style

compose() is a plain left fold: it threads a base style through an
apply(style, directive) function once per directive, in emission order.
Any style representation can be used by passing its own apply function.

directive_apply() is the built-in apply function for ComputedStyle. It
uses last-wins semantics per property slot:

    padding        per side     (p-4 pt-2   -> top 8, other sides 16)
    offset         per axis     (mt-2 mb-1  -> y = -4)
    corner radius  single slot
    background     single slot shared by solid colors and gradients
"""

from dataclasses import replace
from functools import reduce
from typing import Callable, Iterable, TypeVar

from ..models.directives import (
    Axis,
    Side,
    StyleDirective,
    PaddingAll,
    PaddingAxis,
    PaddingSide,
    OffsetAll,
    OffsetAxis,
    CornerRadius,
    Background,
    Gradient,
)
from ..models.style import ComputedStyle, Insets
from .parser import Parser

S = TypeVar("S")

_SIDE_FIELDS = {
    Side.TOP: "top",
    Side.BOTTOM: "bottom",
    Side.START: "start",
    Side.END: "end",
}


def compose(
    directives: Iterable[StyleDirective],
    apply: Callable[[S, StyleDirective], S],
    base: S,
) -> S:
    """
    Fold directives onto a base style, left to right

    Args:
        directives: Directives in emission order (a StyleSequence works)
        apply: Function (style, directive) -> new style
        base: Starting (identity) style

    Returns:
        Style after every directive has been applied
    """
    return reduce(apply, directives, base)


def directive_apply(style: ComputedStyle, directive: StyleDirective) -> ComputedStyle:
    """
    Layer one directive on top of a ComputedStyle

    Identity, and any directive type this function does not know, leave
    the style unchanged.

    Args:
        style: Current style
        directive: Directive to apply

    Returns:
        New ComputedStyle
    """
    if isinstance(directive, PaddingAll):
        v = directive.value
        return replace(style, padding=Insets(top=v, bottom=v, start=v, end=v))

    if isinstance(directive, PaddingAxis):
        v = directive.value
        if directive.axis is Axis.X:
            return replace(style, padding=replace(style.padding, start=v, end=v))
        return replace(style, padding=replace(style.padding, top=v, bottom=v))

    if isinstance(directive, PaddingSide):
        padding = replace(style.padding, **{_SIDE_FIELDS[directive.side]: directive.value})
        return replace(style, padding=padding)

    if isinstance(directive, OffsetAll):
        return replace(style, offset_x=directive.x, offset_y=directive.y)

    if isinstance(directive, OffsetAxis):
        if directive.axis is Axis.X:
            return replace(style, offset_x=directive.value)
        return replace(style, offset_y=directive.value)

    if isinstance(directive, CornerRadius):
        return replace(style, corner_radius=directive.value)

    if isinstance(directive, Background):
        return replace(style, background=directive.color)

    if isinstance(directive, Gradient):
        return replace(style, background=directive)

    return style


def classname(source: str, base: ComputedStyle = ComputedStyle()) -> ComputedStyle:
    """
    Parse a class string and fold it onto a style in one step

    Args:
        source: Class string
        base: Style to layer on (defaults to the empty style)

    Returns:
        Resulting ComputedStyle

    Example:
        >>> classname("p-4 pt-1 r-2").padding.top
        4.0
    """
    return compose(Parser(source).parse(), directive_apply, base)
