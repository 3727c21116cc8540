"""
Literal parsers for class-string token suffixes

Every parser here returns the parsed value or None. None means
"unresolved" and propagates up to the rule handler, which turns it into
an Identity directive. Nothing in this module raises on bad input.

Two-tier length scheme:
    p-4        -> 4 x unit scale  (integer "unit count")
    p-[12.5dp] -> 12.5            (bracketed raw value, unscaled)
"""

import re
from typing import Optional

from ..config import AppSettings
from ..models.directives import Color, NAMED_COLORS
from ..models.parser import ColorSplit


_INT_RE = re.compile(r'[+-]?[0-9]+')
_FLOAT_RE = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_HEX_RE = re.compile(r'#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})')
_RGB_RE = re.compile(r'rgb\((?P<body>[^()]*)\)')

_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1
_INT_MAX_DIGITS = len(str(_INT_MAX))


def int_parse(text: str) -> Optional[int]:
    """
    Parse a signed 32-bit decimal integer

    Only an optional sign and ASCII digits are accepted; no surrounding
    whitespace, underscores or radix prefixes. Literals outside the range
    are unresolved, however many digits they have.

    Example:
        >>> int_parse("42"), int_parse("-3"), int_parse("4.0")
        (42, -3, None)
    """
    if not _INT_RE.fullmatch(text):
        return None
    sign = -1 if text.startswith('-') else 1
    digits = text.lstrip('+-').lstrip('0') or '0'
    # Too many significant digits for 32 bits; also keeps int() linear
    if len(digits) > _INT_MAX_DIGITS:
        return None
    value = sign * int(digits)
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value


def float_parse(text: str) -> Optional[float]:
    """
    Parse a finite decimal float ("12", "12.5", ".5", "1e3")

    Example:
        >>> float_parse("12.5"), float_parse("nan")
        (12.5, None)
    """
    if not _FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    if value in (float("inf"), float("-inf")):
        return None
    return value


def bracket_extract(value: str) -> Optional[str]:
    """
    Return the inside of a "[...]" literal, or None if not bracketed

    Example:
        >>> bracket_extract("[10dp]")
        '10dp'
        >>> bracket_extract("10") is None
        True
    """
    if len(value) >= 2 and value.startswith('[') and value.endswith(']'):
        return value[1:-1]
    return None


def rawLength_parse(raw: str, settings: AppSettings) -> Optional[float]:
    """
    Parse a bracketed raw length in base units

    If the literal ends with a configured unit suffix (only "dp" by
    default), the suffix is stripped and the number scaled by the unit's
    multiplier. Otherwise the whole literal must be a bare float.

    Args:
        raw: Bracket contents (e.g., "12.5dp", "7")
        settings: Settings carrying the raw unit table

    Returns:
        Length in base units, or None
    """
    unit = settings.rawUnit_split(raw)
    if unit is not None:
        number, multiplier = unit
        parsed = float_parse(number)
        return None if parsed is None else parsed * multiplier
    return float_parse(raw)


def length_parse(value: str, unit_scale: float, settings: AppSettings) -> Optional[float]:
    """
    Resolve a length suffix using the two-tier scheme

    A bracketed value is parsed raw and never falls back to the integer
    tier. Anything else must be an integer unit count.

    Args:
        value: Token suffix after the rule prefix
        unit_scale: Base units per integer count
        settings: Settings carrying the raw unit table

    Returns:
        Length in base units, or None

    Example:
        >>> length_parse("4", 4.0, appsettings)
        16.0
        >>> length_parse("[10dp]", 4.0, appsettings)
        10.0
    """
    raw = bracket_extract(value)
    if raw is not None:
        return rawLength_parse(raw, settings)

    count = int_parse(value)
    if count is None:
        return None
    return count * unit_scale


def color_split(value: str) -> ColorSplit:
    """Split a bg- suffix on its first '/' into color and opacity parts"""
    color, slash, opacity = value.partition('/')
    return ColorSplit(color=color, opacity=opacity if slash else None)


def rawColor_parse(raw: str) -> Optional[Color]:
    """
    Parse a raw color literal

    Accepted forms:
        #RRGGBB, #AARRGGBB        (hex, case-insensitive)
        rgb(r, g, b)              (three integers in [0, 255])

    The alpha byte of an ARGB literal is kept on the returned color but the
    opacity stage replaces it.

    Returns:
        Color, or None for any other form or an out-of-range channel
    """
    if raw.startswith('#'):
        if not _HEX_RE.fullmatch(raw):
            return None
        digits = raw[1:]
        alpha = 1.0
        if len(digits) == 8:
            alpha = int(digits[:2], 16) / 255
            digits = digits[2:]
        return Color(
            red=int(digits[0:2], 16),
            green=int(digits[2:4], 16),
            blue=int(digits[4:6], 16),
            alpha=alpha,
        )

    match = _RGB_RE.fullmatch(raw)
    if match:
        channels = [int_parse(part.strip()) for part in match.group('body').split(',')]
        if len(channels) != 3:
            return None
        if any(channel is None or not 0 <= channel <= 255 for channel in channels):
            return None
        red, green, blue = channels
        return Color(red=red, green=green, blue=blue)

    return None


def namedColor_parse(name: str) -> Optional[Color]:
    """Look up a name in the fixed named-color table"""
    return NAMED_COLORS.get(name)


def opacity_parse(opacity: Optional[str]) -> float:
    """
    Convert an opacity percentage to an alpha fraction

    Clamped to [0, 100]. An absent or non-integer opacity means full
    alpha rather than failing the token.

    Example:
        >>> opacity_parse("50"), opacity_parse("150"), opacity_parse("x")
        (0.5, 1.0, 1.0)
    """
    if opacity is None:
        return 1.0
    percent = int_parse(opacity)
    if percent is None:
        return 1.0
    return max(0, min(100, percent)) / 100


def background_parse(value: str) -> Optional[Color]:
    """
    Parse a bg- suffix into a color with its opacity applied

    Bracketed color parts must be raw colors. Bare parts starting with
    '#' or 'rgb(' are parsed as raw colors too; everything else is looked
    up by name.

    Args:
        value: Token suffix after "bg-" (e.g., "red/50", "[#112233]")

    Returns:
        Color with alpha replaced by the opacity fraction, or None if the
        color part is unresolvable
    """
    split = color_split(value)

    raw = bracket_extract(split.color)
    if raw is not None:
        base = rawColor_parse(raw)
    elif split.color.startswith(('#', 'rgb(')):
        base = rawColor_parse(split.color)
    else:
        base = namedColor_parse(split.color)

    if base is None:
        return None

    return base.alpha_replace(opacity_parse(split.opacity))
