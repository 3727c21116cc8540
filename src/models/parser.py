"""
Parser-specific data models

Type-safe structures for parser operations and return values.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .directives import Identity, StyleDirective


@dataclass
class ColorSplit:
    """
    Result of splitting a bg- suffix on its first slash

    Returned by color_split() before the color and opacity parts are
    parsed separately.

    Attributes:
        color: Color part (e.g., "red", "[#112233]", "rgb(1,2,3)")
        opacity: Opacity part after the slash, or None if absent

    Example:
        For suffix "[#112233]/50":
        ColorSplit(color="[#112233]", opacity="50")
    """
    color: str
    opacity: Optional[str] = None


@dataclass
class StyleSequence:
    """
    Ordered result of parsing one class string

    Holds the tokens and their resolved directives side by side, one
    directive per token, in input order. Unresolved tokens carry Identity.

    Attributes:
        tokens: Tokens produced by tokenize()
        directives: Directive per token (same length and order as tokens)

    Example:
        For class string "p-4 nope r-2":
        StyleSequence(
            tokens=["p-4", "nope", "r-2"],
            directives=[PaddingAll(16.0), Identity(), CornerRadius(8.0)]
        )
    """
    tokens: List[str] = field(default_factory=list)
    directives: List[StyleDirective] = field(default_factory=list)

    def __iter__(self) -> Iterator[StyleDirective]:
        return iter(self.directives)

    def __len__(self) -> int:
        return len(self.directives)

    def resolved(self) -> List[StyleDirective]:
        """Directives excluding Identity, in emission order"""
        return [d for d in self.directives if not isinstance(d, Identity)]

    def unresolved(self) -> List[str]:
        """Tokens that resolved to Identity, in input order"""
        return [
            token for token, directive in zip(self.tokens, self.directives)
            if isinstance(directive, Identity)
        ]
