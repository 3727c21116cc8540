"""
Rule specification models

Defines the rows of the token dispatch table: which literal a rule matches
(an exact token or a prefix), which family it belongs to, and the handler
that turns the token's suffix into a directive.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .directives import StyleDirective


class RuleFamily(Enum):
    """
    Families of class-string rules

    Used for organization and for listing the dispatch table.
    """
    PADDING = "padding"        # p-, px-, py-, pt-, pb-, pl-, pr-
    OFFSET = "offset"          # m-, mx-, my-, mt-, mb-, ml-, mr-
    RADIUS = "radius"          # r-
    BACKGROUND = "background"  # bg-
    GRADIENT = "gradient"      # bg-gradient-to-r, bg-gradient-to-b


# Handler receives the token remainder after the literal and returns a
# directive, or None when the remainder is unresolvable.
RuleHandler = Callable[[str], Optional[StyleDirective]]


@dataclass
class RuleSpec:
    """
    Specification for one dispatch-table row

    Attributes:
        name: Rule name, the literal it matches (e.g. "px-")
        family: Family for organization
        literal: Exact token or prefix to match
        handler: Function (suffix) -> Optional[StyleDirective]
        exact: Whether the literal must equal the whole token
        description: Human-readable description
        examples: Example tokens
    """
    name: str
    family: RuleFamily
    literal: str
    handler: RuleHandler
    exact: bool = False
    description: str = ""
    examples: List[str] = field(default_factory=list)

    def matches(self, token: str) -> bool:
        """
        Check if this rule applies to a token

        Args:
            token: Token to check

        Returns:
            True if the token equals the literal (exact rules) or starts
            with it (prefix rules)
        """
        if self.exact:
            return token == self.literal
        return token.startswith(self.literal)

    def suffix_get(self, token: str) -> str:
        """Return the part of the token after the matched literal"""
        return token[len(self.literal):]
