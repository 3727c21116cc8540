"""
Parser for class strings

Turns a class string into an ordered StyleSequence.

The parser operates in two phases:
1. Tokenizing: split the trimmed string on runs of whitespace
2. Resolving: dispatch each token through the rule table, in order

There is no cross-token state and no backtracking; every token yields
exactly one directive (Identity when unresolvable), so the output order is
the input order.

Example:
    >>> parser = Parser("p-4 bg-red r-2")
    >>> [d.kind for d in parser.parse()]
    ['padding_all', 'background', 'corner_radius']
"""

from typing import List, Optional

from ..config import AppSettings
from ..models.directives import Identity, StyleDirective
from ..models.parser import StyleSequence
from .log import LOG, verbosity_allows
from .rules import RuleRegistry, default_registry
from .tokenizer import tokenize


class Parser:
    """
    Parser for utility-class strings

    Handles:
    - Whitespace tokenizing
    - Prefix dispatch through an ordered RuleRegistry
    - Silent degradation of bad tokens to Identity
    """

    def __init__(
        self,
        source: str,
        registry: Optional[RuleRegistry] = None,
        settings: Optional[AppSettings] = None,
    ):
        """
        Initialize parser with a class string

        Args:
            source: Class string (e.g., "p-4 bg-[#112233]/50 r-2")
            registry: Optional RuleRegistry to dispatch tokens with
            settings: Optional settings; builds a dedicated registry when
                      no registry is given

        Attributes:
            source: Class string being parsed
            tokens: Tokens produced by the last parse() call
            registry: RuleRegistry used for dispatch
        """
        self.source = source
        self.tokens: List[str] = []

        if registry is None:
            registry = RuleRegistry(settings) if settings is not None else default_registry
        self.registry = registry

    def parse(self) -> StyleSequence:
        """
        Parse the class string into a StyleSequence

        Returns:
            StyleSequence with one directive per token, in token order.
            Empty for empty or whitespace-only source.

        Example:
            >>> Parser("p-4 nope").parse().unresolved()
            ['nope']
        """
        self.tokens = tokenize(self.source)
        directives = [self.token_resolve(token) for token in self.tokens]
        return StyleSequence(tokens=list(self.tokens), directives=directives)

    def token_resolve(self, token: str) -> StyleDirective:
        """
        Resolve one token, logging the outcome

        Args:
            token: Single token

        Returns:
            Resolved directive, or Identity
        """
        directive = self.registry.resolve(token)
        if isinstance(directive, Identity):
            LOG(f"Unresolved token: {token}", level=2)
        elif verbosity_allows(3):
            LOG(f"Token {token} -> {directive}", level=3)
        return directive


def parse(source: str) -> StyleSequence:
    """Parse a class string with the default registry"""
    return Parser(source).parse()
