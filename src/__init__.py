"""
classname - Utility-class style resolver

Parses whitespace-separated utility-class strings ("p-4 bg-red/50 r-2") into
ordered style directives that a UI layer folds onto its own style type.
"""

__version__ = "1.0.0"

from .lib import (
    tokenize,
    resolve,
    parse,
    Parser,
    RuleRegistry,
    compose,
    directive_apply,
    classname,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "tokenize",
    "resolve",
    "parse",
    "Parser",
    "RuleRegistry",
    "compose",
    "directive_apply",
    "classname",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
