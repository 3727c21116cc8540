"""
classname - Utility-class style resolver

Turns Tailwind-like class strings into ordered style directives.
"""

__version__ = "1.0.0"

from .tokenizer import tokenize
from .rules import RuleRegistry, resolve
from .parser import Parser, parse
from .compose import compose, directive_apply, classname
from .compiler import Compiler
from .sheet import Sheet, SheetError
from .log import LOG, state_connectToLogger

__all__ = [
    "tokenize",
    "RuleRegistry",
    "resolve",
    "Parser",
    "parse",
    "compose",
    "directive_apply",
    "classname",
    "Compiler",
    "Sheet",
    "SheetError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
