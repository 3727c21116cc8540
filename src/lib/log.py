"""
Verbosity-gated logging on top of Loguru.

LOG() looks up the ProgramState bound to the current context and only emits
when that state's verbosity reaches the message level. Library code
(tokenizer, rules, parser) calls LOG freely; with no state bound, nothing is
printed, so applications that embed the parser see no output.

Usage:
    from classname.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)           # once per pipeline stage
    LOG("Resolved 12 elements", level=1)
    LOG("Unresolved token: p-abc", level=2)
    LOG("Token r-2 -> CornerRadius(value=8.0)", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# State whose verbosity gates LOG() in this context
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <10}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Bind a state to the logging context.

    Args:
        state: Any object with an integer ``verbosity`` attribute,
               normally a ProgramState
    """
    _program_state.set(state)


def verbosity_allows(level: int) -> bool:
    """True if the bound state's verbosity reaches ``level``"""
    state = _program_state.get()
    return state is not None and getattr(state, 'verbosity', 0) >= level


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Emit a message if the bound state's verbosity allows it.

    Args:
        message: Text to log
        level: Minimum verbosity (1=normal, 2=verbose, 3=per-token trace)
        **kwargs: Passed through to loguru
    """
    if verbosity_allows(level):
        logger.opt(depth=1).debug(message, **kwargs)
