"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the verbosity of the ProgramState bound to the current
context, so library modules log without having the state passed in.
Library callers that never bind a state get no log output.

Usage:
    from sgrtemplate.lib.log import LOG, state_connectToLogger

    token = state_connectToLogger(state)
    LOG("Compiling templates...", level=1)      # INFO
    LOG("Wrote out/hello.ansi", level=2)        # DEBUG
    LOG("Group at 12: ...", level=3)            # TRACE
    state_disconnectFromLogger(token)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar, Token
import sys

_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Verbosity level -> loguru level
LEVEL_NAMES = {
    1: "INFO",
    2: "DEBUG",
    3: "TRACE",
}

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="TRACE")


def state_connectToLogger(state: Any) -> Token:
    """
    Bind a ProgramState to the logging context.

    Args:
        state: ProgramState instance with verbosity attribute

    Returns:
        Token for state_disconnectFromLogger()
    """
    return _program_state.set(state)


def state_disconnectFromLogger(token: Token) -> None:
    """Restore the logging context that was active before the matching connect"""
    _program_state.reset(token)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru formatting arguments
    """
    state = _program_state.get()

    if state is None or getattr(state, 'verbosity', 0) < level:
        return

    level_name = LEVEL_NAMES.get(level, "TRACE")
    # depth=1 reports the caller's function and line, not LOG itself
    logger.opt(depth=1).log(level_name, message, **kwargs)
