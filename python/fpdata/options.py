import functools
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

R = TypeVar('R')

logger = logging.getLogger(__name__)

# Global options
LOG_LEVEL_ENV = "FPDATA_LOG_LEVEL"
PACKAGE_LOGGER = "fpdata"

class FpdataError(Exception):
    pass

class OptionsError(FpdataError):
    pass

class StackDepthError(FpdataError):
    """A non tail-recursive operation ran out of call stack."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}: input too deep for the call stack")
        self.operation = operation

def _level_from_env() -> Optional[str]:
    return os.environ.get(LOG_LEVEL_ENV) or None

@dataclass
class Options:
    # None leaves the package logger at NOTSET, inheriting from its parents
    log_level: Optional[str] = field(default_factory=_level_from_env)
    recursion_limit: Optional[int] = None

def current_options() -> Options:
    return _active

def configure(options: Optional[Options] = None) -> Options:
    global _active
    opts = options if options is not None else Options()

    level = logging.NOTSET
    if opts.log_level is not None:
        level = logging.getLevelName(opts.log_level.upper())
        if not isinstance(level, int):
            raise OptionsError(f"Unknown log level: {opts.log_level}")
    if opts.recursion_limit is not None and opts.recursion_limit <= 0:
        raise OptionsError(f"Recursion limit must be positive: {opts.recursion_limit}")

    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    if opts.recursion_limit is not None:
        sys.setrecursionlimit(opts.recursion_limit)
        logger.debug("recursion limit set to %d", opts.recursion_limit)

    _active = opts
    return opts

def _configure_from_environment() -> Options:
    # FPDATA_LOG_LEVEL takes effect at import; without it nothing is touched
    if _level_from_env() is None:
        return Options(log_level=None)
    return configure(Options())

_active = _configure_from_environment()

def stack_guarded(func: Callable[..., R]) -> Callable[..., R]:
    """
    Turn a RecursionError escaping ``func`` into a StackDepthError.

    Wrap only the public entry point; the recursion runs in a nested helper.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except RecursionError as exc:
            logger.debug("%s exhausted the call stack", func.__name__)
            raise StackDepthError(func.__name__) from exc
    return wrapper
