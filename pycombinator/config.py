from __future__ import annotations
import logging
import os
import sys
from typing import Optional


# Defaults
_DEFAULT_MAX_DEPTH = 200
_DEFAULT_PROMPT = '> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return raw if raw else default


def get_max_depth() -> int:
    """Maximum nesting of evaluate calls before CombinatorRecursionError."""
    return int_from_env('PYCOMBINATOR_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_prompt() -> str:
    return str_from_env('PYCOMBINATOR_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return str_from_env('PYCOMBINATOR_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the REPL process.

    Records go to stderr so they never interleave with printed results.
    """
    level = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level, logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    logging.getLogger(__name__).debug("Logging initialized at %s level", level)
