from __future__ import annotations

import logging
from typing import Callable

from mclisp.config import get_strict_arity

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.

ErrorSink = Callable[[str], None]

logger = logging.getLogger("mclisp")


def log_error(message: str) -> None:
    """Default error sink: report through the `mclisp` logger."""
    logger.error(message)


_error_sink: ErrorSink = log_error
_strict_arity: bool = get_strict_arity()


def set_error_sink(sink: ErrorSink | None) -> None:
    global _error_sink
    _error_sink = sink if sink is not None else log_error


def get_error_sink() -> ErrorSink:
    return _error_sink


def set_strict_arity(flag: bool) -> None:
    global _strict_arity
    _strict_arity = flag


def get_strict_arity_mode() -> bool:
    return _strict_arity
