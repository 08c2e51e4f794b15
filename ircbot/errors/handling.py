from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import (
    ConfigError,
    HookError,
    InternalError,
    ModuleError,
    NetworkError,
    ParseError,
)


def error_category(error: BaseException) -> str:
    """Map an exception to the category used for aggregation."""
    if isinstance(error, HookError):
        # Categorize by what the hook actually raised
        inner = error_category(error.cause)
        return "hook" if inner == "unknown" else f"hook_{inner}"
    if isinstance(error, NetworkError | OSError | ConnectionError):
        return "network"
    if isinstance(error, ParseError):
        return "parsing"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, ModuleError):
        return "module"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(message: str, error: BaseException, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    merged: dict = {}
    if isinstance(error, InternalError):
        merged.update(error.data)
    if context:
        merged.update(context)
    log_structured_error(
        error_type=error_category(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
    )
