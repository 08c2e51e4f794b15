"""Error hierarchy and structured error logging."""

from .handling import error_category, log_error  # noqa: F401
from .internal import (  # noqa: F401
    ConfigError,
    DuplicateModuleError,
    HookError,
    InternalError,
    ModuleError,
    ModuleLoadError,
    NetworkError,
    ParseError,
    RegistrationClosedError,
)

__all__ = [
    "InternalError",
    "NetworkError",
    "ParseError",
    "ConfigError",
    "ModuleError",
    "ModuleLoadError",
    "DuplicateModuleError",
    "HookError",
    "RegistrationClosedError",
    "error_category",
    "log_error",
]
