"""Centralized internal error hierarchy.

Classes:
  InternalError            – Base for all internal errors.
  NetworkError             – Transport failures (dial, TLS, read, write).
  ParseError               – A protocol line that does not match the grammar.
  ConfigError              – Unreadable or invalid configuration.
  ModuleError              – Failure raised by module code (load or hook).
  ModuleLoadError          – A module failed while the module set loaded it.
  DuplicateModuleError     – Two modules registered under the same name.
  HookError                – Wraps an exception raised by a hook during dispatch.
  RegistrationClosedError  – Hook registration attempted after the read loop started.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors."""


class ParseError(InternalError):
    """Exception raised when a raw line is not a valid protocol message.

    Attributes:
        line: The offending raw line.
    """

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message, data={"line": line})
        self.line = line


class ConfigError(InternalError):
    """Exception raised for unreadable or invalid configuration."""


class ModuleError(InternalError):
    """Exception raised by module code, either while loading or from a hook."""


class ModuleLoadError(ModuleError):
    """Exception raised when a module's load routine fails during startup.

    Attributes:
        module: Identity name of the module that failed.
    """

    def __init__(self, module: str, message: str) -> None:
        super().__init__(f"module '{module}': {message}", data={"module": module})
        self.module = module


class DuplicateModuleError(ModuleError):
    """Exception raised when a module name is registered twice."""


class HookError(InternalError):
    """Wraps an exception raised by a hook while a message was dispatched.

    Attributes:
        command: Command key the hook was registered under.
        hook: Qualified name of the hook callable.
        cause: The original exception.
    """

    def __init__(self, command: str, hook: str, cause: BaseException) -> None:
        super().__init__(
            f"hook {hook} failed on {command}: {cause}",
            data={"command": command, "hook": hook},
        )
        self.command = command
        self.hook = hook
        self.cause = cause


class RegistrationClosedError(InternalError):
    """Exception raised when a hook is registered after dispatch started."""


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
]
