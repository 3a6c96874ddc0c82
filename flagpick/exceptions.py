# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by flagpick.

These exceptions describe the ways help text acquisition and flag extraction can
fail. Timeouts and failed commands are recovered inside the acquirer by falling
through to the next help source; only exhaustion and empty extraction reach the
caller.

All exceptions inherit from `FlagpickError`, the base exception for the package.

Exception Hierarchy:
- FlagpickError
    ├── AcquisitionError
    │     ├── CommandTimeoutError
    │     ├── CommandFailedError
    │     └── NoHelpAvailableError
    ├── NoFlagsFoundError
    └── ConfigError
"""
from __future__ import annotations

from typing import Sequence


class FlagpickError(Exception):
    """Base exception for flagpick."""


class AcquisitionError(FlagpickError):
    """Exception raised when help text could not be obtained from a process."""


class CommandTimeoutError(AcquisitionError):
    """Exception raised when a supervised process exceeded its time budget."""

    def __init__(self, command: Sequence[str], timeout: float):
        self.command = list(command)
        self.timeout = timeout
        super().__init__(
            f"'{' '.join(self.command)}' did not finish within {timeout:g}s "
            "(possibly an interactive program)"
        )


class CommandFailedError(AcquisitionError):
    """Exception raised when a supervised process could not run or exited non-zero."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"'{' '.join(self.command)}' could not be started"
        else:
            message = f"'{' '.join(self.command)}' exited with status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class NoHelpAvailableError(AcquisitionError):
    """Exception raised when neither --help nor the manual page produced help text."""

    def __init__(self, command_name: str):
        self.command_name = command_name
        super().__init__(f"No help text available for '{command_name}'.")


class NoFlagsFoundError(FlagpickError):
    """Exception raised when help text was obtained but no flag lines were found."""

    def __init__(self, message: str = "Help text was obtained, but no flags were found."):
        super().__init__(message)


class ConfigError(FlagpickError):
    """Exception raised when a configuration file cannot be read or validated."""
