# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the flagpick selection prompt.

These signals are raised to leave the prompt loop (finishing the selection or
abandoning it) without being treated as traditional exceptions.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- QuitSignal: Finish the prompt and print the composed command.
- CancelSignal: Abandon the prompt without printing anything.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in flagpick.

    These are not errors. They're used to leave the selection prompt
    from user input.
    """


class QuitSignal(FlowSignal):
    """Raised to finish the selection and print the composed command."""

    def __init__(self, message: str = "Quit signal received."):
        super().__init__(message)


class CancelSignal(FlowSignal):
    """Raised to abandon the selection."""

    def __init__(self, message: str = "Cancel signal received."):
        super().__init__(message)
