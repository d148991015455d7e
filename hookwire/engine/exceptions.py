# hookwire/engine/exceptions.py
"""
Errors raised by the callback registry and its dispatch protocols.

None of these are recovered inside the engine. They surface synchronously to
whoever registered or fired the callbacks.
"""


class CallbacksError(Exception):
    """Base exception for all callback registry and dispatch errors."""

    pass


class InvalidKind(CallbacksError, ValueError):
    """Raised when an operation receives a callback kind it cannot handle."""

    pass


class NullResultError(CallbacksError):
    """Raised when a native simplification callback returns no node."""

    pass


class TypeMismatchError(CallbacksError, TypeError):
    """Raised when a foreign simplification callback returns something other than a node."""

    pass


class CallbackExecutionFailure(CallbacksError):
    """Raised when a foreign callback fails inside the embedded runtime.

    Attributes:
        error (Optional[BaseException]): The error reported by the runtime.
    """

    def __init__(self, *args, error: BaseException | None = None):
        super().__init__(*args)
        self.error = error
