"""Error hierarchy for frame staging and encoding."""


class SimovexError(Exception):
    """Base error for all Simovex errors."""

    def __init__(self, message: str, component: str = "", details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.component = component
        self.details = details or {}


class DimensionMismatchError(SimovexError, ValueError):
    """A frame does not have the movie's width and height."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="staging", details=details)


class StageIOError(SimovexError):
    """A frame could not be written to its temporary file."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="staging", details=details)


class EncodeError(SimovexError):
    """The encoder process could not be launched or waited on."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="encoding", details=details)


class EncodeFailedError(EncodeError):
    """The encoder ran but exited with a non-zero status."""

    def __init__(self, message: str, return_code: int, details: dict | None = None):
        super().__init__(message, details=details)
        self.return_code = return_code


class SessionClosedError(SimovexError):
    """An operation was attempted on a movie that was already saved or cleaned up."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="session", details=details)
