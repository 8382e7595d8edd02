"""Exceptions raised by the adapter pipeline stages."""


class AdapterError(Exception):
    """Base error for the adapter pipeline.

    Attributes:
        original_error: Lower-level exception that caused this error, if any.
    """

    def __init__(self, message: str, original_error: BaseException | None = None):
        super().__init__(message)
        self.original_error = original_error


class ParseError(AdapterError):
    """Input could not be read or is not a well-formed SVG document."""


class GenerationError(AdapterError):
    """Adapted SVG could not be written."""
