"""
Exceptions raised by the debate response scorer
"""


class DebateScorerError(Exception):
    """Base class for all scorer errors."""


class EmptyResponseError(DebateScorerError, ValueError):
    """Raised when the response text is empty or whitespace-only."""


class ResponseTooLongError(DebateScorerError, ValueError):
    """Raised when the response exceeds the configured character limit."""

    def __init__(self, length: int, limit: int):
        super().__init__(f"Response is {length} characters long; the limit is {limit}")
        self.length = length
        self.limit = limit


class ConfigurationError(DebateScorerError):
    """Raised when a rubric or settings file fails validation at load time."""
