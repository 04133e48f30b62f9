from typing import Optional

__all__ = ("CacheControlError", "ParseError", "ValidationError")


class CacheControlError(Exception): ...


class ParseError(CacheControlError):
    """The header line is not a single ``Cache-Control: value`` pair."""

    def __init__(self, message: str, header: str) -> None:
        super().__init__(message)
        self.header = header


class ValidationError(CacheControlError):
    """A numeric directive carries a missing or malformed value."""

    def __init__(self, message: str, directive: str, value: Optional[str]) -> None:
        super().__init__(message)
        self.directive = directive
        self.value = value
