"""HDPathError — base exception class for all hdpath errors."""

from __future__ import annotations


class HDPathError(Exception):
    """Base error for all recoverable HD path failures.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code string.
    """

    def __init__(self, message: str, *, code: str = "hdpath-error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code
