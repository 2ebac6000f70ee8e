"""Typed errors raised by the breach lookup core."""

from typing import Optional


class BreachCheckError(Exception):
    """Base class for all breach lookup failures."""


class HashFormatError(BreachCheckError, ValueError):
    """Input hash (or prefix) is not hex of the expected length."""


class NetworkError(BreachCheckError):
    """Transport-level failure talking to the range service (timeout, DNS, refused)."""


class RemoteError(BreachCheckError):
    """The range service answered with a non-success status."""

    def __init__(self, status_code: int, reason: Optional[str] = None) -> None:
        self.status_code = status_code
        self.reason = reason
        message = f"Range service returned HTTP {status_code}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
