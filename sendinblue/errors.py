"""Errors raised by the SendInBlue client."""

from __future__ import annotations


class SendInBlueError(RuntimeError):
    """Base class for every error raised by this library."""

    @property
    def retryable(self) -> bool:
        """Whether sending the same message again may succeed."""
        return False


class ReadError(SendInBlueError):
    """Raised when an attachment source cannot be read to the end."""


class EncodingError(SendInBlueError):
    """Raised when a message cannot be serialized to JSON."""


class TransmissionError(SendInBlueError):
    """Raised when the HTTP exchange fails before a response arrives."""

    @property
    def retryable(self) -> bool:
        return True


class RejectedError(SendInBlueError):
    """Raised when SendInBlue answers with anything other than 201 Created."""

    def __init__(
        self,
        status_code: int,
        reason: str,
        *,
        code: str | None = None,
        detail: str | None = None,
    ) -> None:
        message = f"send failed: {status_code} {reason}"
        if detail:
            message = f"{message} ({code}: {detail})" if code else f"{message} ({detail})"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.code = code
        self.detail = detail

    @property
    def retryable(self) -> bool:
        return self.status_code == 429 or self.status_code >= 500
