"""Base protocol for email senders."""

from __future__ import annotations

from typing import Protocol

from sendinblue.types import Message


class EmailSender(Protocol):
    """Interface shared by ``SendInBlueClient`` and ``MockClient``."""

    def send(self, message: Message) -> None:
        """Send an email, raising a ``SendInBlueError`` on failure."""
        ...
