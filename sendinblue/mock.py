"""Mock email client for testing.

Records all sent messages and optionally fails with a configured error.
Useful for unit testing code that sends email without reaching
SendInBlue.
"""

from __future__ import annotations

from .errors import SendInBlueError
from .types import Message


class MockClient:
    """Test client that records messages instead of sending them.

    Usage::

        client = MockClient()
        client.send(Message(sender=Address("noreply@example.com"), subject="hi"))
        assert len(client.sent) == 1
        assert client.sent[0].subject == "hi"

    Configure a failure::

        client = MockClient(error=RejectedError(400, "Bad Request"))
        client.send(...)  # raises RejectedError, nothing is recorded
    """

    def __init__(self, *, error: SendInBlueError | None = None) -> None:
        self.error = error
        self.sent: list[Message] = []

    def send(self, message: Message) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append(message)

    async def send_async(self, message: Message) -> None:
        self.send(message)

    def reset(self) -> None:
        """Clear all recorded messages."""
        self.sent.clear()
