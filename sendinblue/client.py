"""SendInBlue transactional email client."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx

from .errors import EncodingError, RejectedError, TransmissionError
from .types import Message, SendInBlueConfig

logger = logging.getLogger(__name__)


class SendInBlueClient:
    """Sends emails via the SendInBlue ``/v3/smtp/email`` endpoint.

    Usage::

        with SendInBlueClient(SendInBlueConfig(api_key="xkeysib-...")) as client:
            client.send(Message(
                sender=Address("noreply@example.com", "My App"),
                to=[Address("user@example.com")],
                subject="Welcome",
                text_content="Hello!",
            ))

    ``send`` returns ``None`` on success and raises a ``SendInBlueError``
    subclass otherwise. Nothing is retried.
    """

    def __init__(self, config: SendInBlueConfig, *, http_client: httpx.Client | None = None) -> None:
        self._api_key = config.api_key
        self._api_url = config.api_url
        # An injected client belongs to the caller and is left open.
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=config.timeout)

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> SendInBlueClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> SendInBlueClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        self.close()

    def send(self, message: Message) -> None:
        """Send an email via SendInBlue.

        Raises:
            EncodingError: The message could not be serialized.
            TransmissionError: The request did not get a response.
            RejectedError: The response status was not 201 Created.
        """
        body = _encode(message)
        headers = {
            "api-key": self._api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        try:
            with self._client.stream("POST", self._api_url, content=body, headers=headers) as response:
                if response.status_code == 201:
                    logger.info("Email sent via SendInBlue to %s", [address.email for address in message.recipients])
                    return
                rejection, response_text = _rejection(response)
        except httpx.HTTPError as exc:
            logger.warning("Failed to transmit email to SendInBlue: %s", exc)
            raise TransmissionError(f"failed to transmit message: {exc}") from exc

        logger.error(
            "SendInBlue send failed. Status: %s %s, Body: %s",
            rejection.status_code,
            rejection.reason,
            response_text,
        )
        raise rejection

    async def send_async(self, message: Message) -> None:
        """Send an email asynchronously (runs sync send in a thread)."""
        await asyncio.to_thread(self.send, message)


def send(message: Message, api_key: str, *, http_client: httpx.Client | None = None) -> None:
    """Send a single email with a short-lived client.

    When ``http_client`` is given it is used as the transport and left
    open; the caller owns it.
    """
    with SendInBlueClient(SendInBlueConfig(api_key=api_key), http_client=http_client) as client:
        client.send(message)


def _encode(message: Message) -> bytes:
    """Serialize a message to the JSON request body."""
    try:
        return json.dumps(message.to_dict()).encode("utf-8")
    except (TypeError, ValueError) as exc:
        logger.warning("Failed to encode email message: %s", exc)
        raise EncodingError(f"failed to encode message: {exc}") from exc


def _rejection(response: httpx.Response) -> tuple[RejectedError, str]:
    """Build the error for a non-201 response, keeping any provider detail.

    The status alone decides the rejection; a body that cannot be read or
    parsed only loses the detail.
    """
    code: str | None = None
    detail: str | None = None
    try:
        response.read()
        text = response.text
        data = response.json()
    except httpx.HTTPError as exc:
        logger.warning("Failed to read SendInBlue error body: %s", exc)
        text = ""
        data = None
    except ValueError:
        data = None
    if isinstance(data, dict):
        code = str(data["code"]) if data.get("code") is not None else None
        detail = str(data["message"]) if data.get("message") is not None else None
    return RejectedError(response.status_code, response.reason_phrase, code=code, detail=detail), text
