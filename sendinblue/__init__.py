"""
sendinblue — Transactional email client for the SendInBlue v3 API.

Builds an email description (sender, recipients, content, attachments,
template bindings, tags), serializes it to SendInBlue's JSON shape and
POSTs it to ``https://api.sendinblue.com/v3/smtp/email``. A send either
succeeds (``201 Created``) or raises a typed error.

Installation::

    pip install sendinblue-client

Quick start::

    from sendinblue import Address, Message, SendInBlueClient, SendInBlueConfig

    with SendInBlueClient(SendInBlueConfig(api_key="xkeysib-...")) as client:
        client.send(Message(
            sender=Address("noreply@example.com", "My App"),
            to=[Address("user@example.com", "User")],
            subject="Welcome",
            html_content="<h1>Hello!</h1>",
        ))

One-shot send::

    from sendinblue import send

    send(message, api_key="xkeysib-...")

Inline attachment::

    from sendinblue import inline_attachment

    with open("invoice.pdf", "rb") as fh:
        attachment = inline_attachment("invoice.pdf", fh)
    message = Message(sender=..., to=[...], attachments=[attachment], ...)

Template send::

    Message(
        sender=Address("noreply@example.com"),
        to=[Address("user@example.com")],
        template_id=12,
        params={"ORDER": "1234"},
    )

Handling failures::

    from sendinblue import RejectedError, SendInBlueError

    try:
        client.send(message)
    except RejectedError as exc:
        print(exc.status_code, exc.reason, exc.detail)
    except SendInBlueError as exc:
        if exc.retryable:
            ...

For testing::

    from sendinblue import MockClient

    client = MockClient()
    client.send(message)
    assert len(client.sent) == 1

Module overview
---------------
- ``types``       — Address, Attachment, Message, SendInBlueConfig
- ``attachment``  — inline_attachment (Base64) and url_attachment
- ``client``      — SendInBlueClient and the one-shot ``send``
- ``errors``      — SendInBlueError and its subclasses
- ``base``        — EmailSender protocol
- ``mock``        — MockClient

What this library does NOT own (stays in the consuming app):
- Queuing, batching and retry/backoff
- API key storage
- Template management and address validation
"""

from .attachment import inline_attachment, url_attachment
from .base import EmailSender
from .client import SendInBlueClient, send
from .errors import EncodingError, ReadError, RejectedError, SendInBlueError, TransmissionError
from .mock import MockClient
from .types import SENDINBLUE_API_URL, Address, Attachment, Message, SendInBlueConfig

__all__ = [
    # Client
    "EmailSender",
    "SendInBlueClient",
    "MockClient",
    "send",
    # Attachments
    "inline_attachment",
    "url_attachment",
    # Types
    "Address",
    "Attachment",
    "Message",
    "SendInBlueConfig",
    "SENDINBLUE_API_URL",
    # Errors
    "SendInBlueError",
    "EncodingError",
    "ReadError",
    "RejectedError",
    "TransmissionError",
]
