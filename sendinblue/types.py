"""Core types for the SendInBlue email client.

Every type serializes itself to the SendInBlue v3 JSON shape with
``to_dict()``. Optional fields are omitted from the wire payload when
empty instead of being sent as ``null`` or ``[]``; only ``sender`` is
always present.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SENDINBLUE_API_URL = "https://api.sendinblue.com/v3/smtp/email"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class Address:
    """A display name plus an email address. Neither is validated here."""

    email: str
    name: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Address:
        return cls(email=data.get("email", ""), name=data.get("name", ""))


@dataclass(frozen=True, slots=True)
class Attachment:
    """A file attached to a message.

    Content comes from exactly one source: ``url`` (fetched by SendInBlue)
    or ``content`` (the file bytes as a Base64 string). Setting both is
    not rejected locally, but the provider's behavior is then undefined.
    """

    name: str
    url: str = ""
    content: str = ""

    def to_dict(self) -> dict[str, str]:
        result = {"name": self.name}
        if self.url:
            result["url"] = self.url
        if self.content:
            result["content"] = self.content
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Attachment:
        return cls(
            name=data.get("name", ""),
            url=data.get("url", ""),
            content=data.get("content", ""),
        )


@dataclass(frozen=True, slots=True)
class Message:
    """A transactional email to send through SendInBlue.

    ``sender`` is required by the provider; an empty one is rejected
    remotely, not here. When ``template_id`` is set the body comes from the
    provider-side template and ``params`` fills its variables, so
    ``html_content``/``text_content`` may be left empty.
    """

    sender: Address
    to: list[Address] = field(default_factory=list)
    cc: list[Address] = field(default_factory=list)
    bcc: list[Address] = field(default_factory=list)
    html_content: str = ""
    text_content: str = ""
    subject: str = ""
    reply_to: Address | None = None
    attachments: list[Attachment] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)
    template_id: int | None = None
    params: dict[str, str] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)

    @property
    def recipients(self) -> list[Address]:
        """All recipients in to, cc, bcc order."""
        return [*self.to, *self.cc, *self.bcc]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the SendInBlue ``/v3/smtp/email`` request body."""
        result: dict[str, Any] = {"sender": self.sender.to_dict()}

        if self.to:
            result["to"] = [address.to_dict() for address in self.to]
        if self.cc:
            result["cc"] = [address.to_dict() for address in self.cc]
        if self.bcc:
            result["bcc"] = [address.to_dict() for address in self.bcc]
        if self.html_content:
            result["htmlContent"] = self.html_content
        if self.text_content:
            result["textContent"] = self.text_content
        if self.subject:
            result["subject"] = self.subject
        if self.reply_to is not None:
            result["replyTo"] = self.reply_to.to_dict()
        # The API names this key in the singular even though it takes a list.
        if self.attachments:
            result["attachment"] = [attachment.to_dict() for attachment in self.attachments]
        if self.headers:
            result["headers"] = dict(self.headers)
        if self.template_id:
            result["templateId"] = self.template_id
        if self.params:
            result["params"] = dict(self.params)
        if self.tags:
            result["tags"] = list(self.tags)

        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        """Parse a request body produced by ``to_dict`` back into a Message."""
        reply_to = data.get("replyTo")
        return cls(
            sender=Address.from_dict(data.get("sender", {})),
            to=[Address.from_dict(item) for item in data.get("to", [])],
            cc=[Address.from_dict(item) for item in data.get("cc", [])],
            bcc=[Address.from_dict(item) for item in data.get("bcc", [])],
            html_content=data.get("htmlContent", ""),
            text_content=data.get("textContent", ""),
            subject=data.get("subject", ""),
            reply_to=Address.from_dict(reply_to) if reply_to is not None else None,
            attachments=[Attachment.from_dict(item) for item in data.get("attachment", [])],
            headers=dict(data.get("headers", {})),
            template_id=data.get("templateId"),
            params=dict(data.get("params", {})),
            tags=list(data.get("tags", [])),
        )


# ── Client configuration ──────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SendInBlueConfig:
    """Configuration for creating a SendInBlue client."""

    api_key: str
    api_url: str = SENDINBLUE_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
