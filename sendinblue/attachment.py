"""Attachment construction helpers."""

from __future__ import annotations

import base64
import logging
from typing import IO

from .errors import ReadError
from .types import Attachment

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


def inline_attachment(name: str, stream: IO[bytes]) -> Attachment:
    """Build an attachment whose content is embedded as Base64.

    The stream is read to exhaustion but not closed; closing it is up to
    the caller.

    Raises:
        ReadError: If the stream is closed, fails mid-read or does not yield bytes.
    """
    chunks: list[bytes] = []
    try:
        while True:
            chunk = stream.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            if not isinstance(chunk, (bytes, bytearray, memoryview)):
                raise ReadError(f"attachment {name!r} source yielded {type(chunk).__name__}, expected bytes")
            chunks.append(bytes(chunk))
    except (OSError, ValueError) as exc:
        logger.warning("Failed to read attachment %s: %s", name, exc)
        raise ReadError(f"failed to read attachment {name!r}: {exc}") from exc

    content = base64.b64encode(b"".join(chunks)).decode("ascii")
    return Attachment(name=name, content=content)


def url_attachment(name: str, url: str) -> Attachment:
    """Build an attachment that SendInBlue fetches from ``url``."""
    return Attachment(name=name, url=url)
