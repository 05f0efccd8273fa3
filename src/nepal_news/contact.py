"""Contact form validation and submission to a hosted form backend."""

from __future__ import annotations

import logging
import re

import httpx
from pydantic import BaseModel, field_validator

from nepal_news.errors import ContactSubmissionError

logger = logging.getLogger(__name__)

FORMSPREE_ENDPOINT = "https://formspree.io/f/xreezddl"

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ContactMessage(BaseModel):
    """A validated contact form submission. All fields are trimmed."""

    name: str
    email: str
    message: str

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        if len(v) > 100:
            raise ValueError("Name is too long")
        return v

    @field_validator("email")
    @classmethod
    def email_format(cls, v: str) -> str:
        v = v.strip()
        if not _EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        if len(v) > 255:
            raise ValueError("Email is too long")
        return v

    @field_validator("message")
    @classmethod
    def message_length(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Message is required")
        if len(v) > 1000:
            raise ValueError("Message is too long")
        return v


class ContactSubmitter:
    """Posts contact messages to a form-handling endpoint. No retries.

    Args:
        endpoint: Form backend URL accepting a JSON POST.
        timeout: Request timeout in seconds.
    """

    def __init__(self, *, endpoint: str = FORMSPREE_ENDPOINT, timeout: float = 30.0) -> None:
        self._endpoint = endpoint
        self._timeout = timeout

    async def submit(
        self,
        message: ContactMessage,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Send ``message`` once.

        Raises:
            ContactSubmissionError: On network failure or a non-2xx response.
        """
        if client is None:
            async with httpx.AsyncClient(timeout=self._timeout) as own_client:
                await self._submit(own_client, message)
            return
        await self._submit(client, message)

    async def _submit(self, client: httpx.AsyncClient, message: ContactMessage) -> None:
        try:
            response = await client.post(self._endpoint, json=message.model_dump())
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Contact submission failed: %s", e)
            raise ContactSubmissionError("Failed to send message") from e
        logger.info("Contact message sent")
