"""Error taxonomy shared by the relay server and the chat client.

Every failure is caught at the boundary that detects it and turned into a
user-visible message; nothing here is retried.
"""

from __future__ import annotations

from typing import Optional


class ChatError(Exception):
    """Base class for chat failures.

    Attributes:
        message: user-readable text, safe to show in the chat surface.
        detail: the original error description, kept for logs.
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class ChatValidationError(ChatError):
    """Request body does not have the expected conversation shape."""


class TransportError(ChatError):
    """Network or HTTP failure while reaching the relay."""


class RelayError(ChatError):
    """The language model failed or returned no usable result."""
