"""Submission flow for one chat session.

Each ``submit`` call moves through Idle -> Submitting -> Rendering | Failed -> Idle.
Conversation history lives in the controller's own ConversationStore and is
the only state kept between submissions.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from client.surface import ChatSurface, TranscriptSurface
from client.transport import RelayTransport
from relay.core.errors import ChatError
from relay.core.markup import render
from relay.core.memory import ConversationStore, Turn


logger = logging.getLogger("tutor_chat.client")

PLACEHOLDER_TEXT = "Thinking..."


class ChatState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    RENDERING = "rendering"
    FAILED = "failed"


class SubmissionStatus(str, Enum):
    REJECTED = "rejected"
    RENDERED = "rendered"
    FAILED = "failed"


class RenderResult(BaseModel):
    status: SubmissionStatus
    markup: Optional[str] = None
    message: Optional[str] = None


class ChatController:
    """Owns one session's conversation and drives it against a relay transport.

    Submissions are serialized: a second ``submit`` waits for the one in flight
    to finish, so each request carries the history of every earlier exchange.
    """

    def __init__(
        self,
        transport: RelayTransport,
        surface: Optional[ChatSurface] = None,
        store: Optional[ConversationStore] = None,
    ):
        self._transport = transport
        self._surface = surface if surface is not None else TranscriptSurface()
        self._store = store if store is not None else ConversationStore()
        self._lock = asyncio.Lock()
        self.state = ChatState.IDLE

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def surface(self) -> ChatSurface:
        return self._surface

    async def submit(self, text: str) -> RenderResult:
        user_text = (text or "").strip()
        if not user_text:
            return RenderResult(status=SubmissionStatus.REJECTED)

        async with self._lock:
            try:
                return await self._exchange(user_text)
            finally:
                self.state = ChatState.IDLE

    async def _exchange(self, user_text: str) -> RenderResult:
        self.state = ChatState.SUBMITTING
        self._surface.show_text("user", user_text)
        self._store.append(Turn(role="user", text=user_text))
        placeholder = self._surface.show_text("bot", PLACEHOLDER_TEXT)

        try:
            reply = await self._transport.exchange(self._store.snapshot())
        except ChatError as exc:
            self.state = ChatState.FAILED
            logger.warning("Submission failed: %s (%s)", exc.message, exc.detail)
            self._surface.replace_with_text(placeholder, exc.message)
            return RenderResult(status=SubmissionStatus.FAILED, message=exc.message)

        self.state = ChatState.RENDERING
        markup = render(reply)
        self._surface.replace_with_markup(placeholder, markup)
        # Raw reply, not the markup, is what the model sees next turn.
        self._store.append(Turn(role="model", text=reply))
        return RenderResult(status=SubmissionStatus.RENDERED, markup=markup)
