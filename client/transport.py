from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

import httpx

from config.settings import Settings
from relay.core.errors import RelayError, TransportError
from relay.core.memory import Conversation
from relay.service import RelayErr, RelayService


logger = logging.getLogger("tutor_chat.client")

SERVER_FAILURE_MESSAGE = "Failed to get response from server."
NO_RESPONSE_MESSAGE = "Sorry, no response received."

CHAT_PATH = "/api/chat"


class RelayTransport(Protocol):
    async def exchange(self, conversation: Conversation) -> str:
        """Send the conversation and return the raw reply text.

        Raises TransportError or RelayError.
        """
        ...


def _serialize(conversation: Conversation) -> Dict[str, Any]:
    return {"conversation": [turn.model_dump() for turn in conversation]}


def _extract_result(data: Any) -> str:
    result = data.get("result") if isinstance(data, dict) else None
    if not isinstance(result, str) or not result:
        raise RelayError(NO_RESPONSE_MESSAGE)
    return result


class HttpRelayTransport:
    """Posts the conversation to the relay's ``/api/chat`` endpoint."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._url = base_url.rstrip("/") + CHAT_PATH
        self._timeout = timeout
        self._client = client

    @classmethod
    def from_settings(
        cls, settings: Settings, client: Optional[httpx.AsyncClient] = None
    ) -> "HttpRelayTransport":
        return cls(settings.relay_url, timeout=settings.request_timeout, client=client)

    async def exchange(self, conversation: Conversation) -> str:
        payload = _serialize(conversation)
        try:
            if self._client is not None:
                timeout = httpx.USE_CLIENT_DEFAULT if self._timeout is None else self._timeout
                response = await self._client.post(self._url, json=payload, timeout=timeout)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(self._url, json=payload)
        except Exception as exc:
            logger.error("Fetch error: %s", exc)
            raise TransportError(SERVER_FAILURE_MESSAGE, detail=str(exc)) from exc

        if not response.is_success:
            logger.warning("Relay answered %s: %s", response.status_code, response.text[:500])
            raise TransportError(SERVER_FAILURE_MESSAGE, detail=response.text)

        try:
            data = response.json()
        except ValueError as exc:
            raise TransportError(SERVER_FAILURE_MESSAGE, detail=str(exc)) from exc

        return _extract_result(data)


class LocalRelayTransport:
    """Calls a RelayService in-process with fixed instruction and temperature."""

    def __init__(self, relay: RelayService, instruction: str, temperature: float):
        self._relay = relay
        self._instruction = instruction
        self._temperature = temperature

    async def exchange(self, conversation: Conversation) -> str:
        result = await self._relay.send(conversation, self._instruction, self._temperature)
        if isinstance(result, RelayErr):
            logger.warning("Relay reported error: %s", result.message)
            raise RelayError(SERVER_FAILURE_MESSAGE, detail=result.message)
        if not result.text:
            raise RelayError(NO_RESPONSE_MESSAGE)
        return result.text
