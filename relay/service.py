from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Union

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel

from relay.core.memory import Conversation, Turn


logger = logging.getLogger("tutor_chat.relay")

# Builds a chat model for one call at the requested temperature.
ChatModelFactory = Callable[[float], BaseChatModel]


class RelayOk(BaseModel):
    text: str


class RelayErr(BaseModel):
    message: str


RelayResult = Union[RelayOk, RelayErr]


def gemini_model_factory(model: str, api_key: Optional[str]) -> ChatModelFactory:
    if not api_key:
        raise RuntimeError(
            "GOOGLE_API_KEY not set. Please configure it in environment or .env"
        )

    def build(temperature: float) -> BaseChatModel:
        return ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=temperature,
        )

    return build


def to_lc_message(turn: Turn) -> BaseMessage:
    if turn.role == "user":
        return HumanMessage(content=turn.text)
    return AIMessage(content=turn.text)


def _from_lc_message(message: BaseMessage) -> Turn:
    """Inverse of ``to_lc_message``."""
    if isinstance(message, HumanMessage):
        return Turn(role="user", text=message.content)
    if isinstance(message, AIMessage):
        return Turn(role="model", text=message.content)
    raise ValueError(f"No conversation role for message type {message.type!r}")


def to_lc_messages(conversation: Iterable[Turn]) -> List[BaseMessage]:
    """Map every turn, in order; nothing is dropped or truncated."""
    return [to_lc_message(turn) for turn in conversation]


def _reply_text(reply: BaseMessage) -> Optional[str]:
    content = reply.content
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        texts = []
        for part in content:
            if isinstance(part, str):
                texts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                texts.append(str(part.get("text", "")))
        if texts:
            return "".join(texts)
    return None


class RelayService:
    """Forwards a conversation to the language model in a single attempt."""

    def __init__(self, model_factory: ChatModelFactory):
        self._model_factory = model_factory

    async def send(
        self,
        conversation: Conversation,
        instruction: str,
        temperature: float,
    ) -> RelayResult:
        messages: List[BaseMessage] = []
        if instruction:
            messages.append(SystemMessage(content=instruction))
        messages.extend(to_lc_messages(conversation))

        try:
            llm = self._model_factory(temperature)
            reply = await llm.ainvoke(messages)
        except Exception as exc:
            logger.warning("Language model call failed: %s", exc)
            return RelayErr(message=str(exc) or exc.__class__.__name__)

        text = _reply_text(reply)
        if text is None:
            logger.warning("Language model returned unusable content: %r", type(reply.content))
            return RelayErr(message="Malformed response from language model")

        logger.info("Model responded with %s chars", len(text))
        return RelayOk(text=text)
