"""Session conversation memory.

The server stays stateless: the client owns one ConversationStore per session
and replays the whole history on every call. Stores are never shared across
sessions.
"""

from __future__ import annotations

from typing import List, Literal, Tuple

from pydantic import BaseModel, ConfigDict


Role = Literal["user", "model"]


class Turn(BaseModel):
    """One utterance in the conversation, tagged with its speaker role."""

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str


Conversation = Tuple[Turn, ...]


class ConversationStore:
    """Append-only, ordered log of turns for a single session."""

    def __init__(self) -> None:
        self._turns: List[Turn] = []

    def append(self, turn: Turn) -> None:
        self._turns.append(turn)

    def snapshot(self) -> Conversation:
        # Tuple copy: later appends are invisible to holders of a snapshot.
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)
