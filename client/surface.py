"""Chat surface abstraction used by the controller.

A surface shows messages and lets one placeholder be replaced later. Text given
to ``show_text``/``replace_with_text`` is always inert; only markup produced by
``relay.core.markup.render`` goes through ``replace_with_markup``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Protocol

SurfaceRole = Literal["user", "bot"]


class ChatSurface(Protocol):
    def show_text(self, role: SurfaceRole, text: str) -> int:
        """Append a plain-text message and return its handle."""
        ...

    def replace_with_text(self, handle: int, text: str) -> None:
        ...

    def replace_with_markup(self, handle: int, markup: str) -> None:
        ...


@dataclass
class SurfaceEntry:
    role: SurfaceRole
    content: str
    is_markup: bool = False


class TranscriptSurface:
    """In-memory surface; the rendered transcript is kept in ``entries``."""

    def __init__(self) -> None:
        self.entries: List[SurfaceEntry] = []

    def show_text(self, role: SurfaceRole, text: str) -> int:
        self.entries.append(SurfaceEntry(role=role, content=text))
        return len(self.entries) - 1

    def replace_with_text(self, handle: int, text: str) -> None:
        entry = self.entries[handle]
        self.entries[handle] = SurfaceEntry(role=entry.role, content=text)

    def replace_with_markup(self, handle: int, markup: str) -> None:
        entry = self.entries[handle]
        self.entries[handle] = SurfaceEntry(role=entry.role, content=markup, is_markup=True)
