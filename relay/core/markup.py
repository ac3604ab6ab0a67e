"""Line-oriented markdown to HTML conversion for model replies.

Only a small subset is understood: ``**bold**``, ``*italic*``, flat ``* ``/``- ``
bullet lists and ``---`` rules. Every line is handled on its own in a single
pass; the only state carried between lines is whether a list is open.

All literal text is HTML-escaped before any tag is added, so the tags written
here are the only active markup in the result.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
ITALIC_RE = re.compile(r"\*(.*?)\*")

LIST_MARKERS = ("* ", "- ")
RULE = "---"

LIST_OPEN = "<ul>"
LIST_CLOSE = "</ul>"
LINE_BREAK = "<br>"
HORIZONTAL_RULE = "<hr>"


@dataclass
class RenderState:
    inside_list: bool = False


def render_inline(text: str) -> str:
    """Escape ``text`` and apply bold, then italic, substitutions."""
    escaped = html.escape(text, quote=True)
    escaped = BOLD_RE.sub(r"<strong>\1</strong>", escaped)
    return ITALIC_RE.sub(r"<em>\1</em>", escaped)


def render(raw: str) -> str:
    """Convert raw model text into HTML for the chat surface.

    Structure is decided on the trimmed source line: a bullet marker opens (or
    continues) a list, ``---`` becomes a rule, anything else is emitted with a
    trailing ``<br>``. A list still open at the end of input is closed, and a
    single trailing ``<br>`` is dropped.
    """
    state = RenderState()
    parts = []

    for line in raw.split("\n"):
        trimmed = line.strip()

        if trimmed.startswith(LIST_MARKERS):
            if not state.inside_list:
                parts.append(LIST_OPEN)
                state.inside_list = True
            parts.append(f"<li>{render_inline(trimmed[2:])}</li>")
            continue

        if state.inside_list:
            parts.append(LIST_CLOSE)
            state.inside_list = False

        if trimmed == RULE:
            parts.append(HORIZONTAL_RULE)
        else:
            parts.append(render_inline(line) + LINE_BREAK)

    if state.inside_list:
        parts.append(LIST_CLOSE)

    output = "".join(parts)
    if output.endswith(LINE_BREAK):
        output = output[: -len(LINE_BREAK)]
    return output
