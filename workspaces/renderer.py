"""Text rendering of workspace rows and parsing of picked lines."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

from core.errors import FormatError
from world_model.desktop_state import DisplayRow

_MARKUP_TAG = re.compile(r"<[^<>]*>")
_INDEX_TOKEN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Selection:
    """A parsed ``index: label`` line."""

    index: int
    label: str


def render_lines(rows: list[DisplayRow], highlight_color: str | None = None) -> list[str]:
    """Format rows as ``N: label``; wrap the active row in Pango markup when coloured.

    With a colour the whole feed is markup, so every label is escaped.
    """
    lines: list[str] = []
    for row in rows:
        label = html.escape(row.label, quote=False) if highlight_color else row.label
        line = f"{row.number}: {label}"
        if highlight_color and row.active:
            line = f"<span foreground='{highlight_color}'>{line}</span>"
        lines.append(line)
    return lines


def render_list_entries(rows: list[DisplayRow], active_marker: str = "*") -> list[str]:
    """Entries for the terminal list; the active one is padded and marked."""
    entries = [f"({row.number}) {row.label}" for row in rows]
    width = max((len(entry) for entry in entries), default=0)
    return [
        f"{entry:<{width}}  {active_marker}" if row.active else entry
        for row, entry in zip(rows, entries)
    ]


def parse_selection(line: str) -> Selection:
    """Parse a line emitted by the fuzzy finder or typed on stdin.

    Only the first colon is significant; everything after it is the label.
    """
    text = _MARKUP_TAG.sub("", line).strip()
    if not text:
        raise FormatError("empty input")
    head, sep, tail = text.partition(":")
    if not sep:
        raise FormatError("invalid format: expected 'idx: name'")
    token = head.strip()
    if not _INDEX_TOKEN.fullmatch(token):
        raise FormatError(f"invalid workspace index: {token!r}")
    index = int(token)
    return Selection(index=index, label=html.unescape(tail.strip()))
