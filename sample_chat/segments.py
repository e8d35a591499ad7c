"""Sample dialogue parsing into role-tagged turns."""

from __future__ import annotations

import logging

from .models import MARKER_NOTICE, SYSTEM_NAME, Role, Turn

logger = logging.getLogger(__name__)

START_MARKER = "<start>"


def _is_marker(stripped: str) -> bool:
    return stripped.lower() == START_MARKER


def _match_speaker(stripped: str, labels: list[tuple[str, Role]]) -> tuple[str, Role, str] | None:
    """Return (name, role, remainder) if the line opens with a known label."""
    for name, role in labels:
        prefix = f"{name}:"
        if stripped.startswith(prefix):
            return name, role, stripped[len(prefix):].lstrip()
    return None


def segment(transcript: str, char_name: str, user_name: str) -> list[Turn]:
    """Split a sample dialogue transcript into turns.

    Line rules, in priority order:
      <START> (any casing)  — new-conversation marker, emitted as its own
                              system turn with a fixed notice.
      Label: text           — opens a new turn. Labels are "System", the user
                              name and the character name, matched
                              case-sensitively so ordinary sentences holding a
                              colon are not mistaken for attributions.
      anything else         — continues the open turn, or accumulates as
                              preamble when no turn is open.

    Preamble text (before the first speaker line, or between a marker and the
    next speaker line) becomes a system turn of its own. Turns whose content
    is blank are dropped. Never raises; empty input yields [].
    """
    if not transcript or not transcript.strip():
        return []

    labels: list[tuple[str, Role]] = [
        (SYSTEM_NAME, "system"),
        (user_name, "user"),
        (char_name, "character"),
    ]

    turns: list[Turn] = []
    preamble: list[str] = []
    current: tuple[str, Role] | None = None
    current_lines: list[str] = []

    def close_current() -> None:
        nonlocal current, current_lines
        if current is not None:
            content = "\n".join(current_lines).strip()
            if content:
                name, role = current
                turns.append(Turn(role=role, name=name, content=content))
        current = None
        current_lines = []

    def flush_preamble() -> None:
        content = "\n".join(preamble).strip()
        if content:
            turns.append(Turn(role="system", name=SYSTEM_NAME, content=content))
        preamble.clear()

    text = transcript.replace("\r\n", "\n").replace("\r", "\n")
    for line in text.split("\n"):
        stripped = line.strip()

        if _is_marker(stripped):
            close_current()
            flush_preamble()
            turns.append(Turn(role="system", name=SYSTEM_NAME, content=MARKER_NOTICE))
            continue

        speaker = _match_speaker(stripped, labels)
        if speaker is not None:
            close_current()
            flush_preamble()
            name, role, remainder = speaker
            current = (name, role)
            current_lines = [remainder]
            continue

        if current is not None:
            current_lines.append(line.rstrip())
        else:
            preamble.append(line.rstrip())

    close_current()
    flush_preamble()

    logger.debug("segmented sample chat len=%d turns=%d", len(transcript), len(turns))
    return turns


def turns_to_text(turns: list[Turn]) -> str:
    """Convert turns back to transcript text for text-completion prompts."""
    parts: list[str] = []
    for turn in turns:
        if turn.is_marker:
            parts.append("<START>")
        else:
            parts.append(f"{turn.name}: {turn.content}")
    return "\n".join(parts)
