"""Placeholder expansion for sample dialogue."""

from __future__ import annotations

import re

# {{char}} / {{user}}, any casing, optional inner whitespace
_PLACEHOLDER_RE = re.compile(r"\{\{\s*(char|user)\s*\}\}", re.IGNORECASE)


def expand_placeholders(transcript: str, char_name: str, user_name: str) -> str:
    """Substitute {{char}} and {{user}} in a sample dialogue.

    Only those two tokens are replaced; every other byte, including stray
    braces and unknown {{words}}, is left as authored. Never raises.
    """
    names = {"char": char_name, "user": user_name}
    return _PLACEHOLDER_RE.sub(lambda m: names[m.group(1).lower()], transcript)
