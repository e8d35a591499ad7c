"""Core domain models.

The segmenter, the budget fitter and the completion adapter all operate on
these types. Pydantic is used for validation and serialisation at every data
boundary (HTTP bodies, MCP tool results, CLI output).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "character"]

ExampleRole = Literal["system", "user_assistant"]

SYSTEM_NAME = "System"

MARKER_NOTICE = "New conversation started. Previous conversations are examples only."


class Turn(BaseModel):
    """One atomic, role-tagged utterance from a sample dialogue."""

    model_config = ConfigDict(frozen=True)

    role: Role
    name: str  # "System" | <user name> | <character name>
    content: str

    @property
    def is_marker(self) -> bool:
        """True for the notice emitted in place of a <START> line."""
        return self.role == "system" and self.name == SYSTEM_NAME and self.content == MARKER_NOTICE


class FitResult(BaseModel):
    """Turns kept by the budget fitter, plus how many older ones were cut."""

    additions: list[Turn] = Field(default_factory=list)
    dropped: int = 0


class CompletionMessage(BaseModel):
    """A chat-completion message ready for a provider request."""

    role: Literal["system", "user", "assistant"]
    content: str
    name: str | None = None


class SampleChat(BaseModel):
    """Result of the full expand → segment → fit → convert pipeline."""

    messages: list[CompletionMessage] = Field(default_factory=list)
    turns: list[Turn] = Field(default_factory=list)
    dropped: int = 0
