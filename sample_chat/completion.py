"""Sample dialogue → chat-completion messages.

Full pipeline for one character's example dialogue:
  1. Expand {{char}} / {{user}} placeholders (Handlebars).
  2. Segment the transcript into role-tagged turns.
  3. Fit the newest turns into the token budget.
  4. Convert the kept turns into chat-completion messages.

Example message roles:
  system          — every turn is sent as a system message; user and
                    character turns carry name="example_user" /
                    "example_assistant" so the model treats them as examples
                    rather than real conversation.
  user_assistant  — turns map onto real user / assistant / system roles.
"""

from __future__ import annotations

from .budget import CostOracle, InvalidArgumentError, fit, turn_cost
from .models import CompletionMessage, ExampleRole, SampleChat, Turn
from .prompts import expand_placeholders
from .segments import segment

EXAMPLE_ROLES: tuple[str, ...] = ("system", "user_assistant")

_EXAMPLE_NAMES = {
    "user": "example_user",
    "character": "example_assistant",
}

_CHAT_ROLES = {
    "system": "system",
    "user": "user",
    "character": "assistant",
}


def _check_example_role(example_role: str) -> None:
    if example_role not in EXAMPLE_ROLES:
        raise InvalidArgumentError(
            f"example_role must be one of {', '.join(EXAMPLE_ROLES)}, got {example_role!r}"
        )


def to_completion_messages(turns: list[Turn], example_role: ExampleRole = "system") -> list[CompletionMessage]:
    """Convert turns into chat-completion messages for the given role style."""
    _check_example_role(example_role)

    messages: list[CompletionMessage] = []
    for turn in turns:
        if example_role == "system":
            messages.append(CompletionMessage(
                role="system",
                content=turn.content,
                name=_EXAMPLE_NAMES.get(turn.role),
            ))
        else:
            messages.append(CompletionMessage(role=_CHAT_ROLES[turn.role], content=turn.content))
    return messages


def split_sample_chat(
    sample_chat: str,
    char_name: str,
    user_name: str,
    budget: int | None = None,
    cost: CostOracle | None = None,
    example_role: ExampleRole = "system",
) -> SampleChat:
    """Run the full pipeline and return the kept turns as messages.

    Without a cost oracle, turns are costed with the chars-per-token
    heuristic. Raises InvalidArgumentError for an empty name, a negative
    budget or an unknown example role. Never fails on the transcript itself.
    """
    if not char_name or not user_name:
        raise InvalidArgumentError("char_name and user_name must be non-empty")
    _check_example_role(example_role)
    if budget is not None and budget < 0:
        raise InvalidArgumentError(f"budget must be non-negative, got {budget}")

    text = expand_placeholders(sample_chat, char_name, user_name)
    turns = segment(text, char_name, user_name)
    result = fit(turns, budget, cost or turn_cost())
    return SampleChat(
        messages=to_completion_messages(result.additions, example_role),
        turns=result.additions,
        dropped=result.dropped,
    )
