"""Sample dialogue segmentation and token-budget fitting.

Turns a character's example dialogue into role-tagged turns, keeps the newest
turns that fit a token budget, and converts them to chat-completion messages.

Transcript format (parsed by segment):
  Scene-setting text before the first speaker line.
  <START>
  User: What the user says.
  Character: What the character says.
  System: An explicit system note.
"""

from .budget import (  # noqa: F401
    CostOracle,
    InvalidArgumentError,
    estimate_tokens,
    fit,
    turn_cost,
)
from .completion import split_sample_chat, to_completion_messages  # noqa: F401
from .models import (  # noqa: F401
    MARKER_NOTICE,
    CompletionMessage,
    FitResult,
    SampleChat,
    Turn,
)
from .prompts import expand_placeholders  # noqa: F401
from .segments import segment, turns_to_text  # noqa: F401
