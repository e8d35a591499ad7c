"""Token budget fitting for sample dialogue turns.

The fitter keeps the newest turns that fit a caller-supplied ceiling. Cost is
measured by an oracle passed in by the caller (usually a model tokenizer);
estimate_tokens() is a heuristic fallback for callers without one.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from .models import FitResult, Turn

logger = logging.getLogger(__name__)

CostOracle = Callable[[Turn], int]

CHARS_PER_TOKEN = 4


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside its accepted range."""


def estimate_tokens(text: str, chars_per_token: int = CHARS_PER_TOKEN) -> int:
    """Approximate token count (about 4 chars per token for English).

    Rounds up so a short non-empty string never costs nothing.
    """
    if chars_per_token <= 0:
        raise InvalidArgumentError(f"chars_per_token must be positive, got {chars_per_token}")
    if not text:
        return 0
    return math.ceil(len(text) / chars_per_token)


def turn_cost(chars_per_token: int = CHARS_PER_TOKEN) -> CostOracle:
    """Build a cost oracle that estimates tokens from a turn's content."""
    if chars_per_token <= 0:
        raise InvalidArgumentError(f"chars_per_token must be positive, got {chars_per_token}")

    def cost(turn: Turn) -> int:
        return estimate_tokens(turn.content, chars_per_token)

    return cost


def fit(turns: list[Turn], budget: int | None, cost: CostOracle) -> FitResult:
    """Select the longest suffix of turns whose total cost fits the budget.

    Walks from the newest turn backwards and stops at the first turn that
    would push the running total past the budget; that turn and everything
    older is dropped. Turns are never truncated. budget=None keeps everything.
    Errors raised by the oracle propagate unchanged.
    """
    if budget is None:
        return FitResult(additions=list(turns), dropped=0)
    if budget < 0:
        raise InvalidArgumentError(f"budget must be non-negative, got {budget}")

    kept: list[Turn] = []
    used = 0
    for turn in reversed(turns):
        turn_total = used + cost(turn)
        if turn_total > budget:
            break
        used = turn_total
        kept.append(turn)
    kept.reverse()

    dropped = len(turns) - len(kept)
    logger.debug("fit budget=%d used=%d kept=%d dropped=%d", budget, used, len(kept), dropped)
    return FitResult(additions=kept, dropped=dropped)
