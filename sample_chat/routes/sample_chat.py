"""Sample dialogue segmentation and budget fitting endpoints."""

from fastapi import APIRouter, HTTPException

from sample_chat import config
from sample_chat.budget import InvalidArgumentError, turn_cost
from sample_chat.completion import split_sample_chat
from sample_chat.prompts import expand_placeholders
from sample_chat.segments import segment

from .models import SegmentBody, SplitBody

router = APIRouter()


@router.post("/sample-chat/segment")
async def segment_sample_chat(body: SegmentBody):
    """Split a sample dialogue into turns without fitting a budget."""
    text = expand_placeholders(body.sample_chat, body.char, body.user)
    return {"turns": segment(text, body.char, body.user)}


@router.post("/sample-chat/split")
async def split(body: SplitBody):
    """Segment, fit into budget and convert to chat-completion messages.

    budget and example_role fall back to the configured defaults.
    """
    settings = config.get_settings()
    budget = body.budget if body.budget is not None else settings.default_budget
    example_role = body.example_role or settings.example_message_role
    try:
        result = split_sample_chat(
            body.sample_chat,
            body.char,
            body.user,
            budget=budget,
            cost=turn_cost(settings.chars_per_token),
            example_role=example_role,
        )
    except InvalidArgumentError as e:
        raise HTTPException(400, str(e))
    return result.model_dump(exclude_none=True)
