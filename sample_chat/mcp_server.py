"""FastMCP server exposing sample dialogue splitting as an MCP tool.

Tools:
  - split_sample_chat(sample_chat, char, user, budget, example_role)
      — segment, fit and convert a sample dialogue to chat messages

Turns are costed with the configured chars-per-token estimate.

Usage:
    uv run python -m sample_chat.mcp_server
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from sample_chat import completion, config
from sample_chat.budget import turn_cost
from sample_chat.models import ExampleRole

mcp = FastMCP("sample-chat")


@mcp.tool()
def split_sample_chat(
    sample_chat: str,
    char: Annotated[str, Field(min_length=1)],
    user: Annotated[str, Field(min_length=1)],
    budget: int | None = None,
    example_role: ExampleRole = "system",
) -> dict:
    """Split a character's sample dialogue into chat messages that fit the token budget."""
    settings = config.get_settings()
    result = completion.split_sample_chat(
        sample_chat,
        char,
        user,
        budget=budget,
        cost=turn_cost(settings.chars_per_token),
        example_role=example_role,
    )
    return result.model_dump(exclude_none=True)


if __name__ == "__main__":
    import os
    from pathlib import Path

    from dotenv import load_dotenv

    load_dotenv()
    config.init_config(Path(os.getenv("DATA_DIR", "data")))
    mcp.run()
