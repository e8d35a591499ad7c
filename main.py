"""Sample Chat — CLI launcher. Splits a transcript, or serves the API / MCP server."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "13015"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


def _read_transcript(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text()


def split_command(args: argparse.Namespace) -> int:
    from sample_chat import InvalidArgumentError, config, split_sample_chat, turn_cost, turns_to_text

    settings = config.get_settings()
    budget = args.budget if args.budget is not None else settings.default_budget
    example_role = args.example_role or settings.example_message_role
    try:
        result = split_sample_chat(
            _read_transcript(args.transcript),
            args.char,
            args.user,
            budget=budget,
            cost=turn_cost(settings.chars_per_token),
            example_role=example_role,
        )
    except InvalidArgumentError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.format == "text":
        print(turns_to_text(result.turns))
    elif args.format == "turns":
        print(json.dumps(
            {"turns": [t.model_dump() for t in result.turns], "dropped": result.dropped},
            indent=2,
        ))
    else:
        print(json.dumps(result.model_dump(exclude_none=True), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sample Chat launcher")
    parser.add_argument("transcript", nargs="?",
                        help="Sample dialogue file to split ('-' for stdin)")
    parser.add_argument("--char", help="Character name")
    parser.add_argument("--user", help="User name")
    parser.add_argument("--budget", type=int, default=None,
                        help="Token budget (default: config default_budget)")
    parser.add_argument("--example-role", choices=["system", "user_assistant"], default=None,
                        help="How example turns map to chat roles (default: config)")
    parser.add_argument("--format", choices=["messages", "turns", "text"], default="messages")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Config directory (default: $DATA_DIR or ./data)")
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API")
    parser.add_argument("--mcp", action="store_true", help="Run the MCP server over stdio")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL)

    from sample_chat import config
    data_dir = args.data_dir or Path(os.getenv("DATA_DIR", str(ROOT / "data")))
    config.init_config(data_dir)

    if args.serve:
        import uvicorn
        if args.data_dir:
            os.environ["DATA_DIR"] = str(args.data_dir.resolve())
        print(f"Starting API on http://localhost:{PORT} ...")
        uvicorn.run("sample_chat.app:app", host=HOST, port=PORT)
        return 0

    if args.mcp:
        from sample_chat.mcp_server import mcp
        mcp.run()
        return 0

    if not args.transcript or not args.char or not args.user:
        parser.error("transcript, --char and --user are required unless --serve or --mcp is given")
    return split_command(args)


if __name__ == "__main__":
    sys.exit(main())
