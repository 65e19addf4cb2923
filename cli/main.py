"""CLI entry point and argument parsing"""

import sys
import asyncio
import argparse
from typing import List, Optional

import httpx
from rich.markup import escape

import settings
from copilot_api import CopilotClient, Message
from utils.debug_console import create_debug_console, setup_debug_logger
from utils.errors import CopilotError
from utils.logging_utils import setup_logging
from cli.display import show_agents, show_chat_response, show_embeddings, show_models

DEBUG_LOG_FILE = "copilot_debug.log"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GitHub Copilot API client")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--editor-version",
        default=settings.EDITOR_VERSION,
        help=f"Editor-Version header value (default: {settings.EDITOR_VERSION})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("agents", help="List available agents")
    subparsers.add_parser("models", help="List available models")

    chat = subparsers.add_parser("chat", help="Send a chat completion request")
    chat.add_argument("prompt", help="User message")
    chat.add_argument("--system", default=None, help="Optional system message")
    chat.add_argument(
        "--model", "-m",
        default=settings.DEFAULT_CHAT_MODEL,
        help=f"Model id (default: {settings.DEFAULT_CHAT_MODEL})"
    )
    chat.add_argument("--max-tokens", type=int, default=None, help="Cap on generated tokens")
    chat.add_argument(
        "--validate-models",
        action="store_true",
        help="Fetch the model list first and reject unknown model ids locally"
    )

    embed = subparsers.add_parser("embed", help="Generate embeddings for input strings")
    embed.add_argument("inputs", nargs="+", help="Strings to embed")

    return parser


def build_messages(prompt: str, system: Optional[str] = None) -> List[Message]:
    messages = []
    if system:
        messages.append(Message(role="system", content=system))
    messages.append(Message(role="user", content=prompt))
    return messages


async def run_command(args: argparse.Namespace, console, client: Optional[CopilotClient] = None):
    """Run one CLI command against the Copilot API

    Args:
        args: Parsed arguments
        console: Rich console for output
        client: Client to use (built from the environment if None)
    """
    if client is None:
        client = CopilotClient.from_env(args.editor_version)

    if args.command == "agents":
        show_agents(await client.get_agents(), console)
    elif args.command == "models":
        show_models(await client.get_models(), console)
    elif args.command == "chat":
        if args.validate_models and client.models is None:
            await client.fetch_models()
        response = await client.chat_completion(
            build_messages(args.prompt, args.system),
            args.model,
            max_tokens=args.max_tokens
        )
        show_chat_response(response, console)
    elif args.command == "embed":
        embeddings = await client.get_embeddings(args.inputs)
        show_embeddings(args.inputs, embeddings, console)


def main(argv: Optional[List[str]] = None):
    """Entry point for the CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)

    debug_logger = None
    if args.debug:
        log_path = setup_logging("debug", DEBUG_LOG_FILE)
        debug_logger = setup_debug_logger(log_path)
    else:
        setup_logging(settings.LOG_LEVEL)

    console = create_debug_console(args.debug, debug_logger)

    try:
        asyncio.run(run_command(args, console))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except CopilotError as e:
        console.print(f"[red]{type(e).__name__}:[/red] {escape(str(e))}")
        sys.exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]Network error:[/red] {escape(str(e))}")
        if args.debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
