#!/usr/bin/env python3
"""main.py

Interactive CLI for the chatbot.
Runs each message through the same ChatService the HTTP API uses.
"""

from __future__ import annotations

# Standard Library
import logging
import sys
from typing import NoReturn

# Third-Party Libraries
from dotenv import load_dotenv
from rich.panel import Panel
from rich.theme import Theme
from rich.prompt import Prompt
from rich.console import Console
from rich.markdown import Markdown

# Load environment variables from .env file before settings are read
load_dotenv()

# Local Modules
from chatbot.service import ChatService, build_chat_service  # noqa: E402
from chatbot.settings import cfg  # noqa: E402

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logging.getLogger("httpx").setLevel(logging.WARNING)

custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "user": "bold blue",
        "assistant": "green",
    }
)
console = Console(theme=custom_theme)


def display_banner() -> None:
    """Display the welcome banner."""
    console.print(
        Panel(
            "[bold]ChatBot[/bold]\nLocal answers first, Gemini when needed.",
            border_style="cyan",
        )
    )
    console.print()


def display_help() -> None:
    """Display available commands and usage information."""
    help_text = """
**Available Commands:**

- `/help` - Show this help message
- `/test` - Send the diagnostic canary through the full pipeline
- `/quit` or `/exit` - Exit
- Any other text - Chat with the bot

**Tips:**

- Time, date, jokes, capitals and simple math are answered locally
- Every message is independent; nothing is remembered between turns
    """
    console.print(Panel(Markdown(help_text), title="Help", border_style="cyan"))


def run_canary(service: ChatService) -> None:
    """Run the remote canary and show which stage answered it.

    Args:
        service: The ChatService instance.
    """
    with console.status("[bold green]Testing remote path...", spinner="dots"):
        resolution = service.test_remote()
    console.print(
        Panel(
            resolution.text,
            title=f"Canary ({resolution.source})",
            border_style="cyan",
        )
    )


def main() -> NoReturn:
    """Main entry point for the CLI."""
    display_banner()

    console.print(f"Models: {', '.join(cfg.gemini_models)}", style="info")
    if not cfg.gemini_api_key:
        console.print(
            "GEMINI_API_KEY is not set; only local and fallback answers are available.\n",
            style="warning",
        )

    service = build_chat_service(cfg)
    console.print(
        "Type [bold]/help[/bold] for commands, or start chatting!\n", style="info"
    )

    while True:
        try:
            user_input = Prompt.ask("[bold blue]You[/bold blue]").strip()

            if not user_input:
                continue

            if user_input.lower() in ["/quit", "/exit"]:
                console.print("\nGoodbye!\n", style="success")
                sys.exit(0)

            elif user_input.lower() == "/help":
                display_help()
                continue

            elif user_input.lower() == "/test":
                run_canary(service)
                continue

            console.print()
            with console.status("[bold green]Thinking...", spinner="dots"):
                response = service.process(user_input)

            console.print(
                Panel(
                    response,
                    title="[bold green]ChatBot[/bold green]",
                    border_style="green",
                )
            )
            console.print()

        except KeyboardInterrupt:
            console.print("\n\nInterrupted. Goodbye!\n", style="warning")
            sys.exit(0)

        except Exception as exc:
            console.print(f"\nError: {exc}\n", style="error")
            console.print(
                "You can continue chatting or type /quit to exit.\n", style="info"
            )


if __name__ == "__main__":
    main()
