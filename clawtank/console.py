"""Terminal output helpers shared by the CLI commands."""

from __future__ import annotations

from typing import IO

from rich.console import Console
from rich.text import Text

VERSION = "0.0.1"
SITE_URL = "https://clawtank.dev"


def make_console(
    color: str = "auto",
    *,
    file: IO[str] | None = None,
    stderr: bool = False,
) -> Console:
    """Create a Console for the given color mode.

    ``auto`` colors only when writing to a terminal, ``always`` forces ANSI
    styles and ``never`` writes plain text.
    """
    options: dict = {
        "file": file,
        "stderr": stderr,
        "highlight": False,
        "emoji": False,
        "markup": False,
        "soft_wrap": True,
    }
    if color == "always":
        options["force_terminal"] = True
    elif color == "never":
        options["color_system"] = None
    return Console(**options)


def print_banner(console: Console) -> None:
    """Print the product banner followed by a blank line."""
    console.print(Text(f"🦀 ClawTank CLI v{VERSION}", style="cyan"))
    console.print(Text("Multiplayer AI-assisted coding platform", style="bright_black"))
    console.print()


def print_error(console: Console, message: str) -> None:
    """Print a single-line error message."""
    console.print(Text.assemble(("Error:", "red"), f" {message}"))


def print_coming_soon(console: Console, what: str = "ClawTank CLI is under development.") -> None:
    console.print(Text.assemble(("🦀 Coming soon!", "yellow"), f" {what}"))
