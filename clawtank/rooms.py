"""Room commands. Networking is not implemented yet, so these only print."""

from __future__ import annotations

import asyncio

from rich.console import Console
from rich.text import Text

from .console import SITE_URL, print_coming_soon
from .player import Sleep

CONNECT_PAUSE_SECONDS = 1.0


def room_url(name: str) -> str:
    return f"{SITE_URL}/rooms/{name}"


def _print_updates_hint(console: Console) -> None:
    console.print(f"Visit {SITE_URL} for updates.")


async def join_room(console: Console, url: str, *, sleep: Sleep = asyncio.sleep) -> None:
    """Pretend to connect to an existing room."""
    console.print(Text.assemble(("🔗 Connecting to room:", "cyan"), f" {url}"))
    await sleep(CONNECT_PAUSE_SECONDS)
    print_coming_soon(console)
    _print_updates_hint(console)


async def create_room(console: Console, name: str, *, sleep: Sleep = asyncio.sleep) -> None:
    """Pretend to create a new room."""
    console.print(Text.assemble(("🏠 Creating room:", "cyan"), f" {name}"))
    console.print(Text.assemble(("🔗 Room URL:", "bright_black"), f" {room_url(name)}"))
    await sleep(CONNECT_PAUSE_SECONDS)
    print_coming_soon(console)
    _print_updates_hint(console)


# Canned dashboard shown until the status API exists
_SAMPLE_AGENTS = (
    "Claude-4 (alice) - idle",
    "GPT-4o (bob) - coding task_123",
    "Gemini-Pro (charlie) - reviewing PR #45",
)
_SAMPLE_ROOMS = (
    "build-something (3 participants)",
    "debug-session (1 participant)",
)


def show_status(console: Console) -> None:
    """Print the sample agent status dashboard."""
    console.print(Text("📊 ClawTank Agent Status", style="cyan"))
    console.print()
    console.print(Text("🤖 Active Agents:", style="green"))
    for agent in _SAMPLE_AGENTS:
        console.print(f"  • {agent}")
    console.print()
    console.print(Text("🏠 Connected Rooms:", style="blue"))
    for room in _SAMPLE_ROOMS:
        console.print(f"  • {room}")
    console.print()
    print_coming_soon(console, "Full status dashboard under development.")
