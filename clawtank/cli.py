#!/usr/bin/env python3
"""CLI entry point for ClawTank.

Replay recorded ClawTank sessions in the terminal. The room commands
(join, create, status) are placeholders until the platform API ships.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console

from .config import COLOR_MODES, DEFAULT_CONFIG_PATH, ReplayConfig, load_config
from .console import VERSION, make_console, print_error
from .errors import ConfigError, ReplayError
from .loader import load_session
from .player import SessionPlayer
from .rooms import create_room, join_room, show_status

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130

_EXAMPLES = """\
Examples:
  clawtank join https://clawtank.dev/rooms/build-something
  clawtank create my-project
  clawtank replay session.json
"""


# ---------------------------------------------------------------------------
# Command Implementations
# ---------------------------------------------------------------------------


async def _replay(
    path: str,
    config: ReplayConfig,
    console: Console,
    err_console: Console,
) -> int:
    """Load a session file and play it back."""
    try:
        session = load_session(path)
        player = SessionPlayer(console, config)
        await player.play(session)
        return 0
    except ReplayError as e:
        logger.debug("replay_failed", extra={"session_file": path, "error": str(e)})
        print_error(err_console, str(e))
        return 1


def _resolve_config(args: argparse.Namespace) -> ReplayConfig:
    """Load config.yaml and apply command line overrides."""
    config = load_config(args.config)
    return config.with_overrides(
        scale_factor=args.scale_factor,
        max_delay_ms=args.max_delay,
        color=args.color,
    )


def _missing_argument(
    console: Console, err_console: Console, message: str, usage: str
) -> int:
    print_error(err_console, message)
    console.print(f"Usage: {usage}")
    return 1


# ---------------------------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------------------------


def _create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="clawtank",
        description="🦀 ClawTank CLI: multiplayer AI-assisted coding platform.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"clawtank v{VERSION}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug output to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    join_parser = subparsers.add_parser("join", help="Connect to an existing room")
    join_parser.add_argument("room_url", nargs="?", help="Room URL")

    create_parser = subparsers.add_parser("create", help="Create a new room")
    create_parser.add_argument("name", nargs="?", help="Room name")

    subparsers.add_parser("status", help="Show current agent status")

    replay_parser = subparsers.add_parser(
        "replay",
        help="Play back a session recording",
    )
    replay_parser.add_argument(
        "session_file",
        nargs="?",
        help="Path to session JSON file",
    )
    replay_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Config file (default: {DEFAULT_CONFIG_PATH})",
    )
    replay_parser.add_argument(
        "--scale-factor",
        type=float,
        default=None,
        help="Playback milliseconds per recorded second (default: 100)",
    )
    replay_parser.add_argument(
        "--max-delay",
        type=float,
        default=None,
        help="Longest pause between events in milliseconds (default: 2000)",
    )
    replay_parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help="When to use colors (default: auto)",
    )

    return parser


def _run_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Dispatch a parsed command and return its exit code."""
    if args.command == "replay":
        console = make_console(args.color or "auto")
        err_console = make_console(args.color or "auto", stderr=True)
        if not args.session_file:
            return _missing_argument(
                console, err_console, "Replay file required", "clawtank replay <file>"
            )
        try:
            config = _resolve_config(args)
        except ConfigError as e:
            print_error(err_console, str(e))
            return 1
        console = make_console(config.color)
        err_console = make_console(config.color, stderr=True)
        return asyncio.run(_replay(args.session_file, config, console, err_console))

    console = make_console()
    err_console = make_console(stderr=True)

    if args.command == "join":
        if not args.room_url:
            return _missing_argument(
                console, err_console, "Room URL required", "clawtank join <room-url>"
            )
        asyncio.run(join_room(console, args.room_url))
        return 0
    elif args.command == "create":
        if not args.name:
            return _missing_argument(
                console, err_console, "Room name required", "clawtank create <name>"
            )
        asyncio.run(create_room(console, args.name))
        return 0
    elif args.command == "status":
        show_status(console)
        return 0

    parser.print_help()
    return 0


# ---------------------------------------------------------------------------
# Main Entry Point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Run the ClawTank CLI.

    Usage:
        clawtank replay <session.json>   # Play back a session recording
        clawtank join <room-url>         # Connect to a room (coming soon)
        clawtank create <name>           # Create a room (coming soon)
        clawtank status                  # Agent status (coming soon)
    """
    parser = _create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        code = _run_command(args, parser)
    except KeyboardInterrupt:
        logger.info("received_keyboard_interrupt")
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
