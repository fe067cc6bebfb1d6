"""Playback driver: replays a loaded session to a console."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from rich.console import Console
from rich.text import Text

from .config import ReplayConfig
from .console import print_banner
from .models import Session
from .renderer import display_value, render_line
from .scheduler import delay, require_time

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class SessionPlayer:
    """Replays a Session as a time-scaled event stream.

    Playback runs in two phases: a header describing the room and its
    participants, then every event in document order. Before each event the
    player waits for the scaled gap since the previous event. The wait is
    an awaitable ``sleep`` so cancelling the task aborts playback.

    Example:
        player = SessionPlayer(console)
        await player.play(load_session("session.json"))
    """

    def __init__(
        self,
        console: Console,
        config: ReplayConfig | None = None,
        *,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.console = console
        self.config = config or ReplayConfig()
        self._sleep = sleep

    def print_header(self, session: Session) -> None:
        """Print the room summary and participant list.

        Raises:
            RenderError: If the session metadata is malformed.
        """
        info = session.info()
        participants = info.participants

        # Build every line before printing so a bad field emits nothing
        lines = [
            Text.assemble(
                ("📼 Playing back session:", "yellow"), f" {display_value(info.room)}"
            ),
            Text.assemble(
                ("📝 Description:", "bright_black"), f" {display_value(info.description)}"
            ),
            Text.assemble(
                ("⏱️  Duration:", "bright_black"),
                f" {display_value(info.duration_minutes)} minutes",
            ),
            Text.assemble(
                ("👥 Participants:", "bright_black"),
                f" {len(participants.humans)} humans, {len(participants.agents)} agents",
            ),
            Text(),
            Text.assemble(
                ("Humans:", "green"),
                " " + ", ".join(display_value(name) for name in participants.humans),
            ),
        ]
        for agent in participants.agents:
            lines.append(
                Text.assemble(
                    ("Agent:", "blue"),
                    f" {display_value(agent.name)} ({display_value(agent.model)})"
                    f" - {', '.join(display_value(skill) for skill in agent.skills)}",
                )
            )

        print_banner(self.console)
        for line in lines:
            self.console.print(line)
        self.console.print()
        self.console.print(Text("🎬 Starting playback...", style="bold"))
        self.console.print()

    async def play(self, session: Session) -> int:
        """Play the whole session.

        Returns:
            Number of events played.

        Raises:
            RenderError: If the header or an event cannot be rendered.
                Lines already printed stay printed.
        """
        self.print_header(session)
        logger.debug(
            "playback_started",
            extra={"event_count": len(session.events), **self.config.to_dict()},
        )

        last_t: float = 0
        played = 0
        for event in session.events:
            current_t = require_time(event.t)
            wait_ms = delay(
                last_t,
                current_t,
                scale_factor=self.config.scale_factor,
                cap_ms=self.config.max_delay_ms,
            )
            if wait_ms > 0:
                await self._sleep(wait_ms / 1000)

            self.console.print(render_line(event))
            logger.debug(
                "event_rendered",
                extra={"event_type": event.type, "t": current_t, "wait_ms": wait_ms},
            )
            last_t = current_t
            played += 1

        self.console.print()
        self.console.print(Text("🎬 Playback complete!", style="bold"))
        logger.debug("playback_complete", extra={"event_count": played})
        return played
