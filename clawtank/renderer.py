"""Event renderer: one session event to one styled terminal line."""

from __future__ import annotations

import json
from typing import Any

from rich.text import Text

from .events import (
    ActivitySummary,
    AgentJoined,
    AgentMessage,
    AgentStatus,
    Event,
    EventKind,
    GitCommit,
    GitMerge,
    HumanMessage,
    RoomCreated,
    RoomStats,
    TaskClaimed,
    TaskCompleted,
    TaskCreated,
    UnknownEvent,
    classify_event,
)
from .scheduler import format_timestamp


def display_value(value: Any) -> str:
    """Stringify a payload value the way it reads in a JSON document."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(display_value(item) for item in value)
    if isinstance(value, dict):
        return _dump(value)
    return str(value)


def _dump(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


def format_kind(kind: EventKind) -> Text:
    """Format a typed event kind as a styled line (without timestamp)."""
    if isinstance(kind, RoomCreated):
        return Text.assemble(("🏠 Room created", "cyan"), ": ", display_value(kind.room_id))
    elif isinstance(kind, HumanMessage):
        return Text.assemble(
            (f"💬 {display_value(kind.sender)}:", "green"), " ", display_value(kind.text)
        )
    elif isinstance(kind, AgentMessage):
        return Text.assemble(
            (f"🤖 {display_value(kind.sender)}:", "blue"), " ", display_value(kind.text)
        )
    elif isinstance(kind, AgentJoined):
        return Text.assemble(
            ("🔗 Agent joined:", "blue"),
            f" {display_value(kind.name)} ({display_value(kind.model)})",
        )
    elif isinstance(kind, TaskCreated):
        return Text.assemble(("📋 Task created:", "yellow"), f" {display_value(kind.title)}")
    elif isinstance(kind, TaskClaimed):
        return Text.assemble(
            ("🎯 Task claimed", "yellow"), f" by agent {display_value(kind.agent_id)}"
        )
    elif isinstance(kind, AgentStatus):
        return Text.assemble(
            ("⚡ Status update:", "magenta"),
            f" {display_value(kind.agent_id)} - {display_value(kind.detail)}",
        )
    elif isinstance(kind, GitCommit):
        return Text.assemble(
            ("📝 Commit:", "yellow"),
            f" {display_value(kind.message)} ",
            (f"(+{display_value(kind.additions)}/-{display_value(kind.deletions)})", "dim"),
        )
    elif isinstance(kind, GitMerge):
        return Text.assemble(
            ("🔀 Merged:", "yellow"),
            f" {display_value(kind.from_branch)} → {display_value(kind.to_branch)}",
        )
    elif isinstance(kind, TaskCompleted):
        return Text.assemble(("✅ Task completed", "green"), f" by {display_value(kind.agent_id)}")
    elif isinstance(kind, RoomStats):
        return Text.assemble(
            ("📊 Session stats:", "cyan"),
            f" {display_value(kind.commits)} commits, {display_value(kind.lines_added)} lines added",
        )
    elif isinstance(kind, ActivitySummary):
        return Text.assemble(
            ("🎊 Session complete!", "green"),
            f" Score: {display_value(kind.collaboration_score)}/10",
        )
    elif isinstance(kind, UnknownEvent):
        return _format_unknown(kind)

    raise TypeError(f"Unhandled event kind: {type(kind).__name__}")


def _present(value: Any) -> bool:
    # Empty containers still count as a payload
    if value is None or isinstance(value, bool):
        return bool(value)
    return value != 0 and value != ""


def _format_unknown(kind: UnknownEvent) -> Text:
    """Fallback: type tag plus a best-effort dump of the payload."""
    if _present(kind.data):
        payload = kind.data
    elif _present(kind.text):
        payload = kind.text
    else:
        payload = ""
    return Text.assemble((f"{kind.type}:", "bright_black"), " ", _dump(payload))


def render(event: Event) -> Text:
    """Render one event to a styled line.

    Raises:
        RenderError: If a known event type is missing a required field.
    """
    return format_kind(classify_event(event))


def render_line(event: Event) -> Text:
    """Render one event prefixed with its ``[MM:SS]`` timestamp.

    Raises:
        RenderError: If the event time is not a number or the payload
            is missing a required field.
    """
    stamp = Text(f"[{format_timestamp(event.t)}]", style="dim")
    return Text.assemble(stamp, " ", render(event))
