"""Session event model.

This module defines the recorded event record and the closed set of event
kinds the renderer knows how to draw:
- Event: One timestamped entry from the session document
- RoomCreated, HumanMessage, ... ActivitySummary: Known event kinds
- UnknownEvent: Fallback for any unrecognized type tag
- classify_event: Build the typed kind for an event record
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Union

from .errors import RenderError


# --- Event record ---


@dataclass(frozen=True)
class Event:
    """One entry from the ``events`` list of a session document.

    ``t`` is seconds since session start. ``sender`` holds the document's
    ``from`` field.
    """

    t: Any
    type: Any
    sender: Any = None
    text: Any = None
    data: Any = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Event:
        """Deserialize from dictionary without validating any field."""
        return cls(
            t=data.get("t"),
            type=data.get("type"),
            sender=data.get("from"),
            text=data.get("text"),
            data=data.get("data"),
            raw=dict(data),
        )

    def to_dict(self) -> dict:
        """Serialize back to the document shape."""
        return dict(self.raw)


# --- Payload access helpers ---


def _payload(event: Event) -> Mapping[str, Any]:
    if not isinstance(event.data, Mapping):
        raise RenderError(f"{event.type} event has no data payload")
    return event.data


def _require(payload: Mapping[str, Any], key: str, event_type: str) -> Any:
    # null is a value; only an absent key is missing
    if key not in payload:
        raise RenderError(f"{event_type} event is missing data.{key}")
    return payload[key]


def _require_top(value: Any, key: str, event: Event) -> Any:
    if value is None and key not in event.raw:
        raise RenderError(f"{event.type} event is missing {key}")
    return value


# --- Known event kinds ---


@dataclass(frozen=True)
class RoomCreated:
    room_id: Any

    @classmethod
    def from_event(cls, event: Event) -> RoomCreated:
        data = _payload(event)
        return cls(room_id=_require(data, "room_id", event.type))


@dataclass(frozen=True)
class HumanMessage:
    sender: Any
    text: Any

    @classmethod
    def from_event(cls, event: Event) -> HumanMessage:
        return cls(
            sender=_require_top(event.sender, "from", event),
            text=_require_top(event.text, "text", event),
        )


@dataclass(frozen=True)
class AgentMessage:
    sender: Any
    text: Any

    @classmethod
    def from_event(cls, event: Event) -> AgentMessage:
        return cls(
            sender=_require_top(event.sender, "from", event),
            text=_require_top(event.text, "text", event),
        )


@dataclass(frozen=True)
class AgentJoined:
    name: Any
    model: Any

    @classmethod
    def from_event(cls, event: Event) -> AgentJoined:
        data = _payload(event)
        return cls(
            name=_require(data, "name", event.type),
            model=_require(data, "model", event.type),
        )


@dataclass(frozen=True)
class TaskCreated:
    title: Any

    @classmethod
    def from_event(cls, event: Event) -> TaskCreated:
        data = _payload(event)
        return cls(title=_require(data, "title", event.type))


@dataclass(frozen=True)
class TaskClaimed:
    agent_id: Any

    @classmethod
    def from_event(cls, event: Event) -> TaskClaimed:
        data = _payload(event)
        return cls(agent_id=_require(data, "agent_id", event.type))


@dataclass(frozen=True)
class AgentStatus:
    agent_id: Any
    detail: Any

    @classmethod
    def from_event(cls, event: Event) -> AgentStatus:
        data = _payload(event)
        return cls(
            agent_id=_require(data, "agent_id", event.type),
            detail=_require(data, "detail", event.type),
        )


@dataclass(frozen=True)
class GitCommit:
    message: Any
    additions: Any
    deletions: Any

    @classmethod
    def from_event(cls, event: Event) -> GitCommit:
        data = _payload(event)
        stats = _require(data, "stats", event.type)
        if not isinstance(stats, Mapping):
            raise RenderError(f"{event.type} event has malformed data.stats")
        return cls(
            message=_require(data, "message", event.type),
            additions=_require(stats, "additions", event.type),
            deletions=_require(stats, "deletions", event.type),
        )


@dataclass(frozen=True)
class GitMerge:
    from_branch: Any
    to_branch: Any

    @classmethod
    def from_event(cls, event: Event) -> GitMerge:
        data = _payload(event)
        return cls(
            from_branch=_require(data, "from_branch", event.type),
            to_branch=_require(data, "to_branch", event.type),
        )


@dataclass(frozen=True)
class TaskCompleted:
    agent_id: Any

    @classmethod
    def from_event(cls, event: Event) -> TaskCompleted:
        data = _payload(event)
        return cls(agent_id=_require(data, "agent_id", event.type))


@dataclass(frozen=True)
class RoomStats:
    commits: Any
    lines_added: Any

    @classmethod
    def from_event(cls, event: Event) -> RoomStats:
        data = _payload(event)
        return cls(
            commits=_require(data, "commits", event.type),
            lines_added=_require(data, "lines_added", event.type),
        )


@dataclass(frozen=True)
class ActivitySummary:
    collaboration_score: Any

    @classmethod
    def from_event(cls, event: Event) -> ActivitySummary:
        data = _payload(event)
        return cls(
            collaboration_score=_require(data, "agent_collaboration_score", event.type)
        )


@dataclass(frozen=True)
class UnknownEvent:
    """Any event whose type tag is not one of the known kinds."""

    type: Any
    data: Any = None
    text: Any = None

    @classmethod
    def from_event(cls, event: Event) -> UnknownEvent:
        return cls(type=event.type, data=event.data, text=event.text)


# Union type for all event kinds
EventKind = Union[
    RoomCreated,
    HumanMessage,
    AgentMessage,
    AgentJoined,
    TaskCreated,
    TaskClaimed,
    AgentStatus,
    GitCommit,
    GitMerge,
    TaskCompleted,
    RoomStats,
    ActivitySummary,
    UnknownEvent,
]


_KIND_MAP: dict[str, Callable[[Event], EventKind]] = {
    "room.created": RoomCreated.from_event,
    "human.message": HumanMessage.from_event,
    "agent.message": AgentMessage.from_event,
    "agent.joined": AgentJoined.from_event,
    "task.created": TaskCreated.from_event,
    "task.claim": TaskClaimed.from_event,
    "agent.status": AgentStatus.from_event,
    "git.commit": GitCommit.from_event,
    "git.merge": GitMerge.from_event,
    "task.completed": TaskCompleted.from_event,
    "room.stats": RoomStats.from_event,
    "room.activity_summary": ActivitySummary.from_event,
}

KNOWN_EVENT_TYPES = frozenset(_KIND_MAP)


def classify_event(event: Event) -> EventKind:
    """Build the typed event kind for an event record.

    Routes to the matching ``from_event`` constructor based on ``event.type``.
    Unrecognized tags become ``UnknownEvent``.

    Args:
        event: The event record to classify.

    Returns:
        The typed event kind.

    Raises:
        RenderError: If a known event type is missing a required field.
    """
    factory = _KIND_MAP.get(event.type) if isinstance(event.type, str) else None
    if factory is None:
        return UnknownEvent.from_event(event)
    return factory(event)
