"""Data models for recorded ClawTank sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .errors import RenderError
from .events import Event

# Shown in the header for scalar metadata the recording left out
MISSING_FIELD = "undefined"


@dataclass(frozen=True)
class AgentInfo:
    """An AI agent taking part in a room."""

    name: Any
    model: Any
    skills: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AgentInfo:
        """Deserialize from dictionary.

        Raises:
            KeyError: If ``skills`` is missing.
        """
        return cls(
            name=data.get("name", MISSING_FIELD),
            model=data.get("model", MISSING_FIELD),
            skills=list(data["skills"]),
        )


@dataclass(frozen=True)
class Participants:
    """Humans and agents present in a room."""

    humans: list[Any] = field(default_factory=list)
    agents: list[AgentInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Participants:
        """Deserialize from dictionary."""
        return cls(
            humans=list(data["humans"]),
            agents=[AgentInfo.from_dict(agent) for agent in data["agents"]],
        )


@dataclass(frozen=True)
class SessionMeta:
    """Descriptive metadata printed in the playback header.

    Scalar fields fall back to ``MISSING_FIELD``; only the participant
    collections are required.
    """

    room: Any
    description: Any
    duration_minutes: Any
    participants: Participants

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SessionMeta:
        """Deserialize from dictionary.

        Raises:
            KeyError: If a participant collection is missing.
            TypeError: If a nested field has the wrong shape.
        """
        return cls(
            room=data.get("room", MISSING_FIELD),
            description=data.get("description", MISSING_FIELD),
            duration_minutes=data.get("duration_minutes", MISSING_FIELD),
            participants=Participants.from_dict(data["participants"]),
        )


@dataclass(frozen=True)
class Session:
    """A complete recorded transcript: metadata plus ordered events.

    The loader only checks that ``meta`` and ``events`` are present, so
    ``meta`` is kept as the raw mapping and interpreted by ``info()`` when
    the header is printed.
    """

    meta: Mapping[str, Any]
    events: tuple[Event, ...] = ()

    def info(self) -> SessionMeta:
        """Interpret the raw metadata.

        Raises:
            RenderError: If a participant list is missing or malformed.
        """
        try:
            return SessionMeta.from_dict(self.meta)
        except KeyError as exc:
            raise RenderError(f"Session meta is missing field {exc}") from exc
        except (TypeError, AttributeError) as exc:
            raise RenderError(f"Session meta is malformed: {exc}") from exc
