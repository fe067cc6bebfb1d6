"""ClawTank CLI: replay recorded multiplayer coding sessions."""

from clawtank.config import ReplayConfig, load_config
from clawtank.console import VERSION
from clawtank.errors import (
    ClawtankError,
    ConfigError,
    InvalidJSONError,
    InvalidSchemaError,
    RenderError,
    ReplayError,
    SessionNotFoundError,
)
from clawtank.events import Event, EventKind, UnknownEvent, classify_event
from clawtank.loader import load_session, parse_session
from clawtank.models import AgentInfo, Participants, Session, SessionMeta
from clawtank.player import SessionPlayer
from clawtank.renderer import render, render_line
from clawtank.scheduler import delay, format_timestamp

__version__ = VERSION

__all__ = [
    # Models
    "Session",
    "SessionMeta",
    "Participants",
    "AgentInfo",
    # Events
    "Event",
    "EventKind",
    "UnknownEvent",
    "classify_event",
    # Loader
    "load_session",
    "parse_session",
    # Scheduler
    "delay",
    "format_timestamp",
    # Renderer
    "render",
    "render_line",
    # Player
    "SessionPlayer",
    # Config
    "ReplayConfig",
    "load_config",
    # Errors
    "ClawtankError",
    "ReplayError",
    "SessionNotFoundError",
    "InvalidJSONError",
    "InvalidSchemaError",
    "RenderError",
    "ConfigError",
]
