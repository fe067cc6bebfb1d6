"""Session recording loader."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from .errors import InvalidJSONError, InvalidSchemaError, SessionNotFoundError
from .events import Event
from .models import Session

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    """Refuse NaN and Infinity, which are not part of JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_session(data: Any) -> Session:
    """Validate a parsed document and build a Session.

    Only the top-level structure is checked: ``meta`` must be an object and
    ``events`` a list of objects. Nested fields are left to the renderer.

    Raises:
        InvalidSchemaError: If ``meta`` or ``events`` is missing or malformed.
    """
    if not isinstance(data, Mapping):
        raise InvalidSchemaError()

    meta = data.get("meta")
    events = data.get("events")
    if meta is None or events is None:
        raise InvalidSchemaError()
    if not isinstance(meta, Mapping):
        raise InvalidSchemaError("meta must be an object")
    if not isinstance(events, list):
        raise InvalidSchemaError("events must be a list")

    records: list[Event] = []
    for index, raw in enumerate(events):
        if not isinstance(raw, Mapping):
            raise InvalidSchemaError(f"event {index} is not an object")
        records.append(Event.from_dict(raw))

    return Session(meta=dict(meta), events=tuple(records))


def load_session(path: str | Path) -> Session:
    """Read a session JSON file and return the parsed Session.

    Args:
        path: Path to the recorded session document.

    Raises:
        SessionNotFoundError: If the file does not exist or cannot be read.
        InvalidJSONError: If the content is not valid UTF-8 JSON.
        InvalidSchemaError: If the document lacks ``meta`` or ``events``.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SessionNotFoundError(str(path)) from exc
    except UnicodeDecodeError as exc:
        raise InvalidJSONError(str(path)) from exc

    try:
        data = json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.debug("%s: failed to parse JSON: %s", path, exc)
        raise InvalidJSONError(str(path)) from exc

    session = parse_session(data)
    logger.debug(
        "session_loaded",
        extra={"path": str(path), "event_count": len(session.events)},
    )
    return session
