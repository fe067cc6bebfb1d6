"""Exception hierarchy for the ClawTank CLI."""

from __future__ import annotations


class ClawtankError(Exception):
    """Base class for all errors reported by the CLI."""


class ReplayError(ClawtankError):
    """Raised when a session recording cannot be replayed."""


class SessionNotFoundError(ReplayError):
    """The session file does not exist or cannot be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File '{path}' not found")
        self.path = path


class InvalidJSONError(ReplayError):
    """The session file is not a parseable JSON document."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid JSON in '{path}'")
        self.path = path


class InvalidSchemaError(ReplayError):
    """The document lacks the top-level structure of a session."""

    def __init__(self, detail: str = "missing meta or events") -> None:
        super().__init__(f"Invalid session format - {detail}")
        self.detail = detail


class RenderError(ReplayError):
    """An event or the session header could not be rendered."""


class ConfigError(ClawtankError):
    """The replay configuration file is invalid."""
