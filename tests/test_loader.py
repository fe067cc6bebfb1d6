"""Tests for session loading and structural validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from clawtank.errors import (
    InvalidJSONError,
    InvalidSchemaError,
    ReplayError,
    SessionNotFoundError,
)
from clawtank.events import Event
from clawtank.loader import load_session, parse_session
from clawtank.models import Session


class TestLoadSession:
    def test_scenario_document_loads(self, write_session, scenario_document: dict) -> None:
        session = load_session(write_session(scenario_document))

        assert isinstance(session, Session)
        assert session.meta["room"] == "r1"
        assert len(session.events) == 2
        assert session.events[0] == Event(t=0, type="room.created", data={"room_id": "r1"})
        assert session.events[1].sender == "alice"
        assert session.events[1].text == "hi"

    def test_accepts_str_path(self, write_session, scenario_document: dict) -> None:
        path = write_session(scenario_document)
        assert len(load_session(str(path)).events) == 2

    def test_events_keep_document_order(self, write_session, scenario_meta: dict) -> None:
        document = {
            "meta": scenario_meta,
            "events": [
                {"t": 30, "type": "a"},
                {"t": 10, "type": "b"},
                {"t": 20, "type": "c"},
            ],
        }
        session = load_session(write_session(document))
        assert [e.type for e in session.events] == ["a", "b", "c"]

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "nope.json"
        with pytest.raises(SessionNotFoundError) as exc_info:
            load_session(path)
        assert str(exc_info.value) == f"File '{path}' not found"

    def test_directory_is_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(SessionNotFoundError):
            load_session(tmp_path)

    def test_invalid_json(self, write_session) -> None:
        path = write_session("{not json")
        with pytest.raises(InvalidJSONError) as exc_info:
            load_session(path)
        assert str(exc_info.value) == f"Invalid JSON in '{path}'"

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_are_invalid_json(self, write_session, constant: str) -> None:
        path = write_session('{"meta": {}, "events": [{"t": ' + constant + ', "type": "x"}]}')
        with pytest.raises(InvalidJSONError):
            load_session(path)

    def test_invalid_utf8_is_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(InvalidJSONError):
            load_session(path)

    def test_missing_events(self, write_session, scenario_meta: dict) -> None:
        with pytest.raises(InvalidSchemaError) as exc_info:
            load_session(write_session({"meta": scenario_meta}))
        assert str(exc_info.value) == "Invalid session format - missing meta or events"

    def test_missing_meta(self, write_session) -> None:
        with pytest.raises(InvalidSchemaError):
            load_session(write_session({"events": []}))

    def test_errors_share_base_class(self, tmp_path: Path) -> None:
        with pytest.raises(ReplayError):
            load_session(tmp_path / "missing.json")


class TestParseSession:
    def test_empty_events_allowed(self, scenario_meta: dict) -> None:
        session = parse_session({"meta": scenario_meta, "events": []})
        assert session.events == ()

    def test_null_meta_rejected(self) -> None:
        with pytest.raises(InvalidSchemaError):
            parse_session({"meta": None, "events": []})

    def test_top_level_list_rejected(self) -> None:
        with pytest.raises(InvalidSchemaError):
            parse_session([{"meta": {}, "events": []}])

    def test_events_must_be_list(self, scenario_meta: dict) -> None:
        with pytest.raises(InvalidSchemaError, match="events must be a list"):
            parse_session({"meta": scenario_meta, "events": {"t": 0}})

    def test_event_entries_must_be_objects(self, scenario_meta: dict) -> None:
        with pytest.raises(InvalidSchemaError, match="event 1 is not an object"):
            parse_session({"meta": scenario_meta, "events": [{"t": 0, "type": "x"}, 5]})

    def test_meta_must_be_object(self) -> None:
        with pytest.raises(InvalidSchemaError, match="meta must be an object"):
            parse_session({"meta": "r1", "events": []})

    def test_nested_meta_not_validated(self) -> None:
        """Missing participants is only noticed when the header is printed."""
        session = parse_session({"meta": {"room": "r1"}, "events": []})
        assert session.meta == {"room": "r1"}

    def test_session_is_frozen(self, scenario_document: dict) -> None:
        session = parse_session(scenario_document)
        with pytest.raises(AttributeError):
            session.events = ()  # type: ignore[misc]
