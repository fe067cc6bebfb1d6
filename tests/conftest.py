"""Shared test fixtures for ClawTank."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from clawtank.console import make_console


# ---------------------------------------------------------------------------
# Session documents
# ---------------------------------------------------------------------------


@pytest.fixture
def scenario_meta() -> dict:
    return {
        "room": "r1",
        "description": "d",
        "duration_minutes": 5,
        "participants": {
            "humans": ["alice"],
            "agents": [{"name": "bob", "model": "gpt", "skills": ["x"]}],
        },
    }


@pytest.fixture
def scenario_document(scenario_meta: dict) -> dict:
    return {
        "meta": scenario_meta,
        "events": [
            {"t": 0, "type": "room.created", "data": {"room_id": "r1"}},
            {"t": 5, "type": "human.message", "from": "alice", "text": "hi"},
        ],
    }


@pytest.fixture
def full_document(scenario_meta: dict) -> dict:
    """One event of every known type plus an unknown one."""
    return {
        "meta": scenario_meta,
        "events": [
            {"t": 0, "type": "room.created", "data": {"room_id": "build-something"}},
            {"t": 4, "type": "human.message", "from": "alice", "text": "let's build a todo app"},
            {"t": 9, "type": "agent.joined", "data": {"name": "bob", "model": "gpt"}},
            {"t": 15, "type": "agent.message", "from": "bob", "text": "on it"},
            {"t": 20, "type": "task.created", "data": {"title": "Scaffold API"}},
            {"t": 22, "type": "task.claim", "data": {"agent_id": "bob"}},
            {"t": 40, "type": "agent.status", "data": {"agent_id": "bob", "detail": "coding"}},
            {
                "t": 95,
                "type": "git.commit",
                "data": {"message": "Add API", "stats": {"additions": 120, "deletions": 4}},
            },
            {"t": 130, "type": "git.merge", "data": {"from_branch": "feat/api", "to_branch": "main"}},
            {"t": 131, "type": "task.completed", "data": {"agent_id": "bob"}},
            {"t": 290, "type": "room.stats", "data": {"commits": 3, "lines_added": 250}},
            {"t": 299, "type": "room.activity_summary", "data": {"agent_collaboration_score": 9}},
            {"t": 300, "type": "custom.foo", "data": {"x": 1}},
        ],
    }


@pytest.fixture
def write_session(tmp_path: Path) -> Callable[[object], Path]:
    """Write a document (dict or raw text) to a session file."""

    def _write(document: object, name: str = "session.json") -> Path:
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Output capture
# ---------------------------------------------------------------------------


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    return make_console("never", file=output)


class RecordingSleep:
    """Stands in for asyncio.sleep and records requested waits."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()
