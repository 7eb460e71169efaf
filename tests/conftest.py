"""Shared fixtures for planner tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from planner.ids import IdSequence  # noqa: E402
from planner.models import DayBucket, Task  # noqa: E402


@pytest.fixture
def ids() -> IdSequence:
    return IdSequence(start=0)


@pytest.fixture
def make_task():
    def _make(task_id: str, hours: float = 1, done: bool = False) -> Task:
        return Task(id=task_id, text=f"task {task_id}", hours=hours, done=done)

    return _make


@pytest.fixture
def two_day_schedule(make_task) -> list[DayBucket]:
    return [
        DayBucket(date="2024-01-01", tasks=[make_task("a")]),
        DayBucket(date="2024-01-02", tasks=[make_task("b")]),
    ]
