from __future__ import annotations

import math
from datetime import date

import pytest

from planner.models import Task
from planner.packer import coerce_capacity, pack_tasks


def _ids(schedule) -> list[list[str]]:
    return [[t.id for t in day.tasks] for day in schedule]


def test_pack_fills_days_up_to_capacity(make_task) -> None:
    tasks = [make_task(str(i)) for i in range(4)]

    schedule = pack_tasks(tasks, "2024-01-01", 2)

    assert [d.date for d in schedule] == ["2024-01-01", "2024-01-02"]
    assert _ids(schedule) == [["0", "1"], ["2", "3"]]


def test_pack_places_oversized_task_alone(make_task) -> None:
    big = make_task("big", hours=5)

    schedule = pack_tasks([big], "2024-01-01", 2)

    assert len(schedule) == 1
    assert schedule[0].date == "2024-01-01"
    assert _ids(schedule) == [["big"]]


def test_pack_overflow_does_not_starve_following_tasks(make_task) -> None:
    tasks = [make_task("a"), make_task("big", hours=3), make_task("b"), make_task("c")]

    schedule = pack_tasks(tasks, "2024-01-01", 2)

    assert _ids(schedule) == [["a"], ["big"], ["b", "c"]]


def test_pack_respects_capacity_and_covers_every_task(make_task) -> None:
    hours = [1, 0.5, 2, 1.5, 3, 1, 1, 0.5, 4, 2]
    tasks = [make_task(str(i), hours=h) for i, h in enumerate(hours)]
    capacity = 2.5

    schedule = pack_tasks(tasks, "2024-02-27", capacity)

    packed = [t.id for day in schedule for t in day.tasks]
    assert packed == [t.id for t in tasks]
    for day in schedule:
        total = sum(t.hours for t in day.tasks)
        assert total <= capacity or len(day.tasks) == 1
        assert day.tasks


def test_pack_dates_are_contiguous_across_month_end(make_task) -> None:
    tasks = [make_task(str(i)) for i in range(4)]

    schedule = pack_tasks(tasks, "2024-02-28", 1)

    assert [d.date for d in schedule] == ["2024-02-28", "2024-02-29", "2024-03-01", "2024-03-02"]


def test_pack_empty_input_returns_empty_schedule() -> None:
    assert pack_tasks([], "2024-01-01", 2) == []
    assert pack_tasks(None, "2024-01-01", 2) == []


@pytest.mark.parametrize("capacity", [0, -2, None, "lots", math.nan])
def test_pack_invalid_capacity_packs_one_hour_per_day(make_task, capacity) -> None:
    tasks = [make_task("a"), make_task("b")]

    schedule = pack_tasks(tasks, "2024-01-01", capacity)

    assert _ids(schedule) == [["a"], ["b"]]


def test_pack_does_not_mutate_or_alias_inputs(make_task) -> None:
    tasks = [make_task("a"), make_task("b")]

    schedule = pack_tasks(tasks, "2024-01-01", 2)
    schedule[0].tasks[0].done = True

    assert len(tasks) == 2
    assert tasks[0].done is False
    assert schedule[0].tasks[0] is not tasks[0]


def test_pack_accepts_plain_dicts_and_date_objects() -> None:
    tasks = [{"id": "x", "text": "read", "hours": 1, "done": False}, {"id": "y", "text": "write"}]

    schedule = pack_tasks(tasks, date(2024, 3, 9), 1)

    assert [d.date for d in schedule] == ["2024-03-09", "2024-03-10"]
    assert schedule[1].tasks[0] == Task(id="y", text="write", hours=1, done=False)


def test_pack_costs_missing_hours_as_one() -> None:
    tasks = [Task(id="a", text="a", hours=0), Task(id="b", text="b", hours=None)]

    schedule = pack_tasks(tasks, "2024-01-01", 2)

    assert _ids(schedule) == [["a", "b"]]
    assert schedule[0].tasks[0].hours == 0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(3, 3.0), ("2.5", 2.5), (0, 1.0), (-1, 1.0), (None, 1.0), ("abc", 1.0)],
)
def test_coerce_capacity(raw, expected: float) -> None:
    assert coerce_capacity(raw) == expected
