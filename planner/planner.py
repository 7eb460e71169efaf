# planner/planner.py
import logging
from typing import Any, Hashable, Iterable, List, Mapping, Optional, Sequence, Union

from .dates import DateLike, to_iso, today
from .generator import generate_tasks
from .ids import IdSequence
from .models import BucketLike, DayBucket, Task, TaskLike, WeekGroup
from .packer import pack_tasks
from .rescheduler import reschedule_remaining
from .weeks import group_into_weeks

logger = logging.getLogger(__name__)


def generate(goal: Optional[str],
             skills: Union[str, Iterable[str], None],
             total_task_count: int,
             ids: Optional[IdSequence] = None) -> List[Task]:
    return generate_tasks(goal, skills, total_task_count, ids=ids)


def pack(tasks: Sequence[TaskLike],
         start_date: DateLike,
         daily_capacity: float) -> List[DayBucket]:
    return pack_tasks(tasks, start_date, daily_capacity)


def reschedule(prior_schedule: Sequence[BucketLike],
               completed_ids: Optional[Iterable[Hashable]],
               pivot_date: DateLike,
               daily_capacity: float) -> List[DayBucket]:
    return reschedule_remaining(prior_schedule, completed_ids, pivot_date, daily_capacity)


def group(schedule: Sequence[BucketLike]) -> List[WeekGroup]:
    return group_into_weeks(schedule)


def build_plan(goal: Optional[str],
               skills: Union[str, Iterable[str], None],
               daily_hours: float,
               weeks_count: int = 8,
               tasks_per_week: int = 3,
               start_date: Optional[DateLike] = None,
               ids: Optional[IdSequence] = None,
               tz: Optional[str] = None) -> List[WeekGroup]:
    """
    Generate tasks for the goal, pack them into days and group the days
    into weeks.

    start_date: first day of the plan, defaults to today in `tz`.
    """
    start = to_iso(start_date) if start_date is not None else today(tz)
    total = _int_or(weeks_count, 8) * _int_or(tasks_per_week, 3)

    tasks = generate(goal, skills, total, ids=ids)
    days = pack(tasks, start, daily_hours)
    weeks = group(days)

    logger.info("Built plan from %s: %s tasks, %s days, %s weeks",
                start, len(tasks), len(days), len(weeks))
    return weeks


def generate_roadmap(payload: Optional[Mapping[str, Any]] = None,
                     ids: Optional[IdSequence] = None,
                     start_date: Optional[DateLike] = None) -> dict:
    """
    Plan from a form payload such as
    {"goal": "Frontend Developer", "skills": "react,js,css", "time": 2}.

    Optional keys: "weeks" (default 8) and "tasksPerWeek" (default 3).
    Returns {"weeks": [{"week", "startDate", "days": [{"date", "tasks"}]}]}.
    """
    payload = payload or {}
    weeks = build_plan(
        goal=payload.get("goal", ""),
        skills=payload.get("skills", []),
        daily_hours=payload.get("time", 2),
        weeks_count=payload.get("weeks", 8),
        tasks_per_week=payload.get("tasksPerWeek", 3),
        start_date=start_date,
        ids=ids,
    )
    return {"weeks": [w.to_dict() for w in weeks]}


def _int_or(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
