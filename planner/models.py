# planner/models.py
from dataclasses import dataclass, field, replace
from typing import Any, List, Mapping, Optional, Union


@dataclass
class PlanPrefs:
    daily_hours: float = 2          # capacity of one day bucket
    weeks_count: int = 8
    tasks_per_week: int = 3
    tz: Optional[str] = None        # None = local time for "today"


@dataclass
class Task:
    id: str
    text: str
    hours: float = 1
    done: bool = False

    def copy(self, **changes) -> "Task":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "hours": self.hours, "done": self.done}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        return cls(
            id=data.get("id"),
            text=str(data.get("text") or ""),
            hours=data.get("hours", 1),
            done=bool(data.get("done", False)),
        )


@dataclass
class DayBucket:
    date: str                       # YYYY-MM-DD
    tasks: List[Task] = field(default_factory=list)

    @property
    def hours(self) -> float:
        return sum(task_cost(t) for t in self.tasks)

    def to_dict(self) -> dict:
        return {"date": self.date, "tasks": [t.to_dict() for t in self.tasks]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DayBucket":
        return cls(
            date=data.get("date"),
            tasks=[as_task(t) for t in (data.get("tasks") or []) if t],
        )


@dataclass
class WeekGroup:
    index: int                      # 1-based week number
    start_date: Optional[str]
    days: List[DayBucket] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "week": self.index,
            "startDate": self.start_date,
            "days": [d.to_dict() for d in self.days],
        }


TaskLike = Union[Task, Mapping[str, Any]]
BucketLike = Union[DayBucket, Mapping[str, Any]]


def task_cost(task: Task) -> float:
    """Hours a task occupies in a bucket; missing or non-positive costs count as 1."""
    try:
        hours = float(task.hours)
    except (TypeError, ValueError):
        return 1.0
    if hours != hours or hours <= 0:
        return 1.0
    return hours


def as_task(value: TaskLike) -> Task:
    """Fresh Task from a Task or a plain mapping."""
    if isinstance(value, Task):
        return value.copy()
    return Task.from_dict(value)


def as_bucket(value: BucketLike) -> DayBucket:
    if isinstance(value, DayBucket):
        return DayBucket(date=value.date, tasks=[as_task(t) for t in value.tasks if t])
    return DayBucket.from_dict(value)
