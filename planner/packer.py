# planner/packer.py
import logging
from typing import List, Sequence

from .dates import DateLike, add_days, to_iso
from .metrics import OVERFLOW_TASKS, PACK_TIME
from .models import DayBucket, Task, TaskLike, as_task, task_cost

logger = logging.getLogger(__name__)


def coerce_capacity(daily_capacity) -> float:
    """Hours per day; anything non-numeric or not positive becomes 1."""
    try:
        capacity = float(daily_capacity)
    except (TypeError, ValueError):
        capacity = 0.0
    if capacity != capacity or capacity <= 0:
        logger.debug("Invalid daily capacity %r, using 1 hour", daily_capacity)
        return 1.0
    return capacity


def pack_into_days(tasks: Sequence[Task], start_date: str, capacity: float) -> List[DayBucket]:
    """
    Greedy packing of already-copied tasks into consecutive days.

    Each day takes tasks in order while they fit the remaining hours. A day
    that cannot fit its first task takes that task alone, so every day
    consumes at least one task and no empty days are produced.
    """
    schedule: List[DayBucket] = []
    cursor = 0
    offset = 0

    while cursor < len(tasks):
        remaining = capacity
        day_tasks: List[Task] = []

        while cursor < len(tasks) and task_cost(tasks[cursor]) <= remaining:
            remaining -= task_cost(tasks[cursor])
            day_tasks.append(tasks[cursor])
            cursor += 1

        # overflow: larger than a whole day
        if not day_tasks:
            logger.debug("Task %s (%s h) exceeds capacity %s, placing alone",
                         tasks[cursor].id, tasks[cursor].hours, capacity)
            OVERFLOW_TASKS.inc()
            day_tasks.append(tasks[cursor])
            cursor += 1

        schedule.append(DayBucket(date=add_days(start_date, offset), tasks=day_tasks))
        offset += 1

    return schedule


def pack_tasks(tasks: Sequence[TaskLike],
               start_date: DateLike,
               daily_capacity: float) -> List[DayBucket]:
    """Pack tasks into day buckets starting at `start_date`."""
    with PACK_TIME.time():
        copies = [as_task(t) for t in (tasks or []) if t]
        schedule = pack_into_days(copies, to_iso(start_date), coerce_capacity(daily_capacity))
    logger.debug("Packed %s tasks into %s days", len(copies), len(schedule))
    return schedule
