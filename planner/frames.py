# planner/frames.py
from typing import Sequence

import pandas as pd

from .models import BucketLike, as_bucket, task_cost
from .packer import coerce_capacity

TASK_COLUMNS = ["date", "id", "text", "hours", "done"]
LOAD_COLUMNS = ["date", "tasks", "hours", "done_hours", "capacity", "overflow"]


def schedule_to_frame(schedule: Sequence[BucketLike]) -> pd.DataFrame:
    """One row per task, in schedule order."""
    rows = []
    for raw in schedule or []:
        bucket = as_bucket(raw)
        for t in bucket.tasks:
            rows.append({
                "date": bucket.date,
                "id": t.id,
                "text": t.text,
                "hours": t.hours,
                "done": t.done,
            })
    return pd.DataFrame(rows, columns=TASK_COLUMNS)


def daily_load(schedule: Sequence[BucketLike], daily_capacity: float) -> pd.DataFrame:
    """Hours booked per day against capacity; overflow marks single oversized tasks."""
    capacity = coerce_capacity(daily_capacity)
    rows = []
    for raw in schedule or []:
        bucket = as_bucket(raw)
        hours = bucket.hours
        rows.append({
            "date": bucket.date,
            "tasks": len(bucket.tasks),
            "hours": hours,
            "done_hours": sum(task_cost(t) for t in bucket.tasks if t.done),
            "capacity": capacity,
            "overflow": hours > capacity,
        })
    return pd.DataFrame(rows, columns=LOAD_COLUMNS)
