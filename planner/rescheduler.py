# planner/rescheduler.py
import logging
from collections import defaultdict
from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from .dates import DateLike, to_iso
from .metrics import RESCHEDULE_TIME
from .models import BucketLike, DayBucket, Task, as_bucket
from .packer import coerce_capacity, pack_into_days

logger = logging.getLogger(__name__)


def partition_schedule(schedule: Sequence[BucketLike],
                       completed_ids: Iterable[Hashable],
                       fallback_date: str) -> Tuple[Dict[Hashable, Tuple[str, Task]], List[Task]]:
    """
    Split a schedule into completed tasks (keyed by id, with the date they
    were scheduled on) and pending tasks in schedule order.

    A repeated completed id keeps its first position but takes the last date
    it was seen on.
    """
    done_ids = set(completed_ids or ())
    completed: Dict[Hashable, Tuple[str, Task]] = {}
    pending: List[Task] = []

    for raw in schedule or []:
        if not raw:
            continue
        bucket = as_bucket(raw)
        day = to_iso(bucket.date) if bucket.date else fallback_date
        for task in bucket.tasks:
            if task.id in done_ids or task.done:
                completed[task.id] = (day, task.copy(done=True))
            else:
                pending.append(task.copy(done=False))

    return completed, pending


def group_anchors(completed: Dict[Hashable, Tuple[str, Task]]) -> Dict[str, List[Task]]:
    anchors: Dict[str, List[Task]] = defaultdict(list)
    for day, task in completed.values():
        anchors[day].append(task)
    return anchors


def reschedule_remaining(prior_schedule: Sequence[BucketLike],
                         completed_ids: Optional[Iterable[Hashable]],
                         pivot_date: DateLike,
                         daily_capacity: float) -> List[DayBucket]:
    """
    Rebuild a schedule around `pivot_date`.

    Completed tasks stay on the date they were scheduled on and are listed
    first on that day. Pending tasks are packed again from `pivot_date`
    with the same greedy rule as a fresh plan. Anchor dates outside the
    repacked range keep their own buckets. Running this again on its own
    output with the same arguments returns the same schedule.
    """
    with RESCHEDULE_TIME.time():
        pivot = to_iso(pivot_date)
        completed, pending = partition_schedule(prior_schedule, completed_ids, pivot)
        anchors = group_anchors(completed)

        result: List[DayBucket] = []
        packed_dates = set()
        for bucket in pack_into_days(pending, pivot, coerce_capacity(daily_capacity)):
            packed_dates.add(bucket.date)
            result.append(DayBucket(
                date=bucket.date,
                tasks=[t.copy() for t in anchors.get(bucket.date, [])] + bucket.tasks,
            ))

        for day, tasks in anchors.items():
            if day not in packed_dates:
                result.append(DayBucket(date=day, tasks=[t.copy() for t in tasks]))

        result.sort(key=lambda b: b.date)

    logger.info("Rescheduled from %s: %s completed anchored, %s pending over %s days",
                pivot, len(completed), len(pending), len(result))
    return result
