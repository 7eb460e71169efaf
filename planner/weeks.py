# planner/weeks.py
from typing import List, Sequence

from .models import BucketLike, WeekGroup, as_bucket

DAYS_PER_WEEK = 7


def group_into_weeks(schedule: Sequence[BucketLike]) -> List[WeekGroup]:
    """Chunk a day list into 7-day windows. Weeks are numbered from 1."""
    days = [as_bucket(d) for d in (schedule or []) if d]
    weeks = []
    for i in range(0, len(days), DAYS_PER_WEEK):
        chunk = days[i:i + DAYS_PER_WEEK]
        weeks.append(WeekGroup(
            index=i // DAYS_PER_WEEK + 1,
            start_date=chunk[0].date if chunk else None,
            days=chunk,
        ))
    return weeks
