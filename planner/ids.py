# planner/ids.py
import itertools
import threading
import time
from typing import Optional


class IdSequence:
    """
    Monotonic source of task ids.

    The default seed is the wall clock in milliseconds modulo 100000, so ids
    from separate runs rarely overlap; pass `start` for deterministic ids.
    Each id is the previous one plus one, rendered as a string.
    """

    def __init__(self, start: Optional[int] = None):
        if start is None:
            start = int(time.time() * 1000) % 100000
        self._counter = itertools.count(start + 1)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            return str(next(self._counter))

    __call__ = next_id


default_ids = IdSequence()
