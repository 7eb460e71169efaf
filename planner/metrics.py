# planner/metrics.py
import logging
import threading

from prometheus_client import Counter, Summary, start_http_server

logger = logging.getLogger(__name__)

PACK_TIME = Summary(
    "planner_pack_seconds",
    "Time spent packing tasks into day buckets",
)
RESCHEDULE_TIME = Summary(
    "planner_reschedule_seconds",
    "Time spent rescheduling pending tasks around a pivot date",
)
OVERFLOW_TASKS = Counter(
    "planner_overflow_tasks_total",
    "Tasks larger than the daily capacity that were placed alone on a day",
)
TASKS_GENERATED = Counter(
    "planner_tasks_generated_total",
    "Tasks created by the task generator",
)

_server_lock = threading.Lock()
_server_started = False


def start_metrics_server(port: int = 8000) -> bool:
    """Expose metrics over HTTP once per process. Returns True if this call started it."""
    global _server_started
    with _server_lock:
        if _server_started:
            return False
        start_http_server(port)
        _server_started = True
    logger.info("Metrics server listening on port %s", port)
    return True
