# planner/config.py
import logging
import os
from typing import Callable, Mapping, Optional

from .models import PlanPrefs

logger = logging.getLogger(__name__)

ENV_DAILY_HOURS = "PLANNER_DAILY_HOURS"
ENV_WEEKS = "PLANNER_WEEKS"
ENV_TASKS_PER_WEEK = "PLANNER_TASKS_PER_WEEK"
ENV_TZ = "PLANNER_TZ"


def _env_value(env: Mapping[str, str], name: str, cast: Callable, default):
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r, using default %r", name, raw, default)
        return default


def load_prefs(env: Optional[Mapping[str, str]] = None) -> PlanPrefs:
    """Build plan preferences from PLANNER_* environment variables."""
    env = os.environ if env is None else env
    defaults = PlanPrefs()
    tz = (env.get(ENV_TZ) or "").strip() or defaults.tz
    return PlanPrefs(
        daily_hours=_env_value(env, ENV_DAILY_HOURS, float, defaults.daily_hours),
        weeks_count=_env_value(env, ENV_WEEKS, int, defaults.weeks_count),
        tasks_per_week=_env_value(env, ENV_TASKS_PER_WEEK, int, defaults.tasks_per_week),
        tz=tz,
    )
