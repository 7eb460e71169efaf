# planner/generator.py
import logging
from typing import Iterable, List, Optional, Union

from .ids import IdSequence, default_ids
from .metrics import TASKS_GENERATED
from .models import Task

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "Foundations"
TASK_HOURS = 1


def parse_skills(skills: Union[str, Iterable[str], None]) -> List[str]:
    """Accept a list of skills or a comma separated string; drop blanks."""
    if not skills:
        return []
    if isinstance(skills, str):
        skills = skills.split(",")
    return [str(s).strip() for s in skills if s is not None and str(s).strip()]


def _task_count(total) -> int:
    try:
        total = int(total)
    except (TypeError, ValueError):
        return 1
    return max(1, total)


def task_text(topic: str, goal: str, index: int) -> str:
    if goal:
        return f"{topic} — {goal} (task {index + 1})"
    return f"{topic} — task {index + 1}"


def generate_tasks(goal: Optional[str],
                   skills: Union[str, Iterable[str], None],
                   total_task_count: int,
                   ids: Optional[IdSequence] = None) -> List[Task]:
    """
    Expand a goal into `total_task_count` one-hour tasks.

    Topics cycle through the skills round-robin, so the same input always
    yields the same texts. Counts below 1 are raised to 1.
    """
    ids = ids or default_ids
    skill_list = parse_skills(skills)
    goal = (goal or "").strip()
    total = _task_count(total_task_count)

    tasks = []
    for i in range(total):
        topic = skill_list[i % len(skill_list)] if skill_list else DEFAULT_TOPIC
        tasks.append(Task(
            id=ids.next_id(),
            text=task_text(topic, goal, i),
            hours=TASK_HOURS,
            done=False,
        ))

    TASKS_GENERATED.inc(total)
    logger.debug("Generated %s tasks across %s skills", total, len(skill_list) or 1)
    return tasks
