# taskboard/services/task_status.py
"""Derivation of a task's status and start date from its checklist.

The rule, applied after every checklist mutation:

- every item completed (and at least one item) -> COMPLETED
- some items completed                          -> IN_PROGRESS
- nothing completed, or no items at all         -> PENDING, start date cleared

The start date is captured the first time progress is made and kept until
progress is fully undone.
"""

from datetime import datetime
from typing import Optional, Tuple

from taskboard.models.task import TaskStatus


def recompute_status(task, now: Optional[datetime] = None) -> Tuple[TaskStatus, Optional[datetime]]:
    """Return the (status, start_date) pair implied by the task's checklist.

    Does not modify the task.
    """
    items = task.checklist_items or []
    completed = [item.completed for item in items]

    if completed and all(completed):
        status = TaskStatus.COMPLETED
    elif any(completed):
        status = TaskStatus.IN_PROGRESS
    else:
        return TaskStatus.PENDING, None

    start_date = task.start_date
    if start_date is None:
        start_date = now or datetime.utcnow()
    return status, start_date


def apply_status(task, now: Optional[datetime] = None):
    """Recompute and store status and start date on the task"""
    task.status, task.start_date = recompute_status(task, now)
    return task
