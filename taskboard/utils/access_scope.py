# taskboard/utils/access_scope.py
from typing import List

from sqlalchemy.orm import Session, selectinload

from taskboard.exceptions import ResourceNotFoundError
from taskboard.models.task import Task
from taskboard.models.user import User


def task_not_found(task_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(f"Task not found with id: {task_id}")


class TaskAccessScope:
    """Which tasks a user may see, based on task assignment"""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        # Assignees and checklist are read after the session closes
        return self.db.query(Task).options(
            selectinload(Task.assigned_users),
            selectinload(Task.checklist_items),
        )

    def list_tasks_for_user(self, user_id: int) -> List[Task]:
        """Tasks assigned to the user, most recently created first"""
        return (
            self._query()
            .filter(Task.assigned_users.any(User.id == user_id))
            .order_by(Task.created_at.desc(), Task.id.desc())
            .all()
        )

    def get_task_for_user(self, user_id: int, task_id: int) -> Task:
        """A single task, only if the user is assigned to it.

        Missing and unassigned tasks raise the same error.
        """
        task = (
            self._query()
            .filter(Task.id == task_id, Task.assigned_users.any(User.id == user_id))
            .first()
        )
        if task is None:
            raise task_not_found(task_id)
        return task

    def list_all_tasks(self) -> List[Task]:
        """Every task, most recently created first (admin view)"""
        return self._query().order_by(Task.created_at.desc(), Task.id.desc()).all()
