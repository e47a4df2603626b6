# taskboard/services/task_service.py
import logging
from typing import List

from sqlalchemy.orm import Session, selectinload

from taskboard.exceptions import ResourceNotFoundError
from taskboard.models.task import Task, ChecklistItem
from taskboard.models.user import User
from taskboard.schemas.task import (
    TaskCreate,
    TaskUpdate,
    TaskOut,
    ChecklistItemCreate,
    ChecklistItemUpdate,
    ChecklistItemOut,
)
from taskboard.schemas.user import UserSummary
from taskboard.services.task_status import apply_status
from taskboard.utils.access_scope import task_not_found

logger = logging.getLogger(__name__)

_NON_NULLABLE_FIELDS = ("title", "status", "priority")


def to_user_summary(user: User) -> UserSummary:
    return UserSummary(id=user.id, full_name=user.full_name, email=user.email, role=user.role)


def to_checklist_item_out(item: ChecklistItem) -> ChecklistItemOut:
    return ChecklistItemOut(id=item.id, text=item.text, completed=item.completed)


def to_task_out(task: Task) -> TaskOut:
    return TaskOut(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        priority=task.priority,
        due_date=task.due_date,
        start_date=task.start_date,
        created_at=task.created_at,
        updated_at=task.updated_at,
        assigned_users=sorted(
            (to_user_summary(user) for user in task.assigned_users),
            key=lambda summary: summary.id,
        ),
        checklist_items=[to_checklist_item_out(item) for item in task.checklist_items],
    )


class TaskService:
    """Task and checklist mutations; each public call is one transaction"""

    @staticmethod
    def get_task(db: Session, task_id: int) -> Task:
        task = db.query(Task).options(
            selectinload(Task.assigned_users),
            selectinload(Task.checklist_items),
        ).filter(Task.id == task_id).first()
        if task is None:
            logger.warning(f"Task not found with id: {task_id}")
            raise task_not_found(task_id)
        return task

    @staticmethod
    def resolve_users(db: Session, user_ids: List[int]) -> List[User]:
        """Load every referenced user, failing on the first missing id"""
        users = []
        seen = set()
        for user_id in user_ids:
            if user_id in seen:
                continue
            user = db.query(User).filter(User.id == user_id).first()
            if user is None:
                raise ResourceNotFoundError(f"User not found with id: {user_id}")
            seen.add(user_id)
            users.append(user)
        return users

    @staticmethod
    def create_task(db: Session, task_in: TaskCreate) -> Task:
        logger.info(f"Creating new task with title: {task_in.title}")
        try:
            task = Task(
                title=task_in.title,
                description=task_in.description,
                status=task_in.status,
                priority=task_in.priority,
                due_date=task_in.due_date,
            )
            task.assigned_users = TaskService.resolve_users(db, task_in.user_ids)
            task.checklist_items = [
                ChecklistItem(
                    text=item.text,
                    completed=item.completed if item.completed is not None else False,
                )
                for item in task_in.checklist_items
            ]
            if task.checklist_items:
                apply_status(task)

            db.add(task)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"Task created successfully with id: {task.id}")
        return TaskService.get_task(db, task.id)

    @staticmethod
    def update_task(db: Session, task_id: int, task_in: TaskUpdate) -> Task:
        logger.info(f"Updating task with id: {task_id}")
        try:
            task = TaskService.get_task(db, task_id)

            update_data = task_in.model_dump(exclude_unset=True)
            user_ids = update_data.pop("user_ids", None)
            for field, value in update_data.items():
                # Columns that cannot be null are left alone when sent as null
                if value is None and field in _NON_NULLABLE_FIELDS:
                    continue
                setattr(task, field, value)

            if user_ids is not None:
                task.assigned_users = TaskService.resolve_users(db, user_ids)

            # A task with a checklist keeps the status its checklist implies
            if task.checklist_items:
                apply_status(task)

            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"Task updated successfully with id: {task_id}")
        return TaskService.get_task(db, task_id)

    @staticmethod
    def delete_task(db: Session, task_id: int) -> None:
        logger.info(f"Deleting task with id: {task_id}")
        try:
            task = TaskService.get_task(db, task_id)
            db.delete(task)
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info(f"Task deleted successfully with id: {task_id}")

    @staticmethod
    def _find_item(task: Task, item_id: int) -> ChecklistItem:
        for item in task.checklist_items:
            if item.id == item_id:
                return item
        raise ResourceNotFoundError(f"Checklist item not found with id: {item_id} for task: {task.id}")

    @staticmethod
    def update_checklist_item(db: Session, task_id: int, item_id: int, item_in: ChecklistItemUpdate) -> ChecklistItem:
        logger.info(f"TaskId: {task_id}, ItemId: {item_id}, New Completed Status: {item_in.completed}")
        try:
            task = TaskService.get_task(db, task_id)
            item = TaskService._find_item(task, item_id)

            if item_in.completed is not None:
                item.completed = item_in.completed

            apply_status(task)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"Updated Task ID: {task.id}, Status: {task.status.value}, StartDate: {task.start_date}")
        db.refresh(item)
        return item

    @staticmethod
    def add_checklist_item(db: Session, task_id: int, item_in: ChecklistItemCreate) -> ChecklistItem:
        logger.info(f"Adding checklist item to task {task_id}")
        try:
            task = TaskService.get_task(db, task_id)
            item = ChecklistItem(
                text=item_in.text,
                completed=item_in.completed if item_in.completed is not None else False,
            )
            task.checklist_items.append(item)
            apply_status(task)
            db.commit()
        except Exception:
            db.rollback()
            raise

        db.refresh(item)
        logger.info(f"Checklist item {item.id} added to task {task_id}, status now {task.status.value}")
        return item

    @staticmethod
    def delete_checklist_item(db: Session, task_id: int, item_id: int) -> None:
        logger.info(f"Removing checklist item {item_id} from task {task_id}")
        try:
            task = TaskService.get_task(db, task_id)
            item = TaskService._find_item(task, item_id)
            task.checklist_items.remove(item)
            apply_status(task)
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info(f"Checklist item {item_id} removed, task {task_id} status now {task.status.value}")
