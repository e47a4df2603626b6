# taskboard/routers/task.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.models.user import User, Role
from taskboard.schemas.task import (
    TaskCreate,
    TaskUpdate,
    TaskOut,
    ChecklistItemCreate,
    ChecklistItemUpdate,
    ChecklistItemOut,
)
from taskboard.services.task_service import TaskService, to_task_out, to_checklist_item_out
from taskboard.utils.access_scope import TaskAccessScope
from taskboard.utils.auth import get_current_user, require_admin

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[TaskOut])
def get_all_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Every task, newest first"""
    logger.info("GET /api/tasks - Fetching all tasks")
    return [to_task_out(task) for task in TaskAccessScope(db).list_all_tasks()]


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    logger.info("POST /api/tasks - Creating new task")
    return to_task_out(TaskService.create_task(db, task))


# Registered before /{task_id} so "my-tasks" is not parsed as an id
@router.get("/my-tasks", response_model=List[TaskOut])
def get_my_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Tasks assigned to the caller"""
    logger.info(f"GET /api/tasks/my-tasks - Fetching tasks for user {current_user.id}")
    return [to_task_out(task) for task in TaskAccessScope(db).list_tasks_for_user(current_user.id)]


@router.get("/my-tasks/{task_id}", response_model=TaskOut)
def get_my_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    logger.info(f"GET /api/tasks/my-tasks/{task_id} - Fetching task for user {current_user.id}")
    return to_task_out(TaskAccessScope(db).get_task_for_user(current_user.id, task_id))


@router.get("/{task_id}", response_model=TaskOut)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    logger.info(f"GET /api/tasks/{task_id} - Fetching task")
    return to_task_out(TaskService.get_task(db, task_id))


@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: int,
    task: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    logger.info(f"PUT /api/tasks/{task_id} - Updating task")
    return to_task_out(TaskService.update_task(db, task_id, task))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    logger.info(f"DELETE /api/tasks/{task_id} - Deleting task")
    TaskService.delete_task(db, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{task_id}/checklist", response_model=ChecklistItemOut, status_code=status.HTTP_201_CREATED)
def add_checklist_item(
    task_id: int,
    item: ChecklistItemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    logger.info(f"POST /api/tasks/{task_id}/checklist - Adding checklist item")
    return to_checklist_item_out(TaskService.add_checklist_item(db, task_id, item))


@router.put("/{task_id}/checklist/{item_id}", response_model=ChecklistItemOut)
def update_checklist_item(
    task_id: int,
    item_id: int,
    item: ChecklistItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Toggle a checklist item; members may only touch tasks assigned to them"""
    logger.info(f"PUT /api/tasks/{task_id}/checklist/{item_id} - Updating checklist item")
    if current_user.role != Role.ADMIN:
        TaskAccessScope(db).get_task_for_user(current_user.id, task_id)
    return to_checklist_item_out(TaskService.update_checklist_item(db, task_id, item_id, item))


@router.delete("/{task_id}/checklist/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_checklist_item(
    task_id: int,
    item_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    logger.info(f"DELETE /api/tasks/{task_id}/checklist/{item_id} - Removing checklist item")
    TaskService.delete_checklist_item(db, task_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
