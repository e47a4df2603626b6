# taskboard/schemas/task.py
from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime
from typing import Optional, List

from taskboard.models.task import TaskStatus, TaskPriority
from taskboard.schemas.user import UserSummary


class ChecklistItemCreate(BaseModel):
    text: str = Field(..., min_length=1, max_length=500)
    completed: Optional[bool] = None

    @field_validator("text")
    @classmethod
    def text_must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError("Checklist item text is required")
        return v


class ChecklistItemUpdate(BaseModel):
    # Omitted means "no change"
    completed: Optional[bool] = None


class ChecklistItemOut(BaseModel):
    id: int
    text: str
    completed: bool

    model_config = {
        "from_attributes": True
    }


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = None
    user_ids: List[int] = []
    checklist_items: List[ChecklistItemCreate] = []

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError("Title is required")
        return v


class TaskUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None
    # When present (even empty) the assignment set is replaced wholesale
    user_ids: Optional[List[int]] = None

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Title is required")
        return v


class TaskOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[date] = None
    start_date: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    assigned_users: List[UserSummary] = []
    checklist_items: List[ChecklistItemOut] = []
