# taskboard/models/task.py
import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, Date, ForeignKey, Enum, Text, Boolean, Table
from sqlalchemy.orm import relationship

from taskboard.database import Base


class TaskStatus(enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class TaskPriority(enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# Task <-> User assignment, a pure set relation
task_assignments = Table(
    "task_assignments",
    Base.metadata,
    Column("task_id", Integer, ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)

    # Task properties
    status = Column(Enum(TaskStatus), default=TaskStatus.PENDING, nullable=False)
    priority = Column(Enum(TaskPriority), default=TaskPriority.MEDIUM, nullable=False)

    due_date = Column(Date, nullable=True)
    # Set when checklist progress begins, cleared when it is undone
    start_date = Column(DateTime, nullable=True)

    # System dates
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    assigned_users = relationship("User", secondary=task_assignments, back_populates="assigned_tasks")
    checklist_items = relationship(
        "ChecklistItem",
        back_populates="task",
        cascade="all, delete-orphan",
        order_by="ChecklistItem.id",
    )


class ChecklistItem(Base):
    __tablename__ = "checklist_items"

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    text = Column(String(500), nullable=False)
    completed = Column(Boolean, default=False, nullable=False)

    task = relationship("Task", back_populates="checklist_items")
