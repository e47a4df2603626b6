from .user import User, Role
from .employee import Employee, EmployeeStatus
from .task import Task, ChecklistItem, TaskStatus, TaskPriority, task_assignments
