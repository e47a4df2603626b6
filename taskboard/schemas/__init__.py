from .user import UserRegister, UserLogin, UserOut, UserSummary
from .tokens import Token
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from .task import TaskCreate, TaskUpdate, TaskOut, ChecklistItemCreate, ChecklistItemUpdate, ChecklistItemOut
from .error import ErrorResponse
