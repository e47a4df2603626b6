# taskboard/schemas/employee.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from taskboard.models.employee import EmployeeStatus


class EmployeeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    department: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    phone_number: Optional[str] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE


class EmployeeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    department: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = Field(None, min_length=1)
    phone_number: Optional[str] = None
    status: Optional[EmployeeStatus] = None


class EmployeeOut(BaseModel):
    id: int
    name: str
    email: str
    department: str
    position: str
    phone_number: Optional[str] = None
    status: EmployeeStatus
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
