# taskboard/schemas/user.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from taskboard.models.user import Role


class UserRegister(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserSummary(BaseModel):
    id: int
    full_name: str
    email: str
    role: Role

    model_config = {
        "from_attributes": True
    }


class UserOut(BaseModel):
    id: int
    full_name: str
    email: str
    role: Role
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
