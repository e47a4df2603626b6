# taskboard/routers/user.py
from fastapi import APIRouter, Depends

from taskboard.models.user import User
from taskboard.schemas.user import UserOut
from taskboard.services.auth_service import to_user_out
from taskboard.utils.auth import get_current_user

router = APIRouter()


@router.get("/me", response_model=UserOut)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information"""
    return to_user_out(current_user)
