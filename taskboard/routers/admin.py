# taskboard/routers/admin.py
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.schemas.user import UserSummary
from taskboard.services.admin_service import AdminService
from taskboard.services.task_service import to_user_summary
from taskboard.utils.auth import require_admin

router = APIRouter(dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.get("/team-members", response_model=List[UserSummary])
def get_all_team_members(db: Session = Depends(get_db)):
    """All users with the MEMBER role"""
    logger.info("GET /api/admin/team-members - Fetching all team members")
    return [to_user_summary(user) for user in AdminService.list_team_members(db)]
