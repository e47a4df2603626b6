# taskboard/services/admin_service.py
from typing import List

from sqlalchemy.orm import Session

from taskboard.models.user import User, Role


class AdminService:
    @staticmethod
    def list_team_members(db: Session) -> List[User]:
        return db.query(User).filter(User.role == Role.MEMBER).order_by(User.id).all()
