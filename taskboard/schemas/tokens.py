# taskboard/schemas/tokens.py
from datetime import datetime

from pydantic import BaseModel

from taskboard.schemas.user import UserOut


class Token(BaseModel):
    access_token: str
    token_type: str
    expires_at: datetime
    user: UserOut
