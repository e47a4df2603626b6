# taskboard/routers/auth.py
import logging

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.schemas.tokens import Token
from taskboard.schemas.user import UserRegister, UserLogin, UserOut
from taskboard.services.auth_service import AuthService, to_user_out

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(user: UserRegister, db: Session = Depends(get_db)):
    logger.info(f"POST /api/auth/register - Registration attempt for user: {user.email}")
    return to_user_out(AuthService.register(db, user))


@router.post("/login", response_model=Token)
def login(user: UserLogin, db: Session = Depends(get_db)):
    logger.info(f"POST /api/auth/login - Login attempt for user: {user.email}")
    return AuthService.login(db, user)


@router.post("/token", response_model=Token)
def login_form(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """OAuth2 password flow (form-encoded, `username` carries the email)."""
    logger.info(f"POST /api/auth/token - Login attempt for user: {form_data.username}")
    user = AuthService.authenticate(db, form_data.username, form_data.password)
    return AuthService.issue_token(user)
