# taskboard/services/auth_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.exceptions import EmailAlreadyExistsError, InvalidCredentialsError
from taskboard.models.user import User, Role
from taskboard.schemas.tokens import Token
from taskboard.schemas.user import UserRegister, UserLogin, UserOut
from taskboard.utils.security import hash_password, verify_password, create_access_token

logger = logging.getLogger(__name__)


def to_user_out(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        full_name=user.full_name,
        email=user.email,
        role=user.role,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class AuthService:
    @staticmethod
    def _email_taken(db: Session, email: str) -> bool:
        return db.query(User).filter(User.email == email).first() is not None

    @staticmethod
    def register(db: Session, user_in: UserRegister) -> User:
        logger.info(f"Attempting registration for email: {user_in.email}")
        if AuthService._email_taken(db, user_in.email):
            raise EmailAlreadyExistsError("Email already exists")

        # Self-registration always yields a team member
        user = User(
            full_name=user_in.full_name,
            email=user_in.email,
            hashed_password=hash_password(user_in.password),
            role=Role.MEMBER,
        )
        try:
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            # Another registration took the email between check and insert
            db.rollback()
            raise EmailAlreadyExistsError("Email already exists")
        except Exception:
            db.rollback()
            raise

        logger.info(f"User registered successfully: {user.email}")
        return user

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> User:
        user = db.query(User).filter(User.email == email).first()
        if user is None or not verify_password(password, user.hashed_password):
            logger.warning(f"Failed login attempt for: {email}")
            raise InvalidCredentialsError("Invalid email or password")
        return user

    @staticmethod
    def issue_token(user: User) -> Token:
        token, expires_at = create_access_token(data={"sub": user.email, "role": user.role.value})
        return Token(
            access_token=token,
            token_type="bearer",
            expires_at=expires_at,
            user=to_user_out(user),
        )

    @staticmethod
    def login(db: Session, credentials: UserLogin) -> Token:
        logger.info(f"Attempting to authenticate user: {credentials.email}")
        user = AuthService.authenticate(db, credentials.email, credentials.password)
        token = AuthService.issue_token(user)
        logger.info(f"User authenticated successfully: {user.email}")
        return token
