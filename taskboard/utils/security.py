# taskboard/utils/security.py
from datetime import datetime, timedelta
from typing import Optional, Tuple

from argon2 import PasswordHasher
from argon2.exceptions import VerificationError, VerifyMismatchError, InvalidHashError
from jose import JWTError, jwt

from taskboard.config.settings import Settings

_password_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    return _password_hasher.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return _password_hasher.verify(hashed_password, password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> Tuple[str, datetime]:
    """Encode a JWT for the given claims, returning the token and its expiry"""
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=Settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = data.copy()
    to_encode.update({"exp": expire})
    token = jwt.encode(to_encode, Settings.SECRET_KEY, algorithm=Settings.ALGORITHM)
    return token, expire


def decode_access_token(token: str) -> Optional[dict]:
    """Verify JWT token and return payload, or None when it is invalid or expired"""
    try:
        return jwt.decode(token, Settings.SECRET_KEY, algorithms=[Settings.ALGORITHM])
    except JWTError:
        return None
