# taskboard/services/bootstrap.py
import logging

from sqlalchemy.orm import Session

from taskboard.config.settings import Settings
from taskboard.models.user import User, Role
from taskboard.utils.security import hash_password

logger = logging.getLogger(__name__)


def seed_admin_user(db: Session) -> bool:
    """Create the default admin account unless it already exists.

    Safe to call on every start; returns True when an account was created.
    """
    logger.info("Checking for existing admin user to seed if necessary...")
    if db.query(User).filter(User.email == Settings.ADMIN_EMAIL).first():
        logger.info(f"Admin user {Settings.ADMIN_EMAIL} already exists. Skipping seeding.")
        return False

    admin = User(
        full_name=Settings.ADMIN_FULL_NAME,
        email=Settings.ADMIN_EMAIL,
        hashed_password=hash_password(Settings.ADMIN_PASSWORD),
        role=Role.ADMIN,
    )
    try:
        db.add(admin)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Admin user {Settings.ADMIN_EMAIL} seeded successfully.")
    return True
