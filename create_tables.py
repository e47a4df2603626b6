# create_tables.py
"""Create all tables and the default admin user"""
import argparse
import logging

from taskboard import models  # noqa: F401
from taskboard.config.logging import setup_logging
from taskboard.database import Base, SessionLocal, engine
from taskboard.services.bootstrap import seed_admin_user

logger = logging.getLogger("create_tables")


def create_tables(drop: bool = False):
    if drop:
        logger.info("Dropping existing tables")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    logger.info("All tables created successfully")

    db = SessionLocal()
    try:
        seed_admin_user(db)
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args()

    setup_logging()
    create_tables(drop=args.drop)
