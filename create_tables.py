# create_tables.py
"""
Create the database schema and, when ADMIN_EMAIL/ADMIN_PASSWORD are set,
a default admin account. Safe to run repeatedly.
"""

import argparse
import logging
import sys

from app.config.settings import settings
from app.database import Base, SessionLocal, engine, init_db
from app.models import Task, User, UserRole  # noqa: F401  (registers tables on Base)
from app.utils.security import hash_password

logger = logging.getLogger("taskini.create_tables")


def drop_tables():
    """Drop all Taskini tables"""
    Base.metadata.drop_all(bind=engine)


def create_default_admin(name=None, email=None, password=None, session_factory=None):
    """Create the default admin user unless one with that email exists"""
    name = name or settings.ADMIN["name"]
    email = email or settings.ADMIN["email"]
    password = password or settings.ADMIN["password"]

    if not email or not password:
        logger.info("ADMIN_EMAIL/ADMIN_PASSWORD not set; skipping default admin")
        return None

    if len(password) < settings.AUTH["min_password_length"]:
        raise ValueError(
            f"Admin password must be at least {settings.AUTH['min_password_length']} characters"
        )

    db = (session_factory or SessionLocal)()
    try:
        email = email.strip().lower()
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            if existing.role != UserRole.ADMIN.value:
                existing.role = UserRole.ADMIN.value
                db.commit()
                logger.info("Promoted existing user %s to admin", email)
            else:
                logger.info("Admin user %s already exists", email)
            return existing

        admin = User(
            name=name,
            email=email,
            hashed_password=hash_password(password),
            role=UserRole.ADMIN.value,
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)
        logger.info("Created admin user %s", email)
        return admin
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_tables(reset=False):
    """Create all tables"""
    if reset:
        drop_tables()
    init_db()
    logger.info("All tables created successfully")
    create_default_admin()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the Taskini database schema")
    parser.add_argument("--reset", action="store_true", help="Drop existing tables first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    try:
        create_tables(reset=args.reset)
    except Exception as exc:
        logger.error("Error creating tables: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
