"""
Master Database Seeding Script
Creates database tables and populates them with demo users and tasks
"""

import logging
import sys

from sqlalchemy.orm import Session

from app.database import SessionLocal, init_db
from app.models import Task, User
from app.utils.security import hash_password
from demo_tasks import DEMO_TASKS
from demo_users import DEMO_USERS

logger = logging.getLogger("taskini.seed")

PROFILE_FIELDS = ("bio", "phone", "department", "position")


def seed_demo_users(db: Session) -> dict:
    """Create demo users that do not exist yet; returns users keyed by email"""
    users = {}
    created = 0
    for user_data in DEMO_USERS:
        email = user_data["email"].lower()
        user = db.query(User).filter(User.email == email).first()
        if user is None:
            user = User(
                name=user_data["name"],
                email=email,
                hashed_password=hash_password(user_data["password"]),
                role=user_data["role"],
                **{field: user_data.get(field) for field in PROFILE_FIELDS},
            )
            db.add(user)
            created += 1
        users[email] = user
    db.commit()
    logger.info("Seeded %s new demo users (%s total)", created, len(users))
    return users


def seed_demo_tasks(db: Session, users: dict) -> int:
    """Create demo tasks whose title is not taken yet for the same owner"""
    created = 0
    for task_data in DEMO_TASKS:
        owner = users[task_data["owner"]]
        exists = db.query(Task).filter(
            Task.owner_id == owner.id,
            Task.title == task_data["title"],
        ).first()
        if exists:
            continue

        assignee = users.get(task_data["assigned_to"]) if task_data["assigned_to"] else None
        db.add(Task(
            title=task_data["title"],
            description=task_data["description"],
            status=task_data["status"].value,
            priority=task_data["priority"].value,
            due_date=task_data["due_date"],
            owner_id=owner.id,
            assigned_to=assignee.id if assignee else None,
        ))
        created += 1
    db.commit()
    logger.info("Seeded %s new demo tasks", created)
    return created


def seed_all(session_factory=SessionLocal):
    db = session_factory()
    try:
        users = seed_demo_users(db)
        for user in users.values():
            db.refresh(user)
        return seed_demo_tasks(db, users)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    init_db()
    try:
        seed_all()
    except Exception as exc:
        logger.error("Seeding failed: %s", exc)
        return 1
    logger.info("Demo data ready. Log in as any demo user with password 'password123'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
