# app/services/task_service.py
import logging
from typing import List, Union

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.models.task import Task, TaskPriority, TaskStatus
from app.models.user import User
from app.schemas.task import TaskCreate, TaskUpdate
from app.services.access import Operation, authorize
from app.utils.errors import NotFound, ValidationError
from app.utils.ids import parse_id

logger = logging.getLogger(__name__)

# Fields callers may change through an update; owner_id is never among them
UPDATABLE_FIELDS = ("title", "description", "priority", "status", "due_date", "assigned_to")
NON_NULLABLE_FIELDS = ("title", "priority", "status")


class TaskService:
    """Task CRUD with every operation routed through the authorization gate"""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Task).options(
            joinedload(Task.owner),
            joinedload(Task.assignee),
        )

    def _load(self, task_id: Union[int, str]) -> Task:
        # Malformed ids are reported exactly like missing tasks
        parsed = parse_id(task_id)
        if parsed is None:
            raise NotFound("Task not found")

        task = self._query().filter(Task.id == parsed).first()
        if task is None:
            raise NotFound("Task not found")
        return task

    def _ensure_user_exists(self, user_id: int) -> None:
        parsed = parse_id(user_id)
        if parsed is None or self.db.get(User, parsed) is None:
            raise ValidationError("Assigned user not found")

    def _commit(self, task: Task) -> Task:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to persist task %s", task.id)
            raise
        self.db.refresh(task)
        return task

    @staticmethod
    def _clean_title(title) -> str:
        if title is None or not title.strip():
            raise ValidationError("Please provide a task title")
        return title.strip()

    def list_tasks(self, caller: User) -> List[Task]:
        """Tasks the caller owns or is assigned to; admins see every task"""
        query = self._query()
        if not caller.is_admin:
            query = query.filter(
                or_(Task.owner_id == caller.id, Task.assigned_to == caller.id)
            )
        return query.order_by(Task.created_at.desc(), Task.id.desc()).all()

    def get_task(self, caller: User, task_id: Union[int, str]) -> Task:
        task = self._load(task_id)
        authorize(caller, task, Operation.READ)
        return task

    def create_task(self, caller: User, fields: TaskCreate) -> Task:
        title = self._clean_title(fields.title)

        if fields.assigned_to is not None:
            self._ensure_user_exists(fields.assigned_to)

        task = Task(
            title=title,
            description=fields.description,
            priority=(fields.priority or TaskPriority.MEDIUM).value,
            status=(fields.status or TaskStatus.PENDING).value,
            due_date=fields.due_date,
            owner_id=caller.id,
            assigned_to=fields.assigned_to,
        )
        self.db.add(task)
        self._commit(task)

        logger.info("Task %s created by user %s", task.id, caller.id)
        return self._load(task.id)

    def update_task(self, caller: User, task_id: Union[int, str], fields: TaskUpdate) -> Task:
        task = self._load(task_id)
        authorize(caller, task, Operation.UPDATE)

        changes = fields.model_dump(exclude_unset=True)
        for key in NON_NULLABLE_FIELDS:
            if key in changes and changes[key] is None:
                raise ValidationError(f"Task {key} cannot be empty")

        if "title" in changes:
            changes["title"] = self._clean_title(changes["title"])
        if changes.get("assigned_to") is not None:
            self._ensure_user_exists(changes["assigned_to"])

        for key in UPDATABLE_FIELDS:
            if key not in changes:
                continue
            value = changes[key]
            if isinstance(value, (TaskStatus, TaskPriority)):
                value = value.value
            setattr(task, key, value)

        self._commit(task)
        logger.info("Task %s updated by user %s: %s", task.id, caller.id, sorted(changes))
        return self._load(task.id)

    def delete_task(self, caller: User, task_id: Union[int, str]) -> None:
        task = self._load(task_id)
        authorize(caller, task, Operation.DELETE)

        deleted_id = task.id
        self.db.delete(task)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to delete task %s", deleted_id)
            raise

        logger.info("Task %s deleted by user %s", deleted_id, caller.id)

    def list_completed_tasks(self, caller: User, limit: int = 50) -> List[Task]:
        """Completed tasks the caller owns or is assigned to, most recently updated first"""
        return (
            self._query()
            .filter(
                Task.status == TaskStatus.COMPLETED.value,
                or_(Task.owner_id == caller.id, Task.assigned_to == caller.id),
            )
            .order_by(Task.updated_at.desc(), Task.id.desc())
            .limit(limit)
            .all()
        )
