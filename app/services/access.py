# app/services/access.py
"""
Task authorization gate.

Every task route asks this module, and only this module, whether the caller
may act on a task. Admins are handled here rather than in the routes.

    read / update : owner, assignee or admin
    delete        : owner or admin (assignees may not delete)

The gate is only consulted once the task is known to exist; a missing task is
reported as not found before any permission check runs.
"""

import enum
import logging

from app.models.task import Task
from app.models.user import User
from app.utils.errors import Forbidden

logger = logging.getLogger(__name__)


class Operation(str, enum.Enum):
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class AccessDecision(enum.Enum):
    ALLOWED = "allowed"
    NOT_PARTICIPANT = "not_participant"  # neither owner, assignee nor admin
    NOT_OWNER = "not_owner"              # assignee attempting an owner-only operation

    @property
    def allowed(self) -> bool:
        return self is AccessDecision.ALLOWED


DENIAL_MESSAGES = {
    Operation.READ: "Not authorized to access this task",
    Operation.UPDATE: "Not authorized to update this task",
    Operation.DELETE: "Not authorized to delete this task",
}


def is_owner(caller: User, task: Task) -> bool:
    return task.owner_id == caller.id


def is_assignee(caller: User, task: Task) -> bool:
    return task.assigned_to is not None and task.assigned_to == caller.id


def decide(caller: User, task: Task, operation: Operation) -> AccessDecision:
    if caller.is_admin or is_owner(caller, task):
        return AccessDecision.ALLOWED

    if is_assignee(caller, task):
        if operation is Operation.DELETE:
            return AccessDecision.NOT_OWNER
        return AccessDecision.ALLOWED

    return AccessDecision.NOT_PARTICIPANT


def can_access(caller: User, task: Task, operation: Operation) -> bool:
    return decide(caller, task, operation).allowed


def authorize(caller: User, task: Task, operation: Operation) -> None:
    """Raise Forbidden unless the caller may perform ``operation`` on ``task``"""
    decision = decide(caller, task, operation)
    if decision.allowed:
        return

    logger.warning(
        "Denied %s on task %s for user %s (%s)",
        operation.value, task.id, caller.id, decision.value,
    )
    raise Forbidden(DENIAL_MESSAGES[operation])
