from __future__ import annotations

import pytest

from app.models import Task, User
from app.services.access import AccessDecision, Operation, authorize, can_access, decide
from app.utils.errors import Forbidden

OWNER_ID, ASSIGNEE_ID, OUTSIDER_ID, ADMIN_ID = 1, 2, 3, 4


def _user(user_id: int, role: str = "member") -> User:
    return User(id=user_id, name=f"user-{user_id}", email=f"u{user_id}@example.com", role=role)


@pytest.fixture()
def task() -> Task:
    return Task(id=10, title="Write report", owner_id=OWNER_ID, assigned_to=ASSIGNEE_ID)


@pytest.mark.parametrize("operation", list(Operation))
def test_owner_and_admin_may_do_anything(task: Task, operation: Operation) -> None:
    assert can_access(_user(OWNER_ID), task, operation)
    assert can_access(_user(ADMIN_ID, role="admin"), task, operation)


@pytest.mark.parametrize("operation", [Operation.READ, Operation.UPDATE])
def test_assignee_may_read_and_update(task: Task, operation: Operation) -> None:
    assert decide(_user(ASSIGNEE_ID), task, operation) is AccessDecision.ALLOWED


def test_assignee_may_not_delete(task: Task) -> None:
    assert decide(_user(ASSIGNEE_ID), task, Operation.DELETE) is AccessDecision.NOT_OWNER
    assert not can_access(_user(ASSIGNEE_ID), task, Operation.DELETE)


@pytest.mark.parametrize("operation", list(Operation))
def test_outsider_is_denied(task: Task, operation: Operation) -> None:
    assert decide(_user(OUTSIDER_ID), task, operation) is AccessDecision.NOT_PARTICIPANT


def test_unassigned_task_grants_nothing_to_other_members() -> None:
    task = Task(id=11, title="Solo", owner_id=OWNER_ID, assigned_to=None)
    assert not can_access(_user(ASSIGNEE_ID), task, Operation.READ)


def test_authorize_raises_forbidden_with_operation_message(task: Task) -> None:
    with pytest.raises(Forbidden) as excinfo:
        authorize(_user(ASSIGNEE_ID), task, Operation.DELETE)
    assert excinfo.value.status_code == 403
    assert excinfo.value.detail == "Not authorized to delete this task"

    authorize(_user(ASSIGNEE_ID), task, Operation.UPDATE)
