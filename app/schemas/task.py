# app/schemas/task.py
from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator

from app.models.task import TaskPriority, TaskStatus
from app.schemas.base import RequestModel, ResponseModel
from app.schemas.user import UserSummary


def _blank_to_none(value):
    # The task form posts "" for "unassigned" and "no due date"
    if isinstance(value, str) and not value.strip():
        return None
    return value


class TaskCreate(RequestModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None
    assigned_to: Optional[int] = None

    @field_validator("due_date", "assigned_to", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        return _blank_to_none(value)


class TaskUpdate(RequestModel):
    """Partial update; only keys present in the request are applied"""
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None
    assigned_to: Optional[int] = None

    @field_validator("due_date", "assigned_to", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        return _blank_to_none(value)


class TaskOut(ResponseModel):
    id: int
    title: str
    description: Optional[str] = None
    priority: TaskPriority
    status: TaskStatus
    due_date: Optional[datetime] = None

    owner: UserSummary
    assigned_to: Optional[UserSummary] = Field(
        default=None,
        validation_alias=AliasChoices("assignee", "assignedTo"),
        serialization_alias="assignedTo",
    )

    created_at: datetime
    updated_at: datetime


class TaskResponse(ResponseModel):
    success: bool = True
    data: TaskOut


class TaskListResponse(ResponseModel):
    success: bool = True
    count: int
    data: List[TaskOut]


class TaskDeleteResponse(ResponseModel):
    success: bool = True
    message: str
    data: dict = {}
