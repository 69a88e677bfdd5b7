from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.schemas.task import (
    TaskCreate,
    TaskDeleteResponse,
    TaskListResponse,
    TaskOut,
    TaskResponse,
    TaskUpdate,
)
from app.services.task_service import TaskService
from app.utils.auth import get_current_user

router = APIRouter()


@router.get("", response_model=TaskListResponse)
def list_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Tasks created by or assigned to the caller; admins see all tasks"""
    tasks = [TaskOut.model_validate(task) for task in TaskService(db).list_tasks(current_user)]
    return {"success": True, "count": len(tasks), "data": tasks}


# task_id is taken as a string so malformed ids surface as "Task not found"
@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = TaskService(db).get_task(current_user, task_id)
    return {"success": True, "data": TaskOut.model_validate(task)}


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    created = TaskService(db).create_task(current_user, task)
    return {"success": True, "data": TaskOut.model_validate(created)}


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    task_update: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Partial update: only fields present in the body change"""
    task = TaskService(db).update_task(current_user, task_id, task_update)
    return {"success": True, "data": TaskOut.model_validate(task)}


@router.delete("/{task_id}", response_model=TaskDeleteResponse)
def delete_task(
    task_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    TaskService(db).delete_task(current_user, task_id)
    return {"success": True, "message": "Task deleted successfully", "data": {}}
