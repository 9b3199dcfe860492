from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from task_manager.core.auth import get_current_user
from task_manager.core.config import BASE_URL
from task_manager.database.deps import get_db
from task_manager.models.user import User
from task_manager.schemas.task_status import TaskStatusCreate, TaskStatusOut, TaskStatusUpdate
from task_manager.services import task_statuses as task_status_service

router = APIRouter(prefix=f"{BASE_URL}/task-statuses", tags=["Task statuses"])


@router.get("", response_model=list[TaskStatusOut])
def list_task_statuses(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_status_service.list_task_statuses(db)


@router.get("/{task_status_id}", response_model=TaskStatusOut)
def read_task_status(
    task_status_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_status_service.get_task_status(db, task_status_id)


@router.post("", response_model=TaskStatusOut, status_code=status.HTTP_201_CREATED)
def create_task_status(
    payload: TaskStatusCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_status_service.create_task_status(db, payload)


@router.put("/{task_status_id}", response_model=TaskStatusOut)
def update_task_status(
    task_status_id: int,
    payload: TaskStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_status_service.update_task_status(db, task_status_id, payload)


@router.delete("/{task_status_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task_status(
    task_status_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task_status_service.delete_task_status(db, task_status_id)
    return None
