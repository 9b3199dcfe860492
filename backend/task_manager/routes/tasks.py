from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from task_manager.core.auth import get_current_user
from task_manager.core.config import BASE_URL
from task_manager.database.deps import get_db
from task_manager.models.user import User
from task_manager.schemas.task import TaskCreate, TaskOut, TaskUpdate
from task_manager.services import tasks as task_service

router = APIRouter(prefix=f"{BASE_URL}/tasks", tags=["Tasks"])


@router.get("", response_model=list[TaskOut])
def list_tasks(
    title_cont: Optional[str] = Query(None, alias="titleCont"),
    assignee_id: Optional[int] = Query(None, alias="assigneeId"),
    status_slug: Optional[str] = Query(None, alias="status"),
    label_id: Optional[int] = Query(None, alias="labelId"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.list_tasks(
        db,
        title_cont=title_cont,
        assignee_id=assignee_id,
        status=status_slug,
        label_id=label_id,
    )


@router.get("/{task_id}", response_model=TaskOut)
def read_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.get_task(db, task_id)


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.create_task(db, payload)


@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: int,
    payload: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.update_task(db, task_id, payload)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task_service.delete_task(db, task_id)
    return None
