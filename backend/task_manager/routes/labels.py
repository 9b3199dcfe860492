from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from task_manager.core.auth import get_current_user
from task_manager.core.config import BASE_URL
from task_manager.database.deps import get_db
from task_manager.models.user import User
from task_manager.schemas.label import LabelCreate, LabelOut, LabelUpdate
from task_manager.services import labels as label_service

router = APIRouter(prefix=f"{BASE_URL}/labels", tags=["Labels"])


@router.get("", response_model=list[LabelOut])
def list_labels(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return label_service.list_labels(db)


@router.get("/{label_id}", response_model=LabelOut)
def read_label(
    label_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return label_service.get_label(db, label_id)


@router.post("", response_model=LabelOut, status_code=status.HTTP_201_CREATED)
def create_label(
    payload: LabelCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return label_service.create_label(db, payload)


@router.put("/{label_id}", response_model=LabelOut)
def update_label(
    label_id: int,
    payload: LabelUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return label_service.update_label(db, label_id, payload)


@router.delete("/{label_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_label(
    label_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    label_service.delete_label(db, label_id)
    return None
