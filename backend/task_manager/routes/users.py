from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from task_manager.core.auth import get_current_user
from task_manager.core.config import BASE_URL
from task_manager.database.deps import get_db
from task_manager.models.user import User
from task_manager.schemas.user import UserCreate, UserOut, UserUpdate
from task_manager.services import users as user_service

router = APIRouter(prefix=f'{BASE_URL}/users', tags=['Users'])


@router.get('', response_model=list[UserOut])
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return user_service.list_users(db)


@router.get('/{user_id}', response_model=UserOut)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return user_service.get_user(db, user_id)


@router.post('', response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return user_service.create_user(db, payload)


@router.put('/{user_id}', response_model=UserOut)
def update_user(
    user_id: int,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return user_service.update_user(db, user_id, payload)


@router.delete('/{user_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    user_service.delete_user(db, user_id)
    return None
