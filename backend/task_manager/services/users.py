from sqlalchemy.orm import Session

from task_manager.core.exceptions import in_use
from task_manager.mappers import user as user_mapper
from task_manager.models.task import Task
from task_manager.models.user import User
from task_manager.schemas.user import UserCreate, UserOut, UserUpdate
from task_manager.services.common import commit_or_conflict, get_or_404


def list_users(db: Session) -> list[UserOut]:
    rows = db.query(User).order_by(User.id.asc()).all()
    return [user_mapper.to_dto(row) for row in rows]


def get_user(db: Session, user_id: int) -> UserOut:
    return user_mapper.to_dto(get_or_404(db, User, user_id, "User"))


def create_user(db: Session, payload: UserCreate) -> UserOut:
    user = user_mapper.to_entity(payload)
    db.add(user)
    commit_or_conflict(db, f"User with email {payload.email} already exists")
    db.refresh(user)
    return user_mapper.to_dto(user)


def update_user(db: Session, user_id: int, payload: UserUpdate) -> UserOut:
    user = get_or_404(db, User, user_id, "User")
    data = payload.model_dump(exclude_unset=True)
    user_mapper.apply_update(data, user)
    commit_or_conflict(db, f"User with email {data.get('email')} already exists")
    db.refresh(user)
    return user_mapper.to_dto(user)


def delete_user(db: Session, user_id: int) -> None:
    user = get_or_404(db, User, user_id, "User")
    # Assignment is checked up front; the FK at commit is a second line.
    assigned = db.query(Task.id).filter(Task.assignee_id == user_id).first()
    if assigned:
        raise in_use("User", user_id)
    db.delete(user)
    commit_or_conflict(db, in_use("User", user_id).detail)
