from task_manager.core.security import get_password_hash
from task_manager.models.user import User
from task_manager.schemas.user import UserCreate, UserOut

UPDATABLE_FIELDS = {"first_name", "last_name", "email"}


def to_entity(payload: UserCreate) -> User:
    return User(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        password_digest=get_password_hash(payload.password),
    )


def to_dto(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def apply_update(data: dict, user: User) -> None:
    """Apply the keys present in ``data``; the password is hashed, never stored raw."""
    for key, value in data.items():
        if key in UPDATABLE_FIELDS:
            setattr(user, key, value)
    if "password" in data:
        user.password_digest = get_password_hash(data["password"])
