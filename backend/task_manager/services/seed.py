import logging

from sqlalchemy.orm import Session

from task_manager.core.config import (
    DEFAULT_LABELS,
    DEFAULT_TASK_STATUSES,
    DEFAULT_USER_EMAIL,
    DEFAULT_USER_PASSWORD,
    parse_csv_list,
)
from task_manager.core.security import get_password_hash
from task_manager.models.label import Label
from task_manager.models.task_status import TaskStatus
from task_manager.models.user import User

logger = logging.getLogger("uvicorn.error")


def ensure_default_user(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if user:
        return user
    user = User(email=email, password_digest=get_password_hash(password))
    db.add(user)
    logger.info("Seeding default user %s", email)
    return user


def ensure_task_statuses(db: Session, slugs) -> list[TaskStatus]:
    result = []
    for slug in slugs:
        task_status = db.query(TaskStatus).filter(TaskStatus.slug == slug).first()
        if not task_status:
            task_status = TaskStatus(name=slug[:1].upper() + slug[1:], slug=slug)
            db.add(task_status)
            logger.info("Seeding task status %s", slug)
        result.append(task_status)
    return result


def ensure_labels(db: Session, names) -> list[Label]:
    result = []
    for name in names:
        label = db.query(Label).filter(Label.name == name).first()
        if not label:
            label = Label(name=name)
            db.add(label)
            logger.info("Seeding label %s", name)
        result.append(label)
    return result


def ensure_default_data(db: Session) -> None:
    """Upsert the default user, task statuses and labels by natural key."""
    if DEFAULT_USER_EMAIL and DEFAULT_USER_PASSWORD:
        ensure_default_user(db, DEFAULT_USER_EMAIL, DEFAULT_USER_PASSWORD)
    ensure_task_statuses(db, parse_csv_list(DEFAULT_TASK_STATUSES))
    ensure_labels(db, parse_csv_list(DEFAULT_LABELS))
    db.commit()
