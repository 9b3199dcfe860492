from sqlalchemy.orm import Session

from task_manager.core.exceptions import ResourceNotFoundError, in_use
from task_manager.mappers import task_status as task_status_mapper
from task_manager.models.task_status import TaskStatus
from task_manager.schemas.task_status import TaskStatusCreate, TaskStatusOut, TaskStatusUpdate
from task_manager.services.common import commit_or_conflict, get_or_404


def find_by_slug(db: Session, slug: str) -> TaskStatus:
    task_status = db.query(TaskStatus).filter(TaskStatus.slug == slug).first()
    if not task_status:
        raise ResourceNotFoundError(f"TaskStatus with slug {slug} not found")
    return task_status


def list_task_statuses(db: Session) -> list[TaskStatusOut]:
    rows = db.query(TaskStatus).order_by(TaskStatus.id.asc()).all()
    return [task_status_mapper.to_dto(row) for row in rows]


def get_task_status(db: Session, task_status_id: int) -> TaskStatusOut:
    return task_status_mapper.to_dto(get_or_404(db, TaskStatus, task_status_id, "TaskStatus"))


def create_task_status(db: Session, payload: TaskStatusCreate) -> TaskStatusOut:
    task_status = task_status_mapper.to_entity(payload)
    db.add(task_status)
    commit_or_conflict(db, f"TaskStatus with slug {payload.slug} already exists")
    db.refresh(task_status)
    return task_status_mapper.to_dto(task_status)


def update_task_status(db: Session, task_status_id: int, payload: TaskStatusUpdate) -> TaskStatusOut:
    task_status = get_or_404(db, TaskStatus, task_status_id, "TaskStatus")
    data = payload.model_dump(exclude_unset=True)
    task_status_mapper.apply_update(data, task_status)
    commit_or_conflict(db, f"TaskStatus with slug {data.get('slug')} already exists")
    db.refresh(task_status)
    return task_status_mapper.to_dto(task_status)


def delete_task_status(db: Session, task_status_id: int) -> None:
    task_status = get_or_404(db, TaskStatus, task_status_id, "TaskStatus")
    db.delete(task_status)
    commit_or_conflict(db, in_use("TaskStatus", task_status_id).detail)
