"""Task use cases.

Every call works inside the caller's session and commits once at the end, so a
reference that fails to resolve (status slug, assignee id, label id) leaves
nothing behind.
"""
from typing import Optional

from sqlalchemy.orm import Session

from task_manager.mappers import task as task_mapper
from task_manager.models.label import Label
from task_manager.models.task import Task
from task_manager.models.task_status import TaskStatus
from task_manager.models.user import User
from task_manager.schemas.task import TaskCreate, TaskOut, TaskUpdate
from task_manager.services.common import commit_or_conflict, get_or_404
from task_manager.services.labels import find_by_ids
from task_manager.services.task_statuses import find_by_slug


def resolve_assignee(db: Session, assignee_id: Optional[int]) -> Optional[User]:
    if assignee_id is None:
        return None
    return get_or_404(db, User, assignee_id, "User")


def list_tasks(
    db: Session,
    title_cont: Optional[str] = None,
    assignee_id: Optional[int] = None,
    status: Optional[str] = None,
    label_id: Optional[int] = None,
) -> list[TaskOut]:
    query = db.query(Task)
    if title_cont:
        query = query.filter(Task.name.icontains(title_cont, autoescape=True))
    if assignee_id is not None:
        query = query.filter(Task.assignee_id == assignee_id)
    if status:
        query = query.join(TaskStatus, TaskStatus.id == Task.task_status_id).filter(TaskStatus.slug == status)
    if label_id is not None:
        query = query.filter(Task.labels.any(Label.id == label_id))
    rows = query.order_by(Task.id.asc()).all()
    return [task_mapper.to_dto(row) for row in rows]


def get_task(db: Session, task_id: int) -> TaskOut:
    return task_mapper.to_dto(get_or_404(db, Task, task_id, "Task"))


def create_task(db: Session, payload: TaskCreate) -> TaskOut:
    task_status = find_by_slug(db, payload.task_status)
    assignee = resolve_assignee(db, payload.assignee_id)
    labels = find_by_ids(db, payload.labels_ids)

    task = task_mapper.to_entity(payload, task_status, assignee)
    db.add(task)
    for label in labels:
        label.add_task(task)

    commit_or_conflict(db, f"Task {payload.name} could not be saved")
    db.refresh(task)
    return task_mapper.to_dto(task)


def update_task(db: Session, task_id: int, payload: TaskUpdate) -> TaskOut:
    task = get_or_404(db, Task, task_id, "Task")
    data = payload.model_dump(exclude_unset=True)

    references = {}
    if "task_status" in data:
        references["task_status"] = find_by_slug(db, data["task_status"])
    if "assignee_id" in data:
        references["assignee"] = resolve_assignee(db, data["assignee_id"])
    labels = find_by_ids(db, data["labels_ids"]) if "labels_ids" in data else []

    task_mapper.apply_update(data, task, **references)
    # Listed labels are attached; labels already on the task stay attached.
    for label in labels:
        label.add_task(task)

    commit_or_conflict(db, f"Task with id {task_id} could not be saved")
    db.refresh(task)
    return task_mapper.to_dto(task)


def delete_task(db: Session, task_id: int) -> None:
    task = get_or_404(db, Task, task_id, "Task")
    for label in list(task.labels):
        label.remove_task(task)
    db.delete(task)
    db.commit()
