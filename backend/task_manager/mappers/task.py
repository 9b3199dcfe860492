"""Conversions between task DTOs and the ``Task`` entity.

References (status, assignee, labels) arrive already resolved by the task
service; nothing here touches the database. Labels are not assigned here
either: the service attaches them through ``Label.add_task`` so both sides of
the relation stay in step.
"""
from typing import Optional

from task_manager.models.task import Task
from task_manager.models.task_status import TaskStatus
from task_manager.models.user import User
from task_manager.schemas.task import TaskCreate, TaskOut

SCALAR_FIELDS = {"name", "index", "description"}


def to_entity(payload: TaskCreate, task_status: TaskStatus, assignee: Optional[User]) -> Task:
    return Task(
        name=payload.name,
        index=payload.index,
        description=payload.description,
        task_status=task_status,
        assignee=assignee,
    )


def to_dto(task: Task) -> TaskOut:
    return TaskOut(
        id=task.id,
        index=task.index,
        name=task.name,
        description=task.description,
        task_status=task.task_status.slug,
        assignee_id=task.assignee.id if task.assignee else None,
        labels_ids=sorted(label.id for label in task.labels),
        created_at=task.created_at,
    )


def apply_update(data: dict, task: Task, **references) -> None:
    """Apply scalar keys from ``data`` plus any resolved references passed in.

    ``references`` may carry ``task_status`` and/or ``assignee``; a key that is
    absent leaves the current association untouched, while ``assignee=None``
    clears it.
    """
    for key, value in data.items():
        if key in SCALAR_FIELDS:
            setattr(task, key, value)
    if "task_status" in references:
        task.task_status = references["task_status"]
    if "assignee" in references:
        task.assignee = references["assignee"]
