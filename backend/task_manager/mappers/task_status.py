from task_manager.models.task_status import TaskStatus
from task_manager.schemas.task_status import TaskStatusCreate, TaskStatusOut


def to_entity(payload: TaskStatusCreate) -> TaskStatus:
    return TaskStatus(name=payload.name, slug=payload.slug)


def to_dto(task_status: TaskStatus) -> TaskStatusOut:
    return TaskStatusOut.model_validate(task_status)


def apply_update(data: dict, task_status: TaskStatus) -> None:
    for key, value in data.items():
        if key in {"name", "slug"}:
            setattr(task_status, key, value)
