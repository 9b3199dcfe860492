from task_manager.models.label import Label
from task_manager.schemas.label import LabelCreate, LabelOut


def to_entity(payload: LabelCreate) -> Label:
    return Label(name=payload.name)


def to_dto(label: Label) -> LabelOut:
    return LabelOut.model_validate(label)


def apply_update(data: dict, label: Label) -> None:
    if "name" in data:
        label.name = data["name"]
