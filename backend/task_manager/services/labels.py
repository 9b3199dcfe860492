from sqlalchemy.orm import Session

from task_manager.core.exceptions import in_use, not_found
from task_manager.mappers import label as label_mapper
from task_manager.models.label import Label
from task_manager.schemas.label import LabelCreate, LabelOut, LabelUpdate
from task_manager.services.common import commit_or_conflict, get_or_404


def find_by_ids(db: Session, label_ids) -> list[Label]:
    """Resolve ``label_ids`` in order; the first unknown id raises 404."""
    unique_ids = list(dict.fromkeys(label_ids))
    if not unique_ids:
        return []
    rows = db.query(Label).filter(Label.id.in_(unique_ids)).all()
    by_id = {row.id: row for row in rows}
    for label_id in unique_ids:
        if label_id not in by_id:
            raise not_found("Label", label_id)
    return [by_id[label_id] for label_id in unique_ids]


def list_labels(db: Session) -> list[LabelOut]:
    rows = db.query(Label).order_by(Label.id.asc()).all()
    return [label_mapper.to_dto(row) for row in rows]


def get_label(db: Session, label_id: int) -> LabelOut:
    return label_mapper.to_dto(get_or_404(db, Label, label_id, "Label"))


def create_label(db: Session, payload: LabelCreate) -> LabelOut:
    label = label_mapper.to_entity(payload)
    db.add(label)
    commit_or_conflict(db, f"Label with name {payload.name} already exists")
    db.refresh(label)
    return label_mapper.to_dto(label)


def update_label(db: Session, label_id: int, payload: LabelUpdate) -> LabelOut:
    label = get_or_404(db, Label, label_id, "Label")
    data = payload.model_dump(exclude_unset=True)
    label_mapper.apply_update(data, label)
    commit_or_conflict(db, f"Label with name {data.get('name')} already exists")
    db.refresh(label)
    return label_mapper.to_dto(label)


def delete_label(db: Session, label_id: int) -> None:
    label = get_or_404(db, Label, label_id, "Label")
    # The ORM clears join rows on its own, so membership has to be checked here.
    if label.tasks:
        raise in_use("Label", label_id)
    db.delete(label)
    commit_or_conflict(db, in_use("Label", label_id).detail)
