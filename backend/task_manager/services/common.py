import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from task_manager.core.exceptions import ResourceConflictError, not_found

logger = logging.getLogger(__name__)


def get_or_404(db: Session, model, entity_id: int, entity: str):
    row = db.query(model).filter(model.id == entity_id).first()
    if not row:
        raise not_found(entity, entity_id)
    return row


def commit_or_conflict(db: Session, detail: str) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Integrity violation translated to conflict: %s", detail)
        raise ResourceConflictError(detail) from exc
